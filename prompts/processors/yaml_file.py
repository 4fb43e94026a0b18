"""YAML prompt files, re-serialized as JSON chat prompts."""

from __future__ import annotations

import json

import yaml

from ..types import Prompt, PromptPartial
from .common import read_text


async def process_yaml_file(
    file_path: str, prompt: PromptPartial, function_name: str | None = None
) -> list[Prompt]:
    content = await read_text(file_path)
    data = yaml.safe_load(content)
    raw = data if isinstance(data, str) else json.dumps(data, ensure_ascii=False, default=str)
    label = prompt.label or f"{file_path}: {content[:80]}"
    return [Prompt(raw=raw, label=label, config=prompt.config)]
