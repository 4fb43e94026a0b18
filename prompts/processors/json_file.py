"""JSON prompt files: one chat-format prompt per file."""

from __future__ import annotations

import json

from ..types import Prompt, PromptPartial
from .common import read_text


async def process_json_file(
    file_path: str, prompt: PromptPartial, function_name: str | None = None
) -> list[Prompt]:
    content = await read_text(file_path)
    try:
        json.loads(content)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in prompt file {file_path}: {e}") from e
    label = prompt.label or f"{file_path}: {content}"
    return [Prompt(raw=content, label=label, config=prompt.config)]
