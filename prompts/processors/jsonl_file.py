"""JSON Lines prompt files: one chat-format prompt per line."""

from __future__ import annotations

import json

from ..types import Prompt, PromptPartial
from .common import read_text


async def process_jsonl_file(
    file_path: str, prompt: PromptPartial, function_name: str | None = None
) -> list[Prompt]:
    content = await read_text(file_path)
    prompts = []
    for line_no, line in enumerate(content.splitlines(), start=1):
        line = line.strip()
        if not line:
            continue
        try:
            json.loads(line)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON on line {line_no} of {file_path}: {e}") from e
        label = f"{prompt.label}: {line}" if prompt.label else f"{file_path}: {line}"
        prompts.append(Prompt(raw=line, label=label, config=prompt.config))
    return prompts
