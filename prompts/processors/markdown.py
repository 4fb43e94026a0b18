"""Markdown prompt files."""

from __future__ import annotations

from ..types import Prompt, PromptPartial
from .common import read_text


async def process_markdown_file(
    file_path: str, prompt: PromptPartial, function_name: str | None = None
) -> list[Prompt]:
    content = await read_text(file_path)
    label = prompt.label or f"{file_path}: {content[:50]}..."
    return [Prompt(raw=content, label=label, config=prompt.config)]
