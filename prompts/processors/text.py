"""Plain text prompt files, several prompts per file."""

from __future__ import annotations

import re

from config import Config
from utils.envars import get_env_string

from ..types import Prompt, PromptPartial
from .common import read_text


def _separator_pattern(separator: str) -> re.Pattern[str]:
    return re.compile(rf"^[ \t]*{re.escape(separator)}[ \t]*$", re.MULTILINE)


def split_prompts(content: str, separator: str) -> list[str]:
    """Split file content on separator lines, dropping empty chunks."""
    chunks = _separator_pattern(separator).split(content)
    return [chunk.strip() for chunk in chunks if chunk.strip()]


async def process_txt_file(
    file_path: str, prompt: PromptPartial, function_name: str | None = None
) -> list[Prompt]:
    content = await read_text(file_path)
    separator = get_env_string("PROMPT_SEPARATOR") or Config.PROMPT_SEPARATOR
    prompts = []
    for chunk in split_prompts(content, separator):
        label = f"{prompt.label}: {file_path}: {chunk}" if prompt.label else f"{file_path}: {chunk}"
        prompts.append(Prompt(raw=chunk, label=label, config=prompt.config))
    return prompts
