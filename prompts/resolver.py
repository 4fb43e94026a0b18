"""Recursive resolution of one prompt partial into prompts."""

from __future__ import annotations

import asyncio
from typing import List, Mapping

from utils import get_logger

from .dispatch import DEFAULT_HANDLERS, FormatHandler, dispatch
from .paths import expand_glob, maybe_file_path, parse_path_or_glob
from .processors import process_string
from .types import Prompt, PromptPartial

logger = get_logger(__name__)

DEFAULT_MAX_RECURSION_DEPTH = 1


async def process_prompt(
    prompt: PromptPartial,
    base_path: str = "",
    max_recursion_depth: int = DEFAULT_MAX_RECURSION_DEPTH,
    handlers: Mapping[str, FormatHandler] = DEFAULT_HANDLERS,
) -> List[Prompt]:
    """Resolve a single prompt partial.

    Literal text becomes one prompt. File references are dispatched by
    extension, and glob patterns are expanded and each match resolved with
    one less level of recursion budget. A pattern that matches nothing is
    treated as literal text.

    Args:
        prompt: Partial to resolve; ``raw`` must be a string
        base_path: Directory relative paths are resolved against
        max_recursion_depth: Remaining glob-expansion budget
        handlers: Extension -> handler table

    Returns:
        Resolved prompts in match order (possibly empty for unknown extensions)

    Raises:
        ValueError: If ``prompt.raw`` is not a string
    """
    if not isinstance(prompt.raw, str):
        raise ValueError(f"prompt.raw must be a string, but got {prompt.raw!r}")

    # A directly invocable prompt is never inspected further
    if prompt.function is not None:
        return [Prompt.from_partial(prompt)]

    if not maybe_file_path(prompt.raw):
        return process_string(prompt)

    info = parse_path_or_glob(base_path, prompt.raw)

    if info.is_path_pattern and max_recursion_depth > 0:
        matches = await asyncio.to_thread(expand_glob, info.file_path)
        logger.debug(f"Expanded prompt {prompt.raw} to {info.file_path} and then to {matches}")

        prompts: List[Prompt] = []
        for match in matches:
            # matches already include base_path
            prompts.extend(
                await process_prompt(
                    PromptPartial(raw=match, config=prompt.config),
                    "",
                    max_recursion_depth - 1,
                    handlers,
                )
            )
        if not prompts:
            logger.debug(
                f'Attempted to load file at "{prompt.raw}", but no file found. Using raw string.'
            )
            prompts.extend(process_string(prompt))
        return prompts

    return await dispatch(
        info.file_path,
        prompt,
        info.extension,
        info.function_name,
        handlers,
    )
