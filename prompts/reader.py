"""Read every prompt an evaluation run refers to."""

from __future__ import annotations

import json
from typing import List, Mapping

from config import Config
from utils import get_logger
from utils.envars import get_env_bool
from utils.templates import extract_variables_from_templates

from .dispatch import DEFAULT_HANDLERS, FormatHandler
from .normalize import PromptInput, normalize_input
from .resolver import process_prompt
from .types import Prompt

logger = get_logger(__name__)

DISABLE_NO_VARIABLE_WARNING = "DISABLE_NO_VARIABLE_WARNING"
MAX_WARNING_EXAMPLES = 3


class NoPromptsError(Exception):
    """Raised when a prompt input resolves to no prompts at all."""

    def __init__(self, raw: object):
        self.raw = raw
        super().__init__(f"There are no prompts in {json.dumps(raw, default=repr)}")


def find_prompts_without_variables(prompts: List[Prompt]) -> List[str]:
    """Return a display name for each prompt that has no template variables."""
    names: List[str] = []
    for prompt in prompts:
        if not extract_variables_from_templates([prompt.raw]):
            names.append(prompt.label or prompt.raw[:50])
    return names


def format_no_variable_warning(names: List[str]) -> str:
    count = len(names)
    examples = '", "'.join(names[:MAX_WARNING_EXAMPLES])
    more = ", ..." if count > MAX_WARNING_EXAMPLES else ""
    return (
        f"Warning: {count} prompt{'s' if count > 1 else ''} without {{{{variables}}}} detected.\n"
        f'Examples: "{examples}"{more}\n'
        "Most evaluations pass variables from their test cases into the prompt. "
        "You can disable this warning by setting "
        "EVALPROMPTS_DISABLE_NO_VARIABLE_WARNING=true."
    )


async def read_prompts(
    prompt_input: PromptInput,
    base_path: str = "",
    handlers: Mapping[str, FormatHandler] = DEFAULT_HANDLERS,
) -> List[Prompt]:
    """Resolve every prompt input into a flat list of prompts.

    Inputs are resolved one at a time so the result keeps input order, with
    each input's expansions contiguous.

    Args:
        prompt_input: A string, a list of strings/partials, or a
            ``label -> raw`` mapping
        base_path: Directory relative file references are resolved against
        handlers: Extension -> handler table

    Returns:
        Resolved prompts

    Raises:
        NoPromptsError: If any single input resolves to nothing
        ValueError: If the input shape is invalid
    """
    logger.debug(f"Reading prompts from {prompt_input!r}")
    partials = normalize_input(prompt_input)
    check_variables = not get_env_bool(DISABLE_NO_VARIABLE_WARNING)

    prompts: List[Prompt] = []
    without_vars: List[str] = []
    for partial in partials:
        batch = await process_prompt(partial, base_path, Config.MAX_GLOB_DEPTH, handlers)
        if not batch:
            raise NoPromptsError(partial.raw)
        if check_variables:
            without_vars.extend(find_prompts_without_variables(batch))
        prompts.extend(batch)

    if without_vars:
        logger.warning(format_no_variable_warning(without_vars))

    return prompts
