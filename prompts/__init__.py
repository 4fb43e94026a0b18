"""Resolve prompt strings, files and globs into executable prompts."""

from .dispatch import DEFAULT_HANDLERS, FormatHandler, dispatch
from .normalize import PromptInput, normalize_input
from .paths import maybe_file_path, parse_path_or_glob
from .provider_map import CUSTOM_FUNCTION_PROVIDER, read_provider_prompt_map
from .reader import NoPromptsError, read_prompts
from .resolver import process_prompt
from .types import Prompt, PromptFunction, PromptPartial, ResolvedPathInfo

__all__ = [
    "CUSTOM_FUNCTION_PROVIDER",
    "DEFAULT_HANDLERS",
    "FormatHandler",
    "NoPromptsError",
    "Prompt",
    "PromptFunction",
    "PromptInput",
    "PromptPartial",
    "ResolvedPathInfo",
    "dispatch",
    "maybe_file_path",
    "normalize_input",
    "parse_path_or_glob",
    "process_prompt",
    "read_prompts",
    "read_provider_prompt_map",
]
