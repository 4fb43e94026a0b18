"""Format dispatch: file extension -> handler."""

from __future__ import annotations

import inspect
from types import MappingProxyType
from typing import Awaitable, Callable, List, Mapping, Optional, Union

from utils import get_logger

from .paths import JAVASCRIPT_EXTENSIONS
from .processors import (
    process_js_file,
    process_json_file,
    process_jsonl_file,
    process_markdown_file,
    process_python_file,
    process_txt_file,
    process_yaml_file,
)
from .types import Prompt, PromptPartial

logger = get_logger(__name__)

FormatHandler = Callable[
    [str, PromptPartial, Optional[str]],
    Union[List[Prompt], Awaitable[List[Prompt]]],
]

DEFAULT_HANDLERS: Mapping[str, FormatHandler] = MappingProxyType(
    {
        ".json": process_json_file,
        ".jsonl": process_jsonl_file,
        **{ext: process_js_file for ext in JAVASCRIPT_EXTENSIONS},
        ".md": process_markdown_file,
        ".py": process_python_file,
        ".txt": process_txt_file,
        ".yml": process_yaml_file,
        ".yaml": process_yaml_file,
    }
)


def get_handler(
    extension: Optional[str], handlers: Mapping[str, FormatHandler] = DEFAULT_HANDLERS
) -> Optional[FormatHandler]:
    if not extension:
        return None
    return handlers.get(extension.lower())


async def dispatch(
    file_path: str,
    prompt: PromptPartial,
    extension: Optional[str],
    function_name: Optional[str] = None,
    handlers: Mapping[str, FormatHandler] = DEFAULT_HANDLERS,
) -> List[Prompt]:
    """Run the handler registered for ``extension``.

    Unknown or missing extensions yield an empty list so that a glob which
    also matches unrelated files does not abort the whole read.
    """
    handler = get_handler(extension, handlers)
    if handler is None:
        logger.debug(f"No prompt handler for extension {extension!r} ({file_path}), skipping")
        return []

    result = handler(file_path, prompt, function_name)
    if inspect.isawaitable(result):
        result = await result
    return list(result)
