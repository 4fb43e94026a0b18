"""Python prompt files.

``prompts.py:build_prompt`` selects a callable exported by the module. A bare
``prompts.py`` is run as a script: the JSON-encoded context is passed as its
only argument and whatever it prints becomes the prompt.
"""

from __future__ import annotations

import asyncio
import hashlib
import importlib.util
import json
import os

from config import Config
from utils import get_logger

from ..types import Prompt, PromptContext, PromptFunction, PromptPartial
from .common import read_text

logger = get_logger(__name__)


def _module_name(file_path: str) -> str:
    digest = hashlib.sha1(os.path.abspath(file_path).encode("utf-8")).hexdigest()[:12]
    return f"evalprompts_prompt_{digest}"


def load_python_function(file_path: str, function_name: str) -> PromptFunction:
    """Import ``file_path`` and return its ``function_name`` attribute.

    Raises:
        ImportError: If the file cannot be loaded as a module
        ValueError: If the module has no callable with that name
    """
    spec = importlib.util.spec_from_file_location(_module_name(file_path), file_path)
    if spec is None or spec.loader is None:
        raise ImportError(f"Cannot load Python prompt file {file_path}")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)

    fn = getattr(module, function_name, None)
    if not callable(fn):
        raise ValueError(f"Function '{function_name}' not found in {file_path}")
    return fn


def script_prompt_function(file_path: str) -> PromptFunction:
    """Build a prompt function that runs ``file_path`` as a script."""

    async def run_prompt_script(context: PromptContext) -> str:
        process = await asyncio.create_subprocess_exec(
            Config.PYTHON_BINARY,
            file_path,
            json.dumps(context, default=str),
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
        stdout, stderr = await process.communicate()
        if process.returncode != 0:
            raise RuntimeError(
                f"Prompt script {file_path} exited with code {process.returncode}: "
                f"{stderr.decode(errors='ignore').strip()}"
            )
        return stdout.decode("utf-8").strip()

    return run_prompt_script


async def process_python_file(
    file_path: str, prompt: PromptPartial, function_name: str | None = None
) -> list[Prompt]:
    source = await read_text(file_path)
    if function_name:
        fn = await asyncio.to_thread(load_python_function, file_path, function_name)
        label = prompt.label or f"{file_path}:{function_name}"
    else:
        logger.debug(f"No function selected for {file_path}, running it as a script")
        fn = script_prompt_function(file_path)
        label = prompt.label or f"{file_path}: {source}"
    return [Prompt(raw=source, label=label, function=fn, config=prompt.config)]
