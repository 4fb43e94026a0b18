"""JavaScript / TypeScript prompt files, executed with Node.js."""

from __future__ import annotations

import asyncio
import json

from config import Config

from ..types import Prompt, PromptContext, PromptFunction, PromptOutput, PromptPartial
from .common import read_text

# argv: module path, export name ("" for the default export), JSON context
_NODE_RUNNER = r"""
const [modulePath, exportName, contextJson] = process.argv.slice(1);
(async () => {
  const mod = await import(require('url').pathToFileURL(modulePath).href);
  let fn = exportName ? (mod[exportName] ?? mod.default?.[exportName]) : (mod.default ?? mod);
  if (fn && typeof fn !== 'function' && typeof fn.default === 'function') {
    fn = fn.default;
  }
  if (typeof fn !== 'function') {
    throw new Error(`No prompt function '${exportName || 'default'}' in ${modulePath}`);
  }
  const result = await fn(JSON.parse(contextJson));
  process.stdout.write(typeof result === 'string' ? result : JSON.stringify(result));
})().catch((err) => {
  console.error((err && err.stack) || String(err));
  process.exit(1);
});
"""


def _decode_output(output: str) -> PromptOutput:
    """Chat-message arrays come back as JSON; anything else is prompt text."""
    try:
        decoded = json.loads(output)
    except json.JSONDecodeError:
        return output
    return decoded if isinstance(decoded, list) else output


def node_prompt_function(file_path: str, function_name: str | None = None) -> PromptFunction:
    """Build a prompt function that calls an export of a JS/TS module."""

    async def run_node_prompt(context: PromptContext) -> PromptOutput:
        process = await asyncio.create_subprocess_exec(
            Config.NODE_BINARY,
            "-e",
            _NODE_RUNNER,
            file_path,
            function_name or "",
            json.dumps(context, default=str),
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
        stdout, stderr = await process.communicate()
        if process.returncode != 0:
            raise RuntimeError(
                f"Prompt function in {file_path} failed: {stderr.decode(errors='ignore').strip()}"
            )
        return _decode_output(stdout.decode("utf-8"))

    return run_node_prompt


async def process_js_file(
    file_path: str, prompt: PromptPartial, function_name: str | None = None
) -> list[Prompt]:
    source = await read_text(file_path)
    if prompt.label:
        label = prompt.label
    elif function_name:
        label = f"{file_path}:{function_name}"
    else:
        label = file_path
    return [
        Prompt(
            raw=source,
            label=label,
            function=node_prompt_function(file_path, function_name),
            config=prompt.config,
        )
    ]
