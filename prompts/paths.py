"""Classify prompt strings as literal text or file references."""

from __future__ import annotations

import glob
import os
import re

from .types import ResolvedPathInfo

FILE_SCHEME = "file://"

JAVASCRIPT_EXTENSIONS = (".js", ".cjs", ".mjs", ".ts", ".cts", ".mts")
PYTHON_EXTENSIONS = (".py",)
SCRIPT_EXTENSIONS = JAVASCRIPT_EXTENSIONS + PYTHON_EXTENSIONS

# Prompts fetched from a remote prompt manager are never local files
_REMOTE_PREFIXES = ("portkey://", "langfuse://", "helicone://")
_EXTENSION_SUFFIX_RE = re.compile(r"\.[A-Za-z][A-Za-z0-9]{1,5}$")
_GLOB_MAGIC_RE = re.compile(r"[*?\[\]{}]")
_BRACE_RE = re.compile(r"\{([^{}]*,[^{}]*)\}")


def maybe_file_path(candidate: str) -> bool:
    """Return True when ``candidate`` plausibly names a file or glob.

    This is a heuristic: it never checks the file system, and a False result
    means the string is handled as literal prompt text.
    """
    if not isinstance(candidate, str):
        raise TypeError(f"Invalid prompt input: {candidate!r}")
    if "\n" in candidate or candidate.startswith(_REMOTE_PREFIXES):
        return False
    if candidate.startswith(FILE_SCHEME):
        return True
    return (
        "/" in candidate
        or "\\" in candidate
        or "*" in candidate
        or bool(_EXTENSION_SUFFIX_RE.search(candidate))
        or _split_function_name(candidate)[1] is not None
    )


def _is_script_path(path: str) -> bool:
    return path.lower().endswith(SCRIPT_EXTENSIONS)


def has_glob_magic(path: str) -> bool:
    return bool(_GLOB_MAGIC_RE.search(path))


def _split_function_name(path: str) -> tuple[str, str | None]:
    """Split ``prompts/fn.py:build`` into the path and the callable name.

    The suffix is only honoured after a script file, so Windows drive letters
    and colons in literal text are left alone.
    """
    head, sep, tail = path.rpartition(":")
    if not sep or not tail or not _is_script_path(head):
        return path, None
    if "/" in tail or "\\" in tail:
        return path, None
    return head, tail


def parse_path_or_glob(base_path: str, prompt_path: str) -> ResolvedPathInfo:
    """Decompose a file reference into path, extension and function selector."""
    if prompt_path.startswith(FILE_SCHEME):
        prompt_path = prompt_path[len(FILE_SCHEME) :]

    path_part, function_name = _split_function_name(prompt_path)
    extension = os.path.splitext(path_part)[1].lower() or None

    return ResolvedPathInfo(
        file_path=os.path.normpath(os.path.join(base_path, path_part)),
        is_path_pattern=has_glob_magic(path_part),
        extension=extension,
        function_name=function_name,
    )


def expand_braces(pattern: str) -> list[str]:
    """Expand ``{a,b}`` alternatives, innermost first."""
    match = _BRACE_RE.search(pattern)
    if not match:
        return [pattern]
    expanded: list[str] = []
    for option in match.group(1).split(","):
        expanded.extend(expand_braces(pattern[: match.start()] + option + pattern[match.end() :]))
    return expanded


def expand_glob(pattern: str) -> list[str]:
    """List files matching ``pattern``, sorted lexically.

    Backslashes are converted to forward slashes before matching so that
    Windows-style patterns behave like POSIX ones. ``**`` matches across
    directories and directories themselves are not returned.
    """
    pattern = pattern.replace("\\", "/")
    matches: set[str] = set()
    for expanded in expand_braces(pattern):
        for match in glob.glob(expanded, recursive=True):
            if os.path.isfile(match):
                matches.add(os.path.normpath(match))
    return sorted(matches)
