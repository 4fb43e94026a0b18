"""Data types for prompt resolution."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict, List, Optional, Union

PromptContext = Dict[str, Any]
PromptOutput = Union[str, List[Dict[str, Any]]]
PromptFunction = Callable[[PromptContext], Union[PromptOutput, Awaitable[PromptOutput]]]


@dataclass
class PromptPartial:
    """A caller-supplied prompt source before resolution.

    Attributes:
        raw: Literal prompt text, a file path or a glob pattern
        label: Display label; assigned up front only for keyed-mapping input
        function: Directly invocable prompt; makes the partial terminal
        config: Per-prompt options carried through to the resolved prompt
    """

    raw: Optional[str] = None
    label: Optional[str] = None
    function: Optional[PromptFunction] = None
    config: Optional[Dict[str, Any]] = None


@dataclass(frozen=True)
class Prompt:
    """A resolved, executable prompt.

    Identity is ``(raw, label)``: equality and hashing ignore the callable
    and config.
    """

    raw: str
    label: str
    function: Optional[PromptFunction] = field(default=None, compare=False)
    config: Optional[Dict[str, Any]] = field(default=None, compare=False, hash=False)

    @classmethod
    def from_partial(cls, partial: PromptPartial) -> "Prompt":
        raw = partial.raw or ""
        return cls(
            raw=raw,
            label=partial.label or raw,
            function=partial.function,
            config=partial.config,
        )

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"raw": self.raw, "label": self.label}
        if self.function is not None:
            data["function"] = getattr(self.function, "__name__", repr(self.function))
        if self.config:
            data["config"] = self.config
        return data


@dataclass(frozen=True)
class ResolvedPathInfo:
    """Decomposition of a file reference.

    Attributes:
        file_path: Normalized OS path (the pattern itself for globs)
        is_path_pattern: True when the path portion has glob metacharacters
        extension: Lower-cased trailing dot-segment, e.g. ".yaml"
        function_name: Callable selected with a ``path.py:name`` suffix
    """

    file_path: str
    is_path_pattern: bool
    extension: Optional[str] = None
    function_name: Optional[str] = None
