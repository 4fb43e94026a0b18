"""Literal prompt strings."""

from __future__ import annotations

from ..types import Prompt, PromptPartial


def process_string(prompt: PromptPartial) -> list[Prompt]:
    """Wrap the raw text as a single prompt labelled with itself."""
    raw = prompt.raw or ""
    return [Prompt(raw=raw, label=prompt.label or raw, config=prompt.config)]
