"""Normalize caller input into a list of prompt partials."""

from __future__ import annotations

import json
from typing import Any, Dict, List, Mapping, Sequence, Union

from .types import PromptPartial

PromptInput = Union[
    str,
    Sequence[Union[str, PromptPartial, Mapping[str, Any]]],
    Mapping[str, str],
]

_PARTIAL_FIELDS = ("raw", "label", "function", "config")


def _describe(value: Any) -> str:
    try:
        return json.dumps(value, default=repr)
    except (TypeError, ValueError):
        return repr(value)


def _partial_from_mapping(item: Mapping[str, Any]) -> PromptPartial:
    fields: Dict[str, Any] = {key: item[key] for key in _PARTIAL_FIELDS if key in item}
    if not fields.get("raw") and item.get("id"):
        fields["raw"] = item["id"]
    return PromptPartial(**fields)


def normalize_input(prompt_input: PromptInput) -> List[PromptPartial]:
    """Convert a string, list or ``label -> raw`` mapping into partials.

    List items may be strings, PromptPartial instances or mappings with
    ``raw``/``label``/``function``/``config`` keys (``id`` stands in for a
    missing ``raw``). A mapping input is the only shape that assigns labels
    before resolution.

    Raises:
        ValueError: If the input is empty or of an unsupported type
    """
    if isinstance(prompt_input, str):
        if not prompt_input:
            raise ValueError(f"Invalid input prompt: {_describe(prompt_input)}")
        return [PromptPartial(raw=prompt_input)]

    if isinstance(prompt_input, Mapping):
        if not prompt_input:
            raise ValueError(f"Invalid input prompt: {_describe(prompt_input)}")
        return [PromptPartial(raw=raw, label=label) for label, raw in prompt_input.items()]

    if isinstance(prompt_input, Sequence) and not isinstance(prompt_input, (bytes, bytearray)):
        if not prompt_input:
            raise ValueError(f"Invalid input prompt: {_describe(prompt_input)}")
        partials: List[PromptPartial] = []
        for item in prompt_input:
            if isinstance(item, str):
                partials.append(PromptPartial(raw=item))
            elif isinstance(item, PromptPartial):
                partials.append(item)
            elif isinstance(item, Mapping):
                partials.append(_partial_from_mapping(item))
            else:
                raise ValueError(f"Invalid input prompt: {_describe(item)}")
        return partials

    raise ValueError(f"Invalid input prompt: {_describe(prompt_input)}")
