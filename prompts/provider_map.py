"""Map providers to the prompt labels they should be evaluated against."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Union

from .types import Prompt

CUSTOM_FUNCTION_PROVIDER = "Custom function"

# Keys that mark a list entry as provider options rather than {id: options}
_OPTION_KEYS = ("id", "label", "prompts", "config")


@dataclass(frozen=True)
class SingleProvider:
    """``providers: "openai:gpt-4o-mini"``"""

    provider_id: str


@dataclass(frozen=True)
class CustomFunctionProvider:
    """``providers`` is a callable."""

    function: Callable[..., Any]


@dataclass(frozen=True)
class ExplicitProvider:
    """List entry of the form ``{id: ..., label: ..., prompts: [...]}``."""

    provider_id: str
    label: Optional[str] = None
    prompts: Optional[List[str]] = None


@dataclass(frozen=True)
class KeyedProvider:
    """List entry of the form ``{original_id: {id: ..., prompts: [...]}}``."""

    original_id: str
    provider_id: Optional[str] = None
    prompts: Optional[List[str]] = None


ProviderSpec = Union[SingleProvider, CustomFunctionProvider, ExplicitProvider, KeyedProvider]


def _prompt_list(value: Any) -> Optional[List[str]]:
    if value is None:
        return None
    if isinstance(value, str):
        return [value]
    return list(value)


def _classify_entry(entry: Mapping[str, Any]) -> Optional[ProviderSpec]:
    if any(key in entry for key in _OPTION_KEYS):
        provider_id = entry.get("id")
        if not provider_id:
            raise ValueError(
                "You must specify an `id` on the Provider when you override options.prompts"
            )
        return ExplicitProvider(
            provider_id=str(provider_id),
            label=entry.get("label") or None,
            prompts=_prompt_list(entry.get("prompts")),
        )

    if not entry:
        return None
    original_id = next(iter(entry))
    options = entry[original_id]
    if not isinstance(options, Mapping):
        options = {}
    return KeyedProvider(
        original_id=str(original_id),
        provider_id=options.get("id") or None,
        prompts=_prompt_list(options.get("prompts")),
    )


def classify_providers(providers: Any) -> List[ProviderSpec]:
    """Turn a raw ``providers`` config value into provider variants.

    Bare strings inside a list produce no variant; consumers fall back to
    all prompts for providers missing from the map.

    Raises:
        ValueError: If an options entry has no ``id``
        TypeError: If ``providers`` has an unsupported type
    """
    if not providers:
        return []
    if isinstance(providers, str):
        return [SingleProvider(providers)]
    if callable(providers):
        return [CustomFunctionProvider(providers)]
    if isinstance(providers, Sequence):
        specs: List[ProviderSpec] = []
        for entry in providers:
            if isinstance(entry, Mapping):
                spec = _classify_entry(entry)
                if spec is not None:
                    specs.append(spec)
        return specs
    raise TypeError(f"Unsupported providers configuration: {providers!r}")


def read_provider_prompt_map(
    config: Mapping[str, Any], parsed_prompts: Sequence[Prompt]
) -> Dict[str, List[str]]:
    """Build ``provider id -> prompt labels`` from an evaluation config.

    Args:
        config: Evaluation config; only its ``providers`` key is read
        parsed_prompts: Prompts returned by read_prompts

    Returns:
        Mapping of provider id (and provider label, when set) to labels
    """
    all_prompts = [prompt.label for prompt in parsed_prompts]
    result: Dict[str, List[str]] = {}

    for spec in classify_providers(config.get("providers")):
        if isinstance(spec, SingleProvider):
            result[spec.provider_id] = list(all_prompts)
        elif isinstance(spec, CustomFunctionProvider):
            result[CUSTOM_FUNCTION_PROVIDER] = list(all_prompts)
        elif isinstance(spec, ExplicitProvider):
            prompts = list(all_prompts) if spec.prompts is None else spec.prompts
            result[spec.provider_id] = prompts
            if spec.label:
                result[spec.label] = prompts
        elif isinstance(spec, KeyedProvider):
            result[spec.provider_id or spec.original_id] = (
                list(all_prompts) if spec.prompts is None else spec.prompts
            )
        else:
            raise TypeError(f"Unhandled provider variant: {spec!r}")

    return result
