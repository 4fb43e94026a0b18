"""Tests for batch prompt reading."""

import logging
import os

import pytest

from config import Config
from prompts.reader import (
    NoPromptsError,
    find_prompts_without_variables,
    format_no_variable_warning,
    read_prompts,
)
from prompts.types import Prompt, PromptPartial


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    monkeypatch.setattr("config._cfg", {})
    monkeypatch.delenv("EVALPROMPTS_DISABLE_NO_VARIABLE_WARNING", raising=False)
    monkeypatch.delenv("EVALPROMPTS_PROMPT_SEPARATOR", raising=False)
    monkeypatch.setattr(Config, "PROMPT_SEPARATOR", "---")
    monkeypatch.setattr(Config, "MAX_GLOB_DEPTH", 1)


def _warnings(caplog):
    return [r for r in caplog.records if r.levelno == logging.WARNING and r.name == "prompts.reader"]


@pytest.mark.asyncio
async def test_keyed_mapping_round_trip():
    prompts = await read_prompts({"greeting": "Hello {{name}}"})
    assert prompts == [Prompt(raw="Hello {{name}}", label="greeting")]


@pytest.mark.asyncio
async def test_order_follows_input_with_contiguous_expansions(tmp_path):
    (tmp_path / "a.txt").write_text("A1 {{x}}\n---\nA2 {{x}}")
    (tmp_path / "b.txt").write_text("B1 {{x}}")

    prompts = await read_prompts(["first {{x}}", "*.txt", "last {{x}}"], str(tmp_path))

    assert [p.raw for p in prompts] == [
        "first {{x}}",
        "A1 {{x}}",
        "A2 {{x}}",
        "B1 {{x}}",
        "last {{x}}",
    ]


@pytest.mark.asyncio
async def test_labels_for_files(tmp_path):
    (tmp_path / "chat.md").write_text("Ask {{q}}")
    prompts = await read_prompts("chat.md", str(tmp_path))
    path = os.path.join(str(tmp_path), "chat.md")
    assert prompts[0].label == f"{path}: Ask {{{{q}}}}..."


@pytest.mark.asyncio
async def test_zero_prompts_is_fatal(tmp_path):
    (tmp_path / "data.csv").write_text("a,b")
    with pytest.raises(NoPromptsError, match='"data.csv"') as exc_info:
        await read_prompts(["ok {{x}}", "data.csv"], str(tmp_path))
    assert exc_info.value.raw == "data.csv"


@pytest.mark.asyncio
async def test_unmatched_glob_is_not_fatal(tmp_path):
    prompts = await read_prompts(["missing/*.txt"], str(tmp_path))
    assert prompts == [Prompt(raw="missing/*.txt", label="missing/*.txt")]


@pytest.mark.asyncio
async def test_invalid_input_shape():
    with pytest.raises(ValueError):
        await read_prompts([])


@pytest.mark.asyncio
async def test_warns_once_for_prompts_without_variables(caplog):
    caplog.set_level(logging.WARNING)
    await read_prompts(["one", "two", "three", "four", "with {{var}}"])

    warnings = _warnings(caplog)
    assert len(warnings) == 1
    message = warnings[0].getMessage()
    assert "4 prompts without {{variables}} detected" in message
    assert 'Examples: "one", "two", "three", ...' in message
    assert "four" not in message


@pytest.mark.asyncio
async def test_single_prompt_warning_is_singular(caplog):
    caplog.set_level(logging.WARNING)
    await read_prompts("Just text")

    message = _warnings(caplog)[0].getMessage()
    assert "1 prompt without {{variables}} detected" in message
    assert 'Examples: "Just text"\n' in message


@pytest.mark.asyncio
async def test_no_warning_when_all_prompts_have_variables(caplog):
    caplog.set_level(logging.WARNING)
    await read_prompts(["Hi {{name}}", "{% if x %}yes{% endif %}"])
    assert _warnings(caplog) == []


@pytest.mark.asyncio
async def test_suppression_flag(caplog, monkeypatch):
    monkeypatch.setenv("EVALPROMPTS_DISABLE_NO_VARIABLE_WARNING", "true")
    caplog.set_level(logging.WARNING)
    await read_prompts(["one", "two", "three", "four"])
    assert _warnings(caplog) == []


@pytest.mark.asyncio
async def test_function_prompts_pass_through():
    def build(context):
        return "hi"

    prompts = await read_prompts([PromptPartial(raw="fn", label="builder", function=build)])
    assert prompts[0].function is build
    assert prompts[0].label == "builder"


def test_find_prompts_without_variables_falls_back_to_raw_prefix():
    long_raw = "x" * 80
    prompts = [Prompt(raw=long_raw, label=""), Prompt(raw="{{a}}", label="has var")]
    assert find_prompts_without_variables(prompts) == ["x" * 50]


def test_format_no_variable_warning_mentions_flag():
    message = format_no_variable_warning(["a", "b"])
    assert message.startswith("Warning: 2 prompts without {{variables}} detected.")
    assert "EVALPROMPTS_DISABLE_NO_VARIABLE_WARNING=true" in message
