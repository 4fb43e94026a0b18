"""Tests for recursive prompt resolution."""

import os

import pytest

from config import Config
from prompts.resolver import process_prompt
from prompts.types import Prompt, PromptPartial


@pytest.fixture(autouse=True)
def default_separator(monkeypatch):
    monkeypatch.setattr("config._cfg", {})
    monkeypatch.delenv("EVALPROMPTS_PROMPT_SEPARATOR", raising=False)
    monkeypatch.setattr(Config, "PROMPT_SEPARATOR", "---")


@pytest.fixture
def prompt_dir(tmp_path):
    (tmp_path / "a.txt").write_text("Alpha {{x}}\n---\nAlpha two {{x}}")
    (tmp_path / "b.txt").write_text("Beta {{x}}")
    (tmp_path / "c.md").write_text("Gamma {{x}}")
    return tmp_path


@pytest.mark.asyncio
async def test_literal_string():
    prompts = await process_prompt(PromptPartial(raw="Hello {{name}}"))
    assert prompts == [Prompt(raw="Hello {{name}}", label="Hello {{name}}")]


@pytest.mark.asyncio
async def test_raw_must_be_a_string():
    with pytest.raises(ValueError, match="prompt.raw must be a string"):
        await process_prompt(PromptPartial(raw=None))
    with pytest.raises(ValueError):
        await process_prompt(PromptPartial(raw=123))  # type: ignore[arg-type]


@pytest.mark.asyncio
async def test_function_partial_is_terminal():
    def build(context):
        return "built"

    # raw looks like a glob but must not be touched
    partial = PromptPartial(raw="prompts/*.txt", function=build)
    prompts = await process_prompt(partial)

    assert len(prompts) == 1
    assert prompts[0].raw == "prompts/*.txt"
    assert prompts[0].label == "prompts/*.txt"
    assert prompts[0].function is build


@pytest.mark.asyncio
async def test_concrete_file(prompt_dir):
    prompts = await process_prompt(PromptPartial(raw="b.txt"), str(prompt_dir))
    path = os.path.join(str(prompt_dir), "b.txt")
    assert prompts == [Prompt(raw="Beta {{x}}", label=f"{path}: Beta {{{{x}}}}")]


@pytest.mark.asyncio
async def test_glob_matches_in_order(prompt_dir):
    prompts = await process_prompt(PromptPartial(raw="*.txt"), str(prompt_dir))
    assert [p.raw for p in prompts] == ["Alpha {{x}}", "Alpha two {{x}}", "Beta {{x}}"]


@pytest.mark.asyncio
async def test_glob_equals_concatenation_of_matches(prompt_dir):
    expanded = await process_prompt(PromptPartial(raw="*.{txt,md}"), str(prompt_dir))

    individually = []
    for name in ["a.txt", "b.txt", "c.md"]:
        individually.extend(await process_prompt(PromptPartial(raw=name), str(prompt_dir)))

    assert expanded == individually


@pytest.mark.asyncio
async def test_glob_without_matches_falls_back_to_literal(tmp_path):
    prompts = await process_prompt(PromptPartial(raw="nothing/*.txt"), str(tmp_path))
    assert prompts == [Prompt(raw="nothing/*.txt", label="nothing/*.txt")]


@pytest.mark.asyncio
async def test_literal_fallback_keeps_label(tmp_path):
    prompts = await process_prompt(
        PromptPartial(raw="Translate to French/Spanish: {{text}}", label="translate"),
        str(tmp_path),
    )
    assert prompts == [Prompt(raw="Translate to French/Spanish: {{text}}", label="translate")]


@pytest.mark.asyncio
async def test_exhausted_budget_dispatches_pattern_as_path(tmp_path):
    # A file literally named with glob characters is read directly
    (tmp_path / "[draft].txt").write_text("Draft {{x}}")
    (tmp_path / "d.txt").write_text("Not me")

    prompts = await process_prompt(PromptPartial(raw="[draft].txt"), str(tmp_path), 0)
    assert [p.raw for p in prompts] == ["Draft {{x}}"]


@pytest.mark.asyncio
async def test_exhausted_budget_never_expands(tmp_path):
    (tmp_path / "a.txt").write_text("A")
    with pytest.raises(FileNotFoundError):
        await process_prompt(PromptPartial(raw="*.txt"), str(tmp_path), 0)


@pytest.mark.asyncio
async def test_unknown_extension_yields_nothing(tmp_path):
    (tmp_path / "data.csv").write_text("a,b")
    assert await process_prompt(PromptPartial(raw="data.csv"), str(tmp_path)) == []


@pytest.mark.asyncio
async def test_glob_skips_unknown_extensions(tmp_path):
    (tmp_path / "a.txt").write_text("Keep {{x}}")
    (tmp_path / "b.csv").write_text("skip")

    prompts = await process_prompt(PromptPartial(raw="*"), str(tmp_path))
    assert [p.raw for p in prompts] == ["Keep {{x}}"]


@pytest.mark.asyncio
async def test_missing_concrete_file_propagates(tmp_path):
    with pytest.raises(FileNotFoundError):
        await process_prompt(PromptPartial(raw="missing.txt"), str(tmp_path))


@pytest.mark.asyncio
async def test_python_function_selector(tmp_path):
    (tmp_path / "build.py").write_text("def make(context):\n    return 'made'\n")

    prompts = await process_prompt(PromptPartial(raw="build.py:make"), str(tmp_path))

    assert len(prompts) == 1
    assert prompts[0].label == f"{os.path.join(str(tmp_path), 'build.py')}:make"
    assert prompts[0].function({}) == "made"


@pytest.mark.asyncio
async def test_glob_passes_config_to_matches(tmp_path):
    (tmp_path / "a.md").write_text("A {{x}}")
    prompts = await process_prompt(
        PromptPartial(raw="*.md", config={"temperature": 0.2}), str(tmp_path)
    )
    assert prompts[0].config == {"temperature": 0.2}


@pytest.mark.asyncio
async def test_input_partial_is_not_mutated(prompt_dir):
    partial = PromptPartial(raw="*.txt", label=None)
    await process_prompt(partial, str(prompt_dir))
    assert partial == PromptPartial(raw="*.txt", label=None)
