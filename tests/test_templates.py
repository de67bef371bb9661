from __future__ import annotations

from scriptrelay.common.templates import DEFAULT_SYSTEM_PROMPT, load_template, render_prompt


def test_render_prompt_default_instruction() -> None:
    out = render_prompt("we got lost")
    assert out == DEFAULT_SYSTEM_PROMPT + "\n\nRaw Input:\nwe got lost"


def test_render_prompt_empty_override_falls_back() -> None:
    assert render_prompt("x", "") == render_prompt("x")


def test_render_prompt_keeps_input_verbatim() -> None:
    raw = "  line one\n\nline two  "
    assert render_prompt(raw, "Go.").endswith("Raw Input:\n" + raw)


def test_load_storytelling_prompt_from_repo() -> None:
    tpl = load_template()
    assert tpl.startswith("You are an expert storytelling scriptwriter")
    assert "BUT/THEREFORE" in tpl
