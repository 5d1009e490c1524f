# tests/core/stylesheet/test_build_stylesheet.py
"""
Testes da montagem de stylesheets (build_stylesheet / assemble_css).

Os testes asseguram que:
- sm vira a regra base e md/lg viram blocos de media query
- tiers vazios não geram blocos
- o seletor padrão é derivado do hash das props normalizadas
- a configuração controla template, indentação, prefixo e modo estrito
- eventos e warnings são registrados apenas quando há contexto
"""

import pytest

from flexstyle.core.exceptions import InvalidFlexProps
from flexstyle.core.stylesheet import assemble_css, build_stylesheet, render_flex_css


def test_base_rule_only_when_md_lg_are_empty():
    sheet = build_stylesheet({"direction": "row", "gap": 2}, selector=".box")
    assert sheet.css == (
        ".box {\n"
        "  display: flex;\n"
        "  flex-direction: row;\n"
        "  gap: var(--gap-size-2);\n"
        "}"
    )
    assert sheet.rules["md"] == ""
    assert sheet.rules["lg"] == ""


def test_media_blocks_for_md_and_lg(responsive_props):
    css = render_flex_css(responsive_props, selector=".stack")
    assert css == (
        ".stack {\n"
        "  display: flex;\n"
        "  flex-direction: column;\n"
        "  gap: var(--gap-size-1);\n"
        "}\n"
        "@media (min-width: 980px) {\n"
        "  .stack {\n"
        "    flex-direction: row;\n"
        "    gap: var(--gap-size-3);\n"
        "    margin-right: var(--gap-size-2);\n"
        "    margin-left: var(--gap-size-2);\n"
        "  }\n"
        "}\n"
        "@media (min-width: 1280px) {\n"
        "  .stack {\n"
        "    gap: 0;\n"
        "    margin-top: var(--gap-size-6);\n"
        "    margin-right: var(--gap-size-4);\n"
        "    margin-bottom: var(--gap-size-4);\n"
        "    margin-left: var(--gap-size-4);\n"
        "  }\n"
        "}"
    )


def test_assemble_css_skips_only_empty_tiers():
    css = assemble_css(".x", {"sm": "display: flex;", "md": "", "lg": "gap: 0;"}, indent=0)
    assert css == ".x {\ndisplay: flex;\n}\n@media (min-width: 1280px) {\n.x {\ngap: 0;\n}\n}"


def test_default_selector_is_hash_based_and_stable(raw_props):
    first = build_stylesheet(raw_props)
    second = build_stylesheet(dict(reversed(list(raw_props.items()))))
    assert first.selector == f".flex-{first.props_hash[:8]}"
    assert first.selector == second.selector


def test_equivalent_raw_and_normalized_props_share_selector():
    raw = build_stylesheet({"gap": 2})
    normalized = build_stylesheet({"gap": {"sm": 2}})
    assert raw.selector == normalized.selector


def test_config_controls_template_prefix_and_indent():
    config = {
        "tokens": {"gap_template": "var(--space-{size})"},
        "stylesheet": {"selector_prefix": "row", "indent": 4},
    }
    sheet = build_stylesheet({"gap": 1}, config=config)
    assert sheet.selector.startswith(".row-")
    assert "    gap: var(--space-1);" in sheet.css.splitlines()


def test_default_spacing_type_from_config_applies_when_type_absent():
    sheet = build_stylesheet(
        {"spacing": 1},
        selector=".m",
        config={"spacing": {"default_type": "margin"}},
    )
    assert "margin-top: var(--gap-size-1);" in sheet.rules["sm"]
    assert "padding" not in sheet.css


def test_explicit_type_wins_over_config_default():
    sheet = build_stylesheet(
        {"spacing": 1, "type": "padding"},
        config={"spacing": {"default_type": "margin"}},
    )
    assert "padding-top: var(--gap-size-1);" in sheet.rules["sm"]


def test_permissive_mode_degrades_silently():
    sheet = build_stylesheet({"gap": [1, 2], "spacing": "3"}, selector=".p")
    assert sheet.rules["sm"] == "display: flex;"


def test_strict_mode_raises_before_resolving(style_ctx):
    with pytest.raises(InvalidFlexProps):
        build_stylesheet({"gap": 9}, config={"validation": {"strict": True}}, ctx=style_ctx)
    assert [e["step"] for e in style_ctx.events] == ["validate"]
    assert style_ctx.events[0]["level"] == "ERROR"


def test_strict_mode_accepts_valid_props(raw_props):
    sheet = build_stylesheet(raw_props, config={"validation": {"strict": True}})
    assert sheet.rules["sm"].startswith("display: flex;")


def test_permissive_mode_records_warnings_in_context(style_ctx):
    build_stylesheet({"gap": 9}, ctx=style_ctx)
    assert style_ctx.warnings["validate"] == ["GAP_SIZE_OUT_OF_RANGE: Tamanho fora da escala de gap"]


def test_context_receives_one_event_per_stage(style_ctx, responsive_props):
    sheet = build_stylesheet(responsive_props, ctx=style_ctx)
    steps = [e["step"] for e in style_ctx.events]
    assert steps == ["validate", "normalize", "resolve.sm", "resolve.md", "resolve.lg", "stylesheet"]
    assert style_ctx.events_for("resolve.lg")[0]["declarations"] == 5
    final = style_ctx.events[-1]
    assert final["selector"] == sheet.selector
    assert final["props_hash"] == sheet.props_hash
    assert len(final["config_hash"]) == 64


def test_input_props_are_not_mutated(raw_props):
    import copy

    before = copy.deepcopy(raw_props)
    build_stylesheet(raw_props)
    assert raw_props == before


def test_mixed_key_types_do_not_break_the_stylesheet(style_ctx):
    """
    Uma chave não-string em um breakpoint map é ignorada pelo resolver e
    não pode quebrar hash, seletor nem eventos.
    """
    props = {"gap": {"sm": 1, 1: 2}}
    first = build_stylesheet(props, ctx=style_ctx)
    second = build_stylesheet({"gap": {1: 2, "sm": 1}})
    assert first.rules["sm"] == "display: flex;\ngap: var(--gap-size-1);"
    assert first.selector == second.selector
    assert first.selector.startswith(".flex-")
    assert style_ctx.warnings["validate"]
