"""
Smoke E2E - FlexStyle

Valida o pipeline de ponta a ponta:
- config YAML versionada (modo estrito)
- props brutas com todos os shapes aceitos
- validação, normalização, resolução por tier e montagem com media queries
- eventos estruturados no StyleContext
- relatório tabular e renderização HTML
"""

from __future__ import annotations

from pathlib import Path

from flexstyle import build_stylesheet, normalize_props, style_flex
from flexstyle.core.config.loader import load_config
from flexstyle.core.context import StyleContext
from flexstyle.core.report import declarations_frame
from flexstyle.notebook_ui import render_payload


def test_render_smoke_e2e(tmp_path: Path) -> None:
    config_path = Path(__file__).parents[1] / "fixtures" / "config" / "flexstyle_minimal.yaml"
    assert config_path.exists()

    config = load_config(defaults_path=str(config_path))
    ctx = StyleContext.new(config)

    props = {
        "direction": {"sm": "column", "lg": "row"},
        "gap": 3,
        "grow": 1,
        "alignItems": "center",
        "spacing": {"vertical": 2, "left": 0},
    }

    sheet = build_stylesheet(props, config=config, ctx=ctx)

    assert sheet.selector.startswith(".card-")
    assert ctx.warnings == {}
    assert [e["step"] for e in ctx.events][-1] == "stylesheet"

    normalized = normalize_props(props)
    for tier in ("sm", "md", "lg"):
        assert sheet.rules[tier] == style_flex(tier, normalized)

    assert sheet.rules["sm"].splitlines() == [
        "display: flex;",
        "flex-direction: column;",
        "align-items: center;",
        "flex-grow: 1;",
        "flex-basis: 0;",
        "gap: var(--gap-size-3);",
        "padding-top: var(--gap-size-2);",
        "padding-bottom: var(--gap-size-2);",
        "padding-left: 0;",
    ]
    assert sheet.rules["md"] == ""
    assert sheet.rules["lg"] == "flex-direction: row;"

    assert "@media (min-width: 980px)" not in sheet.css
    assert "@media (min-width: 1280px) {" in sheet.css

    frame = declarations_frame(props)
    assert len(frame) == 10

    out = tmp_path / "preview.html"
    out.write_text(render_payload(sheet).html, encoding="utf-8")
    assert sheet.selector in out.read_text(encoding="utf-8")
