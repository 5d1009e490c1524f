# tests/notebook_ui/test_renderers.py

import copy

from flexstyle.core.report import declarations_frame
from flexstyle.core.stylesheet import build_stylesheet
from flexstyle.notebook_ui.renderers import (
    render_declarations_html,
    render_kv_table_html,
    render_payload,
    render_stylesheet_html,
    render_table_html,
)


def test_render_kv_table_html_basic():
    payload = {"selector": ".box", "tiers": 3}
    html = render_kv_table_html(payload, title="sheet")
    assert "<table>" in html
    assert "sheet" in html
    assert "selector" in html
    assert ".box" in html


def test_render_table_html_list_of_dicts():
    payload = [{"property": "gap", "value": "0"}, {"property": "display", "value": "flex"}]
    html = render_table_html(payload, title="rows")
    assert "<th>property</th>" in html
    assert "<th>value</th>" in html


def test_render_table_html_empty():
    assert "(empty)" in render_table_html([])


def test_render_stylesheet_html_escapes_css():
    sheet = build_stylesheet({"gap": 2}, selector=".a > .b")
    html = render_stylesheet_html(sheet)
    assert ".a &gt; .b" in html
    assert "<pre><code>" in html
    assert "var(--gap-size-2)" in html


def test_render_declarations_html_blank_min_width_for_sm():
    frame = declarations_frame({"gap": {"sm": 1, "md": 2}})
    html = render_declarations_html(frame)
    assert "<th>min_width</th>" in html
    assert "<NA>" not in html
    assert "<td>980</td>" in html


def test_render_payload_dispatches_stylesheet_and_frame():
    sheet = build_stylesheet({"gap": 2}, selector=".box")
    result = render_payload(sheet)
    assert result.text == sheet.css
    assert result.html is not None

    frame = declarations_frame({"gap": 2})
    result = render_payload(frame)
    assert "gap" in result.text
    assert "<table>" in result.html


def test_render_payload_fallback_unknown_payload_to_text():
    result = render_payload(object())
    assert result.text
    assert result.html is None


def test_purity_renderer_does_not_mutate_input_dict():
    payload = {"gap": {"sm": 1}, "spacing": [1, 2, 3]}
    before = copy.deepcopy(payload)
    _ = render_payload(payload)
    assert payload == before
