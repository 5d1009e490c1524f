from .renderers import (
    RenderResult,
    render_payload,
    render_kv_table_html,
    render_table_html,
    render_declarations_html,
    render_stylesheet_html,
)

__all__ = [
    "RenderResult",
    "render_payload",
    "render_kv_table_html",
    "render_table_html",
    "render_declarations_html",
    "render_stylesheet_html",
]
