"""
Notebook UI Adapter (v1)

Objetivo:
- Renderizar stylesheets e relatórios de declarações para notebooks.
- NÃO altera payloads.
- NÃO resolve estilos por conta própria (recebe resultados prontos).

Saídas:
- HTML (string) quando possível
- fallback seguro em string (JSON pretty ou repr)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Sequence, Optional
import copy
import html
import json

import pandas as pd

from flexstyle.core.stylesheet import FlexStylesheet


@dataclass(frozen=True)
class RenderResult:
    """Resultado de renderização (apenas apresentação)."""
    html: Optional[str]  # HTML string (quando aplicável)
    text: str            # fallback textual (sempre preenchido)


def _escape(s: Any) -> str:
    if s is None or (pd.api.types.is_scalar(s) and pd.isna(s)):
        return ""
    return html.escape(str(s))


def _as_pretty_json(payload: Any) -> str:
    try:
        return json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True)
    except TypeError:
        return repr(payload)


def render_payload(payload: Any) -> RenderResult:
    """
    Renderizador genérico v1:
    - FlexStylesheet -> card com seletor, hash e CSS
    - DataFrame -> tabela de declarações
    - dict -> tabela key/value
    - list[dict] -> tabela
    - caso contrário -> JSON pretty (fallback)
    """
    before = copy.deepcopy(payload) if isinstance(payload, (dict, list)) else None

    html_out: Optional[str] = None
    text_out: str

    if isinstance(payload, FlexStylesheet):
        html_out = render_stylesheet_html(payload)
        text_out = payload.css
    elif isinstance(payload, pd.DataFrame):
        html_out = render_declarations_html(payload)
        text_out = payload.to_string(index=False)
    elif isinstance(payload, Mapping):
        html_out = render_kv_table_html(payload)
        text_out = _as_pretty_json(payload)
    elif isinstance(payload, Sequence) and not isinstance(payload, (str, bytes, bytearray)):
        html_out = render_table_html(payload)
        text_out = _as_pretty_json(payload)
    else:
        text_out = _as_pretty_json(payload)

    after = copy.deepcopy(payload) if isinstance(payload, (dict, list)) else None
    if before is not None and before != after:
        raise AssertionError("Notebook UI renderer mutated the input payload")

    return RenderResult(html=html_out, text=text_out)


def render_kv_table_html(payload: Mapping[str, Any], title: Optional[str] = None) -> str:
    """Renderiza dict como tabela key/value (HTML puro)."""
    rows = []
    for k in payload.keys():
        rows.append(
            f"<tr><td><code>{_escape(k)}</code></td><td>{_escape(payload[k])}</td></tr>"
        )

    heading = f"<h4>{_escape(title)}</h4>" if title else ""
    return (
        f"{heading}"
        "<table>"
        "<thead><tr><th>key</th><th>value</th></tr></thead>"
        "<tbody>"
        + "".join(rows) +
        "</tbody></table>"
    )


def render_table_html(payload: Sequence[Any], title: Optional[str] = None, max_rows: int = 50) -> str:
    """
    Renderiza list payload como tabela:
    - list[dict] -> colunas = união das chaves (ordem estável)
    - caso contrário -> tabela de 1 coluna (value)
    """
    items = list(payload)[:max_rows]

    heading = f"<h4>{_escape(title)}</h4>" if title else ""

    if not items:
        return f"{heading}<div><em>(empty)</em></div>"

    if all(isinstance(x, Mapping) for x in items):
        columns = []
        for row in items:
            for k in row.keys():
                if k not in columns:
                    columns.append(k)

        th = "".join(f"<th>{_escape(c)}</th>" for c in columns)
        trs = []
        for row in items:
            tds = "".join(f"<td>{_escape(row.get(c))}</td>" for c in columns)
            trs.append(f"<tr>{tds}</tr>")

        return (
            f"{heading}"
            "<table>"
            f"<thead><tr>{th}</tr></thead>"
            "<tbody>" + "".join(trs) + "</tbody>"
            "</table>"
        )

    trs = "".join(f"<tr><td>{_escape(x)}</td></tr>" for x in items)
    return (
        f"{heading}"
        "<table>"
        "<thead><tr><th>value</th></tr></thead>"
        f"<tbody>{trs}</tbody>"
        "</table>"
    )


def render_declarations_html(frame: pd.DataFrame, title: Optional[str] = "declarations") -> str:
    """Renderiza o relatório de `declarations_frame` como tabela HTML."""
    return render_table_html(frame.to_dict(orient="records"), title=title, max_rows=len(frame) or 1)


def render_stylesheet_html(sheet: FlexStylesheet, title: Optional[str] = None) -> str:
    """Renderiza um card com seletor, declarações por tier e o CSS final."""
    summary = {"selector": sheet.selector, "props_hash": sheet.props_hash[:12]}
    for tier, declarations in sheet.rules.items():
        summary[tier] = f"{len(declarations.splitlines())} declaração(ões)"

    return (
        "<div style='border:1px solid #ddd; border-radius:12px; padding:12px; margin:8px 0;'>"
        f"<h3 style='margin:0 0 6px 0;'>{_escape(title or sheet.selector)}</h3>"
        f"{render_kv_table_html(summary)}"
        f"<pre><code>{_escape(sheet.css)}</code></pre>"
        "</div>"
    )
