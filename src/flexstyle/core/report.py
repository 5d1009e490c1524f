# src/flexstyle/core/report.py
"""
Relatório tabular de declarações por breakpoint.

Transforma o resultado da resolução (três tiers) em um `pandas.DataFrame`
com uma linha por declaração, útil para inspeção em notebooks, snapshots
e comparação entre variações de props.

Colunas:
    - breakpoint: tier (sm, md, lg)
    - min_width: limiar do tier em px (None para sm)
    - order: posição da declaração dentro do tier (0-based)
    - property: propriedade CSS
    - value: valor CSS (sem o `;` final)
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping

import pandas as pd

from .constants import GAP_TOKEN_TEMPLATE
from .resolve import resolve_all


REPORT_COLUMNS = ["breakpoint", "min_width", "order", "property", "value"]


def _split_declaration(line: str) -> Dict[str, str]:
    prop, _, value = line.partition(":")
    return {"property": prop.strip(), "value": value.strip().rstrip(";")}


def declarations_frame(
    props: Mapping[str, Any],
    *,
    template: str = GAP_TOKEN_TEMPLATE,
) -> pd.DataFrame:
    """
    Resolve as props nos três tiers e retorna as declarações como tabela.

    Tiers sem declarações não geram linhas. A ordem das linhas segue a
    ordem de emissão do resolvedor dentro de cada tier (sm, md, lg).
    """
    rows: List[Dict[str, Any]] = []
    for bp, declarations in resolve_all(props, template=template).items():
        for order, line in enumerate(declarations.splitlines()):
            row = {"breakpoint": bp.value, "min_width": bp.min_width, "order": order}
            row.update(_split_declaration(line))
            rows.append(row)

    frame = pd.DataFrame(rows, columns=REPORT_COLUMNS)
    frame["min_width"] = frame["min_width"].astype("Int64")
    return frame


def declarations_matrix(props: Mapping[str, Any], **kwargs: Any) -> pd.DataFrame:
    """
    Pivô do relatório: propriedades nas linhas, tiers nas colunas.

    Células vazias significam "não definido neste tier" (a cascata CSS
    herda o valor de um tier menor).
    """
    frame = declarations_frame(props, **kwargs)
    matrix = frame.pivot(index="property", columns="breakpoint", values="value")
    matrix = matrix.reindex(columns=["sm", "md", "lg"])
    # linhas na ordem da primeira aparição (sm, depois md, depois lg)
    return matrix.reindex(index=frame["property"].drop_duplicates().tolist())
