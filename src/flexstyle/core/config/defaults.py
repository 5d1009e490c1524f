# src/flexstyle/core/config/defaults.py
"""
Configuração base (defaults) embutida do FlexStyle.

Usada pelo loader quando nenhum arquivo de defaults é informado. Um
arquivo YAML/JSON com a mesma estrutura pode substituí-la por completo.
"""

from __future__ import annotations

from typing import Any, Dict

from ..constants import DEFAULT_SPACING_TYPE, GAP_TOKEN_TEMPLATE


DEFAULT_CONFIG: Dict[str, Any] = {
    "tokens": {
        "gap_template": GAP_TOKEN_TEMPLATE,
    },
    "spacing": {
        "default_type": DEFAULT_SPACING_TYPE,
    },
    "validation": {
        "strict": False,
    },
    "stylesheet": {
        "selector_prefix": "flex",
        "indent": 2,
    },
}
