# src/flexstyle/core/constants.py
"""
Constantes canônicas de breakpoints e tokens do FlexStyle.

Este módulo define o sistema responsivo fixo utilizado pelo primitivo de
layout Flex: três tiers de breakpoint, seus limiares em pixels e as media
queries pré-montadas que o chamador usa para envolver as declarações
resolvidas por tier.

Tiers definidos:
    - sm → baseline (sem media query, regra base)
    - md → min-width 980px
    - lg → min-width 1280px

Decisões arquiteturais:
    - Os limiares são constantes, não configuração
    - O tier sm nunca possui guarda de media query
    - Tokens de gap referenciam custom properties externas (--gap-size-<n>)

Limites explícitos:
    - Não define a existência dos tokens CSS (apenas os referencia)
    - Não suporta breakpoints além dos três tiers fixos
"""

from __future__ import annotations

from typing import Tuple


# ---------------------------------------------------------------------------
# Breakpoints (px)
# ---------------------------------------------------------------------------

# Apenas documental: sm é a regra base e nunca gera media query.
BREAKPOINT_SM = 480
BREAKPOINT_MD = 980
BREAKPOINT_LG = 1280

MEDIA_MIN_MD = f"@media (min-width: {BREAKPOINT_MD}px)"
MEDIA_MIN_LG = f"@media (min-width: {BREAKPOINT_LG}px)"

BREAKPOINT_KEYS: Tuple[str, str, str] = ("sm", "md", "lg")


# ---------------------------------------------------------------------------
# Props responsivas
# ---------------------------------------------------------------------------

# spacing é tratado à parte por possuir um nível extra de aninhamento.
BREAKPOINT_PROPS: Tuple[str, str, str] = ("gap", "direction", "grow")

SPACING_SIDES: Tuple[str, str, str, str] = ("top", "right", "bottom", "left")
SPACING_AXES: Tuple[str, str] = ("horizontal", "vertical")
SPACING_KEYS: Tuple[str, ...] = ("all",) + SPACING_AXES + SPACING_SIDES

SPACING_TYPES: Tuple[str, str] = ("padding", "margin")
DEFAULT_SPACING_TYPE = "padding"


# ---------------------------------------------------------------------------
# Tokens de escala
# ---------------------------------------------------------------------------

GAP_SIZE_MIN = 0
GAP_SIZE_MAX = 6
GAP_ZERO = "0"
GAP_TOKEN_TEMPLATE = "var(--gap-size-{size})"

FLEX_DIRECTIONS: Tuple[str, ...] = ("row", "row-reverse", "column", "column-reverse")
