# src/flexstyle/core/resolve.py
"""
Resolvedor de estilos do Flex por breakpoint.

Este módulo transforma props normalizadas em declarações CSS para um
único tier de breakpoint. É a lógica central do FlexStyle.

Ordem fixa de emissão (determinística, apta a snapshot):
    1. `display: flex;`          → apenas no tier sm
    2. `flex-direction`
    3. `align-items`
    4. `justify-content`
    5. `flex-grow` + `flex-basis: 0;` (sempre em par)
    6. `gap`
    7. declarações de spacing (padding/margin)

Extração por tier:
    - mapa por breakpoint → valor da chave do tier; ausência = não definido
      (sem herança de tiers menores; a cascata CSS cuida disso)
    - valor simples       → definido apenas no tier sm

Princípios fundamentais:
    - Funções puras, sem estado e reentrantes
    - Campos não resolvidos não contribuem nem com linha vazia
    - Shapes desconhecidos são ignorados silenciosamente

Limites explícitos:
    - Não envolve declarações em seletores ou media queries
      (ver core.stylesheet)
    - Não decide quando os estilos são aplicados
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Union

from .constants import DEFAULT_SPACING_TYPE, GAP_TOKEN_TEMPLATE, GAP_ZERO
from .normalize import normalize_props
from .types import (
    BREAKPOINTS,
    Breakpoint,
    PerBreakpoint,
    classify_spacing,
    classify_value,
    coerce_breakpoint,
)


def gap_size(size: Any, *, template: str = GAP_TOKEN_TEMPLATE) -> Optional[str]:
    """
    Converte um GapSize no token CSS correspondente.

    Exemplos:
        gap_size(0)    -> "0"
        gap_size(3)    -> "var(--gap-size-3)"
        gap_size(None) -> None
    """
    if size is None:
        return None
    if size == 0:
        return GAP_ZERO
    return template.format(size=size)


def _first_defined(*values: Any) -> Any:
    for value in values:
        if value is not None:
            return value
    return None


def style_spacing(
    kind: str,
    definition: Optional[Mapping[str, Any]] = None,
    *,
    template: str = GAP_TOKEN_TEMPLATE,
) -> str:
    """
    Gera declarações de padding/margin a partir de uma SpacingDefinition.

    Prioridade por lado, independente para cada lado:
        1. lado explícito (top, right, bottom, left)
        2. eixo (vertical → top/bottom, horizontal → left/right)
        3. all

    Lados sem valor em nenhum dos níveis não emitem declaração. A ordem
    de saída é sempre top, right, bottom, left.

    Args:
        kind (str): "padding" ou "margin" (prefixo das propriedades).
        definition (Optional[Mapping[str, Any]]): SpacingDefinition do tier.
        template (str): Template do token de escala.

    Returns:
        str: Declarações separadas por quebra de linha ("" se não houver).
    """
    if not definition or not isinstance(definition, Mapping):
        return ""

    everything = definition.get("all")
    horizontal = definition.get("horizontal")
    vertical = definition.get("vertical")

    sides = (
        ("top", _first_defined(definition.get("top"), vertical, everything)),
        ("right", _first_defined(definition.get("right"), horizontal, everything)),
        ("bottom", _first_defined(definition.get("bottom"), vertical, everything)),
        ("left", _first_defined(definition.get("left"), horizontal, everything)),
    )

    parts = [
        f"{kind}-{side}: {gap_size(value, template=template)};"
        for side, value in sides
        if value is not None
    ]
    return "\n".join(parts)


def _value_at(props: Mapping[str, Any], name: str, breakpoint: Breakpoint) -> Any:
    variant = classify_value(props.get(name))
    if variant is None:
        return None
    return variant.at(breakpoint)


def style_flex(
    breakpoint: Union[str, Breakpoint],
    props: Mapping[str, Any],
    *,
    template: str = GAP_TOKEN_TEMPLATE,
) -> str:
    """
    Gera as declarações CSS do Flex efetivas em um único tier.

    Espera props já normalizadas (ver `normalize_props`). Valores simples
    também são tolerados, mas só contam no tier sm.

    Args:
        breakpoint (Union[str, Breakpoint]): Tier alvo (sm, md ou lg).
        props (Mapping[str, Any]): Props normalizadas do Flex.
        template (str): Template do token de escala para gap/spacing.

    Returns:
        str: Declarações separadas por quebra de linha.

    Raises:
        UnknownBreakpointError: Se o tier não for sm, md ou lg.
    """
    bp = coerce_breakpoint(breakpoint)
    styles: List[str] = []

    direction = _value_at(props, "direction", bp)
    align_items = _value_at(props, "alignItems", bp)
    justify_content = _value_at(props, "justifyContent", bp)
    grow = _value_at(props, "grow", bp)
    gap = _value_at(props, "gap", bp)

    spacing = None
    spacing_variant = classify_spacing(props.get("spacing"))
    if isinstance(spacing_variant, PerBreakpoint):
        spacing = spacing_variant.at(bp)

    # tiers maiores herdam display pela cascata
    if bp is Breakpoint.SM:
        styles.append("display: flex;")

    if direction:
        styles.append(f"flex-direction: {direction};")

    if align_items:
        styles.append(f"align-items: {align_items};")

    if justify_content:
        styles.append(f"justify-content: {justify_content};")

    if grow is not None:
        styles.append(f"flex-grow: {grow};")
        styles.append("flex-basis: 0;")

    if gap is not None:
        styles.append(f"gap: {gap_size(gap, template=template)};")

    if spacing is not None:
        kind = props.get("type") or DEFAULT_SPACING_TYPE
        spacing_styles = style_spacing(kind, spacing, template=template)
        if spacing_styles:
            styles.append(spacing_styles)

    return "\n".join(styles)


def resolve_all(
    props: Mapping[str, Any],
    *,
    template: str = GAP_TOKEN_TEMPLATE,
) -> Dict[Breakpoint, str]:
    """Normaliza uma vez e resolve os três tiers, em ordem sm, md, lg."""
    normalized = normalize_props(props)
    return {bp: style_flex(bp, normalized, template=template) for bp in BREAKPOINTS}
