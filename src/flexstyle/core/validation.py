# src/flexstyle/core/validation.py
"""
Validador estrito (opcional) de props do Flex.

O core do FlexStyle é permissivo por contrato: shapes desconhecidos são
repassados pelo normalizador e ignorados pelo resolvedor, sem exceções.
Este módulo existe **fora** desse caminho, como diagnóstico de
desenvolvimento: ele aponta o que seria descartado ou emitido de forma
inesperada, sem alterar o comportamento do core.

Verificações (v1):
    - shapes não reconhecidos em campos responsivos e em spacing
    - chaves de breakpoint fora de {sm, md, lg}
    - gap/spacing fora da escala inteira 0..6
    - chaves desconhecidas em SpacingDefinition
    - spacing misturando chaves de breakpoint e de SpacingDefinition
    - `type` fora de padding/margin
    - `direction` fora das palavras-chave de flex-direction

Limites explícitos:
    - Nunca é chamado por normalize_props/style_flex
    - Não corrige props
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from .constants import (
    BREAKPOINT_KEYS,
    BREAKPOINT_PROPS,
    FLEX_DIRECTIONS,
    GAP_SIZE_MAX,
    GAP_SIZE_MIN,
    SPACING_KEYS,
    SPACING_TYPES,
)
from .errors import (
    FlexErrorPayload,
    gap_size_out_of_range,
    invalid_direction,
    invalid_shape,
    spacing_ambiguous_shape,
    spacing_unknown_key,
    spacing_unknown_type,
    unknown_breakpoint_key,
)
from .exceptions import InvalidFlexProps
from .types import Opaque, Scalar, classify_spacing, classify_value


RESPONSIVE_FIELDS = BREAKPOINT_PROPS + ("alignItems", "justifyContent")


def _is_gap_size(value: Any) -> bool:
    return (
        isinstance(value, int)
        and not isinstance(value, bool)
        and GAP_SIZE_MIN <= value <= GAP_SIZE_MAX
    )


def _per_tier(name: str, value: Any, issues: List[FlexErrorPayload]) -> Dict[str, Any]:
    """Retorna {tier: valor} de um campo responsivo, registrando problemas de shape."""
    variant = classify_value(value)
    if variant is None:
        return {}
    if isinstance(variant, Opaque):
        issues.append(
            invalid_shape(prop=name, received=type(value).__name__, expected="scalar | BreakpointMap")
        )
        return {}
    if isinstance(variant, Scalar):
        return {"sm": variant.value}

    unknown = sorted(str(k) for k in variant.values if k not in BREAKPOINT_KEYS)
    if unknown:
        issues.append(unknown_breakpoint_key(prop=name, keys=unknown))
    return {k: v for k, v in variant.values.items() if k in BREAKPOINT_KEYS and v is not None}


def _check_definition(
    definition: Any,
    breakpoint: Optional[str],
    issues: List[FlexErrorPayload],
) -> None:
    if not isinstance(definition, Mapping):
        issues.append(
            invalid_shape(
                prop="spacing",
                received=type(definition).__name__,
                expected="SpacingDefinition",
            )
        )
        return

    unknown = sorted(str(k) for k in definition if k not in SPACING_KEYS)
    if unknown:
        issues.append(spacing_unknown_key(keys=unknown, breakpoint=breakpoint))

    for key in SPACING_KEYS:
        size = definition.get(key)
        if size is not None and not _is_gap_size(size):
            issues.append(
                gap_size_out_of_range(
                    prop="spacing",
                    value=size,
                    breakpoint=breakpoint,
                    side=key,
                    minimum=GAP_SIZE_MIN,
                    maximum=GAP_SIZE_MAX,
                )
            )


def _check_spacing(value: Any, issues: List[FlexErrorPayload]) -> None:
    variant = classify_spacing(value)
    if variant is None:
        return

    if isinstance(variant, Opaque):
        issues.append(
            invalid_shape(
                prop="spacing",
                received=type(value).__name__,
                expected="GapSize | SpacingDefinition | BreakpointMap",
            )
        )
        return

    if isinstance(variant, Scalar):
        if isinstance(variant.value, Mapping):
            _check_definition(variant.value, "sm", issues)
        elif not _is_gap_size(variant.value):
            issues.append(
                gap_size_out_of_range(
                    prop="spacing",
                    value=variant.value,
                    breakpoint="sm",
                    side="all",
                    minimum=GAP_SIZE_MIN,
                    maximum=GAP_SIZE_MAX,
                )
            )
        return

    bp_keys = [k for k in BREAKPOINT_KEYS if k in variant.values]
    spacing_keys = [k for k in SPACING_KEYS if k in variant.values]
    if spacing_keys:
        issues.append(spacing_ambiguous_shape(breakpoint_keys=bp_keys, spacing_keys=spacing_keys))

    unknown = sorted(
        str(k) for k in variant.values if k not in BREAKPOINT_KEYS and k not in SPACING_KEYS
    )
    if unknown:
        issues.append(unknown_breakpoint_key(prop="spacing", keys=unknown))

    for bp in bp_keys:
        definition = variant.values[bp]
        if definition is not None:
            _check_definition(definition, bp, issues)


def validate_props(props: Mapping[str, Any]) -> List[FlexErrorPayload]:
    """
    Inspeciona um prop bag (bruto ou normalizado) e lista os problemas.

    Args:
        props (Mapping[str, Any]): Props do Flex.

    Returns:
        List[FlexErrorPayload]: Problemas encontrados, em ordem de detecção
        (lista vazia quando as props são válidas).
    """
    issues: List[FlexErrorPayload] = []

    for name in RESPONSIVE_FIELDS:
        tiers = _per_tier(name, props.get(name), issues)

        if name == "gap":
            for bp, size in tiers.items():
                if not _is_gap_size(size):
                    issues.append(
                        gap_size_out_of_range(
                            prop="gap",
                            value=size,
                            breakpoint=bp,
                            minimum=GAP_SIZE_MIN,
                            maximum=GAP_SIZE_MAX,
                        )
                    )

        if name == "direction":
            for bp, direction in tiers.items():
                if direction not in FLEX_DIRECTIONS:
                    issues.append(
                        invalid_direction(value=direction, breakpoint=bp, allowed=list(FLEX_DIRECTIONS))
                    )

    _check_spacing(props.get("spacing"), issues)

    kind = props.get("type")
    if kind is not None and kind not in SPACING_TYPES:
        issues.append(spacing_unknown_type(value=kind, allowed=list(SPACING_TYPES)))

    return issues


def ensure_valid_props(props: Mapping[str, Any]) -> Mapping[str, Any]:
    """
    Variante estrita: retorna as props inalteradas ou levanta `InvalidFlexProps`.

    Raises:
        InvalidFlexProps: Se `validate_props` encontrar ao menos um problema.
    """
    issues = validate_props(props)
    if issues:
        raise InvalidFlexProps(
            message=f"Props do Flex inválidas ({len(issues)} problema(s))",
            details={"types": [issue.type for issue in issues]},
            hint="Corrija as props indicadas ou desative validation.strict.",
            issues=[issue.to_dict() for issue in issues],
        )
    return props
