"""
FlexStyle - Canonical Error Structures (v1)

Este módulo define o padrão canônico de erros do validador de props do
FlexStyle. Erros são artefatos de diagnóstico e devem ser:

- explícitos
- serializáveis
- acionáveis

O core (normalize/resolve) não produz estes payloads: ele degrada
silenciosamente. Apenas `core.validation` os emite.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class FlexErrorPayload:
    """
    Payload canônico de erro do FlexStyle.

    Campos:
    - type: código estável do erro (não é texto livre)
    - message: mensagem curta, humana e objetiva
    - details: dados estruturados relevantes para diagnóstico
    - hint: ação sugerida ao desenvolvedor (onde corrigir)
    """

    type: str
    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de erro (v1)
# ---------------------------------------------------------------------------

PROP_UNKNOWN_BREAKPOINT_KEY = "PROP_UNKNOWN_BREAKPOINT_KEY"
PROP_INVALID_SHAPE = "PROP_INVALID_SHAPE"
PROP_INVALID_DIRECTION = "PROP_INVALID_DIRECTION"
GAP_SIZE_OUT_OF_RANGE = "GAP_SIZE_OUT_OF_RANGE"
SPACING_UNKNOWN_KEY = "SPACING_UNKNOWN_KEY"
SPACING_AMBIGUOUS_SHAPE = "SPACING_AMBIGUOUS_SHAPE"
SPACING_UNKNOWN_TYPE = "SPACING_UNKNOWN_TYPE"


# ---------------------------------------------------------------------------
# Helpers de fábrica
# ---------------------------------------------------------------------------

def unknown_breakpoint_key(
    *,
    prop: str,
    keys: List[str],
    hint: str = "Use apenas as chaves sm, md e lg em mapas de breakpoint.",
) -> FlexErrorPayload:
    return FlexErrorPayload(
        type=PROP_UNKNOWN_BREAKPOINT_KEY,
        message="Mapa de breakpoint contém chaves desconhecidas",
        details={"prop": prop, "keys": keys},
        hint=hint,
    )


def invalid_shape(
    *,
    prop: str,
    received: str,
    expected: str,
    hint: str = "Informe um valor simples ou um mapa por breakpoint.",
) -> FlexErrorPayload:
    return FlexErrorPayload(
        type=PROP_INVALID_SHAPE,
        message="Shape de prop não reconhecido (será ignorado)",
        details={"prop": prop, "received": received, "expected": expected},
        hint=hint,
    )


def invalid_direction(
    *,
    value: Any,
    breakpoint: Optional[str],
    allowed: List[str],
) -> FlexErrorPayload:
    return FlexErrorPayload(
        type=PROP_INVALID_DIRECTION,
        message="Valor de direction fora das palavras-chave de flex-direction",
        details={"value": value, "breakpoint": breakpoint, "allowed": allowed},
        hint="Use row, row-reverse, column ou column-reverse.",
    )


def gap_size_out_of_range(
    *,
    prop: str,
    value: Any,
    breakpoint: Optional[str] = None,
    side: Optional[str] = None,
    minimum: int = 0,
    maximum: int = 6,
) -> FlexErrorPayload:
    return FlexErrorPayload(
        type=GAP_SIZE_OUT_OF_RANGE,
        message="Tamanho fora da escala de gap",
        details={
            "prop": prop,
            "value": value,
            "breakpoint": breakpoint,
            "side": side,
            "range": [minimum, maximum],
        },
        hint=f"Use um inteiro entre {minimum} e {maximum}.",
    )


def spacing_unknown_key(
    *,
    keys: List[str],
    breakpoint: Optional[str] = None,
) -> FlexErrorPayload:
    return FlexErrorPayload(
        type=SPACING_UNKNOWN_KEY,
        message="SpacingDefinition contém chaves desconhecidas (ignoradas)",
        details={"keys": keys, "breakpoint": breakpoint},
        hint="Chaves válidas: all, horizontal, vertical, top, right, bottom, left.",
    )


def spacing_ambiguous_shape(*, breakpoint_keys: List[str], spacing_keys: List[str]) -> FlexErrorPayload:
    return FlexErrorPayload(
        type=SPACING_AMBIGUOUS_SHAPE,
        message="spacing mistura chaves de breakpoint com chaves de SpacingDefinition",
        details={"breakpoint_keys": breakpoint_keys, "spacing_keys": spacing_keys},
        hint=(
            "O objeto é tratado como mapa por breakpoint e as chaves de "
            "SpacingDefinition no nível raiz são ignoradas. Aninhe a definição "
            "sob um tier explícito (ex.: {sm: {all: 2}})."
        ),
    )


def spacing_unknown_type(*, value: Any, allowed: List[str]) -> FlexErrorPayload:
    return FlexErrorPayload(
        type=SPACING_UNKNOWN_TYPE,
        message="Tipo de espaçamento desconhecido",
        details={"value": value, "allowed": allowed},
        hint="Use type='padding' ou type='margin'.",
    )
