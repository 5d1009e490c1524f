# src/flexstyle/core/types.py
"""
Tipos canônicos do pipeline de estilo responsivo do FlexStyle.

Este módulo define as estruturas fundamentais compartilhadas entre o
normalizador de props e o resolvedor de estilos por breakpoint.

Componentes principais:
    - Breakpoint       → enum dos três tiers fixos (sm < md < lg)
    - Scalar           → valor simples, efetivo apenas no tier sm
    - PerBreakpoint    → mapa explícito tier -> valor
    - Opaque           → shape não reconhecido (repassado ou ignorado)
    - classify_value   → decide a variante de um campo responsivo
    - classify_spacing → decide a variante do campo spacing

A detecção de shape acontece **uma única vez** por campo, aqui, e não
espalhada pelo normalizador e pelo resolvedor.

Decisões arquiteturais:
    - Props são dicts simples (prop bag); TypedDicts apenas documentam o shape
    - `None` representa campo ausente
    - A heurística de spacing é por presença de chave (sm/md/lg), não por tag

Invariantes:
    - classify_* nunca levanta exceção para shapes desconhecidos
    - A mesma entrada sempre produz a mesma variante

Limites explícitos:
    - Não valida tipos de valores (ver core.validation)
    - Não gera CSS
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Optional, TypedDict, Union

from .constants import BREAKPOINT_KEYS, BREAKPOINT_LG, BREAKPOINT_MD, MEDIA_MIN_LG, MEDIA_MIN_MD
from .exceptions import UnknownBreakpointError


class Breakpoint(str, Enum):
    """
    Tiers responsivos suportados, em ordem crescente (sm < md < lg).

    Os valores são strings para que possam indexar diretamente os mapas
    de breakpoint das props (`{"sm": ..., "md": ...}`).
    """
    SM = "sm"
    MD = "md"
    LG = "lg"

    @property
    def min_width(self) -> Optional[int]:
        """Limiar em px do tier; sm não possui guarda (regra base)."""
        return _MIN_WIDTHS[self]

    @property
    def media_query(self) -> Optional[str]:
        return _MEDIA_QUERIES[self]


_MIN_WIDTHS: Dict[Breakpoint, Optional[int]] = {
    Breakpoint.SM: None,
    Breakpoint.MD: BREAKPOINT_MD,
    Breakpoint.LG: BREAKPOINT_LG,
}

_MEDIA_QUERIES: Dict[Breakpoint, Optional[str]] = {
    Breakpoint.SM: None,
    Breakpoint.MD: MEDIA_MIN_MD,
    Breakpoint.LG: MEDIA_MIN_LG,
}

BREAKPOINTS = (Breakpoint.SM, Breakpoint.MD, Breakpoint.LG)


def coerce_breakpoint(value: Union[str, Breakpoint]) -> Breakpoint:
    """Converte uma tag ("sm"/"md"/"lg") em `Breakpoint`."""
    if isinstance(value, Breakpoint):
        return value
    try:
        return Breakpoint(value)
    except ValueError:
        raise UnknownBreakpointError(
            message=f"Breakpoint desconhecido: {value!r}",
            details={"breakpoint": value, "allowed": list(BREAKPOINT_KEYS)},
            hint="Use um dos tiers fixos: sm, md ou lg.",
        ) from None


# ---------------------------------------------------------------------------
# Shapes das props (documentação de tipos)
# ---------------------------------------------------------------------------

class SpacingDefinition(TypedDict, total=False):
    """Especificação de espaçamento com prioridade lado > eixo > all."""
    all: int
    horizontal: int
    vertical: int
    top: int
    right: int
    bottom: int
    left: int


class FlexProps(TypedDict, total=False):
    gap: Any
    direction: Any
    grow: Any
    spacing: Any
    alignItems: str
    justifyContent: str
    type: str


# ---------------------------------------------------------------------------
# Variante responsiva
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Scalar:
    """Valor simples; conta como definido apenas no tier sm."""
    value: Any

    def at(self, breakpoint: Breakpoint) -> Any:
        return self.value if breakpoint is Breakpoint.SM else None


@dataclass(frozen=True)
class PerBreakpoint:
    """Mapa explícito tier -> valor; tiers ausentes não herdam de tiers menores."""
    values: Mapping[str, Any]

    def at(self, breakpoint: Breakpoint) -> Any:
        return self.values.get(breakpoint.value)


@dataclass(frozen=True)
class Opaque:
    """Shape não reconhecido: o normalizador repassa, o resolvedor ignora."""
    value: Any

    def at(self, breakpoint: Breakpoint) -> Any:
        return None


ResponsiveValue = Union[Scalar, PerBreakpoint, Opaque]


def is_scalar(value: Any) -> bool:
    return isinstance(value, (str, int, float, bool))


def has_breakpoint_keys(value: Mapping[str, Any]) -> bool:
    return any(key in value for key in BREAKPOINT_KEYS)


def classify_value(value: Any) -> Optional[ResponsiveValue]:
    """
    Classifica um campo responsivo simples (gap, direction, grow, ...).

    Regras:
        - None          → ausente (retorna None)
        - Mapping       → PerBreakpoint (assumido já normalizado)
        - escalar       → Scalar
        - outro objeto  → Opaque
    """
    if value is None:
        return None
    if isinstance(value, Mapping):
        return PerBreakpoint(value)
    if is_scalar(value):
        return Scalar(value)
    return Opaque(value)


def classify_spacing(value: Any) -> Optional[ResponsiveValue]:
    """
    Classifica o campo spacing, que possui um nível extra de aninhamento.

    Regras:
        - None                               → ausente
        - número (int/float, exceto bool)    → Scalar(número)  (equivale a {all: n})
        - Mapping sem nenhuma chave sm/md/lg → Scalar(definição)
        - Mapping com ao menos uma chave     → PerBreakpoint
        - qualquer outra coisa               → Opaque

    Uma SpacingDefinition que contenha literalmente uma chave `sm`, `md`
    ou `lg` é indistinguível de um mapa por breakpoint e é classificada
    como PerBreakpoint. Este é o comportamento esperado pelos chamadores.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return Opaque(value)
    if isinstance(value, (int, float)):
        return Scalar(value)
    if isinstance(value, Mapping):
        if has_breakpoint_keys(value):
            return PerBreakpoint(value)
        return Scalar(value)
    return Opaque(value)
