"""
FlexStyle - Canonical Exceptions (v1)

Este módulo define exceções tipadas internas do FlexStyle.

Objetivo:
- Permitir que o validador estrito e a camada de montagem levantem
  exceções semânticas tipadas
- Facilitar o mapeamento determinístico para FlexErrorPayload
- Evitar ValueError/RuntimeError genéricos em guardrails de contrato

Regras:
- O core (normalize/resolve) nunca levanta exceções por shape de props.
- Exceções devem carregar apenas dados estruturados (serializáveis).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class FlexStyleException(Exception):
    """Base class para exceções internas do FlexStyle.

    Importante:
    - Sempre carregar dados estruturados em `details`
    - Mensagem deve ser curta e humana
    """

    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None

    def __str__(self) -> str:  # pragma: no cover
        return self.message


# ---------------------------------------------------------------------------
# Contrato do chamador
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class UnknownBreakpointError(FlexStyleException, ValueError):
    """Tag de breakpoint fora de {sm, md, lg}."""


# ---------------------------------------------------------------------------
# Validação estrita (wrapper opcional)
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class InvalidFlexProps(FlexStyleException):
    """Props rejeitadas pelo validador estrito.

    `issues` carrega os payloads (`FlexErrorPayload.to_dict()`) de todas
    as violações encontradas, na ordem em que foram detectadas.
    """

    issues: List[Dict[str, Any]] = field(default_factory=list)
