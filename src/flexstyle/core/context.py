# src/flexstyle/core/context.py
"""
StyleContext - contexto canônico de uma renderização do FlexStyle.

Este módulo define o **StyleContext**, a estrutura opcional passada à
montagem de stylesheets para registrar o que aconteceu em uma
renderização.

O StyleContext é o **único meio** de:
- registro de logs estruturados (eventos) da renderização
- coleta de warnings não fatais (ex.: problemas de validação em modo permissivo)
- acesso à configuração efetiva usada

Princípios fundamentais:
- Isolamento por renderização (cada chamada possui seu próprio contexto)
- Nenhum logger global: eventos ficam no próprio contexto
- As funções puras do core (normalize/resolve) nunca recebem contexto
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
from uuid import uuid4


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass
class StyleContext:
    """
    Contexto de uma renderização de stylesheet.

    Campos canônicos:
    - render_id: identificador único da renderização
    - created_at: timestamp UTC de criação do contexto
    - config: configuração efetiva (defaults + local deep-merge)
    - warnings: warnings por etapa (normalize, validate, resolve.<tier>, ...)
    - events: log estruturado de eventos
    """

    render_id: str
    created_at: str
    config: Dict[str, Any] = field(default_factory=dict)

    warnings: Dict[str, List[str]] = field(default_factory=dict)
    events: List[Dict[str, Any]] = field(default_factory=list)

    @classmethod
    def new(cls, config: Optional[Dict[str, Any]] = None) -> "StyleContext":
        return cls(
            render_id=str(uuid4()),
            created_at=datetime.now(timezone.utc).isoformat(),
            config=dict(config or {}),
        )

    # -----------------------------
    # Logging & warnings
    # -----------------------------
    def log(self, *, step: str, level: str, message: str, **extra: Any) -> None:
        if level not in LOG_LEVELS:
            raise ValueError(f"level must be one of {LOG_LEVELS}, got: {level!r}")
        event = {
            "render_id": self.render_id,
            "step": step,
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)

    def add_warning(self, *, step: str, message: str) -> None:
        if step not in self.warnings:
            self.warnings[step] = []
        self.warnings[step].append(message)

    def events_for(self, step: str) -> List[Dict[str, Any]]:
        return [e for e in self.events if e["step"] == step]
