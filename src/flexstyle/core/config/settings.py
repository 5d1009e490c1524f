# src/flexstyle/core/config/settings.py
"""
Leitura tipada da configuração efetiva do FlexStyle.

`StyleSettings` é a única ponte entre o dicionário de configuração e os
parâmetros consumidos pela montagem de stylesheets. Chaves ausentes caem
nos defaults embutidos; valores presentes e inválidos são erro.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from ..constants import GAP_SIZE_MIN, SPACING_TYPES
from .defaults import DEFAULT_CONFIG
from .errors import InvalidConfigValueError
from .hashing import compute_config_hash
from .merge import deep_merge


@dataclass(frozen=True)
class StyleSettings:
    """
    Opções efetivas de renderização.

    Campos:
    - gap_template: template do token de escala (deve conter `{size}`)
    - default_spacing_type: padding/margin quando a prop `type` está ausente
    - strict: valida props e falha antes de resolver
    - selector_prefix: prefixo dos nomes de classe gerados
    - indent: espaços de indentação das declarações no CSS montado
    - config_hash: identidade da configuração efetiva
    """

    gap_template: str
    default_spacing_type: str
    strict: bool
    selector_prefix: str
    indent: int
    config_hash: str

    @classmethod
    def from_config(cls, config: Optional[Mapping[str, Any]] = None) -> "StyleSettings":
        effective: Dict[str, Any] = deep_merge(DEFAULT_CONFIG, dict(config or {}))

        gap_template = effective["tokens"]["gap_template"]
        if not isinstance(gap_template, str) or "{size}" not in gap_template:
            raise InvalidConfigValueError(
                f"tokens.gap_template deve conter '{{size}}', recebido: {gap_template!r}"
            )
        try:
            gap_template.format(size=GAP_SIZE_MIN)
        except (KeyError, IndexError, ValueError, TypeError, AttributeError) as exc:
            raise InvalidConfigValueError(
                f"tokens.gap_template só pode usar o campo '{{size}}', recebido: {gap_template!r}"
            ) from exc

        default_type = effective["spacing"]["default_type"]
        if default_type not in SPACING_TYPES:
            raise InvalidConfigValueError(
                f"spacing.default_type deve ser um de {list(SPACING_TYPES)}, recebido: {default_type!r}"
            )

        indent = effective["stylesheet"]["indent"]
        if indent < 0:
            raise InvalidConfigValueError(f"stylesheet.indent deve ser >= 0, recebido: {indent}")

        return cls(
            gap_template=gap_template,
            default_spacing_type=default_type,
            strict=bool(effective["validation"]["strict"]),
            selector_prefix=str(effective["stylesheet"]["selector_prefix"]),
            indent=indent,
            config_hash=compute_config_hash(effective),
        )
