# src/flexstyle/core/normalize.py
"""
Normalizador canônico de props do Flex.

Este módulo converte props heterogêneas na forma canônica por breakpoint,
de modo que o resolvedor de estilos trate um único formato.

Transformações:
    1. Props responsivas simples (gap, direction, grow):
        - `gap=2`            → `gap={"sm": 2}`
        - `direction="row"`  → `direction={"sm": "row"}`
        - mapas já existentes permanecem intactos
    2. spacing (um nível extra de aninhamento):
        - `spacing=3`                 → `{"sm": {"all": 3}}`
        - `spacing={"all": 3}`        → `{"sm": {"all": 3}}`
        - `spacing={"sm": {...}}`     → inalterado

Princípios fundamentais:
    - Função pura: o input nunca é mutado
    - Cópia rasa: objetos aninhados são referenciados, não copiados
    - Nenhuma exceção por shape: formatos desconhecidos são repassados

Invariantes:
    - normalize_props(normalize_props(p)) == normalize_props(p)
    - Campos ausentes continuam ausentes

Limites explícitos:
    - Não valida valores (ver core.validation)
    - Não normaliza alignItems/justifyContent (efetivos apenas em sm)
"""

from __future__ import annotations

from typing import Any, Dict, Mapping

from .constants import BREAKPOINT_PROPS
from .types import Scalar, classify_spacing, classify_value


def normalize_props(props: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Normaliza props do Flex para a forma canônica por breakpoint.

    Política de normalização (v1):
        - escalar em gap/direction/grow → `{"sm": valor}`
        - número em spacing             → `{"sm": {"all": número}}`
        - SpacingDefinition em spacing  → `{"sm": definição}`
        - mapas com chaves sm/md/lg     → inalterados
        - qualquer outro shape          → repassado sem alteração

    Decisões arquiteturais:
        - Um spacing que contenha literalmente `sm`, `md` ou `lg` é tratado
          como já normalizado (heurística por presença de chave)
        - Nenhum erro é levantado; entradas malformadas degradam adiante

    Args:
        props (Mapping[str, Any]): Prop bag bruto passado ao componente.

    Returns:
        Dict[str, Any]: Novo dicionário com as props normalizadas.
    """
    normalized: Dict[str, Any] = dict(props)

    for name in BREAKPOINT_PROPS:
        variant = classify_value(props.get(name))
        if isinstance(variant, Scalar):
            normalized[name] = {"sm": variant.value}

    spacing = classify_spacing(props.get("spacing"))
    if isinstance(spacing, Scalar):
        if isinstance(spacing.value, Mapping):
            normalized["spacing"] = {"sm": spacing.value}
        else:
            normalized["spacing"] = {"sm": {"all": spacing.value}}
    # mapas por breakpoint e shapes opacos seguem inalterados

    return normalized
