# src/flexstyle/core/config/merge.py
"""
Deep-merge das configurações do FlexStyle.

Aplica overrides locais (ex.: `flexstyle.local.yaml`) sobre os defaults
embutidos ou sobre um arquivo de defaults do projeto. Casos típicos:

    - `{"stylesheet": {"indent": 4}}` troca só a indentação e preserva
      `stylesheet.selector_prefix`
    - `{"validation": {"strict": True}}` liga o modo estrito sem tocar
      em `tokens` nem `spacing`
    - `{"tokens": "compact"}` é conflito: uma seção não vira escalar

Política de merge (v1):
    - dict → merge recursivo por chave
    - list → sobrescrita total (sem merge elemento a elemento)
    - escalar → sobrescrita direta, desde que o tipo seja o mesmo
    - conflito de tipos → `ConfigTypeConflictError`

Invariantes:
    - Nenhum input é mutado; o resultado é sempre uma cópia nova
    - Chaves desconhecidas do override são adicionadas como vieram
"""

from copy import deepcopy
from typing import Any, Dict

from .errors import ConfigTypeConflictError


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Combina `override` sobre `base` seguindo a política do módulo.

    Args:
        base (Dict[str, Any]): Configuração base (ex.: `DEFAULT_CONFIG`).
        override (Dict[str, Any]): Overrides explícitos (ex.: YAML local).

    Returns:
        Dict[str, Any]: Configuração efetiva.

    Raises:
        ConfigTypeConflictError: Se uma chave mudar de tipo entre base e override
            (ex.: `validation.strict` como `"yes"` em vez de bool).
    """

    if not isinstance(base, dict) or not isinstance(override, dict):
        raise ConfigTypeConflictError(
            f"Deep-merge requer dicts no nível raiz, recebido: "
            f"{type(base).__name__} vs {type(override).__name__}"
        )

    merged: Dict[str, Any] = deepcopy(base)

    for key, value in override.items():
        current = merged.get(key)
        if key not in merged or isinstance(value, list):
            merged[key] = deepcopy(value)
        elif isinstance(current, dict) and isinstance(value, dict):
            merged[key] = deep_merge(current, value)
        elif type(current) is not type(value):
            raise ConfigTypeConflictError(
                f"Conflito de tipo na chave '{key}': "
                f"{type(current).__name__} vs {type(value).__name__}"
            )
        else:
            merged[key] = deepcopy(value)

    return merged
