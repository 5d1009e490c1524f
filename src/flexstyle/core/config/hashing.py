# src/flexstyle/core/config/hashing.py
"""
Hashing canônico do FlexStyle.

Este módulo gera hashes determinísticos de estruturas de dicionário:
    - a configuração efetiva (identidade de uma renderização)
    - as props normalizadas (base dos nomes de classe gerados)

Política de hashing (v1):
    - Serialização JSON canônica (chaves ordenadas, separadores compactos)
    - Codificação UTF-8
    - SHA-256

Invariantes:
    - Estruturas equivalentes produzem o mesmo hash, independente da
      ordem original das chaves
    - O valor gerado é sempre uma string hexadecimal de 64 caracteres
"""


import json
import hashlib
from typing import Any, Dict, Mapping


def _string_keys(payload: Any) -> Any:
    # sort_keys exige chaves comparáveis entre si; props podem misturar int e str
    if isinstance(payload, Mapping):
        return {str(key): _string_keys(value) for key, value in payload.items()}
    if isinstance(payload, (list, tuple)):
        return [_string_keys(item) for item in payload]
    return payload


def _canonical_json(payload: Any) -> str:
    # default=str: props podem carregar valores não-JSON (ex.: children)
    return json.dumps(
        payload,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
        default=str,
    )


def compute_config_hash(config: Dict[str, Any]) -> str:
    """
    Gera um hash determinístico da configuração efetiva.

    Args:
        config (Dict[str, Any]): Configuração efetiva.

    Returns:
        str: Hash SHA-256 hexadecimal da configuração.

    Raises:
        TypeError: Se o objeto fornecido não for um dicionário.
    """

    if not isinstance(config, dict):
        raise TypeError(
            f"Config para hashing deve ser dict, recebido: {type(config).__name__}"
        )

    return hashlib.sha256(_canonical_json(config).encode("utf-8")).hexdigest()


def compute_props_hash(props: Mapping[str, Any]) -> str:
    """
    Gera um hash determinístico de um prop bag (normalizado ou não).

    Usado para derivar nomes de classe estáveis: props equivalentes
    produzem o mesmo seletor. Chaves não-string (ex.: `{"sm": 1, 1: 2}`)
    são convertidas com `str()` antes da serialização, então o hash nunca
    falha por causa do shape das props.
    """
    if not isinstance(props, Mapping):
        raise TypeError(
            f"Props para hashing devem ser Mapping, recebido: {type(props).__name__}"
        )

    return hashlib.sha256(_canonical_json(_string_keys(props)).encode("utf-8")).hexdigest()
