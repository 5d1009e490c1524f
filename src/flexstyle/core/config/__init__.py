# src/flexstyle/core/config/__init__.py

"""
Camada de configuração do FlexStyle.

Este pacote contém as estruturas e utilitários responsáveis por carregar,
mesclar e identificar a configuração de renderização de estilos.

A configuração no FlexStyle é:
    - declarativa
    - determinística
    - separada das props do componente

Responsabilidades do pacote:
    - Carregamento de arquivos de configuração (defaults + overrides locais)
    - Resolução de configuração final via deep-merge determinístico
    - Geração de hash canônico (configuração e props)
    - Exposição tipada das opções efetivas (`StyleSettings`)

Invariantes:
    - A configuração final é um dicionário puro (dict)
    - Conflitos estruturais são tratados como erro

Limites explícitos:
    - Não altera os limiares de breakpoint (constantes fixas)
    - Não resolve estilos
"""

from .defaults import DEFAULT_CONFIG
from .loader import load_config
from .settings import StyleSettings

__all__ = ["DEFAULT_CONFIG", "load_config", "StyleSettings"]
