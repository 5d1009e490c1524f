# src/flexstyle/__init__.py
"""
FlexStyle - resolução responsiva de estilos para um primitivo de layout Flex.

Este pacote raiz define o namespace público do FlexStyle, um pipeline de
duas etapas que transforma um prop bag em declarações CSS por breakpoint.

Princípios centrais:
    - Normalização: props heterogêneas viram mapas canônicos por breakpoint
    - Resolução: cada tier (sm, md, lg) produz um conjunto plano de declarações
    - Funções puras, determinísticas e reentrantes
    - Permissivo por contrato: shapes desconhecidos degradam sem exceção

Arquitetura em alto nível:
    - core.normalize  → normalize_props
    - core.resolve    → style_flex, style_spacing, gap_size, resolve_all
    - core.stylesheet → montagem com regra base e media queries
    - core.validation → validador estrito opcional (diagnóstico)
    - core.config     → carregamento, merge e hashing de configuração
    - notebook_ui     → apresentação em notebooks

Limites explícitos:
    - Não monta componentes nem injeta CSS em runtime de UI
    - Não calcula layout (delegado ao ambiente de renderização)
"""

from .core.constants import BREAKPOINT_LG, BREAKPOINT_MD, MEDIA_MIN_LG, MEDIA_MIN_MD
from .core.normalize import normalize_props
from .core.resolve import gap_size, resolve_all, style_flex, style_spacing
from .core.stylesheet import FlexStylesheet, build_stylesheet, render_flex_css
from .core.types import Breakpoint
from .core.validation import ensure_valid_props, validate_props

__all__ = [
    "BREAKPOINT_MD",
    "BREAKPOINT_LG",
    "MEDIA_MIN_MD",
    "MEDIA_MIN_LG",
    "Breakpoint",
    "normalize_props",
    "style_flex",
    "style_spacing",
    "gap_size",
    "resolve_all",
    "FlexStylesheet",
    "build_stylesheet",
    "render_flex_css",
    "validate_props",
    "ensure_valid_props",
]
