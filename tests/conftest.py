# tests/conftest.py
"""
Fixtures compartilhados para testes do FlexStyle.

Este módulo define fixtures reutilizáveis que fornecem:
- configurações YAML mínimas e determinísticas (defaults + local)
- prop bags representativos (brutos e já normalizados)
- contexto de renderização controlado (StyleContext)

Decisões arquiteturais:
    - Fixtures são mantidas simples e explícitas
    - Dados retornados são novos a cada teste (sem aliasing entre testes)
    - Imports do core são realizados de forma lazy

Invariantes:
    - Nenhuma fixture realiza I/O
    - Todas as fixtures são seguras para execução em paralelo
"""

import pytest


# =====================================================
# Config fixtures
# =====================================================

@pytest.fixture
def style_config_defaults_yaml() -> str:
    """
    YAML de configuração padrão (defaults) semelhante ao uso real.

    Returns:
        str: Conteúdo YAML representando configuração padrão (defaults).
    """

    return """\
tokens:
  gap_template: "var(--gap-size-{size})"
spacing:
  default_type: padding
validation:
  strict: false
stylesheet:
  selector_prefix: flex
  indent: 2
"""


@pytest.fixture
def style_config_local_yaml() -> str:
    """
    YAML de configuração local (override).

    Representa apenas overrides locais: troca o template de token e
    ativa o modo estrito.

    Returns:
        str: Conteúdo YAML representando configuração local de override.
    """

    return """\
tokens:
  gap_template: "var(--space-{size})"
validation:
  strict: true
"""


# =====================================================
# Props fixtures
# =====================================================

@pytest.fixture
def raw_props() -> dict:
    """
    Prop bag bruto com todos os shapes aceitos misturados.

    - gap escalar
    - direction já por breakpoint
    - grow escalar
    - spacing como SpacingDefinition simples
    """
    return {
        "gap": 2,
        "direction": {"sm": "column", "md": "row"},
        "grow": 1,
        "spacing": {"all": 1, "horizontal": 2},
        "alignItems": "center",
        "justifyContent": "space-between",
    }


@pytest.fixture
def responsive_props() -> dict:
    """Props já normalizadas com overrides em md e lg."""
    return {
        "gap": {"sm": 1, "md": 3, "lg": 0},
        "direction": {"sm": "column", "md": "row"},
        "spacing": {"md": {"horizontal": 2}, "lg": {"all": 4, "top": 6}},
        "type": "margin",
    }


@pytest.fixture
def style_ctx():
    """StyleContext determinístico para testes de eventos e warnings."""
    from flexstyle.core.context import StyleContext

    return StyleContext(
        render_id="render-test-001",
        created_at="2026-01-16T00:00:00+00:00",
        config={"validation": {"strict": False}},
    )
