# src/flexstyle/core/__init__.py
"""
Core do FlexStyle.

Este pacote contém a implementação canônica do pipeline de estilos,
independente de qualquer runtime de UI.

O core é projetado para ser:
    - determinístico
    - testável de forma isolada
    - livre de estado compartilhado

Componentes principais:
    - constants  → breakpoints, media queries e tokens de escala
    - types      → Breakpoint e variante responsiva (Scalar/PerBreakpoint/Opaque)
    - normalize  → forma canônica por breakpoint
    - resolve    → declarações CSS por tier
    - stylesheet → regra base + media queries
    - validation → diagnóstico estrito opcional
    - report     → relatório tabular (pandas)

Limites explícitos:
    - Não decide quando estilos são aplicados
    - Não valida props no caminho principal (degradação silenciosa)
"""
