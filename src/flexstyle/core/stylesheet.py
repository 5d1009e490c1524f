# src/flexstyle/core/stylesheet.py
"""
Montagem de stylesheets responsivos do Flex.

Este módulo é a camada que o componente hospedeiro chama por renderização:
normaliza as props uma única vez, resolve os três tiers e envolve cada
resultado na regra correspondente.

Estrutura do CSS gerado:
    - sm → regra base do seletor (sempre presente, contém `display: flex;`)
    - md → bloco `@media (min-width: 980px)`, omitido quando vazio
    - lg → bloco `@media (min-width: 1280px)`, omitido quando vazio

Seletor:
    - Quando não informado, é derivado do hash das props normalizadas:
      `.<prefix>-<8 primeiros hex>`; props equivalentes geram a mesma classe.

Decisões arquiteturais:
    - O resolvedor permanece puro; logs e warnings só existem aqui,
      e apenas quando um `StyleContext` é fornecido
    - Em modo estrito a validação falha antes de qualquer resolução
    - Em modo permissivo problemas de validação viram warnings no contexto

Limites explícitos:
    - Não injeta o CSS em nenhum runtime de UI
    - Não decide quando o stylesheet é aplicado
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional

from .config.hashing import compute_props_hash
from .config.settings import StyleSettings
from .context import StyleContext
from .exceptions import InvalidFlexProps
from .normalize import normalize_props
from .resolve import style_flex
from .types import BREAKPOINTS, Breakpoint
from .validation import ensure_valid_props, validate_props


@dataclass(frozen=True)
class FlexStylesheet:
    """
    Resultado da montagem (apenas apresentação).

    Campos:
    - selector: seletor usado na regra base e nos blocos de media query
    - rules: declarações por tier ("sm", "md", "lg"), possivelmente vazias
    - css: texto CSS final
    - props_hash: hash SHA-256 das props normalizadas
    """

    selector: str
    rules: Dict[str, str]
    css: str
    props_hash: str


def _indent(text: str, width: int) -> str:
    pad = " " * width
    return "\n".join(pad + line for line in text.splitlines())


def _rule(selector: str, declarations: str, width: int) -> str:
    return f"{selector} {{\n{_indent(declarations, width)}\n}}"


def assemble_css(selector: str, rules: Mapping[str, str], *, indent: int = 2) -> str:
    """Envolve as declarações por tier na regra base e nos blocos de media query."""
    blocks: List[str] = []
    for bp in BREAKPOINTS:
        declarations = rules.get(bp.value, "")
        if bp is Breakpoint.SM:
            blocks.append(_rule(selector, declarations, indent))
            continue
        if not declarations:
            continue
        inner = _rule(selector, declarations, indent)
        blocks.append(f"{bp.media_query} {{\n{_indent(inner, indent)}\n}}")
    return "\n".join(blocks)


def _run_validation(
    props: Mapping[str, Any],
    settings: StyleSettings,
    ctx: Optional[StyleContext],
) -> None:
    if settings.strict:
        try:
            ensure_valid_props(props)
        except InvalidFlexProps as exc:
            if ctx is not None:
                ctx.log(step="validate", level="ERROR", message=exc.message, issues=exc.issues)
            raise
        return

    if ctx is None:
        return

    issues = validate_props(props)
    for issue in issues:
        ctx.add_warning(step="validate", message=f"{issue.type}: {issue.message}")
    ctx.log(step="validate", level="DEBUG", message="validação permissiva concluída", issues=len(issues))


def build_stylesheet(
    props: Mapping[str, Any],
    *,
    selector: Optional[str] = None,
    config: Optional[Mapping[str, Any]] = None,
    ctx: Optional[StyleContext] = None,
) -> FlexStylesheet:
    """
    Normaliza, resolve e monta o stylesheet completo de um Flex.

    Args:
        props (Mapping[str, Any]): Prop bag bruto do componente.
        selector (Optional[str]): Seletor explícito; derivado do hash quando None.
        config (Optional[Mapping[str, Any]]): Configuração efetiva (ver `load_config`).
        ctx (Optional[StyleContext]): Contexto para eventos e warnings.

    Returns:
        FlexStylesheet: Declarações por tier e CSS montado.

    Raises:
        InvalidFlexProps: Em modo estrito, se as props forem inválidas.
        ConfigError: Se a configuração possuir valores inválidos.
    """
    settings = StyleSettings.from_config(config)

    _run_validation(props, settings, ctx)

    normalized = normalize_props(props)
    if normalized.get("type") is None:
        normalized["type"] = settings.default_spacing_type
    if ctx is not None:
        ctx.log(
            step="normalize",
            level="DEBUG",
            message="props normalizadas",
            fields=sorted(str(k) for k in normalized),
        )

    props_hash = compute_props_hash(normalized)
    if selector is None:
        selector = f".{settings.selector_prefix}-{props_hash[:8]}"

    rules: Dict[str, str] = {}
    for bp in BREAKPOINTS:
        rules[bp.value] = style_flex(bp, normalized, template=settings.gap_template)
        if ctx is not None:
            count = len(rules[bp.value].splitlines())
            ctx.log(step=f"resolve.{bp.value}", level="DEBUG", message="tier resolvido", declarations=count)

    css = assemble_css(selector, rules, indent=settings.indent)

    if ctx is not None:
        ctx.log(
            step="stylesheet",
            level="INFO",
            message="stylesheet montado",
            selector=selector,
            props_hash=props_hash,
            config_hash=settings.config_hash,
        )

    return FlexStylesheet(selector=selector, rules=rules, css=css, props_hash=props_hash)


def render_flex_css(props: Mapping[str, Any], **kwargs: Any) -> str:
    """Atalho: retorna apenas o texto CSS de `build_stylesheet`."""
    return build_stylesheet(props, **kwargs).css
