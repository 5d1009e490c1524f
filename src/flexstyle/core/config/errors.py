# src/flexstyle/core/config/errors.py
"""
Exceções canônicas da camada de configuração do FlexStyle.

As exceções aqui definidas representam **violações estruturais
explícitas** da configuração, e não erros de resolução de estilos.

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - Nenhuma exceção representa erro de shape de props
"""


class ConfigError(Exception):
    """
    Exceção base para erros relacionados à configuração do FlexStyle.

    Todas as exceções levantadas durante carregamento, merge e leitura
    tipada da configuração devem herdar desta classe.
    """


class DefaultsNotFoundError(ConfigError):
    """
    Exceção levantada quando um arquivo de defaults explicitamente
    informado não é encontrado no caminho especificado.

    Decisões arquiteturais:
        - Quando nenhum caminho é informado, os defaults embutidos são usados
        - Um caminho informado e inexistente é erro, nunca fallback
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    Exceção levantada quando o formato do arquivo de configuração
    não é suportado pelo loader.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)
    """


class InvalidConfigRootTypeError(ConfigError):
    """
    Exceção levantada quando o conteúdo raiz da configuração
    não é um dicionário (`dict`).
    """


class ConfigTypeConflictError(ConfigError):
    """
    Exceção levantada quando ocorre conflito de tipos durante o deep-merge.

    Exemplo de conflito:
        - base:     {"tokens": {"gap_template": "var(--gap-size-{size})"}}
        - override: {"tokens": "compact"}

    Invariantes:
        - Nenhum merge parcial é produzido em caso de conflito
    """


class InvalidConfigValueError(ConfigError):
    """
    Exceção levantada quando uma opção conhecida possui valor inválido
    (ex.: `spacing.default_type` fora de padding/margin, ou
    `tokens.gap_template` sem o placeholder `{size}`).
    """
