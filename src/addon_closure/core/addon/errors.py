"""Erros canônicos do domínio de AddonConfig (Addon Closure).

A árvore de overrides do addon raiz é a entrada de maior precedência na
resolução do grafo. Falhas de carregamento/validação devem produzir erros
explícitos e estáveis, nunca um grafo silenciosamente incorreto.
"""


class AddonConfigError(Exception):
    """Erro base do domínio de AddonConfig."""


class AddonConfigFileNotFoundError(AddonConfigError):
    """Arquivo de AddonConfig não existe no caminho informado."""


class UnsupportedAddonConfigFormatError(AddonConfigError):
    """Formato não suportado (v1: YAML/JSON)."""


class AddonConfigParseError(AddonConfigError):
    """Falha ao parsear YAML/JSON."""


class AddonConfigValidationError(AddonConfigError):
    """AddonConfig não é estruturalmente válido."""
