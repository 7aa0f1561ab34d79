# src/addon_closure/core/config/errors.py
"""
Exceções da camada de configuração do Addon Closure.

Todas herdam de `ConfigError`, permitindo captura genérica de falhas de
carregamento, merge e validação das settings sem confundi-las com falhas
de resolução do grafo (`ResolutionError`).
"""


class ConfigError(Exception):
    """Exceção base para erros de configuração."""


class DefaultsNotFoundError(ConfigError):
    """
    Arquivo de defaults informado explicitamente não existe.

    Quando nenhum arquivo é informado, `DEFAULT_CONFIG` embutido é usado;
    um caminho informado e ausente, por outro lado, é sempre erro.
    """


class UnsupportedConfigFormatError(ConfigError):
    """Extensão de arquivo de configuração não suportada (v1: YAML/JSON)."""


class InvalidConfigRootTypeError(ConfigError):
    """Conteúdo raiz do arquivo não é um mapa chave-valor."""


class ConfigTypeConflictError(ConfigError):
    """
    Conflito de tipos durante o deep-merge.

    Exemplo:
        - base:     {"resolution": {"install_kind": "terraform"}}
        - override: {"resolution": "terraform"}
    """


class InvalidSettingsError(ConfigError):
    """Configuração carregada viola o schema das settings (valor fora do domínio)."""
