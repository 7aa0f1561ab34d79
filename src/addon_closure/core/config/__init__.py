# src/addon_closure/core/config/__init__.py
"""
Camada de configuração do Addon Closure.

A configuração é declarativa e determinística: um dicionário puro composto
por deep-merge (defaults embutidos ← arquivo de defaults ← overrides locais),
validado em `ClosureSettings` e identificado por um hash canônico.

Limites explícitos:
    - Não contém lógica de resolução de grafo
    - Não depende de rede, UI ou variáveis de ambiente
"""

from .errors import (  # noqa: F401
    ConfigError,
    ConfigTypeConflictError,
    DefaultsNotFoundError,
    InvalidConfigRootTypeError,
    InvalidSettingsError,
    UnsupportedConfigFormatError,
)
from .hashing import compute_config_hash  # noqa: F401
from .loader import load_config, load_settings  # noqa: F401
from .merge import deep_merge  # noqa: F401
from .settings import DEFAULT_CONFIG, ClosureSettings, RequiredPolicy  # noqa: F401
