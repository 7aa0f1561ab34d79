"""Addon Closure — AddonConfig (core).

Árvore de overrides declarada pelo chamador para o addon raiz:
 - parsing (YAML/JSON)
 - validação estrutural
 - navegação (iteração e busca por offering)
"""

from .errors import (  # noqa: F401
    AddonConfigError,
    AddonConfigFileNotFoundError,
    AddonConfigParseError,
    AddonConfigValidationError,
    UnsupportedAddonConfigFormatError,
)

from .loader import load_addon_config  # noqa: F401
from .schema import AddonConfig  # noqa: F401
