"""Loader canônico de AddonConfig (YAML/JSON).

Notas:
- YAML é preferencial, JSON é alternativo.
- O formato é inferido pela extensão do arquivo.
- O documento pode trazer o addon na raiz ou sob a chave `addon`.
"""

from __future__ import annotations

import json
from pathlib import Path

import yaml

from .errors import (
    AddonConfigFileNotFoundError,
    AddonConfigParseError,
    UnsupportedAddonConfigFormatError,
)
from .schema import AddonConfig


def load_addon_config(*, path: str) -> AddonConfig:
    """Carrega e valida um AddonConfig a partir de YAML/JSON.

    Raises:
        AddonConfigFileNotFoundError: se arquivo não existir.
        UnsupportedAddonConfigFormatError: se extensão não suportada.
        AddonConfigParseError: se parsing falhar ou a raiz não for um mapa.
        AddonConfigValidationError: se a estrutura for inválida.
    """
    p = Path(path)
    if not p.exists():
        raise AddonConfigFileNotFoundError(f"addon config file not found: {p}")

    suffix = p.suffix.lower()
    raw = p.read_text(encoding="utf-8")

    try:
        if suffix in {".yml", ".yaml"}:
            data = yaml.safe_load(raw)
        elif suffix == ".json":
            data = json.loads(raw)
        else:
            raise UnsupportedAddonConfigFormatError(f"unsupported addon config format: {suffix}")
    except UnsupportedAddonConfigFormatError:
        raise
    except Exception as e:
        raise AddonConfigParseError(str(e) or "failed to parse addon config") from e

    if data is None:
        raise AddonConfigParseError("addon config file is empty")

    if not isinstance(data, dict):
        raise AddonConfigParseError("addon config root must be a mapping/dict")

    if "addon" in data and "offering_name" not in data:
        data = data["addon"]

    return AddonConfig.from_dict(data)
