"""Loader canônico de catálogo estático (YAML/JSON).

Notas:
- YAML é preferencial, JSON é alternativo.
- O formato é inferido pela extensão do arquivo.
"""

from __future__ import annotations

import json
from pathlib import Path

import yaml

from .errors import (
    CatalogFileNotFoundError,
    CatalogParseError,
    UnsupportedCatalogFormatError,
)
from .static import StaticCatalogGateway


def load_catalog(*, path: str, install_kind: str = "terraform") -> StaticCatalogGateway:
    """Carrega um catálogo de arquivo e devolve um gateway em memória.

    Raises:
        CatalogFileNotFoundError: se arquivo não existir.
        UnsupportedCatalogFormatError: se extensão não suportada.
        CatalogParseError: se parsing falhar ou o arquivo estiver vazio.
        CatalogValidationError: se o documento for estruturalmente inválido.
    """
    p = Path(path)
    if not p.exists():
        raise CatalogFileNotFoundError(f"catalog file not found: {p}")

    suffix = p.suffix.lower()
    raw = p.read_text(encoding="utf-8")

    try:
        if suffix in {".yml", ".yaml"}:
            data = yaml.safe_load(raw)
        elif suffix == ".json":
            data = json.loads(raw)
        else:
            raise UnsupportedCatalogFormatError(f"unsupported catalog format: {suffix}")
    except UnsupportedCatalogFormatError:
        raise
    except Exception as e:
        raise CatalogParseError(str(e) or "failed to parse catalog") from e

    if data is None:
        raise CatalogParseError("catalog file is empty")

    return StaticCatalogGateway.from_dict(data, install_kind=install_kind)
