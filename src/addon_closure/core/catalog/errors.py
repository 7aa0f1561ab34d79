"""Erros canônicos do domínio de catálogo (Addon Closure).

Dois grupos:
- consulta (`OfferingNotFoundError`, `NoMatchingVersionError`), levantados
  pelo gateway e convertidos em `ResolutionError` pelo builder;
- arquivo (`CatalogFileNotFoundError`, `UnsupportedCatalogFormatError`,
  `CatalogParseError`, `CatalogValidationError`), levantados pelo loader.
"""


class CatalogError(Exception):
    """Erro base do domínio de catálogo."""


class OfferingNotFoundError(CatalogError):
    """Offering não existe no catálogo informado."""


class NoMatchingVersionError(CatalogError):
    """Nenhuma versão publicada satisfaz a restrição para o flavor pedido."""


class CatalogFileNotFoundError(CatalogError):
    """Arquivo de catálogo não existe no caminho informado."""


class UnsupportedCatalogFormatError(CatalogError):
    """Formato de catálogo não suportado (v1: YAML/JSON)."""


class CatalogParseError(CatalogError):
    """Falha ao parsear YAML/JSON."""


class CatalogValidationError(CatalogError):
    """Documento de catálogo não é estruturalmente válido."""
