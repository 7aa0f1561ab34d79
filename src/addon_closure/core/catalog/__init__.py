"""Addon Closure — Catálogo (core).

Fronteira com o catálogo de offerings:
 - tipos de metadados (offering, versão, dependência declarada)
 - contrato do gateway (`CatalogGateway`)
 - gateway estático em memória e loader YAML/JSON
 - restrições de versão
"""

from .constraints import parse_version, satisfies, to_specifier_set  # noqa: F401
from .errors import (  # noqa: F401
    CatalogError,
    CatalogFileNotFoundError,
    CatalogParseError,
    CatalogValidationError,
    NoMatchingVersionError,
    OfferingNotFoundError,
    UnsupportedCatalogFormatError,
)
from .gateway import CatalogGateway  # noqa: F401
from .loader import load_catalog  # noqa: F401
from .schema import parse_catalog  # noqa: F401
from .static import StaticCatalogGateway  # noqa: F401
from .types import OfferingMetadata, OfferingVersion, SolutionDependency  # noqa: F401
