"""
Gateway de catálogo em memória.

Implementa `CatalogGateway` sobre um conjunto fixo de `OfferingMetadata`,
sem rede. Resolve restrições de versão localmente: entre as versões do
offering com o flavor pedido (e o install kind configurado), escolhe a
maior que satisfaz a restrição.

Invariantes:
    - Mesma entrada → mesma versão resolvida
    - Nenhuma chamada altera o estado do gateway
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Optional, Tuple

from .constraints import parse_version, satisfies
from .errors import NoMatchingVersionError, OfferingNotFoundError
from .schema import catalog_to_dict, parse_catalog
from .types import OfferingMetadata, OfferingVersion


class StaticCatalogGateway:
    """Gateway somente leitura indexado por `(catalog_id, offering_id)`."""

    def __init__(self, offerings: Iterable[OfferingMetadata], *, install_kind: str = "terraform") -> None:
        self._offerings: Dict[Tuple[str, str], OfferingMetadata] = {}
        for o in offerings:
            self._offerings[(o.catalog_id, o.offering_id)] = o
        self.install_kind = install_kind
        self.calls: list = []

    @classmethod
    def from_dict(cls, data: Dict[str, Any], *, install_kind: str = "terraform") -> "StaticCatalogGateway":
        return cls(parse_catalog(data), install_kind=install_kind)

    def to_dict(self) -> Dict[str, Any]:
        return catalog_to_dict(list(self._offerings.values()))

    def get_offering_metadata(self, catalog_id: str, offering_id: str) -> OfferingMetadata:
        self.calls.append(("get_offering_metadata", catalog_id, offering_id))
        try:
            return self._offerings[(catalog_id, offering_id)]
        except KeyError:
            raise OfferingNotFoundError(f"offering not found: {catalog_id}/{offering_id}") from None

    def resolve_version(
        self,
        catalog_id: str,
        offering_id: str,
        version_constraint: str,
        flavor: str,
    ) -> Tuple[str, str]:
        self.calls.append(("resolve_version", catalog_id, offering_id, version_constraint, flavor))
        metadata = self.get_offering_metadata(catalog_id, offering_id)

        best: Optional[OfferingVersion] = None
        for v in metadata.versions:
            if v.install_kind != self.install_kind or v.flavor != flavor:
                continue
            if not satisfies(v.version, version_constraint):
                continue
            if best is None or parse_version(v.version) > parse_version(best.version):
                best = v

        if best is None:
            raise NoMatchingVersionError(
                f"no version of {metadata.name} ({catalog_id}/{offering_id}) "
                f"satisfies {version_constraint!r} for flavor {flavor!r}"
            )
        return best.version, best.version_locator
