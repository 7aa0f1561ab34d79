"""
Contrato canônico do gateway de metadados de catálogo.

O builder nunca fala com um catálogo real: ele recebe qualquer objeto que
satisfaça `CatalogGateway`. Em testes e uso offline, `StaticCatalogGateway`
cumpre o papel a partir de um mapa ou arquivo.

Princípios fundamentais:
    - Conformidade por duck typing (@runtime_checkable), sem herança
    - O gateway é a única fonte de verdade de versões e dependências
    - Falhas do gateway são propagadas como exceção; o builder as converte
      em `ResolutionError`

Limites explícitos:
    - Não define cache nem retry
    - Não define autenticação
"""

from __future__ import annotations

from typing import Protocol, Tuple, runtime_checkable

from .types import OfferingMetadata


@runtime_checkable
class CatalogGateway(Protocol):
    """Interface mínima de leitura de catálogo usada pelo builder."""

    def get_offering_metadata(self, catalog_id: str, offering_id: str) -> OfferingMetadata:
        """Metadados completos do offering (todas as versões e flavors)."""
        ...

    def resolve_version(
        self,
        catalog_id: str,
        offering_id: str,
        version_constraint: str,
        flavor: str,
    ) -> Tuple[str, str]:
        """Resolve uma restrição de versão para `(version, version_locator)`."""
        ...
