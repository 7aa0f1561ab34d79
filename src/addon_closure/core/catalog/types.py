"""
Tipos de metadados de catálogo consumidos pelo builder.

Os tipos aqui definidos são a fronteira entre o core e o catálogo: o gateway
devolve `OfferingMetadata` e o builder lê apenas estes campos. Nenhum tipo
deste módulo sabe como foi obtido (rede, arquivo, memória).

Invariantes:
    - `SolutionDependency.version_constraint` é texto opaco para o builder;
      apenas o gateway o interpreta
    - `optional=False` marca a dependência como obrigatória
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple


@dataclass(frozen=True)
class SolutionDependency:
    """Dependência declarada por uma versão de offering no catálogo."""

    name: str
    offering_id: str
    catalog_id: str
    version_constraint: str = ""
    on_by_default: bool = False
    flavors: Tuple[str, ...] = ()
    default_flavor: str = ""
    optional: bool = True

    @property
    def is_required(self) -> bool:
        return not self.optional

    def effective_flavor(self, override_flavor: str = "") -> Optional[str]:
        """Flavor a usar: override > `default_flavor` > primeiro declarado."""
        if override_flavor:
            return override_flavor
        if self.default_flavor:
            return self.default_flavor
        if self.flavors:
            return self.flavors[0]
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "offering_id": self.offering_id,
            "catalog_id": self.catalog_id,
            "version": self.version_constraint,
            "on_by_default": self.on_by_default,
            "flavors": list(self.flavors),
            "default_flavor": self.default_flavor,
            "optional": self.optional,
        }


@dataclass(frozen=True)
class OfferingVersion:
    version_locator: str
    version: str
    flavor: str
    install_kind: str = "terraform"
    dependencies: Tuple[SolutionDependency, ...] = ()


@dataclass(frozen=True)
class OfferingMetadata:
    """Metadados de um offering: nome e todas as versões publicadas."""

    catalog_id: str
    offering_id: str
    name: str
    versions: Tuple[OfferingVersion, ...] = field(default_factory=tuple)

    def find_version(self, version_locator: str, install_kind: str) -> Optional[OfferingVersion]:
        for v in self.versions:
            if v.version_locator == version_locator and v.install_kind == install_kind:
                return v
        return None

    def has_install_kind(self, install_kind: str) -> bool:
        return any(v.install_kind == install_kind for v in self.versions)
