# src/addon_closure/core/identity.py
"""
Identidade canônica de uma unidade implantável.

Este módulo define `NodeIdentity`, o value type que identifica uma instância
de offering no grafo de dependências: a tripla (nome do offering, versão
resolvida, nome do flavor).

Decisões arquiteturais:
    - Igualdade estrutural exata sobre os três campos, sem matches parciais
    - O mesmo offering em outra versão é outra unidade (pode coexistir)
    - Mapas do core são indexados pelo próprio objeto, não por strings
    - `key()` oferece uma codificação textual estável e reversível para
      serialização, com escape dos componentes

Invariantes:
    - Duas identidades são iguais se e somente se as triplas são iguais
    - `NodeIdentity.from_key(n.key()) == n` para qualquer `n`

Limites explícitos:
    - Não consulta catálogo
    - Não valida formato de versão
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping
from urllib.parse import quote, unquote


_KEY_SEPARATOR = ":"


@dataclass(frozen=True, order=True)
class NodeIdentity:
    """Tripla (offering, versão, flavor) que identifica uma unidade implantável."""

    name: str
    version: str
    flavor: str

    def key(self) -> str:
        """Codificação estável `name:version:flavor` com componentes escapados."""
        return _KEY_SEPARATOR.join(quote(part, safe="") for part in (self.name, self.version, self.flavor))

    @classmethod
    def from_key(cls, key: str) -> "NodeIdentity":
        parts = key.split(_KEY_SEPARATOR)
        if len(parts) != 3:
            raise ValueError(f"invalid node key: {key!r}")
        name, version, flavor = (unquote(p) for p in parts)
        return cls(name=name, version=version, flavor=flavor)

    def same_offering_and_flavor(self, other: "NodeIdentity") -> bool:
        return self.name == other.name and self.flavor == other.flavor

    def to_dict(self) -> Dict[str, str]:
        return {"name": self.name, "version": self.version, "flavor": self.flavor}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "NodeIdentity":
        """Materializa a identidade a partir de um registro (ex.: config implantada).

        Aceita `flavor` como string ou como mapa `{"name": ...}`, formato
        devolvido pela API de detalhes de offering.
        """
        flavor = data.get("flavor", "")
        if isinstance(flavor, Mapping):
            flavor = flavor.get("name", "")
        return cls(
            name=str(data.get("name", "")),
            version=str(data.get("version", "")),
            flavor=str(flavor or ""),
        )

    def __str__(self) -> str:
        return f"{self.name}:{self.version}:{self.flavor}"
