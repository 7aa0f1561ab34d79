"""
Tipos do grafo de dependências esperado.

`ResolutionState` é o estado transitório de uma travessia; `DependencyGraphResult`
é o artefato imutável entregue ao chamador e consumido pelo validador.

Invariantes:
    - `expected_deployed` não contém identidades duplicadas
    - A lista de filhos de cada nó não contém identidades duplicadas
    - A ordem de inserção reflete a ordem de descoberta (determinística)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, List, Set, Tuple

from ..identity import NodeIdentity


@dataclass
class ResolutionState:
    """Estado acumulado durante uma única chamada de build."""

    disabled_offerings: FrozenSet[str]
    visited: Set[NodeIdentity] = field(default_factory=set)
    graph: Dict[NodeIdentity, List[NodeIdentity]] = field(default_factory=dict)
    expected_deployed: List[NodeIdentity] = field(default_factory=list)

    def add_expected(self, node: NodeIdentity) -> bool:
        """Marca o nó como visitado; retorna False se já estava."""
        if node in self.visited:
            return False
        self.visited.add(node)
        self.expected_deployed.append(node)
        return True

    def add_edge(self, parent: NodeIdentity, child: NodeIdentity) -> None:
        children = self.graph.setdefault(parent, [])
        if child not in children:
            children.append(child)

    def to_result(self) -> "DependencyGraphResult":
        return DependencyGraphResult(
            graph={k: list(v) for k, v in self.graph.items()},
            expected_deployed=list(self.expected_deployed),
            visited=set(self.visited),
        )


@dataclass
class DependencyGraphResult:
    """Grafo esperado, lista esperada de implantação e conjunto visitado."""

    graph: Dict[NodeIdentity, List[NodeIdentity]]
    expected_deployed: List[NodeIdentity]
    visited: Set[NodeIdentity]

    def edges(self) -> List[Tuple[NodeIdentity, NodeIdentity]]:
        return [(parent, child) for parent, children in self.graph.items() for child in children]

    def names(self) -> List[str]:
        return [n.name for n in self.expected_deployed]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "graph": {p.key(): [c.to_dict() for c in children] for p, children in self.graph.items()},
            "expected_deployed": [n.to_dict() for n in self.expected_deployed],
            "visited": sorted(n.key() for n in self.visited),
        }
