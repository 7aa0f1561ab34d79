"""
Busca genérica de ciclos em grafos dirigidos.

Opera sobre ids abstratos (strings), sem conhecimento de configs ou de
como os ciclos serão apresentados.

Decisões arquiteturais:
    - DFS com pilha do caminho atual; cada aresta de retorno para um nó na
      pilha produz o trecho do caminho a partir desse nó como ciclo
    - Raízes e vizinhos são visitados em ordem de inserção (determinístico)
    - Auto-laços são ciclos de um nó
    - Rotações de um ciclo já reportado não são repetidas

Limites explícitos:
    - Não enumera todos os ciclos simples (Johnson); reporta os ciclos
      expostos pelas arestas de retorno da DFS
"""

from __future__ import annotations

from typing import Dict, List, Mapping, Sequence, Set, Tuple


def _canonical(cycle: Sequence[str]) -> Tuple[str, ...]:
    pivot = min(range(len(cycle)), key=lambda i: cycle[i])
    return tuple(cycle[pivot:]) + tuple(cycle[:pivot])


def find_cycles(graph: Mapping[str, Sequence[str]]) -> List[List[str]]:
    """
    Ciclos do grafo `id → ids referenciados`.

    Nós que aparecem só como destino são tratados como folhas.

    Returns:
        List[List[str]]: Cada ciclo como sequência de ids, começando pelo nó
        onde a aresta de retorno fecha o ciclo (sem repetir o nó inicial).
    """
    visited: Set[str] = set()
    on_stack: Dict[str, int] = {}
    path: List[str] = []
    seen: Set[Tuple[str, ...]] = set()
    cycles: List[List[str]] = []

    def dfs(node: str) -> None:
        visited.add(node)
        on_stack[node] = len(path)
        path.append(node)

        for target in graph.get(node, ()):
            if target in on_stack:
                cycle = path[on_stack[target]:]
                key = _canonical(cycle)
                if key not in seen:
                    seen.add(key)
                    cycles.append(list(cycle))
            elif target not in visited:
                dfs(target)

        path.pop()
        del on_stack[node]

    for root in graph:
        if root not in visited:
            dfs(root)

    return cycles
