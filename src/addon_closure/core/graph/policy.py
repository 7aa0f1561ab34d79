"""
Políticas puras de habilitação do grafo de dependências.

Este módulo concentra as decisões de habilitação em funções pequenas,
testáveis isoladamente da travessia:

    - `resolve_enabled`: tabela de precedência override × catálogo
    - `collect_disabled_offerings`: primeira passada que descobre todos os
      offerings desabilitados em qualquer ponto da árvore de overrides
    - `is_required`: obrigatoriedade de uma ocorrência de dependência
    - `override_matches`: associação override ↔ declaração de catálogo

Decisões arquiteturais:
    - Desabilitar é uma decisão de offering, não de flavor nem de ocorrência
    - O conjunto de desabilitados é calculado antes da travessia e é somente
      leitura durante ela
    - Override explícito sempre vence o `on_by_default` do catálogo

Limites explícitos:
    - Não consulta catálogo
    - Não registra eventos
"""

from __future__ import annotations

from typing import FrozenSet, Optional

from ..addon.schema import AddonConfig
from ..catalog.types import SolutionDependency


def resolve_enabled(explicit: Optional[bool], catalog_default: bool) -> bool:
    """
    Precedência de habilitação.

        explicit  | catalog_default | resultado
        ----------+-----------------+----------
        True      | qualquer        | True
        False     | qualquer        | False
        None      | True            | True
        None      | False           | False
    """
    if explicit is not None:
        return bool(explicit)
    return bool(catalog_default)


def collect_disabled_offerings(root: AddonConfig) -> FrozenSet[str]:
    """
    Nomes de offerings desabilitados em qualquer profundidade da árvore.

    O próprio nó raiz não participa: desabilitar o addon raiz não tem
    significado. Overrides marcados `is_required=True` também não entram,
    pois já foram reabilitados por `enforce_required_dependencies`.
    """
    disabled = set()
    for node in root.iter_tree():
        if node is root:
            continue
        if node.enabled is False and node.is_required is not True:
            disabled.add(node.offering_name)
    return frozenset(disabled)


def is_required(override: Optional[AddonConfig], dep: SolutionDependency) -> bool:
    """Override `is_required` explícito vence; senão vale `optional` do catálogo."""
    if override is not None and override.is_required is not None:
        return bool(override.is_required)
    return dep.is_required


def override_matches(override: AddonConfig, dep: SolutionDependency) -> bool:
    """
    Indica se um override se aplica a uma declaração de catálogo.

    O nome precisa coincidir. Um flavor no override restringe o match às
    declarações que conhecem aquele flavor; declarações sem flavors
    aceitam qualquer um.
    """
    if override.offering_name != dep.name:
        return False
    if not override.offering_flavor:
        return True
    declared = set(dep.flavors)
    if dep.default_flavor:
        declared.add(dep.default_flavor)
    return not declared or override.offering_flavor in declared
