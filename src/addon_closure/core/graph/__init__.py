"""Addon Closure — Grafo de dependências (core).

 - políticas puras de habilitação (precedência, desabilitados, obrigatórios)
 - builder recursivo do grafo esperado
 - enforcement de dependências obrigatórias na árvore de overrides
"""

from .builder import DependencyGraphBuilder, build_dependency_graph  # noqa: F401
from .policy import (  # noqa: F401
    collect_disabled_offerings,
    is_required,
    override_matches,
    resolve_enabled,
)
from .required import RequiredDependencyReport, enforce_required_dependencies  # noqa: F401
from .types import DependencyGraphResult, ResolutionState  # noqa: F401
