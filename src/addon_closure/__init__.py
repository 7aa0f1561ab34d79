# src/addon_closure/__init__.py
"""
Addon Closure — verificação do fechamento de dependências de addons de catálogo.

Este pacote raiz define o namespace público do Addon Closure, uma biblioteca
de suporte a testes que calcula, compara e explica o conjunto de
sub-componentes que um addon distribuído por catálogo deve provisionar.

Princípios centrais:
    - O fechamento esperado é derivado de forma determinística do catálogo
    - Overrides do chamador são explícitos e têm precedência documentada
    - Divergências são relatadas como achados estruturados, nunca como strings soltas
    - Nenhuma operação acessa rede ou persiste estado entre invocações

Arquitetura em alto nível:
    - core.graph       → construção do grafo de dependências esperado
    - core.validation  → diff entre esperado e efetivamente implantado
    - core.references  → detecção de ciclos na fiação de inputs/outputs
    - core.catalog     → contrato do gateway de metadados de catálogo
    - core.config      → carregamento, merge e hashing de configuração

Limites explícitos:
    - Não provisiona recursos
    - Não cria catálogos nem projetos
    - Não formata relatórios

Este módulo existe para estabelecer o ponto de entrada lógico da biblioteca.
"""
# src/addon_closure/__init__.py
from .core.addon import AddonConfig, load_addon_config
from .core.catalog import CatalogGateway, StaticCatalogGateway, load_catalog
from .core.config import ClosureSettings, RequiredPolicy, load_config
from .core.context import CheckContext
from .core.exceptions import (
    CircularDependencyError,
    ClosureException,
    RequiredDependencyDisabledError,
    ResolutionError,
)
from .core.graph import (
    DependencyGraphBuilder,
    DependencyGraphResult,
    build_dependency_graph,
    enforce_required_dependencies,
)
from .core.identity import NodeIdentity
from .core.references import (
    ConfigDependencyInfo,
    check_pending_configs,
    detect_circular_dependencies,
    find_unresolved_references,
    parse_reference,
)
from .core.validation import ValidationResult, validate_dependencies

__all__ = [
    "AddonConfig",
    "load_addon_config",
    "CatalogGateway",
    "StaticCatalogGateway",
    "load_catalog",
    "ClosureSettings",
    "RequiredPolicy",
    "load_config",
    "CheckContext",
    "ClosureException",
    "ResolutionError",
    "RequiredDependencyDisabledError",
    "CircularDependencyError",
    "DependencyGraphBuilder",
    "DependencyGraphResult",
    "build_dependency_graph",
    "enforce_required_dependencies",
    "NodeIdentity",
    "ConfigDependencyInfo",
    "check_pending_configs",
    "detect_circular_dependencies",
    "find_unresolved_references",
    "parse_reference",
    "ValidationResult",
    "validate_dependencies",
]
