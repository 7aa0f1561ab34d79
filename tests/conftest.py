# tests/conftest.py
"""
Fixtures compartilhados para testes do Addon Closure.

Este módulo define fixtures reutilizáveis que fornecem:
- catálogos sintéticos já materializados em gateways estáticos
- uma fábrica de AddonConfig raiz apontando para o catálogo de teste
- contexto de verificação determinístico (CheckContext)

Decisões arquiteturais:
    - Catálogos são descritos em `tests/fixtures/catalogs.py` como dicts
    - Imports do core são realizados de forma lazy para melhorar a
      clareza de erros durante falhas
    - `run_id` e `created_at` são fixos

Invariantes:
    - Nenhuma fixture realiza I/O
    - Nenhuma fixture acessa rede

Limites explícitos:
    - Não substituir testes de integração (ver tests/e2e)
"""

from copy import deepcopy
from datetime import datetime, timezone

import pytest

from tests.fixtures import catalogs


@pytest.fixture
def make_gateway():
    """
    Fixture factory: dict de catálogo → `StaticCatalogGateway`.

    Returns:
        Callable[[dict], StaticCatalogGateway]
    """
    from addon_closure.core.catalog import StaticCatalogGateway

    def _make(data, *, install_kind: str = "terraform"):
        return StaticCatalogGateway.from_dict(data, install_kind=install_kind)

    return _make


@pytest.fixture
def make_root():
    """
    Fixture factory: AddonConfig raiz para um offering do catálogo de teste.

    O `version_locator` padrão é `<name>-1`, como nos catálogos sintéticos.
    """
    from addon_closure.core.addon import AddonConfig

    def _make(name: str, *, locator=None, flavor: str = "standard", dependencies=None):
        return AddonConfig(
            offering_name=name,
            offering_flavor=flavor,
            catalog_id=catalogs.CATALOG_ID,
            offering_id=f"off-{name}",
            version_locator=locator or f"{name}-1",
            dependencies=list(dependencies or []),
        )

    return _make


@pytest.fixture
def build_for(make_gateway):
    """
    Fixture factory: constrói o grafo de um AddonConfig raiz sobre um catálogo.

    Returns:
        Callable[..., DependencyGraphResult]
    """
    from addon_closure.core.graph import build_dependency_graph

    def _build(data, root, *, settings=None, ctx=None, gateway=None):
        gw = gateway or make_gateway(data)
        return build_dependency_graph(
            root.catalog_id,
            root.offering_id,
            root.version_locator,
            root.offering_flavor,
            root,
            gateway=gw,
            settings=settings,
            ctx=ctx,
        )

    return _build


@pytest.fixture
def dummy_ctx():
    """
    Fixture que fornece um CheckContext determinístico para testes.

    Returns:
        CheckContext: Contexto isolado com configuração default.
    """
    from addon_closure.core.config import DEFAULT_CONFIG, compute_config_hash
    from addon_closure.core.context import CheckContext

    return CheckContext(
        run_id="check-test-001",
        created_at=datetime(2026, 1, 16, 0, 0, 0, tzinfo=timezone.utc),
        config=deepcopy(DEFAULT_CONFIG),
        meta={"source": "pytest", "config_hash": compute_config_hash(DEFAULT_CONFIG)},
    )
