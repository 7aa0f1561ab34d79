"""
Builder do grafo de dependências esperado.

Este módulo expande recursivamente um addon raiz (identidade + árvore de
overrides) no grafo completo de dependências e na lista achatada de nós
que devem ser implantados, consultando o catálogo via `CatalogGateway`.

Algoritmo:
    1. Primeira passada: `collect_disabled_offerings` sobre a árvore inteira
    2. Offering desabilitado globalmente → retorna sem adicionar nem recorrer
    3. Metadados do nó + versão pelo `version_locator` e install kind
    4. Identidade já visitada → retorna; senão entra na lista esperada
    5. Para cada dependência declarada no catálogo: precedência de
       habilitação, flavor efetivo, resolução de versão, aresta e recursão
    6. Overrides habilitados sem declaração no catálogo são processados
       como dependências manuais com identidade pré-resolvida (`version_locator`,
       ou `resolved_version` + flavor resolvido pelo gateway)

Decisões arquiteturais:
    - O conjunto de desabilitados é pré-calculado e somente leitura
    - Identidade (nome, versão, flavor) é a chave de visita e de deduplicação
    - Falha do gateway aborta o build inteiro como `ResolutionError`
    - Dependências obrigatórias desabilitadas por override seguem
      `resolution.required_policy` (`force_enable` ou `error`)

Invariantes:
    - Nenhum offering desabilitado aparece na lista esperada, exceto quando
      reabilitado por obrigatoriedade
    - A lista esperada não contém identidades duplicadas
    - Mesma entrada → mesmo resultado (ordem de descoberta determinística)

Limites explícitos:
    - Não implanta nada
    - Não compara com o estado implantado (ver `validate_dependencies`)
    - Processamento sequencial
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, Optional

from ..addon.schema import AddonConfig
from ..catalog.gateway import CatalogGateway
from ..catalog.types import OfferingMetadata, OfferingVersion, SolutionDependency
from ..config.settings import ClosureSettings, RequiredPolicy
from ..context import CheckContext
from ..errors import required_dependency_disabled, resolution_failed
from ..exceptions import ClosureException, RequiredDependencyDisabledError, ResolutionError
from ..identity import NodeIdentity
from .policy import collect_disabled_offerings, is_required, override_matches, resolve_enabled
from .types import DependencyGraphResult, ResolutionState


COMPONENT = "graph.builder"


def _resolution_error(
    *,
    catalog_id: str,
    offering_id: str,
    version_locator: Optional[str],
    reason: str,
) -> ResolutionError:
    payload = resolution_failed(
        catalog_id=catalog_id,
        offering_id=offering_id,
        version_locator=version_locator,
        reason=reason,
    )
    return ResolutionError(
        message=f"Falha ao resolver {catalog_id}/{offering_id} ({version_locator or '-'}): {reason}",
        details={"type": payload.type, **payload.details},
        hint=payload.hint,
    )


class DependencyGraphBuilder:
    """
    Resolve o grafo esperado de um addon raiz.

    Uma instância pode ser reutilizada para vários builds; cada chamada de
    `build` cria seu próprio `ResolutionState`.
    """

    def __init__(
        self,
        gateway: CatalogGateway,
        settings: Optional[ClosureSettings] = None,
        ctx: Optional[CheckContext] = None,
    ) -> None:
        if settings is None:
            settings = ClosureSettings.from_config(ctx.config) if ctx is not None else ClosureSettings()
        self.gateway = gateway
        self.settings = settings
        self.ctx = ctx

    # -----------------------------
    # API pública
    # -----------------------------
    def build(
        self,
        catalog_id: str,
        offering_id: str,
        version_locator: str,
        flavor: str,
        root_config: AddonConfig,
        visited: Optional[Iterable[NodeIdentity]] = None,
    ) -> DependencyGraphResult:
        """
        Constrói o grafo esperado a partir do addon raiz.

        Args:
            catalog_id: Catálogo do addon raiz.
            offering_id: Offering do addon raiz.
            version_locator: Versão do addon raiz.
            flavor: Flavor do addon raiz.
            root_config: Árvore de overrides do chamador.
            visited: Identidades já processadas por um build anterior; não
                são reprocessadas nem entram na lista esperada.

        Raises:
            ResolutionError: Metadados ausentes/inválidos ou falha do gateway.
            RequiredDependencyDisabledError: Sob política `error`.
        """
        state = ResolutionState(
            disabled_offerings=collect_disabled_offerings(root_config),
            visited=set(visited or ()),
        )
        self._log(
            "info",
            "dependency graph build started",
            root=root_config.offering_name,
            disabled_offerings=sorted(state.disabled_offerings),
        )

        self._visit(catalog_id, offering_id, version_locator, flavor, root_config, state, forced=False)

        result = state.to_result()
        self._log(
            "info",
            "dependency graph build completed",
            expected=len(result.expected_deployed),
            edges=len(result.edges()),
        )
        return result

    # -----------------------------
    # Travessia
    # -----------------------------
    def _visit(
        self,
        catalog_id: str,
        offering_id: str,
        version_locator: str,
        flavor: str,
        config: AddonConfig,
        state: ResolutionState,
        *,
        forced: bool,
    ) -> Optional[NodeIdentity]:
        if not forced and config.offering_name in state.disabled_offerings:
            self._log("info", "skipping offering disabled in dependency tree", offering=config.offering_name)
            return None

        metadata = self._gateway_call(
            self.gateway.get_offering_metadata,
            catalog_id,
            offering_id,
            catalog_id=catalog_id,
            offering_id=offering_id,
            version_locator=version_locator,
        )
        version = self._find_version(metadata, catalog_id, offering_id, version_locator)
        self._log(
            "info",
            "offering version resolved",
            offering=metadata.name,
            version=version.version,
            version_locator=version_locator,
        )

        if not forced and metadata.name in state.disabled_offerings:
            self._log("info", "skipping offering disabled in dependency tree", offering=metadata.name)
            return None

        node = NodeIdentity(name=metadata.name, version=version.version, flavor=flavor)
        if not state.add_expected(node):
            return node

        self._expand(node, version, config, state)
        return node

    def _expand(
        self,
        node: NodeIdentity,
        version: OfferingVersion,
        config: AddonConfig,
        state: ResolutionState,
    ) -> None:
        matched = set()

        for dep in version.dependencies:
            overrides = [o for o in config.find_dependencies(dep.name) if override_matches(o, dep)]
            matched.update(id(o) for o in overrides)
            for override in overrides or [None]:
                self._process_declared(node, dep, override, state)

        for override in config.dependencies:
            if override.enabled is True and id(override) not in matched:
                self._process_manual(node, override, state)

    def _process_declared(
        self,
        parent: NodeIdentity,
        dep: SolutionDependency,
        override: Optional[AddonConfig],
        state: ResolutionState,
    ) -> None:
        """
        Processa uma ocorrência de dependência declarada no catálogo.

        Obrigatoriedade vence o conjunto global de desabilitados: uma
        declaração `optional: false` (ou override `is_required=True`) cujo
        offering foi desabilitado em qualquer ponto da árvore, inclusive sob
        outro pai, passa por `resolution.required_policy`. Com
        `force_enable` o nó é incluído com warning; com `error` o build
        aborta, mesmo que o override de desabilitação não esteja sob este pai.
        O forçamento vale só para o próprio nó; a subárvore continua
        respeitando os desabilitados.
        """
        explicit = override.enabled if override is not None else None
        enabled = resolve_enabled(explicit, dep.on_by_default)
        globally_disabled = dep.name in state.disabled_offerings

        forced = False
        if (explicit is False or globally_disabled) and is_required(override, dep):
            self._apply_required_policy(parent, dep)
            forced = enabled = True

        if not enabled:
            self._log("info", "catalog dependency not enabled", parent=str(parent), dependency=dep.name)
            return
        if globally_disabled and not forced:
            self._log("info", "skipping catalog dependency disabled in dependency tree", parent=str(parent), dependency=dep.name)
            return

        flavor = dep.effective_flavor(override.offering_flavor if override is not None else "")
        if flavor is None:
            raise _resolution_error(
                catalog_id=dep.catalog_id,
                offering_id=dep.offering_id,
                version_locator=None,
                reason=f"dependency {dep.name} declares no flavor",
            )

        if override is not None and override.version_locator:
            locator = override.version_locator
        else:
            _, locator = self._gateway_call(
                self.gateway.resolve_version,
                dep.catalog_id,
                dep.offering_id,
                dep.version_constraint,
                flavor,
                catalog_id=dep.catalog_id,
                offering_id=dep.offering_id,
                version_locator=None,
            )

        child_config = override
        if child_config is None:
            child_config = AddonConfig(
                offering_name=dep.name,
                offering_flavor=flavor,
                catalog_id=dep.catalog_id,
                offering_id=dep.offering_id,
                version_locator=locator,
            )

        child = self._visit(dep.catalog_id, dep.offering_id, locator, flavor, child_config, state, forced=forced)
        if child is not None:
            state.add_edge(parent, child)

    def _process_manual(self, parent: NodeIdentity, override: AddonConfig, state: ResolutionState) -> None:
        forced = override.is_required is True
        if not forced and override.offering_name in state.disabled_offerings:
            self._log("info", "skipping manually enabled dependency disabled in dependency tree", parent=str(parent), dependency=override.offering_name)
            return

        missing = [f for f in ("catalog_id", "offering_id") if not getattr(override, f)]
        if not (override.version_locator or override.resolved_version):
            missing.append("version_locator")
        if missing:
            raise _resolution_error(
                catalog_id=override.catalog_id,
                offering_id=override.offering_id,
                version_locator=override.version_locator or None,
                reason=f"manually enabled dependency {override.offering_name} lacks {', '.join(missing)}",
            )

        locator = override.version_locator or self._locator_for_resolved_version(override)

        self._log("info", "processing manually enabled dependency", parent=str(parent), dependency=override.offering_name)
        child = self._visit(
            override.catalog_id,
            override.offering_id,
            locator,
            override.offering_flavor,
            override,
            state,
            forced=forced,
        )
        if child is not None:
            state.add_edge(parent, child)

    # -----------------------------
    # Helpers
    # -----------------------------
    def _locator_for_resolved_version(self, override: AddonConfig) -> str:
        if not override.offering_flavor:
            raise _resolution_error(
                catalog_id=override.catalog_id,
                offering_id=override.offering_id,
                version_locator=None,
                reason=f"manually enabled dependency {override.offering_name} pins resolved_version without offering_flavor",
            )
        _, locator = self._gateway_call(
            self.gateway.resolve_version,
            override.catalog_id,
            override.offering_id,
            f"={override.resolved_version}",
            override.offering_flavor,
            catalog_id=override.catalog_id,
            offering_id=override.offering_id,
            version_locator=None,
        )
        return locator

    def _apply_required_policy(self, parent: NodeIdentity, dep: SolutionDependency) -> None:
        payload = required_dependency_disabled(offering_name=dep.name, required_by=parent.name)
        if self.settings.required_policy is RequiredPolicy.ERROR:
            raise RequiredDependencyDisabledError(
                message=f"Dependência obrigatória '{dep.name}' de '{parent.name}' foi desabilitada por override",
                details={"type": payload.type, **payload.details},
                hint=payload.hint,
                decision_required=True,
            )

        message = f"required dependency {dep.name} (required by {parent.name}) force-enabled despite disable override"
        self._log("warning", message, parent=str(parent), dependency=dep.name)
        if self.ctx is not None:
            self.ctx.add_warning(component=COMPONENT, message=message)

    def _find_version(
        self,
        metadata: OfferingMetadata,
        catalog_id: str,
        offering_id: str,
        version_locator: str,
    ) -> OfferingVersion:
        install_kind = self.settings.install_kind
        if not metadata.has_install_kind(install_kind):
            raise _resolution_error(
                catalog_id=catalog_id,
                offering_id=offering_id,
                version_locator=version_locator,
                reason=f"offering has no versions for install kind {install_kind!r}",
            )
        version = metadata.find_version(version_locator, install_kind)
        if version is None:
            raise _resolution_error(
                catalog_id=catalog_id,
                offering_id=offering_id,
                version_locator=version_locator,
                reason=f"version not found for version locator: {version_locator}",
            )
        return version

    def _gateway_call(
        self,
        fn: Callable[..., Any],
        *args: Any,
        catalog_id: str,
        offering_id: str,
        version_locator: Optional[str],
    ) -> Any:
        try:
            return fn(*args)
        except ClosureException:
            raise
        except Exception as e:
            self._log(
                "error",
                "catalog gateway call failed",
                catalog_id=catalog_id,
                offering_id=offering_id,
                version_locator=version_locator,
                error_type=type(e).__name__,
                error_message=str(e),
            )
            raise _resolution_error(
                catalog_id=catalog_id,
                offering_id=offering_id,
                version_locator=version_locator,
                reason=str(e) or type(e).__name__,
            ) from e

    def _log(self, level: str, message: str, **extra: Any) -> None:
        if self.ctx is not None:
            self.ctx.log(component=COMPONENT, level=level, message=message, **extra)


def build_dependency_graph(
    catalog_id: str,
    offering_id: str,
    version_locator: str,
    flavor: str,
    root_config: AddonConfig,
    visited: Optional[Iterable[NodeIdentity]] = None,
    *,
    gateway: CatalogGateway,
    settings: Optional[ClosureSettings] = None,
    ctx: Optional[CheckContext] = None,
) -> DependencyGraphResult:
    """Atalho funcional para `DependencyGraphBuilder(...).build(...)`."""
    builder = DependencyGraphBuilder(gateway, settings=settings, ctx=ctx)
    return builder.build(catalog_id, offering_id, version_locator, flavor, root_config, visited=visited)
