"""
Enforcement de dependências obrigatórias sobre a árvore de overrides.

Etapa opcional executada antes do build: percorre a árvore de overrides e,
para cada dependência desabilitada explicitamente, descobre se ela é
obrigatória para o pai. Dependências obrigatórias são reabilitadas
(`force_enable`) ou rejeitadas (`error`), conforme
`resolution.required_policy`.

Decisões arquiteturais:
    - A entrada nunca é mutada: o resultado é uma cópia profunda da árvore
    - `is_required` explícito no override dispensa consulta ao catálogo
    - Sem identidade de catálogo no pai, ou com falha de consulta, a
      dependência é tratada como opcional (com warning quando houve falha)

Invariantes:
    - Overrides reabilitados saem com `enabled=True`, `is_required=True` e
      `required_by=[<pai>]`, e portanto não entram no conjunto global de
      desabilitados do builder

Limites explícitos:
    - Não constrói grafo
    - Não resolve versões
"""

from __future__ import annotations

from copy import deepcopy
from dataclasses import dataclass, field
from typing import List, Optional

from ..addon.schema import AddonConfig
from ..catalog.gateway import CatalogGateway
from ..config.settings import ClosureSettings, RequiredPolicy
from ..context import CheckContext
from ..errors import required_dependency_disabled
from ..exceptions import RequiredDependencyDisabledError


COMPONENT = "graph.required"


@dataclass
class RequiredDependencyReport:
    config: AddonConfig
    force_enabled: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


class _Enforcer:
    def __init__(self, gateway: CatalogGateway, settings: ClosureSettings, ctx: Optional[CheckContext]) -> None:
        self.gateway = gateway
        self.settings = settings
        self.ctx = ctx
        self.force_enabled: List[str] = []
        self.warnings: List[str] = []

    def walk(self, parent: AddonConfig) -> None:
        for dep in parent.dependencies:
            if dep.enabled is False and self._is_required(parent, dep):
                self._enforce(parent, dep)
            self.walk(dep)

    def _is_required(self, parent: AddonConfig, dep: AddonConfig) -> bool:
        if dep.is_required is not None:
            return dep.is_required
        if not (parent.catalog_id and parent.offering_id and parent.version_locator):
            return False

        try:
            metadata = self.gateway.get_offering_metadata(parent.catalog_id, parent.offering_id)
        except Exception as e:
            self._warn(f"could not check if dependency {dep.offering_name} is required: {e}")
            return False

        version = metadata.find_version(parent.version_locator, self.settings.install_kind)
        if version is None:
            return False

        for declared in version.dependencies:
            if declared.name == dep.offering_name:
                return declared.is_required
        return False

    def _enforce(self, parent: AddonConfig, dep: AddonConfig) -> None:
        if self.settings.required_policy is RequiredPolicy.ERROR:
            payload = required_dependency_disabled(offering_name=dep.offering_name, required_by=parent.offering_name)
            raise RequiredDependencyDisabledError(
                message=f"Dependência obrigatória '{dep.offering_name}' de '{parent.offering_name}' foi desabilitada por override",
                details={"type": payload.type, **payload.details},
                hint=payload.hint,
                decision_required=True,
            )

        dep.enabled = True
        dep.is_required = True
        dep.required_by = [parent.offering_name]
        self.force_enabled.append(dep.offering_name)
        self._warn(
            f"Required dependency {dep.offering_name} was force-enabled despite being disabled "
            f"(required by {parent.offering_name})"
        )

    def _warn(self, message: str) -> None:
        self.warnings.append(message)
        if self.ctx is not None:
            self.ctx.add_warning(component=COMPONENT, message=message)
            self.ctx.log(component=COMPONENT, level="warning", message=message)


def enforce_required_dependencies(
    root: AddonConfig,
    *,
    gateway: CatalogGateway,
    settings: Optional[ClosureSettings] = None,
    ctx: Optional[CheckContext] = None,
) -> RequiredDependencyReport:
    """
    Aplica a política de obrigatoriedade sobre uma cópia da árvore de overrides.

    Raises:
        RequiredDependencyDisabledError: Sob política `error`, na primeira
            dependência obrigatória desabilitada encontrada.
    """
    if settings is None:
        settings = ClosureSettings.from_config(ctx.config) if ctx is not None else ClosureSettings()

    tree = deepcopy(root)
    enforcer = _Enforcer(gateway, settings, ctx)
    enforcer.walk(tree)
    return RequiredDependencyReport(config=tree, force_enabled=enforcer.force_enabled, warnings=enforcer.warnings)
