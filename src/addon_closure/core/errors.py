"""
Addon Closure — Canonical Error Structures (v1)

Este módulo define o padrão canônico de erros do Addon Closure.
Erros e achados são artefatos de diagnóstico e fazem parte do contrato
operacional da biblioteca, devendo ser:

- explícitos
- serializáveis
- rastreáveis até o nó do grafo que os originou
- acionáveis (sempre com hint)

Nenhuma decisão implícita é permitida.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional

from .identity import NodeIdentity


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ErrorPayload:
    """
    Payload canônico de erro do Addon Closure.

    Campos:
    - type: código estável do erro (não é texto livre)
    - message: mensagem curta, humana e objetiva
    - details: dados estruturados relevantes para diagnóstico
    - hint: ação sugerida ao operador (onde corrigir)
    - decision_required: indica que o chamador precisa decidir explicitamente
      (ex.: dependência obrigatória desabilitada sob política `error`).
    """

    type: str
    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None
    decision_required: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de erro (v1)
# ---------------------------------------------------------------------------

# Resolução do grafo
RESOLUTION_FAILED = "RESOLUTION_FAILED"
REQUIRED_DEPENDENCY_DISABLED = "REQUIRED_DEPENDENCY_DISABLED"

# Validação de implantação
CONFIG_MISSING = "CONFIG_MISSING"
CONFIG_UNEXPECTED = "CONFIG_UNEXPECTED"
DEPENDENCY_VERSION_MISMATCH = "DEPENDENCY_VERSION_MISMATCH"

# Referências entre configs
CIRCULAR_DEPENDENCY = "CIRCULAR_DEPENDENCY"
UNRESOLVED_REFERENCE = "UNRESOLVED_REFERENCE"


# ---------------------------------------------------------------------------
# Helpers de fábrica
# ---------------------------------------------------------------------------

def resolution_failed(
    *,
    catalog_id: str,
    offering_id: str,
    version_locator: Optional[str] = None,
    reason: Optional[str] = None,
    hint: str = "Verifique se o offering e a versão existem no catálogo informado e se o install kind configurado está publicado.",
) -> ErrorPayload:
    return ErrorPayload(
        type=RESOLUTION_FAILED,
        message="Falha ao resolver metadados de catálogo para um nó do grafo",
        details={
            "catalog_id": catalog_id,
            "offering_id": offering_id,
            "version_locator": version_locator,
            "reason": reason,
        },
        hint=hint,
        decision_required=False,
    )


def required_dependency_disabled(
    *,
    offering_name: str,
    required_by: str,
    hint: str = "Remova o override que desabilita a dependência ou mude `resolution.required_policy` para `force_enable`.",
) -> ErrorPayload:
    return ErrorPayload(
        type=REQUIRED_DEPENDENCY_DISABLED,
        message="Dependência obrigatória desabilitada por override",
        details={"offering_name": offering_name, "required_by": required_by},
        hint=hint,
        decision_required=True,
    )


def config_missing(
    *,
    node: NodeIdentity,
    hint: str = "O nó era esperado pelo grafo de dependências mas não foi implantado. Verifique overrides e defaults do catálogo.",
) -> ErrorPayload:
    return ErrorPayload(
        type=CONFIG_MISSING,
        message="Config esperada não foi implantada",
        details={"node": node.to_dict()},
        hint=hint,
        decision_required=False,
    )


def config_unexpected(
    *,
    node: NodeIdentity,
    hint: str = "O nó foi implantado mas não era esperado. Verifique se a dependência deveria estar desabilitada.",
) -> ErrorPayload:
    return ErrorPayload(
        type=CONFIG_UNEXPECTED,
        message="Config implantada não era esperada",
        details={"node": node.to_dict()},
        hint=hint,
        decision_required=False,
    )


def dependency_version_mismatch(
    *,
    addon: NodeIdentity,
    dependency_required: NodeIdentity,
    dependencies_available: List[NodeIdentity],
    hint: str = "Alinhe a restrição de versão do catálogo com a versão implantada ou implante a versão exigida.",
) -> ErrorPayload:
    return ErrorPayload(
        type=DEPENDENCY_VERSION_MISMATCH,
        message="Dependência exigida não está implantada na versão esperada",
        details={
            "addon": addon.to_dict(),
            "dependency_required": dependency_required.to_dict(),
            "dependencies_available": [d.to_dict() for d in dependencies_available],
        },
        hint=hint,
        decision_required=False,
    )


def circular_dependency(
    *,
    cycles: List[str],
    hint: str = "Quebre uma das arestas do ciclo removendo a referência ou reestruturando os inputs.",
) -> ErrorPayload:
    return ErrorPayload(
        type=CIRCULAR_DEPENDENCY,
        message="Ciclo detectado entre referências de configs pendentes",
        details={"cycles": list(cycles)},
        hint=hint,
        decision_required=False,
    )


def unresolved_reference(
    *,
    config_name: str,
    missing_config_id: str,
    reference: str,
    hint: str = "Crie a config referenciada antes da implantação ou corrija o id na referência.",
) -> ErrorPayload:
    return ErrorPayload(
        type=UNRESOLVED_REFERENCE,
        message="Referência aponta para config inexistente",
        details={
            "config_name": config_name,
            "missing_config_id": missing_config_id,
            "reference": reference,
        },
        hint=hint,
        decision_required=False,
    )
