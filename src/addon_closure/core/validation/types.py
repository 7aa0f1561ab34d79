"""
Tipos de resultado da validação de implantação.

Achados de validação não são exceções: são dados. `ValidationResult` é
serializável (`to_dict`) e pode ser convertido nos payloads canônicos de
erro (`error_payloads`) para relatórios externos.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List

from ..errors import ErrorPayload, config_missing, config_unexpected, dependency_version_mismatch
from ..identity import NodeIdentity


@dataclass(frozen=True)
class DependencyError:
    """Pai implantado cuja dependência exigida não está implantada."""

    addon: NodeIdentity
    dependency_required: NodeIdentity
    dependencies_available: List[NodeIdentity] = field(default_factory=list)

    def describe(self) -> str:
        if self.dependencies_available:
            available = ", ".join(str(d) for d in self.dependencies_available)
        else:
            available = "none"
        return (
            f"{self.addon} requires {self.dependency_required} "
            f"but it is not deployed (available: {available})"
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "addon": self.addon.to_dict(),
            "dependency_required": self.dependency_required.to_dict(),
            "dependencies_available": [d.to_dict() for d in self.dependencies_available],
        }


@dataclass
class ValidationResult:
    is_valid: bool = True
    missing_configs: List[NodeIdentity] = field(default_factory=list)
    unexpected_configs: List[NodeIdentity] = field(default_factory=list)
    dependency_errors: List[DependencyError] = field(default_factory=list)
    messages: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "is_valid": self.is_valid,
            "missing_configs": [n.to_dict() for n in self.missing_configs],
            "unexpected_configs": [n.to_dict() for n in self.unexpected_configs],
            "dependency_errors": [e.to_dict() for e in self.dependency_errors],
            "messages": list(self.messages),
        }

    def error_payloads(self) -> List[ErrorPayload]:
        """Achados convertidos em payloads canônicos, na ordem missing → unexpected → dependency."""
        payloads: List[ErrorPayload] = []
        payloads.extend(config_missing(node=n) for n in self.missing_configs)
        payloads.extend(config_unexpected(node=n) for n in self.unexpected_configs)
        payloads.extend(
            dependency_version_mismatch(
                addon=e.addon,
                dependency_required=e.dependency_required,
                dependencies_available=e.dependencies_available,
            )
            for e in self.dependency_errors
        )
        return payloads
