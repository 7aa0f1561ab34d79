# src/addon_closure/core/config/settings.py
"""
Settings canônicas do Addon Closure (v1).

Materializa a configuração efetiva (dict) em uma estrutura imutável e
validada, consumida por builder, enforcement de dependências obrigatórias
e checagem pré-implantação.

Chaves reconhecidas:
    - resolution.install_kind     → install kind usado para localizar versões
    - resolution.required_policy  → `force_enable` | `error`
    - detection.strict_mode       → ciclos são fatais em `check_pending_configs`
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from .errors import InvalidSettingsError


DEFAULT_CONFIG: Dict[str, Any] = {
    "resolution": {
        "install_kind": "terraform",
        "required_policy": "force_enable",
    },
    "detection": {
        "strict_mode": True,
    },
}


class RequiredPolicy(str, Enum):
    """
    Política aplicada quando um override desabilita uma dependência obrigatória.

    Valores:
        - FORCE_ENABLE: a dependência é reabilitada e um warning é registrado
        - ERROR: a verificação é interrompida com `RequiredDependencyDisabledError`
    """
    FORCE_ENABLE = "force_enable"
    ERROR = "error"


def _expect(cond: bool, msg: str) -> None:
    if not cond:
        raise InvalidSettingsError(msg)


@dataclass(frozen=True)
class ClosureSettings:
    """Representação validada da configuração efetiva."""

    install_kind: str = "terraform"
    required_policy: RequiredPolicy = RequiredPolicy.FORCE_ENABLE
    strict_mode: bool = True

    @classmethod
    def from_config(cls, config: Optional[Dict[str, Any]]) -> "ClosureSettings":
        config = config or {}
        _expect(isinstance(config, dict), "config must be a mapping")

        resolution = config.get("resolution") or {}
        _expect(isinstance(resolution, dict), "resolution must be a mapping")
        detection = config.get("detection") or {}
        _expect(isinstance(detection, dict), "detection must be a mapping")

        install_kind = resolution.get("install_kind", cls.install_kind)
        _expect(isinstance(install_kind, str) and bool(install_kind.strip()), "resolution.install_kind is required")

        raw_policy = resolution.get("required_policy", cls.required_policy.value)
        allowed = {p.value for p in RequiredPolicy}
        _expect(raw_policy in allowed, f"resolution.required_policy must be one of {sorted(allowed)}")

        strict_mode = detection.get("strict_mode", cls.strict_mode)
        _expect(isinstance(strict_mode, bool), "detection.strict_mode must be boolean")

        return cls(
            install_kind=install_kind,
            required_policy=RequiredPolicy(raw_policy),
            strict_mode=strict_mode,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "resolution": {
                "install_kind": self.install_kind,
                "required_policy": self.required_policy.value,
            },
            "detection": {"strict_mode": self.strict_mode},
        }
