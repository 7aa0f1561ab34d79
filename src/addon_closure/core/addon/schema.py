"""
Schema canônico — AddonConfig v1.

Um `AddonConfig` descreve o addon raiz que será implantado e, recursivamente,
os overrides que o chamador declara para suas dependências. Cada nó da árvore
pode:
    - habilitar explicitamente uma dependência (`enabled: true`), inclusive uma
      que o catálogo declara com `on_by_default: false`
    - desabilitar explicitamente uma dependência (`enabled: false`), o que a
      remove do grafo esperado em qualquer profundidade
    - fixar flavor e `version_locator` de uma dependência
    - omitir `enabled`, deixando a decisão para o default do catálogo

Decisões arquiteturais:
    - `enabled` é tri-state (`True` / `False` / `None` = sem override)
    - Overrides com `enabled: true` para offerings não declarados no catálogo
      são dependências manuais e precisam de `catalog_id`, `offering_id` e
      `version_locator` pré-resolvidos (validado na resolução, não aqui)
    - Sem dependências externas de validação (ex.: Pydantic), como no
      restante do core

Limites explícitos:
    - Não consulta catálogo
    - Não resolve versões
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional

from .errors import AddonConfigValidationError


def _is_non_empty_str(x: Any) -> bool:
    return isinstance(x, str) and bool(x.strip())


def _expect(cond: bool, msg: str) -> None:
    if not cond:
        raise AddonConfigValidationError(msg)


def _optional_str(data: Dict[str, Any], key: str, where: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    _expect(isinstance(value, str), f"{where}.{key} must be a string")
    return value


def _optional_bool(data: Dict[str, Any], key: str, where: str) -> Optional[bool]:
    value = data.get(key)
    _expect(value is None or isinstance(value, bool), f"{where}.{key} must be boolean")
    return value


@dataclass
class AddonConfig:
    """Nó da árvore de overrides (o addon raiz ou uma dependência declarada)."""

    offering_name: str
    offering_flavor: str = ""
    catalog_id: str = ""
    offering_id: str = ""
    version_locator: str = ""
    resolved_version: str = ""
    enabled: Optional[bool] = None
    is_required: Optional[bool] = None
    required_by: List[str] = field(default_factory=list)
    dependencies: List["AddonConfig"] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any, *, _where: str = "addon") -> "AddonConfig":
        """Valida e materializa um AddonConfig (recursivo)."""
        _expect(isinstance(data, dict), f"{_where} must be a mapping/dict")

        name = data.get("offering_name")
        _expect(_is_non_empty_str(name), f"{_where}.offering_name is required")

        flavor = data.get("offering_flavor")
        if isinstance(flavor, dict):
            flavor = flavor.get("name")
        _expect(flavor is None or isinstance(flavor, str), f"{_where}.offering_flavor must be a string")

        required_by = data.get("required_by") or []
        _expect(
            isinstance(required_by, list) and all(isinstance(r, str) for r in required_by),
            f"{_where}.required_by must be a list of strings",
        )

        raw_deps = data.get("dependencies") or []
        _expect(isinstance(raw_deps, list), f"{_where}.dependencies must be a list")

        dependencies = [
            cls.from_dict(d, _where=f"{_where}.dependencies[{i}]") for i, d in enumerate(raw_deps)
        ]

        return cls(
            offering_name=name,
            offering_flavor=flavor or "",
            catalog_id=_optional_str(data, "catalog_id", _where),
            offering_id=_optional_str(data, "offering_id", _where),
            version_locator=_optional_str(data, "version_locator", _where),
            resolved_version=_optional_str(data, "resolved_version", _where),
            enabled=_optional_bool(data, "enabled", _where),
            is_required=_optional_bool(data, "is_required", _where),
            required_by=list(required_by),
            dependencies=dependencies,
        )

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"offering_name": self.offering_name}
        for key in ("offering_flavor", "catalog_id", "offering_id", "version_locator", "resolved_version"):
            value = getattr(self, key)
            if value:
                out[key] = value
        if self.enabled is not None:
            out["enabled"] = self.enabled
        if self.is_required is not None:
            out["is_required"] = self.is_required
        if self.required_by:
            out["required_by"] = list(self.required_by)
        if self.dependencies:
            out["dependencies"] = [d.to_dict() for d in self.dependencies]
        return out

    def iter_tree(self) -> Iterator["AddonConfig"]:
        """Percorre a árvore em pré-ordem, incluindo o próprio nó."""
        yield self
        for dep in self.dependencies:
            yield from dep.iter_tree()

    def find_dependencies(self, offering_name: str) -> List["AddonConfig"]:
        """Overrides diretos (um nível) para o offering informado, na ordem declarada."""
        return [d for d in self.dependencies if d.offering_name == offering_name]
