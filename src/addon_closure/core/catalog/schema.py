"""
Schema canônico — documento de catálogo v1.

Formato (YAML/JSON):

    offerings:
      - catalog_id: cat-1
        offering_id: off-a
        name: deploy-arch-a
        versions:
          - version_locator: cat-1.ver-a-1
            version: v1.0.0
            flavor: standard
            install_kind: terraform        # default: terraform
            dependencies:
              - name: deploy-arch-b
                offering_id: off-b
                catalog_id: cat-1          # default: catalog do offering pai
                version: ">=1.0.0"
                on_by_default: true        # default: false
                optional: false            # default: true
                flavors: [standard]
                default_flavor: standard

Decisões arquiteturais:
    - Sem dependências externas de validação; erros via `_expect`
    - `flavor` aceita string ou mapa `{"name": ...}`
    - O par (catalog_id, offering_id) é único no documento
"""

from __future__ import annotations

from typing import Any, Dict, List, Set, Tuple

from .errors import CatalogValidationError
from .types import OfferingMetadata, OfferingVersion, SolutionDependency


def _is_non_empty_str(x: Any) -> bool:
    return isinstance(x, str) and bool(x.strip())


def _expect(cond: bool, msg: str) -> None:
    if not cond:
        raise CatalogValidationError(msg)


def _flavor_name(value: Any) -> Any:
    if isinstance(value, dict):
        return value.get("name")
    return value


def _parse_dependency(data: Any, where: str, parent_catalog_id: str) -> SolutionDependency:
    _expect(isinstance(data, dict), f"{where} must be a mapping")
    _expect(_is_non_empty_str(data.get("name")), f"{where}.name is required")
    _expect(_is_non_empty_str(data.get("offering_id")), f"{where}.offering_id is required")

    catalog_id = data.get("catalog_id") or parent_catalog_id
    _expect(_is_non_empty_str(catalog_id), f"{where}.catalog_id is required")

    constraint = data.get("version", "")
    _expect(isinstance(constraint, str), f"{where}.version must be a string")

    flavors = data.get("flavors") or []
    _expect(
        isinstance(flavors, list) and all(_is_non_empty_str(f) for f in flavors),
        f"{where}.flavors must be a list of strings",
    )
    default_flavor = data.get("default_flavor") or ""
    _expect(isinstance(default_flavor, str), f"{where}.default_flavor must be a string")

    on_by_default = data.get("on_by_default", False)
    optional = data.get("optional", True)
    _expect(isinstance(on_by_default, bool), f"{where}.on_by_default must be boolean")
    _expect(isinstance(optional, bool), f"{where}.optional must be boolean")

    return SolutionDependency(
        name=data["name"],
        offering_id=data["offering_id"],
        catalog_id=catalog_id,
        version_constraint=constraint,
        on_by_default=on_by_default,
        flavors=tuple(flavors),
        default_flavor=default_flavor,
        optional=optional,
    )


def _parse_version(data: Any, where: str, catalog_id: str) -> OfferingVersion:
    _expect(isinstance(data, dict), f"{where} must be a mapping")
    _expect(_is_non_empty_str(data.get("version_locator")), f"{where}.version_locator is required")
    _expect(_is_non_empty_str(data.get("version")), f"{where}.version is required")

    flavor = _flavor_name(data.get("flavor"))
    _expect(_is_non_empty_str(flavor), f"{where}.flavor is required")

    install_kind = data.get("install_kind", "terraform")
    _expect(_is_non_empty_str(install_kind), f"{where}.install_kind must be a non-empty string")

    deps = data.get("dependencies") or []
    _expect(isinstance(deps, list), f"{where}.dependencies must be a list")

    return OfferingVersion(
        version_locator=data["version_locator"],
        version=data["version"],
        flavor=flavor,
        install_kind=install_kind,
        dependencies=tuple(
            _parse_dependency(d, f"{where}.dependencies[{i}]", catalog_id) for i, d in enumerate(deps)
        ),
    )


def parse_catalog(data: Any) -> List[OfferingMetadata]:
    """Valida e materializa o documento de catálogo."""
    _expect(isinstance(data, dict), "catalog must be a mapping/dict")
    offerings = data.get("offerings")
    _expect(isinstance(offerings, list), "offerings must be a list")

    seen: Set[Tuple[str, str]] = set()
    out: List[OfferingMetadata] = []
    for i, o in enumerate(offerings):
        where = f"offerings[{i}]"
        _expect(isinstance(o, dict), f"{where} must be a mapping")
        for key in ("catalog_id", "offering_id", "name"):
            _expect(_is_non_empty_str(o.get(key)), f"{where}.{key} is required")

        ident = (o["catalog_id"], o["offering_id"])
        _expect(ident not in seen, f"duplicate offering: {ident[0]}/{ident[1]}")
        seen.add(ident)

        versions = o.get("versions") or []
        _expect(isinstance(versions, list), f"{where}.versions must be a list")

        out.append(
            OfferingMetadata(
                catalog_id=o["catalog_id"],
                offering_id=o["offering_id"],
                name=o["name"],
                versions=tuple(
                    _parse_version(v, f"{where}.versions[{j}]", o["catalog_id"]) for j, v in enumerate(versions)
                ),
            )
        )
    return out


def catalog_to_dict(offerings: List[OfferingMetadata]) -> Dict[str, Any]:
    return {
        "offerings": [
            {
                "catalog_id": o.catalog_id,
                "offering_id": o.offering_id,
                "name": o.name,
                "versions": [
                    {
                        "version_locator": v.version_locator,
                        "version": v.version,
                        "flavor": v.flavor,
                        "install_kind": v.install_kind,
                        "dependencies": [d.to_dict() for d in v.dependencies],
                    }
                    for v in o.versions
                ],
            }
            for o in offerings
        ]
    }
