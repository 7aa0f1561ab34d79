# tests/core/graph/test_required_dependencies.py
"""
Testes da política de dependências obrigatórias (`optional: false`).

Cobrem os dois pontos em que a política é aplicada:
- durante o build, quando um override desabilita uma dependência obrigatória
- no enforcement prévio sobre a árvore de overrides
"""

import pytest

from addon_closure.core.addon import AddonConfig
from addon_closure.core.config import ClosureSettings, RequiredPolicy
from addon_closure.core.errors import REQUIRED_DEPENDENCY_DISABLED
from addon_closure.core.exceptions import RequiredDependencyDisabledError
from addon_closure.core.graph import enforce_required_dependencies
from tests.fixtures import catalogs


_ERROR = ClosureSettings(required_policy=RequiredPolicy.ERROR)


def _disable_base(make_root, **kwargs):
    return make_root("app", dependencies=[AddonConfig(offering_name="base", enabled=False, **kwargs)])


# -----------------------------
# Build
# -----------------------------

def test_build_force_enables_required_dependency(build_for, make_root, dummy_ctx):
    result = build_for(catalogs.required_catalog(), _disable_base(make_root), ctx=dummy_ctx)

    assert result.names() == ["app", "base", "extras"]
    warnings = dummy_ctx.warnings["graph.builder"]
    assert len(warnings) == 1
    assert "base" in warnings[0] and "app" in warnings[0]


def test_build_with_error_policy_raises(build_for, make_root):
    with pytest.raises(RequiredDependencyDisabledError) as ei:
        build_for(catalogs.required_catalog(), _disable_base(make_root), settings=_ERROR)

    err = ei.value
    assert err.decision_required is True
    assert err.details["type"] == REQUIRED_DEPENDENCY_DISABLED
    assert err.details["offering_name"] == "base"
    assert err.details["required_by"] == "app"


def test_optional_dependency_disable_is_honored(build_for, make_root, dummy_ctx):
    root = make_root("app", dependencies=[AddonConfig(offering_name="extras", enabled=False)])

    result = build_for(catalogs.required_catalog(), root, settings=_ERROR, ctx=dummy_ctx)

    assert result.names() == ["app", "base"]
    assert "graph.builder" not in dummy_ctx.warnings


def test_override_can_declare_dependency_optional(build_for, make_root):
    result = build_for(catalogs.required_catalog(), _disable_base(make_root, is_required=False), settings=_ERROR)
    assert result.names() == ["app", "extras"]


# -----------------------------
# Enforcement sobre a árvore
# -----------------------------

def test_enforcement_force_enables_on_a_copy(make_gateway, make_root, dummy_ctx):
    root = _disable_base(make_root)

    report = enforce_required_dependencies(root, gateway=make_gateway(catalogs.required_catalog()), ctx=dummy_ctx)

    base = report.config.find_dependencies("base")[0]
    assert base.enabled is True
    assert base.is_required is True
    assert base.required_by == ["app"]
    assert report.force_enabled == ["base"]
    assert report.warnings == [
        "Required dependency base was force-enabled despite being disabled (required by app)"
    ]
    assert dummy_ctx.warnings["graph.required"] == report.warnings

    assert root.dependencies[0].enabled is False


def test_enforced_tree_builds_without_builder_warnings(make_gateway, build_for, make_root, dummy_ctx):
    gw = make_gateway(catalogs.required_catalog())
    report = enforce_required_dependencies(_disable_base(make_root), gateway=gw)

    result = build_for(None, report.config, gateway=gw, ctx=dummy_ctx)

    assert result.names() == ["app", "base", "extras"]
    assert "graph.builder" not in dummy_ctx.warnings


def test_enforcement_error_policy_raises(make_gateway, make_root):
    with pytest.raises(RequiredDependencyDisabledError):
        enforce_required_dependencies(
            _disable_base(make_root),
            gateway=make_gateway(catalogs.required_catalog()),
            settings=_ERROR,
        )


def test_enforcement_leaves_optional_dependencies_disabled(make_gateway, make_root):
    root = make_root("app", dependencies=[AddonConfig(offering_name="extras", enabled=False)])

    report = enforce_required_dependencies(root, gateway=make_gateway(catalogs.required_catalog()))

    assert report.config.dependencies[0].enabled is False
    assert report.force_enabled == []


def test_enforcement_lookup_failure_is_a_warning(make_gateway, make_root):
    root = make_root("missing", dependencies=[AddonConfig(offering_name="base", enabled=False)])

    report = enforce_required_dependencies(root, gateway=make_gateway(catalogs.required_catalog()))

    assert report.force_enabled == []
    assert len(report.warnings) == 1
    assert report.warnings[0].startswith("could not check if dependency base is required")


def _disable_base_under_extras(make_root):
    return make_root(
        "app",
        dependencies=[
            AddonConfig(offering_name="extras", dependencies=[AddonConfig(offering_name="base", enabled=False)]),
        ],
    )


def test_disable_under_other_parent_still_force_enables_required(build_for, make_root, dummy_ctx):
    result = build_for(catalogs.required_catalog(), _disable_base_under_extras(make_root), ctx=dummy_ctx)

    assert result.names() == ["app", "base", "extras"]
    assert len(dummy_ctx.warnings["graph.builder"]) == 1


def test_disable_under_other_parent_raises_under_error_policy(build_for, make_root):
    with pytest.raises(RequiredDependencyDisabledError) as ei:
        build_for(catalogs.required_catalog(), _disable_base_under_extras(make_root), settings=_ERROR)

    assert ei.value.details["required_by"] == "app"
