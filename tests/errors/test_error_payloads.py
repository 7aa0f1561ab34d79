"""
Test — Payloads canônicos de erro

Valida que exceções e achados do Addon Closure são convertidos em
payloads estáveis: `type` é um código, `details` é serializável e todo
payload carrega um hint acionável.
"""

import json

import pytest

from addon_closure.core.errors import (
    CIRCULAR_DEPENDENCY,
    RESOLUTION_FAILED,
    ErrorPayload,
    circular_dependency,
    config_missing,
    dependency_version_mismatch,
    required_dependency_disabled,
    resolution_failed,
    unresolved_reference,
)
from addon_closure.core.exceptions import ClosureException, ResolutionError, payload_from_exception
from addon_closure.core.identity import NodeIdentity


NODE = NodeIdentity("kms", "v5.1.4", "fully-configurable")


def test_payload_from_exception_uses_type_from_details():
    exc = ResolutionError(
        message="falha",
        details={"type": RESOLUTION_FAILED, "catalog_id": "cat"},
        hint="verifique o catálogo",
    )

    payload = payload_from_exception(exc)

    assert isinstance(payload, ErrorPayload)
    assert payload.type == RESOLUTION_FAILED
    assert payload.details == {"catalog_id": "cat"}
    assert payload.hint == "verifique o catálogo"
    assert exc.details["type"] == RESOLUTION_FAILED


def test_payload_from_exception_falls_back_to_class_name():
    payload = payload_from_exception(ClosureException(message="x", details={}))
    assert payload.type == "ClosureException"
    assert payload.message == "x"


def test_exceptions_are_immutable():
    exc = ResolutionError(message="x", details={})
    with pytest.raises(Exception):
        exc.message = "y"


@pytest.mark.parametrize(
    "payload",
    [
        resolution_failed(catalog_id="cat", offering_id="off", version_locator="loc", reason="boom"),
        required_dependency_disabled(offering_name="base", required_by="app"),
        config_missing(node=NODE),
        dependency_version_mismatch(addon=NODE, dependency_required=NODE, dependencies_available=[NODE]),
        circular_dependency(cycles=["CIRCULAR DEPENDENCY DETECTED: A → B → A"]),
        unresolved_reference(config_name="A", missing_config_id="gone", reference="ref:/configs/gone/outputs/x"),
    ],
)
def test_payloads_are_serializable_and_actionable(payload):
    out = payload.to_dict()

    assert set(out) == {"type", "message", "details", "hint", "decision_required"}
    assert out["type"].isupper()
    assert out["hint"]
    json.dumps(out)


def test_only_required_dependency_demands_decision():
    assert required_dependency_disabled(offering_name="base", required_by="app").decision_required is True
    assert circular_dependency(cycles=[]).decision_required is False
    assert circular_dependency(cycles=[]).type == CIRCULAR_DEPENDENCY
