# tests/core/references/test_reference_parser.py
"""
Testes do parser de referências e da varredura de inputs de configs pendentes.
"""

import pytest

from addon_closure.core.references import ConfigDependencyInfo, ReferenceKind, parse_reference


def test_parses_outputs_reference():
    ref = parse_reference("ref:/configs/cfg-a/outputs/vpc_id")

    assert ref is not None
    assert ref.config_id == "cfg-a"
    assert ref.kind is ReferenceKind.OUTPUTS
    assert ref.field_name == "vpc_id"
    assert ref.raw == "ref:/configs/cfg-a/outputs/vpc_id"


def test_parses_inputs_reference():
    ref = parse_reference("ref:/configs/cfg-b/inputs/region")
    assert ref.kind is ReferenceKind.INPUTS


@pytest.mark.parametrize(
    "raw",
    [
        "plain-value",
        "ref:/configs/cfg-a/secrets/x",
        "ref:/configs/cfg-a/outputs",
        "ref:/configs//outputs/x",
        "ref:/configs/cfg-a/outputs/x/extra",
        "ref:configs/cfg-a/outputs/x",
        "ref:/configs/cfg-a/outputs/x\n",
        " ref:/configs/cfg-a/outputs/x",
        "ref:/configs/cfg a/outputs/x",
        "ref:/configs/cfg-a/outputs/x y",
        "",
        None,
        42,
    ],
)
def test_non_references_return_none(raw):
    assert parse_reference(raw) is None


def test_from_inputs_maps_fields_and_dedupes():
    info = ConfigDependencyInfo.from_inputs(
        "cfg-a",
        "A",
        {
            "vpc_id": "ref:/configs/cfg-b/outputs/vpc",
            "region": "us-south",
            "same_vpc": "ref:/configs/cfg-b/outputs/vpc",
            "subnets": ["x", {"id": "ref:/configs/cfg-c/outputs/subnet"}],
        },
    )

    assert info.input_references == [
        "ref:/configs/cfg-b/outputs/vpc",
        "ref:/configs/cfg-c/outputs/subnet",
    ]
    assert info.input_field_references == {
        "vpc_id": "ref:/configs/cfg-b/outputs/vpc",
        "same_vpc": "ref:/configs/cfg-b/outputs/vpc",
        "subnets": "ref:/configs/cfg-c/outputs/subnet",
    }
    assert info.reference_fields == {
        "ref:/configs/cfg-b/outputs/vpc": "vpc_id",
        "ref:/configs/cfg-c/outputs/subnet": "subnets",
    }


def test_from_inputs_accepts_empty_inputs():
    info = ConfigDependencyInfo.from_inputs("cfg-a", "A", None)
    assert info.input_references == []
    assert info.input_field_references == {}
