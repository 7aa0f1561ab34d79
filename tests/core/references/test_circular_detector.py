# tests/core/references/test_circular_detector.py
"""
Testes do detector de ciclos entre configs pendentes.

Os testes asseguram que:
- ciclos são renderizados com nomes de exibição e campos de input reais
- referências externas ao conjunto pendente não geram arestas
- referências órfãs são relatadas separadamente
"""

from addon_closure.core.references import (
    UNKNOWN_INPUT,
    ConfigDependencyInfo,
    detect_circular_dependencies,
    find_input_field_name,
    find_unresolved_references,
)


def _info(config_id, name, **inputs):
    return ConfigDependencyInfo.from_inputs(config_id, name, inputs)


def _pair():
    a = _info("id-a", "A", vpc_id="ref:/configs/id-b/outputs/vpc")
    b = _info("id-b", "B", key_ref="ref:/configs/id-a/outputs/key")
    return [a, b]


def test_two_config_cycle_is_rendered_with_field_names():
    cycles = detect_circular_dependencies(_pair())

    assert len(cycles) == 1
    lines = cycles[0].splitlines()
    assert lines[0] == "CIRCULAR DEPENDENCY DETECTED: A → B → A"
    assert lines[1] == "  A.outputs:vpc_id → B (reads B.outputs.vpc)"
    assert lines[2] == "  B.outputs:key_ref → A (reads A.outputs.key)"
    assert lines[3] == ""
    assert lines[4] == "RESOLUTION OPTIONS:"
    assert all(line.startswith("  • ") for line in lines[5:])
    assert UNKNOWN_INPUT not in cycles[0]


def test_references_outside_pending_set_do_not_form_cycles():
    a = _info("id-a", "A", vpc_id="ref:/configs/deployed-1/outputs/vpc")
    b = _info("id-b", "B", key="ref:/configs/deployed-2/outputs/key", plain="value")

    assert detect_circular_dependencies([a, b]) == []


def test_empty_input_is_not_an_error():
    assert detect_circular_dependencies([]) == []


def test_self_reference_is_a_cycle():
    a = _info("id-a", "A", loop="ref:/configs/id-a/outputs/other")

    cycles = detect_circular_dependencies([a])

    assert cycles[0].splitlines()[0] == "CIRCULAR DEPENDENCY DETECTED: A → A"
    assert cycles[0].splitlines()[1] == "  A.outputs:loop → A (reads A.outputs.other)"


def test_three_config_chain_without_back_edge():
    a = _info("id-a", "A", x="ref:/configs/id-b/outputs/x")
    b = _info("id-b", "B", y="ref:/configs/id-c/outputs/y")
    c = _info("id-c", "C")

    assert detect_circular_dependencies([a, b, c]) == []


def test_detection_is_logged(dummy_ctx):
    detect_circular_dependencies(_pair(), ctx=dummy_ctx)

    event = dummy_ctx.events_for("references.detector")[-1]
    assert event["cycles"] == 1
    assert event["level"] == "error"


def test_find_input_field_name_fallback():
    a, _ = _pair()
    assert find_input_field_name(a, "ref:/configs/id-b/outputs/vpc") == "vpc_id"
    assert find_input_field_name(a, "ref:/configs/zzz/outputs/vpc") == UNKNOWN_INPUT


def test_unresolved_references_are_listed():
    a = _info("id-a", "A", vpc="ref:/configs/gone/outputs/vpc", ok="ref:/configs/id-b/outputs/x")
    b = _info("id-b", "B")

    assert find_unresolved_references([a, b], ["id-a", "id-b"]) == [
        "A → references non-existent config gone"
    ]


def test_cycle_edge_from_later_reference_in_list_field_names_the_field():
    a = _info("id-a", "A", ids=["ref:/configs/ext/outputs/x", "ref:/configs/id-b/outputs/y"])
    b = _info("id-b", "B", k="ref:/configs/id-a/outputs/z")

    cycles = detect_circular_dependencies([a, b])

    assert len(cycles) == 1
    assert "  A.outputs:ids → B (reads B.outputs.y)" in cycles[0].splitlines()
    assert UNKNOWN_INPUT not in cycles[0]


def test_nested_map_reference_resolves_to_top_level_field():
    a = _info("id-a", "A", network={"vpc": "plain", "subnet": "ref:/configs/id-b/outputs/subnet"})
    assert find_input_field_name(a, "ref:/configs/id-b/outputs/subnet") == "network"
