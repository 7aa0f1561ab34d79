"""
Detector de ciclos e de referências não resolvidas entre configs pendentes.

Compõe a busca genérica de ciclos (`find_cycles`) com a apresentação
específica do domínio: cada id volta a ser o nome de exibição da config, e
cada aresta é rotulada com o campo de input real que carrega a referência.

Formato de um ciclo renderizado:

    CIRCULAR DEPENDENCY DETECTED: A → B → A
      A.outputs:vpc_id → B (reads B.outputs.vpc)
      B.outputs:key_ref → A (reads A.outputs.key)

    RESOLUTION OPTIONS:
      • Break one of the edges above by removing the reference or restructuring the inputs
      • Use existing resources instead of creating new ones
      • Restructure deployment order by splitting dependencies

Invariantes:
    - Nenhuma entrada ou nenhuma aresta → lista vazia (não é erro)
    - Referências ilegíveis ou para configs fora do conjunto pendente não
      são arestas
    - A detecção independe de modo estrito; a decisão fatal × warning é do
      chamador (ver `check_pending_configs`)
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from ..context import CheckContext
from .cycles import find_cycles
from .parser import Reference, parse_reference
from .types import ConfigDependencyInfo


COMPONENT = "references.detector"

UNKNOWN_INPUT = "unknown_input"

CYCLE_HEADER = "CIRCULAR DEPENDENCY DETECTED"

RESOLUTION_OPTIONS = (
    "Break one of the edges above by removing the reference or restructuring the inputs",
    "Use existing resources instead of creating new ones",
    "Restructure deployment order by splitting dependencies",
)


def find_input_field_name(config: ConfigDependencyInfo, reference: str) -> str:
    """Campo de input de `config` que carrega `reference`; `unknown_input` se nenhum."""
    if reference in config.reference_fields:
        return config.reference_fields[reference]
    for field_name, value in config.input_field_references.items():
        if value == reference:
            return field_name
    return UNKNOWN_INPUT


def _index(pending: Sequence[ConfigDependencyInfo]) -> Dict[str, ConfigDependencyInfo]:
    by_id: Dict[str, ConfigDependencyInfo] = {}
    for config in pending:
        by_id.setdefault(config.config_id, config)
    return by_id


def _render(
    cycle: List[str],
    by_id: Dict[str, ConfigDependencyInfo],
    edge_refs: Dict[Tuple[str, str], Reference],
) -> str:
    names = [by_id[c].name for c in cycle]
    lines = [f"{CYCLE_HEADER}: {' → '.join(names + [names[0]])}"]

    for i, source_id in enumerate(cycle):
        target_id = cycle[(i + 1) % len(cycle)]
        source, target = by_id[source_id], by_id[target_id]
        ref = edge_refs[(source_id, target_id)]
        kind = ref.kind.value
        input_field = find_input_field_name(source, ref.raw)
        lines.append(
            f"  {source.name}.{kind}:{input_field} → {target.name} "
            f"(reads {target.name}.{kind}.{ref.field_name})"
        )

    lines.append("")
    lines.append("RESOLUTION OPTIONS:")
    lines.extend(f"  • {option}" for option in RESOLUTION_OPTIONS)
    return "\n".join(lines)


def detect_circular_dependencies(
    pending: Sequence[ConfigDependencyInfo],
    *,
    ctx: Optional[CheckContext] = None,
) -> List[str]:
    """
    Ciclos de referência entre configs pendentes, já renderizados.

    Args:
        pending: Configs ainda não implantadas.
        ctx: Contexto opcional para eventos.

    Returns:
        List[str]: Uma descrição por ciclo, em ordem determinística.
    """
    if not pending:
        return []

    by_id = _index(pending)
    graph: Dict[str, List[str]] = {}
    edge_refs: Dict[Tuple[str, str], Reference] = {}

    for config_id, config in by_id.items():
        targets: List[str] = []
        for raw in config.input_references:
            ref = parse_reference(raw)
            if ref is None or ref.config_id not in by_id:
                continue
            if ref.config_id not in targets:
                targets.append(ref.config_id)
                edge_refs[(config_id, ref.config_id)] = ref
        graph[config_id] = targets

    rendered = [_render(cycle, by_id, edge_refs) for cycle in find_cycles(graph)]

    if ctx is not None:
        ctx.log(
            component=COMPONENT,
            level="error" if rendered else "info",
            message="circular dependency detection completed",
            pending=len(by_id),
            cycles=len(rendered),
        )
    return rendered


def find_unresolved_references(
    pending: Sequence[ConfigDependencyInfo],
    existing_config_ids: Iterable[str],
) -> List[str]:
    """Uma linha `<Nome> → references non-existent config <id>` por referência órfã."""
    existing = set(existing_config_ids)
    unresolved: List[str] = []
    for config in pending:
        for raw in config.input_references:
            ref = parse_reference(raw)
            if ref is not None and ref.config_id not in existing:
                unresolved.append(f"{config.name} → references non-existent config {ref.config_id}")
    return unresolved
