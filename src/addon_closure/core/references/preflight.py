"""
Checagem pré-implantação das configs pendentes.

Combina detecção de ciclos e de referências não resolvidas e aplica o
modo estrito (`detection.strict_mode`): com ciclos, o modo estrito aborta
com `CircularDependencyError`; fora dele os ciclos viram warnings no
contexto e o resultado é devolvido normalmente.

Referências não resolvidas nunca são fatais aqui.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence

from ..config.settings import ClosureSettings
from ..context import CheckContext
from ..errors import ErrorPayload, circular_dependency, unresolved_reference
from ..exceptions import CircularDependencyError
from .detector import detect_circular_dependencies, find_unresolved_references
from .parser import parse_reference
from .types import ConfigDependencyInfo


COMPONENT = "references.preflight"


@dataclass
class PendingCheckResult:
    cycles: List[str] = field(default_factory=list)
    unresolved: List[str] = field(default_factory=list)
    payloads: List[ErrorPayload] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.cycles and not self.unresolved


def _unresolved_payloads(pending: Sequence[ConfigDependencyInfo], existing: set) -> List[ErrorPayload]:
    out: List[ErrorPayload] = []
    for config in pending:
        for raw in config.input_references:
            ref = parse_reference(raw)
            if ref is not None and ref.config_id not in existing:
                out.append(unresolved_reference(config_name=config.name, missing_config_id=ref.config_id, reference=raw))
    return out


def check_pending_configs(
    pending: Sequence[ConfigDependencyInfo],
    existing_config_ids: Iterable[str],
    *,
    settings: Optional[ClosureSettings] = None,
    ctx: Optional[CheckContext] = None,
) -> PendingCheckResult:
    """
    Raises:
        CircularDependencyError: Em modo estrito, quando há ciclos.
    """
    if settings is None:
        settings = ClosureSettings.from_config(ctx.config) if ctx is not None else ClosureSettings()

    existing = set(existing_config_ids)
    cycles = detect_circular_dependencies(pending, ctx=ctx)
    unresolved = find_unresolved_references(pending, existing)

    payloads: List[ErrorPayload] = []
    if cycles:
        payloads.append(circular_dependency(cycles=cycles))
    payloads.extend(_unresolved_payloads(pending, existing))

    if cycles and settings.strict_mode:
        payload = payloads[0]
        raise CircularDependencyError(
            message=f"{len(cycles)} circular dependency chain(s) detected among pending configs",
            details={"type": payload.type, **payload.details},
            hint=payload.hint,
        )

    if ctx is not None:
        for message in cycles + unresolved:
            ctx.add_warning(component=COMPONENT, message=message)

    return PendingCheckResult(cycles=cycles, unresolved=unresolved, payloads=payloads)
