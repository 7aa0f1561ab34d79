"""Addon Closure — Referências entre configs (core).

 - parsing de strings `ref:/configs/<id>/<outputs|inputs>/<campo>`
 - busca genérica de ciclos sobre ids abstratos
 - detecção e renderização de ciclos entre configs pendentes
 - referências para configs inexistentes
 - checagem pré-implantação com modo estrito
"""

from .cycles import find_cycles  # noqa: F401
from .detector import (  # noqa: F401
    UNKNOWN_INPUT,
    detect_circular_dependencies,
    find_input_field_name,
    find_unresolved_references,
)
from .parser import Reference, ReferenceKind, parse_reference  # noqa: F401
from .preflight import PendingCheckResult, check_pending_configs  # noqa: F401
from .types import ConfigDependencyInfo  # noqa: F401
