"""Addon Closure — Validação de implantação (core).

Diferença estruturada entre o grafo esperado e os nós implantados.
"""

from .types import DependencyError, ValidationResult  # noqa: F401
from .validator import SUCCESS_MESSAGE, validate_dependencies  # noqa: F401
