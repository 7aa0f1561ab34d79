"""
Addon Closure — Canonical Exceptions (v1)

Este módulo define exceções tipadas internas do Addon Closure.

Objetivo:
- Permitir que builder e checagens levantem exceções semânticas tipadas
- Facilitar o mapeamento determinístico para ErrorPayload
- Evitar ValueError/RuntimeError genéricos em falhas de resolução

Regras:
- Achados de validação e de ciclos NÃO são exceções (são resultados).
- Exceções devem carregar apenas dados estruturados (serializáveis).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .errors import ErrorPayload


@dataclass(frozen=True)
class ClosureException(Exception):
    """Base class para exceções internas do Addon Closure.

    Importante:
    - Sempre carregar dados estruturados em `details`
    - Mensagem deve ser curta e humana
    """

    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None
    decision_required: bool = False

    def __str__(self) -> str:  # pragma: no cover
        return self.message


# ---------------------------------------------------------------------------
# Resolução do grafo
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ResolutionError(ClosureException):
    """Metadados de catálogo ausentes ou inválidos para um nó alcançável e habilitado."""


@dataclass(frozen=True)
class RequiredDependencyDisabledError(ClosureException):
    """Override tenta desabilitar uma dependência obrigatória sob política `error`."""


# ---------------------------------------------------------------------------
# Referências entre configs
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class CircularDependencyError(ClosureException):
    """Ciclos detectados em modo estrito."""


def payload_from_exception(exc: ClosureException) -> ErrorPayload:
    """Converte uma ClosureException em ErrorPayload.

    O nome da classe é usado como código estável quando o chamador não
    fornece um tipo próprio em `details["type"]`.
    """
    details = dict(exc.details or {})
    return ErrorPayload(
        type=str(details.pop("type", exc.__class__.__name__)),
        message=str(exc) or "Erro do Addon Closure",
        details=details,
        hint=exc.hint,
        decision_required=bool(exc.decision_required),
    )
