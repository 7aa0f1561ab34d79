"""
Validador de implantação: esperado × implantado.

Compara o grafo e a lista esperada produzidos pelo builder com a lista de
nós efetivamente implantados, classificando as diferenças:

    - missing_configs:    esperado − implantado
    - unexpected_configs: implantado − esperado
    - dependency_errors:  aresta P → C com P implantado e C ausente, listando
                          as versões de C (mesmo offering e flavor) presentes

Decisões arquiteturais:
    - Semântica de conjunto por `NodeIdentity`; duplicatas colapsam e a
      ordem de entrada é preservada
    - Entradas podem ser `NodeIdentity`, registros (mapas) ou chaves
      `name:version:flavor`; entradas ilegíveis viram warning e são ignoradas
    - Nunca levanta exceção por achados

Invariantes:
    - `is_valid` ⇔ as três listas de achados estão vazias
    - Mesma entrada → mesmo resultado
"""

from __future__ import annotations

from typing import Any, Iterable, List, Mapping, Optional, Sequence

from ..context import CheckContext
from ..identity import NodeIdentity
from .types import DependencyError, ValidationResult


COMPONENT = "validation"

SUCCESS_MESSAGE = "actually deployed configs are same as expected deployed configs"


def _as_identity(value: Any) -> NodeIdentity:
    if isinstance(value, NodeIdentity):
        return value
    if isinstance(value, Mapping):
        return NodeIdentity.from_dict(value)
    if isinstance(value, str):
        return NodeIdentity.from_key(value)
    raise ValueError(f"unsupported node representation: {type(value).__name__}")


def _unique(values: Iterable[Any], ctx: Optional[CheckContext]) -> List[NodeIdentity]:
    seen = set()
    out: List[NodeIdentity] = []
    for value in values:
        try:
            node = _as_identity(value)
        except ValueError as e:
            _warn(ctx, f"ignoring invalid node: {e}")
            continue
        if node not in seen:
            seen.add(node)
            out.append(node)
    return out


def _warn(ctx: Optional[CheckContext], message: str) -> None:
    if ctx is not None:
        ctx.add_warning(component=COMPONENT, message=message)
        ctx.log(component=COMPONENT, level="warning", message=message)


def validate_dependencies(
    graph: Mapping[Any, Sequence[Any]],
    expected_deployed: Sequence[Any],
    actually_deployed: Sequence[Any],
    *,
    ctx: Optional[CheckContext] = None,
) -> ValidationResult:
    """
    Diferença estruturada entre o estado esperado e o implantado.

    Args:
        graph: Mapa pai → filhos, como em `DependencyGraphResult.graph`.
        expected_deployed: Lista esperada (`DependencyGraphResult.expected_deployed`).
        actually_deployed: Nós observados como implantados.
        ctx: Contexto opcional para eventos e warnings.

    Returns:
        ValidationResult: Achados e mensagens de resumo.
    """
    expected = _unique(expected_deployed, ctx)
    actual = _unique(actually_deployed, ctx)
    expected_set = set(expected)
    actual_set = set(actual)

    result = ValidationResult()
    result.missing_configs = [n for n in expected if n not in actual_set]
    result.unexpected_configs = [n for n in actual if n not in expected_set]

    for raw_parent, children in graph.items():
        try:
            parent = _as_identity(raw_parent)
        except ValueError:
            _warn(ctx, f"Invalid addon key format: {raw_parent}")
            continue
        if parent not in actual_set:
            continue

        for child in _unique(children, ctx):
            if child in actual_set:
                continue
            alternatives = [n for n in actual if n.same_offering_and_flavor(child) and n != child]
            result.dependency_errors.append(
                DependencyError(addon=parent, dependency_required=child, dependencies_available=alternatives)
            )

    result.is_valid = not (result.missing_configs or result.unexpected_configs or result.dependency_errors)

    if result.is_valid:
        result.messages.append(SUCCESS_MESSAGE)
    else:
        if result.dependency_errors:
            result.messages.append(f"found {len(result.dependency_errors)} dependency errors")
        if result.unexpected_configs:
            result.messages.append(f"found {len(result.unexpected_configs)} unexpected configs")
        if result.missing_configs:
            result.messages.append(f"found {len(result.missing_configs)} missing expected configs")
        result.messages.extend(e.describe() for e in result.dependency_errors)

    if ctx is not None:
        ctx.log(
            component=COMPONENT,
            level="info" if result.is_valid else "error",
            message="deployment validation completed",
            is_valid=result.is_valid,
            missing=len(result.missing_configs),
            unexpected=len(result.unexpected_configs),
            dependency_errors=len(result.dependency_errors),
        )

    return result
