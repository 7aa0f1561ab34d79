"""
Restrições de versão usadas pelo gateway estático.

Gramática (v1):
    - cláusulas separadas por vírgula ou espaço, todas devem ser satisfeitas
    - operadores: `>=`, `<=`, `>`, `<`, `=`, `==`, `^`, `~`
    - versão sem operador → igualdade exata
    - `*`, vazio ou `latest` → qualquer versão

Decisões arquiteturais:
    - Parsing e ordenação de versões via `packaging.version.Version`
      (`v` inicial aceito, pré-releases ordenadas antes da release)
    - Comparações via `packaging.specifiers.SpecifierSet`; esta camada só
      traduz a gramática do catálogo para especificadores
    - `^0.y.z` fixa o minor; `^x.y.z` (x > 0) fixa o major; `~x.y.z` fixa o minor
    - Pré-releases participam do match (o catálogo publica o que publica)

Limites explícitos:
    - Não resolve versões; apenas responde se uma versão satisfaz a restrição
"""

from __future__ import annotations

import re
from typing import List

from packaging.specifiers import SpecifierSet
from packaging.version import Version

_CLAUSE_RE = re.compile(r"^(>=|<=|==|>|<|=|\^|~)?\s*(.+)$")
_ANY = {"", "*", "latest"}


def parse_version(raw: str) -> Version:
    """Converte `v1.2.3` em `Version("1.2.3")`.

    Raises:
        ValueError: Se a versão for inválida (`InvalidVersion`).
    """
    return Version(str(raw).strip())


def _split_clauses(constraint: str) -> List[str]:
    # "> = 1.0" e ">= 1.0" viram um único token
    normalized = re.sub(r"(>=|<=|==|>|<|=|\^|~)\s+", r"\1", constraint.strip())
    return [c for c in re.split(r"[,\s]+", normalized) if c]


def _caret_or_tilde(op: str, base: Version) -> List[str]:
    major, minor = (list(base.release) + [0, 0])[:2]
    if op == "~" or major == 0:
        upper = f"{major}.{minor + 1}.0"
    else:
        upper = f"{major + 1}.0.0"
    return [f">={base}", f"<{upper}"]


def _to_specifiers(clause: str) -> List[str]:
    m = _CLAUSE_RE.match(clause)
    if not m:
        raise ValueError(f"invalid version constraint: {clause!r}")
    op, raw = m.group(1) or "==", m.group(2)
    if raw in _ANY:
        return []
    target = parse_version(raw)
    if op in {"^", "~"}:
        return _caret_or_tilde(op, target)
    if op == "=":
        op = "=="
    return [f"{op}{target}"]


def to_specifier_set(constraint: str) -> SpecifierSet:
    """Traduz uma restrição do catálogo para `SpecifierSet`.

    Raises:
        ValueError: Se alguma cláusula for inválida.
    """
    if constraint is None or constraint.strip() in _ANY:
        return SpecifierSet()
    specifiers: List[str] = []
    for clause in _split_clauses(constraint):
        specifiers.extend(_to_specifiers(clause))
    return SpecifierSet(",".join(specifiers))


def satisfies(version: str, constraint: str) -> bool:
    """Indica se `version` satisfaz todas as cláusulas de `constraint`.

    Raises:
        ValueError: Se a versão ou a restrição forem inválidas.
    """
    return to_specifier_set(constraint).contains(parse_version(version), prereleases=True)
