"""
Descrição de uma config pendente (ainda não implantada) e de suas referências.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping

from .parser import REFERENCE_PREFIX


def _collect(value: Any, out: List[str]) -> None:
    if isinstance(value, str):
        if value.startswith(REFERENCE_PREFIX) and value not in out:
            out.append(value)
    elif isinstance(value, Mapping):
        for v in value.values():
            _collect(v, out)
    elif isinstance(value, (list, tuple)):
        for v in value:
            _collect(v, out)


@dataclass
class ConfigDependencyInfo:
    """
    Config pendente com suas referências de input.

    Campos:
    - config_id: id da config
    - name: nome de exibição
    - input_references: referências encontradas nos inputs, em ordem, sem repetição
    - input_field_references: campo de input → referência que o preenche
    - reference_fields: referência → campo de input que a carrega (inclui
      referências aninhadas além da primeira de cada campo)
    """

    config_id: str
    name: str
    input_references: List[str] = field(default_factory=list)
    input_field_references: Dict[str, str] = field(default_factory=dict)
    reference_fields: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_inputs(cls, config_id: str, name: str, inputs: Mapping[str, Any]) -> "ConfigDependencyInfo":
        """
        Varre os inputs da config em busca de strings de referência.

        Valores aninhados (listas, mapas) também contribuem referências; o
        campo de topo que os contém é associado à primeira referência
        encontrada nele, e toda referência aninhada é associada de volta ao
        campo de topo em `reference_fields`.
        """
        references: List[str] = []
        by_field: Dict[str, str] = {}
        by_reference: Dict[str, str] = {}
        for field_name, value in (inputs or {}).items():
            found: List[str] = []
            _collect(value, found)
            if found:
                by_field[str(field_name)] = found[0]
            for ref in found:
                by_reference.setdefault(ref, str(field_name))
                if ref not in references:
                    references.append(ref)
        return cls(
            config_id=config_id,
            name=name,
            input_references=references,
            input_field_references=by_field,
            reference_fields=by_reference,
        )
