# src/addon_closure/core/context.py
"""
CheckContext — Contexto canônico de uma verificação do Addon Closure.

Este módulo define o **CheckContext**, a estrutura opcional passada às
operações do core (build, validate, detect) durante uma verificação.

O CheckContext é o **único meio permitido** de:
- registro de logs estruturados (eventos, não strings livres)
- coleta de warnings não fatais por componente
- acesso à configuração efetiva e aos metadados da verificação

Princípios fundamentais:
- Isolamento por invocação (cada verificação possui seu próprio contexto)
- Nenhum componente do core escreve em stdout ou em estado global
- Todo skip/force-enable de dependência fica registrado como evento
"""

from __future__ import annotations

from copy import deepcopy
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
from uuid import uuid4

from .config import DEFAULT_CONFIG, compute_config_hash


@dataclass
class CheckContext:
    """
    Contexto de uma verificação de fechamento de dependências.

    Campos canônicos:
    - run_id: identificador único da verificação
    - created_at: timestamp UTC de criação do contexto
    - config: configuração efetiva (defaults + local deep-merge)
    - meta: metadados livres (ex.: config_hash, nome do teste)
    - warnings: warnings por componente
    - events: log estruturado de eventos
    """

    run_id: str
    created_at: datetime
    config: Dict[str, Any] = field(default_factory=dict)
    meta: Dict[str, Any] = field(default_factory=dict)

    warnings: Dict[str, List[str]] = field(default_factory=dict)
    events: List[Dict[str, Any]] = field(default_factory=list)

    @classmethod
    def create(cls, *, config: Optional[Dict[str, Any]] = None, run_id: Optional[str] = None) -> "CheckContext":
        """Cria um contexto novo registrando o hash da configuração efetiva."""
        effective = deepcopy(config) if config is not None else deepcopy(DEFAULT_CONFIG)
        return cls(
            run_id=run_id or uuid4().hex,
            created_at=datetime.now(timezone.utc),
            config=effective,
            meta={"config_hash": compute_config_hash(effective)},
        )

    # -----------------------------
    # Logging & warnings
    # -----------------------------
    def log(self, *, component: str, level: str, message: str, **extra: Any) -> None:
        event = {
            "run_id": self.run_id,
            "component": component,
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)

    def add_warning(self, *, component: str, message: str) -> None:
        if component not in self.warnings:
            self.warnings[component] = []
        self.warnings[component].append(message)

    def events_for(self, component: str) -> List[Dict[str, Any]]:
        return [e for e in self.events if e.get("component") == component]
