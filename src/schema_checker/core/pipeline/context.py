"""
Contexto de execução compartilhado do grafo de tarefas.

Este módulo define o `RunContext`, a estrutura passada a todas as Tasks
durante uma execução do grafo. Ele é o canal oficial de:
    - leitura da configuração resolvida
    - registro de logs estruturados (eventos)
    - coleta de warnings não fatais por Task

Invariantes:
    - Eventos sempre incluem `run_id` e `task_id`
    - Warnings são agrupados por `task_id`

Limites explícitos:
    - Não executa Tasks
    - Não armazena resultados (o ResultsTable é do Engine)
    - Não persiste eventos automaticamente
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List
from uuid import uuid4


def new_run_id() -> str:
    return f"run-{uuid4().hex[:12]}"


@dataclass
class RunContext:
    """
    Contexto de execução de uma run do grafo.

    Campos canônicos:
    - run_id: identificador único da execução
    - created_at: timestamp UTC de criação do contexto
    - config: configuração efetiva (defaults + local deep-merge)
    - meta: metadados livres (ex.: config_hash, origem do job)
    - events: log estruturado de eventos
    - warnings: warnings por task_id
    """

    run_id: str = field(default_factory=new_run_id)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    config: Dict[str, Any] = field(default_factory=dict)
    meta: Dict[str, Any] = field(default_factory=dict)

    events: List[Dict[str, Any]] = field(default_factory=list, init=False)
    warnings: Dict[str, List[str]] = field(default_factory=dict, init=False)

    # -----------------------------
    # Logging & warnings
    # -----------------------------
    def log(self, *, task_id: str, level: str, message: str, **extra: Any) -> None:
        event = {
            "run_id": self.run_id,
            "task_id": task_id,
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)

    def add_warning(self, *, task_id: str, message: str) -> None:
        if task_id not in self.warnings:
            self.warnings[task_id] = []
        self.warnings[task_id].append(message)

    def events_for(self, task_id: str) -> List[Dict[str, Any]]:
        return [e for e in self.events if e.get("task_id") == task_id]
