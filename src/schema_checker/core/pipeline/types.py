"""
Tipos canônicos do grafo de tarefas do schema-checker.

Este módulo define as estruturas que padronizam a comunicação entre
Tasks, Engine e o orquestrador de provisionamento.

Componentes principais:
    - TaskStatus → enum de estados finais (SUCCESS, SKIPPED, FAILED)
    - TaskResult → resultado imutável, etiquetado pelo status

Princípios fundamentais:
    - Toda Task produz exatamente um TaskResult por execução do grafo
    - Falhas não são colapsadas em "resultado vazio": ficam registradas
      explicitamente como FAILED, com payload de erro serializável
    - Nenhuma lógica de execução vive neste módulo

Limites explícitos:
    - Não executa Tasks
    - Não planeja o grafo
    - Não conhece o warehouse
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List


class TaskStatus(str, Enum):
    """
    Estados finais possíveis da execução de uma Task.

    Estados definidos:
        - SUCCESS: corpo executado, recurso verificado ou criado
        - SKIPPED: corpo não executado ou encerrado sem efeito
          (configuração ausente, política desabilitada, config `enabled: false`)
        - FAILED: corpo levantou exceção ou reportou falha do warehouse

    Estados intermediários (unscheduled, running) não pertencem a este enum;
    eles existem apenas durante o laço do Engine.
    """
    SUCCESS = "success"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass(frozen=True)
class TaskResult:
    """
    Resultado imutável da execução de uma Task.

    Campos:
        - task_id: identificador da Task no grafo
        - status: estado final (TaskStatus)
        - summary: resumo textual curto
        - payload: dados livres produzidos pela Task; em falhas contém
          `error` (ErrorPayload serializado), em skips contém `reason`
        - warnings: avisos não fatais associados à Task

    Invariantes:
        - Uma instância nunca é alterada após criada
        - O Engine garante `task_id` igual ao id da Task executada
    """
    task_id: str
    status: TaskStatus
    summary: str
    payload: Dict[str, Any] = field(default_factory=dict)
    warnings: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.status != TaskStatus.FAILED
