"""
# Pipeline Core: schema-checker

Contratos e estruturas fundamentais do grafo de tarefas.

## Componentes

- **types**: `TaskStatus`, `TaskResult`
- **task**: `Task` (Protocol) e `FunctionTask` (Task como valor)
- **context**: `RunContext` (log estruturado e warnings)
- **graph**: `TaskGraph` e a hierarquia `TopologyError`

## Princípios

- Tasks não conhecem o Engine nem o planner
- Dependências são explícitas e declaradas antes do uso
- Erros de topologia são fatais na construção
"""

from .context import RunContext
from .graph import (
    CycleDetectedError,
    DuplicateTaskIdError,
    TaskGraph,
    TopologyError,
    UnknownPrerequisiteError,
)
from .task import FunctionTask, Results, Task
from .types import TaskResult, TaskStatus

__all__ = [
    "CycleDetectedError",
    "DuplicateTaskIdError",
    "FunctionTask",
    "Results",
    "RunContext",
    "Task",
    "TaskGraph",
    "TaskResult",
    "TaskStatus",
    "TopologyError",
    "UnknownPrerequisiteError",
]
