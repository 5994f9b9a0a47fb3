"""
# Engine Core: schema-checker

Planejamento e execução do grafo de Tasks.

## Componentes

- **planner**: `plan_execution` (Kahn, desempate por ordem de registro)
- **engine**: `Engine` e `RunResult` (execução sequencial fail-soft)
- **job**: `Job` (registro fluente + execução)
- **latch**: `RunLatch` (execução única, test-and-set atômico)
"""

from .engine import Engine, RunResult
from .job import Job
from .latch import RunLatch
from .planner import plan_execution

__all__ = ["Engine", "Job", "RunLatch", "RunResult", "plan_execution"]
