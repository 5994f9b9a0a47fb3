"""
Job: grafo de Tasks + contexto de execução.

O `Job` é a fachada mínima sobre `TaskGraph` e `Engine`: registra Tasks de
forma fluente e delega a execução ao Engine. Chamar `execute()` novamente
reexecuta todas as Tasks com uma nova tabela de resultados; a guarda de
execução única pertence ao orquestrador (ver provisioning.job).
"""

from __future__ import annotations

from typing import List, Optional

from schema_checker.core.pipeline.context import RunContext
from schema_checker.core.pipeline.graph import TaskGraph
from schema_checker.core.pipeline.task import Task

from .engine import Engine, RunResult
from .planner import plan_execution


class Job:
    def __init__(self, *, ctx: Optional[RunContext] = None, graph: Optional[TaskGraph] = None):
        self.ctx = ctx if ctx is not None else RunContext()
        self.graph = graph if graph is not None else TaskGraph()

    def with_task(self, task: Task, *prerequisites: str) -> "Job":
        self.graph.add_task(task, *prerequisites)
        return self

    def plan(self) -> List[Task]:
        return plan_execution(self.graph)

    def execute(self) -> RunResult:
        return Engine(graph=self.graph, ctx=self.ctx).run()
