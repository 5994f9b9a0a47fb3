"""
Engine de execução do grafo de Tasks do schema-checker.

O Engine planeja o grafo (planner) e executa cada Task exatamente uma vez,
sequencialmente, repassando a tabela de resultados acumulada.

Semântica fail-soft:
- Exceções levantadas pelo corpo de uma Task são capturadas e convertidas
  em ErrorPayload, registradas como evento `error` no RunContext e
  armazenadas como TaskResult FAILED. A execução continua.
- Apenas erros de topologia (TopologyError) escapam de `run()`.

Compatibilidade com TaskResult frozen:
- O Engine nunca muta TaskResult in-place; qualquer ajuste (task_id,
  warnings do contexto) gera uma nova instância via dataclasses.replace.
- Cada `run()` descarta os warnings do contexto das Tasks do grafo antes
  de executar: um resultado carrega apenas os warnings da própria execução.

Políticas (configuração resolvida, seção `engine`):
- `tasks.<id>.enabled: false` → SKIPPED sem executar o corpo
- `engine.fail_fast` (padrão false) → após a primeira falha, as Tasks
  restantes são registradas como SKIPPED
- `engine.skip_on_failed_prerequisite` (padrão false) → Task cujo
  pré-requisito falhou é registrada como SKIPPED
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Mapping

from schema_checker.core.errors import (
    ErrorPayload,
    engine_configuration_error,
    engine_execution_error,
)
from schema_checker.core.exceptions import ProvisioningException
from schema_checker.core.pipeline.context import RunContext
from schema_checker.core.pipeline.graph import TaskGraph
from schema_checker.core.pipeline.task import Task
from schema_checker.core.pipeline.types import TaskResult, TaskStatus

from .planner import plan_execution


ENGINE_TASK_ID = "engine"


@dataclass(frozen=True)
class RunResult:
    """Resultado agregado de uma execução do grafo."""

    tasks: Dict[str, TaskResult] = field(default_factory=dict)
    order: List[str] = field(default_factory=list)

    def by_status(self, status: TaskStatus) -> List[str]:
        return [tid for tid in self.order if self.tasks[tid].status == status]

    @property
    def ok(self) -> bool:
        return all(r.ok for r in self.tasks.values())


class Engine:
    """Engine canônico do schema-checker (planner + executor)."""

    def __init__(self, *, graph: TaskGraph, ctx: RunContext):
        self.graph = graph
        self.ctx = ctx

    def _is_enabled(self, task_id: str) -> bool:
        tasks_cfg = (self.ctx.config or {}).get("tasks", {}) or {}
        task_cfg = tasks_cfg.get(task_id, {}) or {}
        return bool(task_cfg.get("enabled", True))

    def _engine_flag(self, name: str) -> bool:
        engine_cfg = (self.ctx.config or {}).get("engine", {}) or {}
        return bool(engine_cfg.get(name, False))

    # ------------------------------------------------------------------
    # exceção -> ErrorPayload
    # ------------------------------------------------------------------

    def _exception_to_error(self, task_id: str, exc: Exception) -> ErrorPayload:
        """Converte exceções em ErrorPayload serializável.

        - ProvisioningException: mantém código, details e hint
        - Outras exceções: ENGINE_EXECUTION_ERROR, sem stack trace
        """
        if isinstance(exc, ProvisioningException):
            return exc.to_payload()

        return engine_execution_error(
            task=task_id,
            exc_type=exc.__class__.__name__,
            exc_message=str(exc) or None,
        )

    def _with_ctx_warnings(self, result: TaskResult) -> TaskResult:
        merged: List[str] = []
        for msg in list(result.warnings) + list(self.ctx.warnings.get(result.task_id, [])):
            if msg not in merged:
                merged.append(msg)
        return replace(result, warnings=merged)

    def _mk_result(
        self,
        *,
        task_id: str,
        status: TaskStatus,
        summary: str,
        payload: Dict[str, Any] | None = None,
    ) -> TaskResult:
        r = TaskResult(
            task_id=task_id,
            status=status,
            summary=summary,
            payload=dict(payload or {}),
        )
        return self._with_ctx_warnings(r)

    def _normalize(self, task_id: str, output: Any) -> TaskResult:
        if isinstance(output, TaskResult):
            return self._with_ctx_warnings(replace(output, task_id=task_id))

        if output is None:
            return self._mk_result(task_id=task_id, status=TaskStatus.SUCCESS, summary="ok")

        if isinstance(output, Mapping):
            return self._mk_result(
                task_id=task_id,
                status=TaskStatus.SUCCESS,
                summary="ok",
                payload=dict(output),
            )

        error = engine_configuration_error(
            details={
                "task": task_id,
                "expected": "TaskResult | Mapping | None",
                "received": type(output).__name__,
            },
        )
        self.ctx.log(task_id=task_id, level="error", message=error.message, error=error.to_dict())
        return self._mk_result(
            task_id=task_id,
            status=TaskStatus.FAILED,
            summary=error.message,
            payload={"error": error.to_dict()},
        )

    def _skip(self, task_id: str, reason: str) -> TaskResult:
        self.ctx.log(task_id=task_id, level="info", message=reason)
        return self._mk_result(
            task_id=task_id,
            status=TaskStatus.SKIPPED,
            summary=reason,
            payload={"reason": reason},
        )

    def _execute_one(self, task: Task, results: Mapping[str, TaskResult]) -> TaskResult:
        tid = task.id
        try:
            output = task.run(self.ctx, results)
        except Exception as e:
            error = self._exception_to_error(tid, e)
            self.ctx.log(task_id=tid, level="error", message=error.message, error=error.to_dict())
            return self._mk_result(
                task_id=tid,
                status=TaskStatus.FAILED,
                summary=error.message,
                payload={"error": error.to_dict()},
            )
        return self._normalize(tid, output)

    def run(self) -> RunResult:
        ordered = plan_execution(self.graph)

        # warnings de uma execução anterior não pertencem a esta
        for task in ordered:
            self.ctx.warnings.pop(task.id, None)

        fail_fast = self._engine_flag("fail_fast")
        skip_on_failed_prereq = self._engine_flag("skip_on_failed_prerequisite")

        self.ctx.log(
            task_id=ENGINE_TASK_ID,
            level="info",
            message="run started",
            order=[t.id for t in ordered],
        )

        results: Dict[str, TaskResult] = {}
        order: List[str] = []
        halted = False

        for task in ordered:
            tid = task.id
            order.append(tid)

            if halted:
                results[tid] = self._skip(tid, "skipped due to fail_fast")
                continue

            if not self._is_enabled(tid):
                results[tid] = self._skip(tid, "skipped by config")
                continue

            if skip_on_failed_prereq and any(
                results[dep].status == TaskStatus.FAILED
                for dep in self.graph.prerequisites(tid)
            ):
                results[tid] = self._skip(tid, "skipped due to failed prerequisite")
                continue

            # Tasks recebem uma cópia: nenhuma Task altera a entrada de outra
            result = self._execute_one(task, dict(results))
            results[tid] = result

            if result.status == TaskStatus.FAILED and fail_fast:
                halted = True

        self.ctx.log(
            task_id=ENGINE_TASK_ID,
            level="info",
            message="run finished",
            statuses={tid: results[tid].status.value for tid in order},
        )
        return RunResult(tasks=results, order=order)
