"""
Task genérica de provisionamento de tabela (`provision.table.<entry>`).

Uma instância por EntryType, parametrizada pelo entry type; o schema vem
de `schema.entries.ENTRY_SCHEMAS`.

Pontos de decisão:
    - entry type sem tabela associada → warning + SKIPPED, zero chamadas
    - project_id/dataset_id ausentes → warning + SKIPPED, zero chamadas
    - tabela existe → SUCCESS {created: False}
    - tabela ausente e `create_table_if_missing` desligada → SKIPPED,
      sem chamada de criação
    - tabela ausente e política ligada → create_table; `WarehouseCreationError`
      é capturada e retornada como FAILED (nunca propagada)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

from schema_checker.core.errors import configuration_gap
from schema_checker.core.exceptions import WarehouseCreationError
from schema_checker.core.pipeline.context import RunContext
from schema_checker.core.pipeline.task import Results
from schema_checker.core.pipeline.types import TaskResult, TaskStatus
from schema_checker.schema.entries import EntryType, schema_for
from schema_checker.warehouse.base import Warehouse

from .dataset import DATASET_TASK_ID
from .settings import ProvisioningSettings


def table_task_id(entry_type: EntryType) -> str:
    return f"provision.table.{entry_type.slug}"


@dataclass(frozen=True)
class TableTask:
    entry_type: EntryType
    settings: ProvisioningSettings = field(repr=False, compare=False)
    warehouse: Warehouse = field(repr=False, compare=False)
    depends_on: Tuple[str, ...] = (DATASET_TASK_ID,)

    @property
    def id(self) -> str:
        return table_task_id(self.entry_type)

    def _skipped(self, ctx: RunContext, message: str, **details) -> TaskResult:
        ctx.add_warning(task_id=self.id, message=message)
        ctx.log(task_id=self.id, level="warning", message=message, entry_type=self.entry_type.value, **details)
        gap = configuration_gap(missing=message, task=self.id, entry_type=self.entry_type.value)
        return TaskResult(
            task_id=self.id,
            status=TaskStatus.SKIPPED,
            summary=message,
            payload={"reason": message, "gap": gap.to_dict()},
        )

    def run(self, ctx: RunContext, results: Results) -> TaskResult:
        s = self.settings
        entry = self.entry_type.value

        table = s.table_for(self.entry_type)
        if not table:
            return self._skipped(ctx, f"no table bound for entry type {entry}")

        missing = s.missing_identifiers()
        if missing:
            return self._skipped(ctx, f"missing {', '.join(missing)}", table=table)

        project, dataset = s.project_id, s.dataset_id
        where = {"project": project, "dataset": dataset, "table": table, "entry_type": entry}

        ctx.log(task_id=self.id, level="info", message="checking table", **where)
        if self.warehouse.table_exists(project, dataset, table):
            ctx.log(task_id=self.id, level="info", message="table exists", **where)
            return TaskResult(
                task_id=self.id,
                status=TaskStatus.SUCCESS,
                summary="table exists",
                payload={**where, "created": False},
            )

        if not s.create_table_if_missing:
            msg = "table creation disabled"
            ctx.log(task_id=self.id, level="info", message=msg, **where)
            return TaskResult(
                task_id=self.id,
                status=TaskStatus.SKIPPED,
                summary=msg,
                payload={**where, "reason": msg},
            )

        schema = schema_for(self.entry_type)
        ctx.log(task_id=self.id, level="info", message="creating table", columns=len(schema), **where)
        try:
            self.warehouse.create_table(project, dataset, table, schema)
        except WarehouseCreationError as e:
            error = e.to_payload()
            ctx.log(task_id=self.id, level="error", message=error.message, error=error.to_dict(), **where)
            return TaskResult(
                task_id=self.id,
                status=TaskStatus.FAILED,
                summary=error.message,
                payload={**where, "error": error.to_dict()},
            )

        ctx.log(task_id=self.id, level="info", message="table created", **where)
        return TaskResult(
            task_id=self.id,
            status=TaskStatus.SUCCESS,
            summary="table created",
            payload={**where, "created": True, "columns": len(schema)},
        )
