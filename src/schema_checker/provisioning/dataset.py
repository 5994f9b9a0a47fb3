"""
Task de provisionamento do dataset (`provision.dataset`).

Pontos de decisão (cada um registra um evento `info` no RunContext):
    1. política `create_dataset_if_missing` desligada → SKIPPED, sem chamadas
    2. project_id/dataset_id ausentes → warning + SKIPPED (CONFIGURATION_GAP)
    3. dataset existe → SUCCESS {created: False}
    4. dataset ausente → create_dataset → SUCCESS {created: True}

Erros de criação não são capturados aqui: o Engine os registra como FAILED.
As Tasks de tabela continuam executando mesmo assim.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

from schema_checker.core.errors import configuration_gap
from schema_checker.core.pipeline.context import RunContext
from schema_checker.core.pipeline.task import Results
from schema_checker.core.pipeline.types import TaskResult, TaskStatus
from schema_checker.warehouse.base import Warehouse

from .settings import ProvisioningSettings


DATASET_TASK_ID = "provision.dataset"


@dataclass(frozen=True)
class DatasetTask:
    settings: ProvisioningSettings = field(repr=False, compare=False)
    warehouse: Warehouse = field(repr=False, compare=False)
    id: str = DATASET_TASK_ID
    depends_on: Tuple[str, ...] = ()

    def run(self, ctx: RunContext, results: Results) -> TaskResult:
        s = self.settings

        if not s.create_dataset_if_missing:
            msg = "dataset creation disabled"
            ctx.log(task_id=self.id, level="info", message=msg)
            return TaskResult(
                task_id=self.id,
                status=TaskStatus.SKIPPED,
                summary=msg,
                payload={"reason": msg},
            )

        missing = s.missing_identifiers()
        if missing:
            gap = configuration_gap(missing=", ".join(missing), task=self.id)
            ctx.add_warning(task_id=self.id, message=gap.message)
            ctx.log(task_id=self.id, level="warning", message=gap.message, missing=missing)
            return TaskResult(
                task_id=self.id,
                status=TaskStatus.SKIPPED,
                summary=gap.message,
                payload={"reason": gap.message, "gap": gap.to_dict()},
            )

        project, dataset = s.project_id, s.dataset_id
        ctx.log(
            task_id=self.id,
            level="info",
            message="checking dataset",
            project=project,
            dataset=dataset,
        )

        if self.warehouse.dataset_exists(project, dataset):
            ctx.log(task_id=self.id, level="info", message="dataset exists", project=project, dataset=dataset)
            return TaskResult(
                task_id=self.id,
                status=TaskStatus.SUCCESS,
                summary="dataset exists",
                payload={"project": project, "dataset": dataset, "created": False},
            )

        ctx.log(task_id=self.id, level="info", message="creating dataset", project=project, dataset=dataset)
        self.warehouse.create_dataset(project, dataset)
        ctx.log(task_id=self.id, level="info", message="dataset created", project=project, dataset=dataset)
        return TaskResult(
            task_id=self.id,
            status=TaskStatus.SUCCESS,
            summary="dataset created",
            payload={"project": project, "dataset": dataset, "created": True},
        )
