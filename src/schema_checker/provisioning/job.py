"""
SchemaCheckerJob: orquestrador de provisionamento.

Monta o grafo fixo de quatorze Tasks (um dataset, treze tabelas; cada
tabela depende apenas do dataset) e o protege com uma `RunLatch`.

Decisões arquiteturais:
    - O grafo é declarativo (`provisioning_tasks`) e planejado uma única vez
      na construção: erros de topologia surgem antes de qualquer execução
    - A configuração é mutável via builder e lida pelas Tasks no momento
      da execução (última escrita vence)
    - A trava pertence ao chamador: cada job recebe uma nova trava, salvo
      quando uma é injetada (compartilhável entre jobs)

Garantias de `perform()`:
    - nunca levanta por problemas de Task ou de configuração
    - retorna None (sem executar nada) se a trava já estiver setada
"""

from __future__ import annotations

from typing import Any, List, Mapping, Optional

from schema_checker.core.config.hashing import compute_config_hash
from schema_checker.core.engine.engine import RunResult
from schema_checker.core.engine.job import Job
from schema_checker.core.engine.latch import RunLatch
from schema_checker.core.pipeline.context import RunContext
from schema_checker.core.pipeline.task import Task
from schema_checker.schema.entries import EntryType
from schema_checker.warehouse.base import Warehouse

from .dataset import DatasetTask
from .settings import ProvisioningSettings
from .table import TableTask


JOB_TASK_ID = "provision.job"


def provisioning_tasks(settings: ProvisioningSettings, warehouse: Warehouse) -> List[Task]:
    """Grafo fixo: dataset primeiro, depois uma Task por EntryType."""
    tasks: List[Task] = [DatasetTask(settings=settings, warehouse=warehouse)]
    tasks.extend(
        TableTask(entry_type=entry, settings=settings, warehouse=warehouse)
        for entry in EntryType
    )
    return tasks


class SchemaCheckerJob(Job):
    def __init__(
        self,
        warehouse: Warehouse,
        settings: Optional[ProvisioningSettings] = None,
        *,
        latch: Optional[RunLatch] = None,
        ctx: Optional[RunContext] = None,
    ):
        super().__init__(ctx=ctx)
        self.warehouse = warehouse
        self.settings = settings if settings is not None else ProvisioningSettings()
        self.latch = latch if latch is not None else RunLatch()

        for task in provisioning_tasks(self.settings, warehouse):
            self.with_task(task)

        self.plan()

    @classmethod
    def from_settings(
        cls,
        settings: ProvisioningSettings,
        warehouse: Warehouse,
        *,
        latch: Optional[RunLatch] = None,
        ctx: Optional[RunContext] = None,
    ) -> "SchemaCheckerJob":
        return cls(warehouse, settings, latch=latch, ctx=ctx)

    @classmethod
    def from_config(
        cls,
        config: Mapping[str, Any],
        warehouse: Warehouse,
        *,
        latch: Optional[RunLatch] = None,
        ctx: Optional[RunContext] = None,
    ) -> "SchemaCheckerJob":
        """Settings a partir da seção `warehouse`; o contexto herda config e hash."""
        settings = ProvisioningSettings.from_config(config)
        if ctx is None:
            resolved = dict(config)
            ctx = RunContext(config=resolved, meta={"config_hash": compute_config_hash(resolved)})
        return cls(warehouse, settings, latch=latch, ctx=ctx)

    # ------------------------------------------------------------------
    # builder
    # ------------------------------------------------------------------
    def with_project_id(self, value: Optional[str]) -> "SchemaCheckerJob":
        self.settings.project_id = value
        return self

    def with_dataset_id(self, value: Optional[str]) -> "SchemaCheckerJob":
        self.settings.dataset_id = value
        return self

    def with_entry_name(self, entry_type: "EntryType | str", table: Optional[str]) -> "SchemaCheckerJob":
        self.settings.bind(entry_type, table)
        return self

    def with_create_dataset_if_not_exists(self, value: bool) -> "SchemaCheckerJob":
        self.settings.create_dataset_if_missing = bool(value)
        return self

    def with_create_table_if_not_exists(self, value: bool) -> "SchemaCheckerJob":
        self.settings.create_table_if_missing = bool(value)
        return self

    # ------------------------------------------------------------------
    # execução
    # ------------------------------------------------------------------
    def perform(self) -> Optional[RunResult]:
        if not self.latch.try_acquire():
            self.ctx.log(task_id=JOB_TASK_ID, level="info", message="already performed, skipping")
            return None

        self.ctx.log(
            task_id=JOB_TASK_ID,
            level="info",
            message="provisioning started",
            project=self.settings.project_id,
            dataset=self.settings.dataset_id,
        )
        return self.execute()

    def run(self) -> Optional[RunResult]:
        return self.perform()
