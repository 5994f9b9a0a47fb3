"""
schema-checker: provisionamento idempotente de dataset e tabelas de
relatórios WebRTC em um warehouse analítico.

Arquitetura em alto nível:
    - core.pipeline → Tasks, resultados, contexto e grafo
    - core.engine   → planejamento e execução fail-soft, RunLatch
    - core.config   → carregamento, merge e hashing de configuração
    - schema        → entry types e schemas das tabelas
    - warehouse     → contrato do warehouse e adaptador BigQuery
    - provisioning  → SchemaCheckerJob

Uso típico:

    from schema_checker import SchemaCheckerJob
    from schema_checker.warehouse import BigQueryWarehouse

    result = (
        SchemaCheckerJob(BigQueryWarehouse())
        .with_project_id("my-project")
        .with_dataset_id("observertc")
        .with_entry_name("InboundRTP", "inbound_rtp")
        .with_create_table_if_not_exists(True)
        .perform()
    )
"""

from .core.engine import RunLatch, RunResult
from .core.pipeline import RunContext, TaskResult, TaskStatus
from .provisioning import ProvisioningSettings, SchemaCheckerJob
from .schema import EntryType

__all__ = [
    "EntryType",
    "ProvisioningSettings",
    "RunContext",
    "RunLatch",
    "RunResult",
    "SchemaCheckerJob",
    "TaskResult",
    "TaskStatus",
]
