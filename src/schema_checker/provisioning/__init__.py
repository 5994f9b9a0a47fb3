"""
Provisionamento de dataset e tabelas de relatório no warehouse.

Componentes:
    - settings → ProvisioningSettings (identificadores, tabelas, políticas)
    - dataset  → DatasetTask (`provision.dataset`)
    - table    → TableTask (`provision.table.<entry>`)
    - job      → SchemaCheckerJob (grafo fixo + RunLatch)
"""

from .dataset import DATASET_TASK_ID, DatasetTask
from .job import SchemaCheckerJob, provisioning_tasks
from .settings import ProvisioningSettings
from .table import TableTask, table_task_id

__all__ = [
    "DATASET_TASK_ID",
    "DatasetTask",
    "ProvisioningSettings",
    "SchemaCheckerJob",
    "TableTask",
    "provisioning_tasks",
    "table_task_id",
]
