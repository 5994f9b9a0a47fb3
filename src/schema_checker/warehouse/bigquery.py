"""
Adaptador BigQuery para o contrato `Warehouse`.

Traduz as chamadas do job de provisionamento para `google.cloud.bigquery`:
    - existência via `get_dataset` / `get_table` (`NotFound` → False)
    - criação via `create_dataset` / `create_table`
    - `FieldDescriptor` → `SchemaField(name, field_type, mode=...)`
    - `GoogleAPICallError` na criação → `WarehouseCreationError`

O pacote google-cloud-bigquery é um extra opcional (`pip install
schema-checker[bigquery]`) e só é importado quando o adaptador é usado.
Um `client` pode ser injetado (testes, credenciais customizadas).
"""

from __future__ import annotations

from typing import Any, List, Optional

from schema_checker.core.errors import warehouse_creation_error
from schema_checker.core.exceptions import WarehouseCreationError
from schema_checker.schema.fields import Schema


def _bigquery():
    try:
        from google.cloud import bigquery  # type: ignore
    except ImportError as e:
        raise ImportError(
            "google-cloud-bigquery é necessário para BigQueryWarehouse. "
            "Instale com: pip install schema-checker[bigquery]"
        ) from e
    return bigquery


def _api_exceptions():
    from google.api_core import exceptions  # type: ignore
    return exceptions


class BigQueryWarehouse:
    def __init__(self, client: Optional[Any] = None, *, project: Optional[str] = None):
        self._client = client
        self._project = project

    @property
    def client(self) -> Any:
        if self._client is None:
            self._client = _bigquery().Client(project=self._project)
        return self._client

    # ------------------------------------------------------------------
    # schema
    # ------------------------------------------------------------------
    def to_schema_fields(self, schema: Schema) -> List[Any]:
        bigquery = _bigquery()
        return [
            bigquery.SchemaField(f.name, f.type.value, mode=f.mode)
            for f in schema
        ]

    # ------------------------------------------------------------------
    # dataset
    # ------------------------------------------------------------------
    def dataset_exists(self, project: str, dataset: str) -> bool:
        try:
            self.client.get_dataset(f"{project}.{dataset}")
        except _api_exceptions().NotFound:
            return False
        return True

    def create_dataset(self, project: str, dataset: str) -> None:
        bigquery = _bigquery()
        try:
            self.client.create_dataset(bigquery.Dataset(f"{project}.{dataset}"))
        except _api_exceptions().GoogleAPICallError as e:
            raise WarehouseCreationError.from_payload(
                warehouse_creation_error(
                    resource="dataset", project=project, dataset=dataset, reason=str(e)
                )
            ) from e

    # ------------------------------------------------------------------
    # table
    # ------------------------------------------------------------------
    def table_exists(self, project: str, dataset: str, table: str) -> bool:
        try:
            self.client.get_table(f"{project}.{dataset}.{table}")
        except _api_exceptions().NotFound:
            return False
        return True

    def create_table(self, project: str, dataset: str, table: str, schema: Schema) -> None:
        bigquery = _bigquery()
        definition = bigquery.Table(
            f"{project}.{dataset}.{table}",
            schema=self.to_schema_fields(schema),
        )
        try:
            self.client.create_table(definition)
        except _api_exceptions().GoogleAPICallError as e:
            raise WarehouseCreationError.from_payload(
                warehouse_creation_error(
                    resource="table", project=project, dataset=dataset, table=table, reason=str(e)
                )
            ) from e
