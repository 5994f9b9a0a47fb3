"""
Contrato do colaborador de warehouse.

O job de provisionamento só conhece esta capacidade mínima: verificar e
criar datasets e tabelas. Implementações concretas (ex.: BigQuery) vivem
em módulos próprios e nunca são importadas pelo core.

Regras:
    - `*_exists` nunca levanta por ausência; retorna False
    - `create_*` levanta `WarehouseCreationError` quando o warehouse rejeita
      a criação
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from schema_checker.core.exceptions import WarehouseCreationError
from schema_checker.schema.fields import Schema


@runtime_checkable
class Warehouse(Protocol):
    def dataset_exists(self, project: str, dataset: str) -> bool:
        ...

    def create_dataset(self, project: str, dataset: str) -> None:
        ...

    def table_exists(self, project: str, dataset: str, table: str) -> bool:
        ...

    def create_table(self, project: str, dataset: str, table: str, schema: Schema) -> None:
        ...


__all__ = ["Warehouse", "WarehouseCreationError"]
