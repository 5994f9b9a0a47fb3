"""
Configuração do provisionamento.

`ProvisioningSettings` reúne os identificadores do warehouse, as
associações entry type → tabela e as duas políticas de criação. A mesma
instância é compartilhada entre o builder do job e as Tasks, que leem os
valores no momento da execução (última escrita vence).

Seção de configuração esperada (YAML):

    warehouse:
      project_id: my-project
      dataset_id: observertc
      create_dataset_if_missing: false
      create_table_if_missing: false
      tables:
        InboundRTP: inbound_rtp
        Track: tracks
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from schema_checker.core.config.errors import (
    InvalidConfigRootTypeError,
    InvalidPolicyValueError,
    InvalidTableBindingError,
)
from schema_checker.schema.entries import EntryType


def _policy(section: Mapping[str, Any], name: str) -> bool:
    """Política ausente ou null vale False; qualquer valor não-bool é rejeitado."""
    value = section.get(name)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise InvalidPolicyValueError(
            f"warehouse.{name} deve ser bool, recebido: {value!r} ({type(value).__name__})"
        )
    return value


@dataclass
class ProvisioningSettings:
    project_id: Optional[str] = None
    dataset_id: Optional[str] = None
    tables: Dict[EntryType, str] = field(default_factory=dict)
    create_dataset_if_missing: bool = False
    create_table_if_missing: bool = False

    def bind(self, entry_type: "EntryType | str", table: Optional[str]) -> None:
        entry = EntryType.parse(entry_type)
        if table:
            self.tables[entry] = table
        else:
            self.tables.pop(entry, None)

    def table_for(self, entry_type: EntryType) -> Optional[str]:
        return self.tables.get(entry_type)

    def missing_identifiers(self) -> list:
        missing = []
        if not self.project_id:
            missing.append("project_id")
        if not self.dataset_id:
            missing.append("dataset_id")
        return missing

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> "ProvisioningSettings":
        """
        Constrói as settings a partir da seção `warehouse` da configuração
        resolvida. Seção ausente resulta em settings vazias (todas as Tasks
        serão registradas como SKIPPED com warning).

        Raises:
            InvalidConfigRootTypeError: se `warehouse` ou `warehouse.tables`
                não forem dicts.
            InvalidPolicyValueError: se uma política de criação não for bool.
            InvalidTableBindingError: se `warehouse.tables` citar um entry
                type desconhecido.
        """
        section = (config or {}).get("warehouse") or {}
        if not isinstance(section, Mapping):
            raise InvalidConfigRootTypeError(
                f"Seção 'warehouse' deve ser dict, recebido: {type(section).__name__}"
            )

        raw_tables = section.get("tables") or {}
        if not isinstance(raw_tables, Mapping):
            raise InvalidConfigRootTypeError(
                f"Seção 'warehouse.tables' deve ser dict, recebido: {type(raw_tables).__name__}"
            )

        tables: Dict[EntryType, str] = {}
        for name, table in raw_tables.items():
            try:
                entry = EntryType.parse(name)
            except ValueError:
                raise InvalidTableBindingError(
                    f"Entry type desconhecido em warehouse.tables: {name!r}"
                ) from None
            if table:
                tables[entry] = str(table)

        return cls(
            project_id=section.get("project_id") or None,
            dataset_id=section.get("dataset_id") or None,
            tables=tables,
            create_dataset_if_missing=_policy(section, "create_dataset_if_missing"),
            create_table_if_missing=_policy(section, "create_table_if_missing"),
        )
