"""
Descritores de coluna usados nos schemas das tabelas de relatório.

Um `FieldDescriptor` é neutro em relação ao warehouse: nome, tipo primitivo
e obrigatoriedade. O adaptador do warehouse traduz o descritor para o tipo
nativo do cliente (ver warehouse.bigquery).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class FieldType(str, Enum):
    STRING = "STRING"
    INTEGER = "INTEGER"
    FLOAT = "FLOAT"
    BOOLEAN = "BOOLEAN"


REQUIRED = "REQUIRED"
NULLABLE = "NULLABLE"


@dataclass(frozen=True)
class FieldDescriptor:
    name: str
    type: FieldType
    required: bool = False

    @property
    def mode(self) -> str:
        return REQUIRED if self.required else NULLABLE


Schema = Tuple[FieldDescriptor, ...]


# atalhos para manter as tabelas de schema legíveis
def string(name: str, required: bool = False) -> FieldDescriptor:
    return FieldDescriptor(name, FieldType.STRING, required)


def integer(name: str, required: bool = False) -> FieldDescriptor:
    return FieldDescriptor(name, FieldType.INTEGER, required)


def float_(name: str, required: bool = False) -> FieldDescriptor:
    return FieldDescriptor(name, FieldType.FLOAT, required)


def boolean(name: str, required: bool = False) -> FieldDescriptor:
    return FieldDescriptor(name, FieldType.BOOLEAN, required)
