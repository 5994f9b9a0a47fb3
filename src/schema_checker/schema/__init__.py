"""
Entry types e descritores de schema das tabelas de relatório.
"""

from .entries import ENTRY_SCHEMAS, EntryType, schema_for
from .fields import NULLABLE, REQUIRED, FieldDescriptor, FieldType, Schema

__all__ = [
    "ENTRY_SCHEMAS",
    "EntryType",
    "FieldDescriptor",
    "FieldType",
    "NULLABLE",
    "REQUIRED",
    "Schema",
    "schema_for",
]
