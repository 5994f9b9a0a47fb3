"""
schema-checker: Canonical Exceptions

Exceções tipadas internas do schema-checker.

Objetivo:
- Permitir que Tasks e adaptadores de warehouse levantem exceções semânticas
- Facilitar o mapeamento determinístico para ErrorPayload
- Evitar RuntimeError genérico nas fronteiras com o warehouse

Regras:
- Exceções carregam apenas dados estruturados (serializáveis) em `details`.
- Lacunas de configuração não são exceções: as Tasks registram SKIPPED
  com um payload `CONFIGURATION_GAP`.
- Erros de topologia do grafo NÃO pertencem a esta hierarquia
  (ver core.pipeline.graph.TopologyError).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .errors import (
    WAREHOUSE_CREATION_ERROR,
    ErrorPayload,
)


@dataclass(frozen=True)
class ProvisioningException(Exception):
    """Base das exceções internas.

    - `details` sempre estruturado
    - mensagem curta e humana
    """

    message: str
    details: Dict[str, Any] = field(default_factory=dict)
    hint: Optional[str] = None

    code = "PROVISIONING_ERROR"

    def __str__(self) -> str:
        return self.message

    def to_payload(self) -> ErrorPayload:
        return ErrorPayload(
            type=self.code,
            message=self.message,
            details=dict(self.details),
            hint=self.hint,
        )

    @classmethod
    def from_payload(cls, payload: ErrorPayload) -> "ProvisioningException":
        return cls(message=payload.message, details=dict(payload.details), hint=payload.hint)


@dataclass(frozen=True)
class WarehouseCreationError(ProvisioningException):
    """O warehouse rejeitou uma chamada de criação (dataset ou tabela)."""

    code = WAREHOUSE_CREATION_ERROR
