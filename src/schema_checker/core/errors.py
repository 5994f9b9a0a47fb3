"""
schema-checker: Canonical Error Structures

Este módulo define o padrão canônico de erros do schema-checker.
Erros registrados em um TaskResult FAILED (ou em warnings de um SKIPPED)
fazem parte do contrato operacional do job e devem ser:

- explícitos
- serializáveis
- acionáveis
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ErrorPayload:
    """
    Payload canônico de erro.

    Campos:
    - type: código estável do erro (não é texto livre)
    - message: mensagem curta, humana e objetiva
    - details: dados estruturados relevantes para diagnóstico
    - hint: ação sugerida ao operador (onde corrigir)
    """

    type: str
    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de erro
# ---------------------------------------------------------------------------

# Configuração / Warehouse
CONFIGURATION_GAP = "CONFIGURATION_GAP"
WAREHOUSE_CREATION_ERROR = "WAREHOUSE_CREATION_ERROR"

# Engine / Execução
ENGINE_EXECUTION_ERROR = "ENGINE_EXECUTION_ERROR"
ENGINE_CONFIGURATION_ERROR = "ENGINE_CONFIGURATION_ERROR"


# ---------------------------------------------------------------------------
# Helpers de fábrica
# ---------------------------------------------------------------------------

def configuration_gap(
    *,
    missing: str,
    task: Optional[str] = None,
    entry_type: Optional[str] = None,
    hint: str = "Declare o valor ausente na seção `warehouse` da configuração ou via builder do job.",
) -> ErrorPayload:
    return ErrorPayload(
        type=CONFIGURATION_GAP,
        message=f"Configuração ausente: {missing}",
        details={
            "missing": missing,
            "task": task,
            "entry_type": entry_type,
        },
        hint=hint,
    )


def warehouse_creation_error(
    *,
    resource: str,
    project: Optional[str] = None,
    dataset: Optional[str] = None,
    table: Optional[str] = None,
    reason: Optional[str] = None,
    hint: str = "Verifique permissões e quotas do projeto no warehouse. Nenhum retry é aplicado automaticamente.",
) -> ErrorPayload:
    label = {"table": "tabela"}.get(resource, resource)
    qualified = ".".join(p for p in (project, dataset, table) if p)
    return ErrorPayload(
        type=WAREHOUSE_CREATION_ERROR,
        message=f"Falha ao criar {label} {qualified}" if qualified else f"Falha ao criar {label} no warehouse",
        details={
            "resource": resource,
            "project": project,
            "dataset": dataset,
            "table": table,
            "reason": reason,
        },
        hint=hint,
    )


def engine_execution_error(
    *,
    task: Optional[str] = None,
    exc_type: Optional[str] = None,
    exc_message: Optional[str] = None,
    hint: str = "Verifique os eventos do RunContext para diagnosticar a falha. Nenhum fallback é aplicado automaticamente.",
) -> ErrorPayload:
    return ErrorPayload(
        type=ENGINE_EXECUTION_ERROR,
        message=exc_message or "Falha inesperada durante a execução da task",
        details={
            "task": task,
            "exc_type": exc_type,
            "exc_message": exc_message,
        },
        hint=hint,
    )


def engine_configuration_error(
    *,
    message: str = "Task retornou tipo inválido",
    details: Optional[Dict[str, Any]] = None,
    hint: str = "Ajuste a Task para retornar TaskResult, um mapping ou None.",
) -> ErrorPayload:
    return ErrorPayload(
        type=ENGINE_CONFIGURATION_ERROR,
        message=message,
        details=details or {},
        hint=hint,
    )
