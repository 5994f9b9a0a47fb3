"""
Contrato canônico de Task do schema-checker.

Uma Task é a menor unidade executável do grafo: possui um id único,
declara os ids das Tasks das quais depende e implementa `run`.

Responsabilidades de uma Task:
    - executar sua lógica uma única vez por execução do grafo
    - ler resultados anteriores apenas via o mapping `results`
    - comunicar seu desfecho exclusivamente pelo valor de retorno

Princípios fundamentais:
    - Tasks não conhecem o Engine nem o planner
    - Conformidade por duck typing (@runtime_checkable)
    - Uma Task pode ser um simples valor (`FunctionTask`), sem herança

Limites explícitos:
    - Não define política de retry ou de tratamento de exceções
    - Não decide ordem de execução
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional, Protocol, Sequence, Tuple, Union, runtime_checkable

from .context import RunContext
from .types import TaskResult


Results = Mapping[str, TaskResult]
TaskOutput = Union[TaskResult, Mapping[str, Any], None]
TaskFn = Callable[[RunContext, Results], TaskOutput]


@runtime_checkable
class Task(Protocol):
    """
    Contrato mínimo de uma Task executável pelo Engine.

    Atributos obrigatórios:
        - id: identificador único e estável da Task
        - depends_on: ids das Tasks pré-requisito

    `run(ctx, results)` recebe o contexto da execução e os resultados de
    todas as Tasks já executadas (não apenas dos pré-requisitos diretos).
    Pode retornar um TaskResult, um mapping (tratado como SUCCESS) ou None.
    """
    id: str
    depends_on: Sequence[str]

    def run(self, ctx: RunContext, results: Results) -> TaskOutput:
        """Executa a tarefa uma única vez."""
        ...


@dataclass(frozen=True)
class FunctionTask:
    """Task declarada como valor: id + pré-requisitos + função."""

    id: str
    fn: TaskFn = field(repr=False, compare=False)
    depends_on: Tuple[str, ...] = ()
    description: Optional[str] = None

    def run(self, ctx: RunContext, results: Results) -> TaskOutput:
        return self.fn(ctx, results)
