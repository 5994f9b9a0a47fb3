"""
Grafo estrutural de Tasks.

Este módulo define o `TaskGraph`, responsável por registrar Tasks e as
arestas task → pré-requisito, validando a integridade estrutural do grafo
no momento da construção, antes de qualquer planejamento ou execução.

O grafo atua como uma camada de proteção antecipada, garantindo que:
    - cada Task possua um identificador válido e único
    - pré-requisitos sejam declarados antes das Tasks que dependem deles
    - nenhuma aresta adicionada feche um ciclo

Decisões arquiteturais:
    - Erros de topologia são falhas fatais de construção (programação),
      nunca erros de runtime
    - A ordem de registro é preservada e usada como desempate pelo planner
    - O conjunto de pré-requisitos de uma Task é um conjunto (duplicatas colapsam)

Limites explícitos:
    - Não planeja execução (ver core.engine.planner)
    - Não executa Tasks
    - Não interage com RunContext
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Set

from .task import Task


class TopologyError(ValueError):
    """
    Base das violações estruturais do grafo de Tasks.

    Representa erros de programação na montagem do grafo (id duplicado,
    pré-requisito desconhecido, ciclo). Nunca é absorvida pelo Engine e
    deve interromper o startup do processo.
    """


class DuplicateTaskIdError(TopologyError):
    """Uma Task com o mesmo id já está registrada no grafo."""


class UnknownPrerequisiteError(TopologyError):
    """
    Um pré-requisito referenciado não está registrado no grafo.

    Pré-requisitos precisam ser registrados antes das Tasks que dependem
    deles; o grafo não tenta inferir nem criar Tasks ausentes.
    """


class CycleDetectedError(TopologyError):
    """
    O grafo de pré-requisitos contém (ou passaria a conter) um ciclo.

    Ciclos não são quebrados automaticamente; nenhuma execução parcial
    é permitida.
    """


@dataclass
class TaskGraph:
    """
    Registro canônico de Tasks e arestas de dependência.

    Invariantes:
        - Cada `task.id` é único no grafo
        - Todo pré-requisito registrado aponta para uma Task existente
        - A relação de pré-requisitos é acíclica
        - `tasks()` reflete exatamente a ordem de registro
    """

    _tasks: Dict[str, Task] = field(default_factory=dict, init=False, repr=False)
    _prerequisites: Dict[str, Set[str]] = field(default_factory=dict, init=False, repr=False)
    _order: List[str] = field(default_factory=list, init=False, repr=False)

    def add_task(self, task: Task, *prerequisites: str) -> "TaskGraph":
        task_id = getattr(task, "id", None)
        if not isinstance(task_id, str) or not task_id.strip():
            raise ValueError("task.id must be a non-empty string")

        if task_id in self._tasks:
            raise DuplicateTaskIdError(f"Duplicate task id: {task_id}")

        declared = list(getattr(task, "depends_on", ()) or ())
        prereqs: Set[str] = set()
        for dep in declared + list(prerequisites):
            if dep not in self._tasks:
                raise UnknownPrerequisiteError(
                    f"Task '{task_id}' depends on unknown task '{dep}'"
                )
            prereqs.add(dep)

        self._tasks[task_id] = task
        self._prerequisites[task_id] = prereqs
        self._order.append(task_id)
        return self

    def add_dependency(self, task_id: str, prerequisite_id: str) -> "TaskGraph":
        for tid in (task_id, prerequisite_id):
            if tid not in self._tasks:
                raise UnknownPrerequisiteError(f"Unknown task '{tid}'")

        # a nova aresta fecha um ciclo se task_id já é alcançável a partir do pré-requisito
        if task_id == prerequisite_id or self._reaches(prerequisite_id, task_id):
            raise CycleDetectedError(
                f"Adding '{task_id}' -> '{prerequisite_id}' would create a cycle"
            )

        self._prerequisites[task_id].add(prerequisite_id)
        return self

    def _reaches(self, start: str, target: str) -> bool:
        stack = [start]
        seen: Set[str] = set()
        while stack:
            current = stack.pop()
            if current == target:
                return True
            if current in seen:
                continue
            seen.add(current)
            stack.extend(self._prerequisites.get(current, ()))
        return False

    def get(self, task_id: str) -> Task:
        return self._tasks[task_id]

    def tasks(self) -> List[Task]:
        return [self._tasks[tid] for tid in self._order]

    def ids(self) -> List[str]:
        return list(self._order)

    def prerequisites(self, task_id: str) -> Set[str]:
        return set(self._prerequisites[task_id])

    def __contains__(self, task_id: object) -> bool:
        return task_id in self._tasks

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self.tasks())
