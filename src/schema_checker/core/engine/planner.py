"""
Planejador de execução do grafo de Tasks.

Este módulo produz uma ordem de execução topológica determinística para
as Tasks registradas em um `TaskGraph`.

O planner opera exclusivamente em nível estrutural, analisando:
    - arestas task → pré-requisito
    - pré-requisitos pendentes (arestas para Tasks não registradas)
    - formação de ciclos

Decisões arquiteturais:
    - Utiliza o algoritmo de Kahn
    - Empates são resolvidos pela ordem de registro no grafo
    - Erros estruturais são fatais: nunca há plano parcial

Invariantes:
    - Nenhuma Task aparece antes de seus pré-requisitos
    - Todas as Tasks aparecem exatamente uma vez
    - O mesmo grafo produz sempre a mesma ordem

Limites explícitos:
    - Não executa Tasks
    - Não interage com RunContext
    - Não decide políticas de execução
"""

from __future__ import annotations

from typing import Dict, List, Set

from schema_checker.core.pipeline.graph import (
    CycleDetectedError,
    TaskGraph,
    UnknownPrerequisiteError,
)
from schema_checker.core.pipeline.task import Task


def plan_execution(graph: TaskGraph) -> List[Task]:
    """
    Valida o grafo e produz a ordem topológica de execução.

    Sempre que múltiplas Tasks estiverem prontas, a escolha segue a ordem
    em que foram registradas no grafo.

    Args:
        graph (TaskGraph): grafo de Tasks já montado.

    Returns:
        List[Task]: Tasks em ordem de execução.

    Raises:
        UnknownPrerequisiteError: se uma aresta aponta para Task inexistente.
        CycleDetectedError: se nenhuma ordem completa existir.
    """
    ids = graph.ids()
    position: Dict[str, int] = {tid: i for i, tid in enumerate(ids)}

    incoming_count: Dict[str, int] = {}
    outgoing: Dict[str, Set[str]] = {tid: set() for tid in ids}

    for tid in ids:
        prereqs = graph.prerequisites(tid)
        for dep in prereqs:
            if dep not in position:
                raise UnknownPrerequisiteError(
                    f"Task '{tid}' depends on unknown task '{dep}'"
                )
            outgoing[dep].add(tid)
        incoming_count[tid] = len(prereqs)

    ready: List[str] = [tid for tid in ids if incoming_count[tid] == 0]
    order_ids: List[str] = []

    while ready:
        tid = ready.pop(0)
        order_ids.append(tid)
        for child in outgoing[tid]:
            incoming_count[child] -= 1
            if incoming_count[child] == 0:
                ready.append(child)
        ready.sort(key=position.__getitem__)

    if len(order_ids) != len(ids):
        pending = sorted(tid for tid in ids if incoming_count[tid] > 0)
        raise CycleDetectedError(f"Cycle detected in task dependency graph: {pending}")

    return [graph.get(tid) for tid in order_ids]
