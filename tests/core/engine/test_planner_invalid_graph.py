# tests/core/engine/test_planner_invalid_graph.py
"""
Testes de grafos inválidos no planner.

O TaskGraph rejeita ciclos e pré-requisitos desconhecidos no registro;
o planner revalida a estrutura e nunca devolve um plano parcial, mesmo
que o estado interno do grafo tenha sido corrompido.
"""

import pytest

try:
    from schema_checker.core.engine.planner import plan_execution
    from schema_checker.core.pipeline.graph import (
        CycleDetectedError,
        TaskGraph,
        UnknownPrerequisiteError,
    )
except Exception as e:
    plan_execution = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    if _IMPORT_ERR is not None:
        pytest.fail(f"""Missing planner contracts. Implement:
- plan_execution
- CycleDetectedError
- UnknownPrerequisiteError
Import error: {_IMPORT_ERR}
""")


def test_cycle_in_graph_state_is_rejected(DummyTask):
    _require_imports()
    g = TaskGraph().add_task(DummyTask("a")).add_task(DummyTask("b"), "a")
    # força um ciclo contornando add_dependency
    g._prerequisites["a"].add("b")

    with pytest.raises(CycleDetectedError):
        plan_execution(g)


def test_dangling_edge_is_rejected(DummyTask):
    _require_imports()
    g = TaskGraph().add_task(DummyTask("a"))
    g._prerequisites["a"].add("ghost")

    with pytest.raises(UnknownPrerequisiteError):
        plan_execution(g)
