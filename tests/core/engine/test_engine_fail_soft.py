# tests/core/engine/test_engine_fail_soft.py
"""
Testes da semântica fail-soft do Engine (padrão).

Uma exceção no corpo de uma Task:
- é convertida em ErrorPayload e registrada como FAILED
- gera um evento `error` no RunContext
- não interrompe irmãs nem dependentes
"""

from schema_checker.core.engine.engine import Engine
from schema_checker.core.exceptions import WarehouseCreationError
from schema_checker.core.pipeline.graph import TaskGraph
from schema_checker.core.pipeline.types import TaskStatus


def test_failure_is_recorded_and_execution_continues(dummy_ctx, DummyTask, FailingTask):
    root = FailingTask("root")
    child = DummyTask("child", depends_on=["root"])
    sibling = DummyTask("sibling")
    g = TaskGraph().add_task(root).add_task(child).add_task(sibling)

    result = Engine(graph=g, ctx=dummy_ctx).run()

    assert set(result.tasks) == {"root", "child", "sibling"}
    assert result.tasks["root"].status == TaskStatus.FAILED
    assert result.tasks["child"].status == TaskStatus.SUCCESS
    assert result.tasks["sibling"].status == TaskStatus.SUCCESS
    # o dependente vê a falha registrada do pré-requisito
    assert child.calls == [["root"]]


def test_generic_exception_becomes_engine_execution_error(dummy_ctx, FailingTask):
    g = TaskGraph().add_task(FailingTask("f", exc=KeyError("missing")))

    result = Engine(graph=g, ctx=dummy_ctx).run()

    error = result.tasks["f"].payload["error"]
    assert error["type"] == "ENGINE_EXECUTION_ERROR"
    assert error["details"]["exc_type"] == "KeyError"
    assert error["details"]["task"] == "f"

    events = [e for e in dummy_ctx.events_for("f") if e["level"] == "error"]
    assert len(events) == 1


def test_typed_exception_keeps_its_code(dummy_ctx, FailingTask):
    exc = WarehouseCreationError(
        message="Falha ao criar dataset p.d",
        details={"resource": "dataset"},
        hint="check permissions",
    )
    g = TaskGraph().add_task(FailingTask("f", exc=exc))

    result = Engine(graph=g, ctx=dummy_ctx).run()

    failed = result.tasks["f"]
    assert failed.summary == "Falha ao criar dataset p.d"
    assert failed.payload["error"] == {
        "type": "WAREHOUSE_CREATION_ERROR",
        "message": "Falha ao criar dataset p.d",
        "details": {"resource": "dataset"},
        "hint": "check permissions",
    }


def test_one_entry_per_task_even_when_all_fail(dummy_ctx, FailingTask):
    g = TaskGraph()
    for i in range(5):
        g.add_task(FailingTask(f"f{i}"))

    result = Engine(graph=g, ctx=dummy_ctx).run()

    assert len(result.tasks) == 5
    assert result.order == [f"f{i}" for i in range(5)]


def test_skip_on_failed_prerequisite_policy(dummy_ctx, DummyTask, FailingTask):
    dummy_ctx.config["engine"]["skip_on_failed_prerequisite"] = True
    child = DummyTask("child", depends_on=["root"])
    g = TaskGraph().add_task(FailingTask("root")).add_task(child).add_task(DummyTask("other"))

    result = Engine(graph=g, ctx=dummy_ctx).run()

    assert result.tasks["child"].status == TaskStatus.SKIPPED
    assert result.tasks["child"].payload["reason"] == "skipped due to failed prerequisite"
    assert child.calls == []
    assert result.tasks["other"].status == TaskStatus.SUCCESS
