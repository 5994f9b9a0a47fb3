# tests/provisioning/test_schema_checker_job.py
"""
Testes do orquestrador SchemaCheckerJob.

Os testes asseguram que:
- o grafo fixo tem 14 Tasks, todas as tabelas dependendo do dataset
- a RunLatch garante no máximo uma execução efetiva
- o builder é lido no momento da execução (última escrita vence)
- `perform()` nunca levanta por problemas de Task ou de configuração
- a verificação é idempotente contra um warehouse já provisionado
"""

import pytest

try:
    from schema_checker.core.engine.latch import RunLatch
    from schema_checker.core.pipeline.types import TaskStatus
    from schema_checker.provisioning.dataset import DATASET_TASK_ID
    from schema_checker.provisioning.job import SchemaCheckerJob
    from schema_checker.provisioning.settings import ProvisioningSettings
    from schema_checker.schema.entries import EntryType
except Exception as e:  # noqa: BLE001
    SchemaCheckerJob = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    if _IMPORT_ERR is not None:
        pytest.fail(f"Missing SchemaCheckerJob. Import error: {_IMPORT_ERR}")


def _fully_bound(job):
    for entry in EntryType:
        job.with_entry_name(entry, entry.slug)
    return job


def test_fixed_graph_shape(warehouse):
    _require_imports()
    job = SchemaCheckerJob(warehouse)

    ids = job.graph.ids()
    assert len(ids) == 14
    assert ids[0] == DATASET_TASK_ID
    for tid in ids[1:]:
        assert tid.startswith("provision.table.")
        assert job.graph.prerequisites(tid) == {DATASET_TASK_ID}
    assert job.plan()[0].id == DATASET_TASK_ID


def test_default_job_only_checks(warehouse, dummy_ctx):
    """Sem políticas ligadas, nenhuma chamada de criação é emitida."""
    _require_imports()
    job = _fully_bound(SchemaCheckerJob(warehouse, ctx=dummy_ctx))
    job.with_project_id("p").with_dataset_id("d")

    result = job.perform()

    assert len(result.tasks) == 14
    assert result.tasks[DATASET_TASK_ID].status == TaskStatus.SKIPPED
    assert warehouse.ops("create_dataset") == []
    assert warehouse.ops("create_table") == []
    assert len(warehouse.ops("table_exists")) == 13


def test_second_perform_is_a_noop(warehouse, dummy_ctx):
    _require_imports()
    job = _fully_bound(SchemaCheckerJob(warehouse, ctx=dummy_ctx)).with_project_id("p").with_dataset_id("d")

    first = job.perform()
    calls_after_first = list(warehouse.calls)
    second = job.perform()

    assert first is not None
    assert second is None
    assert warehouse.calls == calls_after_first
    assert job.latch.is_set
    assert dummy_ctx.events_for("provision.job")[-1]["message"] == "already performed, skipping"


def test_shared_latch_guards_across_instances(warehouse):
    _require_imports()
    latch = RunLatch()
    first = SchemaCheckerJob(warehouse, latch=latch).with_project_id("p").with_dataset_id("d")
    second = SchemaCheckerJob(warehouse, latch=latch).with_project_id("p").with_dataset_id("d")
    first.with_entry_name("Track", "tracks")
    second.with_entry_name("Track", "tracks")

    assert first.perform() is not None
    calls = len(warehouse.calls)

    assert second.perform() is None
    assert len(warehouse.calls) == calls


def test_fresh_latch_per_instance_by_default(warehouse):
    _require_imports()
    a = SchemaCheckerJob(warehouse)
    b = SchemaCheckerJob(warehouse)

    assert a.latch is not b.latch
    assert a.perform() is not None
    assert b.perform() is not None


def test_run_aliases_perform(warehouse):
    _require_imports()
    job = SchemaCheckerJob(warehouse)
    assert job.run() is not None
    assert job.run() is None


def test_builder_is_read_at_execution_time(warehouse):
    _require_imports()
    job = SchemaCheckerJob(warehouse)
    job.with_project_id("old").with_dataset_id("d").with_project_id("p")
    job.with_entry_name("InboundRTP", "a").with_entry_name("InboundRTP", "inbound_rtp")
    job.with_create_table_if_not_exists(True)

    job.perform()

    assert warehouse.ops("create_table") == [("create_table", "p", "d", "inbound_rtp")]


def test_execute_again_drops_warnings_of_the_previous_run(warehouse):
    _require_imports()
    warehouse.tables.add(("p", "d", "tracks"))
    job = SchemaCheckerJob(warehouse)
    job.execute()

    job.with_project_id("p").with_dataset_id("d").with_entry_name("Track", "tracks")
    result = job.execute()

    track = result.tasks["provision.table.track"]
    assert track.status == TaskStatus.SUCCESS
    assert track.warnings == []


def test_second_pass_is_idempotent(warehouse):
    """
    Contra um warehouse já provisionado, uma segunda execução (novo job,
    nova trava) não emite nenhuma chamada de criação.
    """
    _require_imports()

    def provision():
        job = _fully_bound(SchemaCheckerJob(warehouse))
        job.with_project_id("p").with_dataset_id("d")
        job.with_create_dataset_if_not_exists(True).with_create_table_if_not_exists(True)
        return job.perform()

    provision()
    assert len(warehouse.ops("create_dataset")) == 1
    assert len(warehouse.ops("create_table")) == 13

    warehouse.calls.clear()
    result = provision()

    assert warehouse.ops("create_dataset") == []
    assert warehouse.ops("create_table") == []
    assert all(r.payload.get("created") is False for r in result.tasks.values())


def test_table_failure_is_isolated(warehouse):
    _require_imports()
    job = _fully_bound(SchemaCheckerJob(warehouse)).with_project_id("p").with_dataset_id("d")
    job.with_create_table_if_not_exists(True)
    warehouse.fail_tables = {EntryType.TRACK.slug}

    result = job.perform()

    failed = result.by_status(TaskStatus.FAILED)
    assert failed == ["provision.table.track"]
    assert len(result.by_status(TaskStatus.SUCCESS)) == 12


def test_dataset_failure_does_not_abort_tables(warehouse):
    _require_imports()
    job = SchemaCheckerJob(warehouse).with_project_id("p").with_dataset_id("d")
    job.with_entry_name("Track", "tracks")
    job.with_create_dataset_if_not_exists(True).with_create_table_if_not_exists(True)
    warehouse.fail_dataset_creation = True

    result = job.perform()

    assert result.tasks[DATASET_TASK_ID].status == TaskStatus.FAILED
    assert result.tasks[DATASET_TASK_ID].payload["error"]["type"] == "WAREHOUSE_CREATION_ERROR"
    assert result.tasks["provision.table.track"].status == TaskStatus.SUCCESS


def test_unconfigured_job_never_raises(warehouse):
    _require_imports()
    result = SchemaCheckerJob(warehouse).with_create_table_if_not_exists(True).perform()

    assert len(result.tasks) == 14
    assert all(r.status == TaskStatus.SKIPPED for r in result.tasks.values())
    assert warehouse.calls == []


def test_from_config_builds_settings_and_context(warehouse):
    _require_imports()
    config = {
        "engine": {"fail_fast": False},
        "warehouse": {
            "project_id": "p",
            "dataset_id": "d",
            "create_table_if_missing": True,
            "tables": {"Track": "tracks"},
        },
    }

    job = SchemaCheckerJob.from_config(config, warehouse)

    assert job.settings.table_for(EntryType.TRACK) == "tracks"
    assert len(job.ctx.meta["config_hash"]) == 64
    job.perform()
    assert warehouse.ops("create_table") == [("create_table", "p", "d", "tracks")]


def test_from_settings_shares_the_settings_object(warehouse):
    _require_imports()
    settings = ProvisioningSettings(project_id="p", dataset_id="d")
    job = SchemaCheckerJob.from_settings(settings, warehouse)

    job.with_dataset_id("d2")

    assert settings.dataset_id == "d2"


def test_disabling_a_task_by_config(warehouse):
    _require_imports()
    config = {
        "tasks": {"provision.table.track": {"enabled": False}},
        "warehouse": {"project_id": "p", "dataset_id": "d", "tables": {"Track": "tracks"}},
    }

    result = SchemaCheckerJob.from_config(config, warehouse).perform()

    assert result.tasks["provision.table.track"].summary == "skipped by config"
    assert warehouse.calls_for_table("tracks") == []
