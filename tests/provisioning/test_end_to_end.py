# tests/provisioning/test_end_to_end.py
"""
Cenário ponta a ponta do provisionamento.

Configuração: project="p", dataset="d", InboundRTP → "inbound_rtp",
ambas as políticas ligadas, warehouse vazio.

Esperado:
    - exatamente um create_dataset("p", "d")
    - seguido de exatamente um create_table("p", "d", "inbound_rtp", <schema InboundRTP>)
    - as outras doze Tasks de tabela registradas como SKIPPED com warning
"""

from pathlib import Path

from schema_checker import EntryType, SchemaCheckerJob, TaskStatus
from schema_checker.core.config.loader import load_run_context
from schema_checker.schema import schema_for


def test_inbound_rtp_scenario(warehouse):
    result = (
        SchemaCheckerJob(warehouse)
        .with_project_id("p")
        .with_dataset_id("d")
        .with_entry_name(EntryType.INBOUND_RTP, "inbound_rtp")
        .with_create_dataset_if_not_exists(True)
        .with_create_table_if_not_exists(True)
        .perform()
    )

    creates = [c for c in warehouse.calls if c[0].startswith("create_")]
    assert creates == [
        ("create_dataset", "p", "d"),
        ("create_table", "p", "d", "inbound_rtp"),
    ]
    assert warehouse.schemas[("p", "d", "inbound_rtp")] == schema_for(EntryType.INBOUND_RTP)

    skipped = result.by_status(TaskStatus.SKIPPED)
    assert len(skipped) == 12
    assert "provision.table.inbound_rtp" not in skipped
    for tid in skipped:
        assert result.tasks[tid].warnings, tid

    assert result.tasks["provision.dataset"].payload["created"] is True
    assert result.tasks["provision.table.inbound_rtp"].payload["created"] is True


def test_scenario_from_config_files(tmp_path: Path, warehouse):
    defaults = Path(__file__).resolve().parents[2] / "config" / "defaults.yaml"
    local = tmp_path / "local.yaml"
    local.write_text(
        "warehouse:\n"
        "  project_id: p\n"
        "  dataset_id: d\n"
        "  create_dataset_if_missing: true\n"
        "  create_table_if_missing: true\n",
        encoding="utf-8",
    )
    ctx = load_run_context(defaults_path=defaults, local_path=local)

    result = SchemaCheckerJob.from_config(ctx.config, warehouse, ctx=ctx).perform()

    assert len(warehouse.ops("create_dataset")) == 1
    assert len(warehouse.ops("create_table")) == 13
    assert result.ok
    assert ("p", "d", "inbound_rtp_samples") in warehouse.tables
