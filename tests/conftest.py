"""
Fixtures compartilhados para testes do schema-checker.

Este módulo define fixtures reutilizáveis que fornecem:
- configuração mínima e determinística
- contexto de execução controlado (RunContext)
- Tasks dummy para testes estruturais do grafo e do Engine
- um warehouse em memória que registra todas as chamadas

Decisões arquiteturais:
    - Fixtures são mantidas simples e explícitas
    - Tasks dummy utilizam duck typing em vez de herança
    - Imports do core são realizados de forma lazy para
      melhorar a clareza de erros durante falhas

Invariantes:
    - Nenhuma fixture acessa um warehouse real
    - Nenhuma fixture realiza I/O fora de tmp_path
    - Cada teste recebe instâncias novas (sem estado global)
"""

import pytest
from datetime import datetime, timezone


# =====================================================
# Config
# =====================================================

@pytest.fixture
def project_like_config_defaults_yaml() -> str:
    """
    YAML de defaults semelhante ao `config/defaults.yaml` do repositório.

    Usado pelos testes do loader e do deep-merge (defaults + local).
    """
    return """
engine:
  fail_fast: false
  skip_on_failed_prerequisite: false

tasks: {}

warehouse:
  project_id: null
  dataset_id: null
  create_dataset_if_missing: false
  create_table_if_missing: false
  tables:
    InboundRTP: inbound_rtp_samples
    Track: tracks
"""


@pytest.fixture
def project_like_config_local_yaml() -> str:
    """Override local: identificadores do ambiente e políticas ligadas."""
    return """
warehouse:
  project_id: acme-analytics
  dataset_id: observertc
  create_table_if_missing: true
  tables:
    InboundRTP: inbound_rtp
"""


# =====================================================
# Pipeline (Task + RunContext)
# =====================================================

@pytest.fixture
def dummy_config() -> dict:
    """Configuração mínima: políticas do Engine em seus valores padrão."""
    return {
        "engine": {"fail_fast": False, "skip_on_failed_prerequisite": False},
        "tasks": {},
    }


@pytest.fixture
def dummy_ctx(dummy_config):
    """
    RunContext determinístico para testes.

    - `run_id` e `created_at` fixos
    - config injetada explicitamente
    """
    from schema_checker.core.pipeline.context import RunContext

    return RunContext(
        run_id="run-test-001",
        created_at=datetime(2026, 1, 16, 0, 0, 0, tzinfo=timezone.utc),
        config=dummy_config,
        meta={"source": "pytest"},
    )


@pytest.fixture
def DummyTask():
    """
    Fixture factory que fornece uma Task mínima e duck-typed.

    A classe retornada:
    - expõe `id` e `depends_on`
    - registra em `calls` os ids já presentes em `results` a cada execução
    - retorna um mapping simples (normalizado pelo Engine para SUCCESS)

    Returns:
        type: classe _DummyTask, instanciável pelos testes.
    """

    class _DummyTask:
        def __init__(self, task_id: str = "task.a", depends_on=None, output=None):
            self.id = task_id
            self.depends_on = list(depends_on or [])
            self.output = output if output is not None else {"ok": True}
            self.calls = []

        def run(self, ctx, results):
            self.calls.append(sorted(results))
            return dict(self.output)

    return _DummyTask


@pytest.fixture
def FailingTask():
    """Task que sempre levanta a exceção informada."""

    class _FailingTask:
        def __init__(self, task_id: str = "task.fail", depends_on=None, exc=None):
            self.id = task_id
            self.depends_on = list(depends_on or [])
            self.exc = exc if exc is not None else RuntimeError("boom")
            self.calls = 0

        def run(self, ctx, results):
            self.calls += 1
            raise self.exc

    return _FailingTask


# =====================================================
# Warehouse
# =====================================================

@pytest.fixture
def warehouse():
    """Warehouse em memória, vazio, que registra todas as chamadas."""
    from tests.fixtures.warehouse import RecordingWarehouse

    return RecordingWarehouse()
