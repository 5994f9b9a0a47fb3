"""
Loader de configuração do schema-checker.

A configuração efetiva é resolvida a partir de:
    - um arquivo de defaults (obrigatório)
    - um arquivo local de overrides (opcional; ignorado se não existir)

Formatos suportados:
    - YAML (.yaml, .yml) via PyYAML
    - JSON (.json)

Invariantes:
    - O resultado é sempre um dict puro
    - Overrides nunca mutam os defaults
    - Arquivos vazios equivalem a `{}`

Limites explícitos:
    - Não valida a semântica da seção `warehouse`
      (ver provisioning.settings.ProvisioningSettings.from_config)
"""

from pathlib import Path
from typing import Any, Dict, Optional, Union
import json

import yaml  # PyYAML

from schema_checker.core.pipeline.context import RunContext

from .errors import (
    DefaultsNotFoundError,
    InvalidConfigRootTypeError,
    UnsupportedConfigFormatError,
)
from .hashing import compute_config_hash
from .merge import deep_merge


PathLike = Union[str, Path]


def _load_file(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise DefaultsNotFoundError(f"Arquivo de configuração não encontrado: {path}")

    suffix = path.suffix.lower()

    if suffix in {".yaml", ".yml"}:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    elif suffix == ".json":
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    else:
        raise UnsupportedConfigFormatError(f"Formato não suportado: {path.suffix}")

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise InvalidConfigRootTypeError(
            f"Config root deve ser dict, recebido: {type(data).__name__}"
        )

    return data


def load_config(
    *,
    defaults_path: PathLike,
    local_path: Optional[PathLike] = None,
) -> Dict[str, Any]:
    """
    Carrega defaults e aplica o override local, quando presente.

    Args:
        defaults_path: caminho do arquivo de defaults (obrigatório).
        local_path: caminho opcional de overrides locais.

    Returns:
        Dict[str, Any]: configuração efetiva.

    Raises:
        DefaultsNotFoundError: se o arquivo de defaults não existir.
        UnsupportedConfigFormatError: se a extensão não for suportada.
        InvalidConfigRootTypeError: se a raiz não for um dict.
        ConfigTypeConflictError: se houver conflito de tipos no merge.
    """
    effective = _load_file(Path(defaults_path))

    if local_path is not None:
        local_file = Path(local_path)
        if local_file.exists():
            effective = deep_merge(effective, _load_file(local_file))

    return effective


def load_run_context(
    *,
    defaults_path: PathLike,
    local_path: Optional[PathLike] = None,
) -> RunContext:
    """Resolve a configuração e devolve um RunContext com `config_hash` em `meta`."""
    config = load_config(defaults_path=defaults_path, local_path=local_path)
    return RunContext(
        config=config,
        meta={
            "config_hash": compute_config_hash(config),
            "defaults_path": str(defaults_path),
            "local_path": str(local_path) if local_path is not None else None,
        },
    )
