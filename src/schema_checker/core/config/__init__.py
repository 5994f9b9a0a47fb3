"""
Camada de configuração do schema-checker.

Carrega, mescla e identifica a configuração que alimenta o job de
provisionamento (seção `warehouse`) e as políticas do Engine
(seções `engine` e `tasks`).

Princípios:
    - Configuração é declarativa e não contém lógica de provisionamento
    - Overrides locais são sempre explícitos
    - A mesma entrada produz sempre a mesma configuração final

Limites explícitos:
    - Não acessa o warehouse
    - Não executa Tasks
"""

from .errors import (
    ConfigError,
    ConfigTypeConflictError,
    DefaultsNotFoundError,
    InvalidConfigRootTypeError,
    InvalidPolicyValueError,
    InvalidTableBindingError,
    UnsupportedConfigFormatError,
)
from .hashing import compute_config_hash
from .loader import load_config, load_run_context
from .merge import deep_merge

__all__ = [
    "ConfigError",
    "ConfigTypeConflictError",
    "DefaultsNotFoundError",
    "InvalidConfigRootTypeError",
    "InvalidPolicyValueError",
    "InvalidTableBindingError",
    "UnsupportedConfigFormatError",
    "compute_config_hash",
    "deep_merge",
    "load_config",
    "load_run_context",
]
