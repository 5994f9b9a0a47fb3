"""
Deep-merge determinístico de configuração (defaults + override local).

Política:
    - dict → merge recursivo por chave
    - list → sobrescrita total
    - escalar → sobrescrita direta
    - None no override → sobrescreve qualquer valor (desliga a chave)
    - conflito de tipos → ConfigTypeConflictError

Nenhum input é mutado.
"""

from copy import deepcopy
from typing import Any, Dict, List

from .errors import ConfigTypeConflictError


def _type_conflict(path: List[str], base_value: Any, override_value: Any) -> ConfigTypeConflictError:
    return ConfigTypeConflictError(
        f"Conflito de tipo na chave '{'.'.join(path)}': "
        f"{type(base_value).__name__} vs {type(override_value).__name__}"
    )


def _merge(base: Dict[str, Any], override: Dict[str, Any], path: List[str]) -> Dict[str, Any]:
    result: Dict[str, Any] = deepcopy(base)

    for key, override_value in override.items():
        key_path = path + [str(key)]

        if key not in result or result[key] is None or override_value is None:
            result[key] = deepcopy(override_value)
            continue

        base_value = result[key]

        if isinstance(base_value, dict) and isinstance(override_value, dict):
            result[key] = _merge(base_value, override_value, key_path)
            continue

        if isinstance(base_value, list) and isinstance(override_value, list):
            result[key] = deepcopy(override_value)
            continue

        if type(base_value) is not type(override_value):
            raise _type_conflict(key_path, base_value, override_value)

        result[key] = deepcopy(override_value)

    return result


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Retorna um novo dict com `override` aplicado sobre `base`.

    Raises:
        ConfigTypeConflictError: se a raiz não for dict ou se uma mesma chave
            tiver tipos incompatíveis entre base e override. A mensagem
            informa o caminho pontuado da chave (ex.: `warehouse.tables`).
    """
    if not isinstance(base, dict) or not isinstance(override, dict):
        raise ConfigTypeConflictError(
            f"Deep-merge requer dicts no nível raiz, recebido: "
            f"{type(base).__name__} vs {type(override).__name__}"
        )
    return _merge(base, override, [])
