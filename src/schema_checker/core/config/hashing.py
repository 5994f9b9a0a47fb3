"""
Hash canônico da configuração efetiva.

O hash identifica a configuração usada por uma execução e é gravado em
`RunContext.meta["config_hash"]`, permitindo correlacionar os eventos de
um provisionamento com a configuração que o produziu.

Política:
    - JSON canônico (chaves ordenadas, separadores compactos, UTF-8)
    - SHA-256, 64 caracteres hexadecimais
"""

import hashlib
import json
from typing import Any, Dict


def compute_config_hash(config: Dict[str, Any]) -> str:
    if not isinstance(config, dict):
        raise TypeError(
            f"Config para hashing deve ser dict, recebido: {type(config).__name__}"
        )

    canonical_json = json.dumps(
        config,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
        default=str,
    )
    return hashlib.sha256(canonical_json.encode("utf-8")).hexdigest()
