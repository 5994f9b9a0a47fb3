"""
Trava de execução única (one-shot).

`RunLatch` é um token explícito, pertencente ao chamador, que garante no
máximo uma execução efetiva do job que o consome.

Invariantes:
    - `try_acquire()` retorna True exatamente uma vez por instância
    - Uma vez setada, a trava nunca é resetada
    - O test-and-set é atômico (threading.Lock)

Compartilhar a mesma instância entre vários jobs reproduz a guarda
"primeiro chamador vence" em nível de processo, sem a janela de corrida
entre a verificação e a escrita.
"""

from __future__ import annotations

import threading


class RunLatch:
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._set = False

    def try_acquire(self) -> bool:
        with self._lock:
            if self._set:
                return False
            self._set = True
            return True

    @property
    def is_set(self) -> bool:
        with self._lock:
            return self._set

    def __repr__(self) -> str:
        return f"RunLatch(is_set={self.is_set})"
