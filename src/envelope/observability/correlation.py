"""correlation_id da transação corrente, injetado nos logs do bootstrap.

Usa ContextVar para ser thread/async-safe.

Uso:
    from envelope.observability import correlation_scope

    with correlation_scope(transaction_id):
        cipher = create_cipher(peer_key)
"""

from __future__ import annotations

import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token

_correlation_id: ContextVar[str] = ContextVar("envelope_correlation_id", default="")


def get_correlation_id() -> str:
    """Retorna o correlation_id do contexto atual ou string vazia."""
    return _correlation_id.get()


def bind_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o correlation_id; gera UUID v4 quando None."""
    return _correlation_id.set(correlation_id or str(uuid.uuid4()))


@contextmanager
def correlation_scope(correlation_id: str | None = None) -> Iterator[str]:
    """Vincula um correlation_id durante o bloco e restaura o anterior ao sair."""
    token = bind_correlation_id(correlation_id)
    try:
        yield _correlation_id.get()
    finally:
        _correlation_id.reset(token)
