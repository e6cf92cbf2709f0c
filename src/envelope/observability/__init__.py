"""Observabilidade — correlation_id para logs estruturados.

Uso:
    from envelope.observability import correlation_scope, get_correlation_id
"""

from envelope.observability.correlation import (
    bind_correlation_id,
    correlation_scope,
    get_correlation_id,
)

__all__ = [
    "bind_correlation_id",
    "correlation_scope",
    "get_correlation_id",
]
