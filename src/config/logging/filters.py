"""Filters de logging para injeção de contexto e redação.

- CorrelationIdFilter: adiciona correlation_id e service
- SensitiveFieldFilter: mascara campos `extra` com material criptográfico

Importante: nunca logar chaves, plaintext ou ciphertext.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

REDACTED = "[REDACTED]"

SENSITIVE_FIELDS = frozenset(
    {
        "plaintext",
        "ciphertext",
        "private_key",
        "public_key",
        "key_material",
    }
)


class CorrelationIdFilter(logging.Filter):
    """Injeta correlation_id e service em cada record de log.

    Args:
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função que retorna o correlation_id atual.
            Se não fornecida, usa string vazia.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        # correlation_id passado via `extra` tem precedência
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing if existing else self._get_correlation_id()
        record.service = self._service_name
        return True


class SensitiveFieldFilter(logging.Filter):
    """Substitui por REDACTED os campos sensíveis passados via `extra`.

    Não filtra records; apenas mascara atributos cujo nome está em
    SENSITIVE_FIELDS.
    """

    def __init__(self, fields: frozenset[str] = SENSITIVE_FIELDS) -> None:
        super().__init__()
        self._fields = fields

    def filter(self, record: logging.LogRecord) -> bool:
        for name in self._fields:
            if name in record.__dict__:
                setattr(record, name, REDACTED)
        return True
