"""Formatters de logging estruturado.

Logs JSON com campos obrigatórios:
- asctime
- level
- logger
- message
- correlation_id
- service
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Ordem dos campos no JSON emitido
REQUIRED_LOG_FIELDS: tuple[str, ...] = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com campos padronizados.

    Exemplo de output:
        {
            "asctime": "2026-10-18 10:30:00,123",
            "level": "DEBUG",
            "logger": "envelope.bootstrap.ciphers",
            "message": "cipher_created",
            "correlation_id": "tx-123",
            "service": "envelope",
            "algorithm": "RSA-OAEP-SHA512"
        }
    """
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)
    return JsonFormatter(format_string, rename_fields=FIELD_RENAME_MAP)
