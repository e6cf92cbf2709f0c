"""Configuração de logging estruturado.

Uso:
    from config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="envelope")
    logger = get_logger(__name__)

Campos obrigatórios em todo log: asctime, level, logger, message,
correlation_id, service. Material criptográfico nunca é logado.
"""

from config.logging.config import DEFAULT_SERVICE_NAME, configure_logging, get_logger
from config.logging.filters import (
    REDACTED,
    SENSITIVE_FIELDS,
    CorrelationIdFilter,
    SensitiveFieldFilter,
)
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "DEFAULT_SERVICE_NAME",
    "FIELD_RENAME_MAP",
    "REDACTED",
    "REQUIRED_LOG_FIELDS",
    "SENSITIVE_FIELDS",
    "CorrelationIdFilter",
    "SensitiveFieldFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
]
