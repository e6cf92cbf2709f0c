"""Bootstrap do envelope — inicialização e wiring.

Composition root: configura logging, valida settings e conecta
implementações concretas de cipher aos protocolos.

Uso:
    from envelope.bootstrap import initialize_app, create_cipher

    initialize_app()
    cipher = create_cipher(peer_public_key)
"""

from __future__ import annotations

import logging

from config.logging import configure_logging
from config.settings import VALID_LOG_LEVELS, get_base_settings, get_cipher_settings
from envelope.bootstrap.ciphers import (
    available_algorithms,
    create_cipher,
    register_cipher,
    unregister_cipher,
)
from envelope.observability import get_correlation_id

logger = logging.getLogger(__name__)

__all__ = [
    "available_algorithms",
    "create_cipher",
    "initialize_app",
    "register_cipher",
    "unregister_cipher",
    "validate_runtime_settings",
]


def initialize_app() -> None:
    """Configura logging JSON com correlation_id e valida settings.

    Deve ser chamada uma vez no início do serviço.
    """
    base = get_base_settings()
    level = "DEBUG" if base.debug else base.log_level.upper()
    if level not in VALID_LOG_LEVELS:
        level = "INFO"
    configure_logging(
        level=level,
        service_name=base.service_name,
        correlation_id_getter=get_correlation_id,
    )
    validate_runtime_settings()


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` apenas registra alerta.
    """
    base = get_base_settings()
    errors: list[str] = []
    errors.extend(f"base: {error}" for error in base.validate())
    cipher_settings = get_cipher_settings()
    errors.extend(f"cipher: {error}" for error in cipher_settings.validate())
    algorithms = available_algorithms()
    if cipher_settings.algorithm and cipher_settings.algorithm not in algorithms:
        errors.append(
            f"cipher: CIPHER_ALGORITHM não registrado: {cipher_settings.algorithm}. "
            f"Disponíveis: {', '.join(algorithms)}"
        )

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": base.environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if base.strict_validation:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")
