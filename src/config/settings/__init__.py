"""Agregador de settings do envelope.

Re-exporta settings e getters de cada módulo.
"""

from __future__ import annotations

from config.settings.base import (
    VALID_LOG_LEVELS,
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.cipher import (
    DEFAULT_CIPHER_ALGORITHM,
    CipherSettings,
    get_cipher_settings,
)

__all__ = [
    "DEFAULT_CIPHER_ALGORITHM",
    "VALID_LOG_LEVELS",
    "BaseSettings",
    "CipherSettings",
    "Environment",
    "get_base_settings",
    "get_cipher_settings",
]
