"""Settings do cipher assimétrico.

Define qual algoritmo o bootstrap usa quando o chamador não escolhe um.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

DEFAULT_CIPHER_ALGORITHM = "RSA-OAEP-SHA512"


@dataclass(frozen=True)
class CipherSettings:
    """Configurações de cipher.

    Attributes:
        algorithm: Identificador do algoritmo padrão (ex: RSA-OAEP-SHA512)
    """

    algorithm: str = DEFAULT_CIPHER_ALGORITHM

    def validate(self) -> list[str]:
        """Valida configurações de cipher.

        Se o algoritmo está registrado é verificado no bootstrap, onde o
        registro de ciphers é conhecido.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        if not self.algorithm:
            errors.append("CIPHER_ALGORITHM não pode ser vazio")

        return errors


def _load_cipher_from_env() -> CipherSettings:
    return CipherSettings(
        algorithm=os.getenv("CIPHER_ALGORITHM", DEFAULT_CIPHER_ALGORITHM).strip(),
    )


@lru_cache(maxsize=1)
def get_cipher_settings() -> CipherSettings:
    """Retorna instância cacheada de CipherSettings."""
    return _load_cipher_from_env()
