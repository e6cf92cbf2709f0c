"""Registro de ciphers por identificador de algoritmo.

Permite que o chamador troque a implementação via configuração
(CIPHER_ALGORITHM) sem mudar código. RSA-OAEP-SHA512 vem registrado.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from config.settings import get_cipher_settings
from envelope.infra.crypto import (
    ALGORITHM_RSA_OAEP_SHA512,
    UnsupportedAlgorithmError,
    new_cipher,
)
from envelope.protocols.cipher import KeyIdentifierProtocol

if TYPE_CHECKING:
    from collections.abc import Callable

    from envelope.protocols.cipher import CipherProtocol

    CipherFactory = Callable[[Any], CipherProtocol]

logger = logging.getLogger(__name__)

_factories: dict[str, CipherFactory] = {
    ALGORITHM_RSA_OAEP_SHA512: new_cipher,
}


def register_cipher(algorithm: str, factory: CipherFactory) -> None:
    """Registra (ou substitui) a factory de um algoritmo.

    Args:
        algorithm: Identificador retornado por `encryption_algorithm()`.
        factory: Callable que recebe a chave e retorna o cipher.
    """
    if not algorithm:
        raise ValueError("algorithm não pode ser vazio")
    _factories[algorithm] = factory


def unregister_cipher(algorithm: str) -> None:
    """Remove a factory de um algoritmo, se registrada."""
    _factories.pop(algorithm, None)


def available_algorithms() -> list[str]:
    """Identificadores registrados, em ordem alfabética."""
    return sorted(_factories)


def create_cipher(key: Any, algorithm: str | None = None) -> CipherProtocol:
    """Cria cipher para a chave usando o algoritmo pedido ou o configurado.

    Args:
        key: Chave pública (encrypt) ou privada (encrypt+decrypt).
        algorithm: Identificador do algoritmo; None usa CipherSettings.

    Raises:
        UnsupportedAlgorithmError: Algoritmo não registrado.
        InvalidKeyTypeError: Chave incompatível com o algoritmo.
    """
    selected = algorithm or get_cipher_settings().algorithm
    factory = _factories.get(selected)
    if factory is None:
        raise UnsupportedAlgorithmError(
            f"Algoritmo de cipher não suportado: {selected}. "
            f"Disponíveis: {', '.join(available_algorithms())}"
        )

    cipher = factory(key)

    if logger.isEnabledFor(logging.DEBUG):
        extra: dict[str, object] = {
            "component": "cipher_registry",
            "algorithm": cipher.encryption_algorithm(),
        }
        can_decrypt = getattr(cipher, "can_decrypt", None)
        if can_decrypt is not None:
            extra["can_decrypt"] = can_decrypt
        if isinstance(cipher, KeyIdentifierProtocol):
            extra["key_signature"] = cipher.public_key_signature()
        logger.debug("cipher_created", extra=extra)

    return cipher
