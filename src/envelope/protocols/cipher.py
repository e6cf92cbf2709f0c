"""Protocolos para ciphers assimétricos.

Definimos aqui a interface que a infra de crypto deve implementar. Isso permite
que consumidores dependam de abstrações e troquem o algoritmo sem mudar código.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class CipherProtocol(Protocol):
    """Interface mínima de um cipher: encrypt, decrypt e nome do algoritmo.

    O ciphertext não carrega metadados; o chamador registra o valor de
    `encryption_algorithm()` junto ao payload.
    """

    def encrypt(self, plaintext: bytes) -> bytes:
        ...

    def decrypt(self, ciphertext: bytes) -> bytes:
        ...

    def encryption_algorithm(self) -> str:
        ...


@runtime_checkable
class KeyIdentifierProtocol(Protocol):
    """Identifica a chave pública usada por um cipher."""

    def public_key_signature(self) -> str:
        ...
