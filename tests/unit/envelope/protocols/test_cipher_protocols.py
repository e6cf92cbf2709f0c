"""Testes de conformidade com os protocolos de cipher."""

from __future__ import annotations

from cryptography.hazmat.primitives.asymmetric import rsa

from envelope.infra.crypto import RSAOAEPCipher
from envelope.protocols import CipherProtocol, KeyIdentifierProtocol


class _PlainCipher:
    def encrypt(self, plaintext: bytes) -> bytes:
        return plaintext

    def decrypt(self, ciphertext: bytes) -> bytes:
        return ciphertext

    def encryption_algorithm(self) -> str:
        return "PLAIN"


class TestProtocols:
    """Testes dos protocolos runtime_checkable."""

    def test_rsa_oaep_cipher_satisfies_both_protocols(
        self, rsa_public_key: rsa.RSAPublicKey
    ) -> None:
        """RSAOAEPCipher implementa CipherProtocol e KeyIdentifierProtocol."""
        cipher = RSAOAEPCipher.from_public_key(rsa_public_key)
        assert isinstance(cipher, CipherProtocol)
        assert isinstance(cipher, KeyIdentifierProtocol)

    def test_cipher_without_key_identifier(self) -> None:
        """Cipher sem fingerprint satisfaz apenas CipherProtocol."""
        cipher = _PlainCipher()
        assert isinstance(cipher, CipherProtocol)
        assert not isinstance(cipher, KeyIdentifierProtocol)

    def test_arbitrary_object_is_not_cipher(self) -> None:
        """Objeto sem os métodos não satisfaz o protocolo."""
        assert not isinstance(object(), CipherProtocol)
