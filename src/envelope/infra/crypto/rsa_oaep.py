"""Cipher RSA-OAEP (SHA-512) para payloads sensíveis de transações.

Mensagens são criptografadas com a chave pública e só podem ser
descriptografadas com a chave privada. O cipher sempre possui chave pública;
a privada só é necessária para decrypt.

Uso:
    cipher = RSAOAEPCipher.from_public_key(peer_public_key)
    ciphertext = cipher.encrypt(b"payload")

    own = RSAOAEPCipher.from_private_key(private_key)
    plaintext = own.decrypt(ciphertext)
"""

from __future__ import annotations

import base64
import hashlib
from dataclasses import dataclass, field

from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import padding, rsa

from .constants import ALGORITHM_RSA_OAEP_SHA512, FINGERPRINT_PREFIX, OAEP_OVERHEAD
from .errors import (
    DecryptionError,
    EncryptionError,
    InvalidKeyTypeError,
    MissingPrivateKeyError,
    SerializationError,
)


def _oaep_padding() -> padding.OAEP:
    return padding.OAEP(
        mgf=padding.MGF1(algorithm=hashes.SHA512()),
        algorithm=hashes.SHA512(),
        label=None,
    )


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class RSAOAEPCipher:
    """Cipher assimétrico RSA-OAEP com MGF1/SHA-512 e sem label.

    Prefira os construtores nomeados `from_public_key` e `from_private_key`.
    Ao receber chave privada, a pública pareada é sempre mantida junto.

    Attributes:
        public_key: Chave pública RSA (obrigatória)
        private_key: Chave privada RSA (opcional, habilita decrypt)
    """

    public_key: rsa.RSAPublicKey
    private_key: rsa.RSAPrivateKey | None = field(default=None)

    def __post_init__(self) -> None:
        if not isinstance(self.public_key, rsa.RSAPublicKey):
            raise InvalidKeyTypeError(self.public_key)
        if self.private_key is None:
            return
        if not isinstance(self.private_key, rsa.RSAPrivateKey):
            raise InvalidKeyTypeError(self.private_key)
        if self.private_key.public_key().public_numbers() != self.public_key.public_numbers():
            raise ValueError("private key does not match public key")

    @classmethod
    def from_public_key(cls, key: rsa.RSAPublicKey) -> RSAOAEPCipher:
        """Cria cipher apenas para encrypt."""
        if not isinstance(key, rsa.RSAPublicKey):
            raise InvalidKeyTypeError(key)
        return cls(public_key=key)

    @classmethod
    def from_private_key(cls, key: rsa.RSAPrivateKey) -> RSAOAEPCipher:
        """Cria cipher completo; a chave pública é derivada da privada."""
        if not isinstance(key, rsa.RSAPrivateKey):
            raise InvalidKeyTypeError(key)
        return cls(public_key=key.public_key(), private_key=key)

    @property
    def can_decrypt(self) -> bool:
        """True se o cipher possui chave privada."""
        return self.private_key is not None

    @property
    def key_size(self) -> int:
        """Tamanho do módulo em bits."""
        return self.public_key.key_size

    def max_plaintext_size(self) -> int:
        """Maior plaintext aceito: bytes do módulo - 2*len(SHA-512) - 2.

        Zero para chaves pequenas demais para OAEP-SHA512 (ex: 1024 bits).
        """
        return max(0, (self.key_size + 7) // 8 - OAEP_OVERHEAD)

    def encrypt(self, plaintext: bytes) -> bytes:
        """Criptografa com a chave pública usando padding aleatório novo.

        Raises:
            EncryptionError: Plaintext acima do limite, tipo inválido ou
                falha da fonte de entropia.
        """
        try:
            return self.public_key.encrypt(plaintext, _oaep_padding())
        except Exception as exc:
            raise EncryptionError(f"RSA-OAEP encryption failed: {exc}") from exc

    def decrypt(self, ciphertext: bytes) -> bytes:
        """Descriptografa com a chave privada.

        Raises:
            MissingPrivateKeyError: Cipher sem chave privada.
            DecryptionError: Qualquer falha de decrypt, sempre com a mesma
                mensagem e sem causa encadeada.
        """
        if self.private_key is None:
            raise MissingPrivateKeyError("private key required for decryption")

        try:
            return self.private_key.decrypt(ciphertext, _oaep_padding())
        except Exception:
            raise DecryptionError("RSA-OAEP decryption failed") from None

    def encryption_algorithm(self) -> str:
        """Nome do algoritmo para registrar junto à transação."""
        return ALGORITHM_RSA_OAEP_SHA512

    def public_key_signature(self) -> str:
        """Fingerprint da chave pública: SHA-256 do DER (PKIX), base64 sem padding.

        Protótipo de identificação de chave; não há garantia de bater com
        fingerprints de OpenSSH/OpenSSL.
        """
        try:
            data = self.public_key.public_bytes(
                encoding=serialization.Encoding.DER,
                format=serialization.PublicFormat.SubjectPublicKeyInfo,
            )
        except Exception as exc:
            raise SerializationError(f"Public key serialization failed: {exc}") from exc

        digest = hashlib.sha256(data).digest()
        encoded = base64.b64encode(digest).decode("ascii").rstrip("=")
        return f"{FINGERPRINT_PREFIX}{encoded}"

    def __repr__(self) -> str:
        return (
            f"RSAOAEPCipher(algorithm={ALGORITHM_RSA_OAEP_SHA512!r}, "
            f"key_size={self.key_size}, can_decrypt={self.can_decrypt})"
        )


def new_cipher(key: rsa.RSAPublicKey | rsa.RSAPrivateKey) -> RSAOAEPCipher:
    """Cria cipher a partir de chave pública (encrypt) ou privada (encrypt+decrypt).

    Raises:
        InvalidKeyTypeError: Se a chave não for RSA pública nem privada.
    """
    if isinstance(key, rsa.RSAPrivateKey):
        return RSAOAEPCipher.from_private_key(key)
    if isinstance(key, rsa.RSAPublicKey):
        return RSAOAEPCipher.from_public_key(key)
    raise InvalidKeyTypeError(key)
