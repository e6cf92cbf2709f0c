"""Criptografia assimétrica para payloads de transação.

Implementação RSA-OAEP (SHA-512) dos protocolos de envelope/protocols/cipher.py.

Localizado em envelope/infra/ para manter boundaries corretas:
- protocols/ define contratos, infra/ implementa
- bootstrap/ escolhe a implementação por algoritmo
"""

from .constants import ALGORITHM_RSA_OAEP_SHA512, FINGERPRINT_PREFIX, OAEP_OVERHEAD
from .errors import (
    CipherError,
    DecryptionError,
    EncryptionError,
    InvalidKeyTypeError,
    MissingPrivateKeyError,
    SerializationError,
    UnsupportedAlgorithmError,
)
from .rsa_oaep import RSAOAEPCipher, new_cipher

__all__ = [
    "ALGORITHM_RSA_OAEP_SHA512",
    "FINGERPRINT_PREFIX",
    "OAEP_OVERHEAD",
    "CipherError",
    "DecryptionError",
    "EncryptionError",
    "InvalidKeyTypeError",
    "MissingPrivateKeyError",
    "RSAOAEPCipher",
    "SerializationError",
    "UnsupportedAlgorithmError",
    "new_cipher",
]
