"""Erros do cipher assimétrico.

Todos herdam de CipherError para que consumidores possam capturar a família
inteira. Nenhum erro carrega material de chave, plaintext ou ciphertext.
"""


class CipherError(Exception):
    """Base para falhas em operações do cipher."""


class InvalidKeyTypeError(CipherError, TypeError):
    """Chave recebida não é pública nem privada RSA."""

    def __init__(self, key: object) -> None:
        self.key_type = type(key).__name__
        super().__init__(f"could not create RSA cipher from {self.key_type}")


class MissingPrivateKeyError(CipherError):
    """Decrypt chamado em cipher criado só com chave pública."""


class EncryptionError(CipherError):
    """Plaintext excede o limite do OAEP ou falha de entropia."""


class DecryptionError(CipherError):
    """Ciphertext malformado, tamanho errado ou padding inválido.

    As causas são propositalmente indistinguíveis (sem oracle de padding).
    """


class SerializationError(CipherError):
    """Chave pública não pôde ser serializada em DER (SubjectPublicKeyInfo)."""


class UnsupportedAlgorithmError(CipherError, LookupError):
    """Algoritmo de cipher não registrado."""
