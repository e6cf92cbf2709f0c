"""Constantes criptográficas do cipher RSA-OAEP."""

ALGORITHM_RSA_OAEP_SHA512 = "RSA-OAEP-SHA512"

OAEP_HASH_SIZE = 64  # SHA-512, em bytes
OAEP_OVERHEAD = 2 * OAEP_HASH_SIZE + 2

FINGERPRINT_PREFIX = "SHA256:"
