"""Protocolos e contratos do envelope."""

from .cipher import CipherProtocol, KeyIdentifierProtocol

__all__ = [
    "CipherProtocol",
    "KeyIdentifierProtocol",
]
