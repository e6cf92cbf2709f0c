"""Envelope — cipher assimétrico para payloads sensíveis de transações.

Subpastas:
- bootstrap/: composition root (logging, settings, registro de ciphers)
- infra/: implementações concretas (RSA-OAEP)
- protocols/: contratos/interfaces de cipher
- observability/: correlation_id para logs estruturados

Padrão: protocols definem; infra implementa; bootstrap conecta.
"""
