# agreement_core/errors.py
from __future__ import annotations


class AgreementCoreError(Exception):
    pass


class InvalidKeyFormat(AgreementCoreError, ValueError):
    """Wrong length, wrong type, or bytes the curve primitive rejects."""


class InvalidEncoding(InvalidKeyFormat):
    """Malformed hex / base64url / DID text, raised before any length check."""


class AgreementFailure(AgreementCoreError):
    """The X25519 exchange was rejected or produced the all-zero secret."""
