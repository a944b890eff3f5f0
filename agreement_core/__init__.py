"""
agreement-core
==============
X25519 key agreement primitives for session establishment.

Provides:
- PublicKey / PrivateKey value types with raw, hex, base64url and did:key forms
- SharedSecret, the raw agreement output handed to a KDF by the caller
- Typed errors: InvalidEncoding, InvalidKeyFormat, AgreementFailure
"""

from .crypto import (
    PublicKey,
    PrivateKey,
    SharedSecret,
    x25519_generate,
    derive_shared_secret,
)
from .did import KeyVariant, did_key, parse_did_key
from .errors import (
    AgreementCoreError,
    InvalidKeyFormat,
    InvalidEncoding,
    AgreementFailure,
)

__all__ = [
    "PublicKey",
    "PrivateKey",
    "SharedSecret",
    "x25519_generate",
    "derive_shared_secret",
    "KeyVariant",
    "did_key",
    "parse_did_key",
    "AgreementCoreError",
    "InvalidKeyFormat",
    "InvalidEncoding",
    "AgreementFailure",
]
