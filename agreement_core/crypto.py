"""
agreement_core.crypto
---------------------
X25519 key agreement value types:

- PublicKey: 32-byte curve point with raw / hex / base64url / did:key / JSON forms
- PrivateKey: 32-byte scalar, public key derivation and agreement
- SharedSecret: raw agreement output, handed to a KDF by the caller

The curve arithmetic itself comes from `cryptography`. Every failure of the
primitive is re-raised as one of the errors in agreement_core.errors.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Tuple
import hmac, json, logging

from cryptography.hazmat.primitives.asymmetric import x25519

from .constants import KEY_LENGTH
from .did import KeyVariant, did_key, parse_did_key
from .errors import AgreementFailure, InvalidEncoding, InvalidKeyFormat
from .logger import get_logger
from .utils import b64url_d, b64url_e, hex_d, hex_e, is_all_zero

log = get_logger("agreement_core.crypto")

_BYTES_LIKE = (bytes, bytearray, memoryview)


def _as_key_bytes(data, what: str) -> bytes:
    if not isinstance(data, _BYTES_LIKE):
        raise InvalidKeyFormat(f"{what} must be bytes-like, got {type(data).__name__}")
    raw = bytes(data)
    if len(raw) != KEY_LENGTH:
        raise InvalidKeyFormat(f"{what} must be {KEY_LENGTH} bytes, got {len(raw)}")
    return raw


# --------- Public key ----------
@dataclass(frozen=True)
class PublicKey:
    _raw: bytes
    _key: x25519.X25519PublicKey = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        raw = _as_key_bytes(self._raw, "X25519 public key")
        try:
            key = x25519.X25519PublicKey.from_public_bytes(raw)
        except (ValueError, TypeError) as exc:
            raise InvalidKeyFormat(f"X25519 public key rejected: {exc}") from exc
        object.__setattr__(self, "_raw", raw)
        object.__setattr__(self, "_key", key)

    @classmethod
    def from_raw_bytes(cls, data) -> "PublicKey":
        return cls(data)

    @classmethod
    def from_hex(cls, text: str) -> "PublicKey":
        return cls(hex_d(text))

    @classmethod
    def from_base64url(cls, text: str) -> "PublicKey":
        return cls(b64url_d(text))

    @classmethod
    def from_identifier(cls, did: str) -> "PublicKey":
        """Parse a did:key identifier produced by identifier()."""
        variant, raw = parse_did_key(did)
        if variant is not KeyVariant.X25519:
            raise InvalidKeyFormat(f"did:key holds a {variant.name} key, expected X25519")
        return cls(raw)

    @classmethod
    def from_json(cls, text) -> "PublicKey":
        """
        Inverse of to_json(). The key travels as one opaque binary field, so
        every decoding problem surfaces as InvalidKeyFormat.
        """
        try:
            value = json.loads(text)
        except (TypeError, ValueError) as exc:
            raise InvalidKeyFormat(f"public key JSON is malformed: {exc}") from exc
        if not isinstance(value, str):
            raise InvalidKeyFormat("public key JSON must be a single string value")
        try:
            raw = b64url_d(value)
        except InvalidEncoding as exc:
            raise InvalidKeyFormat(f"public key JSON does not hold base64url bytes: {exc}") from exc
        return cls(raw)

    def raw_bytes(self) -> bytes:
        return self._raw

    def hex_string(self) -> str:
        return hex_e(self._raw)

    def base64url(self) -> str:
        return b64url_e(self._raw)

    def identifier(self) -> str:
        return did_key(self._raw, KeyVariant.X25519)

    def to_json(self) -> str:
        return json.dumps(self.base64url())

    def __bytes__(self) -> bytes:
        return self._raw

    def __repr__(self) -> str:
        return f"PublicKey({self.hex_string()})"

    def __reduce__(self):
        return (type(self).from_raw_bytes, (self._raw,))


# --------- Private key ----------
@dataclass(frozen=True, eq=False)
class PrivateKey:
    """
    X25519 private scalar.

    raw_bytes() hands out the secret scalar. Callers that copy it into
    long-lived buffers are responsible for wiping them; Python offers no
    reliable zeroization of immutable bytes.
    """
    _raw: bytes = field(repr=False)
    _key: x25519.X25519PrivateKey = field(init=False, repr=False)

    def __post_init__(self):
        raw = _as_key_bytes(self._raw, "X25519 private key")
        try:
            key = x25519.X25519PrivateKey.from_private_bytes(raw)
        except (ValueError, TypeError) as exc:
            raise InvalidKeyFormat(f"X25519 private key rejected: {exc}") from exc
        object.__setattr__(self, "_raw", raw)
        object.__setattr__(self, "_key", key)

    @classmethod
    def generate(cls) -> "PrivateKey":
        key = x25519.X25519PrivateKey.generate()
        log.debug("generated X25519 private key")
        return cls(key.private_bytes_raw())

    @classmethod
    def from_raw_bytes(cls, data) -> "PrivateKey":
        return cls(data)

    def raw_bytes(self) -> bytes:
        return self._raw

    def public_key(self) -> PublicKey:
        return PublicKey(self._key.public_key().public_bytes_raw())

    def agree(self, peer: PublicKey) -> "SharedSecret":
        """
        X25519(self, peer). Raises AgreementFailure when the primitive rejects
        the peer point or the result is all zero (identity / low-order point).
        """
        if not isinstance(peer, PublicKey):
            raise TypeError(f"peer must be a PublicKey, got {type(peer).__name__}")
        try:
            shared = self._key.exchange(peer._key)
        except ValueError as exc:
            raise AgreementFailure("X25519 exchange rejected the peer public key") from exc
        # re-checked here so a permissive backend cannot hand out a degenerate secret
        if is_all_zero(shared):
            raise AgreementFailure("X25519 exchange produced an all-zero shared secret")

        if log.isEnabledFor(logging.DEBUG):
            log.debug(f"X25519 agreement completed with peer {peer.identifier()}")
        return SharedSecret(shared, _token=_AGREEMENT_TOKEN)

    def __eq__(self, other):
        if not isinstance(other, PrivateKey):
            return NotImplemented
        return hmac.compare_digest(self._raw, other._raw)

    __hash__ = None

    def __repr__(self) -> str:
        return "PrivateKey(<redacted>)"

    def __reduce__(self):
        return (type(self).from_raw_bytes, (self._raw,))


# --------- Shared secret ----------
_AGREEMENT_TOKEN = object()


class SharedSecret:
    """
    Raw X25519 output. Feed bytes() straight into a KDF; compare with
    hmac.compare_digest if you must compare at all.
    """
    __slots__ = ("_secret",)

    def __init__(self, secret: bytes, *, _token=None):
        if _token is not _AGREEMENT_TOKEN:
            raise TypeError("SharedSecret is only produced by PrivateKey.agree()")
        self._secret = secret

    def bytes(self) -> bytes:
        return self._secret

    def __len__(self) -> int:
        return len(self._secret)

    def __eq__(self, other):
        raise TypeError("SharedSecret does not support comparison; use hmac.compare_digest on bytes()")

    __ne__ = __eq__
    __hash__ = None

    def __repr__(self) -> str:
        return f"SharedSecret(<redacted, {len(self._secret)} bytes>)"

    def __reduce__(self):
        raise TypeError("SharedSecret cannot be serialized")


# --------- Function-style helpers ----------
def x25519_generate() -> Tuple[PrivateKey, PublicKey]:
    sk = PrivateKey.generate()
    return sk, sk.public_key()


def derive_shared_secret(private_key: PrivateKey, peer_public_key: PublicKey) -> SharedSecret:
    return private_key.agree(peer_public_key)
