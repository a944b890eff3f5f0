"""
agreement_core.utils
--------------------
Text codecs used by the key types: lowercase hex and unpadded base64url.
Decoders raise InvalidEncoding on structurally malformed input; they never
look at the decoded length.
"""

from __future__ import annotations
import base64, binascii, hmac, re

from .errors import InvalidEncoding

_B64URL_RE = re.compile(r"^[A-Za-z0-9_-]*={0,2}$")


def hex_e(b: bytes) -> str:
    return binascii.hexlify(b).decode("ascii")


def hex_d(s: str) -> bytes:
    if not isinstance(s, str):
        raise InvalidEncoding(f"hex input must be str, got {type(s).__name__}")
    try:
        return binascii.unhexlify(s)
    except (binascii.Error, ValueError) as exc:
        raise InvalidEncoding(f"malformed hex string: {exc}") from exc


def b64url_e(b: bytes) -> str:
    return base64.urlsafe_b64encode(b).rstrip(b"=").decode("ascii")


def b64url_d(s: str) -> bytes:
    if not isinstance(s, str):
        raise InvalidEncoding(f"base64url input must be str, got {type(s).__name__}")
    if not _B64URL_RE.fullmatch(s):
        raise InvalidEncoding("malformed base64url string")
    body = s.rstrip("=")
    # a single trailing sextet can never encode a whole byte
    if len(body) % 4 == 1:
        raise InvalidEncoding("malformed base64url string: truncated quantum")
    if s != body and len(s) % 4 != 0:
        raise InvalidEncoding("malformed base64url string: bad padding")
    try:
        data = base64.urlsafe_b64decode(body + "=" * (-len(body) % 4))
    except (binascii.Error, ValueError) as exc:
        raise InvalidEncoding(f"malformed base64url string: {exc}") from exc
    # unused trailing bits must be zero so each value has one encoding
    if b64url_e(data) != body:
        raise InvalidEncoding("non-canonical base64url string")
    return data


def is_all_zero(b: bytes) -> bool:
    # constant time with respect to the content of b
    return hmac.compare_digest(b, bytes(len(b)))
