"""
agreement_core.did
------------------
did:key identifiers for raw public keys.

    did:key:z<base58btc(multicodec-prefix || raw-key)>

Only the identifier string is produced here; DID documents are left to the
callers that need them.
"""

from __future__ import annotations
from enum import Enum
from typing import Tuple

import base58

from .constants import (
    DID_KEY_PREFIX,
    MULTIBASE_BASE58BTC,
    MULTICODEC_X25519_PUB,
    MULTICODEC_ED25519_PUB,
)
from .errors import InvalidEncoding


class KeyVariant(Enum):
    X25519 = MULTICODEC_X25519_PUB
    ED25519 = MULTICODEC_ED25519_PUB

    @property
    def multicodec(self) -> bytes:
        return self.value


def did_key(raw: bytes, variant: KeyVariant = KeyVariant.X25519) -> str:
    encoded = base58.b58encode(variant.multicodec + bytes(raw)).decode("ascii")
    return f"{DID_KEY_PREFIX}{MULTIBASE_BASE58BTC}{encoded}"


def parse_did_key(did: str) -> Tuple[KeyVariant, bytes]:
    """
    Inverse of did_key().

    Returns the curve variant and the raw key bytes. The key length is not
    checked here; the key constructors do that.
    """
    if not isinstance(did, str) or not did.startswith(DID_KEY_PREFIX):
        raise InvalidEncoding("not a did:key identifier")
    multibase = did[len(DID_KEY_PREFIX):]
    if not multibase.startswith(MULTIBASE_BASE58BTC):
        raise InvalidEncoding("did:key must use base58btc multibase ('z')")
    try:
        data = base58.b58decode(multibase[1:])
    except ValueError as exc:
        raise InvalidEncoding(f"malformed base58 in did:key: {exc}") from exc

    for variant in KeyVariant:
        if data.startswith(variant.multicodec):
            return variant, data[len(variant.multicodec):]
    raise InvalidEncoding("unknown multicodec prefix in did:key")
