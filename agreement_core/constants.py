# agreement_core/constants.py

# Curve25519 key agreement sizes (RFC 7748)
KEY_LENGTH = 32
SHARED_SECRET_LENGTH = 32

# did:key (multibase "z" = base58btc, multicodec varint prefixes)
DID_KEY_PREFIX = "did:key:"
MULTIBASE_BASE58BTC = "z"
MULTICODEC_X25519_PUB = b"\xec\x01"
MULTICODEC_ED25519_PUB = b"\xed\x01"

# Environment configuration
ENV_LOG_LEVEL = "AGREEMENT_LOG_LEVEL"
ENV_LOG_FILE = "AGREEMENT_LOG_FILE"
DEFAULT_LOG_LEVEL = "WARNING"
