"""Signature Verification — Ed25519 check of inbound interaction requests.

Invariants:
    - Runs before any parsing: body is treated as opaque bytes
    - Signed message is timestamp header bytes + raw body bytes
    - Every failure mode raises SignatureInvalidError (never returns a bool)

Design Decisions:
    - PyNaCl VerifyKey built once at startup and shared (immutable, thread-safe)
    - Header lookup through any case-insensitive Mapping (Starlette Headers in production)
"""

from collections.abc import Mapping

from nacl.exceptions import BadSignatureError
from nacl.signing import VerifyKey

from xpd_slash.core.errors import SignatureInvalidError

SIGNATURE_HEADER = "x-signature-ed25519"
TIMESTAMP_HEADER = "x-signature-timestamp"

# Ed25519 signature is 64 bytes → 128 hex chars
_SIGNATURE_HEX_LEN = 128


def load_verify_key(public_key_hex: str) -> VerifyKey:
    """Build the verifier from the application's hex-encoded public key."""
    try:
        return VerifyKey(bytes.fromhex(public_key_hex))
    except ValueError as e:
        raise ValueError(f"Invalid Discord public key: {e}") from e


def verify_signature(
    headers: Mapping[str, str], body: bytes, verify_key: VerifyKey,
) -> None:
    """Raise SignatureInvalidError unless `body` was signed by the platform."""
    signature = headers.get(SIGNATURE_HEADER)
    timestamp = headers.get(TIMESTAMP_HEADER)
    if not signature or not timestamp:
        raise SignatureInvalidError("missing signature headers")
    if len(signature) != _SIGNATURE_HEX_LEN:
        raise SignatureInvalidError("signature has the wrong length")
    try:
        signature_bytes = bytes.fromhex(signature)
    except ValueError as e:
        raise SignatureInvalidError("signature is not valid hex") from e
    try:
        verify_key.verify(timestamp.encode() + body, signature_bytes)
    except BadSignatureError as e:
        raise SignatureInvalidError("signature does not match") from e
