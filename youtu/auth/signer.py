"""Request signer for the Youtu API.

The token is ``base64(HMAC-SHA1(secret_key, canonical) + canonical)``. SHA-1 is
what the service verifies against, so it cannot be swapped for a stronger hash.
"""

from __future__ import annotations

import base64
import hashlib
import hmac
import secrets
import time

from youtu.auth.credential import Credential


NONCE_BITS = 31


def canonical_string(credential: Credential, timestamp: int, nonce: int) -> str:
    """Return the string that gets signed; field order is fixed by the service."""

    return (
        f"a={credential.app_id}&k={credential.secret_id}&e={credential.expired}"
        f"&t={timestamp}&r={nonce}&u={credential.user_id}&f="
    )


def sign(secret_key: str, canonical: str) -> str:
    raw = canonical.encode("utf-8")
    digest = hmac.new(secret_key.encode("utf-8"), raw, hashlib.sha1).digest()
    return base64.b64encode(digest + raw).decode("ascii")


def new_nonce() -> int:
    """Draw a non-negative 31-bit nonce from the OS random source."""

    # Drawn per call; a shared generator reseeded from the clock repeats values.
    return secrets.randbits(NONCE_BITS)


def build_token(
    credential: Credential,
    *,
    timestamp: int | None = None,
    nonce: int | None = None,
) -> str:
    """Build the ``Authorization`` header value for a single request."""

    if timestamp is None:
        timestamp = int(time.time())
    if nonce is None:
        nonce = new_nonce()
    return sign(credential.secret_key, canonical_string(credential, timestamp, nonce))
