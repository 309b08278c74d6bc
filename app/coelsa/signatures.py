"""
HMAC signatures for webhook bodies.

The signature is the hex HMAC of the raw request body with the shared
secret. Senders may prefix it with the algorithm name ("sha256=<hex>").
"""

from __future__ import annotations

import hashlib
import hmac
import json
from typing import Any

ALGORITHMS = {
    "sha256": hashlib.sha256,
    "sha512": hashlib.sha512,
}


def _as_bytes(payload: str | bytes) -> bytes:
    return payload.encode("utf-8") if isinstance(payload, str) else payload


def generate_webhook_signature(
    payload: str | bytes | dict[str, Any],
    secret: str,
    algorithm: str = "sha256",
) -> str:
    """
    Hex signature for a payload.

    Dict payloads are serialised with json.dumps before signing, so sign
    the exact bytes you send when the receiver verifies the raw body.
    """
    if isinstance(payload, dict):
        payload = json.dumps(payload)
    return hmac.new(secret.encode("utf-8"), _as_bytes(payload), ALGORITHMS[algorithm]).hexdigest()


def verify_webhook_signature(
    payload: str | bytes,
    signature: str | None,
    secret: str,
    algorithm: str = "sha256",
) -> bool:
    """
    Check a webhook signature in constant time.

    Returns False for an empty payload, signature or secret, and for an
    unknown algorithm.
    """
    if not payload or not signature or not secret or algorithm not in ALGORITHMS:
        return False

    for prefix in ("sha256=", "sha512="):
        if signature.startswith(prefix):
            signature = signature[len(prefix):]
            break

    expected = generate_webhook_signature(_as_bytes(payload), secret, algorithm)
    # Header values arrive latin-1 decoded; compare bytes so non-ASCII input
    # is a mismatch rather than a TypeError.
    return hmac.compare_digest(
        expected.encode("ascii"),
        signature.strip().lower().encode("utf-8"),
    )
