"""
JWT-style token creation and verification.

Tokens are base64-encoded JSON payloads signed with HMAC-SHA256.
The secret is passed in by the caller (``Settings.jwt_secret``, env var
``JWT_SECRET``), so nothing here reads global configuration.
"""

from __future__ import annotations

import binascii
import hashlib
import hmac
import json
import time
from base64 import urlsafe_b64decode, urlsafe_b64encode
from typing import Any, Dict


class InvalidToken(Exception):
    """Raised when a token is malformed, tampered with or expired."""


def _sign(secret: str, raw: bytes) -> str:
    return hmac.new(secret.encode(), raw, hashlib.sha256).hexdigest()


def create_token(user_id: int, secret: str, expires_in: int = 3600) -> str:
    """Create a signed token containing ``user_id``, issue time and expiry."""
    issued_at = int(time.time())
    payload = {
        "user_id": user_id,
        "iat": issued_at,
        "exp": issued_at + expires_in,
    }
    raw = json.dumps(payload, separators=(",", ":")).encode()
    return urlsafe_b64encode(raw).decode() + "." + _sign(secret, raw)


def decode_token(token: str, secret: str) -> Dict[str, Any]:
    """
    Verify token and return its payload.

    Raises ``InvalidToken`` on bad format, bad signature or expiry.
    """
    parts = token.split(".", 1)
    if len(parts) != 2:
        raise InvalidToken("bad format")
    try:
        raw = urlsafe_b64decode(parts[0].encode())
    except (binascii.Error, ValueError) as exc:
        raise InvalidToken("bad encoding") from exc
    if not hmac.compare_digest(parts[1], _sign(secret, raw)):
        raise InvalidToken("bad signature")
    payload = json.loads(raw)
    if payload.get("exp", 0) < time.time():
        raise InvalidToken("token expired")
    return payload
