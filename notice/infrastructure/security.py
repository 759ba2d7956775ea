"""Anti-forgery token helpers."""

from __future__ import annotations

import hashlib
import hmac


def generate_csrf_token(username: str, secret: str | None) -> str | None:
    """Return the token ``username`` must echo back, or ``None`` when disabled."""

    if not secret:
        return None
    return hmac.new(secret.encode(), username.encode(), hashlib.sha256).hexdigest()


def verify_csrf_token(token: str | None, username: str, secret: str | None) -> bool:
    """Check ``token`` against the one issued to ``username``.

    Verification always succeeds when no secret is configured.
    """

    expected = generate_csrf_token(username, secret)
    if expected is None:
        return True
    if not token:
        return False
    return hmac.compare_digest(token, expected)


__all__ = ["generate_csrf_token", "verify_csrf_token"]
