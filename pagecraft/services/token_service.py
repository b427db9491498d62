"""Page identity and admin-token generation."""

from __future__ import annotations

import secrets
import uuid

ADMIN_TOKEN_BYTES = 18


def generate_page_id() -> str:
    """Return a fresh random page id."""
    return str(uuid.uuid4())


def generate_admin_token() -> str:
    """Return a fresh admin token: 18 random bytes, hex-encoded (36 chars)."""
    return secrets.token_hex(ADMIN_TOKEN_BYTES)


def tokens_match(stored: str, presented: str | None) -> bool:
    """Check a presented admin token against the stored one.

    Plain equality, not constant-time. See DESIGN.md before changing this.
    """
    if presented is None:
        return False
    return stored == presented
