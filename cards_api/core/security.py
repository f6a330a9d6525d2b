"""Password helpers (hashing and verification)."""

from __future__ import annotations

import secrets

from argon2 import PasswordHasher, exceptions as argon_exc

_ph = PasswordHasher()
_PREFIX = "argon2$"


def hash_password(password: str) -> str:
    """Create an Argon2 hash with a prefix for detection."""
    hashed = _ph.hash(password)
    return f"{_PREFIX}{hashed}"


def is_hashed(stored: str | None) -> bool:
    return (stored or "").startswith(_PREFIX)


def verify_password(password: str, stored: str | None) -> bool:
    """
    Check a submitted password against the stored credential.

    Entries written by ``scripts/add_user.py --hash`` carry the argon2 prefix.
    Anything else is a legacy plaintext entry and must match exactly
    (case-sensitive).
    """
    if not isinstance(password, str) or not isinstance(stored, str):
        return False
    if is_hashed(stored):
        try:
            return _ph.verify(stored[len(_PREFIX) :], password)
        except (argon_exc.VerifyMismatchError, argon_exc.VerificationError, argon_exc.InvalidHashError):
            return False
    # Plaintext comparison kept for compatibility with existing users.json files.
    return secrets.compare_digest(password.encode("utf-8"), stored.encode("utf-8"))
