"""
Token issuance and bearer-token validation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Optional
import logging

import jwt

from cards_api.core.config import Settings, get_settings
from cards_api.core.errors import (
    AuthConfigurationError,
    InvalidCredentialError,
    InvalidCredentialsError,
    MissingCredentialError,
)
from cards_api.core.security import verify_password
from cards_api.repositories.json_storage import JSONUserStore

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"


@dataclass(frozen=True)
class Identity:
    username: str


def bearer_token(authorization: Optional[str]) -> Optional[str]:
    """Return the token part of ``Bearer <token>``, or None when absent."""
    parts = (authorization or "").split()
    if len(parts) < 2:
        return None
    return parts[1]


@dataclass
class AuthService:
    """Issues signed tokens for known users and validates presented ones."""

    user_store: JSONUserStore
    settings: Settings = field(default_factory=get_settings)

    # -------------------------------------- helpers --------------------------------------
    def _now(self) -> datetime:
        return datetime.now(timezone.utc)

    def _secret(self) -> str:
        secret = self.settings.jwt_secret
        if not secret:
            raise AuthConfigurationError()
        return secret

    # -------------------------------------- tokens --------------------------------------
    def issue_token(self, username: object, password: object) -> str:
        users = self.user_store.load_all()
        match = next(
            (
                u
                for u in users
                if isinstance(u, dict)
                and isinstance(username, str)
                and u.get("username") == username
                and verify_password(password, u.get("password"))
            ),
            None,
        )
        if match is None:
            raise InvalidCredentialsError()
        now = self._now()
        claims = {
            "username": username,
            "iat": now,
            "exp": now + timedelta(seconds=self.settings.token_ttl_seconds),
        }
        token = jwt.encode(claims, self._secret(), algorithm=ALGORITHM)
        logger.info("token_issued username=%s", username)
        return token

    def authenticate(self, authorization: Optional[str]) -> Identity:
        token = bearer_token(authorization)
        if not token:
            raise MissingCredentialError()
        if not self.settings.jwt_secret:
            # Nothing can be verified without a secret; the token is simply rejected.
            logger.error("token_rejected reason=JWT_SECRET not configured")
            raise InvalidCredentialError()
        try:
            claims = jwt.decode(token, self.settings.jwt_secret, algorithms=[ALGORITHM])
        except jwt.PyJWTError as exc:
            logger.debug("token_rejected reason=%s", exc)
            raise InvalidCredentialError() from exc
        return Identity(username=str(claims.get("username", "")))
