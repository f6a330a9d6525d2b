from __future__ import annotations

from fastapi import Request

from cards_api.services.auth_service import AuthService, Identity
from cards_api.services.card_service import CardService


def _state(request: Request):
    return getattr(request.app, "state", None)


def get_card_service(request: Request) -> CardService:
    svc = getattr(_state(request), "card_service", None)
    if not svc:
        raise RuntimeError("CardService is not configured")
    return svc


def get_auth_service(request: Request) -> AuthService:
    svc = getattr(_state(request), "auth_service", None)
    if not svc:
        raise RuntimeError("AuthService is not configured")
    return svc


def require_identity(request: Request) -> Identity:
    """Gate for mutating routes: a valid bearer token or a 401."""
    identity = get_auth_service(request).authenticate(request.headers.get("authorization"))
    request.state.user = identity
    return identity
