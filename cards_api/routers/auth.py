from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends

from cards_api.routers.deps import get_auth_service
from cards_api.services.auth_service import AuthService

router = APIRouter(tags=["auth"])


@router.post("/getToken")
def get_token(payload: Any = Body(None), auth_service: AuthService = Depends(get_auth_service)):
    # Missing or non-object bodies carry no credentials and fail the lookup (401).
    credentials = payload if isinstance(payload, dict) else {}
    token = auth_service.issue_token(credentials.get("username"), credentials.get("password"))
    return {"successMessage": "Token created", "token": token}
