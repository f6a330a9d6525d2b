from __future__ import annotations

from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from cards_api.core.config import Settings, get_settings
from cards_api.core.errors import register_exception_handlers
from cards_api.core.log import RequestLoggingMiddleware, configure_logging
from cards_api.repositories import CardStore, build_card_store
from cards_api.repositories.json_storage import JSONUserStore
from cards_api.routers import auth as auth_router
from cards_api.routers import cards as cards_router
from cards_api.routers import catalog as catalog_router
from cards_api.services.auth_service import AuthService
from cards_api.services.card_service import CardService

WELCOME = "🎴 Card Game API is running! Try /cards or /getToken"


def create_app(
    settings: Optional[Settings] = None,
    *,
    card_store: Optional[CardStore] = None,
    user_store: Optional[JSONUserStore] = None,
) -> FastAPI:
    """Build the application; stores may be injected (tests, alternate backends)."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="Card Catalogue API")
    app.state.settings = settings
    app.state.card_service = CardService(card_store or build_card_store(settings))
    app.state.auth_service = AuthService(user_store or JSONUserStore(settings.users_path), settings)

    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=list(settings.cors_origins),
            allow_credentials=True,
            allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
            allow_headers=["*"],
        )
    app.add_middleware(RequestLoggingMiddleware)
    register_exception_handlers(app)

    @app.get("/", response_class=PlainTextResponse)
    def root():
        return WELCOME

    app.include_router(auth_router.router)
    app.include_router(cards_router.router)
    app.include_router(catalog_router.router)
    return app
