"""Run the API with uvicorn: ``python -m cards_api``."""
from __future__ import annotations

import logging

import uvicorn

from cards_api.core.config import get_settings
from cards_api.core.log import configure_logging

logger = logging.getLogger("cards_api")


def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)
    if not settings.jwt_secret:
        logger.warning("JWT_SECRET is not set; /getToken will fail until it is configured")
    uvicorn.run(
        "cards_api.app:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
