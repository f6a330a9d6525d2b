"""Entry point for uvicorn/gunicorn (``uvicorn cards_api.app_factory:app``)."""
from cards_api.app import create_app

app = create_app()

__all__ = ["app", "create_app"]
