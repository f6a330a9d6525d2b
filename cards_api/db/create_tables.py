"""Create the ``cards`` table for the SQL card store (``python -m cards_api.db.create_tables``)."""
from __future__ import annotations

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from cards_api.core.config import get_settings
from .session import Base, make_engine
from . import models  # noqa: F401  # registers CardRow on Base.metadata


def create_all(engine: Engine | None = None) -> None:
    engine = engine or make_engine(get_settings().database_url)
    Base.metadata.create_all(bind=engine)


if __name__ == "__main__":
    try:
        create_all()
    except (SQLAlchemyError, RuntimeError) as exc:
        raise SystemExit(f"Could not create the cards table: {exc}") from exc
    print("cards table ready.")
