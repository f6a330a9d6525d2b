"""Card store backed by SQLAlchemy, same whole-collection contract as the JSON file."""
from __future__ import annotations

from sqlalchemy import select, delete
from sqlalchemy.exc import SQLAlchemyError

from cards_api.core.errors import StorageError
from cards_api.db import models
from cards_api.db.models import CardRow
from cards_api.db.session import make_engine, make_sessionmaker, session_scope
from cards_api.repositories import Card


class SQLCardStore:
    """Load-all / save-all over the ``cards`` table of ``database_url``."""

    def __init__(self, database_url: str, *, create_schema: bool = True) -> None:
        self.engine = make_engine(database_url)
        self._sessions = make_sessionmaker(self.engine)
        if create_schema:
            models.Base.metadata.create_all(bind=self.engine)

    def load_all(self) -> list[Card]:
        try:
            with session_scope(self._sessions) as session:
                rows = session.execute(select(CardRow).order_by(CardRow.position)).scalars().all()
                return [dict(row.data or {}) for row in rows]
        except SQLAlchemyError as exc:
            raise StorageError(f"Could not load cards: {exc}") from exc

    def save_all(self, cards: list[Card]) -> None:
        try:
            with session_scope(self._sessions) as session:
                session.execute(delete(CardRow))
                for position, card in enumerate(cards):
                    card_id = card.get("cardId")
                    session.add(
                        CardRow(
                            position=position,
                            card_id=card_id if isinstance(card_id, str) else None,
                            data=card,
                        )
                    )
                session.commit()
        except SQLAlchemyError as exc:
            raise StorageError(f"Could not save cards: {exc}") from exc

    def dispose(self) -> None:
        self.engine.dispose()
