"""SQLAlchemy models mirroring the JSON card array."""
from __future__ import annotations

from sqlalchemy import Column, Integer, String, JSON

from .session import Base


class CardRow(Base):
    """One card; ``position`` keeps insertion order, ``data`` holds every field."""

    __tablename__ = "cards"

    position = Column(Integer, primary_key=True, autoincrement=False)
    card_id = Column(String(255), nullable=True, index=True)
    data = Column(JSON, nullable=False, default=dict)
