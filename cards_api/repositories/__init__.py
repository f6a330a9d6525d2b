"""
Persistence adapters.

Every card store exposes the same whole-collection contract (``load_all`` /
``save_all``) so handlers never care whether the data lives in a JSON file or
in a SQL table. Services depend on the CardStore protocol, not on the file.
"""

from __future__ import annotations

from typing import Any, Protocol

from cards_api.core.config import Settings

Card = dict[str, Any]


class CardStore(Protocol):
    def load_all(self) -> list[Card]: ...

    def save_all(self, cards: list[Card]) -> None: ...


def build_card_store(settings: Settings) -> CardStore:
    """Pick the card store configured by CARD_STORE."""
    if settings.card_store == "sql":
        from cards_api.repositories.sql_repository import SQLCardStore

        return SQLCardStore(settings.database_url)
    if settings.card_store != "json":
        raise ValueError(f"Unknown CARD_STORE '{settings.card_store}' (expected 'json' or 'sql')")
    from cards_api.repositories.json_storage import JSONCardStore

    return JSONCardStore(settings.cards_path)
