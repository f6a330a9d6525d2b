"""
Card use cases (lookups, filtering, mutations) shared by the routers.

Each mutation is load -> compute -> save against the injected store, with no
locking in between.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional
import logging
import random

from cards_api.core.errors import BadRequestError, DuplicateKeyError, NotFoundError
from cards_api.repositories import Card, CardStore

logger = logging.getLogger(__name__)

CATALOG_FIELDS = {"sets": "set", "types": "type", "rarities": "rarity"}


def _index_of(cards: list[Card], card_id: str) -> int:
    for idx, card in enumerate(cards):
        if card.get("cardId") == card_id:
            return idx
    return -1


def _require_object(payload: Any) -> dict:
    if not isinstance(payload, dict):
        raise BadRequestError("Request body must be a JSON object")
    return payload


class CardService:
    """Business rules over a CardStore."""

    def __init__(self, store: CardStore, rng: Optional[random.Random] = None) -> None:
        self.store = store
        self._rng = rng or random.Random()

    # -------------------------- reads --------------------------
    def list_cards(self, filters: Mapping[str, str | list[str]] | None = None) -> list[Card]:
        cards = self.store.load_all()
        if not filters:
            return cards
        # Exact equality only: a card lacking the field never matches, and a
        # repeated query key (given as a list of values) matches nothing.
        return [
            card
            for card in cards
            if all(
                not isinstance(value, list) and key in card and card[key] == value
                for key, value in filters.items()
            )
        ]

    def count(self) -> int:
        return len(self.store.load_all())

    def random_card(self) -> Card:
        cards = self.store.load_all()
        if not cards:
            raise NotFoundError("No cards available")
        return self._rng.choice(cards)

    def distinct_values(self, field: str) -> list[Any]:
        """Distinct values of ``field`` in first-occurrence order; a missing field counts as None."""
        seen: list[Any] = []
        for card in self.store.load_all():
            value = card.get(field)
            # list scan instead of a set: values may be unhashable JSON (lists, objects)
            if not any(value == existing and type(value) is type(existing) for existing in seen):
                seen.append(value)
        return seen

    # -------------------------- mutations --------------------------
    def create_card(self, payload: Any) -> Card:
        card = _require_object(payload)
        card_id = card.get("cardId")
        if not isinstance(card_id, str):
            raise BadRequestError("cardId is required")
        cards = self.store.load_all()
        if _index_of(cards, card_id) != -1:
            raise DuplicateKeyError("Card ID must be unique")
        cards.append(card)
        self.store.save_all(cards)
        logger.info("card_created card_id=%s total=%d", card_id, len(cards))
        return card

    def update_card(self, card_id: str, payload: Any) -> Card:
        changes = _require_object(payload)
        cards = self.store.load_all()
        index = _index_of(cards, card_id)
        if index == -1:
            raise NotFoundError("Card not found")
        if "cardId" in changes and not isinstance(changes["cardId"], str):
            raise BadRequestError("cardId must be a string")
        new_id = changes.get("cardId", card_id)
        if new_id != card_id and _index_of(cards, new_id) != -1:
            raise DuplicateKeyError("New card ID must be unique")
        updated = {**cards[index], **changes}
        cards[index] = updated
        self.store.save_all(cards)
        logger.info("card_updated card_id=%s fields=%s", card_id, sorted(changes))
        return updated

    def delete_card(self, card_id: str) -> Card:
        cards = self.store.load_all()
        index = _index_of(cards, card_id)
        if index == -1:
            raise NotFoundError("Card not found")
        deleted = cards.pop(index)
        self.store.save_all(cards)
        logger.info("card_deleted card_id=%s total=%d", card_id, len(cards))
        return deleted
