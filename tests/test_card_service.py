from __future__ import annotations

import random
import sys
from pathlib import Path

import pytest

# Make the cards_api package importable for local test runs
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from cards_api.core.errors import BadRequestError, DuplicateKeyError, NotFoundError  # noqa: E402
from cards_api.repositories.json_storage import JSONCardStore  # noqa: E402
from cards_api.services.card_service import CardService  # noqa: E402


class MemoryCardStore:
    """In-memory stand-in that records every save."""

    def __init__(self, cards=None):
        self.cards = [dict(c) for c in (cards or [])]
        self.saves = 0

    def load_all(self):
        return [dict(c) for c in self.cards]

    def save_all(self, cards):
        self.cards = [dict(c) for c in cards]
        self.saves += 1


@pytest.fixture()
def store():
    return MemoryCardStore(
        [
            {"cardId": "a", "set": "Base", "type": "Fire", "hp": 60},
            {"cardId": "b", "set": "Jungle", "type": "Grass"},
            {"cardId": "c", "set": "Base", "type": "Fire", "rarity": "Rare"},
        ]
    )


def test_filters_use_exact_equality(store):
    svc = CardService(store)
    assert [c["cardId"] for c in svc.list_cards({"set": "Base", "type": "Fire"})] == ["a", "c"]
    # query values are strings; 60 (int) != "60"
    assert svc.list_cards({"hp": "60"}) == []
    assert svc.list_cards({}) == store.cards


def test_distinct_values_keep_first_occurrence_and_missing_fields(store):
    svc = CardService(store)
    assert svc.distinct_values("set") == ["Base", "Jungle"]
    assert svc.distinct_values("rarity") == [None, "Rare"]


def test_distinct_values_handle_unhashable_values():
    svc = CardService(MemoryCardStore([{"cardId": "1", "set": ["x"]}, {"cardId": "2", "set": ["x"]}]))
    assert svc.distinct_values("set") == [["x"]]


def test_mutations_save_whole_collection(store):
    svc = CardService(store)
    svc.create_card({"cardId": "d"})
    svc.update_card("a", {"hp": 70})
    svc.delete_card("b")
    assert store.saves == 3
    assert [c["cardId"] for c in store.cards] == ["a", "c", "d"]
    assert store.cards[0] == {"cardId": "a", "set": "Base", "type": "Fire", "hp": 70}


def test_failed_mutations_do_not_save(store):
    svc = CardService(store)
    with pytest.raises(DuplicateKeyError):
        svc.create_card({"cardId": "a"})
    with pytest.raises(BadRequestError):
        svc.create_card({"cardId": 5})
    with pytest.raises(NotFoundError):
        svc.update_card("zz", {"set": "X"})
    with pytest.raises(DuplicateKeyError):
        svc.update_card("a", {"cardId": "b"})
    with pytest.raises(NotFoundError):
        svc.delete_card("zz")
    assert store.saves == 0


def test_update_with_same_card_id_is_allowed(store):
    svc = CardService(store)
    updated = svc.update_card("a", {"cardId": "a", "set": "Promo"})
    assert updated["set"] == "Promo"


def test_random_card_uses_injected_rng(store):
    svc = CardService(store, rng=random.Random(7))
    picks = {svc.random_card()["cardId"] for _ in range(50)}
    assert picks == {"a", "b", "c"}
    with pytest.raises(NotFoundError):
        CardService(MemoryCardStore()).random_card()


def test_overlapping_mutations_lose_an_update(tmp_path):
    """No locking around load/modify/save: the last writer wins."""
    path = tmp_path / "cards.json"
    path.write_text('[{"cardId": "1"}]', encoding="utf-8")
    store = JSONCardStore(path)

    first = store.load_all()
    second = store.load_all()
    first.append({"cardId": "from-first"})
    second.append({"cardId": "from-second"})
    store.save_all(first)
    store.save_all(second)

    ids = [c["cardId"] for c in store.load_all()]
    assert ids == ["1", "from-second"]


def test_rename_to_an_existing_empty_id_is_rejected():
    store = MemoryCardStore([{"cardId": ""}, {"cardId": "1"}])
    svc = CardService(store)
    with pytest.raises(DuplicateKeyError):
        svc.update_card("1", {"cardId": ""})
    assert [c["cardId"] for c in store.cards] == ["", "1"]
    assert store.saves == 0


def test_rename_to_non_string_id_is_rejected(store):
    svc = CardService(store)
    for bad in (None, 0, ["a"]):
        with pytest.raises(BadRequestError):
            svc.update_card("a", {"cardId": bad})
    assert store.saves == 0


def test_repeated_filter_key_matches_nothing(store):
    svc = CardService(store)
    assert svc.list_cards({"set": ["Base", "Base"]}) == []
    assert svc.list_cards({"set": ["Base", "Jungle"]}) == []
