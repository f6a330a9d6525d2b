"""One-off migration script: cards.json -> SQL card store (DATABASE_URL)."""
from __future__ import annotations

import sys
from pathlib import Path

# Make the cards_api package importable when run directly
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from cards_api.core.config import get_settings
from cards_api.repositories.json_storage import JSONCardStore
from cards_api.repositories.sql_repository import SQLCardStore


def migrate() -> int:
    settings = get_settings()
    cards = JSONCardStore(settings.cards_path).load_all()
    store = SQLCardStore(settings.database_url)
    store.save_all(cards)
    store.dispose()
    return len(cards)


if __name__ == "__main__":
    total = migrate()
    print(f"{total} cards migrated to the SQL store successfully.")
