#!/usr/bin/env python3
"""
Append a card to the configured card store.

Usage:
  python scripts/add_card.py --card-id 025 --field name=Pikachu --field set=Base --field rarity=Common
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from cards_api.core.config import get_settings
from cards_api.core.errors import ApiError
from cards_api.repositories import build_card_store
from cards_api.services.card_service import CardService


def parse_field(raw: str) -> tuple[str, str]:
    key, sep, value = raw.partition("=")
    if not sep or not key.strip():
        raise argparse.ArgumentTypeError(f"invalid field '{raw}' (expected key=value)")
    return key.strip(), value


def main() -> None:
    ap = argparse.ArgumentParser(description="Add a card to the configured card store")
    ap.add_argument("--card-id", required=True, help="unique cardId")
    ap.add_argument("--field", action="append", type=parse_field, default=[], help="key=value (repeatable)")
    args = ap.parse_args()

    card = dict(args.field)
    card["cardId"] = args.card_id.strip()
    svc = CardService(build_card_store(get_settings()))
    try:
        created = svc.create_card(card)
    except ApiError as exc:
        raise SystemExit(f"Error: {exc.message}") from exc
    print("OK: card added")
    for key, value in created.items():
        print(f"  {key}: {value}")


if __name__ == "__main__":
    main()
