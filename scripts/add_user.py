#!/usr/bin/env python3
"""
Add a credential to users.json.

Usage:
  python scripts/add_user.py --username ash --password pikachu [--hash] [--file users.json]
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Make the cards_api package importable when run directly
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from cards_api.core.config import get_settings
from cards_api.core.security import hash_password
from cards_api.repositories.json_storage import JSONUserStore


def main() -> None:
    settings = get_settings()
    ap = argparse.ArgumentParser(description="Add a user allowed to request tokens")
    ap.add_argument("--username", required=True)
    ap.add_argument("--password", required=True)
    ap.add_argument("--hash", action="store_true", help="store an argon2 hash instead of plaintext")
    ap.add_argument("--file", default=settings.users_path, help=f"users file (default: {settings.users_path})")
    args = ap.parse_args()

    username = (args.username or "").strip()
    if not username:
        raise SystemExit("Invalid username")
    store = JSONUserStore(args.file)
    existing = store.load_all() if store.path.exists() else []
    if any(u.get("username") == username for u in existing if isinstance(u, dict)):
        raise SystemExit(f"User '{username}' already exists")

    password = hash_password(args.password) if args.hash else args.password
    store.append(username, password)
    print(f"OK: user '{username}' added to {store.path}")


if __name__ == "__main__":
    main()
