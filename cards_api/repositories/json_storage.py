"""
JSON file persistence.

Both documents are plain JSON arrays read wholesale on every call. The cards
file is rewritten wholesale after each mutation; nothing is cached and nothing
is locked, so two overlapping load/modify/save sequences can lose an update.
"""

from __future__ import annotations

from pathlib import Path
import json
import logging

from cards_api.core.errors import StorageError
from cards_api.repositories import Card

logger = logging.getLogger(__name__)


def _read_array(path: Path, what: str) -> list:
    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as exc:
        raise StorageError(f"{what} file not found: {path}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise StorageError(f"Could not read {what} file {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise StorageError(f"{what} file {path} is not valid JSON: {exc}") from exc
    if not isinstance(data, list):
        raise StorageError(f"{what} file {path} must contain a JSON array")
    return data


class JSONCardStore:
    """Whole-collection card store backed by a JSON array on disk."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def load_all(self) -> list[Card]:
        return _read_array(self.path, "cards")

    def save_all(self, cards: list[Card]) -> None:
        try:
            self.path.write_text(json.dumps(cards, ensure_ascii=False, indent=2), encoding="utf-8")
        except (OSError, TypeError, ValueError) as exc:
            raise StorageError(f"Could not write cards file {self.path}: {exc}") from exc
        logger.debug("cards_saved path=%s count=%d", self.path, len(cards))


class JSONUserStore:
    """Credential file (array of {username, password}); the HTTP surface only reads it."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def load_all(self) -> list[dict]:
        return _read_array(self.path, "users")

    def append(self, username: str, password: str) -> None:
        """Used by scripts/add_user.py; the HTTP surface never writes users."""
        users = self.load_all() if self.path.exists() else []
        users.append({"username": username, "password": password})
        try:
            self.path.write_text(json.dumps(users, ensure_ascii=False, indent=2), encoding="utf-8")
        except OSError as exc:
            raise StorageError(f"Could not write users file {self.path}: {exc}") from exc
