from __future__ import annotations

import argparse
import importlib.util
import sys
from pathlib import Path

import pytest

# Make the cards_api package importable for local test runs
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


def load_script(name: str):
    spec = importlib.util.spec_from_file_location(f"script_{name}", ROOT / "scripts" / f"{name}.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_add_card_parses_key_value_fields():
    add_card = load_script("add_card")
    assert add_card.parse_field("set=Base") == ("set", "Base")
    assert add_card.parse_field(" name =Mr. Mime=") == ("name", "Mr. Mime=")
    with pytest.raises(argparse.ArgumentTypeError, match="expected key=value"):
        add_card.parse_field("rarity")


def test_add_user_rejects_existing_username(tmp_path, monkeypatch, capsys):
    add_user = load_script("add_user")
    users = tmp_path / "users.json"
    monkeypatch.setattr(sys, "argv", ["add_user.py", "--username", "ash", "--password", "p", "--file", str(users)])
    add_user.main()
    assert "added to" in capsys.readouterr().out
    with pytest.raises(SystemExit, match="already exists"):
        add_user.main()
