"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import sqlite3
from collections.abc import Callable, Iterator, Mapping
from pathlib import Path

import pytest

from tshock2plr.core import sqlite_client
from tshock2plr.core.config import settings
from tshock2plr.utils import item_catalog
from tshock2plr.utils.item_catalog import ItemCatalog

EMPTY_TOKEN = "0,0,0"
FULL_BLOB_LENGTH = 350

CHARACTER_COLUMNS = (
    "Account INTEGER",
    "Health INTEGER",
    "MaxHealth INTEGER",
    "Mana INTEGER",
    "MaxMana INTEGER",
    "Inventory TEXT",
    "questsCompleted INTEGER",
    "unlockedBiomeTorches INTEGER",
    "ateArtisanBread INTEGER",
    "usedAegisCrystal INTEGER",
    "usedAegisFruit INTEGER",
    "usedArcaneCrystal INTEGER",
    "usedGalaxyPearl INTEGER",
    "usedGummyWorm INTEGER",
    "usedAmbrosia INTEGER",
    "unlockedSuperCart INTEGER",
    "enabledSuperCart INTEGER",
)


def make_blob(overrides: Mapping[int, str] | None = None, length: int = FULL_BLOB_LENGTH) -> str:
    """Build a `~` separated inventory with empty tokens except at ``overrides``."""
    tokens = [EMPTY_TOKEN] * length
    for index, token in (overrides or {}).items():
        tokens[index] = token
    return "~".join(tokens)


def make_row(**columns: object) -> dict[str, object]:
    row: dict[str, object] = {
        "Username": "Steve",
        "Health": 400,
        "MaxHealth": 500,
        "Mana": 180,
        "MaxMana": 200,
        "Inventory": make_blob(),
    }
    row.update(columns)
    return row


@pytest.fixture
def catalog() -> ItemCatalog:
    return ItemCatalog(max_item_id=5455, names={73: "Gold Coin"})


@pytest.fixture(autouse=True)
def _reset_singletons(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Make every test build its own catalog and database connection."""
    monkeypatch.setattr(item_catalog, "_catalog", None)
    monkeypatch.setattr(sqlite_client, "_db_connection", None)
    monkeypatch.setattr(settings, "TEMPLATE_FILE", None)
    monkeypatch.setattr(settings, "CODEC", "json")
    yield


@pytest.fixture
def tshock_db(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Callable[..., None]:
    """Create a TShock style database and point the settings at it.

    Returns a function that inserts one account (and, unless ``character`` is
    None, its character row).
    """
    path = tmp_path / "tshock.sqlite"
    with sqlite3.connect(path) as conn:
        conn.execute("CREATE TABLE Users (ID INTEGER PRIMARY KEY, Username TEXT)")
        conn.execute(f"CREATE TABLE tsCharacter ({', '.join(CHARACTER_COLUMNS)})")
    monkeypatch.setattr(settings, "DATABASE_FILE", str(path))

    def add_player(name: str, character: Mapping[str, object] | None) -> None:
        with sqlite3.connect(path) as conn:
            cursor = conn.execute("INSERT INTO Users (Username) VALUES (?)", (name,))
            if character is None:
                return
            values = {"Account": cursor.lastrowid, **character}
            names = ", ".join(values)
            marks = ", ".join("?" for _ in values)
            conn.execute(f"INSERT INTO tsCharacter ({names}) VALUES ({marks})", tuple(values.values()))

    return add_player
