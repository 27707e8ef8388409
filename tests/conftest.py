"""Shared pytest fixtures."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from models.catalog import Catalog, Collection, Word
from services.store import Store


@pytest.fixture
def words() -> tuple[Word, ...]:
    return (
        Word(id="serendipity", text="Serendipity", definition="The occurrence of events by chance in a happy way",
             example="Finding that book was pure serendipity."),
        Word(id="ephemeral", text="Ephemeral", definition="Lasting for a very short time",
             example="The beauty of cherry blossoms is ephemeral."),
        Word(id="petrichor", text="Petrichor", definition="The pleasant smell of earth after rain",
             example="The petrichor filled the air after the storm."),
    )


@pytest.fixture
def collections() -> tuple[Collection, ...]:
    return (
        Collection(id="favorites", name="Favorites", word_count=12, color="red",
                   titles=("The Great Gatsby", "To Kill a Mockingbird")),
        Collection(id="recent", name="Recent", word_count=5, color="blue",
                   titles=("1984", "Brave New World")),
    )


@pytest.fixture
def catalog(words, collections) -> Catalog:
    return Catalog(words=words, collections=collections)


@pytest.fixture
def store() -> Store:
    return Store()


@pytest.fixture
def write_json(tmp_path: Path):
    def _write(name: str, data) -> Path:
        target = tmp_path / name
        target.write_text(json.dumps(data), encoding="utf-8")
        return target
    return _write
