"""Tests for loading the read-only word/collection catalog."""

from __future__ import annotations

from pathlib import Path

import pytest

from models.catalog import Catalog, Collection, Word
from persistence.catalog_store import DEFAULT_CATALOG_PATH, load_catalog, parse_catalog
from shared.errors import AppErrors, CatalogError, CatalogFormatError, format_catalog_error


def test_bundled_catalog_loads() -> None:
    catalog = load_catalog(DEFAULT_CATALOG_PATH)
    assert len(catalog.words) == 8
    assert len(catalog.collections) == 4
    assert catalog.find_word("petrichor").text == "Petrichor"
    assert catalog.find_collection("favorites").titles == ("The Great Gatsby", "To Kill a Mockingbird")


def test_parse_skips_malformed_entries() -> None:
    catalog = parse_catalog({
        "words": [
            {"id": "a", "text": "Alpha", "definition": "first"},
            {"id": "b", "text": "Beta"},
            "gamma",
            {"id": "a", "text": "Again", "definition": "duplicate"},
        ],
        "collections": [
            {"id": "c1", "name": "One", "word_count": "3", "color": "Red", "titles": ["T1", " ", 7]},
            {"name": "no id"},
            {"id": "c2", "name": "Two", "word_count": "lots"},
        ],
    })

    assert catalog.words == (Word(id="a", text="Alpha", definition="first", example=""),)
    assert catalog.collections == (
        Collection(id="c1", name="One", word_count=3, color="red", titles=("T1", "7")),
        Collection(id="c2", name="Two", word_count=0, color="blue", titles=()),
    )


def test_parse_rejects_non_object_root() -> None:
    with pytest.raises(CatalogError):
        parse_catalog(["Serendipity"])


@pytest.mark.parametrize("data", [
    {"words": 5, "collections": []},
    {"words": [], "collections": {"id": "favorites"}},
    {"words": "serendipity"},
])
def test_parse_rejects_non_list_sections(data) -> None:
    with pytest.raises(CatalogFormatError) as exc:
        parse_catalog(data)
    assert format_catalog_error(exc.value) == AppErrors.CATALOG_INVALID


def test_null_sections_are_empty() -> None:
    assert parse_catalog({"words": None}) == Catalog()


def test_wrong_shape_file_raises_with_path(write_json) -> None:
    target = write_json("catalog.json", {"words": 5})
    with pytest.raises(CatalogError) as exc:
        load_catalog(target)
    assert exc.value.path == target
    assert format_catalog_error(exc.value) == AppErrors.CATALOG_INVALID


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(CatalogError) as exc:
        load_catalog(tmp_path / "nope.json")
    assert format_catalog_error(exc.value) == AppErrors.CATALOG_UNAVAILABLE


def test_invalid_json_raises(tmp_path: Path) -> None:
    target = tmp_path / "catalog.json"
    target.write_text("{not json", encoding="utf-8")
    with pytest.raises(CatalogError) as exc:
        load_catalog(target)
    assert format_catalog_error(exc.value) == AppErrors.CATALOG_INVALID


def test_load_from_custom_file(write_json) -> None:
    target = write_json("catalog.json", {
        "words": [{"id": "x", "text": "Xenial", "definition": "Friendly to guests", "example": "A xenial host."}],
    })
    catalog = load_catalog(target)
    assert catalog.words[0].example == "A xenial host."
    assert catalog.collections == ()
    assert catalog.find_collection("x") is None
