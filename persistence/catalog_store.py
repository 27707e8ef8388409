from __future__ import annotations
from pathlib import Path
import json
import logging

from models.catalog import Catalog, Collection, Word
from shared.errors import CatalogError, CatalogFormatError

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_PATH = Path(__file__).resolve().parent.parent / "res" / "catalog.json"


def _clean_str(value) -> str:
    return str(value).strip() if isinstance(value, (str, int, float)) else ""


def _parse_word(item) -> Word | None:
    if not isinstance(item, dict):
        return None
    wid = _clean_str(item.get("id"))
    text = _clean_str(item.get("text"))
    definition = _clean_str(item.get("definition"))
    if not (wid and text and definition):
        return None
    return Word(id=wid, text=text, definition=definition, example=_clean_str(item.get("example")))


def _parse_collection(item) -> Collection | None:
    if not isinstance(item, dict):
        return None
    cid = _clean_str(item.get("id"))
    name = _clean_str(item.get("name"))
    if not (cid and name):
        return None
    try:
        word_count = max(0, int(item.get("word_count", 0) or 0))
    except (TypeError, ValueError):
        word_count = 0
    raw_titles = item.get("titles", []) or []
    titles = tuple(_clean_str(t) for t in raw_titles if _clean_str(t)) if isinstance(raw_titles, list) else ()
    color = _clean_str(item.get("color")).lower() or "blue"
    return Collection(id=cid, name=name, word_count=word_count, color=color, titles=titles)


def _unique_by_id(items, kind: str):
    seen, out = set(), []
    for it in items:
        if it.id in seen:
            logger.warning("duplicate %s id %r skipped", kind, it.id)
            continue
        seen.add(it.id)
        out.append(it)
    return tuple(out)


def _entries(data: dict, key: str) -> list:
    raw = data.get(key)
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise CatalogFormatError(f"catalog '{key}' must be a list, got {type(raw).__name__}")
    return raw


def parse_catalog(data) -> Catalog:
    """Build a Catalog from decoded JSON, skipping malformed entries."""
    if not isinstance(data, dict):
        raise CatalogFormatError("catalog root must be an object with 'words' and 'collections'")
    words = []
    for raw in _entries(data, "words"):
        w = _parse_word(raw)
        if w is None:
            logger.warning("skipping malformed word entry: %r", raw)
            continue
        words.append(w)
    collections = []
    for raw in _entries(data, "collections"):
        c = _parse_collection(raw)
        if c is None:
            logger.warning("skipping malformed collection entry: %r", raw)
            continue
        collections.append(c)
    return Catalog(words=_unique_by_id(words, "word"), collections=_unique_by_id(collections, "collection"))


def load_catalog(path: str | Path | None = None) -> Catalog:
    p = Path(path or DEFAULT_CATALOG_PATH)
    if not p.exists():
        raise CatalogError(f"catalog file not found: {p}", path=p)
    try:
        with open(p, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise CatalogFormatError(f"catalog file is not valid JSON: {p}", path=p) from e
    except OSError as e:
        raise CatalogError(f"catalog file could not be read: {p}", path=p) from e
    try:
        catalog = parse_catalog(data)
    except CatalogFormatError as e:
        e.path = p
        raise
    logger.info("loaded %d words and %d collections from %s", len(catalog.words), len(catalog.collections), p)
    return catalog
