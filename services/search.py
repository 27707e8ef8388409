from __future__ import annotations
from typing import Callable, Generic, Sequence, TypeVar

from models.catalog import Collection, Word

T = TypeVar("T")


def _contains(text: str, query: str) -> bool:
    return query in (text or "").casefold()


def word_matches(word: Word, query: str) -> bool:
    q = query.casefold()
    return _contains(word.text, q) or _contains(word.definition, q)


def collection_matches(collection: Collection, query: str) -> bool:
    q = query.casefold()
    return _contains(collection.name, q) or any(_contains(t, q) for t in collection.titles)


class CatalogFilter(Generic[T]):
    """Filters a fixed sequence by query, recomputing only when the query changes."""

    def __init__(self, items: Sequence[T], matches: Callable[[T, str], bool]):
        self._items = tuple(items)
        self._matches = matches
        self._cached_query = ""
        self._cached = self._items
        self.recomputations = 0

    @property
    def items(self) -> tuple[T, ...]:
        return self._items

    def filter(self, query: str) -> tuple[T, ...]:
        q = (query or "").strip()
        if q == self._cached_query:
            return self._cached
        self.recomputations += 1
        self._cached = self._items if not q else tuple(i for i in self._items if self._matches(i, q))
        self._cached_query = q
        return self._cached


def word_filter(words: Sequence[Word]) -> CatalogFilter[Word]:
    return CatalogFilter(words, word_matches)


def collection_filter(collections: Sequence[Collection]) -> CatalogFilter[Collection]:
    return CatalogFilter(collections, collection_matches)
