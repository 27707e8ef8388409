from __future__ import annotations
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class Word:
    id: str
    text: str
    definition: str
    example: str = ""


@dataclass(frozen=True, slots=True)
class Collection:
    id: str
    name: str
    word_count: int = 0
    color: str = "blue"
    titles: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class Catalog:
    """Read-only sample data shown by the two tabs."""
    words: tuple[Word, ...] = ()
    collections: tuple[Collection, ...] = ()

    def find_word(self, word_id: str) -> Word | None:
        for w in self.words:
            if w.id == word_id:
                return w
        return None

    def find_collection(self, collection_id: str) -> Collection | None:
        for c in self.collections:
            if c.id == collection_id:
                return c
        return None
