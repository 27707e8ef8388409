from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Union

from models.catalog import Word, Collection


@dataclass(frozen=True, slots=True)
class WordDetail:
    word: Word

    @property
    def id(self) -> str:
        return f"word-{self.word.id}"

    @property
    def title(self) -> str:
        return self.word.text


@dataclass(frozen=True, slots=True)
class AddWord:
    @property
    def id(self) -> str:
        return "add-word"

    @property
    def title(self) -> str:
        return "Add Word"


@dataclass(frozen=True, slots=True)
class CollectionDetail:
    collection: Collection

    @property
    def id(self) -> str:
        return f"collection-{self.collection.id}"

    @property
    def title(self) -> str:
        return self.collection.name


@dataclass(frozen=True, slots=True)
class Settings:
    @property
    def id(self) -> str:
        return "settings"

    @property
    def title(self) -> str:
        return "Settings"


NavigationDestination = Union[WordDetail, AddWord, CollectionDetail, Settings]


class PresentationStyle(Enum):
    PUSH = "push"
    SHEET = "sheet"
    FULLSCREEN = "fullscreen"


@dataclass(frozen=True, slots=True)
class ModalPresentation:
    destination: NavigationDestination
    style: PresentationStyle
