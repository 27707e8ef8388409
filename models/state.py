from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Sequence, Union

from models.destinations import ModalPresentation, NavigationDestination
from shared.errors import NavigationInvariantError


class Tab(Enum):
    WORDS = 0
    COLLECTIONS = 1

    @property
    def id(self) -> int:
        return self.value

    @property
    def label(self) -> str:
        return _TAB_LABELS[self]

    @property
    def search_placeholder(self) -> str:
        return _TAB_PLACEHOLDERS.get(self, "Search...")


_TAB_LABELS = {Tab.WORDS: "Words", Tab.COLLECTIONS: "Collections"}
_TAB_PLACEHOLDERS = {Tab.WORDS: "Search words...", Tab.COLLECTIONS: "Search collections..."}

Path = tuple[NavigationDestination, ...]
NavigationPaths = Mapping[Tab, Path]


def freeze_paths(paths: Mapping[Tab, Sequence[NavigationDestination]]) -> NavigationPaths:
    """Copy a tab -> path mapping into a read-only one, checking every tab is present."""
    frozen = {tab: tuple(path) for tab, path in paths.items()}
    if __debug__:
        missing = [t.name for t in Tab if t not in frozen]
        unknown = [repr(k) for k in frozen if not isinstance(k, Tab)]
        if missing or unknown:
            raise NavigationInvariantError(
                f"navigation_paths must hold exactly one entry per tab "
                f"(missing: {missing}, unknown: {unknown})"
            )
    return MappingProxyType(frozen)


def empty_paths() -> NavigationPaths:
    return freeze_paths({tab: () for tab in Tab})


class _StateAccessors:
    """Derived accessors shared by the three state variants."""
    __slots__ = ()

    @property
    def current_tab(self) -> Tab:
        return self.active_tab

    @property
    def current_navigation_paths(self) -> NavigationPaths:
        return self.navigation_paths

    @property
    def current_path(self) -> Path:
        return self.navigation_paths[self.active_tab]

    def path_for(self, tab: Tab) -> Path:
        return self.navigation_paths[tab]

    @property
    def search_query(self) -> str:
        return ""

    @property
    def is_search_active(self) -> bool:
        return False

    @property
    def is_loading(self) -> bool:
        return False

    @property
    def current_error(self) -> Optional[str]:
        return None

    @property
    def modal_presentation(self) -> Optional[ModalPresentation]:
        return None

    @property
    def loading_context(self) -> Optional[str]:
        return None


@dataclass(frozen=True, slots=True)
class Browsing(_StateAccessors):
    __hash__ = None  # navigation_paths is a mapping

    active_tab: Tab
    navigation_paths: NavigationPaths
    modal_presentation: Optional[ModalPresentation] = None
    error_message: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "navigation_paths", freeze_paths(self.navigation_paths))

    @property
    def current_error(self) -> Optional[str]:
        return self.error_message


@dataclass(frozen=True, slots=True)
class Searching(_StateAccessors):
    __hash__ = None  # navigation_paths is a mapping

    active_tab: Tab
    query: str
    is_keyboard_visible: bool
    navigation_paths: NavigationPaths
    error_message: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "navigation_paths", freeze_paths(self.navigation_paths))

    @property
    def search_query(self) -> str:
        return self.query

    @property
    def is_search_active(self) -> bool:
        return True

    @property
    def current_error(self) -> Optional[str]:
        return self.error_message


@dataclass(frozen=True, slots=True)
class Loading(_StateAccessors):
    __hash__ = None  # navigation_paths is a mapping

    active_tab: Tab
    navigation_paths: NavigationPaths
    context: str

    def __post_init__(self):
        object.__setattr__(self, "navigation_paths", freeze_paths(self.navigation_paths))

    @property
    def is_loading(self) -> bool:
        return True

    @property
    def loading_context(self) -> Optional[str]:
        return self.context


AppState = Union[Browsing, Searching, Loading]

INITIAL: AppState = Browsing(active_tab=list(Tab)[0], navigation_paths=empty_paths())
