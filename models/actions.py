"""The closed set of actions and the reducer that applies them."""
from __future__ import annotations
from dataclasses import dataclass
from typing import Union

from models import transitions
from models.destinations import NavigationDestination, PresentationStyle
from models.state import AppState, Path, Tab


@dataclass(frozen=True, slots=True)
class SwitchTab:
    tab: Tab


@dataclass(frozen=True, slots=True)
class ActivateSearch:
    pass


@dataclass(frozen=True, slots=True)
class DismissSearch:
    pass


@dataclass(frozen=True, slots=True)
class UpdateSearchQuery:
    query: str


@dataclass(frozen=True, slots=True)
class Navigate:
    destination: NavigationDestination
    style: PresentationStyle = PresentationStyle.PUSH


@dataclass(frozen=True, slots=True)
class DismissModal:
    pass


@dataclass(frozen=True, slots=True)
class SetError:
    message: str


@dataclass(frozen=True, slots=True)
class ClearError:
    pass


@dataclass(frozen=True, slots=True)
class SetLoading:
    context: str


# Dispatched by the view layer when a stack is popped (Back button).
@dataclass(frozen=True, slots=True)
class UpdateNavigationPath:
    tab: Tab
    path: Path


Action = Union[
    SwitchTab, ActivateSearch, DismissSearch, UpdateSearchQuery, Navigate,
    DismissModal, SetError, ClearError, SetLoading, UpdateNavigationPath,
]

_HANDLERS = {
    SwitchTab: lambda s, a: transitions.switch_tab(s, a.tab),
    ActivateSearch: lambda s, a: transitions.activate_search(s),
    DismissSearch: lambda s, a: transitions.dismiss_search(s),
    UpdateSearchQuery: lambda s, a: transitions.update_search_query(s, a.query),
    Navigate: lambda s, a: transitions.navigate(s, a.destination, a.style),
    DismissModal: lambda s, a: transitions.dismiss_modal(s),
    SetError: lambda s, a: transitions.set_error(s, a.message),
    ClearError: lambda s, a: transitions.clear_error(s),
    SetLoading: lambda s, a: transitions.set_loading(s, a.context),
    UpdateNavigationPath: lambda s, a: transitions.update_navigation_path(s, a.path, a.tab),
}

ACTION_TYPES = tuple(_HANDLERS)


def reduce(state: AppState, action: Action) -> AppState:
    """Apply exactly one transition for `action`."""
    handler = _HANDLERS.get(type(action))
    if handler is None:
        raise TypeError(f"unknown action: {action!r}")
    return handler(state, action)
