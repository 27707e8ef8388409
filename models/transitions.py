"""Pure state transitions.

Every function takes the current state (plus parameters) and returns the next
state. Nothing here mutates its input or touches the outside world; when an
action makes no sense for the current variant the input is returned as is.
"""
from __future__ import annotations
from typing import Sequence

from models.destinations import ModalPresentation, NavigationDestination, PresentationStyle
from models.state import AppState, Browsing, Loading, Searching, Tab


def _unknown(state) -> TypeError:
    return TypeError(f"not an app state: {state!r}")


def switch_tab(state: AppState, tab: Tab) -> AppState:
    if isinstance(state, Browsing):
        return Browsing(
            active_tab=tab,
            navigation_paths=state.navigation_paths,
            modal_presentation=state.modal_presentation,
            error_message=state.error_message,
        )
    if isinstance(state, Searching):
        # switching tabs cancels the search
        return Browsing(active_tab=tab, navigation_paths=state.navigation_paths)
    if isinstance(state, Loading):
        return Loading(active_tab=tab, navigation_paths=state.navigation_paths, context=state.context)
    raise _unknown(state)


def activate_search(state: AppState) -> AppState:
    if isinstance(state, Searching):
        return state
    if isinstance(state, (Browsing, Loading)):
        return Searching(
            active_tab=state.active_tab,
            query="",
            is_keyboard_visible=True,
            navigation_paths=state.navigation_paths,
        )
    raise _unknown(state)


def update_search_query(state: AppState, query: str) -> AppState:
    if isinstance(state, Searching):
        return Searching(
            active_tab=state.active_tab,
            query=query,
            is_keyboard_visible=state.is_keyboard_visible,
            navigation_paths=state.navigation_paths,
            error_message=state.error_message,
        )
    if isinstance(state, (Browsing, Loading)):
        return state
    raise _unknown(state)


def dismiss_search(state: AppState) -> AppState:
    if isinstance(state, Searching):
        return Browsing(
            active_tab=state.active_tab,
            navigation_paths=state.navigation_paths,
            error_message=state.error_message,
        )
    if isinstance(state, (Browsing, Loading)):
        return state
    raise _unknown(state)


def _browsing_base(state: AppState) -> Browsing:
    if isinstance(state, Browsing):
        return state
    if isinstance(state, Searching):
        return Browsing(
            active_tab=state.active_tab,
            navigation_paths=state.navigation_paths,
            error_message=state.error_message,
        )
    if isinstance(state, Loading):
        return Browsing(active_tab=state.active_tab, navigation_paths=state.navigation_paths)
    raise _unknown(state)


def navigate(
    state: AppState,
    destination: NavigationDestination,
    style: PresentationStyle = PresentationStyle.PUSH,
) -> AppState:
    """Show `destination`, leaving search or loading first.

    PUSH appends to the active tab's stack; SHEET and FULLSCREEN replace the
    single modal slot.
    """
    base = _browsing_base(state)
    if style is PresentationStyle.PUSH:
        paths = dict(base.navigation_paths)
        paths[base.active_tab] = paths[base.active_tab] + (destination,)
        return Browsing(
            active_tab=base.active_tab,
            navigation_paths=paths,
            modal_presentation=base.modal_presentation,
            error_message=base.error_message,
        )
    return Browsing(
        active_tab=base.active_tab,
        navigation_paths=base.navigation_paths,
        modal_presentation=ModalPresentation(destination=destination, style=style),
        error_message=base.error_message,
    )


def update_navigation_path(state: AppState, path: Sequence[NavigationDestination], tab: Tab) -> AppState:
    paths = dict(state.navigation_paths)
    paths[tab] = tuple(path)
    if isinstance(state, Browsing):
        return Browsing(
            active_tab=state.active_tab,
            navigation_paths=paths,
            modal_presentation=state.modal_presentation,
            error_message=state.error_message,
        )
    if isinstance(state, Searching):
        return Searching(
            active_tab=state.active_tab,
            query=state.query,
            is_keyboard_visible=state.is_keyboard_visible,
            navigation_paths=paths,
            error_message=state.error_message,
        )
    if isinstance(state, Loading):
        return Loading(active_tab=state.active_tab, navigation_paths=paths, context=state.context)
    raise _unknown(state)


def set_error(state: AppState, message: str) -> AppState:
    if isinstance(state, Browsing):
        return Browsing(
            active_tab=state.active_tab,
            navigation_paths=state.navigation_paths,
            modal_presentation=state.modal_presentation,
            error_message=message,
        )
    if isinstance(state, Searching):
        return Searching(
            active_tab=state.active_tab,
            query=state.query,
            is_keyboard_visible=state.is_keyboard_visible,
            navigation_paths=state.navigation_paths,
            error_message=message,
        )
    if isinstance(state, Loading):
        return Browsing(
            active_tab=state.active_tab,
            navigation_paths=state.navigation_paths,
            error_message=message,
        )
    raise _unknown(state)


def clear_error(state: AppState) -> AppState:
    if isinstance(state, Browsing):
        return Browsing(
            active_tab=state.active_tab,
            navigation_paths=state.navigation_paths,
            modal_presentation=state.modal_presentation,
        )
    if isinstance(state, Searching):
        return Searching(
            active_tab=state.active_tab,
            query=state.query,
            is_keyboard_visible=state.is_keyboard_visible,
            navigation_paths=state.navigation_paths,
        )
    if isinstance(state, Loading):
        return state
    raise _unknown(state)


def set_loading(state: AppState, context: str) -> AppState:
    if not isinstance(state, (Browsing, Searching, Loading)):
        raise _unknown(state)
    return Loading(
        active_tab=state.current_tab,
        navigation_paths=state.current_navigation_paths,
        context=context,
    )


def dismiss_modal(state: AppState) -> AppState:
    if isinstance(state, Browsing):
        if state.modal_presentation is None:
            return state
        return Browsing(
            active_tab=state.active_tab,
            navigation_paths=state.navigation_paths,
            error_message=state.error_message,
        )
    return state
