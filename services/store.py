from __future__ import annotations
import logging
import threading
from collections import deque
from typing import Callable

from models.actions import Action, reduce
from models.state import INITIAL, AppState

logger = logging.getLogger(__name__)

Listener = Callable[[AppState, AppState], None]
SearchActivatedCallback = Callable[[AppState], None]


class Store:
    """Holds the one app state and replaces it on every dispatched action.

    Actions are applied one at a time in submission order. A dispatch issued
    while another one is being applied (e.g. from a listener) is queued and
    runs once the current action and its notifications are done.
    """

    def __init__(self, initial: AppState = INITIAL):
        self._state = initial
        self._listeners: list[Listener] = []
        self._search_callbacks: list[SearchActivatedCallback] = []
        self._queue: deque[Action] = deque()
        self._lock = threading.RLock()
        self._draining = False

    @property
    def state(self) -> AppState:
        return self._state

    def current_state(self) -> AppState:
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call `listener(new_state, old_state)` after each change; returns an unsubscribe function."""
        self._listeners.append(listener)

        def unsubscribe():
            try:
                self._listeners.remove(listener)
            except ValueError:
                pass
        return unsubscribe

    def on_search_activated(self, callback: SearchActivatedCallback) -> Callable[[], None]:
        """Call `callback(state)` right after the state enters Searching."""
        self._search_callbacks.append(callback)

        def remove():
            try:
                self._search_callbacks.remove(callback)
            except ValueError:
                pass
        return remove

    def dispatch(self, action: Action) -> None:
        with self._lock:
            self._queue.append(action)
            if self._draining:
                return
            self._draining = True
            try:
                while self._queue:
                    self._apply(self._queue.popleft())
            except BaseException:
                self._queue.clear()
                raise
            finally:
                self._draining = False

    def _apply(self, action: Action) -> None:
        old = self._state
        new = reduce(old, action)
        if new == old:
            logger.debug("%s: no change (%s)", type(action).__name__, type(old).__name__)
            return
        logger.debug("%s: %s -> %s", type(action).__name__, type(old).__name__, type(new).__name__)
        if old.is_loading and new.is_search_active:
            logger.debug("search started while loading, dropped context %r", old.loading_context)
        self._state = new
        for listener in list(self._listeners):
            listener(new, old)
        if new.is_search_active and not old.is_search_active:
            for cb in list(self._search_callbacks):
                cb(new)
