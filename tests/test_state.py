"""Tests for the state entities, tabs and destinations."""

from __future__ import annotations

import pytest

from models.destinations import (
    AddWord,
    CollectionDetail,
    ModalPresentation,
    PresentationStyle,
    Settings,
    WordDetail,
)
from models.state import INITIAL, Browsing, Loading, Searching, Tab, empty_paths
from shared.errors import NavigationInvariantError


def test_tabs_have_stable_ids_and_labels() -> None:
    assert [t.id for t in Tab] == [0, 1]
    assert Tab.WORDS.label == "Words"
    assert Tab.COLLECTIONS.label == "Collections"
    assert Tab.WORDS.search_placeholder == "Search words..."


def test_initial_state_is_browsing_first_tab() -> None:
    assert isinstance(INITIAL, Browsing)
    assert INITIAL.current_tab is Tab.WORDS
    assert set(INITIAL.current_navigation_paths) == set(Tab)
    assert all(path == () for path in INITIAL.current_navigation_paths.values())
    assert INITIAL.modal_presentation is None
    assert INITIAL.current_error is None


def test_missing_tab_in_paths_is_an_invariant_violation() -> None:
    with pytest.raises(NavigationInvariantError):
        Browsing(active_tab=Tab.WORDS, navigation_paths={Tab.WORDS: ()})


def test_unknown_key_in_paths_is_an_invariant_violation() -> None:
    paths = {Tab.WORDS: (), Tab.COLLECTIONS: (), "settings": ()}
    with pytest.raises(NavigationInvariantError):
        Loading(active_tab=Tab.WORDS, navigation_paths=paths, context="sync")


def test_paths_are_read_only_copies() -> None:
    source = {Tab.WORDS: [Settings()], Tab.COLLECTIONS: []}
    state = Browsing(active_tab=Tab.WORDS, navigation_paths=source)
    source[Tab.WORDS].append(AddWord())

    assert state.path_for(Tab.WORDS) == (Settings(),)
    with pytest.raises(TypeError):
        state.navigation_paths[Tab.WORDS] = ()


def test_accessors_per_variant() -> None:
    paths = empty_paths()
    browsing = Browsing(active_tab=Tab.COLLECTIONS, navigation_paths=paths, error_message="x")
    searching = Searching(active_tab=Tab.WORDS, query="ab", is_keyboard_visible=True, navigation_paths=paths)
    loading = Loading(active_tab=Tab.WORDS, navigation_paths=paths, context="sync")

    assert browsing.search_query == ""
    assert browsing.current_error == "x"
    assert not browsing.is_search_active and not browsing.is_loading

    assert searching.search_query == "ab"
    assert searching.is_search_active and not searching.is_loading
    assert searching.modal_presentation is None

    assert loading.is_loading and not loading.is_search_active
    assert loading.current_error is None
    assert loading.loading_context == "sync"
    assert loading.search_query == ""


def test_states_compare_structurally() -> None:
    a = Browsing(active_tab=Tab.WORDS, navigation_paths={Tab.WORDS: [Settings()], Tab.COLLECTIONS: []})
    b = Browsing(active_tab=Tab.WORDS, navigation_paths={Tab.WORDS: (Settings(),), Tab.COLLECTIONS: ()})
    assert a == b
    assert a != Loading(active_tab=Tab.WORDS, navigation_paths=a.navigation_paths, context="")


def test_destination_ids_are_unique(words, collections) -> None:
    destinations = [AddWord(), Settings()]
    destinations += [WordDetail(w) for w in words]
    destinations += [CollectionDetail(c) for c in collections]
    ids = [d.id for d in destinations]

    assert len(ids) == len(set(ids))
    assert WordDetail(words[0]).id == "word-serendipity"
    assert CollectionDetail(collections[0]).id == "collection-favorites"
    assert AddWord().id == "add-word"
    assert Settings().id == "settings"


def test_destinations_compare_structurally(words) -> None:
    assert WordDetail(words[0]) == WordDetail(words[0])
    assert WordDetail(words[0]) != WordDetail(words[1])
    assert AddWord() == AddWord()
    assert Settings().title == "Settings"
    assert WordDetail(words[0]).title == "Serendipity"


def test_modal_presentation_pairs_destination_and_style() -> None:
    modal = ModalPresentation(destination=AddWord(), style=PresentationStyle.FULLSCREEN)
    assert modal == ModalPresentation(AddWord(), PresentationStyle.FULLSCREEN)
    assert modal != ModalPresentation(AddWord(), PresentationStyle.SHEET)


def test_states_are_unhashable_but_comparable() -> None:
    with pytest.raises(TypeError):
        hash(INITIAL)
    with pytest.raises(TypeError):
        hash(Loading(Tab.WORDS, empty_paths(), context="sync"))
    assert Browsing(Tab.WORDS, {Tab.WORDS: (), Tab.COLLECTIONS: ()}) == INITIAL
