from __future__ import annotations

import dataclasses

import pytest

from smartque.quiz.selection import SelectionState, SelectionStore


def test_new_store_starts_unset() -> None:
    store = SelectionStore()
    assert store.get_selections() == SelectionState(topic=None, level=None)


def test_set_topic_and_level() -> None:
    store = SelectionStore()
    store.set_topic("react")
    store.set_level("advanced")
    selections = store.get_selections()
    assert selections.as_dict() == {"topic": "react", "level": "advanced"}


def test_reset_clears_both_fields() -> None:
    store = SelectionStore()
    store.set_topic("react")
    store.set_level("advanced")
    store.reset_selections()
    assert store.get_selections().as_dict() == {"topic": None, "level": None}


def test_last_write_wins_without_validation() -> None:
    store = SelectionStore()
    store.set_level("beginner")
    store.set_level("not-a-level")
    assert store.get_selections().level == "not-a-level"
    assert store.get_selections().topic is None


def test_snapshot_is_detached_from_later_updates() -> None:
    store = SelectionStore()
    store.set_topic("css")
    snapshot = store.get_selections()
    store.set_topic("html")
    assert snapshot.topic == "css"
    with pytest.raises(dataclasses.FrozenInstanceError):
        snapshot.topic = "js"  # type: ignore[misc]


def test_stores_do_not_share_state() -> None:
    first = SelectionStore()
    second = SelectionStore(SelectionState(topic="git"))
    first.set_topic("react")
    assert second.get_selections().topic == "git"
