"""Tests for store module."""
import pytest

from clickerengine._types import ClickerId, HandId
from clickerengine.entity import HandState
from clickerengine.errors import EntityNotFound
from clickerengine.store import EntityStore


def test_create_hand():
    store = EntityStore()
    hand_id = store.create_hand()
    hand = store.get_hand(hand_id)
    assert hand.state is HandState.FILLING
    assert store.children_of(hand_id) == ()
    assert not hand.clapping


def test_create_clicker_ordered():
    store = EntityStore()
    hand_id = store.create_hand()
    first = store.create_clicker(hand_id)
    second = store.create_clicker(hand_id)
    assert store.children_of(hand_id) == (first, second)
    assert store.get_clicker(first).hand == hand_id
    assert store.get_clicker(first).per_click == 1


def test_create_clicker_stale_hand():
    store = EntityStore()
    with pytest.raises(EntityNotFound):
        store.create_clicker(HandId(42))


def test_timer_duration_applied():
    store = EntityStore(timer_duration=2.5)
    hand_id = store.create_hand()
    clicker_id = store.create_clicker(hand_id)
    assert store.get_hand(hand_id).clap_timer.duration == 2.5
    assert store.get_clicker(clicker_id).timer.duration == 2.5


def test_destroy_hand_removes_clickers():
    store = EntityStore()
    hand_id = store.create_hand()
    clickers = [store.create_clicker(hand_id) for _ in range(3)]
    store.destroy_hand(hand_id)

    assert not store.has_hand(hand_id)
    with pytest.raises(EntityNotFound):
        store.get_hand(hand_id)
    with pytest.raises(EntityNotFound):
        store.children_of(hand_id)
    for clicker_id in clickers:
        with pytest.raises(EntityNotFound):
            store.get_clicker(clicker_id)
    assert store.clicker_count == 0


def test_destroy_leaves_other_hands():
    store = EntityStore()
    doomed = store.create_hand()
    kept = store.create_hand()
    store.create_clicker(doomed)
    survivor = store.create_clicker(kept)
    store.destroy_hand(doomed)
    assert store.children_of(kept) == (survivor,)
    assert store.hand_count == 1


def test_ids_not_reused():
    store = EntityStore()
    hand_id = store.create_hand()
    clicker_id = store.create_clicker(hand_id)
    store.destroy_hand(hand_id)

    new_hand = store.create_hand()
    new_clicker = store.create_clicker(new_hand)
    assert new_hand != hand_id
    assert new_clicker != clicker_id


def test_set_state():
    store = EntityStore()
    hand_id = store.create_hand()
    store.set_state(hand_id, HandState.COMBINED)
    assert store.get_hand(hand_id).state is HandState.COMBINED
    assert store.get_hand(hand_id).clapping


def test_clear():
    store = EntityStore()
    for _ in range(3):
        store.create_clicker(store.create_hand())
    store.clear()
    assert store.hand_count == 0
    assert store.clicker_count == 0


def test_entity_not_found_is_key_error():
    store = EntityStore()
    with pytest.raises(KeyError) as excinfo:
        store.get_clicker(ClickerId(7))
    assert excinfo.value.kind == "Clicker"
    assert excinfo.value.entity_id == 7
