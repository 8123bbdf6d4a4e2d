from __future__ import annotations

import pytest

from editer import Slot, SlotExpiredError, SlotVacantError, edit
from editer.sequence import ListAdapter


def make_slot(items: list[int] | None = None, index: int = 2) -> Slot[int]:
    return Slot(ListAdapter(items if items is not None else [1, 2, 3, 4, 5]), index)


def test_slot_equality_compares_the_current_element() -> None:
    slot = make_slot()

    assert slot == 3
    assert slot != 5


def test_slot_ordering_compares_the_current_element() -> None:
    slot = make_slot()

    assert slot < 5
    assert not slot > 5
    assert slot <= 3
    assert slot >= 3


def test_slots_compare_against_each_other_by_value() -> None:
    items = [1, 2, 3, 4, 5]
    adapter = ListAdapter(items)

    assert Slot(adapter, 0) < Slot(adapter, 1)
    assert Slot(adapter, 2) == Slot(ListAdapter([3]), 0)


def test_slot_display_and_debug_output() -> None:
    slot = make_slot()

    assert str(slot) == "3"
    assert repr(slot) == "Slot(3)"


def test_slot_is_unhashable() -> None:
    with pytest.raises(TypeError):
        hash(make_slot())


def test_set_replaces_in_place_without_changing_stride() -> None:
    items = [1, 2, 3, 4, 5]
    slot = make_slot(items)

    slot.set(30)
    slot.value = 31

    assert items == [1, 2, 31, 4, 5]
    assert slot.stride == 1
    assert slot.counts == (0, 1, 0)
    assert not slot.vacant


def test_counts_track_before_width_and_after() -> None:
    items = [1, 2, 3, 4, 5]
    slot = make_slot(items)

    slot.insert_before([7, 8])
    slot.replace([9, 9, 9])
    slot.insert_after([6])

    assert items == [1, 2, 7, 8, 9, 9, 9, 6, 4, 5]
    assert slot.counts == (2, 3, 1)
    assert slot.stride == 5
    assert slot.position == 4
    assert slot.index == 2


def test_empty_batches_are_ignored() -> None:
    items = [1, 2, 3, 4, 5]
    slot = make_slot(items)

    slot.insert_before([])
    slot.insert_after(iter(()))

    assert items == [1, 2, 3, 4, 5]
    assert slot.counts == (0, 1, 0)


def test_batches_accept_generators() -> None:
    items = [1, 2, 3, 4, 5]
    slot = make_slot(items)

    slot.replace(value for value in (10, 11))

    assert items == [1, 2, 10, 11, 4, 5]


def test_value_access_after_remove_raises() -> None:
    slot = make_slot()
    slot.remove()

    assert slot.vacant
    with pytest.raises(SlotVacantError) as excinfo:
        _ = slot.value
    assert excinfo.value.index == 2


def test_second_disposition_raises() -> None:
    items = [1, 2, 3, 4, 5]
    slot = make_slot(items)
    slot.replace([6])

    with pytest.raises(SlotVacantError):
        slot.remove()
    with pytest.raises(SlotVacantError):
        slot.set(7)
    assert items == [1, 2, 6, 4, 5]


def test_inserts_remain_allowed_after_remove() -> None:
    items = [1, 2, 3, 4, 5]
    slot = make_slot(items)

    slot.remove()
    slot.insert_before([8])
    slot.insert_after([9])

    assert items == [1, 2, 8, 9, 4, 5]
    assert slot.stride == 1
    assert repr(slot) == "Slot(<vacant index=2>)"


def test_released_slot_rejects_every_operation() -> None:
    slot = make_slot()
    slot.release()

    assert not slot.active
    assert repr(slot) == "Slot(<released index=2>)"
    with pytest.raises(SlotExpiredError):
        _ = slot.value
    with pytest.raises(SlotExpiredError):
        slot.insert_after([1])
    with pytest.raises(SlotExpiredError):
        slot.remove()


def test_slot_leaked_from_edit_is_expired() -> None:
    leaked: list[Slot[int]] = []

    edit([1, 2], leaked.append)

    assert len(leaked) == 2
    with pytest.raises(SlotExpiredError):
        leaked[0].insert_before([0])
