import pytest

from retainmut import BorrowError, Slot, constants, retain_mut


def test_slot_read_write():
    values = ["a", "b"]
    slot = Slot(values, 0)
    slot.value = "z"

    assert values == ["z", "b"]
    assert slot.value == "z"
    assert slot.index == 0
    assert repr(slot) == "Slot(index=0, value='z')"


def test_slot_released_after_predicate():
    """Test a slot escaping its predicate can no longer be used."""
    escaped: list[Slot[int]] = []

    def capture(slot):
        escaped.append(slot)
        return True

    values = [1, 2]
    retain_mut(values, capture)

    assert [slot.alive for slot in escaped] == [False, False]
    assert repr(escaped[0]) == "Slot(index=0, released)"

    with pytest.raises(BorrowError):
        escaped[0].value

    with pytest.raises(BorrowError):
        escaped[1].value = 10

    assert values == [1, 2]


def test_slot_released_after_failure():
    escaped: list[Slot[int]] = []

    def capture_and_fail(slot):
        escaped.append(slot)
        raise LookupError

    with pytest.raises(LookupError):
        retain_mut([1], capture_and_fail)

    assert not escaped[0].alive


def test_lenient_slots(monkeypatch):
    """Test slots stay usable when strict checking is disabled."""
    monkeypatch.setattr(constants, "STRICT_SLOTS", False)
    escaped: list[Slot[int]] = []

    def capture(slot):
        escaped.append(slot)
        return True

    values = [1, 2]
    retain_mut(values, capture)

    assert escaped[1].alive
    assert escaped[1].value == 2
