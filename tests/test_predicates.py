from collections import deque

from conftest import Resource

from retainmut import retain_mut
from retainmut.helpers import get_metadata
from retainmut.predicates import chain, invert, keep_if, update


def test_keep_if(numbers):
    retain_mut(numbers, keep_if(lambda x: x % 3 == 0))

    assert numbers == [3, 6]


def test_update_fixed_keep(numbers):
    retain_mut(numbers, update(lambda x: -x))

    assert numbers == [-1, -2, -3, -4, -5, -6]


def test_update_keep_predicate():
    """Test the keep predicate is evaluated on the replaced value."""
    values = deque([" a ", "  ", "b"])
    retain_mut(values, update(str.strip, keep=lambda x: x != ""))

    assert values == deque(["a", "b"])


def test_update_drop_all(numbers):
    discarded: list[int] = []
    retain_mut(numbers, update(lambda x: x + 1, keep=False), on_discard=discarded.append)

    assert numbers == []
    # the discard hook receives the updated values
    assert discarded == [2, 3, 4, 5, 6, 7]


def test_chain_short_circuit(resources):
    """Test later predicates only run for elements earlier ones kept."""
    seen: list[str] = []

    def record(slot):
        seen.append(slot.value.name)
        return True

    retain_mut(resources, chain(keep_if(lambda r: r.name in "ace"), record))

    assert [resource.name for resource in resources] == ["a", "c", "e"]
    assert seen == ["a", "c", "e"]


def test_chain_sees_modifications(numbers):
    retain_mut(numbers, chain(update(lambda x: x * 10), keep_if(lambda x: x > 30)))

    assert numbers == [40, 50, 60]


def test_empty_chain_keeps_all(numbers):
    retain_mut(numbers, chain())

    assert numbers == [1, 2, 3, 4, 5, 6]


def test_invert_keeps_modifications():
    values = [Resource("a"), Resource("b")]

    def close_a(slot):
        slot.value.close()
        return slot.value.name == "a"

    retain_mut(values, invert(close_a))

    assert [resource.name for resource in values] == ["b"]
    assert values[0].closed == 1


def test_metadata():
    predicate = chain(keep_if(bool), update(abs, keep=False))
    metadata = get_metadata(predicate)

    assert metadata["name"] == "chain"
    inner = metadata["metadata"]["predicates"]
    assert inner[0]["name"] == "keep_if"
    assert inner[0]["metadata"]["func"]["name"] == "bool"
    assert inner[1]["metadata"] == {"func": get_metadata(abs), "keep": False}
