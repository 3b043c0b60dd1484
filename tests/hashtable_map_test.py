import os
import sys

import pytest

# Ensure we can import from the project
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from hashtable.datastructures import HashtableMap, InvalidArgumentError, MapADT, NotFoundError
from hashtable.datastructures.hashtable_map import _EMPTY, _TOMBSTONE, _Occupied


class Colliding:
    """Key whose hash is fixed, so every instance shares a home slot."""

    def __init__(self, name, hash_value=7):
        self.name = name
        self.hash_value = hash_value

    def __hash__(self):
        return self.hash_value

    def __eq__(self, other):
        return isinstance(other, Colliding) and other.name == self.name


# ----------------------------
# Construction
# ----------------------------

def test_default_capacity_is_eight():
    table = HashtableMap()
    assert table.capacity == 8
    assert table.size == 0
    assert table.load_factor == 0


def test_explicit_capacity():
    assert HashtableMap(15).capacity == 15


@pytest.mark.parametrize("capacity", [0, -1])
def test_non_positive_capacity_rejected(capacity):
    with pytest.raises(InvalidArgumentError) as exc:
        HashtableMap(capacity)
    assert str(exc.value) == "Capacity must be more than 0!"


def test_implements_map_adt():
    assert isinstance(HashtableMap(), MapADT)


# ----------------------------
# put
# ----------------------------

def test_put_none_key_rejected():
    table = HashtableMap(10)
    with pytest.raises(InvalidArgumentError) as exc:
        table.put(None, "invalid key")
    assert str(exc.value) == "Invalid key or key already exists!"
    assert table.size == 0


def test_put_duplicate_key_rejected_without_mutation():
    table = HashtableMap(10)
    table.put(1, "one")
    before = list(table._slots)
    with pytest.raises(InvalidArgumentError):
        table.put(1, "another one")
    assert table.size == 1
    assert table.get(1) == "one"
    assert all(a is b for a, b in zip(before, table._slots))


def test_invalid_argument_is_a_value_error():
    with pytest.raises(ValueError):
        HashtableMap().put(None, 1)


def test_put_without_collision_uses_home_slots():
    table = HashtableMap(10)
    table.put(1, "one")
    table.put(2, "two")
    assert table._slots[1].value == "one"
    assert table._slots[2].value == "two"
    assert table.size == 2


def test_put_with_collision_probes_linearly():
    table = HashtableMap(10)
    table.put(1, "one")
    table.put(2, "two")
    table.put(3, "three")
    table.put(11, "eleven")
    assert table._slots[1].value == "one"
    assert table._slots[4].value == "eleven"
    assert table.size == 4


def test_probe_wraps_around_the_end():
    table = HashtableMap(10)
    table.put(9, "nine")
    table.put(19, "nineteen")
    assert table._slots[0].key == 19
    assert table.get(19) == "nineteen"


def test_negative_hash_uses_absolute_value():
    table = HashtableMap(10)
    table.put(-3, "minus three")
    assert table._slots[3].key == -3


def test_put_triggers_growth_at_load_factor_threshold():
    table = HashtableMap(5)
    table.put(1, "one")
    assert table.load_factor == pytest.approx(0.2)
    table.put(2, "two")
    table.put(18, "eighteen")
    assert table.capacity == 5
    assert table.load_factor == pytest.approx(0.6)
    table.put(29, "twenty nine")
    assert table.capacity == 10
    assert table.size == 4
    assert table.load_factor == pytest.approx(0.4)
    assert table._slots[8].value == "eighteen"
    assert table._slots[9].value == "twenty nine"
    for key in (1, 2, 18, 29):
        assert table.contains_key(key)


def test_growth_keeps_entries_that_collide_after_rehash():
    table = HashtableMap(5)
    for key in (0, 5, 10, 1):
        table.put(key, str(key))
    assert table.capacity == 10
    assert table.size == 4
    for key in (0, 5, 10, 1):
        assert table.get(key) == str(key)
    assert sum(isinstance(s, _Occupied) for s in table._slots) == 4


def test_growth_drops_tombstones():
    table = HashtableMap(5)
    table.put(1, "one")
    table.put(2, "two")
    table.remove(2)
    table.put(3, "three")
    table.put(4, "four")
    table.put(6, "six")
    assert table.capacity == 10
    assert _TOMBSTONE not in table._slots


def test_capacity_one_grows_on_first_put():
    table = HashtableMap(1)
    table.put("a", 1)
    assert table.capacity == 2
    assert table.get("a") == 1


def test_many_puts_stay_retrievable():
    table = HashtableMap(4)
    for i in range(200):
        table.put(f"k{i}", i)
    for i in range(200):
        assert table.get(f"k{i}") == i
    assert table.size == 200
    assert table.load_factor < HashtableMap.MAX_LOAD_FACTOR


def test_unhashable_key_propagates_type_error():
    with pytest.raises(TypeError):
        HashtableMap().put(["list"], 1)


# ----------------------------
# contains_key / get
# ----------------------------

def test_contains_key():
    table = HashtableMap(5)
    table.put(1, "one")
    assert table.contains_key(1) is True
    assert table.contains_key(7) is False
    assert 1 in table
    assert 7 not in table


def test_contains_key_after_removal_in_chain():
    table = HashtableMap(5)
    table.put(3, "three")
    table.put(4, "four")
    table.put(8, "eight")
    table.remove(4)
    assert table.contains_key(8)


def test_get_missing_key():
    table = HashtableMap(5)
    with pytest.raises(NotFoundError) as exc:
        table.get(3)
    assert str(exc.value) == "Key does not exist in the hashtable!"


def test_not_found_is_a_key_error():
    with pytest.raises(KeyError):
        HashtableMap().get("missing")


def test_get_existing_key():
    table = HashtableMap(5)
    table.put(1, "one")
    assert table.get(1) == "one"


def test_lookup_uses_key_equality():
    table = HashtableMap(10)
    table.put(Colliding("a"), 1)
    table.put(Colliding("b"), 2)
    assert table.get(Colliding("b")) == 2
    assert not table.contains_key(Colliding("c"))


def test_lookup_terminates_when_no_empty_slot_is_left():
    table = HashtableMap(10)
    for key in range(10):
        table.put(key, key)
        table.remove(key)
    assert _EMPTY not in table._slots
    assert table.size == 0
    assert not table.contains_key(42)
    table.put(5, "five")
    assert table._slots[5].key == 5
    assert table.get(5) == "five"


# ----------------------------
# remove
# ----------------------------

def test_remove_missing_key():
    table = HashtableMap(5)
    with pytest.raises(NotFoundError) as exc:
        table.remove(3)
    assert str(exc.value) == "Key does not exist in the hashtable!"


def test_remove_existing_key_leaves_tombstone():
    table = HashtableMap(5)
    table.put(1, "one")
    table.put(4, "four")
    assert table.remove(1) == "one"
    assert table._slots[1] is _TOMBSTONE
    assert table.size == 1
    assert table.load_factor == pytest.approx(0.2)
    with pytest.raises(NotFoundError):
        table.remove(1)


def test_remove_keeps_colliding_key_reachable():
    table = HashtableMap(10)
    first, second = Colliding("first"), Colliding("second")
    table.put(first, "1st")
    table.put(second, "2nd")
    table.remove(first)
    assert table.contains_key(second)
    assert table.get(second) == "2nd"


def test_put_reuses_tombstone():
    table = HashtableMap(10)
    table.put(1, "one")
    table.put(11, "eleven")
    table.remove(1)
    table.put(21, "twenty one")
    assert table._slots[1].key == 21
    assert table._slots[2].key == 11
    assert table.size == 2


def test_reinsert_after_remove():
    table = HashtableMap()
    table.put("a", 1)
    table.remove("a")
    assert not table.contains_key("a")
    table.put("a", 2)
    assert table.get("a") == 2


# ----------------------------
# clear / size bookkeeping
# ----------------------------

def test_clear():
    table = HashtableMap(5)
    table.put(1, "one")
    table.put(4, "four")
    table.remove(4)
    table.clear()
    assert table.size == 0
    assert table.load_factor == 0
    assert table.capacity == 5
    assert table._slots[1] is _EMPTY
    assert table._slots[4] is _EMPTY
    assert not table.contains_key(1)
    with pytest.raises(NotFoundError):
        table.get(4)


def test_size_tracks_puts_and_removes():
    table = HashtableMap()
    for i in range(5):
        table.put(i, i)
        assert table.size == i + 1
    for i in range(5):
        table.remove(i)
        assert table.size == 4 - i
    assert len(table) == 0


# ----------------------------
# put_all
# ----------------------------

def test_put_all_accepts_mapping_and_pairs():
    table = HashtableMap()
    table.put_all({"a": 1, "b": 2})
    table.put_all([("c", 3)])
    assert table.size == 3
    assert table.get("c") == 3


@pytest.mark.parametrize("batch", [
    [("x", 1), ("x", 2)],
    [("y", 1), ("a", 2)],
    [("z", 1), (None, 2)],
])
def test_put_all_rejects_whole_batch(batch):
    table = HashtableMap()
    table.put("a", 0)
    with pytest.raises(InvalidArgumentError):
        table.put_all(batch)
    assert table.size == 1
    assert list(table.keys()) == ["a"]


# ----------------------------
# Iteration helpers
# ----------------------------

def test_iteration_follows_slot_order():
    table = HashtableMap(10)
    for key in (3, 1, 2):
        table.put(key, str(key))
    assert list(table.keys()) == [1, 2, 3]
    assert list(table.values()) == ["1", "2", "3"]
    assert list(table.items()) == [(1, "1"), (2, "2"), (3, "3")]
    assert list(table) == [1, 2, 3]
    assert repr(table) == "HashtableMap({1: '1', 2: '2', 3: '3'})"
