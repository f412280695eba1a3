import pytest

from solong.linkedlist import LinkedList


def test_push_back_keeps_order():
    items = LinkedList()
    for word in ["a", "b", "c"]:
        items.push_back(word)
    assert list(items) == ["a", "b", "c"]
    assert len(items) == 3


def test_push_front_reverses_order():
    items = LinkedList()
    for word in ["a", "b", "c"]:
        items.push_front(word)
    assert list(items) == ["c", "b", "a"]


def test_mixed_pushes():
    items = LinkedList([2])
    items.push_front(1)
    items.push_back(3)
    assert list(items) == [1, 2, 3]
    assert items.last() == 3


def test_last_of_empty_is_none():
    assert LinkedList().last() is None


def test_last_after_push_front_on_empty():
    items = LinkedList()
    items.push_front("only")
    assert items.last() == "only"
    items.push_back("end")
    assert items.last() == "end"


def test_empty_list_is_falsy_and_sized_zero():
    items = LinkedList()
    assert len(items) == 0
    assert not items


def test_clear_calls_delete_in_order():
    seen = []
    items = LinkedList(["x", "y", "z"])
    items.clear(seen.append)
    assert seen == ["x", "y", "z"]
    assert list(items) == []
    assert items.last() is None


def test_clear_without_delete_empties():
    items = LinkedList([1, 2])
    items.clear()
    assert len(items) == 0


def test_clear_then_reuse():
    items = LinkedList([1, 2])
    items.clear()
    items.push_back(5)
    assert list(items) == [5]
    assert items.last() == 5


def test_iterate_visits_every_item():
    seen = []
    items = LinkedList([3, 1, 4])
    items.iterate(seen.append)
    assert seen == [3, 1, 4]


def test_map_builds_new_list():
    items = LinkedList(["ab", "c"])
    mapped = items.map(len)
    assert list(mapped) == [len("ab"), len("c")]
    assert list(items) == ["ab", "c"]
    assert mapped is not items
    assert len(mapped) == len(items)


def test_map_of_empty_is_empty():
    assert len(LinkedList().map(str)) == 0


def test_equality():
    assert LinkedList([1, 2]) == LinkedList([1, 2])
    assert not LinkedList([1]) == LinkedList([1, 2])


@pytest.mark.parametrize("values", [[], [0], list(range(10))])
def test_size_matches_iteration(values):
    items = LinkedList(values)
    assert len(items) == len(list(items)) == len(values)