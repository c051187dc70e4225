import pytest

from minitalk.linkedlist import LinkedList, Node


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.last() is None
    assert lst.head is None


def test_push_back_keeps_order():
    lst = LinkedList()
    for item in ["a", "b", "c"]:
        lst.push_back(item)
    assert list(lst) == ["a", "b", "c"]
    assert len(lst) == 3


def test_push_front_reverses_order():
    lst = LinkedList()
    for item in [1, 2, 3]:
        lst.push_front(item)
    assert list(lst) == [3, 2, 1]
    assert lst.head.content == 3


def test_push_returns_node_linked_into_list():
    lst = LinkedList()
    first = lst.push_back("x")
    second = lst.push_back("y")
    assert isinstance(first, Node)
    assert first.next is second
    assert lst.last() is second
    assert second.next is None


def test_constructor_from_iterable():
    lst = LinkedList(range(5))
    assert list(lst) == [0, 1, 2, 3, 4]
    assert lst.last().content == 4


def test_clear_calls_delete_in_order():
    lst = LinkedList(["a", "b", "c"])
    deleted = []
    lst.clear(deleted.append)
    assert deleted == ["a", "b", "c"]
    assert len(lst) == 0
    assert lst.head is None


def test_clear_without_delete_empties():
    lst = LinkedList([1, 2])
    lst.clear()
    assert list(lst) == []


def test_iterate_visits_every_content():
    lst = LinkedList([1, 2, 3])
    seen = []
    lst.iterate(seen.append)
    assert seen == [1, 2, 3]


def test_map_builds_new_list_and_leaves_original():
    lst = LinkedList([1, 2, 3])
    mapped = lst.map(lambda x: x * 10, None)
    assert list(mapped) == [10, 20, 30]
    assert list(lst) == [1, 2, 3]
    assert mapped.head is not lst.head


def test_map_failure_deletes_partial_result():
    lst = LinkedList([1, 2, 3])
    deleted = []

    def func(x):
        if x == 3:
            raise ValueError("boom")
        return str(x)

    with pytest.raises(ValueError):
        lst.map(func, deleted.append)
    assert deleted == ["1", "2"]
    assert list(lst) == [1, 2, 3]


def test_map_of_empty_list_is_empty():
    assert len(LinkedList().map(str, None)) == 0