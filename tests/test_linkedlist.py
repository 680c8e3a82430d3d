import pytest

from solong.linkedlist import LinkedList, Node


def test_empty_list_has_no_last_and_zero_length():
    items = LinkedList()
    assert len(items) == 0
    assert items.last() is None
    assert list(items) == []


def test_init_keeps_order():
    items = LinkedList(["a", "b", "c"])
    assert list(items) == ["a", "b", "c"]
    assert len(items) == 3


def test_push_front_prepends():
    items = LinkedList([2, 3])
    node = items.push_front(1)
    assert items.head is node
    assert list(items) == [1, 2, 3]


def test_push_back_appends_and_becomes_last():
    items = LinkedList([1])
    node = items.push_back(2)
    assert items.last() is node
    assert node.next is None
    assert list(items) == [1, 2]


def test_push_back_on_empty_sets_head():
    items = LinkedList()
    node = items.push_back("x")
    assert items.head is node
    assert items.last() is node


def test_node_links():
    second = Node("b")
    first = Node("a", second)
    assert first.next is second
    assert second.next is None


def test_clear_deletes_every_content_in_order():
    deleted = []
    items = LinkedList([1, 2, 3])
    items.clear(deleted.append)
    assert deleted == [1, 2, 3]
    assert items.head is None
    assert len(items) == 0


def test_for_each_visits_all():
    seen = []
    LinkedList(["x", "y"]).for_each(seen.append)
    assert seen == ["x", "y"]


def test_map_builds_new_list_and_leaves_original():
    original = LinkedList([1, 2, 3])
    mapped = original.map(lambda v: v * 10, lambda v: None)
    assert list(mapped) == [10, 20, 30]
    assert list(original) == [1, 2, 3]
    assert len(mapped) == len(original)


def test_map_of_empty_is_empty():
    assert list(LinkedList().map(str, lambda v: None)) == []


def test_map_failure_deletes_partial_results():
    deleted = []

    def func(value):
        if value == 3:
            raise RuntimeError("boom")
        return value + 100

    with pytest.raises(RuntimeError):
        LinkedList([1, 2, 3, 4]).map(func, deleted.append)
    assert deleted == [101, 102]