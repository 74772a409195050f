import pytest

from fractol.libft.lists import LinkedList


def test_push_back_keeps_order():
    ll = LinkedList()
    for value in (1, 2, 3):
        ll.push_back(value)
    assert list(ll) == [1, 2, 3]


def test_push_front_reverses_order():
    ll = LinkedList()
    for value in (1, 2, 3):
        ll.push_front(value)
    assert list(ll) == [3, 2, 1]


def test_len_counts_nodes():
    ll = LinkedList()
    assert len(ll) == 0
    ll.push_back("a")
    ll.push_front("b")
    assert len(ll) == 2


def test_constructor_from_iterable():
    items = ["x", "y", "z"]
    assert list(LinkedList(items)) == items


def test_last_after_mixed_pushes():
    ll = LinkedList()
    ll.push_front("first")
    assert ll.last() == "first"
    ll.push_back("tail")
    ll.push_front("head")
    assert ll.last() == "tail"


def test_last_of_empty_raises():
    with pytest.raises(IndexError):
        LinkedList().last()


def test_clear_calls_delete_in_order():
    items = [10, 20, 30]
    ll = LinkedList(items)
    deleted = []
    ll.clear(deleted.append)
    assert deleted == items
    assert len(ll) == 0
    assert list(ll) == []


def test_clear_without_delete():
    ll = LinkedList([1, 2])
    ll.clear()
    assert len(ll) == 0
    with pytest.raises(IndexError):
        ll.last()


def test_push_after_clear():
    ll = LinkedList([1, 2])
    ll.clear()
    ll.push_back(5)
    assert list(ll) == [5]
    assert ll.last() == 5


def test_for_each_visits_all():
    items = ["a", "b", "c"]
    ll = LinkedList(items)
    seen = []
    ll.for_each(seen.append)
    assert seen == items


def test_map_builds_new_list():
    items = [1, 2, 3]
    ll = LinkedList(items)
    mapped = ll.map(lambda x: x * 2)
    assert list(mapped) == [x * 2 for x in items]
    assert list(ll) == items
    assert len(mapped) == len(ll)


def test_map_of_empty_list():
    mapped = LinkedList().map(str)
    assert len(mapped) == 0
    assert list(mapped) == []