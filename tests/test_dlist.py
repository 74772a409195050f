from types import SimpleNamespace

import pytest

from fractol.mlx.dlist import DoublyLinkedList, Node, equal_image, equal_instance


def _check_links(lst):
    nodes = []
    node = lst.head
    prev = None
    while node is not None:
        assert node.prev is prev
        nodes.append(node)
        prev = node
        node = node.next
    assert len(nodes) == len(lst)
    return [n.content for n in nodes]


def test_append_and_prepend_order():
    lst = DoublyLinkedList()
    lst.append(2)
    lst.append(3)
    lst.prepend(1)
    assert list(lst) == [1, 2, 3]
    assert _check_links(lst) == [1, 2, 3]
    assert lst.last() == 3


def test_empty():
    lst = DoublyLinkedList()
    assert len(lst) == 0
    assert list(lst) == []
    with pytest.raises(IndexError):
        lst.last()


def test_append_returns_node():
    lst = DoublyLinkedList()
    node = lst.append("x")
    assert isinstance(node, Node)
    assert node.content == "x"


@pytest.mark.parametrize("target", [1, 2, 3])
def test_remove_each_position(target):
    lst = DoublyLinkedList()
    for v in (1, 2, 3):
        lst.append(v)
    removed = lst.remove(lambda c: c == target)
    assert removed.content == target
    assert removed.next is None and removed.prev is None
    expected = [v for v in (1, 2, 3) if v != target]
    assert _check_links(lst) == expected
    assert lst.last() == expected[-1]


def test_remove_first_match_only():
    lst = DoublyLinkedList()
    for v in ("a", "b", "a"):
        lst.append(v)
    lst.remove(lambda c: c == "a")
    assert list(lst) == ["b", "a"]


def test_remove_no_match():
    lst = DoublyLinkedList()
    lst.append(1)
    assert lst.remove(lambda c: c == 9) is None
    assert list(lst) == [1]


def test_remove_until_empty():
    lst = DoublyLinkedList()
    for v in (5, 5, 5):
        lst.append(v)
    count = 0
    while lst.remove(lambda c: c == 5):
        count += 1
    assert count == 3
    assert len(lst) == 0
    assert lst.head is None


def test_clear_calls_callback_in_order():
    lst = DoublyLinkedList()
    for v in (1, 2, 3):
        lst.append(v)
    seen = []
    lst.clear(seen.append)
    assert seen == [1, 2, 3]
    assert len(lst) == 0
    assert list(lst) == []


def test_clear_without_callback():
    lst = DoublyLinkedList()
    lst.append(1)
    lst.clear()
    assert len(lst) == 0


def test_sort_by_ascending():
    lst = DoublyLinkedList()
    for v in (4, 1, 3, 2):
        lst.append(v)
    lst.sort_by(lambda c: c)
    assert _check_links(lst) == [1, 2, 3, 4]
    assert lst.last() == 4


def test_sort_by_equal_keys_later_first():
    lst = DoublyLinkedList()
    for tag in ("a", "b", "c"):
        lst.append((0, tag))
    lst.append((-1, "d"))
    lst.sort_by(lambda c: c[0])
    assert [t for _, t in lst] == ["d", "c", "b", "a"]


def test_sort_keeps_node_identity():
    lst = DoublyLinkedList()
    first = lst.append(2)
    second = lst.append(1)
    lst.sort_by(lambda c: c)
    assert lst.head is second
    assert second.next is first


def test_equal_image():
    image = object()
    assert equal_image(image, image)
    assert not equal_image(object(), image)


def test_equal_instance():
    image = object()
    call = SimpleNamespace(image=image)
    assert equal_instance(call, image)
    assert not equal_instance(SimpleNamespace(image=object()), image)


def test_remove_with_equal_instance():
    image = object()
    lst = DoublyLinkedList()
    lst.append(SimpleNamespace(image=object()))
    lst.append(SimpleNamespace(image=image))
    removed = lst.remove(lambda c: equal_instance(c, image))
    assert removed.content.image is image
    assert len(lst) == 1