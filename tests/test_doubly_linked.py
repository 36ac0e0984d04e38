import pytest

from dsakit.doubly_linked import DoublyLinkedList


def _links_consistent(lst):
    nodes = []
    node = lst.head
    while node is not None:
        nodes.append(node)
        node = node.next
    if not nodes:
        return lst.tail is None
    if nodes[0].prev is not None or nodes[-1] is not lst.tail:
        return False
    return all(b.prev is a for a, b in zip(nodes, nodes[1:]))


def test_construction_and_reverse():
    lst = DoublyLinkedList([10, 20, 30, 40])
    assert list(lst) == [10, 20, 30, 40]
    assert list(reversed(lst)) == [40, 30, 20, 10]
    assert _links_consistent(lst)


def test_insert_at_index_worked_example():
    lst = DoublyLinkedList([10, 20, 30, 40])
    lst.insert_at_index(3, 56)
    assert list(lst) == [10, 20, 30, 56, 40]
    assert list(reversed(lst)) == [40, 56, 30, 20, 10]
    assert _links_consistent(lst)


def test_insert_at_first():
    lst = DoublyLinkedList([10, 20, 30, 40])
    lst.insert_at_first(56)
    assert list(lst) == [56, 10, 20, 30, 40]
    assert _links_consistent(lst)


def test_insert_at_end():
    lst = DoublyLinkedList([10, 20, 30, 40])
    lst.insert_at_end(56)
    assert list(reversed(lst)) == [56, 40, 30, 20, 10]
    assert lst.tail.data == 56


def test_insert_after_node():
    lst = DoublyLinkedList([10, 20, 30, 40])
    third = lst.node_at(2)
    lst.insert_after(third, 69)
    assert list(lst) == [10, 20, 30, 69, 40]
    assert _links_consistent(lst)


def test_insert_after_tail_updates_tail():
    lst = DoublyLinkedList([10, 20])
    node = lst.insert_after(lst.tail, 30)
    assert lst.tail is node
    assert list(reversed(lst)) == [30, 20, 10]


def test_insert_after_foreign_node_rejected():
    lst = DoublyLinkedList([1])
    other = DoublyLinkedList([2])
    with pytest.raises(ValueError):
        lst.insert_after(other.head, 3)


def test_insert_at_index_out_of_range():
    lst = DoublyLinkedList([1, 2])
    with pytest.raises(IndexError):
        lst.insert_at_index(4, 9)


def test_delete_by_value_worked_example():
    lst = DoublyLinkedList([10, 20, 30, 40, 50])
    assert lst.delete_by_value(40) == 40
    assert list(lst) == [10, 20, 30, 50]
    assert _links_consistent(lst)


def test_delete_by_value_missing():
    lst = DoublyLinkedList([10, 20])
    with pytest.raises(ValueError, match="not found"):
        lst.delete_by_value(99)
    assert list(lst) == [10, 20]


def test_delete_at_begin():
    lst = DoublyLinkedList([10, 20, 30, 40, 50])
    assert lst.delete_at_begin() == 10
    assert list(lst) == [20, 30, 40, 50]
    assert _links_consistent(lst)


def test_delete_at_end():
    lst = DoublyLinkedList([10, 20, 30, 40, 50])
    assert lst.delete_at_end() == 50
    assert list(reversed(lst)) == [40, 30, 20, 10]


def test_delete_at_position():
    lst = DoublyLinkedList([10, 20, 30, 40, 50])
    assert lst.delete_at_position(2) == 30
    assert list(lst) == [10, 20, 40, 50]
    assert _links_consistent(lst)


def test_delete_at_position_head():
    lst = DoublyLinkedList([10, 20, 30])
    assert lst.delete_at_position(0) == 10
    assert lst.head.data == 20
    assert lst.head.prev is None


def test_delete_at_position_out_of_bounds():
    lst = DoublyLinkedList([10, 20])
    with pytest.raises(IndexError, match="out of bounds"):
        lst.delete_at_position(2)


def test_deletes_on_empty_raise():
    lst = DoublyLinkedList()
    with pytest.raises(IndexError):
        lst.delete_at_begin()
    with pytest.raises(IndexError):
        lst.delete_at_end()
    with pytest.raises(IndexError):
        lst.delete_at_position(0)
    with pytest.raises(ValueError):
        lst.delete_by_value(1)


def test_delete_last_element_empties_list():
    lst = DoublyLinkedList([7])
    assert lst.delete_at_end() == 7
    assert lst.head is None and lst.tail is None
    assert len(lst) == 0


def test_round_trip_length_matches_iteration():
    lst = DoublyLinkedList([3, 1, 4])
    lst.insert_at_index(1, 5)
    lst.delete_by_value(4)
    assert len(lst) == len(list(lst))
    assert list(reversed(lst)) == list(lst)[::-1]