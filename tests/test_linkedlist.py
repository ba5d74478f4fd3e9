import pytest

from vopix.linkedlist import LinkedList


def backwards(lst):
    out = []
    cell = lst.last
    while cell is not None:
        out.append(cell.element)
        cell = cell.previous
    return out


def test_construct_from_items():
    lst = LinkedList([1, 2, 3])
    assert list(lst) == [1, 2, 3]
    assert len(lst) == 3


def test_append_and_appendleft():
    lst = LinkedList()
    lst.append("b")
    lst.appendleft("a")
    lst.append("c")
    assert list(lst) == ["a", "b", "c"]
    assert backwards(lst) == ["c", "b", "a"]


@pytest.mark.parametrize("index", [-5, -3, -1, 0, 1, 2, 3, 7])
def test_insert_matches_builtin_list(index):
    lst = LinkedList([10, 20, 30])
    expected = [10, 20, 30]
    lst.insert(index, 99)
    expected.insert(index, 99)
    assert list(lst) == expected
    assert backwards(lst) == list(reversed(expected))
    assert len(lst) == 4


def test_insert_into_empty():
    lst = LinkedList()
    lst.insert(0, "x")
    assert list(lst) == ["x"]
    assert lst.first is lst.last


def test_pop_and_popleft():
    lst = LinkedList([1, 2, 3])
    assert lst.pop() == 3
    assert lst.popleft() == 1
    assert list(lst) == [2]
    assert lst.pop() == 2
    assert lst.first is None and lst.last is None
    assert len(lst) == 0


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        LinkedList().pop()
    with pytest.raises(IndexError):
        LinkedList().popleft()


@pytest.mark.parametrize("index", [0, 1, 2, -1, -3])
def test_delitem_matches_builtin_list(index):
    lst = LinkedList(["a", "b", "c"])
    expected = ["a", "b", "c"]
    del lst[index]
    del expected[index]
    assert list(lst) == expected
    assert backwards(lst) == list(reversed(expected))


def test_delitem_out_of_range():
    lst = LinkedList([1])
    with pytest.raises(IndexError):
        del lst[1]
    assert list(lst) == [1]
    assert len(lst) == 1


def test_getitem_with_negative_index():
    lst = LinkedList(["a", "b", "c"])
    assert lst[0] == "a"
    assert lst[-1] == "c"
    assert lst[-3] == "a"
    with pytest.raises(IndexError):
        lst[3]


def test_remove_cell_while_iterating_cells():
    lst = LinkedList(range(6))
    for cell in lst.cells():
        if cell.element % 2:
            lst.remove_cell(cell)
    assert list(lst) == [0, 2, 4]
    assert backwards(lst) == [4, 2, 0]


def test_cells_link_both_ways():
    lst = LinkedList([1, 2, 3])
    cells = list(lst.cells())
    assert [c.element for c in cells] == [1, 2, 3]
    assert cells[1].previous is cells[0]
    assert cells[1].next is cells[2]