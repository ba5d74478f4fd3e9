"""A doubly linked list with access to its cells."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator, Optional


@dataclass(eq=False)
class ListCell:
    """One link of a :class:`LinkedList`."""

    element: Any
    next: Optional[ListCell] = field(default=None, repr=False)
    previous: Optional[ListCell] = field(default=None, repr=False)


class LinkedList:
    """Doubly linked list; negative indexes count from the end."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.first: Optional[ListCell] = None
        self.last: Optional[ListCell] = None
        self._length = 0
        for item in items:
            self.append(item)

    def append(self, element: Any) -> None:
        cell = ListCell(element, previous=self.last)
        if self.last:
            self.last.next = cell
        else:
            self.first = cell
        self.last = cell
        self._length += 1

    def appendleft(self, element: Any) -> None:
        cell = ListCell(element, next=self.first)
        if self.first:
            self.first.previous = cell
        else:
            self.last = cell
        self.first = cell
        self._length += 1

    def insert(self, index: int, element: Any) -> None:
        """Insert before position ``index``; past the end appends."""
        if index < 0:
            index += self._length
        if index >= self._length:
            self.append(element)
        elif index <= 0:
            self.appendleft(element)
        else:
            current = self._cell_at(index)
            cell = ListCell(element, next=current, previous=current.previous)
            current.previous.next = cell
            current.previous = cell
            self._length += 1

    def pop(self) -> Any:
        """Remove and return the last element."""
        if self.last is None:
            raise IndexError("pop from an empty list")
        cell = self.last
        self.remove_cell(cell)
        return cell.element

    def popleft(self) -> Any:
        """Remove and return the first element."""
        if self.first is None:
            raise IndexError("pop from an empty list")
        cell = self.first
        self.remove_cell(cell)
        return cell.element

    def remove_cell(self, cell: ListCell) -> None:
        """Unlink ``cell``, which must belong to this list."""
        if cell.previous:
            cell.previous.next = cell.next
        else:
            self.first = cell.next
        if cell.next:
            cell.next.previous = cell.previous
        else:
            self.last = cell.previous
        cell.next = cell.previous = None
        self._length -= 1

    def _cell_at(self, index: int) -> ListCell:
        if index < 0:
            index += self._length
        if not 0 <= index < self._length:
            raise IndexError("list index out of range")
        for position, cell in enumerate(self.cells()):
            if position == index:
                return cell
        raise IndexError("list index out of range")

    def __delitem__(self, index: int) -> None:
        self.remove_cell(self._cell_at(index))

    def __getitem__(self, index: int) -> Any:
        return self._cell_at(index).element

    def __iter__(self) -> Iterator[Any]:
        for cell in self.cells():
            yield cell.element

    def __len__(self) -> int:
        return self._length

    def cells(self) -> Iterator[ListCell]:
        """Yield the cells from first to last."""
        cell = self.first
        while cell is not None:
            following = cell.next
            yield cell
            cell = following

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"