"""A character trie that stores typed values under string keys."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Iterator, Optional, Tuple

from vopix.vector import Vector3


class TrieType(Enum):
    """Kinds of value a trie entry may hold."""

    NONE = 0
    POINTER = 1
    STRING = 2
    VECTOR3 = 3
    DOUBLE = 4
    FLOAT = 5
    CHAR = 6
    INT = 7


def _infer_type(value: Any) -> TrieType:
    if isinstance(value, str):
        return TrieType.STRING
    if isinstance(value, Vector3):
        return TrieType.VECTOR3
    if isinstance(value, bool):
        return TrieType.POINTER
    if isinstance(value, int):
        return TrieType.INT
    if isinstance(value, float):
        return TrieType.DOUBLE
    return TrieType.POINTER


class _Node:
    __slots__ = ("children", "has_value", "value", "value_type")

    def __init__(self) -> None:
        self.children: Dict[str, _Node] = {}
        self.has_value = False
        self.value: Any = None
        self.value_type = TrieType.NONE


class Trie:
    """Maps string keys to values tagged with a :class:`TrieType`."""

    def __init__(self) -> None:
        self._root = _Node()
        self._count = 0

    def insert(
        self, key: str, value: Any, value_type: Optional[TrieType] = None
    ) -> None:
        """Store ``value`` under ``key``, replacing any earlier value.

        When ``value_type`` is omitted it is inferred from the value.
        """
        node = self._root
        for char in key:
            node = node.children.setdefault(char, _Node())
        if not node.has_value:
            self._count += 1
        node.has_value = True
        node.value = value
        node.value_type = _infer_type(value) if value_type is None else value_type

    def _find(self, key: str) -> Optional[_Node]:
        node = self._root
        for char in key:
            node = node.children.get(char)
            if node is None:
                return None
        return node if node.has_value else None

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._find(key) is not None

    def __len__(self) -> int:
        return self._count

    def get(self, key: str, default: Any = None) -> Any:
        """Value stored under ``key``, or ``default``."""
        node = self._find(key)
        return node.value if node else default

    def get_with_type(self, key: str) -> Tuple[Any, TrieType]:
        """The value and its type; ``(None, TrieType.NONE)`` when absent."""
        node = self._find(key)
        if node is None:
            return None, TrieType.NONE
        return node.value, node.value_type

    def get_as(self, key: str, value_type: TrieType, default: Any = None) -> Any:
        """Value under ``key`` if it was stored with ``value_type``, else ``default``."""
        node = self._find(key)
        if node is None or node.value_type is not value_type:
            return default
        return node.value

    def items(self) -> Iterator[Tuple[str, TrieType, Any]]:
        """Yield ``(key, type, value)`` in character-code order of the keys."""
        yield from self._walk(self._root, "")

    def _walk(self, node: _Node, prefix: str) -> Iterator[Tuple[str, TrieType, Any]]:
        if node.has_value:
            yield prefix, node.value_type, node.value
        for char in sorted(node.children):
            yield from self._walk(node.children[char], prefix + char)

    def clear(self) -> None:
        """Remove every entry."""
        self._root = _Node()
        self._count = 0