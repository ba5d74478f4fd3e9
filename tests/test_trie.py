import pytest

from vopix.trie import Trie, TrieType
from vopix.vector import Vector3


@pytest.fixture
def trie():
    t = Trie()
    t.insert("sunDirection", Vector3(0.75, 0.2, -1.5), TrieType.VECTOR3)
    t.insert("name", "default", TrieType.STRING)
    t.insert("count", 3, TrieType.INT)
    return t


def test_get_returns_inserted_value(trie):
    assert trie.get("name") == "default"
    assert trie.get("sunDirection") == Vector3(0.75, 0.2, -1.5)


def test_missing_key_gives_default(trie):
    assert trie.get("missing", "fallback") == "fallback"
    assert trie.get("missing") is None


def test_length_counts_entries(trie):
    assert len(trie) == 3


def test_replacing_does_not_change_length(trie):
    trie.insert("name", "other", TrieType.STRING)
    assert len(trie) == 3
    assert trie.get("name") == "other"


def test_prefix_without_value_is_not_contained(trie):
    trie.insert("abc", 1, TrieType.INT)
    assert "abc" in trie
    assert "ab" not in trie
    assert trie.get("ab", "none") == "none"


def test_prefix_and_longer_key_coexist():
    t = Trie()
    t.insert("ab", 1, TrieType.INT)
    t.insert("abc", 2, TrieType.INT)
    assert t.get("ab") == 1
    assert t.get("abc") == 2
    assert len(t) == 2


def test_get_with_type(trie):
    assert trie.get_with_type("count") == (3, TrieType.INT)
    assert trie.get_with_type("missing") == (None, TrieType.NONE)


def test_get_as_checks_type(trie):
    assert trie.get_as("count", TrieType.INT, -1) == 3
    assert trie.get_as("count", TrieType.FLOAT, -1) == -1
    assert trie.get_as("name", TrieType.STRING, "x") == "default"
    assert trie.get_as("missing", TrieType.STRING, "x") == "x"


def test_type_inferred_when_omitted():
    t = Trie()
    t.insert("s", "text")
    t.insert("i", 7)
    t.insert("d", 1.5)
    t.insert("v", Vector3(1, 2, 3))
    t.insert("p", object())
    assert t.get_with_type("s")[1] is TrieType.STRING
    assert t.get_with_type("i")[1] is TrieType.INT
    assert t.get_with_type("d")[1] is TrieType.DOUBLE
    assert t.get_with_type("v")[1] is TrieType.VECTOR3
    assert t.get_with_type("p")[1] is TrieType.POINTER


def test_items_in_key_order(trie):
    keys = [key for key, _, _ in trie.items()]
    assert keys == sorted(keys)
    assert set(keys) == {"sunDirection", "name", "count"}


def test_items_carry_type_and_value(trie):
    entries = {key: (kind, value) for key, kind, value in trie.items()}
    assert entries["count"] == (TrieType.INT, 3)
    assert entries["name"] == (TrieType.STRING, "default")


def test_items_prefix_before_extension():
    t = Trie()
    t.insert("abc", 2)
    t.insert("ab", 1)
    t.insert("b", 3)
    assert [key for key, _, _ in t.items()] == ["ab", "abc", "b"]


def test_clear_empties(trie):
    trie.clear()
    assert len(trie) == 0
    assert list(trie.items()) == []
    assert "name" not in trie


def test_non_string_not_contained(trie):
    assert 5 not in trie