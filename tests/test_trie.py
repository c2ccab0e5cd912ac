"""Tests for the name-frequency trie."""

from namefreq.constants import ROOT_CHAR
from namefreq.trie import Trie, TrieNode, format_entry


def build_sam_trie():
    trie = Trie()
    trie.insert("sam", "f", 0.00276)
    trie.insert("sam", "m", 0.00051)
    trie.insert("samuel", "m", 0.00270)
    return trie


def test_node_folds_character():
    node = TrieNode("A", 1)
    assert node.character == "a"
    assert node.depth == 1
    assert node.record is None
    assert not node.is_terminal


def test_find_child_missing_returns_none():
    node = TrieNode(ROOT_CHAR, 0)
    assert node.find_child("x") is None


def test_find_child_is_case_insensitive():
    trie = Trie()
    trie.insert("bo", "m", 1.0)
    child = trie.root.find_child("B")
    assert child is not None
    assert child.character == "b"


def test_virgin_trie():
    trie = Trie()
    assert trie.prefix("") is trie.root
    assert trie.prefix("abc") is trie.root
    assert trie.search("abc") is None
    assert trie.search("") is None
    assert trie.enumerate_prefix("") == []
    assert trie.enumerate_prefix("abc") == []
    assert len(trie) == 0


def test_depth_follows_parent():
    trie = Trie()
    trie.insert("anna", "f", 0.1)
    trie.insert("andrew", "m", 0.2)

    def check(node):
        for child in node.children.values():
            assert child.depth == node.depth + 1
            check(child)

    check(trie.root)
    assert trie.prefix("andrew").depth == 6
    assert trie.prefix("anxxx").depth == 2


def test_search_merges_categories():
    trie = build_sam_trie()
    assert trie.search("sam") == {"f": 0.00276, "m": 0.00051}
    assert trie.search("samuel") == {"m": 0.00270}


def test_search_prefix_only_is_not_found():
    trie = build_sam_trie()
    assert trie.search("samu") is None
    assert trie.search("s") is None


def test_search_absent_is_not_found():
    trie = build_sam_trie()
    assert trie.search("bob") is None
    assert trie.search("samuels") is None


def test_last_write_wins_per_category():
    trie = Trie()
    trie.insert("alex", "m", 0.5)
    trie.insert("alex", "f", 0.1)
    trie.insert("alex", "m", 0.7)
    assert trie.search("alex") == {"m": 0.7, "f": 0.1}


def test_insert_same_triple_twice_is_idempotent():
    once = Trie()
    once.insert("jo", "f", 0.3)
    twice = Trie()
    twice.insert("jo", "f", 0.3)
    twice.insert("jo", "f", 0.3)
    assert once.search("jo") == twice.search("jo")
    assert len(twice) == 1


def test_insert_normalizes_key():
    trie = Trie()
    trie.insert("  Alice \n", "f", 0.00105)
    assert trie.search("alice") == {"f": 0.00105}
    assert trie.search("ALICE") == {"f": 0.00105}
    assert "Alice" in trie


def test_insert_accepts_anything():
    trie = Trie()
    trie.insert("", "", 0)
    trie.insert("x", "?", -1.5)
    assert trie.search("") == {"": 0}
    assert trie.search("x") == {"?": -1.5}


def test_shared_prefix_uses_one_chain():
    trie = Trie()
    trie.insert("maria", "f", 0.2)
    node_before = trie.prefix("mar")
    trie.insert("mark", "m", 0.3)
    assert trie.prefix("mar") is node_before
    assert trie.prefix("mark").depth == 4
    assert len(trie.root.children) == 1
    assert list(trie.prefix("mar").children) == ["i", "k"]


def test_prefix_inserted_after_longer_key():
    trie = Trie()
    trie.insert("samuel", "m", 0.0027)
    trie.insert("sam", "f", 0.00276)
    assert trie.search("sam") == {"f": 0.00276}
    assert trie.search("samuel") == {"m": 0.0027}
    assert len(trie) == 2


def test_enumerate_skips_query_itself():
    trie = build_sam_trie()
    lines = trie.enumerate_prefix("sam")
    assert len(lines) == 1
    assert lines[0].startswith("samuel ")
    assert lines[0].endswith("(m:0.0027)")
    assert not any(line.split()[0] == "sam" for line in lines)


def test_enumerate_exact_key_returns_empty():
    trie = Trie()
    trie.insert("alice", "f", 0.00105)
    assert trie.enumerate_prefix("alic") == ["alice" + " " * 15 + "(f:0.00105)"]
    assert trie.enumerate_prefix("alice") == []


def test_enumerate_no_match_returns_empty():
    trie = build_sam_trie()
    assert trie.enumerate_prefix("z") == []
    assert trie.enumerate_prefix("samx") == []


def test_enumerate_order_is_depth_first_ascending():
    trie = Trie()
    for name in ["bob", "al", "alan", "albert", "ala", "b"]:
        trie.insert(name, "m", 0.1)
    keys = [line.split()[0] for line in trie.enumerate_prefix("")]
    assert keys == ["al", "ala", "alan", "albert", "b", "bob"]


def test_enumerate_lists_categories_sorted():
    trie = build_sam_trie()
    lines = trie.enumerate_prefix("sa")
    assert lines[0] == "sam" + " " * 17 + "(f:0.00276, m:0.00051)"
    assert lines[1].split()[0] == "samuel"


def test_enumerate_is_case_insensitive():
    trie = build_sam_trie()
    assert trie.enumerate_prefix("SAM") == trie.enumerate_prefix("sam")


def test_format_entry_pads_to_width():
    line = format_entry("sam", {"f": 0.5})
    assert line.index("(") == 20


def test_format_entry_always_pads_one_space():
    key = "maximilianalexander-johannes"
    line = format_entry(key, {"m": 1})
    assert line == key + " (m:1)"
    assert format_entry("abcd", {"f": 2}, width=4) == "abcd (f:2)"


def test_enumerate_custom_width():
    trie = build_sam_trie()
    assert trie.enumerate_prefix("sam", width=8) == ["samuel  (m:0.0027)"]


def test_is_prefix():
    trie = build_sam_trie()
    assert trie.is_prefix("")
    assert trie.is_prefix("samu")
    assert not trie.is_prefix("samx")


def test_search_returns_copy():
    trie = build_sam_trie()
    found = trie.search("sam")
    found["f"] = 1.0
    found["x"] = 2.0
    assert trie.search("sam") == {"f": 0.00276, "m": 0.00051}
