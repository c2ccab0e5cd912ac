"""Name frequency index -- prefix trie of names with per-gender frequencies."""

from namefreq.constants import KEY_FIELD_WIDTH, ROOT_CHAR
from namefreq.trie import Trie, TrieNode, format_entry
from namefreq.dataset import NameDataset, read_rows, to_frequencies

__all__ = [
    "KEY_FIELD_WIDTH",
    "ROOT_CHAR",
    "NameDataset",
    "Trie",
    "TrieNode",
    "format_entry",
    "read_rows",
    "to_frequencies",
]
