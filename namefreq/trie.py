"""Prefix trie mapping names to per-category frequencies."""

from __future__ import annotations

import logging

from sortedcontainers import SortedDict

from namefreq.constants import KEY_FIELD_WIDTH, ROOT_CHAR

logger = logging.getLogger("namefreq.trie")


def _normalize(key: str) -> str:
    return key.strip().lower()


class TrieNode:
    """Single node in the prefix trie."""

    __slots__ = ("character", "depth", "children", "record")

    def __init__(self, character: str, depth: int):
        self.character: str = character.lower()
        self.depth: int = depth
        self.children: SortedDict = SortedDict()  # char -> TrieNode, ascending
        self.record: dict[str, float] | None = None

    @property
    def is_terminal(self) -> bool:
        return self.record is not None

    def find_child(self, character: str) -> TrieNode | None:
        """Child for ``character`` (case-folded), or None."""
        return self.children.get(character.lower())

    def __repr__(self) -> str:
        return f"TrieNode({self.character!r}, depth={self.depth}, record={self.record!r})"


class Trie:
    """Prefix trie of names, each carrying a ``{category: weight}`` record.

    Keys are stripped and lower-cased on entry.  Nodes are created only by
    :meth:`insert` and are never removed.
    """

    def __init__(self):
        self.root = TrieNode(ROOT_CHAR, 0)
        self._size = 0

    # walk

    def prefix(self, key: str) -> TrieNode:
        """Deepest node matching the longest prefix of ``key`` already present.

        If every character matches, the returned node has
        ``depth == len(key)``; an empty key returns the root.
        """
        node = self.root
        for ch in key:
            child = node.find_child(ch)
            if child is None:
                break
            node = child
        return node

    # mutation

    def insert(self, key: str, category: str, weight: float) -> None:
        """Record ``weight`` for ``category`` under ``key``.

        Never fails: empty keys, empty categories and any numeric weight are
        accepted as-is.  Re-inserting a category overwrites its weight.
        """
        key = _normalize(key)
        node = self.prefix(key)

        if node.depth == len(key):
            if node.record is None:
                node.record = {}
                self._size += 1
            node.record[category] = weight
            return

        for pos in range(node.depth, len(key)):
            child = TrieNode(key[pos], node.depth + 1)
            node.children[child.character] = child
            node = child
        logger.debug("Created path for %r down to depth %d", key, node.depth)
        if node.record is None:
            self._size += 1
        node.record = {category: weight}

    # queries

    def search(self, key: str) -> dict[str, float] | None:
        """Record stored for exactly ``key``, or None.

        A key that only exists as a prefix of longer names is reported the
        same as an absent key.  The result is a copy of the stored record.
        """
        key = _normalize(key)
        node = self.prefix(key)
        if node.depth == len(key) and node.record is not None:
            return dict(node.record)
        return None

    def enumerate_prefix(self, text: str, width: int = KEY_FIELD_WIDTH) -> list[str]:
        """Formatted lines for every stored name strictly longer than ``text``
        that starts with it.

        Lines come out depth-first in ascending character order, e.g.::

            samuel              (m:0.0027)

        The name equal to ``text`` itself is never listed, even when it is
        stored; use :meth:`search` for that.
        """
        text = _normalize(text)
        node = self.prefix(text)
        if node.depth < len(text):
            return []
        lines: list[str] = []
        self._enumerate(node, text, width, lines)
        return lines

    def _enumerate(self, node: TrieNode, text: str, width: int, out: list[str]) -> None:
        for ch, child in node.children.items():
            key = text + ch
            if child.record is not None:
                out.append(format_entry(key, child.record, width))
            self._enumerate(child, key, width, out)

    def is_prefix(self, text: str) -> bool:
        """True if all of ``text`` is a path in the trie."""
        text = _normalize(text)
        return self.prefix(text).depth == len(text)

    def __contains__(self, key: str) -> bool:
        return self.search(key) is not None

    def __len__(self) -> int:
        return self._size


def format_entry(key: str, record: dict[str, float], width: int = KEY_FIELD_WIDTH) -> str:
    """``key`` padded to ``width`` (at least one space), then the record.

    Categories are listed in ascending label order.
    """
    pad = " " * max(width - len(key), 1)
    pairs = ", ".join(f"{cat}:{record[cat]}" for cat in sorted(record))
    return f"{key}{pad}({pairs})"
