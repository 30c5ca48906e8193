# ledger.py
# ============================================================
# Português:
#   Caderno de pistas do jogador: árvore binária de busca ordenada
#   pelo texto da pista, sem duplicatas.
#
# English:
#   The player's clue notebook: a binary search tree keyed on clue text.
#   Inserting a text that is already present leaves the tree unchanged.
# ============================================================

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple


@dataclass
class ClueNode:
    clue: str
    left: Optional["ClueNode"] = None
    right: Optional["ClueNode"] = None


def _insert(root: Optional[ClueNode], text: str) -> Tuple[ClueNode, bool]:
    if root is None:
        return ClueNode(text), True
    if text == root.clue:
        return root, False
    if text < root.clue:
        root.left, added = _insert(root.left, text)
    else:
        root.right, added = _insert(root.right, text)
    return root, added


def insert_clue(root: Optional[ClueNode], text: Optional[str]) -> Optional[ClueNode]:
    """Insert ``text`` at its sorted position and return the (possibly new) root."""
    if text is None:
        return root
    return _insert(root, text)[0]


def contains_clue(root: Optional[ClueNode], text: str) -> bool:
    node = root
    while node is not None:
        if text == node.clue:
            return True
        node = node.left if text < node.clue else node.right
    return False


def iter_in_order(root: Optional[ClueNode]) -> Iterator[str]:
    if root is None:
        return
    yield from iter_in_order(root.left)
    yield root.clue
    yield from iter_in_order(root.right)


def traverse_in_order(root: Optional[ClueNode]) -> List[str]:
    return list(iter_in_order(root))


class ClueLedger:
    """Ordered, duplicate-free set of collected clues."""

    def __init__(self) -> None:
        self.root: Optional[ClueNode] = None
        self._size = 0

    def add(self, text: str) -> bool:
        """Record ``text``; returns False when it was already in the ledger."""
        if text is None:
            return False
        self.root, added = _insert(self.root, text)
        if added:
            self._size += 1
        return added

    def clues(self) -> List[str]:
        return traverse_in_order(self.root)

    def clear(self) -> None:
        self.root = None
        self._size = 0

    def __contains__(self, text: object) -> bool:
        return isinstance(text, str) and contains_clue(self.root, text)

    def __iter__(self) -> Iterator[str]:
        return iter_in_order(self.root)

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self.root is not None

    def __repr__(self) -> str:
        return f"ClueLedger({self.clues()!r})"


__all__ = [
    "ClueNode",
    "insert_clue",
    "contains_clue",
    "iter_in_order",
    "traverse_in_order",
    "ClueLedger",
]
