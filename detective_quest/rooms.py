# rooms.py
# ============================================================
# Português:
#   Árvore binária de cômodos da mansão. Cada cômodo tem no máximo
#   duas saídas (esquerda/direita) e é imutável após a construção.
#
# English:
#   Binary tree of mansion rooms. Every room has at most two exits
#   (left/right) and is immutable once built. The builder validates the
#   layout table the same way a map loader validates nodes + edges.
# ============================================================

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, Mapping, Optional, Set, Tuple

from .case_file import ENTRANCE, MANSION_LAYOUT

LEFT = "left"
RIGHT = "right"

Layout = Mapping[str, Tuple[Optional[str], Optional[str]]]


@dataclass(frozen=True)
class Room:
    """
    Português: cômodo (nó da árvore)
    English: Room (tree node)
    """
    name: str
    left: Optional["Room"] = None
    right: Optional["Room"] = None

    def child(self, side: str) -> Optional["Room"]:
        if side == LEFT:
            return self.left
        if side == RIGHT:
            return self.right
        raise ValueError(f"Unknown exit side: {side!r}")


def build_mansion(layout: Layout = MANSION_LAYOUT, root: str = ENTRANCE) -> Room:
    """
    Build the room tree described by ``layout`` and return its root.

    ``layout`` maps each room name to its ``(left, right)`` exits. Rooms that
    only appear as exits are treated as leaves. Raises ``ValueError`` if a
    room has two parents, the layout loops back on itself, or some room
    cannot be reached from ``root``.
    """
    if not isinstance(root, str) or not root.strip():
        raise ValueError(f"Invalid root room: {root!r}")

    # ---------- Parse exits ----------
    exits: Dict[str, Tuple[Optional[str], Optional[str]]] = {}
    for name, pair in layout.items():
        if not isinstance(name, str) or not name.strip():
            raise ValueError(f"Invalid room name: {name!r}")
        if not isinstance(pair, (tuple, list)) or len(pair) != 2:
            raise ValueError(f"Exits for '{name}' must be a (left, right) pair.")
        left, right = pair
        if left is not None and left == right:
            raise ValueError(f"Room '{name}' leads to '{left}' on both sides.")
        exits[name] = (left, right)

    if root not in exits:
        raise ValueError(f"Root room '{root}' not found in layout.")

    # ---------- Ownership: every room has at most one parent ----------
    parent_of: Dict[str, str] = {}
    for name, pair in exits.items():
        for child in pair:
            if child is None:
                continue
            if child == root:
                raise ValueError(f"Room '{name}' leads back to the root '{root}'.")
            if child in parent_of:
                raise ValueError(
                    f"Room '{child}' is reachable from both '{parent_of[child]}' and '{name}'."
                )
            parent_of[child] = name

    # Rooms listed only as exits become leaves
    for child in list(parent_of):
        exits.setdefault(child, (None, None))

    seen: Set[str] = set()

    def _build(name: str) -> Room:
        if name in seen:
            raise ValueError(f"Layout loops back to room '{name}'.")
        seen.add(name)
        left, right = exits[name]
        return Room(
            name=name,
            left=_build(left) if left is not None else None,
            right=_build(right) if right is not None else None,
        )

    mansion = _build(root)

    unreachable = sorted(set(exits) - seen)
    if unreachable:
        raise ValueError(f"Rooms not reachable from '{root}': {', '.join(unreachable)}")

    return mansion


def walk_rooms(root: Optional[Room]) -> Iterator[Room]:
    """Pre-order walk of the room tree."""
    if root is None:
        return
    yield root
    yield from walk_rooms(root.left)
    yield from walk_rooms(root.right)


__all__ = ["LEFT", "RIGHT", "Room", "build_mansion", "walk_rooms"]
