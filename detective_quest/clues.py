from __future__ import annotations

from typing import Dict, Iterable, List, Mapping, Optional

from .case_file import ROOM_CLUES
from .rooms import Room, walk_rooms


class ClueDirectory:
    """Fixed room -> clue lookup (zero or one clue per room)."""

    def __init__(self, room_clues: Mapping[str, str] = ROOM_CLUES) -> None:
        clean: Dict[str, str] = {}
        for room, clue in room_clues.items():
            if not isinstance(room, str) or not room.strip():
                raise ValueError(f"Invalid room name: {room!r}")
            if not isinstance(clue, str) or not clue:
                raise ValueError(f"Clue for room '{room}' must be a non-empty string.")
            clean[room] = clue
        self._by_room = clean

    def clue_for_room(self, name: str) -> Optional[str]:
        return self._by_room.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._by_room

    def __len__(self) -> int:
        return len(self._by_room)

    def unknown_rooms(self, mansion: Room) -> List[str]:
        """Directory entries naming rooms that are not part of ``mansion``."""
        present = {room.name for room in walk_rooms(mansion)}
        return [room for room in self._by_room if room not in present]

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, str]]) -> "ClueDirectory":
        return cls(dict(pairs))


__all__ = ["ClueDirectory"]
