from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Optional, Union

from .clues import ClueDirectory
from .ledger import ClueLedger
from .rooms import LEFT, RIGHT, Room

logger = logging.getLogger(__name__)


class ExplorationState(Enum):
    AT_ROOM = "at_room"
    FINISHED = "finished"


class Move(Enum):
    LEFT = LEFT
    RIGHT = RIGHT
    STOP = "stop"


class Outcome(Enum):
    MOVED = "moved"
    DEAD_END = "dead_end"
    INVALID = "invalid"
    STOPPED = "stopped"


# First character of a choice: Portuguese (esquerda/direita/sair) or English.
_MOVE_KEYS = {
    "e": Move.LEFT,
    "l": Move.LEFT,
    "d": Move.RIGHT,
    "r": Move.RIGHT,
    "s": Move.STOP,
}


def parse_move(text: Optional[str]) -> Optional[Move]:
    """Map a typed choice to a Move; None when it is empty or unrecognised."""
    if not text:
        return None
    cleaned = text.strip()
    if not cleaned:
        return None
    return _MOVE_KEYS.get(cleaned[0].lower())


@dataclass(frozen=True)
class RoomVisit:
    """What happened on entering a room."""

    room: str
    clue: Optional[str] = None
    new_clue: bool = False


@dataclass(frozen=True)
class StepResult:
    outcome: Outcome
    room: str
    move: Optional[Move] = None
    visit: Optional[RoomVisit] = None


ChoiceLike = Union[Move, str, None]


@dataclass
class ExplorationEngine:
    """Player-driven walk through the mansion that collects clues on entry."""

    mansion: Room
    directory: ClueDirectory
    ledger: ClueLedger = field(default_factory=ClueLedger)
    state: ExplorationState = ExplorationState.AT_ROOM
    visited: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.cursor: Room = self.mansion
        self._started = False

    @property
    def current_room(self) -> str:
        return self.cursor.name

    @property
    def finished(self) -> bool:
        return self.state is ExplorationState.FINISHED

    def start(self) -> RoomVisit:
        """Enter the starting room."""
        if self._started:
            raise RuntimeError("Exploration has already started.")
        self._started = True
        return self._enter(self.mansion)

    def step(self, choice: ChoiceLike) -> StepResult:
        if not self._started:
            raise RuntimeError("Call start() before step().")
        if self.finished:
            raise RuntimeError("Exploration is already finished.")

        move = choice if isinstance(choice, Move) else parse_move(choice)

        if move is None:
            return StepResult(Outcome.INVALID, self.current_room)

        if move is Move.STOP:
            self.state = ExplorationState.FINISHED
            logger.debug("Exploration stopped at %s after %d visits", self.current_room, len(self.visited))
            return StepResult(Outcome.STOPPED, self.current_room, move=move)

        nxt = self.cursor.child(move.value)
        if nxt is None:
            logger.debug("Dead end: no %s exit from %s", move.value, self.current_room)
            return StepResult(Outcome.DEAD_END, self.current_room, move=move)

        self.cursor = nxt
        visit = self._enter(nxt)
        return StepResult(Outcome.MOVED, self.current_room, move=move, visit=visit)

    def run(self, choices: Iterable[ChoiceLike]) -> ClueLedger:
        """Drive the engine with a fixed sequence; running out of choices means stop."""
        if not self._started:
            self.start()
        for choice in choices:
            if self.finished:
                break
            self.step(choice)
        if not self.finished:
            self.step(Move.STOP)
        return self.ledger

    def _enter(self, room: Room) -> RoomVisit:
        self.visited.append(room.name)
        clue = self.directory.clue_for_room(room.name)
        new_clue = False
        if clue is not None:
            new_clue = self.ledger.add(clue)
            logger.debug("Clue %r in %s (new=%s)", clue, room.name, new_clue)
        else:
            logger.debug("Entered %s, no clue here", room.name)
        return RoomVisit(room=room.name, clue=clue, new_clue=new_clue)


__all__ = [
    "ExplorationState",
    "Move",
    "Outcome",
    "parse_move",
    "RoomVisit",
    "StepResult",
    "ExplorationEngine",
]
