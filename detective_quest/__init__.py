"""Detective Quest: walk the mansion, collect clues, accuse a suspect."""

from .clues import ClueDirectory
from .exploration import ExplorationEngine, Move, Outcome
from .ledger import ClueLedger
from .rooms import Room, build_mansion
from .session import GameSession
from .suspect_index import SuspectIndex, build_suspect_index
from .verdict import Verdict, VerdictReport, render_verdict

__all__ = [
    "ClueDirectory",
    "ClueLedger",
    "ExplorationEngine",
    "GameSession",
    "Move",
    "Outcome",
    "Room",
    "SuspectIndex",
    "Verdict",
    "VerdictReport",
    "build_mansion",
    "build_suspect_index",
    "render_verdict",
]
