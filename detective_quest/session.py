from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from .clues import ClueDirectory
from .exploration import ExplorationEngine
from .ledger import ClueLedger
from .rooms import Room, build_mansion
from .settings import GameSettings
from .suspect_index import SuspectIndex, build_suspect_index
from .verdict import VerdictReport, render_verdict

logger = logging.getLogger(__name__)


@dataclass
class GameSession:
    """Owns every structure of one playthrough."""

    mansion: Optional[Room]
    directory: ClueDirectory
    index: SuspectIndex
    settings: GameSettings = field(default_factory=GameSettings)
    ledger: ClueLedger = field(default_factory=ClueLedger)
    closed: bool = False

    @classmethod
    def new(cls, settings: Optional[GameSettings] = None) -> "GameSession":
        settings = settings or GameSettings()
        mansion = build_mansion()
        directory = ClueDirectory()
        missing = directory.unknown_rooms(mansion)
        if missing:
            raise ValueError(f"Clues placed in rooms outside the mansion: {', '.join(missing)}")
        return cls(
            mansion=mansion,
            directory=directory,
            index=build_suspect_index(settings.bucket_count),
            settings=settings,
        )

    def explorer(self) -> ExplorationEngine:
        if self.closed or self.mansion is None:
            raise RuntimeError("Session is closed.")
        return ExplorationEngine(self.mansion, self.directory, ledger=self.ledger)

    def accuse(self, accused: Optional[str]) -> VerdictReport:
        return render_verdict(
            self.ledger, self.index, accused, threshold=self.settings.support_threshold
        )

    def close(self) -> None:
        """Release the ledger, then the room tree, then the suspect index."""
        if self.closed:
            return
        self.ledger.clear()
        self.mansion = None
        self.index.clear()
        self.closed = True
        logger.debug("Session closed")


__all__ = ["GameSession"]
