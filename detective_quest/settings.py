from __future__ import annotations

from pydantic import BaseModel, Field

from .suspect_index import DEFAULT_BUCKETS
from .verdict import SUPPORT_THRESHOLD


class GameSettings(BaseModel):
    """
    Tunables for one play session. Built from CLI flags; nothing is read
    from the environment.
    """
    bucket_count: int = Field(default=DEFAULT_BUCKETS, gt=0, description="Suspect index bucket count")
    support_threshold: int = Field(
        default=SUPPORT_THRESHOLD, ge=1, description="Clues needed for a supported accusation"
    )
    max_input: int = Field(default=256, gt=1, description="Longest accepted input line; the rest is dropped")
    verbose: bool = Field(default=False, description="Debug logging")


__all__ = ["GameSettings"]
