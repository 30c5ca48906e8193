# suspect_index.py
# ============================================================
# Português:
#   Tabela hash (encadeamento separado) que associa cada pista ao
#   suspeito que ela incrimina. Inserir uma pista já existente
#   substitui o suspeito.
#
# English:
#   Separately chained hash table mapping clue text -> suspect.
#   - djb2 over the UTF-8 bytes picks the bucket
#   - a match always requires full-text equality inside the bucket
#   - re-inserting a clue overwrites its suspect (last write wins)
# ============================================================

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple

from .case_file import CLUE_SUSPECTS

logger = logging.getLogger(__name__)

DEFAULT_BUCKETS = 101


def djb2(text: str) -> int:
    h = 5381
    for byte in text.encode("utf-8"):
        h = (h * 33 + byte) & 0xFFFFFFFFFFFFFFFF
    return h


@dataclass
class IndexEntry:
    """
    Português: entrada da cadeia (pista -> suspeito)
    English: chain entry (clue -> suspect)
    """
    clue: str
    suspect: str


class SuspectIndex:
    """Clue text -> suspect name, one entry per clue text."""

    def __init__(self, bucket_count: int = DEFAULT_BUCKETS) -> None:
        if not isinstance(bucket_count, int) or bucket_count <= 0:
            raise ValueError(f"bucket_count must be a positive int, got {bucket_count!r}")
        self.bucket_count = bucket_count
        self._buckets: List[List[IndexEntry]] = [[] for _ in range(bucket_count)]
        self._size = 0

    def bucket_of(self, clue_text: str) -> int:
        return djb2(clue_text) % self.bucket_count

    def _find(self, clue_text: str) -> Optional[IndexEntry]:
        for entry in self._buckets[self.bucket_of(clue_text)]:
            if entry.clue == clue_text:
                return entry
        return None

    def insert_or_update(self, clue_text: str, suspect_name: str) -> None:
        if clue_text is None or suspect_name is None:
            return
        existing = self._find(clue_text)
        if existing is not None:
            if existing.suspect != suspect_name:
                logger.debug(
                    "Clue %r now implicates %r (was %r)", clue_text, suspect_name, existing.suspect
                )
            existing.suspect = suspect_name
            return
        self._buckets[self.bucket_of(clue_text)].append(IndexEntry(clue_text, suspect_name))
        self._size += 1

    def lookup(self, clue_text: str) -> Optional[str]:
        if clue_text is None:
            return None
        entry = self._find(clue_text)
        return entry.suspect if entry else None

    def __contains__(self, clue_text: object) -> bool:
        return isinstance(clue_text, str) and self._find(clue_text) is not None

    def __len__(self) -> int:
        return self._size

    def items(self) -> Iterator[Tuple[str, str]]:
        for bucket in self._buckets:
            for entry in bucket:
                yield entry.clue, entry.suspect

    def clear(self) -> None:
        for bucket in self._buckets:
            bucket.clear()
        self._size = 0

    @classmethod
    def from_pairs(
        cls, pairs: Iterable[Tuple[str, str]], *, bucket_count: int = DEFAULT_BUCKETS
    ) -> "SuspectIndex":
        index = cls(bucket_count)
        for clue_text, suspect_name in pairs:
            index.insert_or_update(clue_text, suspect_name)
        return index


def build_suspect_index(bucket_count: int = DEFAULT_BUCKETS) -> SuspectIndex:
    return SuspectIndex.from_pairs(CLUE_SUSPECTS, bucket_count=bucket_count)


__all__ = ["DEFAULT_BUCKETS", "djb2", "IndexEntry", "SuspectIndex", "build_suspect_index"]
