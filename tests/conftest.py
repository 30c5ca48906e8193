# tests/conftest.py
# ============================================================
# Português:
#   Fixtures compartilhadas do pytest.
#
# English:
#   Shared pytest fixtures for all tests under tests/:
#   - mansion / directory / suspect_index: the built-in case data
#   - scripted_console: a Console fed from a list of lines, capturing output
# ============================================================

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Iterable, List

import pytest

# ---------- Ensure project root is importable ----------
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from detective_quest.clues import ClueDirectory  # noqa: E402
from detective_quest.console import Console  # noqa: E402
from detective_quest.rooms import Room, build_mansion  # noqa: E402
from detective_quest.suspect_index import SuspectIndex, build_suspect_index  # noqa: E402


class ScriptedConsole(Console):
    """
    Console whose input comes from a list; EOF once the list runs out.
    An exception type in the list (e.g. KeyboardInterrupt) is raised at that prompt.
    """

    def __init__(self, lines: Iterable[Any], **kwargs) -> None:
        self.lines: List[Any] = list(lines)
        self.prompts: List[str] = []
        self.output: List[str] = []
        super().__init__(read_line=self._read, write=self.output.append, **kwargs)

    def _read(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError
        item = self.lines.pop(0)
        if isinstance(item, type) and issubclass(item, BaseException):
            raise item
        return item

    @property
    def text(self) -> str:
        return "\n".join(self.output)


@pytest.fixture
def mansion() -> Room:
    return build_mansion()


@pytest.fixture
def directory() -> ClueDirectory:
    return ClueDirectory()


@pytest.fixture
def suspect_index() -> SuspectIndex:
    return build_suspect_index()


@pytest.fixture
def scripted_console():
    """
    Factory: scripted_console(["e", "d", "s", "Sra. Rosa"]) -> ScriptedConsole
    """
    def _make(lines: Iterable[Any], **kwargs) -> ScriptedConsole:
        return ScriptedConsole(lines, **kwargs)
    return _make
