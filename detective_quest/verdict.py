from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field

from .ledger import ClueLedger
from .suspect_index import SuspectIndex

SUPPORT_THRESHOLD = 2


class Verdict(str, Enum):
    SUPPORTED = "SUPPORTED"
    WEAK = "WEAK"
    NO_EVIDENCE = "NO_EVIDENCE"


class VerdictReport(BaseModel):
    """Result of weighing the collected clues against an accusation."""

    accused: Optional[str] = Field(default=None, description="Name given at the accusation prompt")
    count: int = Field(default=0, description="Collected clues implicating the accused")
    verdict: Verdict
    threshold: int = Field(default=SUPPORT_THRESHOLD)
    clues: List[str] = Field(default_factory=list, description="Collected clues, in order")
    implicating: List[str] = Field(default_factory=list)


def render_verdict(
    ledger: ClueLedger,
    index: SuspectIndex,
    accused: Optional[str],
    *,
    threshold: int = SUPPORT_THRESHOLD,
) -> VerdictReport:
    """
    Count the collected clues whose suspect is exactly ``accused``.

    An empty ledger gives NO_EVIDENCE without consulting the index. Suspect
    names are compared as-is (case-sensitive, no trimming).
    """
    if not ledger:
        return VerdictReport(accused=accused, verdict=Verdict.NO_EVIDENCE, threshold=threshold)

    clues = ledger.clues()
    implicating = [clue for clue in clues if accused is not None and index.lookup(clue) == accused]
    count = len(implicating)
    return VerdictReport(
        accused=accused,
        count=count,
        verdict=Verdict.SUPPORTED if count >= threshold else Verdict.WEAK,
        threshold=threshold,
        clues=clues,
        implicating=implicating,
    )


def describe(report: VerdictReport) -> str:
    if report.verdict is Verdict.NO_EVIDENCE:
        return "Nenhuma pista foi coletada. Não é possível acusar com fundamento."
    if report.verdict is Verdict.SUPPORTED:
        return "DESFECHO: Acusação válida! Há provas suficientes para sustentar o caso."
    return (
        f"DESFECHO: Acusação fraca. Pelo menos {report.threshold} pistas "
        "são necessárias para condenar."
    )


__all__ = ["SUPPORT_THRESHOLD", "Verdict", "VerdictReport", "render_verdict", "describe"]
