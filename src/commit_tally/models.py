"""Data models for commit-tally."""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field


# ── Per-repository results ────────────────────────────────────────────────

class RepositoryResult(BaseModel):
    """What one repository contributes to the tally."""

    path: Path
    commit_counts: dict[str, int] = Field(default_factory=dict)
    origin: Optional[str] = None

    @property
    def commit_total(self) -> int:
        return sum(self.commit_counts.values())


# ── Aggregated tally ──────────────────────────────────────────────────────

class TallyReport(BaseModel):
    """Commit totals and origins merged across all repositories."""

    commit_totals: dict[str, int] = Field(default_factory=dict)
    origins: list[str] = Field(default_factory=list)
    repositories_scanned: int = 0
    repositories_processed: int = 0

    def sorted_totals(self) -> list[tuple[str, int]]:
        """(identity, count) pairs, highest count first."""
        return sorted(self.commit_totals.items(), key=lambda x: -x[1])
