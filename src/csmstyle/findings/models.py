"""Finding data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional, Tuple

from csmstyle.mapping.principles import UNMAPPED

SummaryTable = List[Tuple[str, int]]


@dataclass(frozen=True)
class RawFinding:
    """A single violation as reported by Checkstyle (before classification)."""

    file: Optional[str]  # None when the engine could not attribute a file
    source: str  # fully-qualified check class, e.g. ...sizes.LineLengthCheck
    line_no: int
    message: str
    severity: str  # 'error' | 'warning' | 'info' | 'ignore'
    column: Optional[int] = None


@dataclass(frozen=True)
class ViolationRecord:
    """A classified finding — one row of the report."""

    file: str
    rule: str
    principle: str
    line_no: int  # <= 0 for findings not anchored to a line
    message: str
    severity: str
    file_prefix: str = ""
    snippet: str = ""


@dataclass
class AnalysisReport:
    """Everything the report writer needs for one run."""

    records: List[ViolationRecord] = field(default_factory=list)
    by_file: SummaryTable = field(default_factory=list)
    by_principle: SummaryTable = field(default_factory=list)
    by_rule: SummaryTable = field(default_factory=list)
    analyzed_files: int = 0
    duration_ms: float = 0.0
    generated_at: datetime = field(default_factory=datetime.now)

    @property
    def total_violations(self) -> int:
        return len(self.records)

    @property
    def unmapped_rules(self) -> SummaryTable:
        """(rule, count) for rules that resolved to ``Unmapped``, by rule id."""
        counts: dict[str, int] = {}
        for record in self.records:
            if record.principle == UNMAPPED:
                counts[record.rule] = counts.get(record.rule, 0) + 1
        return sorted(counts.items())
