"""Frequency aggregation of violation records."""

from __future__ import annotations

from collections import Counter
from operator import attrgetter
from typing import Callable, Iterable

from csmstyle.findings.models import SummaryTable, ViolationRecord

KeyFn = Callable[[ViolationRecord], str]


def aggregate_by(records: Iterable[ViolationRecord], key: KeyFn) -> SummaryTable:
    """Count records per ``key(record)``.

    Rows are sorted by count descending; equal counts are ordered by key so
    the result never depends on container iteration order.
    """
    counts = Counter(key(record) for record in records)
    return sorted(counts.items(), key=lambda row: (-row[1], row[0]))


def by_file(records: Iterable[ViolationRecord]) -> SummaryTable:
    return aggregate_by(records, attrgetter("file"))


def by_principle(records: Iterable[ViolationRecord]) -> SummaryTable:
    return aggregate_by(records, attrgetter("principle"))


def by_rule(records: Iterable[ViolationRecord]) -> SummaryTable:
    return aggregate_by(records, attrgetter("rule"))


def top(table: SummaryTable, limit: int) -> SummaryTable:
    """First *limit* rows of an already sorted table (all rows if limit <= 0)."""
    return list(table) if limit <= 0 else list(table[:limit])
