"""Finding models, normalization and aggregation."""

from csmstyle.findings.aggregator import aggregate_by, by_file, by_principle, by_rule, top
from csmstyle.findings.models import AnalysisReport, RawFinding, ViolationRecord
from csmstyle.findings.normalizer import FindingNormalizer, rule_id_from_source

__all__ = [
    "AnalysisReport",
    "FindingNormalizer",
    "RawFinding",
    "ViolationRecord",
    "aggregate_by",
    "by_file",
    "by_principle",
    "by_rule",
    "rule_id_from_source",
    "top",
]
