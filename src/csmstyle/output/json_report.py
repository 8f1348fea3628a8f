"""JSON reporter — machine-readable run summary for scripts and CI."""

from __future__ import annotations

import json
from typing import Any, Dict, List

from csmstyle import __version__
from csmstyle.findings.models import AnalysisReport, SummaryTable


def _rows(table: SummaryTable, key_name: str) -> List[Dict[str, Any]]:
    return [{key_name: key, "count": count} for key, count in table]


def to_dict(report: AnalysisReport, *, output_path: str = "") -> Dict[str, Any]:
    """Convert an AnalysisReport to a JSON-serialisable dict."""
    violations: List[Dict[str, Any]] = []
    for r in report.records:
        violations.append({
            "file": r.file,
            "rule": r.rule,
            "principle": r.principle,
            "line": r.line_no,
            "severity": r.severity,
            "message": r.message,
            **({"file_prefix": r.file_prefix} if r.file_prefix else {}),
            **({"snippet": r.snippet} if r.snippet else {}),
        })

    return {
        "version": __version__,
        "generated_at": report.generated_at.isoformat(timespec="seconds"),
        "analyzed_files": report.analyzed_files,
        "total_violations": report.total_violations,
        **({"report": output_path} if output_path else {}),
        "summary": {
            "by_file": _rows(report.by_file, "file"),
            "by_principle": _rows(report.by_principle, "principle"),
            "by_rule": _rows(report.by_rule, "rule"),
        },
        "unmapped_rules": _rows(report.unmapped_rules, "rule"),
        "violations": violations,
        "duration_ms": report.duration_ms,
    }


def render(report: AnalysisReport, *, output_path: str = "") -> str:
    """Return formatted JSON string."""
    return json.dumps(to_dict(report, output_path=output_path), indent=2)
