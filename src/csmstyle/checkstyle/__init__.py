"""Checkstyle interface layer — subprocess adapter and XML report parsing."""

from csmstyle.checkstyle.adapter import (
    CheckstyleEngine,
    ReportFileEngine,
    build_command,
    discover_sources,
)
from csmstyle.checkstyle.report_parser import CheckstyleError, iter_report_file, parse_report

__all__ = [
    "CheckstyleEngine",
    "CheckstyleError",
    "ReportFileEngine",
    "build_command",
    "discover_sources",
    "iter_report_file",
    "parse_report",
]
