"""Excel workbook writer — violations sheet plus three summary sheets."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import List, Sequence, Tuple

from openpyxl import Workbook
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from csmstyle.errors import ReportWriteError
from csmstyle.findings.models import AnalysisReport, SummaryTable, ViolationRecord

logger = logging.getLogger(__name__)

VIOLATIONS_SHEET = "Violations"
SUMMARY_BY_FILE = "Summary by File"
SUMMARY_BY_PRINCIPLE = "Summary by CSM Principle"
SUMMARY_BY_RULE = "Summary by Rule"

# (header, width in characters)
COLUMNS: List[Tuple[str, int]] = [
    ("File", 31),
    ("File Prefix", 12),
    ("Checkstyle Rule", 23),
    ("CSM Principle", 20),
    ("Line Number", 12),
    ("Severity", 12),
    ("Message", 47),
    ("Line Snippet", 39),
]

_CENTERED_COLUMNS = {"File Prefix", "Line Number", "Severity"}
_COUNT_HEADER = "Violation Count"

_THIN = Side(style="thin")
_BORDER = Border(top=_THIN, bottom=_THIN, left=_THIN, right=_THIN)
_HEADER_FONT = Font(bold=True, color="FFFFFF")
_HEADER_FILL = PatternFill(fill_type="solid", fgColor="000080")
_BOLD = Font(bold=True)
_WRAP = Alignment(wrap_text=True, vertical="top")
_CENTER = Alignment(horizontal="center", wrap_text=True, vertical="top")


def _clean(value):
    """Drop control characters openpyxl refuses to store in a cell."""
    if isinstance(value, str):
        return ILLEGAL_CHARACTERS_RE.sub("", value)
    return value


def _row_values(record: ViolationRecord) -> list:
    values = [
        record.file,
        record.file_prefix,
        record.rule,
        record.principle,
        record.line_no,
        record.severity,
        record.message,
        record.snippet,
    ]
    return [_clean(value) for value in values]


def _write_header(ws: Worksheet, headers: Sequence[str]) -> None:
    ws.append(list(headers))
    for cell in ws[1]:
        cell.font = _HEADER_FONT
        cell.fill = _HEADER_FILL
        cell.border = _BORDER
        cell.alignment = Alignment(horizontal="center")


def _fill_violations(ws: Worksheet, report: AnalysisReport) -> None:
    _write_header(ws, [header for header, _ in COLUMNS])
    for index, (_, width) in enumerate(COLUMNS, start=1):
        ws.column_dimensions[get_column_letter(index)].width = width

    for record in report.records:
        ws.append(_row_values(record))
        for (header, _), cell in zip(COLUMNS, ws[ws.max_row]):
            cell.border = _BORDER
            cell.alignment = _CENTER if header in _CENTERED_COLUMNS else _WRAP

    start = ws.max_row + 3
    stamp = report.generated_at.strftime("%Y-%m-%d %H:%M:%S")
    ws.cell(row=start, column=1, value=f"Report Generated: {stamp}").font = _BOLD
    ws.cell(row=start + 1, column=1, value=f"Total Violations: {report.total_violations}").font = _BOLD


def _fill_summary(ws: Worksheet, key_header: str, table: SummaryTable) -> None:
    _write_header(ws, [key_header, _COUNT_HEADER])
    ws.column_dimensions["A"].width = 31
    ws.column_dimensions["B"].width = 16
    for key, count in table:
        ws.append([_clean(key), count])
        key_cell, count_cell = ws[ws.max_row]
        key_cell.border = _BORDER
        key_cell.alignment = _WRAP
        count_cell.border = _BORDER
        count_cell.alignment = _CENTER


def _current_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask


def build_workbook(report: AnalysisReport) -> Workbook:
    """Lay out *report* as an in-memory workbook."""
    wb = Workbook()
    ws = wb.active
    ws.title = VIOLATIONS_SHEET
    _fill_violations(ws, report)
    _fill_summary(wb.create_sheet(SUMMARY_BY_FILE), "File", report.by_file)
    _fill_summary(wb.create_sheet(SUMMARY_BY_PRINCIPLE), "CSM Principle", report.by_principle)
    _fill_summary(wb.create_sheet(SUMMARY_BY_RULE), "Checkstyle Rule", report.by_rule)
    return wb


class ExcelReportWriter:
    """Persists an :class:`AnalysisReport` as an ``.xlsx`` workbook.

    The workbook is saved to a temporary file beside the target and moved
    into place, so a failed write never leaves a truncated report behind.
    """

    def write(self, report: AnalysisReport, path: Path) -> None:
        path = Path(path)
        logger.info("Writing Excel report with %d violations to %s", report.total_violations, path)
        try:
            wb = build_workbook(report)
        except ValueError as exc:
            raise ReportWriteError(f"Cannot build report for {path}: {exc}") from exc

        try:
            fd, tmp_name = tempfile.mkstemp(prefix=".csmstyle-", suffix=".xlsx", dir=path.parent)
        except OSError as exc:
            raise ReportWriteError(f"Cannot write report to {path}: {exc}") from exc
        os.close(fd)

        try:
            wb.save(tmp_name)
            # mkstemp creates 0600; give the report the usual umask-based mode.
            os.chmod(tmp_name, 0o666 & ~_current_umask())
            os.replace(tmp_name, path)
        except OSError as exc:
            Path(tmp_name).unlink(missing_ok=True)
            raise ReportWriteError(f"Cannot write report to {path}: {exc}") from exc

        logger.info("Excel report generated: %s", path)
