"""Report writers — Excel workbook, terminal summary, JSON."""

from csmstyle.output.excel import ExcelReportWriter

__all__ = ["ExcelReportWriter"]
