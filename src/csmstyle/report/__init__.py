"""Report assembly."""

from csmstyle.report.assembler import ReportAssembler

__all__ = ["ReportAssembler"]
