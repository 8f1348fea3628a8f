"""Parser for Checkstyle's XML report format (``-f xml``).

Shape of the input::

    <checkstyle version="10.12.4">
      <file name="/src/Foo.java">
        <error line="3" column="5" severity="warning"
               message="Line is longer than 100 characters"
               source="com.puppycrawl.tools.checkstyle.checks.sizes.LineLengthCheck"/>
        <exception><![CDATA[...stack trace...]]></exception>
      </file>
    </checkstyle>

Findings are yielded in document order.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Iterator, Optional

from csmstyle.errors import CsmStyleError
from csmstyle.findings.models import RawFinding


class CheckstyleError(CsmStyleError):
    """Raised when Checkstyle cannot run or its report is unusable."""


def _int_attr(element: ET.Element, name: str) -> Optional[int]:
    value = element.get(name)
    if value is None or not value.strip():
        return None
    try:
        return int(value)
    except ValueError:
        return None


def _finding(error: ET.Element, file: Optional[str]) -> RawFinding:
    line_no = _int_attr(error, "line")
    return RawFinding(
        file=file,
        source=error.get("source", ""),
        line_no=line_no if line_no is not None else 0,
        message=error.get("message", ""),
        severity=error.get("severity", "error"),
        column=_int_attr(error, "column"),
    )


def parse_report(text: str) -> Iterator[RawFinding]:
    """Yield raw findings from a Checkstyle XML document.

    ``<error>`` elements that are not inside a named ``<file>`` yield findings
    with ``file=None``. An ``<exception>`` element means Checkstyle failed on a
    file and raises :class:`CheckstyleError`.
    """
    try:
        root = ET.fromstring(text)
    except ET.ParseError as exc:
        raise CheckstyleError(f"Malformed Checkstyle XML report: {exc}") from exc

    if root.tag != "checkstyle":
        raise CheckstyleError(f"Unexpected report root element <{root.tag}>")

    for child in root:
        if child.tag == "error":
            yield _finding(child, None)
        elif child.tag == "file":
            name = child.get("name") or None
            for node in child:
                if node.tag == "error":
                    yield _finding(node, name)
                elif node.tag == "exception":
                    detail = (node.text or "").strip().splitlines()
                    first = detail[0] if detail else "unknown error"
                    raise CheckstyleError(f"Checkstyle failed on {name}: {first}")


def iter_report_file(path: Path) -> Iterator[RawFinding]:
    """Yield findings from a saved Checkstyle XML report."""
    try:
        text = Path(path).read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        raise CheckstyleError(f"Cannot read Checkstyle report {path}: {exc}") from exc
    yield from parse_report(text)
