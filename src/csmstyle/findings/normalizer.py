"""Turn raw Checkstyle findings into classified violation records."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from csmstyle.findings.models import RawFinding, ViolationRecord
from csmstyle.mapping.classifier import RuleClassifier

logger = logging.getLogger(__name__)

_CHECK_SUFFIX = "Check"
# Java line terminators only; str.splitlines also breaks on \f, \v and others.
_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def rule_id_from_source(source: Optional[str]) -> str:
    """Derive the mapping key from a fully-qualified check name.

    ``com.puppycrawl.tools.checkstyle.checks.sizes.LineLengthCheck`` →
    ``LineLength``. Only one trailing ``Check`` is stripped.
    """
    if not source:
        return "Unknown"
    dot = source.rfind(".")
    name = source[dot + 1:] if 0 <= dot < len(source) - 1 else source
    if name.endswith(_CHECK_SUFFIX):
        return name[: -len(_CHECK_SUFFIX)]
    return name


def display_name(path: str) -> str:
    """Last path component, for either separator style."""
    return path.replace("\\", "/").rstrip("/").rsplit("/", 1)[-1]


def file_prefix(name: str, separator: str = "_") -> str:
    """Leading group tag of a file name: ``s123_Main.java`` → ``s123``."""
    if not separator or separator not in name:
        return ""
    return name.split(separator, 1)[0]


class FindingNormalizer:
    """Classifies raw findings with a :class:`RuleClassifier`.

    Findings without a file are dropped; they cannot be attributed to a row
    of the report.
    """

    def __init__(
        self,
        classifier: RuleClassifier,
        *,
        prefix_separator: str = "_",
        include_snippets: bool = True,
    ) -> None:
        self.classifier = classifier
        self.prefix_separator = prefix_separator
        self.include_snippets = include_snippets
        self._lines: Dict[str, List[str]] = {}
        self.skipped = 0

    def normalize(self, raw: RawFinding) -> Optional[ViolationRecord]:
        if raw.file is None:
            self.skipped += 1
            logger.debug("Skipping finding without file: %s", raw.message)
            return None

        name = display_name(raw.file)
        rule = rule_id_from_source(raw.source)
        return ViolationRecord(
            file=name,
            rule=rule,
            principle=self.classifier.classify(rule),
            line_no=raw.line_no,
            message=raw.message,
            severity=raw.severity,
            file_prefix=file_prefix(name, self.prefix_separator),
            snippet=self._snippet(raw.file, raw.line_no) if self.include_snippets else "",
        )

    def normalize_all(self, raws: Iterable[RawFinding]) -> List[ViolationRecord]:
        records: List[ViolationRecord] = []
        for raw in raws:
            record = self.normalize(raw)
            if record is not None:
                records.append(record)
        return records

    def reset(self) -> None:
        """Forget cached file contents and the skip counter."""
        self._lines.clear()
        self.skipped = 0

    def _snippet(self, path: str, line_no: int) -> str:
        if line_no < 1:
            return ""
        lines = self._lines.get(path)
        if lines is None:
            try:
                text = Path(path).read_text(encoding="utf-8", errors="replace")
            except OSError:
                text = ""
            lines = _LINE_BREAK.split(text)
            self._lines[path] = lines
        if line_no > len(lines):
            return ""
        return lines[line_no - 1].strip()
