"""Checkstyle subprocess wrapper — source discovery and batched analysis."""

from __future__ import annotations

import logging
import subprocess
import tempfile
from pathlib import Path
from typing import Iterator, List, Sequence

from csmstyle.checkstyle.report_parser import CheckstyleError, iter_report_file, parse_report
from csmstyle.config.loader import ConfigError
from csmstyle.config.schema import BUNDLED_RULESETS, CheckstyleConfig
from csmstyle.errors import InputError
from csmstyle.findings.models import RawFinding

logger = logging.getLogger(__name__)

JAVA_SUFFIX = ".java"


def discover_sources(directory: Path, suffix: str = JAVA_SUFFIX) -> List[Path]:
    """Return every regular file under *directory* ending in *suffix*, sorted."""
    return sorted(p for p in directory.rglob(f"*{suffix}") if p.is_file())


def _batches(files: Sequence[Path], size: int) -> Iterator[Sequence[Path]]:
    if size <= 0:
        yield files
        return
    for start in range(0, len(files), size):
        yield files[start:start + size]


def build_command(settings: CheckstyleConfig, files: Sequence[Path], report_path: Path) -> List[str]:
    return [
        settings.java,
        "-jar",
        settings.jar,
        "-c",
        settings.ruleset,
        "-f",
        "xml",
        "-o",
        str(report_path),
        *(str(f) for f in files),
    ]


def _run_checkstyle(settings: CheckstyleConfig, files: Sequence[Path], report_path: Path) -> str:
    """Run one Checkstyle invocation and return the XML report text.

    Checkstyle exits with the number of error-severity violations, so the
    return code alone does not signal failure; a missing report does.
    """
    cmd = build_command(settings, files, report_path)
    try:
        result = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            timeout=settings.timeout,
            encoding="utf-8",
            errors="replace",
        )
    except FileNotFoundError:
        raise CheckstyleError(f"Java executable not found: {settings.java}")
    except subprocess.TimeoutExpired:
        raise CheckstyleError(f"Checkstyle timed out after {settings.timeout}s")

    text = report_path.read_text(encoding="utf-8", errors="replace") if report_path.is_file() else ""
    if not text.strip():
        stderr = result.stderr.strip().splitlines()
        detail = stderr[-1] if stderr else f"exit code {result.returncode}"
        raise CheckstyleError(f"Checkstyle produced no report: {detail}")
    return text


class CheckstyleEngine:
    """Runs the Checkstyle CLI over batches of Java files."""

    def __init__(self, settings: CheckstyleConfig) -> None:
        self.settings = settings

    def validate(self) -> None:
        """Fail fast on an unusable jar or ruleset, before any file is analysed."""
        jar = self.settings.jar
        if not jar:
            raise ConfigError(
                "Checkstyle jar not configured: set [checkstyle] jar in .csmstyle.toml "
                "or CSMSTYLE_CHECKSTYLE_JAR"
            )
        if not Path(jar).is_file():
            raise ConfigError(f"Checkstyle jar not found: {jar}")
        ruleset = self.settings.ruleset
        if ruleset not in BUNDLED_RULESETS and not Path(ruleset).is_file():
            raise ConfigError(f"Checkstyle ruleset not found: {ruleset}")

    def discover(self, directory: Path) -> List[Path]:
        return discover_sources(directory)

    def analyze(self, files: Sequence[Path]) -> Iterator[RawFinding]:
        """Yield raw findings batch by batch, in the order Checkstyle reports them."""
        for batch in _batches(files, self.settings.batch_size):
            logger.info("Running Checkstyle on %d file(s)", len(batch))
            with tempfile.TemporaryDirectory(prefix="csmstyle-") as tmp:
                text = _run_checkstyle(self.settings, batch, Path(tmp) / "checkstyle.xml")
            yield from parse_report(text)


class ReportFileEngine:
    """Replays a saved Checkstyle XML report instead of invoking Java."""

    def __init__(self, report_path: Path) -> None:
        self.report_path = Path(report_path)

    def validate(self) -> None:
        if not self.report_path.is_file():
            raise InputError(f"Checkstyle report not found: {self.report_path}")

    def discover(self, directory: Path) -> List[Path]:
        return discover_sources(directory)

    def analyze(self, files: Sequence[Path]) -> Iterator[RawFinding]:
        logger.info("Reading Checkstyle report %s", self.report_path)
        yield from iter_report_file(self.report_path)
