"""Report assembler — drives analysis, classification and aggregation.

The engine is any object with ``discover(directory) -> list[Path]`` and
``analyze(files) -> Iterable[RawFinding]``; the sink any object with
``write(report, path)``. Both run synchronously. One assembler serves any
number of sequential runs but must not be shared between concurrent ones.
"""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import List, Sequence, Tuple, Union

from csmstyle.checkstyle.adapter import JAVA_SUFFIX
from csmstyle.errors import InputError
from csmstyle.findings import aggregator
from csmstyle.findings.models import AnalysisReport, ViolationRecord
from csmstyle.findings.normalizer import FindingNormalizer
from csmstyle.mapping.classifier import RuleClassifier

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class ReportAssembler:
    def __init__(
        self,
        classifier: RuleClassifier,
        engine,
        *,
        prefix_separator: str = "_",
        include_snippets: bool = True,
    ) -> None:
        self.classifier = classifier
        self.engine = engine
        self.normalizer = FindingNormalizer(
            classifier,
            prefix_separator=prefix_separator,
            include_snippets=include_snippets,
        )
        self._records: List[ViolationRecord] = []

    @property
    def records(self) -> Tuple[ViolationRecord, ...]:
        """Records collected by the most recent run, in emission order."""
        return tuple(self._records)

    # ---- entry points ----

    def analyze_directory(self, directory: PathLike) -> AnalysisReport:
        path = Path(directory)
        if not path.exists():
            raise InputError(f"Directory does not exist: {directory}")
        if not path.is_dir():
            raise InputError(f"Path is not a directory: {directory}")

        files = self.engine.discover(path)
        if not files:
            logger.warning("No Java files found in directory: %s", directory)
        else:
            logger.info("Found %d Java files to analyze", len(files))
        return self.analyze_files(files)

    def analyze_file(self, file: PathLike) -> AnalysisReport:
        path = Path(file)
        if not path.is_file():
            raise InputError(f"File does not exist: {file}")
        if path.suffix != JAVA_SUFFIX:
            raise InputError(f"File is not a Java file: {file}")
        return self.analyze_files([path])

    def analyze_files(self, files: Sequence[Path]) -> AnalysisReport:
        """Analyse *files* and return the classified, aggregated report.

        Engine errors propagate unchanged; nothing from a failed run is kept.
        """
        start = time.perf_counter()
        self._records.clear()
        self.normalizer.reset()

        records: List[ViolationRecord] = []
        if files:
            for raw in self.engine.analyze(files):
                record = self.normalizer.normalize(raw)
                if record is not None:
                    records.append(record)
        self._records = records

        if self.normalizer.skipped:
            logger.debug("Skipped %d finding(s) without a file", self.normalizer.skipped)
        logger.info("Analysis completed. Found %d violations", len(self._records))

        report = self.assemble(self._records)
        report.analyzed_files = len(files)
        report.duration_ms = round((time.perf_counter() - start) * 1000, 2)
        return report

    def run(self, directory: PathLike, output_path: PathLike, sink) -> AnalysisReport:
        """Analyse *directory* and hand the result to *sink* in one call."""
        report = self.analyze_directory(directory)
        sink.write(report, Path(output_path))
        return report

    # ---- aggregation ----

    @staticmethod
    def assemble(records: Sequence[ViolationRecord]) -> AnalysisReport:
        ordered = list(records)
        return AnalysisReport(
            records=ordered,
            by_file=aggregator.by_file(ordered),
            by_principle=aggregator.by_principle(ordered),
            by_rule=aggregator.by_rule(ordered),
        )
