"""Shared test fixtures — sample Checkstyle reports, Java trees, fake engines."""

from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Iterable, List, Sequence

import pytest

from csmstyle.findings.models import RawFinding

LINE_LENGTH = "com.puppycrawl.tools.checkstyle.checks.sizes.LineLengthCheck"
INDENTATION = "com.puppycrawl.tools.checkstyle.checks.indentation.IndentationCheck"


class FakeEngine:
    """Engine double: discovers real files, replays canned findings, then raises *error* if set."""

    def __init__(self, findings: Iterable[RawFinding] = (), error: Exception | None = None) -> None:
        self.findings: List[RawFinding] = list(findings)
        self.error = error
        self.calls: List[Sequence[Path]] = []

    def discover(self, directory: Path) -> List[Path]:
        return sorted(p for p in directory.rglob("*.java") if p.is_file())

    def analyze(self, files: Sequence[Path]):
        self.calls.append(list(files))
        yield from self.findings
        if self.error is not None:
            raise self.error


class RecordingSink:
    def __init__(self) -> None:
        self.calls = []

    def write(self, report, path) -> None:
        self.calls.append((report, path))


@pytest.fixture
def java_project(tmp_path: Path) -> Path:
    """A small source tree with two Java files."""
    src = tmp_path / "src"
    (src / "pkg").mkdir(parents=True)
    (src / "s1234_Main.java").write_text(textwrap.dedent("""\
        public class Main {
            public static void main(String[] args) {
                System.out.println("a very long line that Checkstyle would flag");
            }
        }
    """))
    (src / "pkg" / "Helper.java").write_text("class Helper {}\n")
    (src / "notes.txt").write_text("not java\n")
    return src


@pytest.fixture
def main_findings(java_project: Path) -> List[RawFinding]:
    """Two LineLength findings and one unmapped Foo finding for s1234_Main.java."""
    main = str(java_project / "s1234_Main.java")
    return [
        RawFinding(file=main, source=LINE_LENGTH, line_no=3, message="Line is longer than 100 characters", severity="warning"),
        RawFinding(file=main, source=LINE_LENGTH, line_no=4, message="Line is longer than 100 characters", severity="warning"),
        RawFinding(file=main, source="com.example.checks.Foo", line_no=1, message="Foo happened", severity="error"),
    ]


@pytest.fixture
def sample_report_xml() -> str:
    return textwrap.dedent(f"""\
        <?xml version="1.0" encoding="UTF-8"?>
        <checkstyle version="10.12.4">
          <file name="/work/src/s1234_Main.java">
            <error line="3" column="101" severity="warning"
                   message="Line is longer than 100 characters (found 120)."
                   source="{LINE_LENGTH}"/>
            <error line="2" severity="warning"
                   message="'method def' child has incorrect indentation level 4."
                   source="{INDENTATION}"/>
          </file>
          <file name="/work/src/pkg/Helper.java">
          </file>
          <file name="/work/src/pkg/Other.java">
            <error line="1" column="1" severity="info" message="Custom finding"
                   source="com.example.checks.FooCheck"/>
          </file>
        </checkstyle>
    """)


@pytest.fixture
def make_engine():
    """Factory for :class:`FakeEngine` instances."""
    return FakeEngine


@pytest.fixture
def recording_sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def report_xml(java_project: Path, tmp_path: Path) -> Path:
    """A saved Checkstyle report: two LineLength findings and one Foo finding."""
    main = java_project / "s1234_Main.java"
    path = tmp_path / "checkstyle-result.xml"
    path.write_text(
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<checkstyle version="10.12.4">\n'
        f'  <file name="{main}">\n'
        f'    <error line="3" severity="warning" message="Line too long" source="{LINE_LENGTH}"/>\n'
        f'    <error line="4" severity="warning" message="Line too long" source="{LINE_LENGTH}"/>\n'
        '    <error line="1" severity="warning" message="Foo" source="com.example.FooCheck"/>\n'
        '  </file>\n'
        '</checkstyle>\n'
    )
    return path
