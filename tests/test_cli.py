"""Tests for the CLI entry point."""

import json
from pathlib import Path

import pytest
from openpyxl import load_workbook
from typer.testing import CliRunner

from csmstyle.cli import app, default_output_path

runner = CliRunner()


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch) -> Path:
    """Empty working directory with no config and no Checkstyle env vars."""
    cwd = tmp_path / "work"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    for name in ("CSMSTYLE_CHECKSTYLE_JAR", "CSMSTYLE_JAVA", "CSMSTYLE_RULESET", "CSMSTYLE_BATCH_SIZE"):
        monkeypatch.delenv(name, raising=False)
    return cwd


def _principle_rows(path: Path):
    ws = load_workbook(path)["Summary by CSM Principle"]
    return [tuple(c.value for c in row) for row in ws.iter_rows(min_row=2)]


class TestVersion:
    def test_version_flag(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "csmstyle" in result.output


class TestInit:
    def test_creates_config(self, workdir: Path):
        result = runner.invoke(app, ["--init"])
        assert result.exit_code == 0
        assert (workdir / ".csmstyle.toml").exists()

    def test_refuses_overwrite(self, workdir: Path):
        (workdir / ".csmstyle.toml").write_text("existing")
        result = runner.invoke(app, ["--init"])
        assert result.exit_code == 1
        assert (workdir / ".csmstyle.toml").read_text() == "existing"


class TestCommandLineMode:
    def test_directory_and_output(self, workdir: Path, java_project: Path, report_xml: Path):
        out = workdir / "report.xlsx"
        result = runner.invoke(app, [str(java_project), str(out), "--from-xml", str(report_xml)])
        assert result.exit_code == 0, result.output
        assert _principle_rows(out) == [("Clear Layout", 2), ("Unmapped", 1)]
        assert "Analysis Summary" in result.output

    def test_default_output_name(self, workdir: Path, java_project: Path, report_xml: Path):
        result = runner.invoke(app, [str(java_project), "--from-xml", str(report_xml)])
        assert result.exit_code == 0, result.output
        reports = list(workdir.glob("csm_analysis_report_*.xlsx"))
        assert len(reports) == 1

    def test_json_output(self, workdir: Path, java_project: Path, report_xml: Path):
        out = workdir / "report.xlsx"
        result = runner.invoke(app, [str(java_project), str(out), "--from-xml", str(report_xml), "--json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["total_violations"] == 3
        assert data["summary"]["by_rule"][0] == {"rule": "LineLength", "count": 2}

    def test_mapping_file(self, workdir: Path, java_project: Path, report_xml: Path, tmp_path: Path):
        mapping = tmp_path / "map.yaml"
        mapping.write_text("rules:\n  Foo: Avoid Duplication\n")
        out = workdir / "report.xlsx"
        result = runner.invoke(
            app, [str(java_project), str(out), "--from-xml", str(report_xml), "--mappings", str(mapping)],
        )
        assert result.exit_code == 0, result.output
        assert _principle_rows(out) == [("Clear Layout", 2), ("Avoid Duplication", 1)]

    def test_control_character_in_source_line(self, workdir: Path, tmp_path: Path):
        src = tmp_path / "ctrl"
        src.mkdir()
        java = src / "A.java"
        java.write_bytes(b'class A {\n  String s = "a\x01b";\n}\n')
        xml = tmp_path / "ctrl.xml"
        xml.write_text(
            '<?xml version="1.0" encoding="UTF-8"?>\n'
            f'<checkstyle version="10.12.4"><file name="{java}">'
            '<error line="2" severity="warning" message="Bad string" '
            'source="com.puppycrawl.tools.checkstyle.checks.sizes.LineLengthCheck"/>'
            '</file></checkstyle>\n'
        )
        out = workdir / "report.xlsx"
        result = runner.invoke(app, [str(src), str(out), "--from-xml", str(xml)])
        assert result.exit_code == 0, result.output
        ws = load_workbook(out)["Violations"]
        assert ws.cell(row=2, column=8).value == 'String s = "ab";'

    def test_empty_directory_writes_empty_report(self, workdir: Path, tmp_path: Path, report_xml: Path):
        empty = tmp_path / "empty"
        empty.mkdir()
        out = workdir / "report.xlsx"
        result = runner.invoke(app, [str(empty), str(out), "--from-xml", str(report_xml)])
        assert result.exit_code == 0
        assert _principle_rows(out) == []


class TestFatalErrors:
    def test_missing_directory(self, workdir: Path, report_xml: Path):
        result = runner.invoke(app, [str(workdir / "absent"), "--from-xml", str(report_xml)])
        assert result.exit_code == 2
        assert "does not exist" in result.output

    def test_checkstyle_not_configured(self, workdir: Path, java_project: Path):
        result = runner.invoke(app, [str(java_project)])
        assert result.exit_code == 2
        assert "Config error" in result.output
        assert not list(workdir.glob("*.xlsx"))

    def test_bad_mapping_file(self, workdir: Path, java_project: Path, report_xml: Path):
        result = runner.invoke(
            app, [str(java_project), "--from-xml", str(report_xml), "--mappings", "missing.yaml"],
        )
        assert result.exit_code == 2

    def test_unwritable_output(self, workdir: Path, java_project: Path, report_xml: Path):
        out = workdir / "no" / "such" / "dir" / "report.xlsx"
        result = runner.invoke(app, [str(java_project), str(out), "--from-xml", str(report_xml)])
        assert result.exit_code == 2
        assert not out.exists()


class TestInteractiveMode:
    def test_no_directory_exits(self, workdir: Path):
        result = runner.invoke(app, [], input="\n")
        assert result.exit_code == 0
        assert "No directory specified" in result.output

    def test_customize_then_analyze(self, workdir: Path, java_project: Path, report_xml: Path):
        out = workdir / "interactive.xlsx"
        answers = "\n".join([
            str(java_project),
            str(out),
            "y",      # customise mappings
            "1",      # add mapping
            "Foo",
            "8",      # Modular Structure
            "2",      # remove mapping
            "NotThere",
            "4",      # continue
        ]) + "\n"
        result = runner.invoke(app, ["--from-xml", str(report_xml)], input=answers)
        assert result.exit_code == 0, result.output
        assert "Added mapping: Foo -> Modular Structure" in result.output
        assert "No mapping found for: NotThere" in result.output
        assert _principle_rows(out) == [("Clear Layout", 2), ("Modular Structure", 1)]

    def test_default_output_when_blank(self, workdir: Path, java_project: Path, report_xml: Path):
        answers = f"{java_project}\n\nn\n"
        result = runner.invoke(app, ["--from-xml", str(report_xml)], input=answers)
        assert result.exit_code == 0, result.output
        assert len(list(workdir.glob("csm_analysis_report_*.xlsx"))) == 1


def test_default_output_path_format():
    name = default_output_path()
    assert name.startswith("csm_analysis_report_")
    assert name.endswith(".xlsx")
    assert len(name) == len("csm_analysis_report_YYYYMMDD_HHMMSS.xlsx")
