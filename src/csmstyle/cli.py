"""csmstyle CLI — Typer application mapping Checkstyle findings onto CSM principles."""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from csmstyle import __version__

app = typer.Typer(
    name="csmstyle",
    help="Analyse Java sources with Checkstyle and report violations by CSM principle.",
    add_completion=False,
)

console = Console(stderr=True)


def default_output_path() -> str:
    """Timestamped report name in the working directory."""
    return f"csm_analysis_report_{datetime.now():%Y%m%d_%H%M%S}.xlsx"


def _configure_logging(verbose: bool, debug: bool) -> None:
    level = logging.DEBUG if debug else logging.INFO if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="%H:%M:%S",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _fail(label: str, exc: Exception) -> typer.Exit:
    console.print(f"[bold red]{label}:[/bold red] {escape(str(exc))}")
    return typer.Exit(code=2)


# ── callbacks ─────────────────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        print(f"csmstyle {__version__}")
        raise typer.Exit()


def _init_callback(value: bool) -> None:
    """Write a starter .csmstyle.toml into the working directory."""
    if not value:
        return
    from csmstyle.config.defaults import DEFAULT_TOML
    from csmstyle.config.loader import CONFIG_FILENAME

    config_path = Path.cwd() / CONFIG_FILENAME
    if config_path.exists():
        console.print(f"[yellow]⚠[/yellow]  {CONFIG_FILENAME} already exists at {config_path}")
        raise typer.Exit(code=1)
    config_path.write_text(DEFAULT_TOML, encoding="utf-8")
    console.print(f"[green]✓[/green] Created {config_path}")
    raise typer.Exit()


# ── main command ──────────────────────────────────────────────────────────────


@app.command()
def main(
    directory: Optional[str] = typer.Argument(
        None, help="Java source directory. Omit to run interactively.", show_default=False,
    ),
    output: Optional[str] = typer.Argument(
        None, help="Excel report path [default: csm_analysis_report_<timestamp>.xlsx]",
        show_default=False,
    ),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .csmstyle.toml"),
    mappings: Optional[str] = typer.Option(
        None, "--mappings", "-m", help="YAML file with rule → principle mappings",
    ),
    from_xml: Optional[str] = typer.Option(
        None, "--from-xml", help="Use an existing Checkstyle XML report instead of running Java",
    ),
    json_output: bool = typer.Option(False, "--json", help="Print the summary as JSON to stdout"),
    no_snippets: bool = typer.Option(False, "--no-snippets", help="Leave the Line Snippet column empty"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
    debug: bool = typer.Option(False, "--debug", help="Debug output"),
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
    init: bool = typer.Option(
        False, "--init", callback=_init_callback,
        is_eager=True, help="Create a starter .csmstyle.toml and exit",
    ),
) -> None:
    """Classify Checkstyle violations under CSM principles and write an Excel report."""
    from csmstyle import interactive
    from csmstyle.checkstyle.adapter import CheckstyleEngine, ReportFileEngine
    from csmstyle.config.loader import ConfigError, build_classifier_from_config, load_config
    from csmstyle.errors import CsmStyleError
    from csmstyle.mapping.classifier import MappingError
    from csmstyle.output import json_report, terminal
    from csmstyle.output.excel import ExcelReportWriter
    from csmstyle.report.assembler import ReportAssembler

    _configure_logging(verbose, debug)
    log = logging.getLogger("csmstyle")
    log.info("Starting Java CSM Style Analysis Tool")

    # --- Load config and mappings ---
    try:
        cfg = load_config(Path.cwd(), config)
        classifier = build_classifier_from_config(cfg, mappings)
    except (ConfigError, MappingError) as exc:
        raise _fail("Config error", exc) from exc

    if no_snippets:
        cfg.report.include_snippets = False

    # --- Interactive mode ---
    if directory is None:
        request = interactive.prompt_request(console, default_output_path())
        if request is None:
            raise typer.Exit(code=0)
        interactive.maybe_customize(classifier, console)
        directory, output = request.directory, request.output_path

    output_path = output or default_output_path()

    # --- Engine ---
    engine = ReportFileEngine(Path(from_xml)) if from_xml else CheckstyleEngine(cfg.checkstyle)
    try:
        engine.validate()
    except CsmStyleError as exc:
        raise _fail("Config error", exc) from exc

    if verbose or debug:
        console.print(f"[dim]Mappings loaded: {classifier.count()}[/dim]")
        console.print(f"[dim]Directory: {directory}[/dim]")
        console.print(f"[dim]Output: {output_path}[/dim]")

    # --- Analyse and write ---
    assembler = ReportAssembler(
        classifier,
        engine,
        prefix_separator=cfg.report.prefix_separator,
        include_snippets=cfg.report.include_snippets,
    )
    try:
        report = assembler.run(directory, output_path, ExcelReportWriter())
    except CsmStyleError as exc:
        raise _fail("Error", exc) from exc

    # --- Output ---
    if json_output:
        print(json_report.render(report, output_path=output_path))
    else:
        terminal.render(report, output_path=output_path, limit=cfg.report.summary_limit, console=console)

    log.info("Analysis completed successfully")
