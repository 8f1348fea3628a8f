"""Rich terminal reporter — run summary and mapping listings."""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.table import Table

from csmstyle.findings.aggregator import top
from csmstyle.findings.models import AnalysisReport, SummaryTable
from csmstyle.mapping.classifier import RuleClassifier
from csmstyle.mapping.principles import PRINCIPLE_LABELS, display_label


def _count_table(title: str, key_header: str, rows: SummaryTable, unit: str) -> Table:
    table = Table(title=title, title_style="bold", border_style="dim", title_justify="left")
    table.add_column(key_header, style="cyan")
    table.add_column(unit, justify="right", style="green")
    for key, count in rows:
        table.add_row(key, str(count))
    return table


def render(
    report: AnalysisReport,
    *,
    output_path: Optional[str] = None,
    limit: int = 5,
    console: Optional[Console] = None,
) -> None:
    """Print the analysis summary: totals, top rules, top principles, unmapped rules."""
    console = console or Console(stderr=True)

    console.print()
    if not report.records:
        console.print(
            "[bold green]✅ No violations found — the code follows the configured ruleset.[/bold green]"
        )
    console.print("[bold]=== Analysis Summary ===[/bold]")
    console.print(f"[dim]Files analyzed:[/dim]   {report.analyzed_files}")
    console.print(f"[dim]Violations:[/dim]       {report.total_violations}")
    console.print(f"[dim]Duration:[/dim]         {report.duration_ms:.0f}ms")
    if output_path:
        console.print(f"[dim]Excel report:[/dim]     {output_path}")

    if not report.records:
        return

    console.print()
    console.print(
        _count_table(f"Top {limit} most common violations", "Checkstyle Rule",
                     top(report.by_rule, limit), "Occurrences")
    )
    console.print(
        _count_table(f"Top {limit} most violated CSM principles", "CSM Principle",
                     top(report.by_principle, limit), "Violations")
    )

    unmapped = report.unmapped_rules
    if unmapped:
        console.print(
            _count_table("[yellow]Unmapped Checkstyle rules[/yellow]", "Checkstyle Rule",
                         unmapped, "Violations")
        )


def render_principles(console: Console) -> None:
    """Numbered list of principles, as offered by the interactive menu."""
    for number, label in enumerate(PRINCIPLE_LABELS.values(), start=1):
        console.print(f"  {number}. {label}")


def render_mappings(classifier: RuleClassifier, console: Console, *, limit: Optional[int] = None) -> None:
    """Print the current rule → principle associations sorted by rule id."""
    items = classifier.items()
    shown = items if limit is None else items[:limit]

    table = Table(title="Checkstyle Rule → CSM Principle", title_style="bold", border_style="dim")
    table.add_column("Checkstyle Rule", style="cyan")
    table.add_column("CSM Principle", style="magenta")
    for rule_id, principle in shown:
        table.add_row(rule_id, display_label(principle))
    console.print(table)

    hidden = len(items) - len(shown)
    if hidden > 0:
        console.print(f"[dim]  ... and {hidden} more mappings[/dim]")
