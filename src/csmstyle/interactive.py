"""Interactive prompt flow used when csmstyle is started without arguments."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from csmstyle.mapping.classifier import RuleClassifier
from csmstyle.mapping.principles import PRINCIPLE_LABELS, Principle
from csmstyle.output.terminal import render_mappings, render_principles

_PREVIEW_LIMIT = 10


@dataclass
class InteractiveRequest:
    directory: str
    output_path: str


def _ask(text: str) -> str:
    return typer.prompt(text, default="", show_default=False).strip()


def prompt_request(console: Console, default_output: str) -> Optional[InteractiveRequest]:
    """Ask for the source directory and output path. None if the user gives no directory."""
    console.print("[bold]=== Java CSM Style Analysis Tool ===[/bold]")
    console.print()

    directory = _ask("Enter the path to the Java source directory to analyze")
    if not directory:
        console.print("No directory specified. Exiting.")
        return None

    output_path = _ask("Enter output Excel file path (press Enter for default)") or default_output
    return InteractiveRequest(directory=directory, output_path=output_path)


def maybe_customize(classifier: RuleClassifier, console: Console) -> None:
    console.print()
    if typer.confirm("Do you want to customize CSM principle mappings?", default=False):
        customize_mappings(classifier, console)


def customize_mappings(classifier: RuleClassifier, console: Console) -> None:
    """Menu loop: add, remove or list mappings until the user continues."""
    console.print()
    console.print("Current CSM Principles:")
    for label in PRINCIPLE_LABELS.values():
        console.print(f"  - {label}")
    console.print()
    console.print(f"Current mappings (showing first {_PREVIEW_LIMIT}):")
    render_mappings(classifier, console, limit=_PREVIEW_LIMIT)

    console.print()
    console.print("Mapping customization options:")
    console.print("1. Add new mapping")
    console.print("2. Remove existing mapping")
    console.print("3. View all mappings")
    console.print("4. Continue with current mappings")

    while True:
        choice = _ask("Enter choice (1-4)")
        if choice == "1":
            _add_mapping(classifier, console)
        elif choice == "2":
            _remove_mapping(classifier, console)
        elif choice == "3":
            render_mappings(classifier, console)
        elif choice == "4":
            return
        else:
            console.print("Invalid choice. Please enter 1-4.")


def _add_mapping(classifier: RuleClassifier, console: Console) -> None:
    rule = _ask("Enter Checkstyle rule name")
    if not rule:
        console.print("Rule name cannot be empty.")
        return

    principles = list(Principle)
    console.print("Available CSM Principles:")
    render_principles(console)
    raw = _ask(f"Enter principle number (1-{len(principles)})")
    try:
        index = int(raw) - 1
    except ValueError:
        console.print("Invalid number format.")
        return
    if not 0 <= index < len(principles):
        console.print("Invalid principle number.")
        return

    classifier.add(rule, principles[index])
    console.print(f"Added mapping: {escape(rule)} -> {classifier.classify(rule)}")


def _remove_mapping(classifier: RuleClassifier, console: Console) -> None:
    rule = _ask("Enter Checkstyle rule name to remove")
    if classifier.has(rule):
        classifier.remove(rule)
        console.print(f"Removed mapping for: {escape(rule)}")
    else:
        console.print(f"No mapping found for: {escape(rule)}")
