"""The closed CSM principle taxonomy and its display labels."""

from __future__ import annotations

from enum import Enum
from typing import Dict


class Principle(str, Enum):
    EXPLANATORY_LANGUAGE = "explanatory_language"
    CLEAR_LAYOUT = "clear_layout"
    SIMPLE_CONSTRUCTS = "simple_constructs"
    BE_CONSISTENT = "be_consistent"
    NO_UNUSED_CONTENT = "no_unused_content"
    AVOID_DUPLICATION = "avoid_duplication"
    CONGRUENT_IMPLEMENTATION = "congruent_implementation"
    MODULAR_STRUCTURE = "modular_structure"


PRINCIPLE_LABELS: Dict[Principle, str] = {
    Principle.EXPLANATORY_LANGUAGE: "Explanatory Language",
    Principle.CLEAR_LAYOUT: "Clear Layout",
    Principle.SIMPLE_CONSTRUCTS: "Simple Constructs",
    Principle.BE_CONSISTENT: "Be Consistent",
    Principle.NO_UNUSED_CONTENT: "No Unused Content",
    Principle.AVOID_DUPLICATION: "Avoid Duplication",
    Principle.CONGRUENT_IMPLEMENTATION: "Congruent Implementation",
    Principle.MODULAR_STRUCTURE: "Modular Structure",
}

# Label reported for rules with no association.
UNMAPPED = "Unmapped"


def display_label(principle: Principle) -> str:
    """Return the human-readable label for *principle*."""
    return PRINCIPLE_LABELS[principle]


def parse_principle(text: str) -> Principle:
    """Resolve a member name (``CLEAR_LAYOUT``), value or display label.

    Matching ignores case and surrounding whitespace. Raises ``ValueError``
    for anything that is not a known principle.
    """
    needle = text.strip()
    folded = needle.casefold()
    for principle, label in PRINCIPLE_LABELS.items():
        if folded in (principle.name.casefold(), principle.value, label.casefold()):
            return principle
    choices = ", ".join(PRINCIPLE_LABELS.values())
    raise ValueError(f"Unknown CSM principle {needle!r} (expected one of: {choices})")
