"""Rule classifier — mutable rule id → CSM principle associations."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Set, Tuple

import yaml

from csmstyle.errors import CsmStyleError
from csmstyle.mapping.defaults import DEFAULT_SEED, SeedEntry
from csmstyle.mapping.principles import UNMAPPED, Principle, display_label, parse_principle


class MappingError(CsmStyleError):
    """Raised when a mapping file is unreadable or malformed."""


class RuleClassifier:
    """Associates Checkstyle rule ids with exactly one principle each.

    Rule ids are opaque, case-sensitive keys: nothing here trims or
    normalises them. Re-adding a rule replaces its previous principle.
    """

    def __init__(self) -> None:
        self._mappings: Dict[str, Principle] = {}

    # ---- mutation ----

    def add(self, rule_id: str, principle: Principle) -> None:
        self._mappings[rule_id] = principle

    def apply(self, mapping: Mapping[str, Principle]) -> None:
        for rule_id, principle in mapping.items():
            self.add(rule_id, principle)

    def remove(self, rule_id: str) -> None:
        self._mappings.pop(rule_id, None)

    def clear(self) -> None:
        self._mappings.clear()

    # ---- queries ----

    def principle_for(self, rule_id: str) -> Optional[Principle]:
        return self._mappings.get(rule_id)

    def classify(self, rule_id: str) -> str:
        """Return the principle label for *rule_id*, or ``"Unmapped"``."""
        principle = self._mappings.get(rule_id)
        return display_label(principle) if principle is not None else UNMAPPED

    def has(self, rule_id: str) -> bool:
        return rule_id in self._mappings

    def rule_ids(self) -> Set[str]:
        return set(self._mappings)

    def count(self) -> int:
        return len(self._mappings)

    def items(self) -> List[Tuple[str, Principle]]:
        """All associations sorted by rule id."""
        return sorted(self._mappings.items())

    def __contains__(self, rule_id: object) -> bool:
        return rule_id in self._mappings

    def __len__(self) -> int:
        return len(self._mappings)


def build_classifier(seed: Iterable[SeedEntry] = DEFAULT_SEED) -> RuleClassifier:
    """Create a classifier pre-populated with *seed* (last entry wins)."""
    classifier = RuleClassifier()
    for rule_id, principle in seed:
        classifier.add(rule_id, principle)
    return classifier


# ---- mapping files ----


def _coerce_rules(raw: Any, source: str) -> Dict[str, Principle]:
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise MappingError(f"{source}: 'rules' must be a mapping of rule id to principle")
    rules: Dict[str, Principle] = {}
    for rule_id, value in raw.items():
        try:
            rules[str(rule_id)] = parse_principle(str(value))
        except ValueError as exc:
            raise MappingError(f"{source}: rule {rule_id!r}: {exc}") from exc
    return rules


def parse_mapping_document(data: Any, source: str = "<mapping>") -> Tuple[bool, Dict[str, Principle], List[str]]:
    """Validate a loaded mapping document.

    Returns ``(clear, rules, remove)``. A document without a ``rules`` key is
    read as a bare ``{rule: principle}`` mapping.
    """
    if data is None:
        return False, {}, []
    if not isinstance(data, dict):
        raise MappingError(f"{source}: expected a mapping at the top level")

    if not {"rules", "remove", "clear"} & set(data):
        return False, _coerce_rules(data, source), []

    clear = data.get("clear", False)
    if not isinstance(clear, bool):
        raise MappingError(f"{source}: 'clear' must be true or false")
    remove = data.get("remove") or []
    if not isinstance(remove, list):
        raise MappingError(f"{source}: 'remove' must be a list of rule ids")
    return clear, _coerce_rules(data.get("rules"), source), [str(r) for r in remove]


def load_mapping_file(path: Path) -> Tuple[bool, Dict[str, Principle], List[str]]:
    """Read and validate a YAML mapping file."""
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as exc:
        raise MappingError(f"Cannot read mapping file {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise MappingError(f"Failed to parse {path}: {exc}") from exc
    return parse_mapping_document(data, str(path))


def apply_mapping_file(classifier: RuleClassifier, path: Path) -> int:
    """Apply a mapping file to *classifier*. Returns the number of rules added."""
    clear, rules, remove = load_mapping_file(path)
    if clear:
        classifier.clear()
    classifier.apply(rules)
    for rule_id in remove:
        classifier.remove(rule_id)
    return len(rules)
