"""CSM principle taxonomy, seed table and rule classifier."""

from csmstyle.mapping.classifier import (
    MappingError,
    RuleClassifier,
    apply_mapping_file,
    build_classifier,
    load_mapping_file,
)
from csmstyle.mapping.defaults import DEFAULT_SEED
from csmstyle.mapping.principles import (
    PRINCIPLE_LABELS,
    UNMAPPED,
    Principle,
    display_label,
    parse_principle,
)

__all__ = [
    "DEFAULT_SEED",
    "MappingError",
    "PRINCIPLE_LABELS",
    "Principle",
    "RuleClassifier",
    "UNMAPPED",
    "apply_mapping_file",
    "build_classifier",
    "display_label",
    "load_mapping_file",
    "parse_principle",
]
