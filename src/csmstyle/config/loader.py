"""Load configuration from .csmstyle.toml and env vars; build the classifier."""

from __future__ import annotations

import dataclasses
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from csmstyle.config.schema import (
    CheckstyleConfig,
    CsmStyleConfig,
    MappingsConfig,
    ReportConfig,
)
from csmstyle.errors import CsmStyleError
from csmstyle.mapping.classifier import RuleClassifier, apply_mapping_file, build_classifier
from csmstyle.mapping.principles import parse_principle

CONFIG_FILENAME = ".csmstyle.toml"


class ConfigError(CsmStyleError):
    """Raised when config is malformed or unreadable."""


def find_config_file(base_dir: Path, override: Optional[str] = None) -> Optional[Path]:
    """Locate the config file. *override* takes precedence."""
    if override:
        p = Path(override)
        if not p.is_file():
            raise ConfigError(f"Config file not found: {override}")
        return p
    candidate = base_dir / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def _parse_toml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc


def _build_section(data: Dict[str, Any], cls: type, section: str):
    """Build a dataclass from a TOML section dict, ignoring unknown keys."""
    raw = data.get(section, {})
    if not isinstance(raw, dict):
        raise ConfigError(f"[{section}] must be a table")
    valid_fields = {f.name for f in dataclasses.fields(cls)}
    filtered = {k: v for k, v in raw.items() if k in valid_fields}
    return cls(**filtered)


def _merge_env_overrides(cfg: CsmStyleConfig) -> None:
    """Apply CSMSTYLE_* environment variable overrides."""
    if val := os.environ.get("CSMSTYLE_CHECKSTYLE_JAR"):
        cfg.checkstyle.jar = val
    if val := os.environ.get("CSMSTYLE_JAVA"):
        cfg.checkstyle.java = val
    if val := os.environ.get("CSMSTYLE_RULESET"):
        cfg.checkstyle.ruleset = val
    if val := os.environ.get("CSMSTYLE_BATCH_SIZE"):
        try:
            cfg.checkstyle.batch_size = max(int(val), 0)
        except ValueError:
            pass


def load_config(
    base_dir: Path,
    config_override: Optional[str] = None,
) -> CsmStyleConfig:
    """Load, validate, and return a CsmStyleConfig."""
    config_path = find_config_file(base_dir, config_override)

    if config_path is None:
        cfg = CsmStyleConfig()
    else:
        raw = _parse_toml(config_path)
        cfg = CsmStyleConfig(
            version=raw.get("version", "1.0"),
            checkstyle=_build_section(raw, CheckstyleConfig, "checkstyle"),
            report=_build_section(raw, ReportConfig, "report"),
            mappings=_build_section(raw, MappingsConfig, "mappings"),
        )
        if not isinstance(cfg.mappings.rules, dict):
            raise ConfigError("[mappings.rules] must be a table of rule = principle")

    _merge_env_overrides(cfg)
    return cfg


def build_classifier_from_config(
    cfg: CsmStyleConfig,
    mappings_override: Optional[str] = None,
) -> RuleClassifier:
    """Seed table (if enabled), then the mapping file, then inline rules."""
    classifier = build_classifier() if cfg.mappings.use_defaults else build_classifier(seed=())

    mapping_file = mappings_override or cfg.mappings.file
    if mapping_file:
        apply_mapping_file(classifier, Path(mapping_file))

    for rule_id, label in cfg.mappings.rules.items():
        try:
            classifier.add(rule_id, parse_principle(str(label)))
        except ValueError as exc:
            raise ConfigError(f"[mappings.rules] {rule_id}: {exc}") from exc

    return classifier
