"""Configuration schema — dataclasses for every config section."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict

# Rulesets shipped inside the Checkstyle jar, resolved from its classpath.
BUNDLED_RULESETS = ("/google_checks.xml", "/sun_checks.xml")


@dataclass
class CheckstyleConfig:
    jar: str = ""  # path to checkstyle-<version>-all.jar
    java: str = "java"
    ruleset: str = "/google_checks.xml"
    timeout: int = 600  # seconds per batch
    batch_size: int = 0  # 0 = every file in a single invocation


@dataclass
class ReportConfig:
    prefix_separator: str = "_"
    include_snippets: bool = True
    summary_limit: int = 5  # rows shown per terminal summary table


@dataclass
class MappingsConfig:
    file: str = ""  # optional YAML mapping file
    use_defaults: bool = True  # start from the built-in Google style table
    rules: Dict[str, str] = field(default_factory=dict)  # rule id -> principle


@dataclass
class CsmStyleConfig:
    version: str = "1.0"
    checkstyle: CheckstyleConfig = field(default_factory=CheckstyleConfig)
    report: ReportConfig = field(default_factory=ReportConfig)
    mappings: MappingsConfig = field(default_factory=MappingsConfig)
