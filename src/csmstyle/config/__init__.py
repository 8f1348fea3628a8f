"""Configuration loading, schema, and defaults."""

from csmstyle.config.loader import ConfigError, build_classifier_from_config, load_config
from csmstyle.config.schema import CheckstyleConfig, CsmStyleConfig

__all__ = [
    "CheckstyleConfig",
    "ConfigError",
    "CsmStyleConfig",
    "build_classifier_from_config",
    "load_config",
]
