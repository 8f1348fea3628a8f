"""Starter .csmstyle.toml template."""

DEFAULT_TOML = """\
# csmstyle configuration
version = "1.0"

[checkstyle]
jar = ""                        # path to checkstyle-<version>-all.jar
java = "java"
ruleset = "/google_checks.xml"  # bundled resource or path to a ruleset XML
timeout = 600                   # seconds per Checkstyle invocation
batch_size = 0                  # files per invocation, 0 = all at once

[report]
prefix_separator = "_"          # File Prefix column: text before this separator
include_snippets = true
summary_limit = 5

[mappings]
# file = "csm-mappings.yaml"
use_defaults = true

[mappings.rules]
# LineLength = "Clear Layout"
# TodoComment = "NO_UNUSED_CONTENT"
"""
