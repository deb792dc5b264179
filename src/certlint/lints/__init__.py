# SPDX-License-Identifier: MIT
"""Certificate lint engine — registry, selection, execution, and severity aggregation."""

from certlint.lints.base import (
    Lint,
    LintMetadata,
    LintResult,
    LintSource,
    LintStatus,
    Malfunction,
    Verdict,
)
from certlint.lints.config import (
    ConfigurationError,
    FilterOptions,
    load_filter_options,
    load_threshold,
)
from certlint.lints.engine import LintEngine, ResultSet
from certlint.lints.registry import (
    DEFAULT_LINTS,
    DuplicateLintError,
    LintDescriptor,
    LintRegistry,
    default_registry,
)
from certlint.lints.report import ResultsTable, summarize

__all__ = [
    "DEFAULT_LINTS",
    "ConfigurationError",
    "DuplicateLintError",
    "FilterOptions",
    "Lint",
    "LintDescriptor",
    "LintEngine",
    "LintMetadata",
    "LintRegistry",
    "LintResult",
    "LintSource",
    "LintStatus",
    "Malfunction",
    "ResultSet",
    "ResultsTable",
    "Verdict",
    "default_registry",
    "load_filter_options",
    "load_threshold",
    "summarize",
]
