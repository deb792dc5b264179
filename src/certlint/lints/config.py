# SPDX-License-Identifier: MIT
"""Filter criteria and report threshold configuration for the lint engine."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass

from certlint.lints.base import LintSource, LintStatus


class ConfigurationError(ValueError):
    """Raised for lint selection or registration mistakes. Not recoverable."""


@dataclass(frozen=True)
class FilterOptions:
    """Criteria for selecting the runnable subset of a registry.

    ``name_filter`` cannot be combined with ``include_names``/``exclude_names``.
    Exclusions always win over inclusions.
    """

    name_filter: re.Pattern[str] | None = None
    include_names: frozenset[str] = frozenset()
    exclude_names: frozenset[str] = frozenset()
    include_sources: frozenset[LintSource] = frozenset()
    exclude_sources: frozenset[LintSource] = frozenset()

    def is_empty(self) -> bool:
        return (
            self.name_filter is None
            and not self.include_names
            and not self.exclude_names
            and not self.include_sources
            and not self.exclude_sources
        )


def trimmed_list(raw: str) -> list[str]:
    """Split a comma-separated string and strip each element, dropping empties."""
    return [item.strip() for item in raw.split(",") if item.strip()]


def parse_sources(raw: str) -> frozenset[LintSource]:
    """Parse a comma-separated list of source tags.

    Raises:
        ConfigurationError: If any tag is not a known LintSource.
    """
    sources: set[LintSource] = set()
    for item in trimmed_list(raw):
        try:
            sources.add(LintSource(item))
        except ValueError:
            msg = f"Unknown lint source: {item!r}. Valid sources: {sorted(s.value for s in LintSource)}"
            raise ConfigurationError(msg) from None
    return frozenset(sources)


def compile_name_filter(pattern: str) -> re.Pattern[str]:
    try:
        return re.compile(pattern)
    except re.error as exc:
        msg = f"Bad name filter {pattern!r}: {exc}"
        raise ConfigurationError(msg) from exc


def _resolve(cli_value: str | None, env_var: str) -> str:
    """CLI > env > empty."""
    if cli_value:
        return cli_value
    return os.environ.get(env_var, "")


def load_filter_options(
    *,
    name_filter: str | None = None,
    include_names: str | None = None,
    exclude_names: str | None = None,
    include_sources: str | None = None,
    exclude_sources: str | None = None,
) -> FilterOptions:
    """Build FilterOptions with CLI > env > default priority.

    Each argument is the raw CLI string (comma-separated for lists). Unset
    arguments fall back to ``CERTLINT_NAME_FILTER``, ``CERTLINT_INCLUDE_NAMES``,
    ``CERTLINT_EXCLUDE_NAMES``, ``CERTLINT_INCLUDE_SOURCES`` and
    ``CERTLINT_EXCLUDE_SOURCES``.

    Raises:
        ConfigurationError: On a bad regex, unknown source, or a name filter
            combined with include/exclude name lists.
    """
    raw_filter = _resolve(name_filter, "CERTLINT_NAME_FILTER")
    opts = FilterOptions(
        name_filter=compile_name_filter(raw_filter) if raw_filter else None,
        include_names=frozenset(trimmed_list(_resolve(include_names, "CERTLINT_INCLUDE_NAMES"))),
        exclude_names=frozenset(trimmed_list(_resolve(exclude_names, "CERTLINT_EXCLUDE_NAMES"))),
        include_sources=parse_sources(_resolve(include_sources, "CERTLINT_INCLUDE_SOURCES")),
        exclude_sources=parse_sources(_resolve(exclude_sources, "CERTLINT_EXCLUDE_SOURCES")),
    )
    if opts.name_filter is not None and (opts.include_names or opts.exclude_names):
        msg = "A name filter cannot be used together with include/exclude name lists"
        raise ConfigurationError(msg)
    return opts


def load_threshold(cli_threshold: str | None = None) -> LintStatus:
    """Resolve the summary threshold with CLI > env > default (``pass``) priority.

    Raises:
        ConfigurationError: If the status label is not recognized.
    """
    label = cli_threshold or os.environ.get("CERTLINT_THRESHOLD", "pass")
    try:
        return LintStatus.from_label(label)
    except ValueError as exc:
        raise ConfigurationError(str(exc)) from exc
