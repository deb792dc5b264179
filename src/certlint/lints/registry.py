# SPDX-License-Identifier: MIT
"""Lint registry — explicit list of all lint descriptors plus the registry type.

A registry is filled during startup and only read afterwards, so it is safe
to share between threads once ``default_registry()`` (or the caller's own
registration pass) has returned.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from datetime import datetime
from typing import TextIO

from pydantic import BaseModel

from certlint.lints import (
    dnsname_bad_character_in_label,
    ev_valid_time_too_long,
    sub_ca_name_constraints_not_critical,
    subject_postal_without_org,
)
from certlint.lints.base import LintMetadata, LintSource
from certlint.lints.config import ConfigurationError, FilterOptions

log = logging.getLogger(__name__)

DEFAULT_LINTS: list[LintMetadata] = [
    subject_postal_without_org.LINT,
    ev_valid_time_too_long.LINT,
    sub_ca_name_constraints_not_critical.LINT,
    dnsname_bad_character_in_label.LINT,
]


class DuplicateLintError(ConfigurationError):
    """Raised when two lints are registered under the same name."""


class LintDescriptor(BaseModel):
    """Serializable view of a lint's metadata (no lint object)."""

    name: str
    description: str
    citation: str
    source: LintSource
    effective_date: datetime

    @classmethod
    def from_metadata(cls, meta: LintMetadata) -> LintDescriptor:
        return cls(
            name=meta.name,
            description=meta.description,
            citation=meta.citation,
            source=meta.source,
            effective_date=meta.effective_date,
        )


class LintRegistry:
    """Catalog of lints keyed by unique name."""

    def __init__(self, lints: Iterable[LintMetadata] = ()) -> None:
        self._lints: dict[str, LintMetadata] = {}
        for meta in lints:
            self.register(meta)

    def register(self, meta: LintMetadata) -> None:
        """Add a lint.

        Raises:
            DuplicateLintError: If a lint with the same name is already registered.
            ConfigurationError: If the name is empty.
        """
        if not meta.name:
            msg = "Lint name must not be empty"
            raise ConfigurationError(msg)
        if meta.name in self._lints:
            msg = f"Lint {meta.name!r} is already registered"
            raise DuplicateLintError(msg)
        self._lints[meta.name] = meta

    def by_name(self, name: str) -> LintMetadata | None:
        return self._lints.get(name)

    def names(self) -> list[str]:
        """Return registered names in lexicographic order."""
        return sorted(self._lints)

    def lints(self) -> list[LintMetadata]:
        """Return metadata in lexicographic name order."""
        return [self._lints[name] for name in self.names()]

    def sources(self) -> list[LintSource]:
        """Return the distinct sources present, sorted by tag."""
        return sorted({meta.source for meta in self._lints.values()}, key=lambda s: s.value)

    def filter(self, opts: FilterOptions) -> LintRegistry:
        """Return a new registry holding only the lints selected by *opts*.

        Inclusion is applied first and exclusion second, so an exclusion
        always removes a lint that an inclusion selected. The receiver is
        never modified.

        Raises:
            ConfigurationError: If a name filter is combined with name lists,
                or a listed name is not registered.
        """
        if opts.is_empty():
            return LintRegistry(self.lints())

        if opts.name_filter is not None and (opts.include_names or opts.exclude_names):
            msg = "A name filter cannot be used together with include/exclude name lists"
            raise ConfigurationError(msg)
        for label, names in (("include", opts.include_names), ("exclude", opts.exclude_names)):
            unknown = sorted(n for n in names if n not in self._lints)
            if unknown:
                msg = f"Unknown lint name(s) in {label} list: {unknown}"
                raise ConfigurationError(msg)

        selected: list[LintMetadata] = []
        for meta in self.lints():
            if opts.name_filter is not None and not opts.name_filter.search(meta.name):
                continue
            if opts.include_names and meta.name not in opts.include_names:
                continue
            if opts.include_sources and meta.source not in opts.include_sources:
                continue
            if meta.name in opts.exclude_names:
                continue
            if meta.source in opts.exclude_sources:
                continue
            selected.append(meta)

        log.debug("Filter kept %d of %d lints", len(selected), len(self._lints))
        return LintRegistry(selected)

    def descriptors(self) -> list[LintDescriptor]:
        return [LintDescriptor.from_metadata(meta) for meta in self.lints()]

    def write_json(self, sink: TextIO) -> None:
        """Write one JSON descriptor per line, in name order."""
        for descriptor in self.descriptors():
            sink.write(descriptor.model_dump_json())
            sink.write("\n")

    def __len__(self) -> int:
        return len(self._lints)

    def __contains__(self, name: object) -> bool:
        return name in self._lints

    def __iter__(self) -> Iterator[LintMetadata]:
        return iter(self.lints())


def default_registry() -> LintRegistry:
    """Build a registry from every lint in DEFAULT_LINTS."""
    return LintRegistry(DEFAULT_LINTS)
