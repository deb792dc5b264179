# SPDX-License-Identifier: MIT
"""Severity aggregation — counts lint results above a threshold for summary reports."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from certlint.lints.base import LintStatus
from certlint.lints.engine import ResultSet


@dataclass(frozen=True)
class ResultsTable:
    """Per-status finding counts above a threshold."""

    threshold: LintStatus
    counts: dict[LintStatus, int]
    details: dict[LintStatus, list[str]] = field(default_factory=dict)
    levels: list[LintStatus] = field(default_factory=list)

    @property
    def total(self) -> int:
        return sum(self.counts.values())


def summarize(
    results: ResultSet,
    threshold: LintStatus = LintStatus.PASS,
    verbose: bool = False,
    levels: Iterable[LintStatus] | None = None,
) -> ResultsTable:
    """Count results whose status is strictly above *threshold*.

    Every level of interest above the threshold is reported even with a zero
    count, so reports keep the same shape across certificates. By default the
    levels of interest are all statuses; pass *levels* to narrow them. With
    *verbose*, the contributing lint names are listed per level in name order.
    """
    interest = list(LintStatus) if levels is None else list(levels)
    counts: dict[LintStatus, int] = {s: 0 for s in interest if s > threshold}
    details: dict[LintStatus, list[str]] = {}

    for name in sorted(results.results):
        status = results.results[name].status
        if status <= threshold:
            continue
        counts[status] = counts.get(status, 0) + 1
        if verbose:
            details.setdefault(status, []).append(name)

    return ResultsTable(
        threshold=threshold,
        counts=counts,
        details=details,
        levels=sorted(counts),
    )
