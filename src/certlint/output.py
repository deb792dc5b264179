# SPDX-License-Identifier: MIT
"""Output formatters — JSON result records and human-readable summary tables."""

from __future__ import annotations

import json

import navi_sanitize

from certlint.lints.engine import ResultSet
from certlint.lints.report import ResultsTable


def _clean(text: str) -> str:
    """Strip invisible/bidi characters from certificate-derived text before display."""
    return navi_sanitize.clean(text)


def format_results_json(results: ResultSet, *, pretty: bool = False) -> str:
    """Render a ResultSet as a JSON object keyed by lint name."""
    if pretty:
        return json.dumps(results.to_dict(), indent=1)
    return json.dumps(results.to_dict(), separators=(",", ":"))


def _table(headings: list[str], rows: list[list[str]]) -> str:
    """Render a fixed-width table; column widths come from the headings."""
    widths = [len(h) + 1 for h in headings]
    lines = ["".join(f"| {h.upper()} " for h in headings) + "|"]
    lines.append("".join(f"+{'-' * (w + 1)}" for w in widths) + "+")
    for row in rows:
        cells = [f"|{cell[:w]:>{w}}" for cell, w in zip(row, widths, strict=True)]
        lines.append(" ".join(cells) + " |")
    return "\n".join(lines)


def format_summary_table(table: ResultsTable) -> str:
    """Short summary: one row per level with its count."""
    rows = [[lvl.label, str(table.counts.get(lvl, 0))] for lvl in table.levels]
    return _table(["Level", "# occurrences"], rows)


def format_long_summary_table(table: ResultsTable) -> str:
    """Long summary: lint names grouped under each level; empty levels shown with ' - '."""
    headings = ["Level", "# occurrences", "                      Details                      "]
    rows: list[list[str]] = []
    for lvl in table.levels:
        names = table.details.get(lvl, [])
        count = str(table.counts.get(lvl, 0))
        if not names:
            rows.append([lvl.label, count, " - "])
            continue
        for i, name in enumerate(names):
            if i == 0:
                rows.append([lvl.label, count, _clean(name)])
            else:
                rows.append(["", "", _clean(name)])
    return _table(headings, rows)
