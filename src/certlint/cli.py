# SPDX-License-Identifier: MIT
"""certlint command line — lint certificates from files or stdin.

Usage:
    certlint [flags] [file ...]      # no files or "-" reads stdin

Environment variables:
    CERTLINT_LOG_LEVEL         — logging level (default: WARNING)
    CERTLINT_NAME_FILTER       — regex; only lints with matching names run
    CERTLINT_INCLUDE_NAMES     — comma-separated lint names to include
    CERTLINT_EXCLUDE_NAMES     — comma-separated lint names to exclude
    CERTLINT_INCLUDE_SOURCES   — comma-separated lint sources to include
    CERTLINT_EXCLUDE_SOURCES   — comma-separated lint sources to exclude
    CERTLINT_THRESHOLD         — summary threshold status (default: pass)

Flags take priority over environment variables.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import BinaryIO, TextIO

from certlint.certificate import CertificateParseError, format_for_path, load_certificate
from certlint.lints import (
    ConfigurationError,
    LintEngine,
    LintStatus,
    load_filter_options,
    load_threshold,
)
from certlint.lints.registry import LintRegistry, default_registry
from certlint.lints.report import summarize
from certlint.output import format_long_summary_table, format_results_json, format_summary_table


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="certlint", description="X.509 certificate linter")
    parser.add_argument("files", nargs="*", help="Certificate files (default: stdin)")
    parser.add_argument(
        "--list-lints-json",
        action="store_true",
        help="Print lints in JSON format, one per line",
    )
    parser.add_argument(
        "--list-lints-source",
        action="store_true",
        help="Print list of lint sources, one per line",
    )
    output = parser.add_mutually_exclusive_group()
    output.add_argument("--pretty", action="store_true", help="Pretty-print JSON output")
    output.add_argument(
        "--summary", action="store_true", help="Print a short human-readable summary report"
    )
    output.add_argument(
        "--long-summary",
        action="store_true",
        help="Print a human-readable summary report with details",
    )
    parser.add_argument(
        "--format", choices=["pem", "der", "base64"], default="pem", help="Input format"
    )
    parser.add_argument(
        "--name-filter",
        default=None,
        help="Only run lints with a name matching this regex (not with --include/--exclude-names)",
    )
    parser.add_argument("--include-names", default=None, help="Comma-separated lints to include")
    parser.add_argument("--exclude-names", default=None, help="Comma-separated lints to exclude")
    parser.add_argument(
        "--include-sources", default=None, help="Comma-separated lint sources to include"
    )
    parser.add_argument(
        "--exclude-sources", default=None, help="Comma-separated lint sources to exclude"
    )
    parser.add_argument(
        "--threshold",
        default=None,
        help="Summary threshold; only statuses above it are counted (default: pass)",
    )
    return parser


def select_lints(args: argparse.Namespace) -> LintRegistry:
    """Apply filter flags (and env fallbacks) to the default registry.

    Raises:
        ConfigurationError: On invalid or conflicting filter settings.
    """
    opts = load_filter_options(
        name_filter=args.name_filter,
        include_names=args.include_names,
        exclude_names=args.exclude_names,
        include_sources=args.include_sources,
        exclude_sources=args.exclude_sources,
    )
    return default_registry().filter(opts)


def lint_stream(
    stream: BinaryIO,
    fmt: str,
    engine: LintEngine,
    args: argparse.Namespace,
    threshold: LintStatus,
    out: TextIO,
) -> None:
    """Read one certificate from *stream*, lint it, and write the report to *out*."""
    cert = load_certificate(stream.read(), fmt)
    results = engine.lint(cert)
    if args.summary:
        out.write(format_summary_table(summarize(results, threshold)))
    elif args.long_summary:
        out.write(format_long_summary_table(summarize(results, threshold, verbose=True)))
    else:
        out.write(format_results_json(results, pretty=args.pretty))
    out.write("\n")


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns the process exit code."""
    logging.basicConfig(
        level=os.environ.get("CERTLINT_LOG_LEVEL", "WARNING").upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )
    args = build_parser().parse_args(argv)

    try:
        registry = select_lints(args)
    except ConfigurationError as exc:
        print(f"error: unable to configure included/excluded lints: {exc}", file=sys.stderr)
        return 1

    if args.list_lints_json:
        registry.write_json(sys.stdout)
        return 0
    if args.list_lints_source:
        for source in registry.sources():
            print(f"    {source.value}")
        return 0

    try:
        threshold = load_threshold(args.threshold)
    except ConfigurationError as exc:
        print(f"error: invalid summary threshold: {exc}", file=sys.stderr)
        return 1

    engine = LintEngine(registry)
    paths = args.files or ["-"]
    for path in paths:
        try:
            if path == "-":
                lint_stream(sys.stdin.buffer, args.format, engine, args, threshold, sys.stdout)
                continue
            with open(path, "rb") as f:
                lint_stream(f, format_for_path(path, args.format), engine, args, threshold, sys.stdout)
        except OSError as exc:
            print(f"error: unable to open file {path}: {exc}", file=sys.stderr)
            return 1
        except CertificateParseError as exc:
            print(f"error: {path}: {exc}", file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
