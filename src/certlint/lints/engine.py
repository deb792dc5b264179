# SPDX-License-Identifier: MIT
"""Lint engine — runs a registry's lints against a certificate and collects a ResultSet.

Execution is sequential in registry name order. Each lint object is
initialized at most once per process, however many engines or filtered
registries share it, and the outcome is cached for every later certificate.
Registries and lint metadata are read-only during a run; lints must keep the
state they build in ``initialize()`` immutable afterwards.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from certlint.lints.base import Lint, LintMetadata, LintResult, LintStatus, Malfunction, Verdict

if TYPE_CHECKING:
    from certlint.certificate import Certificate
    from certlint.lints.registry import LintRegistry

log = logging.getLogger(__name__)

# Statuses a lint may not report for itself
_ENGINE_ONLY_STATUSES = frozenset({LintStatus.RESERVED, LintStatus.NA, LintStatus.NE})

# id(lint) -> (lint, error text or None); holding the lint keeps its id from being reused
_init_outcomes: dict[int, tuple[Lint, str | None]] = {}
_init_lock = threading.Lock()


@dataclass
class ResultSet:
    """Outcome of one lint pass over one certificate, keyed by lint name."""

    results: dict[str, LintResult] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.results)

    def __contains__(self, name: object) -> bool:
        return name in self.results

    def __getitem__(self, name: str) -> LintResult:
        return self.results[name]

    def statuses(self) -> dict[str, LintStatus]:
        return {name: result.status for name, result in self.results.items()}

    def _any(self, status: LintStatus) -> bool:
        return any(r.status == status for r in self.results.values())

    @property
    def notices_present(self) -> bool:
        return self._any(LintStatus.NOTICE)

    @property
    def warnings_present(self) -> bool:
        return self._any(LintStatus.WARN)

    @property
    def errors_present(self) -> bool:
        return self._any(LintStatus.ERROR)

    @property
    def fatals_present(self) -> bool:
        return self._any(LintStatus.FATAL)

    def to_dict(self) -> dict[str, dict[str, Any]]:
        """Return ``{name: {"result": label, "details": ...}}`` for JSON output."""
        out: dict[str, dict[str, Any]] = {}
        for name, result in self.results.items():
            entry: dict[str, Any] = {"result": result.status.label}
            if result.details:
                entry["details"] = result.details
            out[name] = entry
        return out


class LintEngine:
    """Runs lints from a registry against certificates with per-lint fault isolation."""

    def __init__(self, registry: LintRegistry) -> None:
        self._registry = registry

    @property
    def registry(self) -> LintRegistry:
        return self._registry

    def lint(self, cert: Certificate, *, include_skipped: bool = True) -> ResultSet:
        """Run every lint in the registry against *cert*.

        Lints that are not yet effective for the certificate's notBefore are
        recorded as NE, and lints that do not apply as NA; with
        ``include_skipped=False`` both are omitted. A lint that raises is
        recorded as a Malfunction and the pass continues.
        """
        results = ResultSet()
        for meta in self._registry.lints():
            result = self._run_one(meta, cert)
            if not include_skipped and result.status in (LintStatus.NA, LintStatus.NE):
                continue
            results.results[meta.name] = result
        log.debug("Linted certificate serial=%s: %d results", cert.serial_number, len(results))
        return results

    def _run_one(self, meta: LintMetadata, cert: Certificate) -> LintResult:
        if not meta.is_effective(cert.not_before):
            return Verdict(LintStatus.NE)

        try:
            applies = meta.lint.applies(cert)
        except Exception as exc:
            log.warning("Lint %s failed in applies(): %s", meta.name, exc)
            return Malfunction(cause=_describe(exc), phase="applies")
        if not applies:
            return Verdict(LintStatus.NA)

        init_error = _initialize(meta)
        if init_error is not None:
            return Malfunction(cause=init_error, phase="initialize")

        try:
            result = meta.lint.execute(cert)
        except Exception as exc:
            log.warning("Lint %s failed in execute(): %s", meta.name, exc)
            return Malfunction(cause=_describe(exc), phase="execute")

        if not isinstance(result, Verdict):
            log.warning("Lint %s returned %r instead of a Verdict", meta.name, result)
            return Malfunction(cause=f"returned {type(result).__name__}", phase="execute")
        if result.status in _ENGINE_ONLY_STATUSES:
            log.warning("Lint %s reported engine-only status %s", meta.name, result.status)
            return Malfunction(cause=f"reported status {result.status.label}", phase="execute")
        return result


def _initialize(meta: LintMetadata) -> str | None:
    """Initialize a lint object once; return the cached error text, or None on success."""
    key = id(meta.lint)
    with _init_lock:
        cached = _init_outcomes.get(key)
        if cached is not None:
            return cached[1]
        error: str | None = None
        try:
            meta.lint.initialize()
        except Exception as exc:
            error = _describe(exc)
            log.warning("Lint %s disabled: initialize() failed: %s", meta.name, error)
        _init_outcomes[key] = (meta.lint, error)
        return error


def _describe(exc: BaseException) -> str:
    text = str(exc)
    return f"{type(exc).__name__}: {text}" if text else type(exc).__name__
