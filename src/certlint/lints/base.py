# SPDX-License-Identifier: MIT
"""Lint status, result sum type, Lint protocol, and lint metadata descriptor."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from enum import IntEnum, StrEnum
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from certlint.certificate import Certificate


class LintStatus(IntEnum):
    """Outcome of a lint, ordered for threshold comparison."""

    RESERVED = 0
    NA = 1
    NE = 2
    PASS = 3
    NOTICE = 4
    WARN = 5
    ERROR = 6
    FATAL = 7

    @property
    def label(self) -> str:
        return _STATUS_LABELS[self]

    @classmethod
    def from_label(cls, label: str) -> LintStatus:
        """Parse a status label (``pass``, ``warn``, ``NA`` ...) case-insensitively."""
        key = label.strip().lower()
        for status, status_label in _STATUS_LABELS.items():
            if status_label.lower() == key:
                return status
        msg = f"Unknown lint status: {label!r}. Valid statuses: {[s.label for s in cls]}"
        raise ValueError(msg)

    def __str__(self) -> str:
        return self.label


_STATUS_LABELS: dict[LintStatus, str] = {
    LintStatus.RESERVED: "reserved",
    LintStatus.NA: "NA",
    LintStatus.NE: "NE",
    LintStatus.PASS: "pass",
    LintStatus.NOTICE: "notice",
    LintStatus.WARN: "warn",
    LintStatus.ERROR: "error",
    LintStatus.FATAL: "fatal",
}


class LintSource(StrEnum):
    """Document or body a lint derives from."""

    CABF_BASELINE_REQUIREMENTS = "CAB"
    CABF_EV_GUIDELINES = "CAB_EV"
    RFC5280 = "RFC5280"
    MOZILLA = "Mozilla"
    COMMUNITY = "Community"


@dataclass(frozen=True)
class Verdict:
    """The result a lint reports about a certificate."""

    status: LintStatus
    details: str | None = None


@dataclass(frozen=True)
class Malfunction:
    """A lint that failed to produce a verdict.

    Only the engine builds these. They always report as FATAL.
    """

    cause: str
    phase: str  # "initialize" | "applies" | "execute"

    @property
    def status(self) -> LintStatus:
        return LintStatus.FATAL

    @property
    def details(self) -> str:
        return f"{self.phase} failed: {self.cause}"


LintResult = Verdict | Malfunction


@runtime_checkable
class Lint(Protocol):
    """Protocol that every certificate lint must satisfy."""

    def initialize(self) -> None: ...

    def applies(self, cert: Certificate) -> bool: ...

    def execute(self, cert: Certificate) -> Verdict: ...


@dataclass(frozen=True)
class LintMetadata:
    """Registration record for one lint: identity, provenance, and the lint object."""

    name: str
    description: str
    citation: str
    source: LintSource
    effective_date: datetime
    lint: Lint

    def __post_init__(self) -> None:
        if self.effective_date.tzinfo is None:
            object.__setattr__(self, "effective_date", self.effective_date.replace(tzinfo=UTC))

    def is_effective(self, reference: datetime) -> bool:
        """Return True if the lint applies to certificates issued at *reference*."""
        return self.effective_date <= reference
