# SPDX-License-Identifier: MIT
"""ev_valid_time_too_long — EV certificates are limited to 27 months of validity."""

from __future__ import annotations

from certlint.certificate import Certificate
from certlint.lints import util
from certlint.lints.base import LintMetadata, LintSource, LintStatus, Verdict

MAX_VALIDITY_MONTHS = 27


class EvValidTimeTooLongLint:
    """Flag EV certificates whose notAfter exceeds notBefore + 27 months."""

    def initialize(self) -> None:
        pass

    def applies(self, cert: Certificate) -> bool:
        return util.is_ev(cert.policy_identifiers)

    def execute(self, cert: Certificate) -> Verdict:
        limit = util.add_date(cert.not_before, months=MAX_VALIDITY_MONTHS)
        if limit < cert.not_after:
            return Verdict(
                LintStatus.ERROR,
                details=f"validity ends {cert.not_after.date()}, limit is {limit.date()}",
            )
        return Verdict(LintStatus.PASS)


LINT = LintMetadata(
    name="ev_valid_time_too_long",
    description="EV certificates must be 27 months in validity or less",
    citation="EVGs: 9.4",
    source=LintSource.CABF_EV_GUIDELINES,
    effective_date=util.ZERO_DATE,
    lint=EvValidTimeTooLongLint(),
)
