# SPDX-License-Identifier: MIT
"""sub_ca_name_constraints_not_critical — nameConstraints on a subordinate CA should be critical."""

from __future__ import annotations

from certlint.certificate import Certificate
from certlint.lints import util
from certlint.lints.base import LintMetadata, LintSource, LintStatus, Verdict


class SubCaNameConstraintsNotCriticalLint:
    """Warn when a subordinate CA carries a non-critical nameConstraints extension."""

    def initialize(self) -> None:
        pass

    def applies(self, cert: Certificate) -> bool:
        return util.is_sub_ca(cert) and util.is_ext_in_cert(cert, util.NAME_CONSTRAINTS_OID)

    def execute(self, cert: Certificate) -> Verdict:
        ext = util.get_extension(cert, util.NAME_CONSTRAINTS_OID)
        if ext is not None and ext.critical:
            return Verdict(LintStatus.PASS)
        return Verdict(LintStatus.WARN)


LINT = LintMetadata(
    name="sub_ca_name_constraints_not_critical",
    description=(
        "Subordinate CA certificate nameConstraints extension should be marked critical if present"
    ),
    citation="BRs: 7.1.2.2",
    source=LintSource.CABF_BASELINE_REQUIREMENTS,
    effective_date=util.CAB_V102_DATE,
    lint=SubCaNameConstraintsNotCriticalLint(),
)
