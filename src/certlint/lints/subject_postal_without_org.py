# SPDX-License-Identifier: MIT
"""subject_postal_without_org — postalCode in subject requires organizationName.

If organizationName is absent, the certificate MUST NOT contain a
streetAddress, localityName, stateOrProvinceName, or postalCode attribute.
"""

from __future__ import annotations

from certlint.certificate import Certificate
from certlint.lints import util
from certlint.lints.base import LintMetadata, LintSource, LintStatus, Verdict


class SubjectPostalWithoutOrgLint:
    """Flag a subject postalCode without an organizationName."""

    def initialize(self) -> None:
        pass

    def applies(self, cert: Certificate) -> bool:
        return True

    def execute(self, cert: Certificate) -> Verdict:
        if util.type_in_name(cert.subject, util.POSTAL_CODE_OID) and not util.type_in_name(
            cert.subject, util.ORGANIZATION_NAME_OID
        ):
            return Verdict(LintStatus.ERROR)
        return Verdict(LintStatus.PASS)


LINT = LintMetadata(
    name="subject_postal_without_org",
    description="The postal code must not be included without an organization name.",
    citation="BRs: 7.1.4.2.2",
    source=LintSource.CABF_BASELINE_REQUIREMENTS,
    effective_date=util.CAB_EFFECTIVE_DATE,
    lint=SubjectPostalWithoutOrgLint(),
)
