# SPDX-License-Identifier: MIT
"""dnsname_bad_character_in_label — dNSName labels are limited to alphanumerics, '-', '_' and '*'."""

from __future__ import annotations

import re

from certlint.certificate import Certificate
from certlint.lints import util
from certlint.lints.base import LintMetadata, LintSource, LintStatus, Verdict

_DNS_NAME_PATTERN = r"^(\*\.)?(\?\.)*([A-Za-z0-9*_-]+\.)*[A-Za-z0-9*_-]*\Z"


class DnsNameBadCharacterInLabelLint:
    """Error on any SAN dNSName containing characters outside the allowed label set."""

    def __init__(self) -> None:
        self._pattern: re.Pattern[str] | None = None

    def initialize(self) -> None:
        self._pattern = re.compile(_DNS_NAME_PATTERN)

    def applies(self, cert: Certificate) -> bool:
        return util.is_subscriber_cert(cert) and bool(cert.dns_names)

    def execute(self, cert: Certificate) -> Verdict:
        if self._pattern is None:
            msg = "lint used before initialize()"
            raise RuntimeError(msg)
        for dns_name in cert.dns_names:
            if not self._pattern.match(dns_name):
                return Verdict(LintStatus.ERROR, details=f"bad character in dNSName {dns_name!r}")
        return Verdict(LintStatus.PASS)


LINT = LintMetadata(
    name="dnsname_bad_character_in_label",
    description="Characters in labels of DNSNames MUST be alphanumeric, - , _ or *",
    citation="BRs: 7.1.4.2",
    source=LintSource.CABF_BASELINE_REQUIREMENTS,
    effective_date=util.CAB_EFFECTIVE_DATE,
    lint=DnsNameBadCharacterInLabelLint(),
)
