# SPDX-License-Identifier: MIT
"""Shared OIDs, effective dates, and certificate predicates used by lints."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

from certlint.certificate import Certificate, Extension, Name

# --- Attribute and extension OIDs ---

ORGANIZATION_NAME_OID = "2.5.4.10"
POSTAL_CODE_OID = "2.5.4.17"
COMMON_NAME_OID = "2.5.4.3"
COUNTRY_NAME_OID = "2.5.4.6"

BASIC_CONSTRAINTS_OID = "2.5.29.19"
NAME_CONSTRAINTS_OID = "2.5.29.30"
CERT_POLICY_OID = "2.5.29.32"
SUBJECT_ALT_NAME_OID = "2.5.29.17"

# --- Effective dates ---

ZERO_DATE = datetime(1, 1, 1, tzinfo=UTC)  # Always in effect
NEVER_DATE = datetime.max.replace(tzinfo=UTC)  # Never in effect (disabled)

RFC5280_DATE = datetime(2008, 5, 1, tzinfo=UTC)
CAB_EFFECTIVE_DATE = datetime(2012, 7, 1, tzinfo=UTC)
CAB_V102_DATE = datetime(2013, 6, 8, tzinfo=UTC)

# CA/B Forum reserved EV OID plus issuer-specific EV policy OIDs
EV_POLICY_OIDS: frozenset[str] = frozenset(
    {
        "2.23.140.1.1",  # CA/Browser Forum EV
        "1.3.6.1.4.1.34697.2.1",  # AffirmTrust
        "1.3.6.1.4.1.6449.1.2.1.5.1",  # Comodo / Sectigo
        "1.3.6.1.4.1.14370.1.6",  # GeoTrust
        "1.3.6.1.4.1.4146.1.1",  # GlobalSign
        "2.16.840.1.113733.1.7.23.6",  # VeriSign / Symantec
        "2.16.840.1.113733.1.7.48.1",  # Thawte
        "2.16.840.1.114028.10.1.2",  # Entrust
        "2.16.840.1.114412.2.1",  # DigiCert
        "2.16.840.1.114413.1.7.23.3",  # GoDaddy
        "2.16.840.1.114414.1.7.23.3",  # Starfield
    }
)


def is_ev(policy_identifiers: tuple[str, ...] | list[str]) -> bool:
    """Return True if any policy identifier is a known EV policy."""
    return any(oid in EV_POLICY_OIDS for oid in policy_identifiers)


def is_ca_cert(cert: Certificate) -> bool:
    return cert.is_ca


def is_root_ca(cert: Certificate) -> bool:
    return cert.is_ca and cert.self_issued


def is_sub_ca(cert: Certificate) -> bool:
    return cert.is_ca and not cert.self_issued


def is_subscriber_cert(cert: Certificate) -> bool:
    return not cert.is_ca and not cert.self_issued


def is_ext_in_cert(cert: Certificate, oid: str) -> bool:
    return cert.extension(oid) is not None


def get_extension(cert: Certificate, oid: str) -> Extension | None:
    return cert.extension(oid)


def type_in_name(name: Name, oid: str) -> bool:
    """Return True if the name carries at least one attribute of the given type."""
    return name.has(oid)


def add_date(dt: datetime, years: int = 0, months: int = 0, days: int = 0) -> datetime:
    """Add calendar years, months and days to *dt*.

    Day overflow rolls into the following month (Jan 31 + 1 month = Mar 3
    in a non-leap year) instead of clamping to the month end.
    """
    month_index = dt.month - 1 + months
    year = dt.year + years + month_index // 12
    month = month_index % 12 + 1
    first = dt.replace(year=year, month=month, day=1)
    return first + timedelta(days=dt.day - 1 + days)
