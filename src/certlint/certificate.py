# SPDX-License-Identifier: MIT
"""Certificate model consumed by lints, and the adapter that builds it from X.509 data.

Lints never see raw DER. They receive a frozen ``Certificate`` exposing the
fields they need: subject/issuer attributes, extensions (OID, critical flag,
raw value), validity period, policy identifiers, SAN dNSNames, and CA
classification.
"""

from __future__ import annotations

import base64
import binascii
from dataclasses import dataclass, field
from datetime import UTC, datetime

from cryptography import x509
from cryptography.hazmat.primitives.serialization import Encoding
from cryptography.x509.oid import ExtensionOID

_FORMATS = ("pem", "der", "base64")


class CertificateParseError(ValueError):
    """Raised when input bytes cannot be turned into a Certificate."""


def as_utc(value: datetime) -> datetime:
    """Return *value* unchanged if timezone-aware, else the same wall time in UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


@dataclass(frozen=True)
class NameAttribute:
    """A single attribute of a distinguished name."""

    oid: str  # Dotted-string OID, e.g. "2.5.4.10"
    value: str


@dataclass(frozen=True)
class Name:
    """A distinguished name as an ordered tuple of attributes."""

    attributes: tuple[NameAttribute, ...] = ()

    def has(self, oid: str) -> bool:
        return any(a.oid == oid for a in self.attributes)

    def values_for(self, oid: str) -> list[str]:
        return [a.value for a in self.attributes if a.oid == oid]


@dataclass(frozen=True)
class Extension:
    """An X.509v3 extension."""

    oid: str
    critical: bool
    value: bytes = b""


@dataclass(frozen=True)
class Certificate:
    """Already-parsed certificate. Lints must treat it as read-only."""

    subject: Name
    issuer: Name
    not_before: datetime
    not_after: datetime
    extensions: tuple[Extension, ...] = ()
    policy_identifiers: tuple[str, ...] = ()
    dns_names: tuple[str, ...] = ()
    is_ca: bool = False
    serial_number: int = 0
    raw: bytes = field(default=b"", repr=False, compare=False)

    def __post_init__(self) -> None:
        # Naive validity times are taken as UTC so they compare with effective dates
        object.__setattr__(self, "not_before", as_utc(self.not_before))
        object.__setattr__(self, "not_after", as_utc(self.not_after))

    @property
    def self_issued(self) -> bool:
        """Return True if subject and issuer are the same name."""
        return self.subject == self.issuer

    def extension(self, oid: str) -> Extension | None:
        for ext in self.extensions:
            if ext.oid == oid:
                return ext
        return None


# --- cryptography adapter ---


def _convert_name(name: x509.Name) -> Name:
    attrs: list[NameAttribute] = []
    for attr in name:
        value = attr.value
        if isinstance(value, bytes):
            value = value.decode("utf-8", errors="replace")
        attrs.append(NameAttribute(oid=attr.oid.dotted_string, value=value))
    return Name(attributes=tuple(attrs))


def _raw_extension_value(ext: x509.Extension[x509.ExtensionType]) -> bytes:
    if isinstance(ext.value, x509.UnrecognizedExtension):
        return ext.value.value
    return ext.value.public_bytes()


def from_x509(cert: x509.Certificate) -> Certificate:
    """Build a Certificate from a ``cryptography`` certificate object.

    Raises:
        CertificateParseError: If the extensions cannot be decoded.
    """
    try:
        extensions = list(cert.extensions)
    except ValueError as exc:
        msg = f"unable to decode certificate extensions: {exc}"
        raise CertificateParseError(msg) from exc

    policies: tuple[str, ...] = ()
    dns_names: tuple[str, ...] = ()
    is_ca = False
    for ext in extensions:
        if ext.oid == ExtensionOID.CERTIFICATE_POLICIES:
            policies = tuple(p.policy_identifier.dotted_string for p in ext.value)
        elif ext.oid == ExtensionOID.SUBJECT_ALTERNATIVE_NAME:
            dns_names = tuple(ext.value.get_values_for_type(x509.DNSName))
        elif ext.oid == ExtensionOID.BASIC_CONSTRAINTS:
            is_ca = ext.value.ca

    return Certificate(
        subject=_convert_name(cert.subject),
        issuer=_convert_name(cert.issuer),
        not_before=cert.not_valid_before_utc,
        not_after=cert.not_valid_after_utc,
        extensions=tuple(
            Extension(oid=e.oid.dotted_string, critical=e.critical, value=_raw_extension_value(e))
            for e in extensions
        ),
        policy_identifiers=policies,
        dns_names=dns_names,
        is_ca=is_ca,
        serial_number=cert.serial_number,
        raw=cert.public_bytes(Encoding.DER),
    )


def load_certificate(data: bytes, fmt: str = "pem") -> Certificate:
    """Decode *data* in the given format (pem, der, base64) into a Certificate.

    Raises:
        CertificateParseError: On unknown format or undecodable input.
    """
    fmt = fmt.lower()
    if fmt not in _FORMATS:
        msg = f"Unknown input format: {fmt!r}. Valid formats: {list(_FORMATS)}"
        raise CertificateParseError(msg)

    if fmt == "base64":
        try:
            data = base64.b64decode(b"".join(data.split()), validate=True)
        except binascii.Error as exc:
            msg = f"unable to parse base64: {exc}"
            raise CertificateParseError(msg) from exc
        fmt = "der"

    try:
        if fmt == "pem":
            cert = x509.load_pem_x509_certificate(data)
        else:
            cert = x509.load_der_x509_certificate(data)
    except ValueError as exc:
        msg = f"unable to parse certificate: {exc}"
        raise CertificateParseError(msg) from exc
    return from_x509(cert)


def format_for_path(path: str, default: str) -> str:
    """Infer input format from a file suffix, falling back to *default*."""
    if path.endswith(".der"):
        return "der"
    if path.endswith(".pem"):
        return "pem"
    return default
