"""certlint — X.509 certificate compliance linter."""

from certlint.certificate import (
    Certificate,
    CertificateParseError,
    Extension,
    Name,
    NameAttribute,
    from_x509,
    load_certificate,
)
from certlint.lints import (
    FilterOptions,
    LintEngine,
    LintRegistry,
    LintStatus,
    ResultSet,
    ResultsTable,
    default_registry,
    summarize,
)

__all__ = [
    "Certificate",
    "CertificateParseError",
    "Extension",
    "FilterOptions",
    "LintEngine",
    "LintRegistry",
    "LintStatus",
    "Name",
    "NameAttribute",
    "ResultSet",
    "ResultsTable",
    "default_registry",
    "from_x509",
    "lint_certificate",
    "load_certificate",
    "summarize",
]


def lint_certificate(cert: Certificate, registry: LintRegistry | None = None) -> ResultSet:
    """Convenience: run every lint in *registry* (default: all lints) against *cert*."""
    engine = LintEngine(registry if registry is not None else default_registry())
    return engine.lint(cert)
