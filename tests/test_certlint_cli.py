# SPDX-License-Identifier: MIT
"""Tests for certlint.cli — end-to-end command line behaviour."""

from __future__ import annotations

import json
from datetime import UTC, datetime
from pathlib import Path

import pytest
from cryptography import x509
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.serialization import Encoding
from cryptography.x509.oid import NameOID

from certlint.cli import main

_ENV_VARS = (
    "CERTLINT_NAME_FILTER",
    "CERTLINT_INCLUDE_NAMES",
    "CERTLINT_EXCLUDE_NAMES",
    "CERTLINT_INCLUDE_SOURCES",
    "CERTLINT_EXCLUDE_SOURCES",
    "CERTLINT_THRESHOLD",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for var in _ENV_VARS:
        monkeypatch.delenv(var, raising=False)


def _write_cert(tmp_path: Path, *, postal: bool, encoding: Encoding = Encoding.PEM) -> Path:
    key = ec.generate_private_key(ec.SECP256R1())
    attrs = [x509.NameAttribute(NameOID.COMMON_NAME, "example.com")]
    if postal:
        attrs.append(x509.NameAttribute(NameOID.POSTAL_CODE, "12345"))
    cert = (
        x509.CertificateBuilder()
        .subject_name(x509.Name(attrs))
        .issuer_name(x509.Name([x509.NameAttribute(NameOID.COMMON_NAME, "Issuing CA")]))
        .public_key(key.public_key())
        .serial_number(7)
        .not_valid_before(datetime(2020, 1, 1, tzinfo=UTC))
        .not_valid_after(datetime(2021, 1, 1, tzinfo=UTC))
        .add_extension(x509.BasicConstraints(ca=False, path_length=None), critical=True)
        .sign(key, hashes.SHA256())
    )
    suffix = ".pem" if encoding == Encoding.PEM else ".der"
    path = tmp_path / f"cert{suffix}"
    path.write_bytes(cert.public_bytes(encoding))
    return path


class TestListing:
    def test_list_lints_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--list-lints-json"]) == 0
        lines = capsys.readouterr().out.splitlines()
        names = [json.loads(line)["name"] for line in lines]
        assert "subject_postal_without_org" in names
        assert names == sorted(names)

    def test_list_lints_json_respects_filter(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--list-lints-json", "--include-sources", "CAB_EV"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert [json.loads(line)["name"] for line in lines] == ["ev_valid_time_too_long"]

    def test_list_sources(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--list-lints-source"]) == 0
        assert capsys.readouterr().out.split() == ["CAB", "CAB_EV"]


class TestLinting:
    def test_json_output(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = _write_cert(tmp_path, postal=True)
        assert main([str(path)]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["subject_postal_without_org"] == {"result": "error"}
        assert data["ev_valid_time_too_long"] == {"result": "NA"}

    def test_der_suffix_overrides_format(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        path = _write_cert(tmp_path, postal=False, encoding=Encoding.DER)
        assert main(["--format", "pem", str(path)]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["subject_postal_without_org"] == {"result": "pass"}

    def test_include_names(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = _write_cert(tmp_path, postal=True)
        assert main(["--include-names", "subject_postal_without_org", str(path)]) == 0
        assert list(json.loads(capsys.readouterr().out)) == ["subject_postal_without_org"]

    def test_summary(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = _write_cert(tmp_path, postal=True)
        assert main(["--summary", str(path)]) == 0
        out = capsys.readouterr().out
        assert "| LEVEL | # OCCURRENCES |" in out
        rows = [[c.strip() for c in line.split("|")[1:-1]] for line in out.splitlines()[2:]]
        assert ["error", "1"] in rows
        assert ["warn", "0"] in rows

    def test_long_summary(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = _write_cert(tmp_path, postal=True)
        assert main(["--long-summary", str(path)]) == 0
        assert "subject_postal_without_org" in capsys.readouterr().out


class TestErrors:
    def test_conflicting_filters(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--name-filter", "ev", "--exclude-names", "ev_valid_time_too_long"]) == 1
        assert "cannot be used together" in capsys.readouterr().err

    def test_unknown_source(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--include-sources", "Nope", "--list-lints-json"]) == 1
        assert "Unknown lint source" in capsys.readouterr().err

    def test_bad_threshold(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = _write_cert(tmp_path, postal=True)
        assert main(["--summary", "--threshold", "severe", str(path)]) == 1
        err = capsys.readouterr().err
        assert "invalid summary threshold" in err
        assert "included/excluded" not in err

    def test_bad_threshold_env_does_not_block_listing(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setenv("CERTLINT_THRESHOLD", "severe")
        assert main(["--list-lints-json"]) == 0
        assert "subject_postal_without_org" in capsys.readouterr().out

    def test_missing_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([str(tmp_path / "missing.pem")]) == 1
        assert "unable to open file" in capsys.readouterr().err

    def test_unparseable_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = tmp_path / "junk.pem"
        path.write_text("junk")
        assert main([str(path)]) == 1
        assert "unable to parse certificate" in capsys.readouterr().err
