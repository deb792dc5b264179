# SPDX-License-Identifier: MIT
"""Tests for certlint.lints.config — filter option and threshold loading."""

from __future__ import annotations

import pytest

from certlint.lints.base import LintSource, LintStatus
from certlint.lints.config import (
    ConfigurationError,
    FilterOptions,
    load_filter_options,
    load_threshold,
    parse_sources,
    trimmed_list,
)

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


class TestParsing:
    def test_trimmed_list(self) -> None:
        assert trimmed_list(" a, b ,c,, ") == ["a", "b", "c"]
        assert trimmed_list("") == []

    def test_parse_sources(self) -> None:
        assert parse_sources("CAB, RFC5280") == frozenset(
            {LintSource.CABF_BASELINE_REQUIREMENTS, LintSource.RFC5280}
        )

    def test_parse_unknown_source_raises(self) -> None:
        with pytest.raises(ConfigurationError, match="Unknown lint source"):
            parse_sources("CAB,Bogus")


class TestLoadFilterOptions:
    def test_defaults_are_empty(self) -> None:
        assert load_filter_options().is_empty()
        assert FilterOptions().is_empty()

    def test_cli_values(self) -> None:
        opts = load_filter_options(include_names="a, b", exclude_sources="CAB_EV")
        assert opts.include_names == frozenset({"a", "b"})
        assert opts.exclude_sources == frozenset({LintSource.CABF_EV_GUIDELINES})
        assert not opts.is_empty()

    def test_env_fallback(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CERTLINT_EXCLUDE_NAMES", "x,y")
        opts = load_filter_options()
        assert opts.exclude_names == frozenset({"x", "y"})

    def test_cli_overrides_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CERTLINT_INCLUDE_SOURCES", "RFC5280")
        opts = load_filter_options(include_sources="CAB")
        assert opts.include_sources == frozenset({LintSource.CABF_BASELINE_REQUIREMENTS})

    def test_name_filter_compiled(self) -> None:
        opts = load_filter_options(name_filter="^ev_")
        assert opts.name_filter is not None
        assert opts.name_filter.search("ev_valid_time_too_long")

    def test_bad_regex_raises(self) -> None:
        with pytest.raises(ConfigurationError, match="Bad name filter"):
            load_filter_options(name_filter="([")

    def test_name_filter_with_names_raises(self) -> None:
        with pytest.raises(ConfigurationError, match="cannot be used together"):
            load_filter_options(name_filter="ev", exclude_names="a")

    def test_name_filter_env_with_names_cli_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CERTLINT_NAME_FILTER", "ev")
        with pytest.raises(ConfigurationError):
            load_filter_options(include_names="a")


class TestLoadThreshold:
    def test_default_is_pass(self) -> None:
        assert load_threshold() == LintStatus.PASS

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CERTLINT_THRESHOLD", "warn")
        assert load_threshold() == LintStatus.WARN

    def test_cli_override_highest_priority(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CERTLINT_THRESHOLD", "warn")
        assert load_threshold("notice") == LintStatus.NOTICE

    def test_invalid_threshold_raises(self) -> None:
        with pytest.raises(ConfigurationError, match="Unknown lint status"):
            load_threshold("severe")
