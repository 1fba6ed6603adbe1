"""
Test infrastructure components: logging, metrics, errors.

These tests verify the ambient plumbing around identifier generation works.
"""

import pytest
from prometheus_client import REGISTRY

from ksuid_kit import EXTENDED, STANDARD, Ksuid, new_ksuid
from ksuid_kit.kernel.errors import (
    DateOutOfRange,
    FixedLengthTooSmall,
    InvalidEncoding,
    KsuidError,
    KsuidLengthError,
    KsuidRangeError,
    PartLengthMismatch,
    UnknownVariant,
)
from ksuid_kit.kernel.logging import configure_logging, get_logger, is_production


def _sample(name: str, labels: dict[str, str]) -> float:
    return REGISTRY.get_sample_value(name, labels) or 0.0


class TestLoggingFramework:
    """Test structured logging framework."""

    def test_configure_logging_console(self) -> None:
        """Test logging configuration for console output."""
        configure_logging(json_output=False, log_level="INFO")
        logger = get_logger(__name__)
        assert logger is not None

    def test_configure_logging_json(self) -> None:
        """Test logging configuration for JSON output."""
        configure_logging(json_output=True, log_level="DEBUG")
        logger = get_logger(__name__)
        assert logger is not None

    def test_configure_logging_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test output format follows ENVIRONMENT when not given."""
        monkeypatch.setenv("ENVIRONMENT", "production")
        configure_logging(log_level="WARNING")
        assert is_production() is True

    def test_is_production_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("ENVIRONMENT", raising=False)
        assert is_production() is False

    def test_rejected_parse_still_raises_after_logging(self) -> None:
        """Test logging a rejected parse does not swallow the error."""
        configure_logging(json_output=False, log_level="DEBUG")
        with pytest.raises(InvalidEncoding):
            Ksuid.from_base62("?" * 27)


class TestMetrics:
    """Test prometheus counters."""

    def test_generated_counter(self) -> None:
        labels = {"variant": "extended"}
        before = _sample("ksuid_generated_total", labels)

        new_ksuid(EXTENDED)
        new_ksuid(EXTENDED)

        assert _sample("ksuid_generated_total", labels) == before + 2

    def test_parsed_counter(self) -> None:
        labels = {"variant": "standard", "encoding": "base62"}
        before = _sample("ksuid_parsed_total", labels)

        Ksuid.from_base62("0" * 27, STANDARD)

        assert _sample("ksuid_parsed_total", labels) == before + 1

    def test_failed_parse_not_counted(self) -> None:
        labels = {"variant": "standard", "encoding": "hex"}
        before = _sample("ksuid_parsed_total", labels)

        with pytest.raises(PartLengthMismatch):
            Ksuid.from_hex("00")

        assert _sample("ksuid_parsed_total", labels) == before


class TestErrorHierarchy:
    """Test error classes carry their parameters."""

    def test_range_errors(self) -> None:
        assert issubclass(DateOutOfRange, KsuidRangeError)
        assert issubclass(FixedLengthTooSmall, KsuidRangeError)
        assert issubclass(KsuidRangeError, KsuidError)
        assert issubclass(KsuidRangeError, ValueError)

    def test_length_errors(self) -> None:
        error = PartLengthMismatch("random part", 16, 15)
        assert isinstance(error, KsuidLengthError)
        assert isinstance(error, ValueError)
        assert str(error) == "random part must be 16 bytes, got 15"

    def test_fixed_length_message(self) -> None:
        error = FixedLengthTooSmall(26, 27)
        assert str(error) == "Fixed length of 26 is too small, minimum required is 27"

    def test_unknown_variant(self) -> None:
        error = UnknownVariant("huge", ["extended", "standard"])
        assert isinstance(error, KsuidError)
        assert "extended, standard" in str(error)
