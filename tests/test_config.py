"""
Tests for variant configuration

Presets are data: these tests pin their derived values so a change to a
preset shows up as a failing test rather than a silent layout change.
"""

import pytest
from pydantic import ValidationError

from ksuid_kit.config import (
    EXTENDED,
    PRESETS,
    STANDARD,
    KsuidConfig,
    default_variant,
    get_variant,
)
from ksuid_kit.kernel.errors import UnknownVariant


class TestPresets:
    """Tests for the shipped presets"""

    def test_standard_layout(self) -> None:
        """Standard is 4 date bytes of seconds plus 16 random bytes"""
        assert STANDARD.epoch_ms == 1_500_000_000_000
        assert STANDARD.date_part_bytes == 4
        assert STANDARD.date_part_unit_ms == 1_000
        assert STANDARD.rand_part_bytes == 16
        assert STANDARD.total_bytes == 20

    def test_extended_layout(self) -> None:
        """Extended is 6 date bytes of milliseconds plus 16 random bytes"""
        assert EXTENDED.epoch_ms == 1_500_000_000_000
        assert EXTENDED.date_part_bytes == 6
        assert EXTENDED.date_part_unit_ms == 1
        assert EXTENDED.rand_part_bytes == 16
        assert EXTENDED.total_bytes == 22

    def test_max_date(self) -> None:
        """Max date is epoch plus the full tick range"""
        assert STANDARD.max_date_ms == 1_500_000_000_000 + 4_294_967_296_000
        assert EXTENDED.max_date_ms == 1_500_000_000_000 + 281_474_976_710_656

    def test_max_encoded_lengths(self) -> None:
        """Fixed rendering lengths per base"""
        assert STANDARD.max_len_base36 == 31
        assert STANDARD.max_len_base62 == 27
        assert EXTENDED.max_len_base36 == 35
        assert EXTENDED.max_len_base62 == 30
        assert STANDARD.max_encoded_length(16) == 40

    def test_presets_registry(self) -> None:
        """Presets are registered by name"""
        assert PRESETS == {"standard": STANDARD, "extended": EXTENDED}


class TestKsuidConfig:
    """Tests for custom configurations"""

    def test_defaults_match_standard(self) -> None:
        """A config with only a name has the standard layout"""
        config = KsuidConfig(name="custom")
        assert config.total_bytes == STANDARD.total_bytes
        assert config.max_date_ms == STANDARD.max_date_ms

    def test_frozen(self) -> None:
        """Configs cannot be modified after creation"""
        with pytest.raises(ValidationError):
            STANDARD.date_part_bytes = 8

    def test_hashable_and_comparable(self) -> None:
        """Equal parameters give equal, hashable configs"""
        copy = KsuidConfig(**STANDARD.model_dump())
        assert copy == STANDARD
        assert hash(copy) == hash(STANDARD)

    @pytest.mark.parametrize(
        "field", ["date_part_bytes", "rand_part_bytes", "date_part_unit_ms"]
    )
    def test_widths_must_be_positive(self, field: str) -> None:
        """Zero widths and units are rejected"""
        with pytest.raises(ValidationError):
            KsuidConfig(name="bad", **{field: 0})

    def test_name_required(self) -> None:
        """An empty name is rejected"""
        with pytest.raises(ValidationError):
            KsuidConfig(name="")


class TestVariantLookup:
    """Tests for get_variant / default_variant"""

    def test_lookup_is_case_insensitive(self) -> None:
        assert get_variant("Standard") is STANDARD
        assert get_variant(" EXTENDED ") is EXTENDED

    def test_unknown_variant(self) -> None:
        """Unknown names list the known presets"""
        with pytest.raises(UnknownVariant) as exc_info:
            get_variant("galactic")

        assert exc_info.value.known == ["extended", "standard"]
        assert "galactic" in str(exc_info.value)

    def test_default_variant_is_standard(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("KSUID_VARIANT", raising=False)
        assert default_variant() is STANDARD

    def test_default_variant_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("KSUID_VARIANT", "extended")
        assert default_variant() is EXTENDED
