"""
Variant configuration - the parameters that define an identifier layout

A variant fixes the epoch, how many bytes hold the tick count, how long one
tick is, and how many random bytes follow. Presets are plain data: every
piece of logic takes a KsuidConfig rather than being specialised per variant.

Fun fact: the default epoch, 1.5 trillion milliseconds, lands on
2017-07-14T02:40:00Z - a round number that buys three years of headroom
over Segment's original 2014 epoch!
"""

import math
import os

from pydantic import BaseModel, Field

from ksuid_kit.kernel.errors import UnknownVariant


class KsuidConfig(BaseModel):
    """
    Identifier layout parameters

    Attributes:
        name: Variant name (used as a metrics label)
        epoch_ms: Zero point of the tick count, in ms since the Unix epoch
        date_part_bytes: Bytes holding the big-endian tick count
        rand_part_bytes: Random bytes following the date part
        date_part_unit_ms: Milliseconds per tick
    """

    name: str = Field(
        ...,
        min_length=1,
        description="Variant name",
    )

    epoch_ms: int = Field(
        default=1_500_000_000_000,
        description="Tick zero point in ms since the Unix epoch",
    )

    date_part_bytes: int = Field(
        default=4,
        ge=1,
        description="Width of the tick count; sets the max representable date",
    )

    rand_part_bytes: int = Field(
        default=16,
        ge=1,
        description="Width of the random part; entropy is 8 bits per byte",
    )

    date_part_unit_ms: int = Field(
        default=1_000,
        ge=1,
        description="Milliseconds per tick; trades precision for range",
    )

    model_config = {"frozen": True}

    @property
    def total_bytes(self) -> int:
        return self.date_part_bytes + self.rand_part_bytes

    @property
    def max_date_ms(self) -> int:
        """First ms value that no longer fits in the date part"""
        return self.epoch_ms + 2 ** (8 * self.date_part_bytes) * self.date_part_unit_ms

    def max_encoded_length(self, base: int) -> int:
        """Fixed rendering length of a full identifier in the given base"""
        return math.ceil(self.total_bytes * math.log2(256) / math.log2(base))

    @property
    def max_len_base36(self) -> int:
        return self.max_encoded_length(36)

    @property
    def max_len_base62(self) -> int:
        return self.max_encoded_length(62)


# Second precision, 32-bit tick count: about 136 years of range
STANDARD = KsuidConfig(
    name="standard",
    epoch_ms=1_500_000_000_000,
    date_part_bytes=4,
    rand_part_bytes=16,
    date_part_unit_ms=1_000,
)

# Millisecond precision, 48-bit tick count: about 8900 years of range
EXTENDED = KsuidConfig(
    name="extended",
    epoch_ms=1_500_000_000_000,
    date_part_bytes=6,
    rand_part_bytes=16,
    date_part_unit_ms=1,
)

PRESETS: dict[str, KsuidConfig] = {
    STANDARD.name: STANDARD,
    EXTENDED.name: EXTENDED,
}


def get_variant(name: str) -> KsuidConfig:
    """
    Look up a preset by name (case-insensitive)

    Raises:
        UnknownVariant: If no preset has that name
    """
    try:
        return PRESETS[name.strip().lower()]
    except KeyError:
        raise UnknownVariant(name, sorted(PRESETS)) from None


def default_variant() -> KsuidConfig:
    """
    Preset named by the KSUID_VARIANT environment variable

    Defaults to the standard layout when the variable is not set.
    """
    return get_variant(os.getenv("KSUID_VARIANT", STANDARD.name))
