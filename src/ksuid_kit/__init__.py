"""
ksuid-kit - K-sortable unique identifiers

Fixed-width identifiers made of a timestamp followed by random bytes, with
hex, base36 and base62 renderings that sort in creation-time order. Two
layouts ship as presets: STANDARD (second precision, 20 bytes) and
EXTENDED (millisecond precision, 22 bytes).

Fun fact: KSUIDs were introduced by Segment in 2017 - the same year this
library's default epoch begins!
"""

from ksuid_kit.config import EXTENDED, PRESETS, STANDARD, KsuidConfig, get_variant
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
from ksuid_kit.ksuid import Ksuid, new_ksuid

__version__ = "0.2.0"
__all__ = [
    "Ksuid",
    "new_ksuid",
    "KsuidConfig",
    "STANDARD",
    "EXTENDED",
    "PRESETS",
    "get_variant",
    "KsuidError",
    "KsuidRangeError",
    "DateOutOfRange",
    "FixedLengthTooSmall",
    "KsuidLengthError",
    "PartLengthMismatch",
    "InvalidEncoding",
    "UnknownVariant",
    "__version__",
]
