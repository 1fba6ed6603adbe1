"""
Kernel - shared infrastructure for identifier generation

Errors, logging, metrics, and the two injectable capabilities every
identifier needs: a clock and a random byte source.
"""

from ksuid_kit.kernel.entropy import (
    InsecureRandomSource,
    RandomSource,
    SystemRandomSource,
    select_random_source,
)
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
from ksuid_kit.kernel.time import FrozenTimeProvider, RealTimeProvider, TimeProvider

__all__ = [
    # Random
    "RandomSource",
    "SystemRandomSource",
    "InsecureRandomSource",
    "select_random_source",
    # Time
    "TimeProvider",
    "RealTimeProvider",
    "FrozenTimeProvider",
    # Errors
    "KsuidError",
    "KsuidRangeError",
    "DateOutOfRange",
    "FixedLengthTooSmall",
    "KsuidLengthError",
    "PartLengthMismatch",
    "InvalidEncoding",
    "UnknownVariant",
]
