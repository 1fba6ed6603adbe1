"""
Random part sources

The random part of an identifier is what keeps two identifiers minted in the
same time unit apart. Sources implement a single capability, random(n), so
the identifier code never cares where the bytes come from.

Fun fact: with 128 random bits you would need to mint about 2^64 identifiers
in the same time unit before a collision became a coin flip!
"""

import os
import random
import secrets
import threading
from typing import Protocol

from ksuid_kit.kernel.logging import get_logger

logger = get_logger(__name__)


class RandomSource(Protocol):
    """Protocol for random byte suppliers"""

    def random(self, n: int) -> bytes:
        """Return exactly n random bytes"""
        ...


class SystemRandomSource:
    """
    Cryptographically secure source backed by the operating system

    Safe to share between threads: every call reads fresh bytes from the
    OS generator, so concurrent calls never overlap.
    """

    def random(self, n: int) -> bytes:
        return secrets.token_bytes(n)


class InsecureRandomSource:
    """
    Reduced-strength source backed by the Mersenne Twister

    NOT cryptographically secure: outputs are predictable from earlier
    outputs. Only used when the platform has no OS random source, or with
    an explicit seed to reproduce identifiers in tests.
    """

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(seed)
        self._lock = threading.Lock()
        if seed is None:
            logger.warning(
                "Using insecure random source for identifier random parts",
                source=type(self).__name__,
            )

    def random(self, n: int) -> bytes:
        # A shared Random instance must not be stepped by two threads at once
        with self._lock:
            return self._rng.randbytes(n)


def select_random_source() -> RandomSource:
    """
    Pick the strongest random source the platform offers

    os.urandom raises NotImplementedError when no OS source exists;
    in that case fall back to InsecureRandomSource.
    """
    try:
        os.urandom(1)
    except NotImplementedError:
        logger.warning("No OS random source available, falling back")
        return InsecureRandomSource()
    return SystemRandomSource()


# Global default random source, chosen once at import
default_random_source: RandomSource = select_random_source()
