"""
Ksuid - immutable K-sortable unique identifier

An identifier is total_bytes bytes: the date part (tick count since the
variant's epoch) followed by the random part. Because the date part leads
and every rendering is fixed-length with an ascending alphabet, sorting
identifiers or any one of their renderings sorts them by creation time.

Fun fact: "K-sortable" means sorted up to a small window - identifiers
minted within the same time unit come out in random order, and that is fine!
"""

import functools
from collections.abc import Callable
from datetime import datetime
from typing import Any

from ksuid_kit.codec.timestamp import TimestampCodec
from ksuid_kit.config import KsuidConfig, STANDARD, default_variant
from ksuid_kit.encoding.renderers import (
    BASE36_ALPHABET,
    BASE62_ALPHABET,
    decode_alphabet,
    encode_alphabet,
    from_hex,
    to_hex,
    validate_alphabet,
)
from ksuid_kit.kernel.entropy import RandomSource, default_random_source
from ksuid_kit.kernel.errors import KsuidError, PartLengthMismatch
from ksuid_kit.kernel.logging import get_logger
from ksuid_kit.kernel.metrics import record_generated, record_parsed
from ksuid_kit.kernel.time import TimeProvider, default_time_provider

logger = get_logger(__name__)


@functools.total_ordering
class Ksuid:
    """
    Fixed-width identifier with a leading timestamp and trailing random bytes

    Args:
        config: Layout variant (defaults to STANDARD)
        date_part: Explicit date-part bytes; encoded from the clock if omitted
        rand_part: Explicit random-part bytes; drawn from random_source if omitted
        time_provider: Clock used when date_part is omitted
        random_source: Random source used when rand_part is omitted

    Raises:
        PartLengthMismatch: If a part does not match the configured width
        DateOutOfRange: If the clock reads outside the variant's date range
    """

    __slots__ = ("_config", "_bytes")

    def __init__(
        self,
        config: KsuidConfig = STANDARD,
        date_part: bytes | None = None,
        rand_part: bytes | None = None,
        *,
        time_provider: TimeProvider | None = None,
        random_source: RandomSource | None = None,
    ) -> None:
        if date_part is None:
            clock = time_provider or default_time_provider
            date_part = TimestampCodec(config).encode(clock.now())
        elif len(date_part) != config.date_part_bytes:
            raise PartLengthMismatch("date part", config.date_part_bytes, len(date_part))

        if rand_part is None:
            source = random_source or default_random_source
            rand_part = source.random(config.rand_part_bytes)
        if len(rand_part) != config.rand_part_bytes:
            raise PartLengthMismatch("random part", config.rand_part_bytes, len(rand_part))

        self._config = config
        self._bytes = bytes(date_part) + bytes(rand_part)

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    @classmethod
    def from_bytes(cls, data: bytes, config: KsuidConfig = STANDARD) -> "Ksuid":
        """Rebuild an identifier from its raw byte layout"""
        if len(data) != config.total_bytes:
            raise PartLengthMismatch("identifier", config.total_bytes, len(data))
        ksuid = cls._from_layout(bytes(data), config)
        record_parsed(config.name, "bytes")
        return ksuid

    @classmethod
    def from_hex(cls, text: str, config: KsuidConfig = STANDARD) -> "Ksuid":
        """Parse a hex rendering"""
        ksuid = cls._from_layout(_parse(from_hex, text, config.total_bytes), config)
        record_parsed(config.name, "hex")
        return ksuid

    @classmethod
    def from_base36(cls, text: str, config: KsuidConfig = STANDARD) -> "Ksuid":
        """Parse a base36 rendering"""
        ksuid = cls._from_alphabet(text, BASE36_ALPHABET, config)
        record_parsed(config.name, "base36")
        return ksuid

    @classmethod
    def from_base62(cls, text: str, config: KsuidConfig = STANDARD) -> "Ksuid":
        """Parse a base62 rendering"""
        ksuid = cls._from_alphabet(text, BASE62_ALPHABET, config)
        record_parsed(config.name, "base62")
        return ksuid

    @classmethod
    def _from_alphabet(cls, text: str, alphabet: str, config: KsuidConfig) -> "Ksuid":
        expected = config.max_encoded_length(len(alphabet))
        if len(text) != expected:
            raise PartLengthMismatch(
                f"base{len(alphabet)} text", expected, len(text), "characters"
            )
        data = _parse(decode_alphabet, text, alphabet, config.total_bytes)
        return cls._from_layout(data, config)

    @classmethod
    def _from_layout(cls, data: bytes, config: KsuidConfig) -> "Ksuid":
        split = config.date_part_bytes
        return cls(config, data[:split], data[split:])

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def config(self) -> KsuidConfig:
        return self._config

    @property
    def raw(self) -> bytes:
        """The full byte layout"""
        return self._bytes

    @property
    def date_part(self) -> bytes:
        return self._bytes[: self._config.date_part_bytes]

    @property
    def rand_part(self) -> bytes:
        return self._bytes[self._config.date_part_bytes :]

    @property
    def date_ms(self) -> int:
        """Start of the tick this identifier was minted in, in Unix ms"""
        return TimestampCodec(self._config).decode_ms(self.date_part)

    @property
    def date(self) -> datetime:
        """Start of the tick this identifier was minted in, as a UTC datetime"""
        return TimestampCodec(self._config).decode(self.date_part)

    @property
    def hex(self) -> str:
        return to_hex(self._bytes)

    @property
    def base36(self) -> str:
        return encode_alphabet(self._bytes, BASE36_ALPHABET, self._config.max_len_base36)

    @property
    def base62(self) -> str:
        return encode_alphabet(self._bytes, BASE62_ALPHABET, self._config.max_len_base62)

    def encode(self, alphabet: str) -> str:
        """Fixed-length rendering in a custom ascending alphabet"""
        validate_alphabet(alphabet)
        return encode_alphabet(
            self._bytes,
            alphabet,
            self._config.max_encoded_length(len(alphabet)),
        )

    # ------------------------------------------------------------------
    # Value semantics
    # ------------------------------------------------------------------

    def __bytes__(self) -> bytes:
        return self._bytes

    def __str__(self) -> str:
        return self.base62

    def __repr__(self) -> str:
        return f"Ksuid({self.base62!r}, variant={self._config.name!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ksuid):
            return NotImplemented
        return self._config == other._config and self._bytes == other._bytes

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Ksuid) or self._config != other._config:
            return NotImplemented
        return self._bytes < other._bytes

    def __hash__(self) -> int:
        return hash((self._config, self._bytes))

    def __setattr__(self, name: str, value: object) -> None:
        if hasattr(self, "_bytes"):
            raise AttributeError("Ksuid is immutable")
        object.__setattr__(self, name, value)


def _parse(decoder: Callable[..., bytes], *args: Any) -> bytes:
    """Run a decoder, logging rejected input at debug level"""
    try:
        return decoder(*args)
    except KsuidError as exc:
        logger.debug("Rejected identifier text", error=str(exc))
        raise


def new_ksuid(
    config: KsuidConfig | None = None,
    date_part: bytes | None = None,
    rand_part: bytes | None = None,
    *,
    time_provider: TimeProvider | None = None,
    random_source: RandomSource | None = None,
) -> Ksuid:
    """
    Mint a new identifier

    Args:
        config: Layout variant; defaults to the KSUID_VARIANT preset
        date_part: Explicit date-part bytes (deterministic reconstruction)
        rand_part: Explicit random-part bytes (deterministic reconstruction)
        time_provider: Clock override
        random_source: Random source override

    Returns:
        New immutable identifier
    """
    if config is None:
        config = default_variant()
    ksuid = Ksuid(
        config,
        date_part,
        rand_part,
        time_provider=time_provider,
        random_source=random_source,
    )
    record_generated(config.name)
    return ksuid
