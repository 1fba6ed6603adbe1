"""
Timestamp codec - wall-clock time to and from the date part

The date part is an unsigned big-endian tick count measured from the
variant's epoch. Encoding floors to whole ticks, so decoding gives back the
start of the tick the date fell in.
"""

from datetime import datetime

from ksuid_kit.config import KsuidConfig
from ksuid_kit.kernel.errors import DateOutOfRange, PartLengthMismatch
from ksuid_kit.kernel.time import datetime_to_ms, ms_to_datetime


def _describe_ms(ms: int) -> str:
    """ISO timestamp with the raw ms value, or just the ms past datetime's range"""
    try:
        return f"{ms_to_datetime(ms).isoformat()} ({ms} ms)"
    except OverflowError:
        return f"{ms} ms"


class TimestampCodec:
    """
    Encodes dates into date-part bytes for one variant

    Args:
        config: Variant whose epoch, width and unit are used
    """

    def __init__(self, config: KsuidConfig) -> None:
        self.config = config

    def encode_ms(self, date_ms: int) -> bytes:
        """
        Encode ms since the Unix epoch as date-part bytes

        Raises:
            DateOutOfRange: If date_ms is before the epoch or at/after the
                max representable date
        """
        config = self.config
        if date_ms < config.epoch_ms:
            raise DateOutOfRange(
                date_ms,
                config.epoch_ms,
                f"Date component must be >= {_describe_ms(config.epoch_ms)}",
            )
        if date_ms >= config.max_date_ms:
            raise DateOutOfRange(
                date_ms,
                config.max_date_ms,
                f"Date component must be < {_describe_ms(config.max_date_ms)}",
            )
        ticks = (date_ms - config.epoch_ms) // config.date_part_unit_ms
        return ticks.to_bytes(config.date_part_bytes, "big")

    def encode(self, date: datetime | int) -> bytes:
        """Encode a datetime (naive means UTC) or ms since the Unix epoch"""
        if isinstance(date, datetime):
            date = datetime_to_ms(date)
        return self.encode_ms(date)

    def decode_ms(self, date_bytes: bytes) -> int:
        """
        Decode date-part bytes to ms since the Unix epoch

        Raises:
            PartLengthMismatch: If date_bytes is not date_part_bytes long
        """
        config = self.config
        if len(date_bytes) != config.date_part_bytes:
            raise PartLengthMismatch("date part", config.date_part_bytes, len(date_bytes))
        ticks = int.from_bytes(date_bytes, "big")
        return config.epoch_ms + ticks * config.date_part_unit_ms

    def decode(self, date_bytes: bytes) -> datetime:
        """
        Decode date-part bytes to a UTC datetime

        Raises:
            DateOutOfRange: If the date lies past datetime.max (possible for
                wide date parts)
        """
        date_ms = self.decode_ms(date_bytes)
        try:
            return ms_to_datetime(date_ms)
        except OverflowError:
            raise DateOutOfRange(
                date_ms,
                date_ms,
                f"Date {date_ms} ms cannot be represented as a datetime",
            ) from None
