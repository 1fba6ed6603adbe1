"""
Codec - conversion between dates and identifier date parts
"""

from ksuid_kit.codec.timestamp import TimestampCodec

__all__ = ["TimestampCodec"]
