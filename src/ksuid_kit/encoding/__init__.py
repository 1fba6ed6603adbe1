"""
Encoding - radix conversion and order-preserving string renderers
"""

from ksuid_kit.encoding.base_convert import base_convert_int_array, max_length
from ksuid_kit.encoding.renderers import (
    BASE36_ALPHABET,
    BASE62_ALPHABET,
    decode_alphabet,
    encode_alphabet,
    encoded_length,
    from_hex,
    to_base36,
    to_base62,
    to_hex,
    validate_alphabet,
)

__all__ = [
    "base_convert_int_array",
    "max_length",
    "BASE36_ALPHABET",
    "BASE62_ALPHABET",
    "validate_alphabet",
    "encoded_length",
    "to_hex",
    "from_hex",
    "encode_alphabet",
    "decode_alphabet",
    "to_base36",
    "to_base62",
]
