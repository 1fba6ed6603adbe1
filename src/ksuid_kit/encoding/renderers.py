"""
String renderers for fixed-width byte buffers

Every renderer produces a fixed number of characters for a given byte
width, and every alphabet is in ascending code-point order, so comparing
two renderings as strings gives the same answer as comparing the bytes.
"""

from ksuid_kit.encoding.base_convert import base_convert_int_array, max_length
from ksuid_kit.kernel.errors import InvalidEncoding, PartLengthMismatch

BASE36_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"
BASE62_ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"


def validate_alphabet(alphabet: str) -> str:
    """
    Check that an alphabet can render sortable strings

    Raises:
        InvalidEncoding: If the alphabet has fewer than two characters or
            its characters are not strictly ascending
    """
    if len(alphabet) < 2:
        raise InvalidEncoding("Alphabet must have at least 2 characters")
    for lower, upper in zip(alphabet, alphabet[1:]):
        if not lower < upper:
            raise InvalidEncoding(
                f"Alphabet must be strictly ascending, {lower!r} is not below {upper!r}"
            )
    return alphabet


validate_alphabet(BASE36_ALPHABET)
validate_alphabet(BASE62_ALPHABET)


def encoded_length(byte_width: int, alphabet: str) -> int:
    """Fixed rendering length for a byte_width-byte buffer in this alphabet"""
    return max_length(byte_width, 256, len(alphabet))


def to_hex(data: bytes) -> str:
    """Two lowercase hex digits per byte"""
    return data.hex()


def from_hex(text: str, width: int) -> bytes:
    """
    Parse a hex rendering back into width bytes

    Raises:
        PartLengthMismatch: If text is not two characters per byte
        InvalidEncoding: If text contains non-hex characters
    """
    if len(text) != 2 * width:
        raise PartLengthMismatch("hex text", 2 * width, len(text), "characters")
    try:
        data = bytes.fromhex(text)
    except ValueError as exc:
        raise InvalidEncoding(f"Invalid hex string {text!r}") from exc
    # fromhex skips whitespace, which would leave the result short
    if len(data) != width:
        raise InvalidEncoding(f"Invalid hex string {text!r}")
    return data


def encode_alphabet(data: bytes, alphabet: str, fixed_length: int | None = None) -> str:
    """
    Render bytes in the base given by the alphabet's size

    Args:
        data: Big-endian bytes to render
        alphabet: Ordered digit characters; len(alphabet) is the base
        fixed_length: Output length; defaults to the maximum for len(data)

    Returns:
        Rendered string of exactly fixed_length characters
    """
    if fixed_length is None:
        fixed_length = encoded_length(len(data), alphabet)
    digits = base_convert_int_array(
        list(data),
        from_base=256,
        to_base=len(alphabet),
        fixed_length=fixed_length,
    )
    return "".join(alphabet[digit] for digit in digits)


def decode_alphabet(text: str, alphabet: str, width: int) -> bytes:
    """
    Parse an alphabet rendering back into width bytes

    Raises:
        InvalidEncoding: If text contains characters outside the alphabet
        FixedLengthTooSmall: If the value does not fit in width bytes
    """
    index = {char: position for position, char in enumerate(alphabet)}
    try:
        digits = [index[char] for char in text]
    except KeyError as exc:
        raise InvalidEncoding(
            f"Character {exc.args[0]!r} is not valid in base {len(alphabet)}"
        ) from exc
    return bytes(
        base_convert_int_array(
            digits,
            from_base=len(alphabet),
            to_base=256,
            fixed_length=width,
        )
    )


def to_base36(data: bytes, fixed_length: int | None = None) -> str:
    return encode_alphabet(data, BASE36_ALPHABET, fixed_length)


def to_base62(data: bytes, fixed_length: int | None = None) -> str:
    return encode_alphabet(data, BASE62_ALPHABET, fixed_length)
