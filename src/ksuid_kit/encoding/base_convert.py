"""
Arbitrary-radix conversion between digit sequences

Digits are most-significant first. Conversion is repeated long division:
each pass divides the whole working number by the target base, the
remainder becomes the next output digit (filled from the right), and the
quotient becomes the next working number.

Fixed-length outputs are zero-padded on the most-significant side, which is
what keeps lexicographic order equal to numeric order.
"""

import math
from collections.abc import Sequence

from ksuid_kit.kernel.errors import FixedLengthTooSmall, InvalidEncoding


def max_length(array_len: int, from_base: int, to_base: int) -> int:
    """Most digits an array_len-digit base from_base number needs in base to_base"""
    return math.ceil((array_len * math.log2(from_base)) / math.log2(to_base))


def _check_base(base: int, label: str) -> None:
    if base < 2:
        raise InvalidEncoding(f"{label} base must be at least 2, got {base}")


def base_convert_int_array(
    digits: Sequence[int],
    *,
    from_base: int,
    to_base: int,
    fixed_length: int | None = None,
) -> list[int]:
    """
    Convert digits in base from_base to digits in base to_base

    Args:
        digits: Input digits, most significant first
        from_base: Base of the input digits
        to_base: Base of the output digits
        fixed_length: Exact output length, zero-padded on the left.
            If None, leading zeros are stripped (keeping at least one digit).

    Returns:
        Output digits, most significant first

    Raises:
        FixedLengthTooSmall: If the value needs more than fixed_length digits
        InvalidEncoding: If a base is below 2 or a digit is out of range
    """
    _check_base(from_base, "Source")
    _check_base(to_base, "Target")
    for digit in digits:
        if not 0 <= digit < from_base:
            raise InvalidEncoding(f"Digit {digit} is not valid in base {from_base}")

    max_len = max_length(len(digits), from_base, to_base)
    length = max_len if fixed_length is None else fixed_length
    result = [0] * length

    # Each pass prepends one digit, so start at the end
    offset = length
    working = list(digits)
    while working:
        if offset == 0:
            raise FixedLengthTooSmall(length, max_len)

        quotient: list[int] = []
        remainder = 0
        for digit in working:
            acc = digit + remainder * from_base
            q, remainder = divmod(acc, to_base)
            if quotient or q > 0:
                quotient.append(q)

        offset -= 1
        result[offset] = remainder
        working = quotient

    if fixed_length is not None:
        # Unused leading slots are already zero
        return result

    stripped = result[offset:]
    while len(stripped) > 1 and stripped[0] == 0:
        stripped.pop(0)
    return stripped or [0]
