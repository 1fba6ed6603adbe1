"""
Custom exceptions for ksuid-kit

Two families matter to callers: range errors (a value does not fit the
layout) and length errors (a byte part has the wrong width). Both also
subclass ValueError so generic input validation keeps working.

Fun fact: Python's own ValueError dates back to Python 1.5 - before that,
most bad-input problems surfaced as a plain string exception!
"""


class KsuidError(Exception):
    """Base exception for all ksuid-kit errors"""

    pass


class KsuidRangeError(KsuidError, ValueError):
    """Base class for values that fall outside a representable range"""

    pass


class DateOutOfRange(KsuidRangeError):
    """
    Raised when a date cannot be stored in the date part of an identifier

    The boundary is the epoch for dates that are too early, and the max
    representable date for dates that are too late.
    """

    def __init__(self, date_ms: int, boundary_ms: int, message: str) -> None:
        self.date_ms = date_ms
        self.boundary_ms = boundary_ms
        super().__init__(message)


class FixedLengthTooSmall(KsuidRangeError):
    """Raised when a base conversion produces more digits than the fixed length"""

    def __init__(self, fixed_length: int, minimum: int) -> None:
        self.fixed_length = fixed_length
        self.minimum = minimum
        super().__init__(
            f"Fixed length of {fixed_length} is too small, "
            f"minimum required is {minimum}"
        )


class KsuidLengthError(KsuidError, ValueError):
    """Base class for byte or text inputs with the wrong width"""

    pass


class PartLengthMismatch(KsuidLengthError):
    """Raised when a byte part does not match the configured width"""

    def __init__(
        self, part: str, expected: int, actual: int, unit: str = "bytes"
    ) -> None:
        self.part = part
        self.expected = expected
        self.actual = actual
        super().__init__(f"{part} must be {expected} {unit}, got {actual}")


class InvalidEncoding(KsuidError, ValueError):
    """Raised when a digit or character is not valid for its base"""

    pass


class UnknownVariant(KsuidError, ValueError):
    """Raised when a variant name does not match any preset"""

    def __init__(self, name: str, known: list[str]) -> None:
        self.name = name
        self.known = known
        super().__init__(
            f"Unknown KSUID variant {name!r}, expected one of {', '.join(known)}"
        )
