"""Error taxonomy for NMEA sentence decoding.

Every fallible public operation raises ``SentenceError``. The exception carries
a ``ParseError`` member identifying which stage rejected the input, so callers
can branch on the failure kind without string matching:

    try:
        record = parse(line)
    except SentenceError as exc:
        if exc.error is ParseError.INVALID_FORMAT:
            ...  # corrupted on the wire, drop it
"""

from enum import Enum


class ParseError(Enum):
    """Reasons a sentence can be rejected.

    Values are the human-readable labels used by ``error_to_string``.
    """

    INVALID_DIRECTION = "Invalid Direction"
    INVALID_FORMAT = "Invalid Format"
    MISSING_FIELDS = "Missing Fields"
    UNKNOWN_ERROR = "Unknown Error"
    UNSUPPORTED_TYPE = "Unsupported Type"
    INVALID_LATITUDE = "Invalid Latitude"
    INVALID_LONGITUDE = "Invalid Longitude"
    INVALID_SPEED = "Invalid Speed"
    INVALID_COURSE = "Invalid Course"
    INVALID_UTC_DATE = "Invalid UTC Date"
    INVALID_UTC_TIME = "Invalid UTC Time"
    INVALID_MAGNETIC_VARIATION = "Invalid Magnetic Variation"
    INVALID_MODE = "Invalid Mode"


class SentenceError(ValueError):
    """Raised when a sentence, or one of its required fields, cannot be decoded.

    Attributes:
        error: The ``ParseError`` kind.
        detail: Optional free-form context (offending token, counts).
    """

    def __init__(self, error: ParseError, detail: str | None = None) -> None:
        self.error = error
        self.detail = detail
        message = error.value if detail is None else f"{error.value}: {detail}"
        super().__init__(message)
