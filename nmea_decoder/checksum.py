"""NMEA sentence framing and checksum validation.

NMEA 0183 sentences use a simple XOR checksum for data integrity verification.
The checksum is calculated over all characters between '$' and '*' (exclusive),
then represented as a two-digit uppercase hexadecimal number after the '*'.

Example sentence structure:
    $GNGGA,062735.00,3150.788156,N,11711.922383,E,1,12,2.0,90.0,M,,M,,*55
    ^                      checksum content                          ^^
    start                                                 checksum (0x55 = 85)

Line terminators are not stripped: callers reading from a stream should
remove ``\\r\\n`` before handing the sentence over.
"""

import logging

from nmea_decoder.errors import ParseError, SentenceError
from nmea_decoder.fields import parse_type
from nmea_decoder.types import SentenceType

logger = logging.getLogger(__name__)

_START_DELIMITER = "$"
_CHECKSUM_DELIMITER = "*"
_FIELD_SEPARATOR = ","


def split(text: str, separator: str) -> list[str]:
    """Split ``text`` on every occurrence of ``separator``.

    Empty runs are kept, including a trailing one, so ``k`` separators always
    produce ``k + 1`` tokens.

    Example:
        >>> split("A,,B,", ",")
        ['A', '', 'B', '']
    """
    tokens = []
    start = 0
    end = text.find(separator, start)
    while end != -1:
        tokens.append(text[start:end])
        start = end + len(separator)
        end = text.find(separator, start)
    tokens.append(text[start:])
    return tokens


def tokenize(sample: str) -> list[str]:
    """Split a sentence into its comma-separated fields.

    Everything from the first '*' onwards is dropped. The identifier keeps its
    leading '$'.

    Returns:
        List of field strings, or an empty list if nothing precedes the '*'.

    Example:
        Input: "$GNVTG,054.7,T,034.4,M,005.5,N,010.2,K,A*3B"
        Output: ["$GNVTG", "054.7", "T", "034.4", "M", "005.5", "N", "010.2", "K", "A"]
    """
    body = split(sample, _CHECKSUM_DELIMITER)[0]
    if not body:
        return []
    return split(body, _FIELD_SEPARATOR)


def calculate_checksum(content: str) -> int:
    """Calculate the XOR checksum of a content string.

    Args:
        content: The text between '$' and '*' (exclusive)

    Returns:
        Integer checksum value (0-255)

    Lone surrogates are encoded as their raw UTF-8 bytes, so any ``str`` has a
    checksum.
    """
    result = 0
    for byte in content.encode("utf-8", errors="surrogatepass"):
        result ^= byte
    return result


def is_valid_sample(sample: str) -> bool:
    """Validate the checksum of an NMEA sentence.

    Performs end-to-end validation by:
    1. Splitting the sentence on '*'
    2. Removing a leading '$' from the content, if present
    3. Rendering the XOR of the content bytes as two uppercase hex digits
    4. Comparing against the text after the '*' for exact equality

    Args:
        sample: Complete NMEA sentence including '*' and checksum.

    Returns:
        True if the checksum matches, False if:
        - There is no '*' or nothing follows it
        - The provided checksum differs (including lowercase hex or
          trailing characters such as a line terminator)

    Example:
        >>> is_valid_sample("$GNVTG,054.7,T,034.4,M,005.5,N,010.2,K,A*3B")
        True
        >>> is_valid_sample("$GNVTG,054.7,T,034.4,M,005.5,N,010.2,K,A*FF")
        False
    """
    parts = split(sample, _CHECKSUM_DELIMITER)
    if len(parts) < 2 or not parts[1]:
        return False

    content = parts[0]
    if content.startswith(_START_DELIMITER):
        content = content[len(_START_DELIMITER) :]

    calculated = f"{calculate_checksum(content):02X}"
    if calculated != parts[1]:
        logger.debug(
            "Checksum mismatch: calculated %s, provided %r", calculated, parts[1]
        )
        return False
    return True


def extract_fields(
    sentence: str,
    sentence_type: SentenceType,
    minimum_count: int,
) -> list[str]:
    """Validate a sentence and return its fields.

    Shared entry step of every sentence parser.

    Raises:
        SentenceError: ``INVALID_FORMAT`` if the checksum is missing or wrong,
            ``UNKNOWN_ERROR`` if nothing precedes the '*',
            ``UNSUPPORTED_TYPE`` if the identifier does not name
            ``sentence_type``, ``MISSING_FIELDS`` if fewer than
            ``minimum_count`` fields are present.
    """
    if not is_valid_sample(sentence):
        raise SentenceError(ParseError.INVALID_FORMAT, repr(sentence))

    fields = tokenize(sentence)
    if not fields:
        raise SentenceError(ParseError.UNKNOWN_ERROR, "empty sentence body")

    found = parse_type(fields[0])
    if found is not sentence_type:
        raise SentenceError(
            ParseError.UNSUPPORTED_TYPE,
            f"expected {sentence_type.value}, got {found.value}",
        )

    if len(fields) < minimum_count:
        raise SentenceError(
            ParseError.MISSING_FIELDS,
            f"{sentence_type.value} needs {minimum_count} fields, got {len(fields)}",
        )

    return fields
