"""ZDA sentence parser.

ZDA (Time and Date) reports UTC time, the full date and the local time zone
offset.

ZDA Sentence Format:
    $GNZDA,201530.00,04,07,2002,00,00*7E
           |         |  |  |    |  |
           |         |  |  |    |  +-- Local zone minutes
           |         |  |  |    +-- Local zone hours
           |         |  |  +-- Year (4 digits)
           |         |  +-- Month
           |         +-- Day
           +-- UTC time (HHMMSS.ss)

Date and zone fields that are empty, unparsable or missing altogether are
reported as 0.
"""

from nmea_decoder.checksum import extract_fields
from nmea_decoder.fields import parse_int_field, parse_talker, parse_utc_time
from nmea_decoder.types import SentenceType, ZDAData

_MINIMUM_FIELD_COUNT = 2


def _int_at(fields: list[str], index: int) -> int:
    if index >= len(fields):
        return 0
    return parse_int_field(fields[index]) or 0


def _build_zda_data(fields: list[str]) -> ZDAData:
    return ZDAData(
        sentence_type=SentenceType.ZDA,
        talker=parse_talker(fields[0], SentenceType.ZDA),
        utc_time=parse_utc_time(fields[1]),
        day=_int_at(fields, 2),
        month=_int_at(fields, 3),
        year=_int_at(fields, 4),
        local_zone_hours=_int_at(fields, 5),
        local_zone_minutes=_int_at(fields, 6),
    )


def parse_zda(sentence: str) -> ZDAData:
    """Parse a ZDA sentence into structured data.

    Raises:
        SentenceError: If the checksum is wrong, the sentence is not a ZDA,
            or it has no time field.

    Example:
        >>> result = parse_zda("$GNZDA,201530.00,04,07,2002,00,00*7E")
        >>> (result.day, result.month, result.year)
        (4, 7, 2002)
    """
    fields = extract_fields(sentence, SentenceType.ZDA, _MINIMUM_FIELD_COUNT)
    return _build_zda_data(fields)
