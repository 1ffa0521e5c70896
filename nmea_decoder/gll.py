"""GLL sentence parser.

GLL (Geographic Position - Latitude/Longitude) reports the current position
together with the time of the fix and a data status.

GLL Sentence Format:
    $GNGLL,3150.788156,N,11711.922383,E,062735.00,A,A*76
           |           | |            | |         | |
           |           | |            | |         | +-- Mode indicator (A/D/E/N)
           |           | |            | |         +-- Status (A=valid, V=invalid)
           |           | |            | +-- UTC time (HHMMSS.ss)
           |           | +------------+-- Longitude + E/W
           +-----------+-- Latitude + N/S
"""

from nmea_decoder.checksum import extract_fields
from nmea_decoder.fields import (
    parse_latitude,
    parse_longitude,
    parse_mode,
    parse_status,
    parse_talker,
    parse_utc_time,
)
from nmea_decoder.types import GLLData, SentenceType

# Identifier plus 7 data fields, the last being the NMEA 2.3 mode indicator
_MINIMUM_FIELD_COUNT = 8


def _build_gll_data(fields: list[str]) -> GLLData:
    return GLLData(
        sentence_type=SentenceType.GLL,
        talker=parse_talker(fields[0], SentenceType.GLL),
        latitude=parse_latitude(fields[1], fields[2]),
        longitude=parse_longitude(fields[3], fields[4]),
        utc_time=parse_utc_time(fields[5]),
        status=parse_status(fields[6]),
        mode=parse_mode(fields[7]),
    )


def parse_gll(sentence: str) -> GLLData:
    """Parse a GLL sentence into structured data.

    Raises:
        SentenceError: If the checksum is wrong, the sentence is not a GLL,
            it has fewer than 8 fields, or the status is not A/V.
    """
    fields = extract_fields(sentence, SentenceType.GLL, _MINIMUM_FIELD_COUNT)
    return _build_gll_data(fields)
