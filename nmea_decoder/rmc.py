"""RMC sentence parser.

RMC (Recommended Minimum Specific GNSS Data) carries the minimum navigation
set: time, date, position, speed and course over ground.

RMC Sentence Format:
    $GNRMC,211041.00,A,4024.98796,N,00340.22512,W,0.027,,010218,,,D*7B
           |         | |          | |           | |     | |      | | |
           |         | |          | |           | |     | |      | | +-- Mode indicator (A/D/E/N)
           |         | |          | |           | |     | |      +-+-- Magnetic variation + E/W
           |         | |          | |           | |     | +-- UTC date (DDMMYY)
           |         | |          | |           | |     +-- Course over ground (degrees true)
           |         | |          | |           | +-- Speed over ground (knots)
           |         | |          | +-----------+-- Longitude + E/W
           |         | +----------+-- Latitude + N/S
           |         +-- Status (A=valid, V=invalid)
           +-- UTC time (HHMMSS.ss)
"""

from nmea_decoder.checksum import extract_fields
from nmea_decoder.fields import (
    parse_course,
    parse_latitude,
    parse_longitude,
    parse_magnetic_variation,
    parse_mode,
    parse_speed,
    parse_status,
    parse_talker,
    parse_utc_date,
    parse_utc_time,
)
from nmea_decoder.types import RMCData, SentenceType

_MINIMUM_FIELD_COUNT = 13


def _build_rmc_data(fields: list[str]) -> RMCData:
    return RMCData(
        sentence_type=SentenceType.RMC,
        talker=parse_talker(fields[0], SentenceType.RMC),
        utc_time=parse_utc_time(fields[1]),
        status=parse_status(fields[2]),
        latitude=parse_latitude(fields[3], fields[4]),
        longitude=parse_longitude(fields[5], fields[6]),
        speed=parse_speed(fields[7]),
        course=parse_course(fields[8]),
        utc_date=parse_utc_date(fields[9]),
        magnetic_variation=parse_magnetic_variation(fields[10], fields[11]),
        mode=parse_mode(fields[12]),
    )


def parse_rmc(sentence: str) -> RMCData:
    """Parse an RMC sentence into structured data.

    Args:
        sentence: Raw NMEA RMC sentence string

    Returns:
        RMCData; ``valid`` is False when the receiver flags the data with
        status V.

    Raises:
        SentenceError: If the checksum is wrong, the sentence is not an RMC,
            it has fewer than 13 fields, or the status is not A/V.

    Example:
        >>> result = parse_rmc("$GNRMC,211041.00,A,4024.98796,N,00340.22512,W,0.027,,010218,,,D*7B")
        >>> result.longitude.value_degrees
        -3.4022512
        >>> result.mode
        <Mode.DIFFERENTIAL: 'Differential'>
    """
    fields = extract_fields(sentence, SentenceType.RMC, _MINIMUM_FIELD_COUNT)
    return _build_rmc_data(fields)
