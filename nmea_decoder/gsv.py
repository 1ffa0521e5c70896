"""GSV sentence parser.

GSV (GNSS Satellites in View) describes up to four satellites per sentence;
the complete sky view is split across ``total_messages`` sentences.

GSV Sentence Format:
    $GPGSV,4,1,14,05,03,036,,16,36,309,29,18,11,139,,20,20,087,12*77
           | | |  |
           | | |  +-- Satellite groups of 4 fields: PRN, SNR, elevation, azimuth
           | | +-- Satellites in view
           | +-- Message number
           +-- Total number of messages

Groups whose PRN is empty are skipped, and a trailing group with fewer than
four fields is ignored.
"""

from nmea_decoder.checksum import extract_fields
from nmea_decoder.fields import parse_int_field, parse_satellite, parse_talker
from nmea_decoder.types import GSVData, SentenceType

_MINIMUM_FIELD_COUNT = 4

_FIRST_GROUP_INDEX = 4
_GROUP_SIZE = 4


def _build_gsv_data(fields: list[str]) -> GSVData:
    satellites = []
    for start in range(_FIRST_GROUP_INDEX, len(fields), _GROUP_SIZE):
        group = fields[start : start + _GROUP_SIZE]
        if len(group) < _GROUP_SIZE:
            break
        satellite = parse_satellite(*group)
        if satellite is not None:
            satellites.append(satellite)

    return GSVData(
        sentence_type=SentenceType.GSV,
        talker=parse_talker(fields[0], SentenceType.GSV),
        total_messages=parse_int_field(fields[1]) or 0,
        message_number=parse_int_field(fields[2]) or 0,
        satellites_in_view=parse_int_field(fields[3]) or 0,
        satellites=tuple(satellites),
    )


def parse_gsv(sentence: str) -> GSVData:
    """Parse one GSV sentence into structured data.

    Raises:
        SentenceError: If the checksum is wrong, the sentence is not a GSV,
            or the header fields are missing.
    """
    fields = extract_fields(sentence, SentenceType.GSV, _MINIMUM_FIELD_COUNT)
    return _build_gsv_data(fields)
