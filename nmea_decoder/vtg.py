"""VTG sentence parser.

VTG (Track Made Good and Ground Speed) reports the course over ground against
true and magnetic north together with the ground speed in knots and km/h.

VTG Sentence Format:
    $GNVTG,054.7,T,034.4,M,005.5,N,010.2,K,A*3B
           |     | |     | |     | |     | |
           |     | |     | |     | |     | +-- Mode indicator (A/D/E/N)
           |     | |     | |     | +-----+-- Speed in km/h
           |     | |     | +-----+-- Speed in knots
           |     | +-----+-- Track (magnetic north, degrees)
           +-----+-- Track (true north, degrees)

The unit letters (T, M, N, K) are fixed markers and are not read.

Note: When stationary, the track angle may be empty (no heading when not moving).
"""

from nmea_decoder.checksum import extract_fields
from nmea_decoder.fields import parse_course, parse_mode, parse_speed, parse_talker
from nmea_decoder.types import SentenceType, SpeedUnit, VTGData

# VTG has 9 data fields plus the FAA mode indicator
_MINIMUM_FIELD_COUNT = 10


def _build_vtg_data(fields: list[str]) -> VTGData:
    """Construct a VTGData object from parsed fields.

    Maps NMEA field indices to VTGData attributes:
        fields[1] -> course_true (heading relative to true north)
        fields[3] -> course_magnetic
        fields[5] -> speed_knots
        fields[7] -> speed_kmh (already in km/h, not rescaled)
        fields[9] -> mode (FAA mode indicator)
    """
    return VTGData(
        sentence_type=SentenceType.VTG,
        talker=parse_talker(fields[0], SentenceType.VTG),
        course_true=parse_course(fields[1]),
        course_magnetic=parse_course(fields[3]),
        speed_knots=parse_speed(fields[5]),
        speed_kmh=parse_speed(
            fields[7],
            SpeedUnit.KILOMETERS_PER_HOUR,
            source=SpeedUnit.KILOMETERS_PER_HOUR,
        ),
        mode=parse_mode(fields[9]),
    )


def parse_vtg(sentence: str) -> VTGData:
    """Parse a VTG sentence into structured data.

    Args:
        sentence: Raw NMEA VTG sentence string

    Returns:
        VTGData; ``valid`` is False when the mode is N (not valid) or empty.

    Raises:
        SentenceError: If the checksum is wrong, the sentence is not a VTG,
            or it has fewer than 10 fields.

    Example:
        >>> result = parse_vtg("$GNVTG,054.7,T,034.4,M,005.5,N,010.2,K,A*3B")
        >>> result.speed_kmh.value
        10.2
        >>> result.valid
        True
    """
    fields = extract_fields(sentence, SentenceType.VTG, _MINIMUM_FIELD_COUNT)
    return _build_vtg_data(fields)
