"""GSA sentence parser.

GSA (GNSS DOP and Active Satellites) lists the satellites used in the current
solution and the resulting dilution of precision.

GSA Sentence Format:
    $GNGSA,A,3,86,74,85,75,84,,,,,,,,1.96,1.36,1.42*1F
           | | |                     |    |    |
           | | |                     |    |    +-- VDOP
           | | |                     |    +-- HDOP
           | | |                     +-- PDOP
           | | +-- Up to 12 PRNs of satellites used (empty slots allowed)
           | +-- Fix type (1=none, 2=2D, 3=3D)
           +-- Selection mode (M=manual, A=automatic)
"""

from nmea_decoder.checksum import extract_fields
from nmea_decoder.fields import (
    parse_dop,
    parse_fix_type,
    parse_satellite,
    parse_selection_mode,
    parse_talker,
)
from nmea_decoder.types import GSAData, SentenceType

_MINIMUM_FIELD_COUNT = 3

_FIRST_PRN_INDEX = 3
_LAST_PRN_INDEX = 14
_PDOP_INDEX = 15

# DOP is only read when all three values are present
_DOP_FIELD_COUNT = 18


def _build_gsa_data(fields: list[str]) -> GSAData:
    """Construct a GSAData object from parsed fields.

    Maps NMEA field indices to GSAData attributes:
        fields[1]     -> selection_mode
        fields[2]     -> fix_type
        fields[3..14] -> satellites (PRN only; empty slots are skipped)
        fields[15..17] -> dop, when the sentence has 18 fields or more
    """
    prn_fields = fields[_FIRST_PRN_INDEX : _LAST_PRN_INDEX + 1]
    satellites = tuple(
        satellite
        for satellite in (parse_satellite(prn) for prn in prn_fields)
        if satellite is not None
    )

    dop = None
    if len(fields) >= _DOP_FIELD_COUNT:
        dop = parse_dop(*fields[_PDOP_INDEX : _PDOP_INDEX + 3])

    return GSAData(
        sentence_type=SentenceType.GSA,
        talker=parse_talker(fields[0], SentenceType.GSA),
        selection_mode=parse_selection_mode(fields[1]),
        fix_type=parse_fix_type(fields[2]),
        satellites=satellites,
        dop=dop,
    )


def parse_gsa(sentence: str) -> GSAData:
    """Parse a GSA sentence into structured data.

    Raises:
        SentenceError: If the checksum is wrong, the sentence is not a GSA,
            it has fewer than 3 fields, or the selection mode / fix type is
            unknown.

    Example:
        >>> result = parse_gsa("$GNGSA,A,3,86,74,85,75,84,,,,,,,,1.96,1.36,1.42*1F")
        >>> [satellite.prn for satellite in result.satellites]
        [86, 74, 85, 75, 84]
        >>> result.dop.hdop
        1.36
    """
    fields = extract_fields(sentence, SentenceType.GSA, _MINIMUM_FIELD_COUNT)
    return _build_gsa_data(fields)
