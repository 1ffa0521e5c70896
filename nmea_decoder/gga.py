"""GGA sentence parser.

GGA (Global Positioning System Fix Data) is one of the most important NMEA
sentences, providing position fix information including coordinates, altitude,
fix quality, and satellite/accuracy metrics.

GGA Sentence Format:
    $GNGGA,062735.00,3150.788156,N,11711.922383,E,1,12,2.0,90.0,M,,M,,*55
           |         |           | |            | | |  |   |    | | | |
           |         |           | |            | | |  |   |    | | | +-- DGPS station ID
           |         |           | |            | | |  |   |    | | +-- Age of DGPS data (s)
           |         |           | |            | | |  |   |    +-+-- Geoid separation + unit
           |         |           | |            | | |  |   +----+-- Altitude above MSL + unit
           |         |           | |            | | |  +-- HDOP (horizontal dilution)
           |         |           | |            | | +-- Number of satellites
           |         |           | |            | +-- Fix quality (0-8)
           |         |           | +------------+-- Longitude + E/W
           |         +-----------+-- Latitude + N/S
           +-- UTC time (HHMMSS.ss)

Fix Quality Values:
    0 = Invalid (no fix)
    1 = GPS fix (SPS - Standard Positioning Service)
    2 = DGPS fix (Differential GPS)
    3 = PPS fix
    4 = RTK Fixed (Real-Time Kinematic, cm-level accuracy)
    5 = RTK Float (RTK converging, dm-level accuracy)
    6 = Estimated (dead reckoning)
    7 = Manual input
    8 = Simulation
"""

from nmea_decoder.checksum import extract_fields
from nmea_decoder.fields import (
    parse_age_of_dgps,
    parse_altitude,
    parse_dgps_station_id,
    parse_fix_quality,
    parse_float_field,
    parse_geoid_separation,
    parse_int_field,
    parse_latitude,
    parse_longitude,
    parse_talker,
    parse_utc_time,
)
from nmea_decoder.types import GGAData, SentenceType

# Identifier plus 14 data fields; the DGPS fields are present but usually empty
_MINIMUM_FIELD_COUNT = 15


def _build_gga_data(fields: list[str]) -> GGAData:
    """Construct a GGAData object from parsed fields.

    Note: num_satellites and hdop default to 0 if the field is empty, while
    the unit-bearing fields become None.

    Raises:
        SentenceError: ``INVALID_MODE`` if the fix quality is not a digit 0-8.
    """
    return GGAData(
        sentence_type=SentenceType.GGA,
        talker=parse_talker(fields[0], SentenceType.GGA),
        utc_time=parse_utc_time(fields[1]),
        latitude=parse_latitude(fields[2], fields[3]),
        longitude=parse_longitude(fields[4], fields[5]),
        fix_quality=parse_fix_quality(fields[6]),
        num_satellites=parse_int_field(fields[7]) or 0,
        hdop=parse_float_field(fields[8]) or 0.0,
        altitude=parse_altitude(fields[9], fields[10]),
        geoid_separation=parse_geoid_separation(fields[11], fields[12]),
        age_of_dgps=parse_age_of_dgps(fields[13]),
        dgps_station_id=parse_dgps_station_id(fields[14]),
    )


def parse_gga(sentence: str) -> GGAData:
    """Parse a GGA sentence into structured data.

    Args:
        sentence: Raw NMEA GGA sentence string

    Returns:
        GGAData with the decoded fix. A record whose fix_quality is
        ``FixQuality.INVALID`` (``valid`` is False) was decoded successfully
        but carries no usable position.

    Raises:
        SentenceError: If the checksum is wrong, the sentence is not a GGA,
            it has fewer than 15 fields, or the fix quality is unknown.

    Example:
        >>> result = parse_gga("$GNGGA,062735.00,3150.788156,N,11711.922383,E,1,12,2.0,90.0,M,,M,,*55")
        >>> result.latitude.value_degrees
        31.50788156
        >>> result.num_satellites
        12
    """
    fields = extract_fields(sentence, SentenceType.GGA, _MINIMUM_FIELD_COUNT)
    return _build_gga_data(fields)
