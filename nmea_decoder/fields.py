"""NMEA field parsing utilities.

This module provides utilities for decoding individual fields from NMEA
sentences. NMEA fields are comma-separated and may be empty (consecutive commas
indicate missing data). Most utilities handle empty or malformed fields by
returning None, allowing callers to distinguish "no data" from "zero value".

The exceptions are the single-character code fields (status, fix quality,
selection mode, fix type) and the sentence identifier: a record cannot be
built without them, so an unknown code raises ``SentenceError``.
"""

import math

from nmea_decoder.errors import ParseError, SentenceError
from nmea_decoder.types import (
    DOP,
    AgeOfDgps,
    Altitude,
    Angle,
    Course,
    DgpsStationId,
    Direction,
    Distance,
    DistanceUnit,
    FixQuality,
    FixType,
    GeoidSeparation,
    Latitude,
    Longitude,
    MagneticVariation,
    Mode,
    Satellite,
    SelectionMode,
    SentenceType,
    Speed,
    SpeedUnit,
    Status,
    UTCDate,
    UTCTime,
)

# NMEA coordinates are ddmm.mmmm; the magnitude is kept as the raw value / 100.
_COORDINATE_SCALE = 100.0

_LATITUDE_DIRECTIONS = {"N": Direction.NORTH, "S": Direction.SOUTH}
_LONGITUDE_DIRECTIONS = {"E": Direction.EAST, "W": Direction.WEST}

_DISTANCE_UNITS = {
    "M": DistanceUnit.METERS,
    "KM": DistanceUnit.KILOMETERS,
    "FT": DistanceUnit.FEET,
}

# Only these four letters are recognized on input, see Mode.
_MODES = {
    "A": Mode.AUTONOMOUS,
    "D": Mode.DIFFERENTIAL,
    "E": Mode.ESTIMATED,
    "N": Mode.NOT_VALID,
}

_STATUSES = {"A": Status.VALID, "V": Status.INVALID}

_FIX_QUALITIES = {str(quality.value): quality for quality in FixQuality}

_SELECTION_MODES = {"M": SelectionMode.MANUAL, "A": SelectionMode.AUTOMATIC}

_FIX_TYPES = {"1": FixType.NONE, "2": FixType.TWO_D, "3": FixType.THREE_D}

_UTC_FIELD_LENGTH = 6


def parse_numeric(value: str) -> float:
    """Parse a string field to a finite float.

    Raises:
        SentenceError: ``MISSING_FIELDS`` if the field is empty, not a number,
            non-finite ("nan", "inf") or written with digit separators.
    """
    try:
        number = float(value)
    except ValueError as exc:
        raise SentenceError(ParseError.MISSING_FIELDS, repr(value)) from exc
    if "_" in value or not math.isfinite(number):
        raise SentenceError(ParseError.MISSING_FIELDS, repr(value))
    return number


def parse_float_field(value: str) -> float | None:
    """Parse a string field to float, returning None if empty or invalid.

    NMEA fields may be empty (indicated by consecutive commas like ",,").
    This function treats empty strings as "no data" rather than an error.

    Example:
        >>> parse_float_field("545.4")
        545.4
        >>> parse_float_field("")  # empty field
        None
    """
    if not value:
        return None
    try:
        return parse_numeric(value)
    except SentenceError:
        return None


def parse_int_field(value: str) -> int | None:
    """Parse a string field to int, returning None if empty or invalid.

    The field is read as a number first and truncated, so "12" and "12.0"
    both give 12.

    Example:
        >>> parse_int_field("08")
        8
        >>> parse_int_field("")
        None
    """
    number = parse_float_field(value)
    if number is None:
        return None
    return int(number)


def _float_or_nan(value: str) -> float:
    number = parse_float_field(value)
    return math.nan if number is None else number


def parse_coordinate(value: str) -> float:
    """Parse a ddmm.mmmm coordinate field as its numeric value divided by 100.

    Example:
        >>> parse_coordinate("3150.788156")
        31.50788156
    """
    return parse_numeric(value) / _COORDINATE_SCALE


def _parse_direction(value: str, directions: dict[str, Direction]) -> Direction:
    try:
        return directions[value]
    except KeyError as exc:
        raise SentenceError(ParseError.INVALID_DIRECTION, repr(value)) from exc


def parse_latitude_direction(value: str) -> Direction:
    """Decode ``N`` or ``S``; anything else raises ``INVALID_DIRECTION``."""
    return _parse_direction(value, _LATITUDE_DIRECTIONS)


def parse_longitude_direction(value: str) -> Direction:
    """Decode ``E`` or ``W``; anything else raises ``INVALID_DIRECTION``."""
    return _parse_direction(value, _LONGITUDE_DIRECTIONS)


def _parse_angle(
    value: str,
    direction: str,
    directions: dict[str, Direction],
    scale: float,
) -> Angle | None:
    if not value or not direction:
        return None
    try:
        return Angle(
            parse_numeric(value) / scale,
            _parse_direction(direction, directions),
        )
    except SentenceError:
        return None


def parse_latitude(value: str, direction: str) -> Latitude | None:
    """Combine a coordinate field with its N/S hemisphere.

    Returns:
        Latitude, or None if either field is empty or invalid

    Example:
        >>> parse_latitude("4024.98796", "N")
        Angle(degrees=40.2498796, direction=<Direction.NORTH: 'North'>)
    """
    return _parse_angle(value, direction, _LATITUDE_DIRECTIONS, _COORDINATE_SCALE)


def parse_longitude(value: str, direction: str) -> Longitude | None:
    """Combine a coordinate field with its E/W hemisphere."""
    return _parse_angle(value, direction, _LONGITUDE_DIRECTIONS, _COORDINATE_SCALE)


def parse_magnetic_variation(
    value: str,
    direction: str,
) -> MagneticVariation | None:
    """Combine a magnetic variation field with its E/W direction.

    The field is scaled like a coordinate, so "020.3" is stored as 0.203.
    """
    return _parse_angle(value, direction, _LONGITUDE_DIRECTIONS, _COORDINATE_SCALE)


def parse_course(value: str) -> Course | None:
    number = parse_float_field(value)
    if number is None:
        return None
    return Angle(number)


def parse_speed(
    value: str,
    unit: SpeedUnit = SpeedUnit.KNOTS,
    source: SpeedUnit = SpeedUnit.KNOTS,
) -> Speed | None:
    """Parse a speed field and express it in ``unit``.

    Args:
        value: Speed field text
        unit: Unit the returned speed is stored in
        source: Unit of the field itself; knots for RMC and VTG field 5

    Example:
        >>> parse_speed("10", SpeedUnit.METERS_PER_SECOND)
        Speed(value=5.14444444, unit=<SpeedUnit.METERS_PER_SECOND: 'm/s'>)
    """
    number = parse_float_field(value)
    if number is None:
        return None
    return Speed(number, source).to(unit)


def parse_distance_unit(value: str) -> DistanceUnit:
    """Decode ``M``, ``KM`` or ``FT``; anything else raises ``UNSUPPORTED_TYPE``."""
    try:
        return _DISTANCE_UNITS[value]
    except KeyError as exc:
        raise SentenceError(ParseError.UNSUPPORTED_TYPE, repr(value)) from exc


def _parse_distance(value: str, unit: str) -> Distance | None:
    if not value or not unit:
        return None
    try:
        return Distance(parse_numeric(value), parse_distance_unit(unit))
    except SentenceError:
        return None


def parse_altitude(value: str, unit: str) -> Altitude | None:
    return _parse_distance(value, unit)


def parse_geoid_separation(value: str, unit: str) -> GeoidSeparation | None:
    return _parse_distance(value, unit)


def parse_age_of_dgps(value: str) -> AgeOfDgps | None:
    seconds = parse_float_field(value)
    if seconds is None:
        return None
    return AgeOfDgps(seconds)


def parse_dgps_station_id(value: str) -> DgpsStationId | None:
    station = parse_int_field(value)
    if station is None:
        return None
    return DgpsStationId(station)


def parse_mode(value: str) -> Mode | None:
    """Decode the FAA mode indicator from its first character.

    Returns:
        Mode, or None if the field is empty or the letter is not one of
        A (Autonomous), D (Differential), E (Estimated), N (Not valid)
    """
    if not value:
        return None
    return _MODES.get(value[0])


def _parse_code(value: str, codes: dict, what: str):
    try:
        return codes[value]
    except KeyError as exc:
        raise SentenceError(ParseError.INVALID_MODE, f"{what} {value!r}") from exc


def parse_status(value: str) -> Status:
    """Decode the data status from its first character (A/V)."""
    return _parse_code(value[:1], _STATUSES, "status")


def parse_fix_quality(value: str) -> FixQuality:
    """Decode the GGA fix quality digit (0-8)."""
    return _parse_code(value, _FIX_QUALITIES, "fix quality")


def parse_selection_mode(value: str) -> SelectionMode:
    return _parse_code(value, _SELECTION_MODES, "selection mode")


def parse_fix_type(value: str) -> FixType:
    return _parse_code(value, _FIX_TYPES, "fix type")


def parse_dop(pdop: str, hdop: str, vdop: str) -> DOP | None:
    """Parse the PDOP/HDOP/VDOP triple; None unless all three are numbers."""
    values = [parse_float_field(token) for token in (pdop, hdop, vdop)]
    if any(number is None for number in values):
        return None
    return DOP(*values)


def parse_satellite(
    prn: str,
    snr: str = "",
    elevation: str = "",
    azimuth: str = "",
) -> Satellite | None:
    """Parse one satellite entry.

    The PRN is required: an empty or non-numeric PRN gives None. SNR,
    elevation and azimuth fall back to NaN instead of rejecting the satellite.
    """
    prn_value = parse_int_field(prn)
    if prn_value is None:
        return None
    return Satellite(
        prn=prn_value,
        elevation=_float_or_nan(elevation),
        azimuth=_float_or_nan(azimuth),
        snr=_float_or_nan(snr),
    )


def parse_utc_time(value: str) -> UTCTime:
    """Slice ``hhmmss[.ss]`` into hour, minute and second strings.

    Fractional seconds are dropped. There is no length check, so a short
    field yields short or empty components.

    Example:
        >>> parse_utc_time("062735.00")
        UTCTime(hours='06', minutes='27', seconds='35')
    """
    return UTCTime(value[0:2], value[2:4], value[4:6])


def parse_utc_date(value: str) -> UTCDate | None:
    """Slice ``ddmmyy`` into day, month and year; None if shorter than 6."""
    if len(value) < _UTC_FIELD_LENGTH:
        return None
    return UTCDate(value[0:2], value[2:4], value[4:6])


def parse_type(value: str) -> SentenceType:
    """Identify the sentence code contained in an identifier field.

    Codes are tried in ``SentenceType`` order and matched anywhere within the
    field, so "$GNGGA" and "GPGGA" both give GGA.

    Raises:
        SentenceError: ``UNSUPPORTED_TYPE`` if no known code is present.
    """
    for sentence_type in SentenceType:
        if sentence_type.value in value:
            return sentence_type
    raise SentenceError(ParseError.UNSUPPORTED_TYPE, repr(value))


def parse_talker(value: str, sentence_type: SentenceType) -> str:
    """Return the talker prefix preceding the sentence code.

    Example:
        >>> parse_talker("$GNGGA", SentenceType.GGA)
        'GN'
    """
    identifier = value.removeprefix("$")
    return identifier[: identifier.find(sentence_type.value)]
