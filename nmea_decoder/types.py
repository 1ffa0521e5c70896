"""NMEA data types for decoded sentences.

This module defines the enumerations, unit-bearing values and the seven record
dataclasses produced by the sentence parsers.

Design Decisions:
    1. Optional fields (``X | None``): NMEA receivers leave fields empty when
       they lack the data. ``None`` distinguishes "no data received" from a
       measured zero.

    2. One type per shape: latitude, longitude, course and magnetic variation
       are all an ``Angle`` (magnitude plus optional hemisphere); altitude and
       geoid separation are both a ``Distance``. The sentence-specific names
       remain available as aliases.

    3. Frozen records: every record is built once by a parser and never
       mutated. Time and date components are plain strings copied out of the
       sentence, so a record does not depend on the text it came from.

    4. Counts that the receiver always reports (GGA satellite count and HDOP,
       GSV header counts, ZDA date and zone) are plain numbers that default to
       0 when the field is empty.
"""

import math
from dataclasses import dataclass, field
from enum import Enum

# Conversion factors from knots.
KNOTS_TO_METERS_PER_SECOND = 0.514444444
KNOTS_TO_KILOMETERS_PER_HOUR = 1.85

_METERS_PER_FOOT = 0.3048
_METERS_PER_KILOMETER = 1000.0


class SentenceType(Enum):
    """Supported sentence codes, in dispatch priority order."""

    GGA = "GGA"
    GLL = "GLL"
    GSA = "GSA"
    GSV = "GSV"
    RMC = "RMC"
    VTG = "VTG"
    ZDA = "ZDA"


class Direction(Enum):
    NORTH = "North"
    SOUTH = "South"
    EAST = "East"
    WEST = "West"


class SpeedUnit(Enum):
    METERS_PER_SECOND = "m/s"
    KILOMETERS_PER_HOUR = "km/h"
    KNOTS = "knots"


class DistanceUnit(Enum):
    METERS = "m"
    KILOMETERS = "km"
    FEET = "ft"


class Status(Enum):
    """RMC/GLL data status: ``A`` = valid, ``V`` = invalid (warning)."""

    VALID = "Valid"
    INVALID = "Invalid"


class Mode(Enum):
    """FAA mode indicator (NMEA 2.3+).

    Only Autonomous, Differential, Estimated and NotValid are decoded from
    sentences; the remaining members exist so that records built by other
    means can still be rendered.
    """

    AUTONOMOUS = "Autonomous"
    DIFFERENTIAL = "Differential"
    ESTIMATED = "Estimated"
    MANUAL_INPUT = "Manual Input"
    SIMULATION = "Simulation"
    NOT_VALID = "Not Valid"
    PRECISE = "Precise"
    RTK_FIXED = "RTK Fixed"
    RTK_FLOAT = "RTK Float"
    UNCALIBRATED = "Uncalibrated"


class FixQuality(Enum):
    """GGA fix quality indicator; values are the NMEA digit."""

    INVALID = 0
    GPS = 1
    DGPS = 2
    PPS = 3
    REAL_TIME_KINEMATIC = 4
    FLOAT_RTK = 5
    ESTIMATED = 6
    MANUAL_INPUT = 7
    SIMULATION = 8


class SelectionMode(Enum):
    """GSA mode 1: how the receiver chooses between 2D and 3D."""

    MANUAL = "Manual"
    AUTOMATIC = "Automatic"


class FixType(Enum):
    """GSA mode 2: dimension of the fix."""

    NONE = "None"
    TWO_D = "2D"
    THREE_D = "3D"


@dataclass(frozen=True)
class Angle:
    """An angular magnitude with an optional hemisphere.

    Attributes:
        degrees: Unsigned magnitude. For coordinates and magnetic variation
            this is the raw ``ddmm.mmmm`` field divided by 100, so
            ``3150.788156`` is stored as ``31.50788156``.
        direction: Hemisphere for coordinates and magnetic variation, or
            ``None`` for a course over ground.

    Example:
        >>> Angle(40.2498796, Direction.WEST).value_degrees
        -40.2498796
    """

    degrees: float
    direction: Direction | None = None

    @property
    def value_degrees(self) -> float:
        """Signed value: negative for South and West."""
        if self.direction in (Direction.SOUTH, Direction.WEST):
            return -self.degrees
        return self.degrees

    @property
    def value_radians(self) -> float:
        return math.radians(self.value_degrees)

    @property
    def decimal_degrees(self) -> float:
        """Signed decimal degrees using the degrees + minutes/60 convention.

        The integer part of ``degrees`` holds whole degrees and the fractional
        part holds minutes / 100.
        """
        whole = math.trunc(self.degrees)
        minutes = (self.degrees - whole) * 100.0
        value = whole + minutes / 60.0
        if self.direction in (Direction.SOUTH, Direction.WEST):
            return -value
        return value


Latitude = Angle
Longitude = Angle
Course = Angle
MagneticVariation = Angle


_METERS_PER_SECOND_FROM_UNIT: dict[SpeedUnit, float] = {
    SpeedUnit.METERS_PER_SECOND: 1.0,
    SpeedUnit.KILOMETERS_PER_HOUR: KNOTS_TO_METERS_PER_SECOND
    / KNOTS_TO_KILOMETERS_PER_HOUR,
    SpeedUnit.KNOTS: KNOTS_TO_METERS_PER_SECOND,
}


@dataclass(frozen=True)
class Speed:
    """A speed stored in the unit it is tagged with."""

    value: float
    unit: SpeedUnit = SpeedUnit.KNOTS

    def to(self, unit: SpeedUnit) -> "Speed":
        """Return the same speed expressed in ``unit``."""
        if unit is self.unit:
            return self
        meters_per_second = self.value * _METERS_PER_SECOND_FROM_UNIT[self.unit]
        return Speed(meters_per_second / _METERS_PER_SECOND_FROM_UNIT[unit], unit)


_METERS_FROM_UNIT: dict[DistanceUnit, float] = {
    DistanceUnit.METERS: 1.0,
    DistanceUnit.KILOMETERS: _METERS_PER_KILOMETER,
    DistanceUnit.FEET: _METERS_PER_FOOT,
}


@dataclass(frozen=True)
class Distance:
    """A length stored in the unit it is tagged with."""

    value: float
    unit: DistanceUnit = DistanceUnit.METERS

    @property
    def meters(self) -> float:
        return self.value * _METERS_FROM_UNIT[self.unit]

    @property
    def feet(self) -> float:
        return self.meters / _METERS_PER_FOOT


Altitude = Distance
GeoidSeparation = Distance


@dataclass(frozen=True)
class UTCTime:
    """Time of day as ``hh``, ``mm``, ``ss`` strings.

    Components are sliced from the field without validation; a short field
    yields short or empty components.
    """

    hours: str
    minutes: str
    seconds: str


@dataclass(frozen=True)
class UTCDate:
    """Date as ``dd``, ``mm``, ``yy`` strings."""

    day: str
    month: str
    year: str


@dataclass(frozen=True)
class AgeOfDgps:
    seconds: float

    @property
    def minutes(self) -> float:
        return self.seconds / 60.0


@dataclass(frozen=True)
class DgpsStationId:
    id: int


@dataclass(frozen=True)
class Satellite:
    """One satellite entry from GSA or GSV.

    ``prn`` is always present. ``elevation``, ``azimuth`` and ``snr`` are NaN
    when the field was empty or could not be parsed (GSA carries PRNs only).
    """

    prn: int
    elevation: float = math.nan
    azimuth: float = math.nan
    snr: float = math.nan


@dataclass(frozen=True)
class DOP:
    """Position, horizontal and vertical dilution of precision."""

    pdop: float
    hdop: float
    vdop: float


@dataclass(frozen=True)
class GGAData:
    """Parsed GGA (Global Positioning System Fix Data) sentence.

    Attributes:
        sentence_type: Always ``SentenceType.GGA``.
        talker: Talker prefix from the identifier (e.g. ``"GN"``).
        utc_time: Time of the fix.
        latitude: Latitude, or ``None`` if the field or hemisphere was empty.
        longitude: Longitude, or ``None`` if the field or hemisphere was empty.
        fix_quality: Fix quality indicator (0-8).
        num_satellites: Satellites used in the solution, 0 when empty.
        hdop: Horizontal dilution of precision, 0.0 when empty.
        altitude: Altitude above mean sea level.
        geoid_separation: Height of the geoid above the WGS84 ellipsoid.
        age_of_dgps: Seconds since the last differential update.
        dgps_station_id: Differential reference station.

    Example:
        >>> gga = parse_gga("$GNGGA,062735.00,3150.788156,N,11711.922383,E,1,12,2.0,90.0,M,,M,,*55")
        >>> gga.fix_quality
        <FixQuality.GPS: 1>
        >>> gga.altitude
        Distance(value=90.0, unit=<DistanceUnit.METERS: 'm'>)
    """

    sentence_type: SentenceType
    talker: str
    utc_time: UTCTime
    latitude: Latitude | None
    longitude: Longitude | None
    fix_quality: FixQuality
    num_satellites: int
    hdop: float
    altitude: Altitude | None
    geoid_separation: GeoidSeparation | None
    age_of_dgps: AgeOfDgps | None
    dgps_station_id: DgpsStationId | None

    @property
    def valid(self) -> bool:
        """Navigation validity: True unless the fix quality is Invalid."""
        return self.fix_quality is not FixQuality.INVALID


@dataclass(frozen=True)
class GLLData:
    """Parsed GLL (Geographic Position - Latitude/Longitude) sentence."""

    sentence_type: SentenceType
    talker: str
    latitude: Latitude | None
    longitude: Longitude | None
    utc_time: UTCTime
    status: Status
    mode: Mode | None

    @property
    def valid(self) -> bool:
        return self.status is Status.VALID


@dataclass(frozen=True)
class GSAData:
    """Parsed GSA (DOP and Active Satellites) sentence.

    ``satellites`` holds the PRNs of the satellites used in the solution (up
    to 12); ``dop`` is ``None`` unless all three DOP values were present.
    """

    sentence_type: SentenceType
    talker: str
    selection_mode: SelectionMode
    fix_type: FixType
    satellites: tuple[Satellite, ...] = field(default_factory=tuple)
    dop: DOP | None = None


@dataclass(frozen=True)
class GSVData:
    """Parsed GSV (Satellites in View) sentence.

    A single GSV sentence describes at most four satellites; a full sky view
    is spread over ``total_messages`` sentences.
    """

    sentence_type: SentenceType
    talker: str
    total_messages: int
    message_number: int
    satellites_in_view: int
    satellites: tuple[Satellite, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class RMCData:
    """Parsed RMC (Recommended Minimum Specific GNSS Data) sentence.

    Attributes:
        speed: Speed over ground in knots.
        course: Course over ground in degrees true.
        utc_date: Date of the fix, ``None`` if the field was shorter than six
            characters.
        magnetic_variation: Magnetic variation with East/West hemisphere.
        mode: FAA mode indicator, ``None`` for receivers older than NMEA 2.3.
    """

    sentence_type: SentenceType
    talker: str
    utc_time: UTCTime
    status: Status
    latitude: Latitude | None
    longitude: Longitude | None
    speed: Speed | None
    course: Course | None
    utc_date: UTCDate | None
    magnetic_variation: MagneticVariation | None
    mode: Mode | None

    @property
    def valid(self) -> bool:
        return self.status is Status.VALID


@dataclass(frozen=True)
class VTGData:
    """Parsed VTG (Track Made Good and Ground Speed) sentence.

    Note:
        When the vehicle is stationary the course fields are typically
        ``None`` because a receiver cannot determine heading without movement.
    """

    sentence_type: SentenceType
    talker: str
    course_true: Course | None
    course_magnetic: Course | None
    speed_knots: Speed | None
    speed_kmh: Speed | None
    mode: Mode | None

    @property
    def valid(self) -> bool:
        """Navigation validity: mode present and not NotValid."""
        return self.mode is not None and self.mode is not Mode.NOT_VALID


@dataclass(frozen=True)
class ZDAData:
    """Parsed ZDA (Time and Date) sentence."""

    sentence_type: SentenceType
    talker: str
    utc_time: UTCTime
    day: int
    month: int
    year: int
    local_zone_hours: int
    local_zone_minutes: int


SentenceRecord = GGAData | GLLData | GSAData | GSVData | RMCData | VTGData | ZDAData
