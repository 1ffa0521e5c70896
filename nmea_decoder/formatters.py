"""Human-readable rendering of decoded sentences.

The output is a multi-line ``Label: value`` listing intended for logs and
debugging. It is not a stable machine format.
"""

from collections.abc import Callable

from nmea_decoder.errors import ParseError
from nmea_decoder.types import (
    DOP,
    AgeOfDgps,
    Angle,
    DgpsStationId,
    Distance,
    FixQuality,
    FixType,
    GGAData,
    GLLData,
    GSAData,
    GSVData,
    Mode,
    RMCData,
    Satellite,
    SelectionMode,
    SentenceRecord,
    Speed,
    Status,
    UTCDate,
    UTCTime,
    VTGData,
    ZDAData,
)

__all__ = ["error_to_string", "format_record"]

_ABSENT = "--"

_FIX_QUALITY_LABELS = {
    FixQuality.INVALID: "Invalid",
    FixQuality.GPS: "GPS",
    FixQuality.DGPS: "DGPS",
    FixQuality.PPS: "PPS",
    FixQuality.REAL_TIME_KINEMATIC: "Real Time Kinematic",
    FixQuality.FLOAT_RTK: "Float RTK",
    FixQuality.ESTIMATED: "Estimated",
    FixQuality.MANUAL_INPUT: "Manual Input",
    FixQuality.SIMULATION: "Simulation",
}


def error_to_string(error: ParseError) -> str:
    """Return the label of a parse error, e.g. "Invalid Format"."""
    return error.value


def _label(value: Mode | Status | SelectionMode | FixType | None) -> str:
    return _ABSENT if value is None else value.value


def _angle(angle: Angle | None) -> str:
    if angle is None:
        return _ABSENT
    if angle.direction is None:
        return f"{angle.degrees}"
    return f"{angle.degrees} {angle.direction.value}"


def _measure(measure: Speed | Distance | None) -> str:
    if measure is None:
        return _ABSENT
    return f"{measure.value} {measure.unit.value}"


def _utc_time(utc_time: UTCTime) -> str:
    if not (utc_time.hours and utc_time.minutes and utc_time.seconds):
        return "--:--:--"
    return f"{utc_time.hours}:{utc_time.minutes}:{utc_time.seconds}"


def _utc_date(utc_date: UTCDate | None) -> str:
    if utc_date is None:
        return "--/--/--"
    return f"{utc_date.day}/{utc_date.month}/{utc_date.year}"


def _age(age: AgeOfDgps | None) -> str:
    return _ABSENT if age is None else f"{age.seconds}"


def _station(station: DgpsStationId | None) -> str:
    return _ABSENT if station is None else f"{station.id}"


def _satellite(satellite: Satellite) -> str:
    return (
        f"PRN: {satellite.prn}, SNR: {satellite.snr}, "
        f"Elevation: {satellite.elevation}, Azimuth: {satellite.azimuth}"
    )


def _dop(dop: DOP | None) -> str:
    if dop is None:
        return _ABSENT
    return f"PDOP: {dop.pdop}, HDOP: {dop.hdop}, VDOP: {dop.vdop}"


def _satellite_lines(satellites: tuple[Satellite, ...]) -> list[str]:
    return ["Satellites:"] + [f"  {_satellite(s)}" for s in satellites]


def _format_gga(data: GGAData) -> list[str]:
    return [
        f"UTC Time: {_utc_time(data.utc_time)}",
        f"Latitude: {_angle(data.latitude)}",
        f"Longitude: {_angle(data.longitude)}",
        f"Fix Quality: {_FIX_QUALITY_LABELS[data.fix_quality]}",
        f"Number of Satellites: {data.num_satellites}",
        f"HDOP: {data.hdop}",
        f"Altitude: {_measure(data.altitude)}",
        f"Geoid Separation: {_measure(data.geoid_separation)}",
        f"Age of DGPS: {_age(data.age_of_dgps)}",
        f"DGPS Station ID: {_station(data.dgps_station_id)}",
    ]


def _format_gll(data: GLLData) -> list[str]:
    return [
        f"Latitude: {_angle(data.latitude)}",
        f"Longitude: {_angle(data.longitude)}",
        f"UTC Time: {_utc_time(data.utc_time)}",
        f"Status: {_label(data.status)}",
        f"Mode: {_label(data.mode)}",
    ]


def _format_gsa(data: GSAData) -> list[str]:
    return [
        f"Selection Mode: {_label(data.selection_mode)}",
        f"Fix Type: {_label(data.fix_type)}",
        *_satellite_lines(data.satellites),
        f"DOP: {_dop(data.dop)}",
    ]


def _format_gsv(data: GSVData) -> list[str]:
    return [
        f"Total Messages: {data.total_messages}",
        f"Message Number: {data.message_number}",
        f"Satellites in View: {data.satellites_in_view}",
        *_satellite_lines(data.satellites),
    ]


def _format_rmc(data: RMCData) -> list[str]:
    return [
        f"Status: {_label(data.status)}",
        f"UTC Date: {_utc_date(data.utc_date)}",
        f"UTC Time: {_utc_time(data.utc_time)}",
        f"Latitude: {_angle(data.latitude)}",
        f"Longitude: {_angle(data.longitude)}",
        f"Speed: {_measure(data.speed)}",
        f"Course: {_angle(data.course)}",
        f"Magnetic Variation: {_angle(data.magnetic_variation)}",
        f"Mode: {_label(data.mode)}",
    ]


def _format_vtg(data: VTGData) -> list[str]:
    return [
        f"Course True: {_angle(data.course_true)}",
        f"Course Magnetic: {_angle(data.course_magnetic)}",
        f"Speed: {_measure(data.speed_knots)}",
        f"Speed: {_measure(data.speed_kmh)}",
        f"Mode: {_label(data.mode)}",
    ]


def _format_zda(data: ZDAData) -> list[str]:
    return [
        f"UTC Time: {_utc_time(data.utc_time)}",
        f"Day: {data.day}",
        f"Month: {data.month}",
        f"Year: {data.year}",
        f"Local Zone Hours: {data.local_zone_hours}",
        f"Local Zone Minutes: {data.local_zone_minutes}",
    ]


_FORMATTERS: dict[type, Callable[[SentenceRecord], list[str]]] = {
    GGAData: _format_gga,
    GLLData: _format_gll,
    GSAData: _format_gsa,
    GSVData: _format_gsv,
    RMCData: _format_rmc,
    VTGData: _format_vtg,
    ZDAData: _format_zda,
}


def format_record(record: SentenceRecord) -> str:
    """Render a decoded sentence as ``Label: value`` lines.

    Absent values are shown as ``--``.

    Raises:
        TypeError: If ``record`` is not one of the seven sentence records.

    Example:
        >>> print(format_record(parse("$GNVTG,054.7,T,034.4,M,005.5,N,010.2,K,A*3B")))
        Type: VTG
        Talker: GN
        Course True: 54.7
        ...
    """
    formatter = _FORMATTERS.get(type(record))
    if formatter is None:
        raise TypeError(f"Not a sentence record: {type(record).__name__}")
    lines = [
        f"Type: {record.sentence_type.value}",
        f"Talker: {record.talker or _ABSENT}",
        *formatter(record),
    ]
    return "\n".join(lines)
