"""NMEA 0183 parser for GGA, GLL, GSA, GSV, RMC, VTG and ZDA sentences."""

from nmea_decoder.checksum import is_valid_sample, split, tokenize
from nmea_decoder.errors import ParseError, SentenceError
from nmea_decoder.formatters import error_to_string, format_record
from nmea_decoder.gga import parse_gga
from nmea_decoder.gll import parse_gll
from nmea_decoder.gsa import parse_gsa
from nmea_decoder.gsv import parse_gsv
from nmea_decoder.parser import parse
from nmea_decoder.rmc import parse_rmc
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
    GGAData,
    GLLData,
    GSAData,
    GSVData,
    Latitude,
    Longitude,
    MagneticVariation,
    Mode,
    RMCData,
    Satellite,
    SelectionMode,
    SentenceRecord,
    SentenceType,
    Speed,
    SpeedUnit,
    Status,
    UTCDate,
    UTCTime,
    VTGData,
    ZDAData,
)
from nmea_decoder.vtg import parse_vtg
from nmea_decoder.zda import parse_zda

__all__ = [
    "DOP",
    "AgeOfDgps",
    "Altitude",
    "Angle",
    "Course",
    "DgpsStationId",
    "Direction",
    "Distance",
    "DistanceUnit",
    "FixQuality",
    "FixType",
    "GGAData",
    "GLLData",
    "GSAData",
    "GSVData",
    "GeoidSeparation",
    "Latitude",
    "Longitude",
    "MagneticVariation",
    "Mode",
    "ParseError",
    "RMCData",
    "Satellite",
    "SelectionMode",
    "SentenceError",
    "SentenceRecord",
    "SentenceType",
    "Speed",
    "SpeedUnit",
    "Status",
    "UTCDate",
    "UTCTime",
    "VTGData",
    "ZDAData",
    "error_to_string",
    "format_record",
    "is_valid_sample",
    "parse",
    "parse_gga",
    "parse_gll",
    "parse_gsa",
    "parse_gsv",
    "parse_rmc",
    "parse_vtg",
    "parse_zda",
    "split",
    "tokenize",
]
