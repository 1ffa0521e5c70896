"""Tests for NMEA field parsing utilities."""

import math

import pytest

from nmea_decoder import (
    DOP,
    Direction,
    DistanceUnit,
    FixQuality,
    FixType,
    Mode,
    ParseError,
    SelectionMode,
    SentenceError,
    SentenceType,
    SpeedUnit,
    Status,
    UTCDate,
    UTCTime,
)
from nmea_decoder.fields import (
    parse_altitude,
    parse_coordinate,
    parse_course,
    parse_distance_unit,
    parse_dop,
    parse_fix_quality,
    parse_fix_type,
    parse_float_field,
    parse_int_field,
    parse_latitude,
    parse_latitude_direction,
    parse_longitude,
    parse_longitude_direction,
    parse_magnetic_variation,
    parse_mode,
    parse_numeric,
    parse_satellite,
    parse_selection_mode,
    parse_speed,
    parse_status,
    parse_talker,
    parse_type,
    parse_utc_date,
    parse_utc_time,
)


class TestParseNumeric:
    """Tests for parse_numeric and its lenient variants."""

    def test_parses_number(self):
        assert parse_numeric("545.4") == pytest.approx(545.4)

    def test_negative_number(self):
        assert parse_numeric("-30.0") == pytest.approx(-30.0)

    @pytest.mark.parametrize(
        "value", ["", "abc", "1.2.3", "nan", "inf", "-inf", "1e999", "1_000"]
    )
    def test_invalid_raises_missing_fields(self, value):
        with pytest.raises(SentenceError) as exc_info:
            parse_numeric(value)
        assert exc_info.value.error is ParseError.MISSING_FIELDS

    def test_float_field_empty_is_none(self):
        assert parse_float_field("") is None

    def test_float_field_invalid_is_none(self):
        assert parse_float_field("xx") is None

    @pytest.mark.parametrize("value", ["nan", "inf", "1_000"])
    def test_float_field_non_finite_is_none(self, value):
        assert parse_float_field(value) is None

    def test_int_field_leading_zero(self):
        assert parse_int_field("08") == 8

    def test_int_field_truncates_decimal(self):
        assert parse_int_field("12.0") == 12

    def test_int_field_nan_is_none(self):
        assert parse_int_field("nan") is None


class TestParseCoordinate:
    """Tests for coordinate and hemisphere parsing."""

    def test_coordinate_divided_by_100(self):
        assert parse_coordinate("3150.788156") == pytest.approx(31.50788156)

    def test_latitude_north(self):
        latitude = parse_latitude("4807.038", "N")
        assert latitude.degrees == pytest.approx(48.07038)
        assert latitude.direction is Direction.NORTH

    def test_longitude_west_is_negative(self):
        longitude = parse_longitude("00340.22512", "W")
        assert longitude.direction is Direction.WEST
        assert longitude.value_degrees == pytest.approx(-3.4022512)

    def test_empty_value_is_none(self):
        assert parse_latitude("", "N") is None

    def test_empty_direction_is_none(self):
        assert parse_longitude("01131.000", "") is None

    def test_wrong_hemisphere_is_none(self):
        assert parse_latitude("4807.038", "E") is None
        assert parse_longitude("01131.000", "N") is None

    def test_direction_codes(self):
        assert parse_latitude_direction("S") is Direction.SOUTH
        assert parse_longitude_direction("E") is Direction.EAST

    @pytest.mark.parametrize("value", ["", "X", "n", "NS"])
    def test_invalid_direction_raises(self, value):
        with pytest.raises(SentenceError) as exc_info:
            parse_latitude_direction(value)
        assert exc_info.value.error is ParseError.INVALID_DIRECTION

    def test_magnetic_variation_scaled_like_coordinate(self):
        variation = parse_magnetic_variation("020.3", "E")
        assert variation.degrees == pytest.approx(0.203)
        assert variation.direction is Direction.EAST

    def test_magnetic_variation_empty_is_none(self):
        assert parse_magnetic_variation("", "") is None


class TestParseCourseAndSpeed:
    """Tests for course and speed parsing."""

    def test_course_has_no_direction(self):
        course = parse_course("054.7")
        assert course.degrees == pytest.approx(54.7)
        assert course.direction is None

    def test_course_empty_is_none(self):
        assert parse_course("") is None

    def test_speed_defaults_to_knots(self):
        speed = parse_speed("0.027")
        assert speed.value == pytest.approx(0.027)
        assert speed.unit is SpeedUnit.KNOTS

    def test_speed_to_meters_per_second(self):
        speed = parse_speed("10", SpeedUnit.METERS_PER_SECOND)
        assert speed.value == pytest.approx(5.14444444)
        assert speed.unit is SpeedUnit.METERS_PER_SECOND

    def test_speed_to_kilometers_per_hour(self):
        speed = parse_speed("10", SpeedUnit.KILOMETERS_PER_HOUR)
        assert speed.value == pytest.approx(18.5)

    def test_speed_in_source_unit_is_unchanged(self):
        speed = parse_speed(
            "010.2",
            SpeedUnit.KILOMETERS_PER_HOUR,
            source=SpeedUnit.KILOMETERS_PER_HOUR,
        )
        assert speed.value == pytest.approx(10.2)

    def test_speed_empty_is_none(self):
        assert parse_speed("") is None


class TestParseDistance:
    """Tests for altitude and unit parsing."""

    def test_altitude_meters(self):
        altitude = parse_altitude("545.4", "M")
        assert altitude.value == pytest.approx(545.4)
        assert altitude.unit is DistanceUnit.METERS

    def test_altitude_feet(self):
        altitude = parse_altitude("1789.4", "FT")
        assert altitude.unit is DistanceUnit.FEET
        assert altitude.meters == pytest.approx(545.40912)

    def test_unknown_unit_gives_none(self):
        assert parse_altitude("47.0", "XX") is None

    def test_empty_unit_gives_none(self):
        assert parse_altitude("47.0", "") is None

    def test_distance_units(self):
        assert parse_distance_unit("KM") is DistanceUnit.KILOMETERS

    def test_unknown_distance_unit_raises(self):
        with pytest.raises(SentenceError) as exc_info:
            parse_distance_unit("mi")
        assert exc_info.value.error is ParseError.UNSUPPORTED_TYPE


class TestParseCodes:
    """Tests for single-letter and single-digit code fields."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("A", Mode.AUTONOMOUS),
            ("D", Mode.DIFFERENTIAL),
            ("E", Mode.ESTIMATED),
            ("N", Mode.NOT_VALID),
            ("Autonomous", Mode.AUTONOMOUS),
        ],
    )
    def test_mode(self, value, expected):
        assert parse_mode(value) is expected

    @pytest.mark.parametrize("value", ["", "R", "F", "S"])
    def test_unrecognized_mode_is_none(self, value):
        assert parse_mode(value) is None

    def test_status(self):
        assert parse_status("A") is Status.VALID
        assert parse_status("V") is Status.INVALID

    @pytest.mark.parametrize("value", ["", "X"])
    def test_invalid_status_raises(self, value):
        with pytest.raises(SentenceError) as exc_info:
            parse_status(value)
        assert exc_info.value.error is ParseError.INVALID_MODE

    def test_every_fix_quality_digit(self):
        for quality in FixQuality:
            assert parse_fix_quality(str(quality.value)) is quality

    @pytest.mark.parametrize("value", ["", "9", "G"])
    def test_invalid_fix_quality_raises(self, value):
        with pytest.raises(SentenceError) as exc_info:
            parse_fix_quality(value)
        assert exc_info.value.error is ParseError.INVALID_MODE

    def test_selection_mode(self):
        assert parse_selection_mode("M") is SelectionMode.MANUAL
        assert parse_selection_mode("A") is SelectionMode.AUTOMATIC

    def test_fix_type(self):
        assert parse_fix_type("1") is FixType.NONE
        assert parse_fix_type("2") is FixType.TWO_D
        assert parse_fix_type("3") is FixType.THREE_D

    def test_invalid_fix_type_raises(self):
        with pytest.raises(SentenceError) as exc_info:
            parse_fix_type("4")
        assert exc_info.value.error is ParseError.INVALID_MODE


class TestParseSatelliteAndDop:
    def test_full_satellite(self):
        satellite = parse_satellite("16", "29", "36", "309")
        assert satellite.prn == 16
        assert satellite.snr == pytest.approx(29.0)
        assert satellite.elevation == pytest.approx(36.0)
        assert satellite.azimuth == pytest.approx(309.0)

    def test_missing_values_are_nan(self):
        satellite = parse_satellite("05")
        assert satellite.prn == 5
        assert math.isnan(satellite.snr)
        assert math.isnan(satellite.elevation)
        assert math.isnan(satellite.azimuth)

    def test_empty_prn_is_none(self):
        assert parse_satellite("", "20", "087", "12") is None

    def test_dop(self):
        assert parse_dop("1.9", "1.0", "1.6") == DOP(1.9, 1.0, 1.6)

    def test_dop_with_missing_value_is_none(self):
        assert parse_dop("1.9", "", "1.6") is None


class TestParseTimeAndDate:
    def test_utc_time_drops_fraction(self):
        assert parse_utc_time("062735.00") == UTCTime("06", "27", "35")

    def test_short_utc_time_has_empty_components(self):
        assert parse_utc_time("0627") == UTCTime("06", "27", "")
        assert parse_utc_time("") == UTCTime("", "", "")

    def test_utc_date(self):
        assert parse_utc_date("010218") == UTCDate("01", "02", "18")

    def test_short_utc_date_is_none(self):
        assert parse_utc_date("1911") is None


class TestParseType:
    """Tests for sentence identifier handling."""

    @pytest.mark.parametrize("sentence_type", list(SentenceType))
    def test_every_code_with_talker(self, sentence_type):
        assert parse_type(f"$GN{sentence_type.value}") is sentence_type

    def test_without_dollar_sign(self):
        assert parse_type("GPRMC") is SentenceType.RMC

    def test_unknown_code_raises(self):
        with pytest.raises(SentenceError) as exc_info:
            parse_type("$GPTXT")
        assert exc_info.value.error is ParseError.UNSUPPORTED_TYPE

    def test_talker(self):
        assert parse_talker("$GNGGA", SentenceType.GGA) == "GN"
        assert parse_talker("GPVTG", SentenceType.VTG) == "GP"

    def test_missing_talker_is_empty(self):
        assert parse_talker("$GGA", SentenceType.GGA) == ""
