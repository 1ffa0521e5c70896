"""Tests for record rendering."""

import pytest

from nmea_decoder import ParseError, error_to_string, format_record, parse
from tests.nmea.helpers import (
    GGA_SAMPLE,
    GLL_SAMPLE,
    GSA_SAMPLE,
    GSV_SAMPLE,
    RMC_SAMPLE,
    VTG_SAMPLE,
    ZDA_SAMPLE,
)


class TestErrorToString:
    def test_labels(self):
        assert error_to_string(ParseError.INVALID_FORMAT) == "Invalid Format"
        assert error_to_string(ParseError.UNSUPPORTED_TYPE) == "Unsupported Type"
        assert error_to_string(ParseError.MISSING_FIELDS) == "Missing Fields"

    def test_every_error_has_label(self):
        for error in ParseError:
            assert error_to_string(error)


class TestFormatRecord:
    """Tests for format_record function."""

    def test_gga(self):
        lines = format_record(parse(GGA_SAMPLE)).splitlines()

        assert lines[0] == "Type: GGA"
        assert lines[1] == "Talker: GN"
        assert "UTC Time: 06:27:35" in lines
        assert "Fix Quality: GPS" in lines
        assert "Number of Satellites: 12" in lines
        assert "HDOP: 2.0" in lines
        assert "Altitude: 90.0 m" in lines
        assert "Geoid Separation: --" in lines
        assert "Age of DGPS: --" in lines
        assert "DGPS Station ID: --" in lines

        latitude = next(line for line in lines if line.startswith("Latitude: "))
        assert latitude.endswith(" North")

    def test_gga_rtk_label(self):
        text = format_record(
            parse(
                "$GNGGA,081836.00,3723.46587,N,12202.26957,W,4,12,0.7,10.5,M,-30.0,M,1.0,0000*51"
            )
        )

        assert "Fix Quality: Real Time Kinematic" in text
        assert "Geoid Separation: -30.0 m" in text
        assert "DGPS Station ID: 0" in text

    def test_gll(self):
        text = format_record(parse(GLL_SAMPLE))

        assert "Status: Valid" in text
        assert "Mode: Autonomous" in text

    def test_gsa(self):
        lines = format_record(parse(GSA_SAMPLE)).splitlines()

        assert "Selection Mode: Automatic" in lines
        assert "Fix Type: 3D" in lines
        assert "Satellites:" in lines
        assert "DOP: PDOP: 1.96, HDOP: 1.36, VDOP: 1.42" in lines

    def test_gsv_satellite_lines(self):
        lines = format_record(parse(GSV_SAMPLE)).splitlines()

        assert "Satellites in View: 14" in lines
        assert "  PRN: 16, SNR: 36.0, Elevation: 309.0, Azimuth: 29.0" in lines
        assert "  PRN: 5, SNR: 3.0, Elevation: 36.0, Azimuth: nan" in lines

    def test_rmc(self):
        lines = format_record(parse(RMC_SAMPLE)).splitlines()

        assert lines[0] == "Type: RMC"
        assert "UTC Date: 01/02/18" in lines
        assert "UTC Time: 21:10:41" in lines
        assert "Speed: 0.027 knots" in lines
        assert "Course: --" in lines
        assert "Magnetic Variation: --" in lines
        assert "Mode: Differential" in lines

    def test_rmc_empty_time_and_date(self):
        lines = format_record(parse("$GPRMC,,V,,,,,,,,,,N*53")).splitlines()

        assert "UTC Time: --:--:--" in lines
        assert "UTC Date: --/--/--" in lines
        assert "Latitude: --" in lines
        assert "Status: Invalid" in lines

    def test_vtg(self):
        lines = format_record(parse(VTG_SAMPLE)).splitlines()

        assert "Course True: 54.7" in lines
        assert "Course Magnetic: 34.4" in lines
        assert "Speed: 5.5 knots" in lines
        assert "Speed: 10.2 km/h" in lines

    def test_vtg_empty_mode(self):
        text = format_record(parse("$GNVTG,054.7,T,034.4,M,005.5,N,010.2,K,*7A"))

        assert "Mode: --" in text

    def test_zda(self):
        lines = format_record(parse(ZDA_SAMPLE)).splitlines()

        assert "Day: 4" in lines
        assert "Month: 7" in lines
        assert "Year: 2002" in lines
        assert "Local Zone Hours: 0" in lines

    def test_rejects_other_objects(self):
        with pytest.raises(TypeError):
            format_record("$GNGGA")
