"""Shared sentences and helpers for the NMEA parser tests."""

from nmea_decoder.checksum import calculate_checksum

GGA_SAMPLE = "$GNGGA,062735.00,3150.788156,N,11711.922383,E,1,12,2.0,90.0,M,,M,,*55"
GLL_SAMPLE = "$GNGLL,3150.788156,N,11711.922383,E,062735.00,A,A*76"
GSA_SAMPLE = "$GNGSA,A,3,86,74,85,75,84,,,,,,,,1.96,1.36,1.42*1F"
GSV_SAMPLE = "$GPGSV,4,1,14,05,03,036,,16,36,309,29,18,11,139,,20,20,087,12*77"
RMC_SAMPLE = "$GNRMC,211041.00,A,4024.98796,N,00340.22512,W,0.027,,010218,,,D*7B"
VTG_SAMPLE = "$GNVTG,054.7,T,034.4,M,005.5,N,010.2,K,A*3B"
ZDA_SAMPLE = "$GNZDA,201530.00,04,07,2002,00,00*7E"


def with_checksum(content: str) -> str:
    """Frame ``content`` as a sentence with a correct checksum."""
    return f"${content}*{calculate_checksum(content):02X}"
