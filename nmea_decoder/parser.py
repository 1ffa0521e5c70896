"""Sentence type dispatch.

``parse`` identifies the sentence kind from the identifier field and hands the
whole sentence to the matching parser, which performs its own checksum
validation and tokenization.
"""

import logging
from collections.abc import Callable

from nmea_decoder.checksum import tokenize
from nmea_decoder.errors import ParseError, SentenceError
from nmea_decoder.fields import parse_type
from nmea_decoder.gga import parse_gga
from nmea_decoder.gll import parse_gll
from nmea_decoder.gsa import parse_gsa
from nmea_decoder.gsv import parse_gsv
from nmea_decoder.rmc import parse_rmc
from nmea_decoder.types import SentenceRecord, SentenceType
from nmea_decoder.vtg import parse_vtg
from nmea_decoder.zda import parse_zda

logger = logging.getLogger(__name__)

_PARSERS: dict[SentenceType, Callable[[str], SentenceRecord]] = {
    SentenceType.GGA: parse_gga,
    SentenceType.GLL: parse_gll,
    SentenceType.GSA: parse_gsa,
    SentenceType.GSV: parse_gsv,
    SentenceType.RMC: parse_rmc,
    SentenceType.VTG: parse_vtg,
    SentenceType.ZDA: parse_zda,
}


def parse(sample: str) -> SentenceRecord:
    """Decode any supported NMEA sentence.

    Only the identifier field (e.g. "$GNGGA") is searched for a sentence code,
    so a code appearing inside a data field cannot redirect the dispatch.

    Args:
        sample: Raw NMEA sentence string

    Returns:
        One of GGAData, GLLData, GSAData, GSVData, RMCData, VTGData, ZDAData.

    Raises:
        SentenceError: ``UNSUPPORTED_TYPE`` if the identifier names no
            supported sentence, otherwise whatever the selected parser raises.

    Example:
        >>> record = parse("$GNVTG,054.7,T,034.4,M,005.5,N,010.2,K,A*3B")
        >>> type(record).__name__
        'VTGData'
    """
    fields = tokenize(sample)
    if not fields:
        raise SentenceError(ParseError.UNSUPPORTED_TYPE, "no identifier")

    try:
        sentence_type = parse_type(fields[0])
    except SentenceError:
        logger.debug("Unsupported sentence identifier %r", fields[0])
        raise

    return _PARSERS[sentence_type](sample)
