from __future__ import annotations

import logging

from config.settings import M3U_HEADER, PLS_HEADER
from playlist.errors import UnrecognizedFormatError
from playlist.types import Playlist, PlaylistFormat

from .base import BaseParser, sniff_payload
from .m3u_parser import M3UParser
from .pls_parser import PLSParser
from .xspf_parser import XSPF_PREFIXES, XSPFParser

logger = logging.getLogger(__name__)

_PARSERS: dict[PlaylistFormat, BaseParser] = {
    PlaylistFormat.PLS: PLSParser(),
    PlaylistFormat.M3U: M3UParser(),
    PlaylistFormat.XSPF: XSPFParser(),
}


def detect_format(text: str | bytes) -> PlaylistFormat:
    sniff = sniff_payload(text)

    if sniff.lower().startswith(PLS_HEADER):
        return PlaylistFormat.PLS
    if sniff.startswith(M3U_HEADER):
        return PlaylistFormat.M3U
    if sniff.startswith(XSPF_PREFIXES):
        return PlaylistFormat.XSPF

    raise UnrecognizedFormatError(f"unsupported playlist format: {sniff[:20]!r}")


def get_parser(fmt: PlaylistFormat) -> BaseParser:
    return _PARSERS[PlaylistFormat(fmt)]


def parse_playlist(payload: str | bytes) -> Playlist:
    fmt = detect_format(payload)
    logger.debug("detected playlist format=%s", fmt.value)
    return get_parser(fmt).parse(payload)
