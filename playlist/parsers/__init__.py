from __future__ import annotations

from .base import BaseParser
from .dispatcher import detect_format, get_parser, parse_playlist
from .m3u_parser import M3UParser, parse_m3u
from .pls_parser import PLSParser, parse_pls
from .xspf_parser import XSPFParser, parse_xspf

__all__ = [
    "BaseParser",
    "M3UParser",
    "PLSParser",
    "XSPFParser",
    "detect_format",
    "get_parser",
    "parse_m3u",
    "parse_playlist",
    "parse_pls",
    "parse_xspf",
]
