"""Parsers for M3U, PLS and XSPF playlists."""

from __future__ import annotations

from .errors import (
    FieldCountMismatchError,
    FormatMismatchError,
    IndexOutOfRangeError,
    InvalidVersionError,
    MalformedValueError,
    MalformedXmlError,
    MissingRootError,
    PlaylistError,
    TextDecodeError,
    UnrecognizedFormatError,
)
from .types import (
    M3UPlaylist,
    Playlist,
    PlaylistFormat,
    PlaylistTrack,
    PLSPlaylist,
    SimplePlaylist,
    XSPFMeta,
    XSPFMetadata,
    XSPFPlaylist,
    XSPFTrack,
)
from .text import normalize_lines, normalize_tokens
from .parsers import detect_format, get_parser, parse_m3u, parse_playlist, parse_pls, parse_xspf
from .simplify import parse_playlist_simple, simplify
from .files import parse_playlist_file, parse_playlist_file_simple, read_playlist_text

__all__ = [
    "FieldCountMismatchError",
    "FormatMismatchError",
    "IndexOutOfRangeError",
    "InvalidVersionError",
    "M3UPlaylist",
    "MalformedValueError",
    "MalformedXmlError",
    "MissingRootError",
    "PLSPlaylist",
    "Playlist",
    "PlaylistError",
    "PlaylistFormat",
    "PlaylistTrack",
    "SimplePlaylist",
    "TextDecodeError",
    "UnrecognizedFormatError",
    "XSPFMeta",
    "XSPFMetadata",
    "XSPFPlaylist",
    "XSPFTrack",
    "detect_format",
    "get_parser",
    "normalize_lines",
    "normalize_tokens",
    "parse_m3u",
    "parse_playlist",
    "parse_playlist_file",
    "parse_playlist_file_simple",
    "parse_playlist_simple",
    "parse_pls",
    "parse_xspf",
    "read_playlist_text",
    "simplify",
]
