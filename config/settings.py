"""Playlist parsing settings constants."""

from __future__ import annotations

import os

# Header line that opens every extended M3U playlist.
M3U_HEADER = "#EXTM3U"

# Length of the ``#EXTINF:`` prefix stripped from M3U info lines.
M3U_INFO_PREFIX_LENGTH = 8

# Header line of a PLS playlist, compared case-insensitively.
PLS_HEADER = "[playlist]"

# Only version 2 PLS files are accepted.
PLS_REQUIRED_VERSION = 2

# Encoding used when a playlist arrives as bytes. ``utf-8-sig`` drops a leading BOM.
DEFAULT_TEXT_ENCODING = "utf-8-sig"


def text_encoding() -> str:
    value = (os.environ.get("PLAYLIST_TEXT_ENCODING") or "").strip()
    if value:
        return value
    return DEFAULT_TEXT_ENCODING
