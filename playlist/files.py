"""Helpers for parsing playlists straight from disk or open file objects."""

from __future__ import annotations

import os
from pathlib import Path
from typing import IO, Union

from playlist.parsers.base import decode_payload
from playlist.parsers.dispatcher import parse_playlist
from playlist.simplify import parse_playlist_simple
from playlist.types import Playlist, SimplePlaylist

PlaylistSource = Union[str, os.PathLike, IO[str], IO[bytes]]


def read_playlist_text(source: PlaylistSource) -> str:
    """Return the full text of ``source``.

    ``source`` is either a filesystem path or an open file object. File objects
    are read to the end but left open; closing them stays with the caller.
    Bytes are decoded with the configured playlist encoding.
    """
    return decode_payload(_read_payload(source))


def parse_playlist_file(source: PlaylistSource) -> Playlist:
    return parse_playlist(_read_payload(source))


def parse_playlist_file_simple(source: PlaylistSource) -> SimplePlaylist:
    return parse_playlist_simple(_read_payload(source))


def _read_payload(source: PlaylistSource) -> str | bytes:
    # Raw bytes are handed on so XSPF documents keep their declared encoding.
    if isinstance(source, (str, os.PathLike)):
        return Path(source).read_bytes()
    return source.read()
