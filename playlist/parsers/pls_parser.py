from __future__ import annotations

import logging

from config.settings import PLS_HEADER, PLS_REQUIRED_VERSION
from playlist.errors import (
    FieldCountMismatchError,
    FormatMismatchError,
    IndexOutOfRangeError,
    InvalidVersionError,
    MalformedValueError,
)
from playlist.text import normalize_lines
from playlist.types import PlaylistFormat, PlaylistTrack, PLSPlaylist

from .base import BaseParser, decode_payload

logger = logging.getLogger(__name__)

# Indexed directives, checked in this order against the lower-cased key.
_TITLE = "title"
_FILE = "file"
_LENGTH = "length"


class PLSParser(BaseParser):
    FORMAT = PlaylistFormat.PLS

    def parse(self, payload: str | bytes) -> PLSPlaylist:
        lines = normalize_lines(decode_payload(payload))
        if not lines or lines[0].lower() != PLS_HEADER:
            raise FormatMismatchError("playlist is not in PLS format")

        entry_count = 0
        version = 0
        directives: dict[str, list[tuple[int, str]]] = {_TITLE: [], _FILE: [], _LENGTH: []}

        for line in lines[1:]:
            key, value = _split_directive(line)
            lowered = key.lower()
            if lowered == "numberofentries":
                entry_count = _parse_int(value, "NumberOfEntries")
                continue
            if lowered == "version":
                version = _parse_version(value)
                continue
            for prefix in (_TITLE, _FILE, _LENGTH):
                if lowered.startswith(prefix):
                    directives[prefix].append((_parse_suffix(key, len(prefix)), value))
                    break

        titles = directives[_TITLE]
        files = directives[_FILE]
        if len(titles) != len(files):
            raise FieldCountMismatchError(
                f"pls playlist has {len(titles)} title fields and {len(files)} file fields"
            )

        tracks = tuple(
            PlaylistTrack(
                index=current,
                file=_lookup(files, current),
                title=_lookup(titles, current),
                length=_lookup(directives[_LENGTH], current),
            )
            for current in range(1, len(titles) + 1)
        )
        logger.debug(
            "parsed pls playlist declared_entries=%d tracks=%d", entry_count, len(tracks)
        )
        return PLSPlaylist(entry_count=entry_count, version=version, tracks=tracks)


def _split_directive(line: str) -> tuple[str, str]:
    key, sep, value = line.partition("=")
    key = key.strip()
    value = value.strip()
    if not sep or not key or not value:
        raise IndexOutOfRangeError(f"pls line is not a key=value directive: {line!r}")
    return key, value


def _parse_int(value: str, name: str) -> int:
    try:
        return int(value)
    except ValueError as exc:
        raise MalformedValueError(f"{name} must be an integer, got {value!r}") from exc


def _parse_version(value: str) -> int:
    try:
        version = int(value)
    except ValueError:
        version = None
    if version != PLS_REQUIRED_VERSION:
        raise InvalidVersionError(f"pls version entry must be {PLS_REQUIRED_VERSION}, got {value!r}")
    return version


def _parse_suffix(key: str, start: int) -> int:
    # Entry numbers may span several digits (Title10=).
    suffix = key[start:]
    if not (suffix.isascii() and suffix.isdigit()):
        raise IndexOutOfRangeError(f"pls directive {key!r} has no numeric index")
    return int(suffix)


def _lookup(entries: list[tuple[int, str]], index: int) -> str:
    for number, value in entries:
        if number == index:
            return value
    return ""


def parse_pls(payload: str | bytes) -> PLSPlaylist:
    return PLSParser().parse(payload)
