from __future__ import annotations

import logging

from config.settings import M3U_HEADER, M3U_INFO_PREFIX_LENGTH
from playlist.errors import FormatMismatchError, IndexOutOfRangeError
from playlist.text import normalize_lines, normalize_tokens
from playlist.types import M3UPlaylist, PlaylistFormat, PlaylistTrack

from .base import BaseParser, decode_payload

logger = logging.getLogger(__name__)


class M3UParser(BaseParser):
    FORMAT = PlaylistFormat.M3U

    def parse(self, payload: str | bytes) -> M3UPlaylist:
        lines = normalize_lines(decode_payload(payload))
        if not lines or lines[0] != M3U_HEADER:
            raise FormatMismatchError("playlist is not in M3U format")

        tracks: list[PlaylistTrack] = []
        # Lines after the header come in (info, path) pairs; a dangling info line is dropped.
        current = 1
        while current + 1 < len(lines):
            length, title = _parse_extinf(lines[current], current)
            tracks.append(
                PlaylistTrack(
                    index=len(tracks) + 1,
                    file=lines[current + 1],
                    title=title,
                    length=length,
                )
            )
            current += 2

        logger.debug("parsed m3u playlist tracks=%d", len(tracks))
        return M3UPlaylist(entry_count=len(tracks), tracks=tuple(tracks))


def _parse_extinf(line: str, line_number: int) -> tuple[str, str]:
    # #EXTINF:<seconds>,<title>; the prefix text itself is not checked.
    if len(line) < M3U_INFO_PREFIX_LENGTH:
        raise IndexOutOfRangeError(f"m3u info line {line_number} is too short: {line!r}")
    items = normalize_tokens(line[M3U_INFO_PREFIX_LENGTH:].split(","))
    if len(items) < 2:
        raise IndexOutOfRangeError(
            f"m3u info line {line_number} needs a duration and a title: {line!r}"
        )
    return items[0], items[1]


def parse_m3u(payload: str | bytes) -> M3UPlaylist:
    return M3UParser().parse(payload)
