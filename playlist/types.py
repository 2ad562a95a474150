"""Structured playlist types produced by the parsers."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Union


class PlaylistFormat(str, Enum):
    M3U = "m3u"
    PLS = "pls"
    XSPF = "xspf"


@dataclass(frozen=True)
class PlaylistTrack:
    """One playlist entry reduced to its common fields.

    ``length`` keeps the format's own string form; M3U and PLS use seconds
    while XSPF uses milliseconds, so no conversion is attempted.
    """

    index: int
    file: str
    title: str
    length: str


@dataclass(frozen=True)
class M3UPlaylist:
    format: ClassVar[PlaylistFormat] = PlaylistFormat.M3U

    entry_count: int
    tracks: tuple[PlaylistTrack, ...] = ()


@dataclass(frozen=True)
class PLSPlaylist:
    format: ClassVar[PlaylistFormat] = PlaylistFormat.PLS

    entry_count: int
    version: int
    tracks: tuple[PlaylistTrack, ...] = ()


@dataclass(frozen=True)
class XSPFMetadata:
    """Optional descriptive fields shared by XSPF playlists and tracks."""

    title: str = ""
    creator: str = ""
    annotation: str = ""
    info: str = ""
    location: str = ""
    identifier: str = ""
    image: str = ""


@dataclass(frozen=True)
class XSPFMeta:
    rel: str
    value: str


@dataclass(frozen=True)
class XSPFTrack:
    index: int
    metadata: XSPFMetadata
    album: str = ""
    duration: str = ""

    @property
    def location(self) -> str:
        return self.metadata.location

    @property
    def title(self) -> str:
        return self.metadata.title


@dataclass(frozen=True)
class XSPFPlaylist:
    format: ClassVar[PlaylistFormat] = PlaylistFormat.XSPF

    version: int
    metadata: XSPFMetadata = field(default_factory=XSPFMetadata)
    date: str = ""
    license: str = ""
    meta: tuple[XSPFMeta, ...] = ()
    tracks: tuple[XSPFTrack, ...] = ()

    @property
    def entry_count(self) -> int:
        return len(self.tracks)


# Result of format auto-detection: exactly one of the format playlists.
Playlist = Union[M3UPlaylist, PLSPlaylist, XSPFPlaylist]


@dataclass(frozen=True)
class SimplePlaylist:
    """Format-neutral view keeping only index, file, title and length."""

    entry_count: int
    tracks: tuple[PlaylistTrack, ...] = ()
