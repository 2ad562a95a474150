from __future__ import annotations

import pytest

from playlist.errors import PlaylistError, TextDecodeError, UnrecognizedFormatError
from playlist.parsers.dispatcher import detect_format, get_parser, parse_playlist
from playlist.parsers.m3u_parser import M3UParser
from playlist.parsers.pls_parser import PLSParser
from playlist.parsers.xspf_parser import XSPFParser
from playlist.types import M3UPlaylist, PlaylistFormat, PlaylistTrack, PLSPlaylist, XSPFPlaylist


def test_m3u_basic() -> None:
    payload = "#EXTM3U\n#EXTINF:123,Artist - Title\n/path/song.mp3\n"

    playlist = parse_playlist(payload)

    assert isinstance(playlist, M3UPlaylist)
    assert playlist.format is PlaylistFormat.M3U
    assert playlist.tracks == (
        PlaylistTrack(index=1, file="/path/song.mp3", title="Artist - Title", length="123"),
    )


def test_pls_basic() -> None:
    payload = "\n  [PLAYLIST]\nNumberOfEntries=1\nFile1=a.mp3\nTitle1=A\nLength1=100\nVersion=2\n"

    playlist = parse_playlist(payload)

    assert isinstance(playlist, PLSPlaylist)
    assert playlist.format is PlaylistFormat.PLS
    assert playlist.entry_count == 1
    assert playlist.tracks[0].file == "a.mp3"


def test_xspf_basic() -> None:
    payload = b"""<?xml version="1.0" encoding="UTF-8"?>
<playlist version="1" xmlns="http://xspf.org/ns/0/">
  <trackList>
    <track><location>a.mp3</location><title>A</title><duration>1000</duration></track>
  </trackList>
</playlist>
"""

    playlist = parse_playlist(payload)

    assert isinstance(playlist, XSPFPlaylist)
    assert playlist.format is PlaylistFormat.XSPF
    assert playlist.tracks[0].duration == "1000"


@pytest.mark.parametrize(
    ("payload", "expected"),
    [
        ("[playlist]\n", PlaylistFormat.PLS),
        ("  \t[Playlist]", PlaylistFormat.PLS),
        ("#EXTM3U\n", PlaylistFormat.M3U),
        ("\n\n#EXTM3U", PlaylistFormat.M3U),
        ("<xml><playlist/></xml>", PlaylistFormat.XSPF),
        ('<?xml version="1.0"?><playlist/>', PlaylistFormat.XSPF),
        ("<playlist>", PlaylistFormat.XSPF),
        ('  <playlist version="1">', PlaylistFormat.XSPF),
    ],
)
def test_detect_format(payload: str, expected: PlaylistFormat) -> None:
    assert detect_format(payload) is expected


@pytest.mark.parametrize(
    "payload",
    ["not a recognized format", "", "   ", "#extm3u\n", "song.mp3\n#EXTM3U\n", "<plist/>"],
)
def test_invalid_format_error(payload: str) -> None:
    with pytest.raises(UnrecognizedFormatError, match="unsupported playlist format"):
        parse_playlist(payload)


def test_unrecognized_format_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        detect_format(b"plain text")


def test_get_parser_returns_registered_parsers() -> None:
    assert isinstance(get_parser(PlaylistFormat.M3U), M3UParser)
    assert isinstance(get_parser(PlaylistFormat.PLS), PLSParser)
    assert isinstance(get_parser("xspf"), XSPFParser)


def test_undecodable_bytes_raise_playlist_error() -> None:
    with pytest.raises(PlaylistError):
        parse_playlist(b"\xff#EXTM3U\n")

    with pytest.raises(TextDecodeError):
        parse_playlist(b"[playlist]\nFile1=\xff.mp3\nTitle1=A\n")


@pytest.mark.parametrize(
    ("payload", "expected"),
    [
        ("\ufeff#EXTM3U\n#EXTINF:1,One\none.mp3\n", PlaylistFormat.M3U),
        ("\ufeff  [playlist]\nFile1=a.mp3\nTitle1=A\n", PlaylistFormat.PLS),
        (
            '\ufeff<?xml version="1.0"?><playlist version="1"><trackList/></playlist>',
            PlaylistFormat.XSPF,
        ),
    ],
)
def test_string_with_bom_is_detected(payload: str, expected: PlaylistFormat) -> None:
    playlist = parse_playlist(payload)

    assert playlist.format is expected


def test_declared_latin1_xspf_bytes() -> None:
    payload = (
        '<?xml version="1.0" encoding="ISO-8859-1"?>\n'
        '<playlist version="1"><trackList><track><location>cafe.mp3</location>'
        "<title>Café</title></track></trackList></playlist>"
    ).encode("latin-1")

    playlist = parse_playlist(payload)

    assert isinstance(playlist, XSPFPlaylist)
    assert playlist.tracks[0].title == "Café"
