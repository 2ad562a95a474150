"""Format-neutral playlist view."""

from __future__ import annotations

from playlist.parsers.dispatcher import parse_playlist
from playlist.types import Playlist, PlaylistTrack, SimplePlaylist, XSPFPlaylist


def simplify(playlist: Playlist) -> SimplePlaylist:
    """Project any parsed playlist down to index, file, title and length.

    XSPF tracks contribute ``location`` as the file and ``duration`` as the
    length. ``entry_count`` is copied from the source playlist, so a PLS file
    keeps its declared ``NumberOfEntries`` even when it disagrees with the
    number of tracks.
    """
    if isinstance(playlist, XSPFPlaylist):
        tracks = tuple(
            PlaylistTrack(
                index=track.index,
                file=track.location,
                title=track.title,
                length=track.duration,
            )
            for track in playlist.tracks
        )
    else:
        tracks = tuple(playlist.tracks)
    return SimplePlaylist(entry_count=playlist.entry_count, tracks=tracks)


def parse_playlist_simple(payload: str | bytes) -> SimplePlaylist:
    return simplify(parse_playlist(payload))
