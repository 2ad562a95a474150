from __future__ import annotations

import codecs
import logging
import xml.etree.ElementTree as ET

from playlist.errors import (
    FormatMismatchError,
    IndexOutOfRangeError,
    MalformedValueError,
    MalformedXmlError,
    MissingRootError,
)
from playlist.types import PlaylistFormat, XSPFMeta, XSPFMetadata, XSPFPlaylist, XSPFTrack

from .base import BaseParser, sniff_payload, strip_bom

logger = logging.getLogger(__name__)

XSPF_PREFIXES = ("<xml", "<?xml", "<playlist")

_METADATA_FIELDS = ("title", "creator", "annotation", "info", "location", "identifier", "image")


class XSPFParser(BaseParser):
    FORMAT = PlaylistFormat.XSPF

    def parse(self, payload: str | bytes) -> XSPFPlaylist:
        if not sniff_payload(payload).startswith(XSPF_PREFIXES):
            raise FormatMismatchError("playlist is not in XSPF format")

        # Bytes go to expat untouched so the XML declaration picks the encoding.
        if isinstance(payload, (bytes, bytearray)):
            source: str | bytes = bytes(payload).removeprefix(codecs.BOM_UTF8).lstrip()
        else:
            source = strip_bom(payload.lstrip()).lstrip()

        try:
            document = ET.fromstring(source)
        except ET.ParseError as exc:
            raise MalformedXmlError(f"xspf playlist is not well-formed xml: {exc}") from exc

        root = _find_playlist_root(document)
        version = _parse_version(root.get("version"))

        metadata = XSPFMetadata(**{name: _child_text(root, name) for name in _METADATA_FIELDS})
        meta = tuple(
            XSPFMeta(rel=element.get("rel", ""), value=_inner_text(element))
            for element in root.iter()
            if _local_name(element.tag) == "meta"
        )

        track_list = _child(root, "trackList")
        if track_list is None:
            raise MissingRootError("xspf playlist has no trackList element")
        track_elements = [
            element for element in track_list.iter() if _local_name(element.tag) == "track"
        ]
        tracks = tuple(_parse_track(index, element) for index, element in enumerate(track_elements))

        logger.debug("parsed xspf playlist version=%d tracks=%d", version, len(tracks))
        return XSPFPlaylist(
            version=version,
            metadata=metadata,
            date=_child_text(root, "date"),
            license=_child_text(root, "license"),
            meta=meta,
            tracks=tracks,
        )


def _parse_track(index: int, element: ET.Element) -> XSPFTrack:
    location = _child(element, "location")
    title = _child(element, "title")
    if location is None or title is None:
        raise IndexOutOfRangeError(f"xspf track {index} requires location and title elements")
    metadata = XSPFMetadata(
        title=_inner_text(title),
        creator=_child_text(element, "creator"),
        annotation=_child_text(element, "annotation"),
        info=_child_text(element, "info"),
        location=_inner_text(location),
        identifier=_child_text(element, "identifier"),
        image=_child_text(element, "image"),
    )
    return XSPFTrack(
        index=index,
        metadata=metadata,
        album=_child_text(element, "album"),
        duration=_child_text(element, "duration"),
    )


def _find_playlist_root(document: ET.Element) -> ET.Element:
    if _local_name(document.tag) == "playlist":
        return document
    root = _child(document, "playlist")
    if root is None:
        raise MissingRootError("xspf document has no playlist element")
    return root


def _parse_version(value: str | None) -> int:
    if value is None:
        raise MalformedValueError("xspf playlist has no version attribute")
    try:
        return int(value)
    except ValueError as exc:
        raise MalformedValueError(f"xspf version must be an integer, got {value!r}") from exc


def _local_name(tag: object) -> str:
    # Comments and processing instructions carry a callable tag.
    if not isinstance(tag, str):
        return ""
    return tag.rsplit("}", 1)[-1]


def _child(element: ET.Element, name: str) -> ET.Element | None:
    for child in element:
        if _local_name(child.tag) == name:
            return child
    return None


def _child_text(element: ET.Element, name: str) -> str:
    child = _child(element, name)
    if child is None:
        return ""
    return _inner_text(child)


def _inner_text(element: ET.Element) -> str:
    return "".join(element.itertext())


def parse_xspf(payload: str | bytes) -> XSPFPlaylist:
    return XSPFParser().parse(payload)
