from __future__ import annotations

import codecs
from abc import ABC, abstractmethod

from config.settings import text_encoding
from playlist.errors import TextDecodeError
from playlist.types import Playlist, PlaylistFormat

_BOM = "\ufeff"

# Number of leading bytes looked at when guessing the format of raw bytes.
_SNIFF_BYTES = 200


class BaseParser(ABC):
    FORMAT: PlaylistFormat

    @abstractmethod
    def parse(self, payload: str | bytes) -> Playlist:
        """Parse playlist text (or raw bytes) into the format's playlist type."""
        raise NotImplementedError


def decode_payload(payload: str | bytes) -> str:
    if isinstance(payload, (bytes, bytearray)):
        encoding = text_encoding()
        try:
            payload = bytes(payload).decode(encoding)
        except UnicodeDecodeError as exc:
            raise TextDecodeError(f"playlist is not valid {encoding} text: {exc}") from exc
        except LookupError as exc:
            raise TextDecodeError(f"unknown playlist text encoding: {encoding!r}") from exc
    return strip_bom(payload)


def sniff_payload(payload: str | bytes) -> str:
    """Return the leading text of ``payload`` for format detection.

    Bytes are decoded leniently from a short prefix only, so a file in an
    encoding declared inside the document (XSPF) can still be recognized.
    """
    if isinstance(payload, (bytes, bytearray)):
        encoding = text_encoding()
        head = bytes(payload).removeprefix(codecs.BOM_UTF8).lstrip()[:_SNIFF_BYTES]
        try:
            payload = head.decode(encoding, errors="replace")
        except LookupError as exc:
            raise TextDecodeError(f"unknown playlist text encoding: {encoding!r}") from exc
    return strip_bom(payload.lstrip()).lstrip()


def strip_bom(text: str) -> str:
    if text.startswith(_BOM):
        return text[len(_BOM):]
    return text
