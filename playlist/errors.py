"""Playlist parsing errors.

Every failure raised by the parsers derives from :class:`PlaylistError`. The
concrete classes also subclass the closest builtin (``ValueError`` or
``IndexError``) so callers that only know the builtins still catch them.
"""

from __future__ import annotations


class PlaylistError(Exception):
    pass


class FormatMismatchError(PlaylistError, ValueError):
    """The header does not match the format the caller asked for."""


class UnrecognizedFormatError(PlaylistError, ValueError):
    """Auto-detection found no supported playlist header."""


class InvalidVersionError(PlaylistError, ValueError):
    """A PLS ``Version`` directive other than 2."""


class FieldCountMismatchError(PlaylistError, ValueError):
    """A PLS file declares a different number of titles and files."""


class MalformedXmlError(PlaylistError, ValueError):
    """XSPF text is not well-formed XML."""


class MissingRootError(PlaylistError, ValueError):
    """XSPF document lacks the ``playlist`` root or its ``trackList``."""


class MalformedValueError(PlaylistError, ValueError):
    """A numeric field (entry count, version) could not be parsed."""


class IndexOutOfRangeError(PlaylistError, IndexError):
    """A line, token or element the format requires is missing."""


class TextDecodeError(PlaylistError, ValueError):
    """Playlist bytes cannot be decoded with the configured encoding."""
