"""Line and token normalization shared by the line-oriented parsers."""

from __future__ import annotations

from typing import Iterable


def normalize_lines(text: str) -> list[str]:
    """Split ``text`` into stripped, non-blank lines in their original order."""
    return normalize_tokens(text.splitlines())


def normalize_tokens(tokens: Iterable[str]) -> list[str]:
    cleaned: list[str] = []
    for token in tokens:
        value = token.strip()
        if not value:
            continue
        cleaned.append(value)
    return cleaned
