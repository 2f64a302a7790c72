"""Keyword highlighting for recipe text."""

import re
from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class Marker:
    """Opening and closing strings wrapped around a highlighted keyword."""

    open: str
    close: str

    def strip(self, text: str) -> str:
        """Remove every marker string from text."""
        return text.replace(self.open, "").replace(self.close, "")


ANSI_BLUE = Marker(open="\x1b[34m", close="\x1b[39m")


def sort_keywords(keywords: Iterable[str]) -> list[str]:
    """Return keywords ordered longest first, preserving order among equals."""
    return sorted(keywords, key=len, reverse=True)


def highlight(
    text: str, keywords: Iterable[str], *, marker: Marker = ANSI_BLUE
) -> str:
    """Wrap every case-insensitive keyword occurrence in text with a marker.

    The text is scanned once from left to right. At each position the longest
    matching keyword wins, so "egg white" is never split by a shorter "egg".
    Matches are raw substrings: a keyword inside an unrelated word is still
    highlighted.
    """
    ordered = sort_keywords({keyword.lower() for keyword in keywords if keyword})
    if not ordered:
        return text
    pattern = re.compile(
        "|".join(re.escape(keyword) for keyword in ordered), re.IGNORECASE
    )
    return pattern.sub(
        lambda match: f"{marker.open}{match.group(0)}{marker.close}", text
    )
