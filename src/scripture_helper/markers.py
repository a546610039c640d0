"""Chapter/verse marker parsing.

A marker is the numeric part of a citation ("3:16", "1-2", "1:2-3:4").
Parsing does not check that the chapters or verses exist.

Supported shapes (start numbers x 10 + end numbers):

- 10 "1"        one full chapter
- 11 "1-2"      range of chapters
- 12 "1-2:3"    full chapter to part of a chapter
- 20 "1:2"      one verse
- 21 "1:2-3"    verses within one chapter
- 22 "1:2-3:4"  verses across chapters
"""

from __future__ import annotations

import re

from scripture_helper.bible import get_chapter_count, normalize_book_title
from scripture_helper.grammar import EM_DASH, EN_DASH
from scripture_helper.reference import ScriptureReference, make_reference

# Digits plus an optional sub-verse letter, which is dropped
_NUMBER_RE = re.compile(r"^(\d+)[a-z]?$")


class MalformedMarkerError(ValueError):
    """Chapter/verse marker does not have one of the supported shapes."""

    pass


def _clean_marker(cv: str) -> str:
    # Letter pairs like stray "Ab" annotations
    cv = re.sub(r"[A-Z][a-z]", "", cv)
    cv = re.sub(r"\s", "", cv)
    for dash in ("&ndash;", EN_DASH, EM_DASH):
        cv = cv.replace(dash, "-")
    return cv.replace(".", ":")


def _to_int(value: str, cv: str) -> int:
    match = _NUMBER_RE.match(value)
    if not match:
        raise MalformedMarkerError(f"Badly formed chapter/verse reference: '{cv}'.")
    return int(match.group(1))


def split_marker(cv: str) -> tuple[list[int], list[int]]:
    """Split a marker into its start and end number lists.

    Args:
        cv: Marker like "1:2-3:4"

    Returns:
        Tuple of (start_nums, end_nums), each with up to two numbers
        for well-formed markers

    Raises:
        MalformedMarkerError: If a part is not a number
    """
    cleaned = _clean_marker(cv)

    parts = cleaned.split("-", 1)
    start_part = parts[0]
    end_part = parts[1] if len(parts) > 1 else ""

    start_nums = [_to_int(n, cv) for n in start_part.split(":")] if start_part else []
    end_nums = [_to_int(n, cv) for n in end_part.split(":")] if end_part else []

    return start_nums, end_nums


def parse_cv(cv: str, book: str | None = None) -> ScriptureReference:
    """Parse a chapter/verse marker into a structured reference.

    Args:
        cv: The chapter/verse portion of a reference (e.g., "3:16-18")
        book: The book the marker belongs to, in any recognized spelling

    Returns:
        ScriptureReference with start/end bounds filled in for the shape

    Raises:
        MalformedMarkerError: If the marker has no supported shape
        UnknownBookError: If ``book`` is given but not recognized

    Examples:
        >>> parse_cv("1:2-3", "Gen")
        ScriptureReference(book='Genesis', start_chapter=1, start_verse=2, end_chapter=1, end_verse=3)

        >>> parse_cv("1:5", "Jude")
        ScriptureReference(book='Jude', start_chapter=5, start_verse=None, end_chapter=None, end_verse=None)
    """
    start_nums, end_nums = split_marker(cv)

    shape = len(start_nums) * 10 + len(end_nums)

    if shape == 10:
        bounds = (start_nums[0], None, None, None)
    elif shape == 11:
        bounds = (start_nums[0], None, end_nums[0], None)
    elif shape == 12:
        bounds = (start_nums[0], 1, end_nums[0], end_nums[1])
    elif shape == 20:
        bounds = (start_nums[0], start_nums[1], None, None)
    elif shape == 21:
        bounds = (start_nums[0], start_nums[1], start_nums[0], end_nums[0])
    elif shape == 22:
        bounds = (start_nums[0], start_nums[1], end_nums[0], end_nums[1])
    else:
        raise MalformedMarkerError(f"Badly formed chapter/verse reference: '{cv}'.")

    canonical_book = None
    chapter_count = None
    if book:
        canonical_book = normalize_book_title(book)
        chapter_count = get_chapter_count(canonical_book)

    start_chapter, start_verse, end_chapter, end_verse = bounds
    return make_reference(
        book=canonical_book,
        start_chapter=start_chapter,
        start_verse=start_verse,
        end_chapter=end_chapter,
        end_verse=end_verse,
        chapter_count=chapter_count,
    )
