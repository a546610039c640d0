"""Normalize and split reader-friendly citations.

Turns citations that may group several markers or use abbreviated book
names into one canonical "Book marker" string per reference::

    "Gen 1:1, 2:3-4"  ->  ["Genesis 1:1", "Genesis 2:3-4"]
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from scripture_helper.bible import UnknownBookError, normalize_book_title
from scripture_helper.extractor import grep_references
from scripture_helper.grammar import BOOK_RE, MARKER_RE

logger = logging.getLogger(__name__)


def _as_list(refs: str | Iterable[str] | None) -> list[str]:
    if not refs:
        return []
    if isinstance(refs, str):
        return [refs]
    return list(refs)


def split_reference(ref: str) -> list[str]:
    """Normalize one citation into canonical "Book marker" strings.

    Args:
        ref: Citation like "Gen 1:1, 2:3-4"

    Returns:
        One string per marker, in order

    Raises:
        UnknownBookError: If no book token is found or it is not recognized
    """
    ref = ref.strip()

    match = BOOK_RE.search(ref)
    if not match:
        raise UnknownBookError(f"No book name in reference: '{ref}'.")

    book = normalize_book_title(match.group(0))

    # Drop the book token so ordinals ("1 John") are not read as markers
    remainder = ref.replace(match.group(0), "")

    return [f"{book} {cv.group(0)}" for cv in MARKER_RE.finditer(remainder)]


def normalize_and_split_references(
    refs: str | Iterable[str] | None = None,
) -> list[str]:
    """Turn citations into canonical references with one marker each.

    Entries whose book cannot be found or resolved are skipped.

    Args:
        refs: A citation string or an iterable of them

    Returns:
        Flat list of "Book marker" strings, in input order
    """
    normalized: list[str] = []

    for ref in _as_list(refs):
        try:
            normalized.extend(split_reference(ref))
        except UnknownBookError as e:
            logger.debug(f"Skipping reference {ref!r}: {e}")
            continue

    return normalized


def unique(refs: Iterable[str]) -> list[str]:
    """De-duplicate, keeping the first occurrence of each entry."""
    return list(dict.fromkeys(refs))


def get_unique_refs(text: str | None = None) -> list[str]:
    """Find all citations in ``text`` as unique canonical references.

    Example:
        >>> get_unique_refs("See John 3:16 and Gen 1:1, 2:3. Also John 3:16.")
        ['John 3:16', 'Genesis 1:1', 'Genesis 2:3']
    """
    if not text:
        return []

    return unique(normalize_and_split_references(grep_references(text)))
