"""Find candidate scripture citations in free text."""

from __future__ import annotations

from scripture_helper.grammar import CITATION_RE


def grep_references(text: str | None = None) -> list[str]:
    """Return every substring of ``text`` that looks like a citation.

    Matches are returned as written, in the order they appear, duplicates
    included. The pattern over-matches on purpose (any capitalized word
    followed by a number qualifies); unknown book names are dropped later
    by ``normalize_and_split_references``.

    Args:
        text: Free text such as a sermon, article or footnote

    Returns:
        List of raw citation strings like ["Gen 1:1, 2:3-4", "Jude 5"]
    """
    if not text:
        return []

    return [match.group(0) for match in CITATION_RE.finditer(text)]
