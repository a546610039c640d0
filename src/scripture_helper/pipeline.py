"""Citation strings to structured references.

Each entry is parsed on its own and yields an ``EntryOutcome``: either a
reference or the reason it was skipped. ``parse_refs`` keeps only the
references, so one malformed citation never aborts a whole document.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from scripture_helper.bible import UnknownBookError, normalize_book_title
from scripture_helper.grammar import BOOK_RE
from scripture_helper.markers import MalformedMarkerError, parse_cv
from scripture_helper.normalizer import normalize_and_split_references, unique
from scripture_helper.reference import ScriptureReference

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EntryOutcome:
    """Result of parsing one canonical reference string."""

    entry: str
    value: ScriptureReference | None = None
    reason: str | None = None  # Why the entry was skipped

    @property
    def ok(self) -> bool:
        return self.value is not None


def parse_entry(ref: str) -> EntryOutcome:
    """Parse one normalized "Book marker" string.

    Never raises for bad content; failures come back as skipped outcomes.
    """
    match = BOOK_RE.search(ref)
    if not match:
        return EntryOutcome(entry=ref, reason="no book name")

    try:
        book = normalize_book_title(match.group(0))
    except UnknownBookError as e:
        return EntryOutcome(entry=ref, reason=str(e))

    # Already split, so whatever is left is a single marker
    cv = ref.replace(match.group(0), "").strip()
    if not cv:
        return EntryOutcome(entry=ref, reason="no chapter/verse marker")

    try:
        reference = parse_cv(cv, book)
    except (MalformedMarkerError, UnknownBookError) as e:
        return EntryOutcome(entry=ref, reason=str(e))

    return EntryOutcome(entry=ref, value=reference)


def parse_outcomes(refs: str | Iterable[str] | None) -> list[EntryOutcome]:
    """Normalize, de-duplicate and parse citations, keeping skipped entries."""
    return [parse_entry(ref) for ref in unique(normalize_and_split_references(refs))]


def parse_refs(refs: str | Iterable[str] | None) -> list[ScriptureReference]:
    """Convert citations into structured references.

    Grouped citations are split and book names normalized first, so
    ``["Gen 1:1, 2:3-4"]`` gives two references. Entries with an unknown
    book or a malformed marker are dropped.

    Args:
        refs: Citation strings like ["Gen 1:1", "Jude 5"]

    Returns:
        Unique ScriptureReference objects in input order
    """
    references = []

    for outcome in parse_outcomes(refs):
        if not outcome.ok:
            logger.debug(f"Skipping reference {outcome.entry!r}: {outcome.reason}")
            continue
        references.append(outcome.value)

    return references
