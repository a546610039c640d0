"""Scripture Helper - find and parse Bible references in text."""

from scripture_helper.bible import (
    UnknownBookError,
    get_chapter_count,
    normalize_book_title,
)
from scripture_helper.extractor import grep_references
from scripture_helper.markers import MalformedMarkerError, parse_cv
from scripture_helper.normalizer import get_unique_refs, normalize_and_split_references
from scripture_helper.pipeline import EntryOutcome, parse_refs
from scripture_helper.reference import ScriptureReference, make_reference

__version__ = "0.1.0"

__all__ = [
    "UnknownBookError",
    "MalformedMarkerError",
    "get_chapter_count",
    "normalize_book_title",
    "grep_references",
    "normalize_and_split_references",
    "get_unique_refs",
    "parse_cv",
    "parse_refs",
    "EntryOutcome",
    "ScriptureReference",
    "make_reference",
]
