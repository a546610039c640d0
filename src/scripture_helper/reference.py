"""Structured scripture reference value type."""

from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class ScriptureReference:
    """A single reference: one book, one start/end chapter-verse span.

    Does not validate that the chapters or verses exist in the book, and
    makes no attempt to order reversed bounds ("Genesis 9-2").
    """

    book: str | None = None
    start_chapter: int | None = None
    start_verse: int | None = None
    end_chapter: int | None = None
    end_verse: int | None = None

    def is_chapter_only(self) -> bool:
        return bool(self.start_chapter and not self.start_verse and not self.end_verse)

    def is_single_chapter(self) -> bool:
        return bool(
            self.start_chapter
            and (not self.end_chapter or self.start_chapter == self.end_chapter)
        )

    def is_multiple_chapter(self) -> bool:
        return bool(
            self.start_chapter
            and self.end_chapter
            and self.start_chapter != self.end_chapter
        )

    def is_single_verse(self) -> bool:
        return bool(
            self.start_chapter
            and self.start_verse
            and not self.end_chapter
            and not self.end_verse
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return asdict(self)


def make_reference(
    book: str | None = None,
    start_chapter: int | None = None,
    start_verse: int | None = None,
    end_chapter: int | None = None,
    end_verse: int | None = None,
    chapter_count: int | None = None,
) -> ScriptureReference:
    """Build a reference, folding verse numbers into chapters for one-chapter books.

    One-chapter books are cited as "Jude 5" rather than "Jude 1:5", so a
    "chapter:verse" marker against such a book is rewritten to the chapter
    form: the verses become the chapters and the verses are cleared.

    Args:
        book: Canonical book title
        start_chapter: First chapter
        start_verse: First verse
        end_chapter: Last chapter
        end_verse: Last verse
        chapter_count: Number of chapters in ``book``, if known

    Returns:
        Frozen ScriptureReference
    """
    if book and chapter_count == 1 and start_verse:
        start_chapter, end_chapter = start_verse, end_verse
        start_verse, end_verse = None, None

    return ScriptureReference(
        book=book,
        start_chapter=start_chapter,
        start_verse=start_verse,
        end_chapter=end_chapter,
        end_verse=end_verse,
    )
