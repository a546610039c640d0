"""Book canon: canonical titles, abbreviations and chapter counts.

Maps the many ways a book name is written in running text ("Gen", "1 Cor",
"II Kings", "First John", "Song of Songs") to one canonical title, and
reports how many chapters each book has.

Canonical titles are written so that they match the book grammar in
``scripture_helper.grammar`` again ("1 John", "Song of Solomon"), which lets
already-normalized references go through the pipeline a second time.
"""

from __future__ import annotations

import re

from scripture_helper.config import ORDINAL_DIGITS


# ============================================================================
# Canon
# ============================================================================

# (canonical title, chapter count, aliases)
# Aliases are lowercase with spaces and periods removed.
BOOKS: list[tuple[str, int, tuple[str, ...]]] = [
    # Law
    ("Genesis", 50, ("gen", "ge", "gn")),
    ("Exodus", 40, ("exod", "exo", "ex")),
    ("Leviticus", 27, ("lev", "le", "lv")),
    ("Numbers", 36, ("num", "nu", "nm", "nb")),
    ("Deuteronomy", 34, ("deut", "deu", "dt")),
    # History
    ("Joshua", 24, ("josh", "jos", "jsh")),
    ("Judges", 21, ("judg", "jdg", "jg", "jdgs")),
    ("Ruth", 4, ("rth", "ru")),
    ("1 Samuel", 31, ("1sam", "1sa", "1sm", "1s")),
    ("2 Samuel", 24, ("2sam", "2sa", "2sm", "2s")),
    ("1 Kings", 22, ("1kgs", "1ki", "1kg", "1k")),
    ("2 Kings", 25, ("2kgs", "2ki", "2kg", "2k")),
    ("1 Chronicles", 29, ("1chron", "1chr", "1ch")),
    ("2 Chronicles", 36, ("2chron", "2chr", "2ch")),
    ("Ezra", 10, ("ezr", "ez")),
    ("Nehemiah", 13, ("neh", "ne")),
    ("Esther", 10, ("esth", "est", "es")),
    # Wisdom
    ("Job", 42, ("jb",)),
    ("Psalms", 150, ("psalm", "pslm", "psa", "psm", "pss", "ps")),
    ("Proverbs", 31, ("prov", "pro", "prv", "pr")),
    ("Ecclesiastes", 12, ("eccles", "eccl", "ecc", "ec", "qoh")),
    (
        "Song of Solomon",
        8,
        ("songofsongs", "song", "sos", "canticles", "cant"),
    ),
    # Major prophets
    ("Isaiah", 66, ("isa", "isai", "is")),
    ("Jeremiah", 52, ("jer", "je", "jr")),
    ("Lamentations", 5, ("lam", "la")),
    ("Ezekiel", 48, ("ezek", "eze", "ezk")),
    ("Daniel", 12, ("dan", "da", "dn")),
    # Minor prophets
    ("Hosea", 14, ("hos", "ho")),
    ("Joel", 3, ("jl",)),
    ("Amos", 9, ("amo",)),
    ("Obadiah", 1, ("obad", "oba", "ob")),
    ("Jonah", 4, ("jon", "jnh")),
    ("Micah", 7, ("mic", "mc")),
    ("Nahum", 3, ("nah", "na")),
    ("Habakkuk", 3, ("hab", "hb")),
    ("Zephaniah", 3, ("zeph", "zep", "zp")),
    ("Haggai", 2, ("hag", "hg")),
    ("Zechariah", 14, ("zech", "zec", "zc")),
    ("Malachi", 4, ("mal", "ml")),
    # Gospels and Acts
    ("Matthew", 28, ("matt", "mat", "mt")),
    ("Mark", 16, ("mrk", "mar", "mk", "mr")),
    ("Luke", 24, ("luk", "lk", "lu")),
    ("John", 21, ("jhn", "joh", "jn")),
    ("Acts", 28, ("actsoftheapostles", "act", "ac")),
    # Pauline epistles
    ("Romans", 16, ("rom", "ro", "rm")),
    ("1 Corinthians", 16, ("1cor", "1co")),
    ("2 Corinthians", 13, ("2cor", "2co")),
    ("Galatians", 6, ("gal", "ga")),
    ("Ephesians", 6, ("eph", "ephes")),
    ("Philippians", 4, ("phil", "php", "pp")),
    ("Colossians", 4, ("col",)),
    ("1 Thessalonians", 5, ("1thess", "1thes", "1th")),
    ("2 Thessalonians", 3, ("2thess", "2thes", "2th")),
    ("1 Timothy", 6, ("1tim", "1ti")),
    ("2 Timothy", 4, ("2tim", "2ti")),
    ("Titus", 3, ("tit", "ti")),
    ("Philemon", 1, ("philem", "phlm", "phm")),
    # General epistles
    ("Hebrews", 13, ("heb",)),
    ("James", 5, ("jas", "jam", "jm")),
    ("1 Peter", 5, ("1pet", "1pe", "1pt", "1p")),
    ("2 Peter", 3, ("2pet", "2pe", "2pt", "2p")),
    ("1 John", 5, ("1jn", "1jhn", "1jo", "1j")),
    ("2 John", 1, ("2jn", "2jhn", "2jo", "2j")),
    ("3 John", 1, ("3jn", "3jhn", "3jo", "3j")),
    ("Jude", 1, ("jud", "jd")),
    # Apocalypse
    ("Revelation", 22, ("revelations", "rev", "re", "rv", "apocalypse", "apoc")),
]


def _alias_key(name: str) -> str:
    return re.sub(r"\s+", "", name.replace(".", "")).lower()


CHAPTER_COUNTS: dict[str, int] = {title: count for title, count, _ in BOOKS}

BOOK_ALIASES: dict[str, str] = {
    alias: title
    for title, _, aliases in BOOKS
    for alias in (_alias_key(title), *aliases)
}

_ORDINAL_RE = re.compile(
    r"^(?P<ordinal>iv|iii|ii|i|first|second|third|fourth)\s+(?P<rest>.+)$"
)


class UnknownBookError(ValueError):
    """Book name could not be resolved to a canonical title."""

    pass


def normalize_book_title(name: str | None) -> str:
    """Normalize a book name to its canonical title.

    Args:
        name: Book name or abbreviation (e.g., "Gen", "1 Cor", "II Kings")

    Returns:
        Canonical title (e.g., "Genesis", "1 Corinthians", "2 Kings")

    Raises:
        UnknownBookError: If the name is empty or not recognized
    """
    if not name or not name.strip():
        raise UnknownBookError("Missing book name.")

    key = _alias_key(name)
    if key in BOOK_ALIASES:
        return BOOK_ALIASES[key]

    # Leading ordinal word as its own token ("II Cor", "First John")
    spaced = re.sub(r"\s+", " ", name.replace(".", "").strip()).lower()
    match = _ORDINAL_RE.match(spaced)
    if match:
        digit = ORDINAL_DIGITS[match.group("ordinal")]
        key = digit + _alias_key(match.group("rest"))
        if key in BOOK_ALIASES:
            return BOOK_ALIASES[key]

    suggestions = _find_similar_books(name)
    suggestion_text = ""
    if suggestions:
        suggestion_text = f" Did you mean: {', '.join(suggestions)}?"

    raise UnknownBookError(f"Unknown book: '{name}'.{suggestion_text}")


def _find_similar_books(query: str) -> list[str]:
    """Find books with names similar to the query."""
    query_key = _alias_key(query)
    if not query_key:
        return []

    suggestions = []
    for title, _, _ in BOOKS:
        title_key = _alias_key(title)
        if title_key.startswith(query_key) or query_key.startswith(title_key[:3]):
            suggestions.append(title)
            if len(suggestions) >= 3:
                break

    return suggestions


def get_chapter_count(book: str) -> int:
    """Return the number of chapters in a book.

    Raises:
        UnknownBookError: If the book name is not recognized
    """
    return CHAPTER_COUNTS[normalize_book_title(book)]
