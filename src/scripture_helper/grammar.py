"""Citation grammar.

A citation is a book token followed by one or more chapter-verse markers::

    citation := book [ws] marker ("," [ws] marker)*
    book     := [prefix [ws]] Upper lower+
    prefix   := "I" | "II" | "III" | "IV" | "1" | "2" | "3" | "4"
              | "First" | "Second" | "Third" | "Fourth"
              | "Song of" | "Acts of the"
    marker   := cv [dash cv]
    cv       := digits [":" digits [letter]]
    dash     := "-" | en-dash | em-dash

Each production is kept as a pattern fragment so the same pieces are used
for scanning text, locating the book inside a citation, and splitting the
marker list.
"""

from __future__ import annotations

import re

# Longest alternatives first so "III" is tried before "I"
BOOK_PREFIXES = (
    "IV",
    "III",
    "II",
    "I",
    "1",
    "2",
    "3",
    "4",
    "First",
    "Second",
    "Third",
    "Fourth",
    r"Song\sof",
    r"Acts\sof\sthe",
)

EN_DASH = "–"
EM_DASH = "—"
DASHES = ("-", EN_DASH, EM_DASH)

BOOK = r"(?:(?:" + "|".join(BOOK_PREFIXES) + r")\s?)?[A-Z][a-z]+"
CV = r"\d+(?::\d+[a-z]?)?"
MARKER = CV + r"(?:[" + "".join(DASHES) + r"]" + CV + r")?"
CITATION = r"\b" + BOOK + r"\s?" + MARKER + r"(?:,\s?" + MARKER + r")*"

BOOK_RE = re.compile(BOOK)
MARKER_RE = re.compile(MARKER)
CITATION_RE = re.compile(CITATION)
