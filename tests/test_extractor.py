"""Tests for citation extraction from free text."""

from __future__ import annotations

from scripture_helper.extractor import grep_references


class TestGrepReferences:
    """Tests for grep_references()."""

    def test_empty_text(self):
        assert grep_references("") == []
        assert grep_references(None) == []
        assert grep_references() == []

    def test_single_reference(self):
        assert grep_references("For God so loved, John 3:16.") == ["John 3:16"]

    def test_grouped_reference_is_one_match(self):
        text = "See Gen 1:1, 2:3-4 for context."
        assert grep_references(text) == ["Gen 1:1, 2:3-4"]

    def test_order_and_duplicates_kept(self):
        text = "John 3:16 then Rom 8:28 then John 3:16 again."
        assert grep_references(text) == ["John 3:16", "Rom 8:28", "John 3:16"]

    def test_chapter_only(self):
        assert grep_references("Read Jude 5 today") == ["Jude 5"]

    def test_numbered_prefix(self):
        assert grep_references("as in 1 John 4:8") == ["1 John 4:8"]
        assert grep_references("as in 1John 4:8") == ["1John 4:8"]

    def test_roman_and_word_prefixes(self):
        assert grep_references("II Cor 5:17") == ["II Cor 5:17"]
        assert grep_references("First John 1:9") == ["First John 1:9"]

    def test_multiword_prefixes(self):
        assert grep_references("Song of Solomon 2:4") == ["Song of Solomon 2:4"]
        assert grep_references("Acts of the Apostles 2:38") == [
            "Acts of the Apostles 2:38"
        ]

    def test_dash_variants(self):
        assert grep_references("Gen 1:1–3") == ["Gen 1:1–3"]
        assert grep_references("Gen 1:1—3") == ["Gen 1:1—3"]

    def test_sub_verse_letter(self):
        assert grep_references("Mark 16:9a") == ["Mark 16:9a"]

    def test_no_space_between_book_and_marker(self):
        assert grep_references("Gen1:1") == ["Gen1:1"]

    def test_overmatches_capitalized_words(self):
        """Any capitalized word before a number is a candidate."""
        assert grep_references("Chapter 7 of the manual") == ["Chapter 7"]

    def test_lowercase_words_ignored(self):
        assert grep_references("page 12, line 3") == []
