"""Tests for the scripture-helper CLI."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from scripture_helper.__main__ import cli

TEXT = "Read Gen 1:1, 2:3-4 and Jude 5. Then Gen 1:1 again."


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def sermon_file(tmp_path):
    path = tmp_path / "sermon.txt"
    path.write_text(TEXT, encoding="utf-8")
    return path


class TestGrepCommand:
    def test_grep_argument(self, runner):
        result = runner.invoke(cli, ["grep", TEXT])
        assert result.exit_code == 0, result.output
        assert result.output.splitlines() == ["Gen 1:1, 2:3-4", "Jude 5", "Gen 1:1"]

    def test_grep_stdin(self, runner):
        result = runner.invoke(cli, ["grep"], input="See John 3:16\n")
        assert result.exit_code == 0, result.output
        assert result.output.splitlines() == ["John 3:16"]


class TestRefsCommand:
    def test_refs_unique(self, runner):
        result = runner.invoke(cli, ["refs", TEXT])
        assert result.exit_code == 0, result.output
        assert result.output.splitlines() == [
            "Genesis 1:1",
            "Genesis 2:3-4",
            "Jude 5",
        ]

    def test_refs_from_file(self, runner, sermon_file):
        result = runner.invoke(cli, ["refs", "--file", str(sermon_file)])
        assert result.exit_code == 0, result.output
        assert "Genesis 2:3-4" in result.output


class TestParseCommand:
    def test_parse_json(self, runner):
        result = runner.invoke(cli, ["parse", TEXT, "--json"])
        assert result.exit_code == 0, result.output
        payload = json.loads(result.output)
        assert payload[0] == {
            "book": "Genesis",
            "start_chapter": 1,
            "start_verse": 1,
            "end_chapter": None,
            "end_verse": None,
        }
        assert len(payload) == 3

    def test_parse_output_file(self, runner, tmp_path):
        out_path = tmp_path / "refs.json"
        result = runner.invoke(cli, ["parse", TEXT, "--output", str(out_path)])
        assert result.exit_code == 0, result.output
        assert "3 references written" in result.output
        payload = json.loads(Path(out_path).read_text(encoding="utf-8"))
        assert [p["book"] for p in payload] == ["Genesis", "Genesis", "Jude"]

    def test_parse_table(self, runner):
        result = runner.invoke(cli, ["parse", TEXT])
        assert result.exit_code == 0, result.output
        assert "Genesis" in result.output
        assert "Jude" in result.output

    def test_parse_nothing_found(self, runner):
        result = runner.invoke(cli, ["parse", "no citations here"])
        assert result.exit_code == 0, result.output
        assert "No references found" in result.output


class TestCvCommand:
    def test_cv_with_book(self, runner):
        result = runner.invoke(cli, ["cv", "1:2-3:4", "--book", "Gen"])
        assert result.exit_code == 0, result.output
        assert json.loads(result.output) == {
            "book": "Genesis",
            "start_chapter": 1,
            "start_verse": 2,
            "end_chapter": 3,
            "end_verse": 4,
        }

    def test_cv_one_chapter_book(self, runner):
        result = runner.invoke(cli, ["cv", "1:5", "-b", "Jude"])
        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["start_chapter"] == 5

    def test_cv_malformed(self, runner):
        result = runner.invoke(cli, ["cv", "abc"])
        assert result.exit_code == 1
        assert "Badly formed" in result.output

    def test_cv_unknown_book(self, runner):
        result = runner.invoke(cli, ["cv", "1:1", "--book", "Unknownbookxx"])
        assert result.exit_code == 1
        assert "Unknown book" in result.output


class TestGlobalOptions:
    def test_version(self, runner):
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output

    def test_log_level(self, runner):
        result = runner.invoke(cli, ["--log-level", "debug", "refs", "Jude 5"])
        assert result.exit_code == 0, result.output
        assert "Jude 5" in result.output
