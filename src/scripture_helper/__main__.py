"""CLI entry point for Scripture Helper."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from scripture_helper.bible import UnknownBookError
from scripture_helper.config import Settings
from scripture_helper.extractor import grep_references
from scripture_helper.markers import MalformedMarkerError, parse_cv
from scripture_helper.normalizer import get_unique_refs
from scripture_helper.pipeline import parse_refs
from scripture_helper.reference import ScriptureReference

console = Console()
settings = Settings()


def _read_text(text: str | None, file: str | None) -> str:
    """Text argument, else --file contents, else stdin."""
    if text is not None:
        return text
    if file:
        return Path(file).read_text(encoding=settings.encoding)
    return click.get_text_stream("stdin").read()


def _format_bound(chapter: int | None, verse: int | None) -> str:
    if chapter is None:
        return ""
    if verse is None:
        return str(chapter)
    return f"{chapter}:{verse}"


def _references_table(refs: list[ScriptureReference]) -> Table:
    table = Table(title="References")
    table.add_column("Book", style="cyan")
    table.add_column("Start")
    table.add_column("End")
    table.add_column("Shape", style="dim")

    for ref in refs:
        if ref.is_single_verse():
            shape = "verse"
        elif ref.is_chapter_only() and ref.is_multiple_chapter():
            shape = "chapters"
        elif ref.is_chapter_only():
            shape = "chapter"
        elif ref.is_multiple_chapter():
            shape = "cross-chapter"
        else:
            shape = "verses"
        table.add_row(
            ref.book or "",
            _format_bound(ref.start_chapter, ref.start_verse),
            _format_bound(ref.end_chapter, ref.end_verse),
            shape,
        )

    return table


@click.group()
@click.version_option(version="0.1.0")
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level (default from SCRIPTURE_HELPER_LOG_LEVEL)",
)
def cli(log_level: str | None):
    """Scripture Helper - find and parse Bible references in text."""
    logging.basicConfig(
        level=(log_level or settings.log_level).upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.argument("text", required=False)
@click.option("--file", "-f", type=click.Path(exists=True), help="Read text from file")
def grep(text: str | None, file: str | None):
    """List raw citation matches in TEXT, as written.

    Example: scripture-helper grep "Read Gen 1:1, 2:3-4 and Jude 5"
    """
    for match in grep_references(_read_text(text, file)):
        click.echo(match)


@cli.command()
@click.argument("text", required=False)
@click.option("--file", "-f", type=click.Path(exists=True), help="Read text from file")
def refs(text: str | None, file: str | None):
    """List unique canonical references in TEXT.

    Example: scripture-helper refs "Read Gen 1:1, 2:3-4 and Jude 5"
    """
    for ref in get_unique_refs(_read_text(text, file)):
        click.echo(ref)


@cli.command()
@click.argument("text", required=False)
@click.option("--file", "-f", type=click.Path(exists=True), help="Read text from file")
@click.option("--json", "as_json", is_flag=True, help="Print JSON instead of a table")
@click.option("--output", "-o", type=click.Path(), help="Write JSON to file")
def parse(text: str | None, file: str | None, as_json: bool, output: str | None):
    """Parse citations in TEXT into structured references.

    Example: scripture-helper parse "Gen 1:1, 2:3-4; Jude 5" --json
    """
    citations = grep_references(_read_text(text, file))
    references = parse_refs(citations)
    payload = [ref.to_dict() for ref in references]

    if output:
        Path(output).write_text(
            json.dumps(payload, indent=settings.json_indent, ensure_ascii=False),
            encoding=settings.encoding,
        )
        console.print(f"[green]✓ {len(payload)} references written to {output}[/green]")
    elif as_json:
        click.echo(json.dumps(payload, indent=settings.json_indent, ensure_ascii=False))
    elif references:
        console.print(_references_table(references))
    else:
        console.print("[yellow]No references found[/yellow]")


@cli.command()
@click.argument("marker")
@click.option("--book", "-b", default=None, help="Book the marker belongs to")
def cv(marker: str, book: str | None):
    """Parse a single chapter/verse MARKER.

    Example: scripture-helper cv "1:2-3:4" --book Gen
    """
    try:
        ref = parse_cv(marker, book)
    except (MalformedMarkerError, UnknownBookError) as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)

    click.echo(json.dumps(ref.to_dict(), indent=settings.json_indent))


if __name__ == "__main__":
    cli()
