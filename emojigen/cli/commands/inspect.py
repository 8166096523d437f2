"""Inspect command: show the declaration and accessors of one constant."""

from pathlib import Path

import typer
from rich.markup import escape

from ..app import app, console, get_json_mode
from ..utils import ExitCode, Output, read_feed_source


@app.command("inspect")
def inspect_command(
    identifier: str = typer.Argument(..., help="Constant identifier, e.g. KISS"),
    input_path: Path | None = typer.Option(
        None, "--input", "-i", help="Local emoji-test.txt"
    ),
    url: str | None = typer.Option(None, "--url", help="Feed URL"),
    defaults: bool = typer.Option(
        False, "--defaults", help="Only list the default variant(s)"
    ),
):
    """Show how a constant is declared and every accessor it offers.

    Example:
        emojigen inspect PERSON_RUNNING --input emoji-test.txt
    """
    from ...catalog.builder import build_catalog
    from ...config import get_config
    from ...core.errors import FeedFetchError, GenerationError

    out = Output(console=console, json_mode=get_json_mode())
    config = get_config()

    try:
        text, _ = read_feed_source(
            input_path, url or config.resolve_feed_url(), config.feed.timeout
        )
    except FileNotFoundError as e:
        out.error(str(e), exit_code=ExitCode.FILE_NOT_FOUND)
        raise typer.Exit(out.finish())
    except FeedFetchError as e:
        out.error(str(e), exit_code=ExitCode.FETCH_ERROR)
        raise typer.Exit(out.finish())

    try:
        catalog = build_catalog(text)
    except GenerationError as e:
        out.error(f"Generation failed: {e}", exit_code=ExitCode.GENERATION_ERROR)
        raise typer.Exit(out.finish())

    emoji = catalog.find(identifier.upper())
    if emoji is None:
        out.error(
            f"Unknown constant: {identifier}",
            suggestion="Identifiers are UPPER_SNAKE, e.g. WAVING_HAND",
        )
        raise typer.Exit(out.finish())

    declaration = emoji.declaration()
    out.success(
        f"{emoji.identifier} ({emoji.name}) {emoji.graphemes()}",
        identifier=emoji.identifier,
        name=emoji.name,
        type=declaration.type,
        value=declaration.value,
    )
    out.text(f"  type:  [cyan]{escape(declaration.type)}[/cyan]")
    out.text(f"  value: {escape(declaration.value)}")

    entries = emoji.default_emoji_list() if defaults else emoji.full_emoji_list()
    out.table(
        "Accessors",
        ["Accessor", "Const accessor", "Grapheme"],
        [[e.accessor, e.const_accessor, e.grapheme] for e in entries],
    )
    raise typer.Exit(out.finish())
