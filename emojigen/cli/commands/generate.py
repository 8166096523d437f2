"""Generate command: feed -> catalogue + lookup tables."""

import time
from pathlib import Path

import typer

from ..app import app, console, get_json_mode
from ..utils import ExitCode, Output, read_feed_source, setup_logging


@app.command("generate")
def generate_command(
    input_path: Path | None = typer.Option(
        None,
        "--input",
        "-i",
        help="Local emoji-test.txt (downloads the configured feed if omitted)",
    ),
    url: str | None = typer.Option(
        None, "--url", help="Feed URL (overrides the configured feed)"
    ),
    output: Path | None = typer.Option(
        None, "--output", "-o", help="Output directory (defaults to config)"
    ),
    fmt: str | None = typer.Option(
        None, "--format", "-f", help="Catalogue format: json or yaml"
    ),
    gemoji: Path | None = typer.Option(
        None, "--gemoji", help="Local gemoji emoji.json to merge into the aliases"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show progress logs"),
    debug: bool = typer.Option(False, "--debug", help="Show merge/split decisions"),
):
    """Build the emoji catalogue and lookup tables.

    Example:
        emojigen generate --input emoji-test.txt -o generated/
        emojigen generate --url https://unicode.org/Public/emoji/13.1/emoji-test.txt
    """
    from ...catalog.builder import build_catalog
    from ...config import get_config
    from ...core.errors import FeedFetchError, GenerationError
    from ...emit import build_lookup, load_gemoji, parse_gemoji, project_catalog
    from ...emit.writer import FORMATS, write_outputs
    from ...feed.fetch import fetch_json

    setup_logging(console, verbose=verbose, debug=debug)
    out = Output(console=console, json_mode=get_json_mode())
    config = get_config()

    fmt = fmt or config.output.format
    if fmt not in FORMATS:
        out.error(
            f"Unknown format: {fmt}",
            suggestion="Use --format json or --format yaml",
        )
        raise typer.Exit(out.finish())

    start = time.time()
    try:
        text, source = read_feed_source(
            input_path, url or config.resolve_feed_url(), config.feed.timeout
        )
    except FileNotFoundError as e:
        out.error(str(e), exit_code=ExitCode.FILE_NOT_FOUND)
        raise typer.Exit(out.finish())
    except FeedFetchError as e:
        out.error(str(e), exit_code=ExitCode.FETCH_ERROR)
        raise typer.Exit(out.finish())

    aliases = None
    try:
        if gemoji is not None:
            aliases = load_gemoji(gemoji)
        elif config.aliases.include_gemoji:
            aliases = parse_gemoji(fetch_json(config.aliases.gemoji_url))
    except FileNotFoundError:
        out.error(f"gemoji file not found: {gemoji}", exit_code=ExitCode.FILE_NOT_FOUND)
        raise typer.Exit(out.finish())
    except FeedFetchError as e:
        out.error(str(e), exit_code=ExitCode.FETCH_ERROR)
        raise typer.Exit(out.finish())
    except ValueError as e:
        out.error(f"Invalid gemoji database: {e}")
        raise typer.Exit(out.finish())

    try:
        catalog = build_catalog(text)
        model = project_catalog(catalog, source)
        lookup = build_lookup(catalog, aliases)
    except GenerationError as e:
        out.error(f"Generation failed: {e}", exit_code=ExitCode.GENERATION_ERROR)
        raise typer.Exit(out.finish())

    for line in catalog.stats.malformed:
        out.warning(f"Skipped malformed line: {line}")

    directory = output or Path(config.output.directory)
    paths = write_outputs(model, lookup, directory, fmt)

    out.success(
        f"Generated {len(catalog)} constants in {len(catalog.groups)} groups "
        f"({lookup.count} graphemes, {len(lookup.aliases)} aliases) "
        f"in {time.time() - start:.1f}s",
        constants=len(catalog),
        groups=len(catalog.groups),
        graphemes=lookup.count,
        aliases=len(lookup.aliases),
        files=[str(p) for p in paths],
    )
    for path in paths:
        out.text(f"  [dim]{path}[/dim]")

    raise typer.Exit(out.finish())
