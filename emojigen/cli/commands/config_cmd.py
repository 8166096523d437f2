"""Config command for viewing and managing emojigen configuration."""

import typer

from ..app import app, console
from ...config import (
    get_config,
    reset_config,
    CONFIG_FILE,
)


VALID_KEYS = {
    "feed.version",
    "feed.url",
    "feed.timeout",
    "output.directory",
    "output.format",
    "aliases.include_gemoji",
    "aliases.gemoji_url",
}

FLOAT_FIELDS = {"timeout"}
BOOL_FIELDS = {"include_gemoji"}


@app.command("config")
def config_command(
    action: str = typer.Argument(
        ...,
        help="Action: show, set, reset",
    ),
    key: str | None = typer.Argument(
        None,
        help="Config key (e.g. feed.version, output.format)",
    ),
    value: str | None = typer.Argument(
        None,
        help="Value to set",
    ),
):
    """View or modify emojigen configuration.

    Examples:
        emojigen config show
        emojigen config set feed.version 15.0
        emojigen config set output.format yaml
        emojigen config reset
    """
    if action == "show":
        _show_config()
    elif action == "set":
        if not key or value is None:
            console.print("[red]Usage:[/red] emojigen config set <key> <value>")
            console.print()
            console.print("Available keys:")
            for k in sorted(VALID_KEYS):
                console.print(f"  {k}")
            raise typer.Exit(1)
        _set_config(key, value)
    elif action == "reset":
        _reset_config()
    else:
        console.print(f"[red]Unknown action:[/red] {action}")
        console.print("Valid actions: show, set, reset")
        raise typer.Exit(1)


def _show_config():
    """Display current resolved configuration."""
    config = get_config()

    console.print()
    console.print("[bold]emojigen Configuration[/bold]")
    console.print("─" * 40)

    console.print()
    console.print("[bold cyan]Feed[/bold cyan]")
    console.print(f"  version = {config.feed.version}")
    console.print(f"  url     = {config.feed.url or '[dim](from version)[/dim]'}")
    console.print(f"  timeout = {config.feed.timeout}")
    console.print(f"  [dim]→ {config.resolve_feed_url()}[/dim]")

    console.print()
    console.print("[bold cyan]Output[/bold cyan]")
    console.print(f"  directory = {config.output.directory}")
    console.print(f"  format    = {config.output.format}")

    console.print()
    console.print("[bold cyan]Aliases[/bold cyan]")
    console.print(f"  include_gemoji = {config.aliases.include_gemoji}")
    console.print(f"  gemoji_url     = {config.aliases.gemoji_url}")

    console.print()
    if CONFIG_FILE.exists():
        console.print(f"Config file: {CONFIG_FILE}")
    else:
        console.print(f"Config file: [dim]not created yet[/dim] ({CONFIG_FILE})")
    console.print()


def _set_config(key: str, value: str):
    """Set a config value and save."""
    if key not in VALID_KEYS:
        console.print(f"[red]Unknown key:[/red] {key}")
        console.print()
        console.print("Available keys:")
        for k in sorted(VALID_KEYS):
            console.print(f"  {k}")
        raise typer.Exit(1)

    config = get_config()
    zone, field_name = key.split(".", 1)
    target = getattr(config, zone)

    if field_name in FLOAT_FIELDS:
        try:
            setattr(target, field_name, float(value))
        except ValueError:
            console.print(f"[red]Invalid number:[/red] {value}")
            raise typer.Exit(1)
    elif field_name in BOOL_FIELDS:
        if value.lower() not in ("true", "false", "1", "0", "yes", "no"):
            console.print(f"[red]Invalid boolean:[/red] {value}")
            raise typer.Exit(1)
        setattr(target, field_name, value.lower() in ("true", "1", "yes"))
    elif key == "output.format" and value not in ("json", "yaml"):
        console.print(f"[red]Invalid format:[/red] {value} (expected json or yaml)")
        raise typer.Exit(1)
    else:
        setattr(target, field_name, value)

    config.save()
    reset_config()  # Clear cached singleton so next get_config() reloads

    console.print(f"[green]✓[/green] Set {key} = {value}")
    console.print(f"  Saved to {CONFIG_FILE}")


def _reset_config():
    """Reset config to defaults."""
    if CONFIG_FILE.exists():
        CONFIG_FILE.unlink()
        reset_config()
        console.print("[green]✓[/green] Config reset to defaults")
        console.print(f"  Removed {CONFIG_FILE}")
    else:
        console.print("Config already at defaults (no config file exists)")
