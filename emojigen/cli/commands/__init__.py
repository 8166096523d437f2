"""CLI commands for emojigen."""

from . import (
    generate,
    inspect,
    config_cmd,
)

__all__ = [
    "generate",
    "inspect",
    "config_cmd",
]
