"""Configuration management for emojigen.

Config resolution order (highest priority first):
1. Programmatic (EmojigenConfig constructed in code)
2. Environment variables (EMOJIGEN_FEED_VERSION, EMOJIGEN_OUTPUT_DIR, etc.)
3. Config file (~/.config/emojigen/config.json, managed by `emojigen config`)
4. Hardcoded defaults
"""

import json
import logging
import os
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any

from .feed.fetch import GEMOJI_URL, feed_url

logger = logging.getLogger(__name__)


# =============================================================================
# Config file location
# =============================================================================

CONFIG_DIR = Path.home() / ".config" / "emojigen"
CONFIG_FILE = CONFIG_DIR / "config.json"


# =============================================================================
# Config dataclasses
# =============================================================================


@dataclass
class FeedConfig:
    """Where the emoji-test.txt feed is downloaded from.

    - version: Unicode emoji version used to build the default URL
    - url: explicit feed URL (empty = derived from version)
    """

    version: str = "13.1"
    url: str = ""
    timeout: float = 30.0


@dataclass
class OutputConfig:
    """Where and how generated files are written."""

    directory: str = "./generated"
    format: str = "json"


@dataclass
class AliasConfig:
    """gemoji alias database merged into the alias table."""

    include_gemoji: bool = False
    gemoji_url: str = GEMOJI_URL


@dataclass
class EmojigenConfig:
    """Top-level emojigen configuration.

    Examples:
        # Package use: no files needed
        config = EmojigenConfig(feed=FeedConfig(version="15.0"))

        # CLI use: loads from ~/.config/emojigen/config.json
        config = EmojigenConfig.load()
    """

    feed: FeedConfig = field(default_factory=FeedConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    aliases: AliasConfig = field(default_factory=AliasConfig)

    @classmethod
    def load(cls) -> "EmojigenConfig":
        """Load config from file + env vars.

        Priority: env var values > config.json values > defaults.
        """
        config = cls()

        # Layer 1: Load from config file if it exists
        if CONFIG_FILE.exists():
            try:
                with open(CONFIG_FILE) as f:
                    data = json.load(f)
                _apply_dict(config, data)
            except (json.JSONDecodeError, OSError) as exc:
                logger.warning("Failed to load config from %s: %s", CONFIG_FILE, exc)

        # Layer 2: Env var overrides
        if val := os.environ.get("EMOJIGEN_FEED_VERSION"):
            config.feed.version = val
        if val := os.environ.get("EMOJIGEN_FEED_URL"):
            config.feed.url = val
        if val := os.environ.get("EMOJIGEN_FEED_TIMEOUT"):
            try:
                config.feed.timeout = float(val)
            except ValueError:
                logger.warning("Invalid EMOJIGEN_FEED_TIMEOUT=%r, ignoring", val)
        if val := os.environ.get("EMOJIGEN_OUTPUT_DIR"):
            config.output.directory = val
        if val := os.environ.get("EMOJIGEN_OUTPUT_FORMAT"):
            config.output.format = val

        return config

    def save(self) -> None:
        """Save config to ~/.config/emojigen/config.json."""
        CONFIG_DIR.mkdir(parents=True, exist_ok=True)
        with open(CONFIG_FILE, "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for display."""
        return {
            "feed": asdict(self.feed),
            "output": asdict(self.output),
            "aliases": asdict(self.aliases),
        }

    def resolve_feed_url(self) -> str:
        """Explicit feed URL, or the unicode.org URL of the configured version."""
        return self.feed.url or feed_url(self.feed.version)


# =============================================================================
# Config dict application
# =============================================================================


def _apply_dict(config: EmojigenConfig, data: dict) -> None:
    """Apply a dict of values onto an EmojigenConfig."""
    for zone in ("feed", "output", "aliases"):
        values = data.get(zone)
        if not isinstance(values, dict):
            continue
        target = getattr(config, zone)
        for k, v in values.items():
            if hasattr(target, k):
                if k == "timeout":
                    try:
                        v = float(v)
                    except (TypeError, ValueError):
                        logger.warning(
                            "Invalid %s.timeout=%r in %s, ignoring", zone, v, CONFIG_FILE
                        )
                        continue
                setattr(target, k, v)


# =============================================================================
# Global config singleton
# =============================================================================

_config: EmojigenConfig | None = None


def get_config() -> EmojigenConfig:
    """Get the global EmojigenConfig instance.

    First call loads from file + env vars. Subsequent calls return cached instance.
    Use configure() to replace the global config programmatically.
    """
    global _config
    if _config is None:
        _config = EmojigenConfig.load()
    return _config


def configure(config: EmojigenConfig) -> None:
    """Set the global EmojigenConfig programmatically."""
    global _config
    _config = config


def reset_config() -> None:
    """Reset the global config (forces reload on next get_config())."""
    global _config
    _config = None
