"""Reverse lookup tables: grapheme index, alias table and grapheme regex."""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Any, Iterable

from ..catalog.builder import EmojiCatalog
from ..catalog.identifiers import snake_case
from ..core.models.catalog import LookupTable

logger = logging.getLogger(__name__)


def grapheme_index(catalog: EmojiCatalog) -> dict[str, str]:
    """Map every grapheme of every variant to its const accessor."""
    index: dict[str, str] = {}
    for emoji in catalog.constants():
        for entry in emoji.full_emoji_list():
            index[entry.grapheme] = entry.const_accessor
    return index


def parse_gemoji(data: Any) -> dict[str, str]:
    """Turn a gemoji database (list of ``{emoji, aliases}``) into alias -> grapheme.

    Raises:
        ValueError: If the document is not a list of objects.
    """
    if not isinstance(data, list):
        raise ValueError("gemoji database must be a JSON list")
    aliases: dict[str, str] = {}
    for item in data:
        if not isinstance(item, dict):
            raise ValueError(f"Invalid gemoji entry: {item!r}")
        grapheme = item.get("emoji", "")
        for alias in item.get("aliases", []):
            alias = alias.strip()
            if alias and grapheme:
                aliases[alias] = grapheme
    return aliases


def load_gemoji(path: Path | str) -> dict[str, str]:
    """Read a local gemoji ``emoji.json``."""
    with open(path, encoding="utf-8") as f:
        return parse_gemoji(json.load(f))


def build_aliases(
    catalog: EmojiCatalog,
    index: dict[str, str],
    gemoji: dict[str, str] | None = None,
) -> dict[str, str]:
    """Alias -> const accessor, sorted by alias.

    Every constant with a single default grapheme gets its snake-case
    identifier as alias. gemoji aliases are added unless the alias is already
    taken or the grapheme has no constant.
    """
    aliases: dict[str, str] = {}
    for emoji in catalog.constants():
        grapheme = emoji.default_grapheme()
        if grapheme is not None:
            aliases[snake_case(emoji.identifier)] = index[grapheme]

    for alias, grapheme in (gemoji or {}).items():
        if alias in aliases:
            continue
        accessor = index.get(grapheme)
        if accessor is None:
            logger.debug("No constant for gemoji alias %s (%s)", alias, grapheme)
            continue
        aliases[alias] = accessor

    return {alias: aliases[alias] for alias in sorted(aliases)}


def grapheme_pattern(graphemes: Iterable[str]) -> str:
    """Regex alternation matching any grapheme, longest first."""
    ordered = sorted(set(graphemes), key=lambda g: (-len(g.encode("utf-8")), g))
    return "|".join(re.escape(g) for g in ordered)


def build_lookup(
    catalog: EmojiCatalog, gemoji: dict[str, str] | None = None
) -> LookupTable:
    index = grapheme_index(catalog)
    return LookupTable(
        by_grapheme=index,
        aliases=build_aliases(catalog, index, gemoji),
        pattern=grapheme_pattern(index),
        count=len(index),
    )
