"""Turning descriptive emoji names into constant identifiers."""

from __future__ import annotations

import re
import unicodedata

PLACEHOLDER = "PERSON"

# Replacements applied before punctuation is dropped, longest first.
CHANGES: tuple[tuple[str, str], ...] = (
    ("U.S.", "US"),
    ("1st", "first"),
    ("2nd", "second"),
    ("3rd", "third"),
    ("*", "asterisk"),
    ("#", "hash"),
    ("&", "and"),
    ("ß", "ss"),
    ("’", ""),
    ("'", ""),
)

_NON_ALNUM = re.compile(r"[^A-Za-z0-9]+")


def _transliterate(text: str) -> str:
    for old, new in CHANGES:
        text = text.replace(old, f" {new} " if new else new)
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(c for c in decomposed if not unicodedata.combining(c))


def words(text: str) -> list[str]:
    """Split a descriptive name into ASCII words."""
    return [w for w in _NON_ALNUM.split(_transliterate(text)) if w]


def generate_constant(text: str) -> str:
    """Build an UPPER_SNAKE identifier from a descriptive name.

    Examples:
        "grinning face" -> "GRINNING_FACE"
        "keycap: #" -> "KEYCAP_HASH"
        "flag: Côte d’Ivoire" -> "FLAG_COTE_DIVOIRE"
        "1st place medal" -> "FIRST_PLACE_MEDAL"
    """
    constant = "_".join(w.upper() for w in words(text))
    if constant and constant[0].isdigit():
        constant = f"_{constant}"
    return constant


def snake_case(text: str) -> str:
    """Lower snake case for group, subgroup and alias names."""
    return "_".join(w.lower() for w in words(text))


def strip_placeholder(identifier: str) -> str | None:
    """Remove the ``PERSON`` token from an identifier.

    Returns None when the identifier carries no placeholder token or consists
    only of it.
    """
    tokens = identifier.split("_")
    if PLACEHOLDER not in tokens:
        return None
    remaining = [t for t in tokens if t != PLACEHOLDER]
    if not remaining:
        return None
    return "_".join(remaining)
