"""Projecting the catalogue into serializable models and lookup tables."""

from .constants import project_catalog
from .lookup import build_lookup, load_gemoji, parse_gemoji
from .writer import write_outputs

__all__ = [
    "build_lookup",
    "load_gemoji",
    "parse_gemoji",
    "project_catalog",
    "write_outputs",
]
