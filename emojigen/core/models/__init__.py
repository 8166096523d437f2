"""Data models for emojigen.

- attributes: attribute vocabularies (Tone, Hair, Gender, Pair, OneOrTwo, ...)
- catalog: pydantic models of the emitted catalogue
"""

from .attributes import (
    Family,
    Gender,
    Hair,
    OneOrTwo,
    Pair,
    Tone,
    TonePair,
    Version,
)
from .catalog import (
    AccessorEntry,
    Catalog,
    CatalogMeta,
    Declaration,
    EmojiConstant,
    GroupConstant,
    LookupTable,
    SubgroupConstant,
)

__all__ = [
    # Attributes
    "Family",
    "Gender",
    "Hair",
    "OneOrTwo",
    "Pair",
    "Tone",
    "TonePair",
    "Version",
    # Catalogue
    "AccessorEntry",
    "Catalog",
    "CatalogMeta",
    "Declaration",
    "EmojiConstant",
    "GroupConstant",
    "LookupTable",
    "SubgroupConstant",
]
