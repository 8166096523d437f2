"""Pydantic models of the emitted emoji catalogue and lookup tables."""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path

import yaml
from pydantic import BaseModel, Field


class AccessorEntry(BaseModel):
    """One variant reachable from a constant."""

    const_accessor: str = Field(description="Path through the constructor tree")
    accessor: str = Field(description="Public accessor path, e.g. X.tone(Tone.LIGHT)")
    grapheme: str


class Declaration(BaseModel):
    """Generator-ready declaration of one constant."""

    type: str
    value: str
    docs: list[str] = Field(default_factory=list)


class EmojiConstant(BaseModel):
    identifier: str
    name: str
    preview: str = Field(description="Default grapheme(s), joined")
    declaration: Declaration
    full_list_accessors: list[AccessorEntry] = Field(default_factory=list)
    default_list_accessors: list[AccessorEntry] = Field(default_factory=list)

    @property
    def is_customizable(self) -> bool:
        return len(self.full_list_accessors) > 1


class SubgroupConstant(BaseModel):
    identifier: str
    name: str
    preview: str
    emojis: list[EmojiConstant] = Field(default_factory=list)


class GroupConstant(BaseModel):
    identifier: str
    name: str
    preview: str
    subgroups: list[SubgroupConstant] = Field(default_factory=list)


class CatalogMeta(BaseModel):
    source: str = Field(description="URL or path of the emoji-test.txt feed")
    generated_at: datetime
    lines: int = 0
    skipped: int = 0
    malformed: int = 0


class Catalog(BaseModel):
    """Complete emitted catalogue."""

    meta: CatalogMeta
    groups: list[GroupConstant] = Field(default_factory=list)

    def emojis(self) -> list[EmojiConstant]:
        return [
            emoji
            for group in self.groups
            for sub in group.subgroups
            for emoji in sub.emojis
        ]

    def get(self, identifier: str) -> EmojiConstant | None:
        for emoji in self.emojis():
            if emoji.identifier == identifier:
                return emoji
        return None

    def to_json(self, path: Path | str) -> None:
        """Save catalogue to a JSON file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(self.model_dump(mode="json"), f, indent=2, ensure_ascii=False)

    def to_yaml(self, path: Path | str) -> None:
        """Save catalogue to a YAML file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        data = self.model_dump(mode="json")
        with open(path, "w", encoding="utf-8") as f:
            yaml.dump(
                data, f, default_flow_style=False, sort_keys=False, allow_unicode=True
            )

    @classmethod
    def from_file(cls, path: Path | str) -> Catalog:
        """Load a catalogue saved with ``to_json`` or ``to_yaml``."""
        path = Path(path)
        with open(path, encoding="utf-8") as f:
            if path.suffix in (".yaml", ".yml"):
                data = yaml.safe_load(f)
            else:
                data = json.load(f)
        return cls.model_validate(data)


class LookupTable(BaseModel):
    """Reverse lookups derived from a catalogue."""

    by_grapheme: dict[str, str] = Field(
        default_factory=dict, description="Grapheme -> const accessor"
    )
    aliases: dict[str, str] = Field(
        default_factory=dict, description="Alias -> const accessor"
    )
    pattern: str = Field(default="", description="Regex alternation of all graphemes")
    count: int = 0

    def to_json(self, path: Path | str) -> None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(self.model_dump(mode="json"), f, indent=2, ensure_ascii=False)
