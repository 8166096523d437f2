"""Emoji without customizable attributes."""

from __future__ import annotations

from dataclasses import dataclass

from ..core.models.attributes import Version
from ..people.family import EmojiAccessor
from ..people.tree import Declaration
from .identifiers import generate_constant


@dataclass(frozen=True)
class PlainEmoji:
    """A single grapheme, e.g. ``grinning face`` or ``red hair`` (component)."""

    identifier: str
    name: str
    grapheme: str
    since: Version | None = None

    @classmethod
    def from_line(cls, line) -> PlainEmoji:
        return cls(
            identifier=generate_constant(line.name),
            name=line.name,
            grapheme=line.grapheme,
            since=line.version,
        )

    def graphemes(self) -> str:
        return self.grapheme

    def default_grapheme(self) -> str:
        return self.grapheme

    def declaration(self) -> Declaration:
        version = self.since.source() if self.since else "None"
        return Declaration(
            "Emoji",
            f"Emoji({self.name!r}, {version}, {self.grapheme!r})",
            (f"{self.identifier}: {self.grapheme}",),
        )

    def full_emoji_list(self) -> list[EmojiAccessor]:
        return [EmojiAccessor(self.identifier, self.identifier, self.grapheme)]

    def default_emoji_list(self) -> list[EmojiAccessor]:
        return self.full_emoji_list()
