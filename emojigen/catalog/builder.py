"""Building the grouped emoji catalogue from feed text."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Iterator

from ..feed.classifier import Classifier, PhrasePatterns
from ..feed.lines import FeedStats, read_feed
from .identifiers import snake_case
from .subgroup import Constant, Subgroup

logger = logging.getLogger(__name__)


class Group:
    """One ``# group:`` section holding its subgroups in feed order."""

    def __init__(self, name: str):
        self.name = name
        self.identifier = snake_case(name)
        self.subgroups: dict[str, Subgroup] = {}

    def subgroup(self, name: str) -> Subgroup:
        if name not in self.subgroups:
            self.subgroups[name] = Subgroup(name)
        return self.subgroups[name]

    def sort(self) -> None:
        self.subgroups = {
            sub.name: sub
            for sub in sorted(self.subgroups.values(), key=lambda s: s.identifier)
        }

    def preview(self, limit: int = 3) -> str:
        """First preview grapheme of the first subgroups."""
        found = []
        for sub in list(self.subgroups.values())[:limit]:
            preview = sub.preview(limit=1)
            if preview:
                found.append(preview)
        return "".join(found)


@dataclass
class EmojiCatalog:
    """All groups of a feed, finalized and sorted."""

    groups: list[Group] = field(default_factory=list)
    stats: FeedStats = field(default_factory=FeedStats)

    def subgroups(self) -> Iterator[Subgroup]:
        for group in self.groups:
            yield from group.subgroups.values()

    def constants(self) -> Iterator[Constant]:
        for sub in self.subgroups():
            yield from sub

    def find(self, identifier: str) -> Constant | None:
        """Look a constant up by its identifier."""
        for emoji in self.constants():
            if emoji.identifier == identifier:
                return emoji
        return None

    def __len__(self) -> int:
        return sum(len(sub) for sub in self.subgroups())


def build_catalog(
    lines: Iterable[str] | str,
    patterns: PhrasePatterns | None = None,
) -> EmojiCatalog:
    """Read, classify, merge and finalize a whole ``emoji-test.txt`` feed.

    Args:
        lines: Feed text or its lines
        patterns: Compiled phrase grammars (built here when omitted)

    Returns:
        EmojiCatalog with groups and subgroups sorted by identifier
    """
    classifier = Classifier(patterns or PhrasePatterns())
    catalog = EmojiCatalog()
    groups: dict[str, Group] = {}

    for record in read_feed(lines, catalog.stats):
        group = groups.get(record.group)
        if group is None:
            group = groups[record.group] = Group(record.group)
        group.subgroup(record.subgroup).append_line(record.line, classifier)

    for group in groups.values():
        for sub in group.subgroups.values():
            sub.finalize()
        group.sort()

    catalog.groups = sorted(groups.values(), key=lambda g: g.identifier)
    logger.info(
        "Built catalogue: %d groups, %d constants (%d lines, %d skipped, %d malformed)",
        len(catalog.groups),
        len(catalog),
        catalog.stats.lines,
        catalog.stats.skipped,
        len(catalog.stats.malformed),
    )
    return catalog
