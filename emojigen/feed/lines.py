"""Reading the line-oriented ``emoji-test.txt`` feed.

Each data line looks like::

    1F9D1 200D 1F692 ; fully-qualified # 🧑‍🚒 E12.1 firefighter

Group and subgroup headers are comment lines (``# group: Smileys & Emotion``).
Only fully-qualified and component lines are turned into records; other
qualifications are skipped, malformed lines are logged and skipped.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Iterator

from ..core.models.attributes import Version

logger = logging.getLogger(__name__)

LINE_PATTERN = re.compile(
    r"^(?P<code>[0-9A-Fa-f]{4,6}(?:\s+[0-9A-Fa-f]{4,6})*)\s*;\s*"
    r"(?P<status>[a-z-]+)\s*#\s*\S+\s+"
    r"(?:(?P<version>E\d+\.\d+)\s+)?"
    r"(?P<name>\S.*?)\s*$"
)
GROUP_PATTERN = re.compile(r"^#\s*group:\s*(?P<name>.+?)\s*$")
SUBGROUP_PATTERN = re.compile(r"^#\s*subgroup:\s*(?P<name>.+?)\s*$")


class Qualification(str, Enum):
    FULLY_QUALIFIED = "fully-qualified"
    COMPONENT = "component"
    OTHER = "other"

    @classmethod
    def from_marker(cls, marker: str) -> Qualification:
        try:
            return cls(marker)
        except ValueError:
            return cls.OTHER


@dataclass(frozen=True)
class FeedLine:
    codepoints: tuple[int, ...]
    qualification: Qualification
    version: Version | None
    name: str

    @property
    def grapheme(self) -> str:
        return "".join(chr(c) for c in self.codepoints)

    @classmethod
    def parse(cls, text: str) -> FeedLine:
        """Parse one data line.

        Raises:
            ValueError: If the line does not follow the feed grammar.
        """
        match = LINE_PATTERN.match(text.strip())
        if not match:
            raise ValueError(f"Malformed feed line: {text.strip()!r}")
        version = match.group("version")
        return cls(
            codepoints=tuple(int(c, 16) for c in match.group("code").split()),
            qualification=Qualification.from_marker(match.group("status")),
            version=Version.parse(version) if version else None,
            name=match.group("name"),
        )


@dataclass(frozen=True)
class FeedRecord:
    """A usable feed line together with its group and subgroup."""

    group: str
    subgroup: str
    line: FeedLine


@dataclass
class FeedStats:
    """Counters collected while reading a feed."""

    lines: int = 0
    records: int = 0
    skipped: int = 0
    malformed: list[str] = field(default_factory=list)


def read_feed(
    lines: Iterable[str] | str,
    stats: FeedStats | None = None,
) -> Iterator[FeedRecord]:
    """Yield the fully-qualified and component records of a feed."""
    if isinstance(lines, str):
        lines = lines.splitlines()
    stats = stats if stats is not None else FeedStats()
    group = ""
    subgroup = ""

    for raw in lines:
        text = raw.strip()
        if not text:
            continue
        if text.startswith("#"):
            if match := GROUP_PATTERN.match(text):
                group = match.group("name")
            elif match := SUBGROUP_PATTERN.match(text):
                subgroup = match.group("name")
            continue

        stats.lines += 1
        try:
            line = FeedLine.parse(text)
        except ValueError:
            logger.warning("Skipping malformed feed line: %s", text)
            stats.malformed.append(text)
            continue

        if line.qualification is Qualification.OTHER:
            stats.skipped += 1
            continue
        if not group or not subgroup:
            logger.warning("Skipping line outside any subgroup: %s", text)
            stats.malformed.append(text)
            continue

        stats.records += 1
        yield FeedRecord(group=group, subgroup=subgroup, line=line)
