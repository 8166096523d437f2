"""Subgroups of the emoji feed and the merge pass over their person emoji.

Feed lines are appended one at a time. Person emoji are aggregated into
``PersonEmoji`` records keyed by their generated identifier, everything else
is kept as ``PlainEmoji``. ``finalize`` then:

1. folds a plain emoji into the person family sharing its identifier (exactly,
   or once the ``PERSON`` placeholder is removed from the family identifier),
2. merges families whose identifiers differ only by the placeholder,
3. replaces every family by the finalized families it splits into.
"""

from __future__ import annotations

import logging
from typing import Iterator, Union

from ..core.errors import DuplicateConstantError
from ..feed.classifier import Classifier
from ..feed.lines import FeedLine
from ..people.entries import PersonEntry, PersonVariant, extract_entry
from ..people.family import PersonEmoji
from ..people.kinds import PersonKind
from .identifiers import snake_case, strip_placeholder
from .plain import PlainEmoji

logger = logging.getLogger(__name__)

Constant = Union[PlainEmoji, PersonEmoji]


class Subgroup:
    """All emoji of one ``# subgroup:`` section."""

    def __init__(self, name: str):
        self.name = name
        self.identifier = snake_case(name)
        self.plain: dict[str, PlainEmoji] = {}
        self.people: dict[str, PersonEmoji] = {}
        self.emojis: dict[str, Constant] = {}
        self.finalized = False

    # -- appending -----------------------------------------------------------

    def append_line(self, line: FeedLine, classifier: Classifier) -> None:
        """Classify a feed line and add it as a person entry or plain emoji.

        Lines whose name matches a person grammar but carries an unknown
        attribute combination are logged and skipped.
        """
        match = classifier.classify(line.name)
        if match is None:
            self.append_plain(PlainEmoji.from_line(line))
            return
        try:
            entry = extract_entry(line, match)
        except ValueError as e:
            logger.warning("Skipping %r: %s", line.name, e)
            return
        self.append_person(entry)

    def append_plain(self, emoji: PlainEmoji) -> None:
        if emoji.identifier in self.plain:
            raise DuplicateConstantError(emoji.identifier, self.name)
        self.plain[emoji.identifier] = emoji

    def append_person(self, entry: PersonEntry) -> None:
        family = self.people.get(entry.identifier)
        if family is None:
            self.people[entry.identifier] = PersonEmoji.from_entry(entry)
        else:
            family.insert(entry.kind, entry.variant)

    # -- merging -------------------------------------------------------------

    def _fold_plain(self) -> None:
        """Adopt plain emoji as the all-default variant of person families."""
        for identifier, family in list(self.people.items()):
            plain = self.plain.pop(identifier, None)
            if plain is not None:
                logger.debug("Folding plain %s into its person family", identifier)
                family.insert(PersonKind(), _as_variant(plain))

        for identifier, family in list(self.people.items()):
            stripped = strip_placeholder(identifier)
            # An exact family match already consumed the plain emoji above
            if stripped is None or stripped not in self.plain:
                continue
            plain = self.plain.pop(stripped)
            logger.debug("Folding plain %s into %s", stripped, identifier)
            family.insert(PersonKind(), _as_variant(plain))
            del self.people[identifier]
            family.identifier = stripped
            family.name = plain.name
            self.people[stripped] = family

    def _merge_placeholders(self) -> None:
        """Merge ``X_PERSON_Y`` families into an existing ``X_Y`` family."""
        for identifier in sorted(self.people):
            stripped = strip_placeholder(identifier)
            if stripped is None or stripped not in self.people:
                continue
            family = self.people.pop(identifier)
            logger.debug("Merging %s into %s", identifier, stripped)
            self.people[stripped].absorb(family)

    def finalize(self) -> None:
        """Merge, validate and split all families; fill ``emojis``."""
        if self.finalized:
            return
        self._fold_plain()
        self._merge_placeholders()

        emojis: dict[str, Constant] = dict(self.plain)
        for identifier in sorted(self.people):
            for family in self.people[identifier].finalize():
                if family.identifier in emojis:
                    raise DuplicateConstantError(family.identifier, self.name)
                emojis[family.identifier] = family

        self.emojis = {key: emojis[key] for key in sorted(emojis)}
        self.plain = {}
        self.people = {}
        self.finalized = True

    # -- access --------------------------------------------------------------

    @property
    def constants(self) -> list[str]:
        """Ordered identifiers of the finalized constants."""
        return list(self.emojis)

    def get(self, identifier: str) -> Constant | None:
        return self.emojis.get(identifier)

    def __iter__(self) -> Iterator[Constant]:
        return iter(self.emojis.values())

    def __len__(self) -> int:
        return len(self.emojis)

    def preview(self, limit: int = 3) -> str:
        """Default graphemes of the first constants that have exactly one."""
        found = []
        for emoji in self:
            grapheme = emoji.default_grapheme()
            if grapheme:
                found.append(grapheme)
            if len(found) == limit:
                break
        return "".join(found)


def _as_variant(plain: PlainEmoji) -> PersonVariant:
    return PersonVariant(name=plain.name, grapheme=plain.grapheme, since=plain.since)
