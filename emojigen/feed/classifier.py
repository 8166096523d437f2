"""Recognizing person emoji from their descriptive names.

Two phrase grammars are tried in order:

1. person-with-activity: ``[pre] <adult>[ and <adult>] [post][: <attributes>]``
   e.g. ``woman running: medium skin tone``, ``men with bunny ears``,
   ``person: red hair``. The base name is ``pre person post``.
2. activity-with-colon-list: ``<activity>: <item>, <item>, ...`` where every
   item is an adult, a child, a skin tone or a hair style, e.g.
   ``kiss: woman, man``, ``family: man, woman, boy``,
   ``waving hand: light skin tone``. The base name is the activity.

A name matching neither grammar is a plain emoji.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from ..core.models.attributes import ADULT_WORDS, CHILD_WORDS, Hair, Tone


@dataclass(frozen=True)
class PersonMatch:
    """Fragments of a person emoji name."""

    base_name: str
    adults: tuple[str, ...] = ()
    children: tuple[str, ...] = ()
    tones: tuple[str, ...] = ()
    hair: str | None = None


def _alternation(options) -> str:
    return "|".join(re.escape(o) for o in sorted(options, key=len, reverse=True))


class PhrasePatterns:
    """Compiled phrase grammars, built once and shared by classifiers."""

    def __init__(self):
        adults = _alternation(ADULT_WORDS)
        tones = _alternation(t.value for t in Tone)
        hair = _alternation(h.label for h in Hair)

        # Shortest prefix first so the leading adult wins ("woman and man ...")
        self.person_activity = re.compile(
            rf"^(?P<pre>(?:[^:]*?\s)??)"
            rf"(?P<adult>{adults})(?:\s+and\s+(?P<second>man|woman))?"
            rf"(?P<post>(?:\s[^:]*)?)"
            rf"(?::\s*(?P<attributes>.+))?$"
        )
        self.activity_list = re.compile(r"^(?P<activity>[^:]+?)\s*:\s*(?P<items>.+)$")
        self.adult = re.compile(rf"^(?:{adults})$")
        self.child = re.compile(rf"^(?:{_alternation(CHILD_WORDS)})$")
        self.tone = re.compile(rf"^(?P<tone>{tones}) skin tone$")
        self.hair = re.compile(rf"^(?:{hair})$")


@dataclass
class _Items:
    adults: list[str]
    children: list[str]
    tones: list[str]
    hair: list[str]


class Classifier:
    """Classify descriptive names as person emoji or plain emoji."""

    def __init__(self, patterns: PhrasePatterns):
        self.patterns = patterns

    def classify(self, name: str) -> PersonMatch | None:
        return self._person_activity(name) or self._activity_list(name)

    def _person_activity(self, name: str) -> PersonMatch | None:
        match = self.patterns.person_activity.match(name)
        if not match:
            return None

        items = _Items([], [], [], [])
        if attributes := match.group("attributes"):
            items = self._items(attributes)
            if items is None or items.adults or items.children:
                return None

        adults = [match.group("adult")]
        if second := match.group("second"):
            adults.append(second)
        base = f"{match.group('pre')}person{match.group('post')}"
        return PersonMatch(
            base_name=" ".join(base.split()),
            adults=tuple(adults),
            tones=tuple(items.tones),
            hair=items.hair[0] if items.hair else None,
        )

    def _activity_list(self, name: str) -> PersonMatch | None:
        match = self.patterns.activity_list.match(name)
        if not match:
            return None
        items = self._items(match.group("items"))
        if items is None or (items.children and not items.adults):
            return None
        return PersonMatch(
            base_name=match.group("activity").strip(),
            adults=tuple(items.adults),
            children=tuple(items.children),
            tones=tuple(items.tones),
            hair=items.hair[0] if items.hair else None,
        )

    def _items(self, text: str) -> _Items | None:
        """Sort a comma list into fragments; None if any item is unknown."""
        items = _Items([], [], [], [])
        for item in (part.strip() for part in text.split(",")):
            if self.patterns.adult.match(item) and not items.children:
                items.adults.append(item)
            elif self.patterns.child.match(item):
                items.children.append(item)
            elif tone := self.patterns.tone.match(item):
                items.tones.append(tone.group("tone"))
            elif self.patterns.hair.match(item):
                items.hair.append(item)
            else:
                return None

        if len(items.adults) > 2 or len(items.children) > 2:
            return None
        if len(items.tones) > 2 or len(items.hair) > 1:
            return None
        return items
