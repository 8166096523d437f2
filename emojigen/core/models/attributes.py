"""Closed attribute vocabularies used to key emoji variants.

The enums here are declared in their natural order (the order the Unicode
feed lists them in), which is also the order generated accessors are emitted
in. Every member knows how to render itself as a constructor expression so
that the qualification engine can build accessor paths without a lookup
table per dimension.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum


def _rank(member: Enum) -> int:
    return list(type(member)).index(member)


# =============================================================================
# Version
# =============================================================================


_VERSION_PATTERN = re.compile(r"^E?(?P<major>\d+)\.(?P<minor>\d+)$")


@dataclass(frozen=True, order=True)
class Version:
    """Emoji version in which a grapheme was introduced."""

    major: int
    minor: int

    @classmethod
    def parse(cls, text: str) -> Version:
        """Parse ``E13.1`` or ``13.1``.

        Raises:
            ValueError: If the text is not a dotted version.
        """
        match = _VERSION_PATTERN.match(text.strip())
        if not match:
            raise ValueError(f"Invalid emoji version: {text!r}")
        return cls(int(match.group("major")), int(match.group("minor")))

    def source(self) -> str:
        return f"Version({self.major}, {self.minor})"

    def __str__(self) -> str:
        return f"E{self.major}.{self.minor}"


# =============================================================================
# Tone
# =============================================================================


class Tone(str, Enum):
    LIGHT = "light"
    MEDIUM_LIGHT = "medium-light"
    MEDIUM = "medium"
    MEDIUM_DARK = "medium-dark"
    DARK = "dark"

    @property
    def rank(self) -> int:
        return _rank(self)

    @property
    def label(self) -> str:
        """Descriptive name as used in the feed, e.g. ``medium skin tone``."""
        return f"{self.value} skin tone"

    def source(self) -> str:
        return f"Tone.{self.name}"

    @classmethod
    def parse(cls, text: str) -> Tone:
        """Parse a feed descriptor (``light skin tone`` or ``light``)."""
        word = text.strip().lower()
        if word.endswith(" skin tone"):
            word = word[: -len(" skin tone")]
        try:
            return cls(word)
        except ValueError:
            raise ValueError(f"Unknown skin tone: {text!r}") from None


# =============================================================================
# Hair
# =============================================================================


_HAIR_LABELS = {
    "beard": "beard",
    "blond": "blond hair",
    "red": "red hair",
    "curly": "curly hair",
    "white": "white hair",
    "bald": "bald",
}


class Hair(str, Enum):
    BEARD = "beard"
    BLOND = "blond"
    RED = "red"
    CURLY = "curly"
    WHITE = "white"
    BALD = "bald"

    @property
    def rank(self) -> int:
        return _rank(self)

    @property
    def label(self) -> str:
        return _HAIR_LABELS[self.value]

    def source(self) -> str:
        return f"Hair.{self.name}"

    @classmethod
    def parse(cls, text: str) -> Hair:
        """Parse a feed descriptor such as ``red hair``, ``bald`` or ``beard``."""
        word = text.strip().lower()
        for member in cls:
            if word in (member.value, member.label):
                return member
        raise ValueError(f"Unknown hair style: {text!r}")


# =============================================================================
# Gender / Pair / OneOrTwo
# =============================================================================


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"

    @property
    def rank(self) -> int:
        return _rank(self)

    @property
    def adult_name(self) -> str:
        return "man" if self is Gender.MALE else "woman"

    @property
    def child_name(self) -> str:
        return "boy" if self is Gender.MALE else "girl"

    def source(self) -> str:
        return f"Gender.{self.name}"


class Pair(str, Enum):
    MALES = "males"
    MIXED = "mixed"
    FEMALES = "females"

    @property
    def rank(self) -> int:
        return _rank(self)

    @property
    def adult_name(self) -> str:
        return {"males": "men", "mixed": "man & woman", "females": "women"}[self.value]

    @property
    def child_name(self) -> str:
        return {"males": "boys", "mixed": "boy & girl", "females": "girls"}[self.value]

    def source(self) -> str:
        return f"Pair.{self.name}"

    @classmethod
    def of(cls, first: Gender, second: Gender) -> Pair:
        if first is second:
            return cls.MALES if first is Gender.MALE else cls.FEMALES
        return cls.MIXED


class OneOrTwo(str, Enum):
    """Either one person of a gender or a pair of people."""

    MALE = "male"
    FEMALE = "female"
    MALES = "males"
    MIXED = "mixed"
    FEMALES = "females"

    @property
    def rank(self) -> int:
        return _rank(self)

    @property
    def gender(self) -> Gender | None:
        if self in (OneOrTwo.MALE, OneOrTwo.FEMALE):
            return Gender(self.value)
        return None

    @property
    def pair(self) -> Pair | None:
        if self.gender is None:
            return Pair(self.value)
        return None

    @property
    def adult_name(self) -> str:
        return (self.gender or self.pair).adult_name

    @property
    def child_name(self) -> str:
        return (self.gender or self.pair).child_name

    def source(self) -> str:
        """Expression of the underlying Gender or Pair."""
        return (self.gender or self.pair).source()

    @classmethod
    def of_gender(cls, gender: Gender) -> OneOrTwo:
        return cls(gender.value)

    @classmethod
    def of_pair(cls, pair: Pair) -> OneOrTwo:
        return cls(pair.value)


# =============================================================================
# Composite values
# =============================================================================


@dataclass(frozen=True)
class TonePair:
    """Independent tones of the left and right person."""

    left: Tone
    right: Tone

    def source(self) -> str:
        return f"TonePair({self.left.source()}, {self.right.source()})"


@dataclass(frozen=True)
class Family:
    """Parents and children of a family emoji."""

    parents: OneOrTwo
    children: OneOrTwo

    def source(self) -> str:
        return (
            f"Family(OneOrTwo.{self.parents.name}, OneOrTwo.{self.children.name})"
        )


# =============================================================================
# Feed vocabulary
# =============================================================================

# Descriptive words for people in emoji names. ``None`` means the generic
# form without gender ("person", "people", "child").

ADULTS: dict[tuple[str, ...], OneOrTwo | None] = {
    ("person",): None,
    ("people",): None,
    ("person", "person"): None,
    ("man",): OneOrTwo.MALE,
    ("woman",): OneOrTwo.FEMALE,
    ("men",): OneOrTwo.MALES,
    ("women",): OneOrTwo.FEMALES,
    ("man", "man"): OneOrTwo.MALES,
    ("man", "woman"): OneOrTwo.MIXED,
    ("woman", "man"): OneOrTwo.MIXED,
    ("woman", "woman"): OneOrTwo.FEMALES,
}

CHILDREN: dict[tuple[str, ...], OneOrTwo | None] = {
    ("child",): None,
    ("children",): None,
    ("child", "child"): None,
    ("boy",): OneOrTwo.MALE,
    ("girl",): OneOrTwo.FEMALE,
    ("boys",): OneOrTwo.MALES,
    ("girls",): OneOrTwo.FEMALES,
    ("boy", "boy"): OneOrTwo.MALES,
    ("boy", "girl"): OneOrTwo.MIXED,
    ("girl", "boy"): OneOrTwo.MIXED,
    ("girl", "girl"): OneOrTwo.FEMALES,
}

ADULT_WORDS = ("person", "people", "man", "men", "woman", "women")
CHILD_WORDS = ("child", "children", "boy", "boys", "girl", "girls")


def parse_adults(words: list[str] | tuple[str, ...]) -> OneOrTwo | None:
    """Map the adult words of a name to a OneOrTwo.

    Raises:
        ValueError: If the combination is not a known adult phrase.
    """
    key = tuple(w.strip().lower() for w in words)
    if key not in ADULTS:
        raise ValueError(f"Unknown adult combination: {', '.join(key)}")
    return ADULTS[key]


def parse_children(words: list[str] | tuple[str, ...]) -> OneOrTwo | None:
    """Map the child words of a name to a OneOrTwo.

    Raises:
        ValueError: If the combination is not a known child phrase.
    """
    key = tuple(w.strip().lower() for w in words)
    if key not in CHILDREN:
        raise ValueError(f"Unknown child combination: {', '.join(key)}")
    return CHILDREN[key]
