"""Attribute keys of person emoji and selectors over them.

A ``PersonKind`` records which tone, people composition and hair style a
single variant carries. A ``PersonKindSelector`` describes a group of kinds:
each slot is either ``ANY`` (every value), ``None`` (only the kind without
that attribute) or a concrete value.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Union

from ..core.models.attributes import Hair, OneOrTwo, Tone

People = tuple[OneOrTwo, Union[OneOrTwo, None]]
ToneSpec = tuple[Tone, Union[Tone, None]]

SLOTS = ("hair", "people", "tone")


class _Any:
    """Wildcard slot of a selector."""

    _instance: _Any | None = None

    def __new__(cls) -> _Any:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ANY"

    def __reduce__(self):
        return (_Any, ())


ANY = _Any()


def slot_key(value: Any) -> tuple:
    """Sort key for one slot: ANY < None < concrete values."""
    if value is ANY:
        return (0,)
    if value is None:
        return (1,)
    if isinstance(value, tuple):
        return (2, *(slot_key(v) for v in value))
    return (2, value.rank)


# =============================================================================
# PersonKind
# =============================================================================


@dataclass(frozen=True)
class PersonKind:
    """Sparse attribute key of one person emoji variant."""

    hair: Hair | None = None
    people: People | None = None
    tone: ToneSpec | None = None

    def specificity(self) -> int:
        """Weighted count of unset slots; higher means more generic."""
        level = 0
        if self.hair is None:
            level += 1
        if self.people is None or self.people[1] is None:
            level += 2
        if self.people is None:
            level += 4
        if self.tone is None or self.tone[1] is None:
            level += 8
        if self.tone is None:
            level += 16
        return level

    def sort_key(self) -> tuple:
        return tuple(slot_key(getattr(self, slot)) for slot in SLOTS)

    def describe(self) -> str:
        """Short human description, e.g. ``man, light skin tone``."""
        parts = []
        if self.people is not None:
            adults, children = self.people
            parts.append(adults.adult_name)
            if children is not None:
                parts.append(children.child_name)
        if self.tone is not None:
            parts.extend(t.label for t in self.tone if t is not None)
        if self.hair is not None:
            parts.append(self.hair.label)
        return ", ".join(parts) or "default"

    def __str__(self) -> str:
        return self.describe()


def sort_kinds(kinds) -> list[PersonKind]:
    return sorted(kinds, key=PersonKind.sort_key)


# =============================================================================
# PersonKindSelector
# =============================================================================


@dataclass(frozen=True)
class PersonKindSelector:
    """Three-valued pattern over PersonKinds."""

    hair: Any = ANY
    people: Any = ANY
    tone: Any = ANY

    @classmethod
    def from_kind(cls, kind: PersonKind) -> PersonKindSelector:
        return cls(hair=kind.hair, people=kind.people, tone=kind.tone)

    def get(self, slot: str) -> Any:
        return getattr(self, slot)

    def with_slot(self, slot: str, value: Any) -> PersonKindSelector:
        return replace(self, **{slot: value})

    def selects(self, kind: PersonKind) -> bool:
        for slot in SLOTS:
            wanted = getattr(self, slot)
            if wanted is not ANY and wanted != getattr(kind, slot):
                return False
        return True

    def sort_key(self) -> tuple:
        return tuple(slot_key(getattr(self, slot)) for slot in SLOTS)

    def adapt_identifier(self, identifier: str) -> str:
        """Bake this selector's concrete values into a base identifier.

        The people name replaces the ``PERSON`` token (or is prefixed when the
        identifier has none); hair and tone are appended. The result is a
        descriptive phrase meant to be passed through ``generate_constant``.

        Examples:
            PERSON_RUNNING + man        -> "man RUNNING"
            KISS + men                  -> "men KISS"
            PERSON + red hair + light   -> "PERSON with red hair and light skin tone"
        """
        tokens = identifier.split("_")
        if self.people not in (ANY, None):
            adults, children = self.people
            name = adults.adult_name
            if children is not None:
                name = f"{name} with {children.child_name}"
            if "PERSON" in tokens:
                tokens = [name if t == "PERSON" else t for t in tokens]
            else:
                tokens.insert(0, name)
        phrase = " ".join(tokens)

        connector = " with "
        if self.hair not in (ANY, None):
            phrase += connector + self.hair.label
            connector = " and "
        if self.tone not in (ANY, None):
            first, second = self.tone
            phrase += connector + first.label
            if second is not None:
                phrase += " & " + second.label
        return phrase
