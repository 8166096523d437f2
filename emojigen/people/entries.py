"""Typed person entries extracted from classified feed lines."""

from __future__ import annotations

from dataclasses import dataclass

from ..catalog.identifiers import generate_constant
from ..core.models.attributes import (
    Hair,
    Tone,
    Version,
    parse_adults,
    parse_children,
)
from .kinds import PersonKind


@dataclass(frozen=True)
class PersonVariant:
    """Payload of one concrete person emoji."""

    name: str
    grapheme: str
    since: Version | None = None


@dataclass(frozen=True)
class PersonEntry:
    """One feed line resolved into (identifier, kind, variant)."""

    identifier: str
    name: str
    kind: PersonKind
    variant: PersonVariant


def build_kind(
    adults: tuple[str, ...] = (),
    children: tuple[str, ...] = (),
    tones: tuple[str, ...] = (),
    hair: str | None = None,
) -> PersonKind:
    """Build a PersonKind from descriptive fragments.

    A generic adult phrase ("person", "people") leaves the people slot unset
    even when children are named.

    Raises:
        ValueError: If a fragment is not part of the vocabulary.
    """
    people = None
    if adults:
        parents = parse_adults(adults)
        kids = parse_children(children) if children else None
        if parents is not None:
            people = (parents, kids)

    tone = None
    if tones:
        if len(tones) > 2:
            raise ValueError(f"Too many skin tones: {', '.join(tones)}")
        first = Tone.parse(tones[0])
        second = Tone.parse(tones[1]) if len(tones) == 2 else None
        tone = (first, second)

    return PersonKind(
        hair=Hair.parse(hair) if hair else None,
        people=people,
        tone=tone,
    )


def extract_entry(line, match) -> PersonEntry:
    """Resolve a classifier match for a feed line into a PersonEntry."""
    kind = build_kind(match.adults, match.children, match.tones, match.hair)
    variant = PersonVariant(name=line.name, grapheme=line.grapheme, since=line.version)
    return PersonEntry(
        identifier=generate_constant(match.base_name),
        name=match.base_name,
        kind=kind,
        variant=variant,
    )
