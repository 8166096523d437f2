"""Qualification of attribute-key sets into accessor trees.

Each attribute dimension (hair, people, tone) is described by a ``Dimension``
holding the selector slot it reads and writes plus an ordered tuple of
``QualifierSet`` objects: the value collections that count as a complete,
independently customizable set for that dimension.

``qualify_kinds`` starts from one (selector, leaf) pair per kind and folds the
dimensions from the innermost (tone) outwards. For each dimension the items
are bucketed by the selector with that slot wildcarded; a bucket containing
every value of some QualifierSet collapses into one ``QualifiedNode``, and
anything that does not fit passes through unchanged to be split off later.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterable

from ..core.models.attributes import (
    Family,
    Gender,
    Hair,
    OneOrTwo,
    Pair,
    Tone,
    TonePair,
)
from .kinds import ANY, PersonKind, PersonKindSelector, slot_key, sort_kinds
from .tree import QualifiedLeaf, QualifiedNode, QualifiedTree

logger = logging.getLogger(__name__)

Item = tuple[PersonKindSelector, QualifiedTree]


@dataclass(frozen=True)
class QualifierSet:
    """A complete collection of values of one dimension.

    Attributes:
        name: Type tag emitted for nodes built from this set
        values: Slot values that must all be present
        const_accessor: Renders the constructor-side accessor of a value
        accessor: Renders the public accessor of a value
        normalize: Optional rewrite applied to a member value before rendering
        optional: Values taken in as extra members when present, not required
    """

    name: str
    values: tuple[Any, ...]
    const_accessor: Callable[[Any], str]
    accessor: Callable[[Any], str]
    normalize: Callable[[Any], Any] | None = None
    optional: tuple[Any, ...] = ()


@dataclass(frozen=True)
class Dimension:
    """One attribute dimension and the sets it recognizes, in priority order."""

    name: str
    slot: str
    qualifier_sets: tuple[QualifierSet, ...]

    def get(self, selector: PersonKindSelector) -> Any:
        return selector.get(self.slot)

    def set(self, selector: PersonKindSelector, value: Any) -> PersonKindSelector:
        return selector.with_slot(self.slot, value)

    def validate(
        self,
        general: PersonKindSelector,
        bucket: dict[PersonKindSelector, QualifiedTree],
    ) -> list[Item]:
        """Try each QualifierSet against a bucket sharing ``general``.

        Returns the bucket unaltered when no set is complete. Otherwise the
        first complete set produces one node keyed by ``general``; members not
        covered by the set are returned next to it.
        """
        for qualifier_set in self.qualifier_sets:
            wanted = set(qualifier_set.values)
            present = {
                self.get(selector)
                for selector in bucket
                if self.get(selector) in wanted
            }
            if present != wanted:
                continue

            absorbed = wanted | set(qualifier_set.optional)
            remaining = dict(bucket)
            default = remaining.pop(self.set(general, None), None)
            members: list[tuple[Any, QualifiedTree]] = []
            for selector in list(remaining):
                value = self.get(selector)
                if value in absorbed:
                    members.append((value, remaining.pop(selector)))
            if qualifier_set.normalize is not None:
                members = [(qualifier_set.normalize(v), t) for v, t in members]
            members.sort(key=lambda member: slot_key(member[0]))

            node = QualifiedNode(
                type_name=qualifier_set.name,
                default=default,
                subs=tuple(
                    (
                        qualifier_set.const_accessor(value),
                        qualifier_set.accessor(value),
                        subtree,
                    )
                    for value, subtree in members
                ),
            )
            logger.debug(
                "Qualified %s as %s (%d values, default=%s, %d left over)",
                self.name,
                qualifier_set.name,
                len(members),
                default is not None,
                len(remaining),
            )
            leftovers = sorted(remaining.items(), key=lambda item: item[0].sort_key())
            return [(general, node), *leftovers]

        return sorted(bucket.items(), key=lambda item: item[0].sort_key())

    def qualify(self, items: Iterable[Item]) -> list[Item]:
        """Bucket items by their selector with this slot wildcarded."""
        buckets: dict[PersonKindSelector, dict[PersonKindSelector, QualifiedTree]] = {}
        for selector, tree in items:
            general = self.set(selector, ANY)
            buckets.setdefault(general, {})[selector] = tree

        result: list[Item] = []
        for general in sorted(buckets, key=PersonKindSelector.sort_key):
            result.extend(self.validate(general, buckets[general]))
        return result


# =============================================================================
# Tone
# =============================================================================


def _same_tone_as_pair(value: tuple[Tone, Tone | None]) -> tuple[Tone, Tone]:
    first, second = value
    return (first, first if second is None else second)


def _tone_pair_const(value: tuple[Tone, Tone]) -> str:
    return f"tone_pair({TonePair(*value).source()})"


def _tone_pair_accessor(value: tuple[Tone, Tone]) -> str:
    first, second = value
    if first is second:
        return f"tone({first.source()})"
    return f"tone({first.source()}, {second.source()})"


def _tone_accessor(value: tuple[Tone, None]) -> str:
    return f"tone({value[0].source()})"


TONE = Dimension(
    name="tone",
    slot="tone",
    qualifier_sets=(
        QualifierSet(
            name="TonePair",
            values=tuple(
                (left, None if left is right else right)
                for left in Tone
                for right in Tone
            ),
            const_accessor=_tone_pair_const,
            accessor=_tone_pair_accessor,
            normalize=_same_tone_as_pair,
        ),
        QualifierSet(
            name="TonePairReduced",
            values=tuple(
                (left, right)
                for left in Tone
                for right in Tone
                if left.rank < right.rank
            ),
            optional=tuple((tone, None) for tone in Tone),
            const_accessor=_tone_pair_const,
            accessor=_tone_pair_accessor,
            normalize=_same_tone_as_pair,
        ),
        QualifierSet(
            name="Tone",
            values=tuple((tone, None) for tone in Tone),
            const_accessor=_tone_accessor,
            accessor=_tone_accessor,
        ),
    ),
)


# =============================================================================
# People
# =============================================================================


def _family_const(value: tuple[OneOrTwo, OneOrTwo]) -> str:
    return f"family({Family(*value).source()})"


def _family_accessor(value: tuple[OneOrTwo, OneOrTwo]) -> str:
    parents, children = value
    return f"gender({parents.source()}, {children.source()})"


def _one_or_two_const(value: tuple[OneOrTwo, None]) -> str:
    return f"one_or_two(OneOrTwo.{value[0].name})"


def _gender_accessor(value: tuple[OneOrTwo, None]) -> str:
    return f"gender({value[0].source()})"


def _pair_const(value: tuple[OneOrTwo, None]) -> str:
    return f"pair({value[0].source()})"


def _pseudo_gender_accessor(value: tuple[OneOrTwo, None]) -> str:
    gender = Gender.MALE if value[0] is OneOrTwo.MALES else Gender.FEMALE
    return f"gender({gender.source()})"


PEOPLE = Dimension(
    name="people",
    slot="people",
    qualifier_sets=(
        QualifierSet(
            name="Family",
            values=tuple(
                (parents, children) for parents in OneOrTwo for children in OneOrTwo
            ),
            const_accessor=_family_const,
            accessor=_family_accessor,
        ),
        QualifierSet(
            name="OneOrTwo",
            values=tuple((people, None) for people in OneOrTwo),
            const_accessor=_one_or_two_const,
            accessor=_gender_accessor,
        ),
        QualifierSet(
            name="Pair",
            values=tuple((OneOrTwo.of_pair(pair), None) for pair in Pair),
            const_accessor=_pair_const,
            accessor=_gender_accessor,
        ),
        QualifierSet(
            name="Gender",
            values=tuple((OneOrTwo.of_gender(gender), None) for gender in Gender),
            const_accessor=_gender_accessor,
            accessor=_gender_accessor,
        ),
        # Two men / two women standing in for male / female
        QualifierSet(
            name="Gender",
            values=((OneOrTwo.MALES, None), (OneOrTwo.FEMALES, None)),
            const_accessor=_pseudo_gender_accessor,
            accessor=_pseudo_gender_accessor,
        ),
    ),
)


# =============================================================================
# Hair
# =============================================================================


def _hair_accessor(value: Hair) -> str:
    return f"hair({value.source()})"


HAIR = Dimension(
    name="hair",
    slot="hair",
    qualifier_sets=(
        QualifierSet(
            name="Hair",
            values=tuple(Hair),
            const_accessor=_hair_accessor,
            accessor=_hair_accessor,
        ),
    ),
)


# Outermost first
DIMENSIONS: tuple[Dimension, ...] = (HAIR, PEOPLE, TONE)


def qualify_kinds(
    kinds: Iterable[PersonKind],
    dimensions: tuple[Dimension, ...] = DIMENSIONS,
) -> list[Item]:
    """Qualify a set of kinds into (selector, tree) pairs.

    Every kind ends up in exactly one returned tree. A single pair is
    returned when the whole set forms one consistent accessor tree.
    """
    items: list[Item] = [
        (PersonKindSelector.from_kind(kind), QualifiedLeaf(kind))
        for kind in sort_kinds(kinds)
    ]
    for dimension in reversed(dimensions):
        items = dimension.qualify(items)
    return items
