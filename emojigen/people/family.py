"""Person emoji families: all variants of one concept plus their accessor tree."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import NamedTuple

from ..catalog.identifiers import generate_constant
from ..core.errors import (
    DuplicateVariantError,
    MissingDefaultVariantError,
    UnfinalizedFamilyError,
)
from .entries import PersonEntry, PersonVariant
from .kinds import PersonKind, sort_kinds
from .qualifier import DIMENSIONS, Dimension, qualify_kinds
from .tree import Declaration, QualifiedTree

logger = logging.getLogger(__name__)


class EmojiAccessor(NamedTuple):
    const_accessor: str
    accessor: str
    grapheme: str


@dataclass
class PersonEmoji:
    """A family of person emoji sharing one identifier.

    Variants are keyed by PersonKind. ``finalize`` qualifies the variant keys
    into one or more families that each carry an accessor tree; projections
    are only available on those finalized families.
    """

    identifier: str
    name: str
    variants: dict[PersonKind, PersonVariant] = field(default_factory=dict)
    tree: QualifiedTree | None = None

    @classmethod
    def from_entry(cls, entry: PersonEntry) -> PersonEmoji:
        family = cls(identifier=entry.identifier, name=entry.name)
        family.insert(entry.kind, entry.variant)
        return family

    # -- mutation ------------------------------------------------------------

    def insert(self, kind: PersonKind, variant: PersonVariant) -> None:
        if kind in self.variants:
            raise DuplicateVariantError(self.identifier, kind)
        self.variants[kind] = variant

    def absorb(self, other: PersonEmoji) -> None:
        """Move every variant of ``other`` into this family."""
        for kind, variant in other.variants.items():
            self.insert(kind, variant)

    # -- defaults ------------------------------------------------------------

    def default_kinds(self) -> list[PersonKind]:
        """Kinds with the highest specificity score, sorted."""
        if not self.variants:
            raise MissingDefaultVariantError(self.identifier)
        best = max(kind.specificity() for kind in self.variants)
        return sort_kinds(k for k in self.variants if k.specificity() == best)

    def default_variants(self) -> list[PersonVariant]:
        return [self.variants[kind] for kind in self.default_kinds()]

    def graphemes(self) -> str:
        return "".join(v.grapheme for v in self.default_variants())

    def default_grapheme(self) -> str | None:
        defaults = self.default_variants()
        if len(defaults) == 1:
            return defaults[0].grapheme
        return None

    # -- finalization --------------------------------------------------------

    @property
    def is_finalized(self) -> bool:
        return self.tree is not None

    def finalize(
        self, dimensions: tuple[Dimension, ...] = DIMENSIONS
    ) -> list[PersonEmoji]:
        """Split this family into internally consistent, finalized families."""
        if not self.variants:
            raise MissingDefaultVariantError(self.identifier)

        results = []
        for selector, tree in qualify_kinds(self.variants, dimensions):
            identifier = generate_constant(selector.adapt_identifier(self.identifier))
            variants = {kind: self.variants[kind] for kind in sort_kinds(tree.kinds())}
            results.append(
                PersonEmoji(
                    identifier=identifier,
                    name=self.name,
                    variants=variants,
                    tree=tree,
                )
            )

        if len(results) > 1:
            logger.debug(
                "Split %s into %s",
                self.identifier,
                ", ".join(r.identifier for r in results),
            )
        return results

    def _require_tree(self) -> QualifiedTree:
        if self.tree is None:
            raise UnfinalizedFamilyError(self.identifier)
        return self.tree

    # -- projections ---------------------------------------------------------

    def declaration(self) -> Declaration:
        return self._require_tree().declaration(self.identifier, self.variants)

    def full_emoji_list(self) -> list[EmojiAccessor]:
        entries = self._require_tree().accessors(self.identifier, self.identifier)
        return [
            EmojiAccessor(e.const_accessor, e.accessor, self.variants[e.kind].grapheme)
            for e in entries
        ]

    def default_emoji_list(self) -> list[EmojiAccessor]:
        defaults = set(self.default_kinds())
        entries = self._require_tree().accessors(self.identifier, self.identifier)
        return [
            EmojiAccessor(e.const_accessor, e.accessor, self.variants[e.kind].grapheme)
            for e in entries
            if e.kind in defaults
        ]
