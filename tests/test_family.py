"""Tests for person emoji families and their projections."""

import pytest

from emojigen.core.errors import (
    DuplicateVariantError,
    InconsistentTreeError,
    MissingDefaultVariantError,
    UnfinalizedFamilyError,
)
from emojigen.core.models.attributes import Hair, OneOrTwo, Pair, Tone, Version
from emojigen.people.entries import PersonVariant, build_kind
from emojigen.people.family import EmojiAccessor, PersonEmoji
from emojigen.people.kinds import PersonKind
from emojigen.people.tree import QualifiedLeaf, QualifiedNode

TONE_MODIFIERS = {
    Tone.LIGHT: "\U0001F3FB",
    Tone.MEDIUM_LIGHT: "\U0001F3FC",
    Tone.MEDIUM: "\U0001F3FD",
    Tone.MEDIUM_DARK: "\U0001F3FE",
    Tone.DARK: "\U0001F3FF",
}


def _waving_hand() -> PersonEmoji:
    family = PersonEmoji(identifier="WAVING_HAND", name="waving hand")
    family.insert(PersonKind(), PersonVariant("waving hand", "\U0001F44B", Version(0, 6)))
    for tone, modifier in TONE_MODIFIERS.items():
        family.insert(
            PersonKind(tone=(tone, None)),
            PersonVariant(
                f"waving hand: {tone.label}", "\U0001F44B" + modifier, Version(1, 0)
            ),
        )
    return family


def _holding_hands() -> PersonEmoji:
    family = PersonEmoji(identifier="PEOPLE_HOLDING_HANDS", name="people holding hands")
    for pair in Pair:
        for left in Tone:
            for right in Tone:
                kind = PersonKind(
                    people=(OneOrTwo.of_pair(pair), None),
                    tone=(left, None if left is right else right),
                )
                family.insert(
                    kind, PersonVariant(kind.describe(), f"{pair.value}/{left.value}/{right.value}")
                )
    return family


class TestMutation:
    def test_duplicate_variant(self):
        family = _waving_hand()
        with pytest.raises(DuplicateVariantError, match="WAVING_HAND"):
            family.insert(PersonKind(), PersonVariant("again", "x"))

    def test_absorb(self):
        family = PersonEmoji(identifier="VAMPIRE", name="vampire")
        other = PersonEmoji(identifier="PERSON_VAMPIRE", name="person vampire")
        other.insert(build_kind(adults=("man",)), PersonVariant("man vampire", "m"))
        family.absorb(other)
        assert list(family.variants) == [PersonKind(people=(OneOrTwo.MALE, None))]


class TestDefaults:
    def test_most_generic_kind_wins(self):
        family = _waving_hand()
        assert family.default_kinds() == [PersonKind()]
        assert family.default_grapheme() == "\U0001F44B"

    def test_tied_defaults(self):
        family = PersonEmoji(identifier="PERSON_BOWING", name="person bowing")
        man = PersonKind(people=(OneOrTwo.MALE, None))
        woman = PersonKind(people=(OneOrTwo.FEMALE, None))
        family.insert(man, PersonVariant("man bowing", "M"))
        family.insert(woman, PersonVariant("woman bowing", "W"))
        family.insert(
            PersonKind(people=(OneOrTwo.MALE, None), tone=(Tone.LIGHT, None)),
            PersonVariant("man bowing: light skin tone", "ML"),
        )

        assert family.default_kinds() == [man, woman]
        assert family.graphemes() == "MW"
        assert family.default_grapheme() is None

    def test_empty_family(self):
        family = PersonEmoji(identifier="EMPTY", name="empty")
        with pytest.raises(MissingDefaultVariantError):
            family.default_kinds()
        with pytest.raises(MissingDefaultVariantError):
            family.finalize()


class TestFinalize:
    def test_projections_require_finalize(self):
        family = _waving_hand()
        assert not family.is_finalized
        with pytest.raises(UnfinalizedFamilyError):
            family.declaration()
        with pytest.raises(UnfinalizedFamilyError):
            family.full_emoji_list()

    def test_tone_family(self):
        (family,) = _waving_hand().finalize()

        assert family.is_finalized
        assert family.identifier == "WAVING_HAND"
        declaration = family.declaration()
        assert declaration.type == "With[Tone, Emoji]"
        assert declaration.value.startswith(
            "With(Emoji('waving hand', Version(0, 6), '\U0001F44B'), ["
        )
        assert declaration.docs[0] == "WAVING_HAND: \U0001F44B"
        assert declaration.docs[1] == "WAVING_HAND.tone(Tone.LIGHT): \U0001F44B\U0001F3FB"

    def test_full_emoji_list(self):
        (family,) = _waving_hand().finalize()
        entries = family.full_emoji_list()

        assert len(entries) == 6
        assert entries[0] == EmojiAccessor("WAVING_HAND.default", "WAVING_HAND", "\U0001F44B")
        assert entries[-1] == EmojiAccessor(
            "WAVING_HAND.tone(Tone.DARK)",
            "WAVING_HAND.tone(Tone.DARK)",
            "\U0001F44B\U0001F3FF",
        )

    def test_enumeration_is_exact(self):
        """Each variant is reached by exactly one accessor path."""
        (family,) = _holding_hands().finalize()
        graphemes = [e.grapheme for e in family.full_emoji_list()]
        assert len(graphemes) == 75
        assert sorted(graphemes) == sorted(v.grapheme for v in family.variants.values())

    def test_default_emoji_list(self):
        (family,) = _waving_hand().finalize()
        assert family.default_emoji_list() == [
            EmojiAccessor("WAVING_HAND.default", "WAVING_HAND", "\U0001F44B")
        ]

    def test_nested_without_defaults(self):
        (family,) = _holding_hands().finalize()

        assert family.identifier == "PEOPLE_HOLDING_HANDS"
        assert family.declaration().type == "WithNoDef[Pair, WithNoDef[TonePair, Emoji]]"
        first = family.full_emoji_list()[0]
        assert first.const_accessor == (
            "PEOPLE_HOLDING_HANDS.pair(Pair.MALES)"
            ".tone_pair(TonePair(Tone.LIGHT, Tone.LIGHT))"
        )
        assert first.accessor == (
            "PEOPLE_HOLDING_HANDS.gender(Pair.MALES).tone(Tone.LIGHT)"
        )

    def test_incomplete_set_is_split(self):
        family = PersonEmoji(identifier="PERSON", name="person")
        family.insert(PersonKind(), PersonVariant("person", "P"))
        family.insert(PersonKind(hair=Hair.RED), PersonVariant("person: red hair", "R"))
        family.insert(
            PersonKind(hair=Hair.CURLY), PersonVariant("person: curly hair", "C")
        )

        results = family.finalize()

        assert [r.identifier for r in results] == [
            "PERSON",
            "PERSON_WITH_RED_HAIR",
            "PERSON_WITH_CURLY_HAIR",
        ]
        assert all(r.declaration().type == "Emoji" for r in results)
        assert results[1].full_emoji_list() == [
            EmojiAccessor("PERSON_WITH_RED_HAIR", "PERSON_WITH_RED_HAIR", "R")
        ]

    def test_split_adapts_people_into_identifier(self):
        family = PersonEmoji(identifier="PERSON_GESTURING_OK", name="person gesturing OK")
        family.insert(
            PersonKind(people=(OneOrTwo.MALE, None)), PersonVariant("man gesturing OK", "M")
        )
        results = family.finalize()
        assert [r.identifier for r in results] == ["MAN_GESTURING_OK"]

    def test_finalize_is_idempotent(self):
        (first,) = _waving_hand().finalize()
        (second,) = first.finalize()
        assert second.identifier == first.identifier
        assert second.tree == first.tree
        assert second.declaration() == first.declaration()

    def test_finalized_variants_cover_input(self):
        source = _holding_hands()
        results = source.finalize()
        found = {k for r in results for k in r.variants}
        assert found == set(source.variants)


class TestInconsistentTree:
    def test_mixed_sibling_types(self):
        light = PersonKind(tone=(Tone.LIGHT, None))
        family = PersonEmoji(
            identifier="BROKEN",
            name="broken",
            variants={
                PersonKind(): PersonVariant("broken", "B"),
                light: PersonVariant("broken: light skin tone", "BL"),
            },
            tree=QualifiedNode(
                type_name="Tone",
                default=QualifiedLeaf(PersonKind()),
                subs=(
                    (
                        "tone(Tone.LIGHT)",
                        "tone(Tone.LIGHT)",
                        QualifiedNode(
                            type_name="Tone",
                            default=None,
                            subs=(("x", "x", QualifiedLeaf(light)),),
                        ),
                    ),
                ),
            ),
        )
        with pytest.raises(InconsistentTreeError, match="Mixed subtree types"):
            family.declaration()

    def test_leaf_without_variant(self):
        family = PersonEmoji(
            identifier="BROKEN",
            name="broken",
            tree=QualifiedLeaf(PersonKind()),
        )
        with pytest.raises(InconsistentTreeError, match="has no variant"):
            family.declaration()
