"""Tests for subgroup aggregation and the person merge pass."""

import pytest

from emojigen.catalog.plain import PlainEmoji
from emojigen.catalog.subgroup import Subgroup
from emojigen.core.errors import DuplicateConstantError, UnfinalizedFamilyError
from emojigen.core.models.attributes import OneOrTwo, Version
from emojigen.feed.classifier import Classifier, PhrasePatterns
from emojigen.feed.lines import FeedLine
from emojigen.people.entries import PersonEntry, PersonVariant
from emojigen.people.family import PersonEmoji
from emojigen.people.kinds import PersonKind

MALE = (0x200D, 0x2642, 0xFE0F)
FEMALE = (0x200D, 0x2640, 0xFE0F)


@pytest.fixture(scope="module")
def classifier():
    return Classifier(PhrasePatterns())


@pytest.fixture
def append(line_factory, classifier):
    """Append a synthetic feed line to a subgroup."""

    def _append(sub, codepoints, name):
        sub.append_line(FeedLine.parse(line_factory(codepoints, name)), classifier)

    return _append


class TestAppend:
    def test_plain_and_person(self, append):
        sub = Subgroup("face-smiling")
        append(sub, (0x1F600,), "grinning face")
        append(sub, (0x1F44B, 0x1F3FB), "waving hand: light skin tone")

        assert sub.identifier == "face_smiling"
        assert list(sub.plain) == ["GRINNING_FACE"]
        assert list(sub.people) == ["WAVING_HAND"]

    def test_duplicate_plain(self):
        sub = Subgroup("face-smiling")
        sub.append_plain(PlainEmoji("GRINNING_FACE", "grinning face", "\U0001F600"))
        with pytest.raises(DuplicateConstantError, match="face-smiling"):
            sub.append_plain(PlainEmoji("GRINNING_FACE", "grinning face", "\U0001F600"))

    def test_unknown_combination_is_skipped(self, append, caplog):
        sub = Subgroup("person-activity")
        with caplog.at_level("WARNING"):
            append(sub, (0x1F48F,), "kiss: person, man")
        assert not sub.people
        assert "Skipping" in caplog.text


class TestFinalize:
    def test_plain_folds_into_family(self, append):
        sub = Subgroup("hand-fingers-open")
        append(sub, (0x1F44B,), "waving hand")
        for i, tone in enumerate(("light", "medium-light", "medium", "medium-dark", "dark")):
            append(sub, (0x1F44B, 0x1F3FB + i), f"waving hand: {tone} skin tone")

        sub.finalize()

        assert sub.constants == ["WAVING_HAND"]
        emoji = sub.get("WAVING_HAND")
        assert isinstance(emoji, PersonEmoji)
        assert emoji.declaration().type == "With[Tone, Emoji]"

    def test_plain_folds_after_removing_placeholder(self, append):
        sub = Subgroup("person-role")
        append(sub, (0x1F575, 0xFE0F), "detective")
        append(sub, (0x1F575, 0xFE0F, *MALE), "man detective")
        append(sub, (0x1F575, 0xFE0F, *FEMALE), "woman detective")
        assert list(sub.people) == ["PERSON_DETECTIVE"]

        sub.finalize()

        assert sub.constants == ["DETECTIVE"]
        emoji = sub.get("DETECTIVE")
        assert emoji.name == "detective"
        assert emoji.declaration().type == "With[Gender, Emoji]"
        assert emoji.default_grapheme() == "\U0001F575\ufe0f"

    def test_placeholder_family_is_merged(self, feed_text):
        from emojigen.catalog.builder import build_catalog

        catalog = build_catalog(feed_text)
        vampire = catalog.find("VAMPIRE")

        assert len(vampire.variants) == 18
        assert vampire.declaration().type == "With[Gender, With[Tone, Emoji]]"
        assert catalog.find("PERSON_VAMPIRE") is None

    def test_unqualified_family_is_split(self, append):
        sub = Subgroup("person")
        append(sub, (0x1F9D1,), "person")
        append(sub, (0x1F9D1, 0x200D, 0x1F9B0), "person: red hair")
        append(sub, (0x1F9D1, 0x200D, 0x1F9B1), "person: curly hair")

        sub.finalize()

        assert sub.constants == [
            "PERSON",
            "PERSON_WITH_CURLY_HAIR",
            "PERSON_WITH_RED_HAIR",
        ]

    def test_split_collides_with_plain(self):
        sub = Subgroup("person-gesture")
        sub.append_plain(PlainEmoji("MAN_BOWING", "man bowing", "M"))
        sub.append_person(
            PersonEntry(
                identifier="PERSON_BOWING",
                name="person bowing",
                kind=PersonKind(people=(OneOrTwo.MALE, None)),
                variant=PersonVariant("man bowing", "B", Version(4, 0)),
            )
        )
        with pytest.raises(DuplicateConstantError, match="MAN_BOWING"):
            sub.finalize()

    def test_finalize_twice_is_noop(self, append):
        sub = Subgroup("face-smiling")
        append(sub, (0x1F600,), "grinning face")
        sub.finalize()
        sub.finalize()
        assert sub.constants == ["GRINNING_FACE"]
        assert len(sub) == 1

    def test_families_are_finalized(self, append):
        sub = Subgroup("hand-fingers-open")
        append(sub, (0x1F44B, 0x1F3FB), "waving hand: light skin tone")
        family = sub.people["WAVING_HAND"]
        with pytest.raises(UnfinalizedFamilyError):
            family.full_emoji_list()

        sub.finalize()

        assert all(e.is_finalized for e in sub if isinstance(e, PersonEmoji))

    def test_preview(self, append):
        sub = Subgroup("face-smiling")
        append(sub, (0x1F600,), "grinning face")
        append(sub, (0x1F603,), "grinning face with big eyes")
        sub.finalize()
        assert sub.preview() == "\U0001F600\U0001F603"
