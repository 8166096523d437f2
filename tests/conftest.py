"""Shared fixtures: synthetic emoji-test.txt feeds and an isolated config."""

import pytest

TONES = (0x1F3FB, 0x1F3FC, 0x1F3FD, 0x1F3FE, 0x1F3FF)
TONE_NAMES = ("light", "medium-light", "medium", "medium-dark", "dark")
MALE_SIGN = (0x200D, 0x2642, 0xFE0F)
FEMALE_SIGN = (0x200D, 0x2640, 0xFE0F)


def make_line(codepoints, name, version="E1.0", status="fully-qualified"):
    """Render one feed data line the way emoji-test.txt lays it out."""
    code = " ".join(f"{c:04X}" for c in codepoints)
    grapheme = "".join(chr(c) for c in codepoints)
    return f"{code:<55}; {status:<20}# {grapheme} {version} {name}"


def toned_lines(base, name, suffix=()):
    """The plain line plus its five skin-tone lines."""
    lines = [make_line((base, *suffix), name)]
    for tone, tone_name in zip(TONES, TONE_NAMES):
        lines.append(
            make_line((base, tone, *suffix), f"{name}: {tone_name} skin tone")
        )
    return lines


def build_sample_feed():
    lines = [
        "# emoji-test.txt",
        "# Version: 13.1",
        "",
        "# group: Smileys & Emotion",
        "",
        "# subgroup: face-smiling",
        make_line((0x1F600,), "grinning face"),
        make_line((0x263A, 0xFE0F), "smiling face", version="E0.6"),
        make_line((0x263A,), "smiling face", version="E0.6", status="unqualified"),
        "",
        "# group: People & Body",
        "",
        "# subgroup: hand-fingers-open",
        *toned_lines(0x1F44B, "waving hand"),
        "",
        "# subgroup: person-activity",
        *toned_lines(0x1F3C3, "person running"),
        *toned_lines(0x1F3C3, "man running", MALE_SIGN),
        *toned_lines(0x1F3C3, "woman running", FEMALE_SIGN),
        "",
        "# subgroup: person-fantasy",
        *toned_lines(0x1F9DB, "vampire"),
        *toned_lines(0x1F9DB, "man vampire", MALE_SIGN),
        *toned_lines(0x1F9DB, "woman vampire", FEMALE_SIGN),
        "",
        "# subgroup: person",
        make_line((0x1F9D1,), "person"),
        make_line((0x1F9D1, 0x200D, 0x1F9B0), "person: red hair"),
        make_line((0x1F9D1, 0x200D, 0x1F9B1), "person: curly hair"),
        "",
        "# subgroup: skin-tone",
        make_line((0x1F3FB,), "light skin tone", status="component"),
        "",
        "this line is not part of the grammar",
        "",
        "#EOF",
    ]
    return "\n".join(lines) + "\n"


@pytest.fixture
def feed_text():
    """A small feed covering plain, toned, gendered and split emoji."""
    return build_sample_feed()


@pytest.fixture
def line_factory():
    return make_line


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the config file at a temp dir and clear env overrides."""
    from emojigen import config as config_module
    from emojigen.cli.commands import config_cmd

    config_dir = tmp_path / "config"
    monkeypatch.setattr(config_module, "CONFIG_DIR", config_dir)
    monkeypatch.setattr(config_module, "CONFIG_FILE", config_dir / "config.json")
    monkeypatch.setattr(config_cmd, "CONFIG_FILE", config_dir / "config.json")
    for name in (
        "EMOJIGEN_FEED_VERSION",
        "EMOJIGEN_FEED_URL",
        "EMOJIGEN_FEED_TIMEOUT",
        "EMOJIGEN_OUTPUT_DIR",
        "EMOJIGEN_OUTPUT_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)
    config_module.reset_config()
    yield
    config_module.reset_config()
