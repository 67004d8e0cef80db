"""Unit tests for theme values and palettes."""

import pytest_check as check

from src.chat.theme import PALETTES, Theme, palette_for


def test_toggled_flips_between_two_values() -> None:
    check.equal(Theme.LIGHT.toggled(), Theme.DARK)
    check.equal(Theme.DARK.toggled(), Theme.LIGHT)
    check.equal(Theme.LIGHT.toggled().toggled(), Theme.LIGHT)


def test_every_theme_has_a_palette() -> None:
    assert set(PALETTES) == set(Theme)


def test_palettes_differ_by_background_and_text() -> None:
    light = palette_for(Theme.LIGHT)
    dark = palette_for(Theme.DARK)

    check.not_equal(light.primary, dark.primary)
    check.not_equal(light.text, dark.text)
    check.equal(light.accent, dark.accent)
