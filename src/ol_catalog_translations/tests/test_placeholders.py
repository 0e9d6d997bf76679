"""Tests for placeholder protection"""

import pytest

from ol_catalog_translations.utils.placeholders import protect, restore


@pytest.mark.parametrize(
    "text, expected",  # noqa: PT006
    [
        ("Hello", "Hello"),
        ("Hello {$name}", "Hello <x>{$name}</x>"),
        ("{$a}{$b}", "<x>{$a}</x><x>{$b}</x>"),
        ("{$count} of {$total} done.", "<x>{$count}</x> of <x>{$total}</x> done."),
        ("Plain {braces} stay", "Plain {braces} stay"),
        ("", ""),
    ],
)
def test_protect(text, expected):
    """Only {$...} tokens are wrapped"""
    assert protect(text) == expected


@pytest.mark.parametrize(
    "text",
    [
        "",
        "No placeholders at all",
        "Hello {$name}",
        "{$n} items in {$cart.name}, {$n}!",
        "Unclosed {$name and {other}",
        "Multi\nline {$x}\ntext",
    ],
)
def test_restore_undoes_protect(text):
    """restore(protect(text)) gives back the original text"""
    assert restore(protect(text)) == text


def test_restore_translated_text():
    """Placeholders survive a translation that moves them around"""
    assert restore("<x>{$name}</x>, hallo!") == "{$name}, hallo!"
