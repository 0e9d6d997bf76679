"""Tests for the command utilities"""

from ddt import data, ddt, unpack
from django.core.management.base import CommandError
from django.test import SimpleTestCase, override_settings

from ol_catalog_translations.utils.command_utils import (
    get_config_value,
    validate_locale_tag,
)


@ddt
class CommandUtilsTests(SimpleTestCase):
    """
    Test the command utilities.
    """

    @data("de", "pt_BR", "pt-BR", "zh-Hant", "es-419", "fil")
    def test_validate_locale_tag(self, tag):
        validate_locale_tag(tag)

    @data("", "d", "de_", "d e", "../de", "de.json")
    def test_validate_locale_tag_invalid(self, tag):
        with self.assertRaises(CommandError):
            validate_locale_tag(tag)

    @data(
        ({"deepl_api_key": "option"}, "settings", "option"),
        ({"deepl_api_key": None}, "settings", "settings"),
        ({}, "settings", "settings"),
    )
    @unpack
    def test_get_config_value(self, options, setting_value, expected):
        with override_settings(DEEPL_API_KEY=setting_value):
            assert get_config_value("deepl_api_key", options) == expected

    def test_get_config_value_default(self):
        assert get_config_value("missing_option", {}, "fallback") == "fallback"
