"""
Settings for ol-catalog-translations tests
"""

from ol_catalog_translations.settings.common import apply_common_settings


class SettingsClass:
    """dummy settings class"""


def plugin_settings(settings):
    """
    Configure the app for tests
    """
    apply_common_settings(settings)
    settings.DEEPL_API_KEY = ""


SETTINGS = SettingsClass()
plugin_settings(SETTINGS)
vars().update(SETTINGS.__dict__)


SECRET_KEY = "ol-catalog-translations-tests"  # noqa: S105
INSTALLED_APPS = ["ol_catalog_translations"]
USE_TZ = True

# This key needs to be defined so that the check_apps_ready passes and the
# AppRegistry is loaded
DATABASES = {"default": {"ENGINE": "django.db.backends.sqlite3", "NAME": ":memory:"}}
