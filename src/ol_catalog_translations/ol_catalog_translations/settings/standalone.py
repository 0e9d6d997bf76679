"""
Settings for running catalog translations outside of a host Django project
"""

from ol_catalog_translations.settings.common import apply_common_settings


class SettingsClass:
    """dummy settings class"""


def plugin_settings(settings):
    """
    Populate standalone settings
    """
    apply_common_settings(settings)


SETTINGS = SettingsClass()
plugin_settings(SETTINGS)
vars().update(SETTINGS.__dict__)


SECRET_KEY = "ol-catalog-translations-standalone"  # noqa: S105
INSTALLED_APPS = ["ol_catalog_translations"]
USE_TZ = True

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(levelname)s %(name)s: %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "simple"},
    },
    "loggers": {
        "ol_catalog_translations": {"handlers": ["console"], "level": "INFO"},
    },
}
