# noqa: INP001

"""Common settings for projects using catalog translations"""

import os

from ol_catalog_translations.constants import (
    DEFAULT_CONTEXT_EXCLUDED_DIRS,
    DEFAULT_CONTEXT_EXTENSIONS,
    DEFAULT_MEMORY_FILENAME,
)


def apply_common_settings(settings):
    """
    Apply catalog translation settings to a settings object.
    """
    settings.DEEPL_API_KEY = os.environ.get("DEEPL_API_KEY", "")
    settings.CATALOG_TRANSLATIONS_MEMORY_FILENAME = DEFAULT_MEMORY_FILENAME
    settings.CATALOG_TRANSLATIONS_CONTEXT_EXTENSIONS = list(DEFAULT_CONTEXT_EXTENSIONS)
    settings.CATALOG_TRANSLATIONS_CONTEXT_EXCLUDED_DIRS = list(
        DEFAULT_CONTEXT_EXCLUDED_DIRS
    )
