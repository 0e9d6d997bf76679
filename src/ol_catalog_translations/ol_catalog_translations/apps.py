"""
ol_catalog_translations Django application initialization.
"""

from django.apps import AppConfig


class OLCatalogTranslationsConfig(AppConfig):
    """
    Configuration for the ol_catalog_translations Django application.
    """

    name = "ol_catalog_translations"
    verbose_name = "Catalog translations"
