"""
Exceptions for ol-catalog-translations
"""


class CatalogTranslationsError(Exception):
    """Base class for all catalog translation errors."""


class ConfigurationError(CatalogTranslationsError):
    """Raised when the run cannot start because of missing or invalid options."""


class UnsupportedLanguageError(CatalogTranslationsError):
    """Raised when a locale has no matching language on the translation service."""


class CatalogValidationError(CatalogTranslationsError, ValueError):
    """
    Raised when a catalog or translation memory file does not match the
    expected JSON shape
    """

    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__(path, reason)

    def __str__(self):
        return f"Invalid catalog file {self.path}: {self.reason}"
