"""Base classes for translation providers."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class Language:
    """A language supported by a translation provider."""

    code: str
    name: str
    supports_formality: bool = False


class TranslationProvider(ABC):
    """Abstract base class for translation providers."""

    def __init__(self, primary_api_key: str):
        self.primary_api_key = primary_api_key

    @abstractmethod
    def get_source_languages(self) -> list[Language]:
        """Languages the provider can translate from."""

    @abstractmethod
    def get_target_languages(self) -> list[Language]:
        """Languages the provider can translate into."""

    @abstractmethod
    def translate_text(
        self,
        source_text: str,
        source_language: str,
        target_language: str,
        formality: str | None = None,
        context: str | None = None,
    ) -> str:
        """
        Translate a single string.

        ``source_text`` may contain ``<x>...</x>`` tags; their contents must be
        passed through untouched.
        """
