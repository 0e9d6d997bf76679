"""DeepL translation provider."""

import logging

import deepl

from ol_catalog_translations.constants import (
    PLACEHOLDER_TAG,
    PLACEHOLDER_TAG_HANDLING,
)

from .base import Language, TranslationProvider

logger = logging.getLogger(__name__)


def _to_language(deepl_language: deepl.Language) -> Language:
    return Language(
        code=deepl_language.code,
        name=deepl_language.name,
        supports_formality=bool(deepl_language.supports_formality),
    )


class DeepLProvider(TranslationProvider):
    """DeepL translation provider."""

    def __init__(self, primary_api_key: str):
        """
        Initialize DeepL provider.

        Args:
            primary_api_key: DeepL API key
        """
        super().__init__(primary_api_key)
        self.deepl_translator = deepl.Translator(auth_key=primary_api_key)

    def get_source_languages(self) -> list[Language]:
        return [
            _to_language(lang) for lang in self.deepl_translator.get_source_languages()
        ]

    def get_target_languages(self) -> list[Language]:
        return [
            _to_language(lang) for lang in self.deepl_translator.get_target_languages()
        ]

    def translate_text(
        self,
        source_text: str,
        source_language: str,
        target_language: str,
        formality: str | None = None,
        context: str | None = None,
    ) -> str:
        """
        Translate text using DeepL.

        Placeholders wrapped in ``<x>`` tags are left alone by DeepL thanks to
        XML tag handling. DeepL errors are not caught here: a failed call
        fails the locale being processed.

        Args:
            source_text: Text to translate
            source_language: DeepL source language code
            target_language: DeepL target language code
            formality: "less" for informal locales, None for the default
            context: Additional context that influences the translation

        Returns:
            Translated text
        """
        if not source_text or not source_text.strip():
            return source_text

        extra_params = {}
        if formality:
            extra_params["formality"] = formality
        if context:
            extra_params["context"] = context

        logger.debug(
            "DeepL request %s -> %s (formality=%s, context=%s)",
            source_language,
            target_language,
            formality,
            bool(context),
        )
        translation_result = self.deepl_translator.translate_text(
            source_text,
            source_lang=source_language,
            target_lang=target_language,
            tag_handling=PLACEHOLDER_TAG_HANDLING,
            ignore_tags=[PLACEHOLDER_TAG],
            **extra_params,
        )
        return translation_result.text
