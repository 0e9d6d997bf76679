"""Map catalog locale tags onto the languages a provider supports."""

import logging
from collections.abc import Iterable

from ol_catalog_translations.constants import DEFAULT_ENGLISH_TARGET
from ol_catalog_translations.providers.base import Language

logger = logging.getLogger(__name__)


def normalize_locale(locale_tag: str) -> str:
    """'pt_BR' -> 'pt-BR'."""
    return locale_tag.strip().replace("_", "-")


def get_base_lang(locale_tag: str) -> str:
    """Extract the primary language subtag (e.g., 'pt_BR' -> 'pt')."""
    return normalize_locale(locale_tag).split("-", maxsplit=1)[0].lower()


def _find_language(code: str, languages: Iterable[Language]) -> Language | None:
    code = code.lower()
    for language in languages:
        if language.code.lower() == code:
            return language
    return None


def _resolve(locale_tag: str, languages: list[Language]) -> Language | None:
    """Try the full tag first, then fall back to the bare language."""
    full_tag = normalize_locale(locale_tag)
    return _find_language(full_tag, languages) or _find_language(
        get_base_lang(full_tag), languages
    )


def target_locale_tag(locale_tag: str) -> str:
    """
    Normalized tag used to look up a target language.

    A bare "en" is ambiguous as a target, so it is treated as "en-US".
    """
    if locale_tag == "en":
        return DEFAULT_ENGLISH_TARGET
    return normalize_locale(locale_tag)


def resolve_source(locale_tag: str, languages: list[Language]) -> Language | None:
    """Resolve the base catalog locale to a source language, or None."""
    language = _resolve(locale_tag, languages)
    logger.debug("Source locale %s resolved to %s", locale_tag, language)
    return language


def resolve_target(locale_tag: str, languages: list[Language]) -> Language | None:
    """Resolve a target catalog locale to a target language, or None."""
    language = _resolve(target_locale_tag(locale_tag), languages)
    logger.debug("Target locale %s resolved to %s", locale_tag, language)
    return language
