"""
Incremental synchronization of locale catalogs against a base catalog.

For every requested locale the missing or empty keys of the base catalog are
translated and written to that locale's catalog. Translations are cached in a
translation memory shared by the whole run, so a string is only sent to the
translation provider once per target language and register.

Locales are processed one after another and keys in base catalog order. A
failure in one locale is recorded in its ``LocaleResult`` and the run moves
on to the next locale.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from ol_catalog_translations.constants import (
    DEFAULT_MEMORY_FILENAME,
    INFORMAL_FORMALITY,
    MAX_LOG_STRING_LENGTH,
)
from ol_catalog_translations.exceptions import (
    CatalogValidationError,
    ConfigurationError,
    UnsupportedLanguageError,
)
from ol_catalog_translations.providers.base import Language, TranslationProvider
from ol_catalog_translations.providers.deepl_provider import DeepLProvider
from ol_catalog_translations.utils import placeholders, plurals
from ol_catalog_translations.utils.catalog_store import (
    Catalog,
    FlatValue,
    catalog_path,
    load_catalog,
    load_or_create_catalog,
    resolve_output_dir,
    save_catalog,
)
from ol_catalog_translations.utils.context import ContextFinder
from ol_catalog_translations.utils.locale_mapping import (
    resolve_source,
    resolve_target,
    target_locale_tag,
)
from ol_catalog_translations.utils.sync_planner import plan
from ol_catalog_translations.utils.translation_memory import (
    TranslationMemory,
    memory_key,
)

logger = logging.getLogger(__name__)


class LocaleOutcome(Enum):
    COMPLETED = "completed"
    SKIPPED_UNSUPPORTED_LANGUAGE = "skipped_unsupported_language"
    SKIPPED_PARSE_ERROR = "skipped_parse_error"
    SKIPPED_NO_WORK = "skipped_no_work"
    FAILED = "failed"


@dataclass
class SyncOptions:
    """Resolved options for a run."""

    base_path: Path
    locales: list[str]
    api_key: str | None = None
    output_dir: Path | None = None
    informal_locales: list[str] = field(default_factory=list)
    with_context: bool = False
    # Empty base strings are translated from their key (compiled i18n catalogs)
    compiled_i18n: bool = False
    context_root: Path | None = None
    context_extensions: list[str] | None = None
    context_excluded_dirs: list[str] | None = None
    memory_filename: str = DEFAULT_MEMORY_FILENAME

    def is_informal(self, locale: str) -> bool:
        return locale in self.informal_locales


@dataclass
class LocaleResult:
    locale: str
    outcome: LocaleOutcome
    language: Language | None = None
    translated: int = 0
    from_memory: int = 0
    error: str = ""


@dataclass
class RunSummary:
    results: list[LocaleResult]
    memory_path: Path

    def by_outcome(self, outcome: LocaleOutcome) -> list[LocaleResult]:
        return [result for result in self.results if result.outcome == outcome]

    @property
    def translated(self) -> int:
        return sum(result.translated for result in self.results)

    @property
    def from_memory(self) -> int:
        return sum(result.from_memory for result in self.results)


def validate_options(options: SyncOptions) -> None:
    """Raise ConfigurationError for options a run cannot start with."""
    if not options.base_path:
        msg = "No base path given."
        raise ConfigurationError(msg)
    if not options.locales:
        msg = "No locales as targets given."
        raise ConfigurationError(msg)
    if not Path(options.base_path).is_file():
        msg = f"Base catalog not found: {options.base_path}"
        raise ConfigurationError(msg)


class CatalogSyncRun:
    """
    State of a single synchronization run: the base catalog, the provider and
    its languages, and the translation memory loaded for this run.
    """

    def __init__(  # noqa: PLR0913
        self,
        options: SyncOptions,
        provider: TranslationProvider,
        base: Catalog,
        source_language: Language,
        target_languages: list[Language],
        memory: TranslationMemory,
    ):
        self.options = options
        self.provider = provider
        self.base = base
        self.source_language = source_language
        self.target_languages = target_languages
        self.memory = memory
        self.output_dir = resolve_output_dir(options.base_path, options.output_dir)
        self.memory_path = self.output_dir / options.memory_filename
        self.context_finder = None
        if options.with_context:
            self.context_finder = ContextFinder(
                options.context_root or Path.cwd(),
                extensions=options.context_extensions,
                excluded_dirs=options.context_excluded_dirs,
            )

    def run(self) -> RunSummary:
        """Synchronize every requested locale, then persist the memory."""
        results = [self.sync_locale(locale) for locale in self.options.locales]
        self.memory.persist(self.memory_path)
        return RunSummary(results=results, memory_path=self.memory_path)

    def sync_locale(self, locale: str) -> LocaleResult:
        """Synchronize one locale. Never raises."""
        target_language = resolve_target(locale, self.target_languages)
        if target_language is None:
            logger.warning(
                "Could not find target language for %s. "
                "Supported target languages are: %s",
                locale,
                ", ".join(language.code for language in self.target_languages),
            )
            return LocaleResult(locale, LocaleOutcome.SKIPPED_UNSUPPORTED_LANGUAGE)

        result = LocaleResult(locale, LocaleOutcome.COMPLETED, target_language)
        file_path = catalog_path(self.output_dir, locale)
        try:
            try:
                target = load_or_create_catalog(file_path, locale)
            except CatalogValidationError as e:
                logger.error(  # noqa: TRY400
                    "Could not parse %s, make sure there is no merge conflict "
                    "inside the file. Will continue with next locale. %s",
                    file_path.name,
                    e,
                )
                result.outcome = LocaleOutcome.SKIPPED_PARSE_ERROR
                result.error = str(e)
                return result

            pending_keys = plan(self.base, target)
            if not pending_keys:
                logger.info("No new translations for %s found. Will skip.", locale)
                result.outcome = LocaleOutcome.SKIPPED_NO_WORK
                return result

            logger.info(
                "Start translation for %s%s (%s): %d key(s)",
                target_language.name,
                " (informal)" if self.options.is_informal(locale) else "",
                locale,
                len(pending_keys),
            )
            self._translate_keys(locale, target_language, target, pending_keys, result)
            save_catalog(file_path, target)
        except Exception as e:
            logger.exception("Translation failed for %s", locale)
            result.outcome = LocaleOutcome.FAILED
            result.error = str(e)
        return result

    def _translate_keys(  # noqa: PLR0913
        self,
        locale: str,
        target_language: Language,
        target: Catalog,
        pending_keys: list[str],
        result: LocaleResult,
    ) -> None:
        informal = self.options.is_informal(locale)
        key_in_memory = memory_key(target_locale_tag(locale), informal=informal)
        formality = (
            INFORMAL_FORMALITY
            if informal and target_language.supports_formality
            else None
        )

        for key in pending_keys:
            source = self.base.translations[key]
            if (
                self.options.compiled_i18n
                and isinstance(source, FlatValue)
                and not source.text
            ):
                source = FlatValue(key)

            for category, source_text in plurals.expand(source):
                if not source_text.strip():
                    plurals.apply(target, key, category, source_text)
                    continue

                translated = self.memory.lookup(key_in_memory, source_text)
                if translated is None:
                    translated = self._translate(
                        source_text, target_language, formality
                    )
                    if translated.strip():
                        self.memory.record(key_in_memory, source_text, translated)
                    result.translated += 1
                else:
                    result.from_memory += 1
                plurals.apply(target, key, category, translated)

    def _translate(
        self, source_text: str, target_language: Language, formality: str | None
    ) -> str:
        context = None
        if self.context_finder is not None:
            context = self.context_finder.find(source_text)
        logger.debug(
            "Translating '%s' into %s",
            source_text[:MAX_LOG_STRING_LENGTH],
            target_language.code,
        )
        translated = self.provider.translate_text(
            placeholders.protect(source_text),
            self.source_language.code,
            target_language.code,
            formality=formality,
            context=context,
        )
        return placeholders.restore(translated)


def run_sync(
    options: SyncOptions, provider: TranslationProvider | None = None
) -> RunSummary:
    """
    Set up and execute a synchronization run.

    Setup problems (missing base catalog or locales, invalid base catalog,
    missing API key, unknown source language, unreadable translation memory)
    raise before any translation happens.
    """
    validate_options(options)

    try:
        base = load_catalog(Path(options.base_path))
    except CatalogValidationError as e:
        msg = f"No valid base file given. {e}"
        raise ConfigurationError(msg) from e

    if provider is None:
        if not options.api_key:
            msg = "No api key given."
            raise ConfigurationError(msg)
        provider = DeepLProvider(options.api_key)

    source_languages = provider.get_source_languages()
    target_languages = provider.get_target_languages()

    output_dir = resolve_output_dir(options.base_path, options.output_dir)
    memory = TranslationMemory.load(output_dir / options.memory_filename)

    source_language = resolve_source(base.locale, source_languages)
    if source_language is None:
        msg = f"Could not find source language for {base.locale}."
        raise UnsupportedLanguageError(msg)

    sync_run = CatalogSyncRun(
        options, provider, base, source_language, target_languages, memory
    )
    return sync_run.run()
