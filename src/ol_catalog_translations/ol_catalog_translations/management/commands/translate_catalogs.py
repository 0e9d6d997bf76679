"""
Management command to fill in missing catalog translations using DeepL.

Usage:
    ./manage.py translate_catalogs --base locales/en.json --locales de fr pt_BR
    ./manage.py translate_catalogs --base locales/en.json --locales de \\
        --informal-locales de --with-context --context-root src/
"""

import logging
from pathlib import Path

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from ol_catalog_translations.exceptions import CatalogTranslationsError
from ol_catalog_translations.sync import (
    LocaleOutcome,
    RunSummary,
    SyncOptions,
    run_sync,
)
from ol_catalog_translations.utils.catalog_store import resolve_output_dir
from ol_catalog_translations.utils.command_utils import (
    get_config_value,
    validate_locale_tag,
)

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    """Translate new or empty catalog entries for the given locales."""

    help = "Translate new or empty entries of locale catalogs from a base catalog."

    def add_arguments(self, parser) -> None:
        """Entry point for subclassed commands to add custom arguments."""
        parser.add_argument(
            "--base",
            dest="base",
            help="Path to the base catalog JSON file, e.g. `locales/en.json`.",
        )
        parser.add_argument(
            "--output",
            dest="output",
            help=(
                "Directory for the target catalogs and the translation memory. "
                "Defaults to the directory of the base catalog."
            ),
        )
        parser.add_argument(
            "--locales",
            dest="locales",
            nargs="+",
            default=[],
            help="Target locales to translate into, e.g. `de fr pt_BR`.",
        )
        parser.add_argument(
            "--informal-locales",
            dest="informal_locales",
            nargs="+",
            default=[],
            help="Target locales that should use the informal register.",
        )
        parser.add_argument(
            "--with-context",
            dest="with_context",
            action="store_true",
            default=False,
            help="Send surrounding source code lines as translation context.",
        )
        parser.add_argument(
            "--context-root",
            dest="context_root",
            help="Directory searched for context. Defaults to the current directory.",
        )
        parser.add_argument(
            "--compiled-i18n",
            dest="compiled_i18n",
            action="store_true",
            default=False,
            help="Translate the key itself when a base value is empty.",
        )
        parser.add_argument(
            "--api-key",
            dest="deepl_api_key",
            help=(
                "DeepL API key. "
                "Can also be set via DEEPL_API_KEY setting or environment variable."
            ),
        )

    def handle(self, *args, **options) -> None:  # noqa: ARG002
        """Handle the translate_catalogs command."""
        sync_options = self._build_options(options)
        self._write_settings(sync_options)

        try:
            summary = run_sync(sync_options)
        except CatalogTranslationsError as e:
            raise CommandError(str(e)) from e

        self._write_summary(summary)

    def _build_options(self, options: dict) -> SyncOptions:
        """Validate command inputs and resolve them into SyncOptions."""
        if not options.get("base"):
            msg = "No base path given."
            raise CommandError(msg)
        if not options.get("locales"):
            msg = "No locales as targets given."
            raise CommandError(msg)

        for locale in options["locales"]:
            validate_locale_tag(locale)
        for locale in options["informal_locales"]:
            validate_locale_tag(locale, "informal locale")

        context_root = options.get("context_root")
        output = options.get("output")
        return SyncOptions(
            base_path=Path(options["base"]),
            locales=list(options["locales"]),
            api_key=get_config_value("deepl_api_key", options),
            output_dir=Path(output) if output else None,
            informal_locales=list(options["informal_locales"]),
            with_context=options["with_context"],
            compiled_i18n=options["compiled_i18n"],
            context_root=Path(context_root) if context_root else None,
            context_extensions=settings.CATALOG_TRANSLATIONS_CONTEXT_EXTENSIONS,
            context_excluded_dirs=settings.CATALOG_TRANSLATIONS_CONTEXT_EXCLUDED_DIRS,
            memory_filename=settings.CATALOG_TRANSLATIONS_MEMORY_FILENAME,
        )

    def _write_settings(self, sync_options: SyncOptions) -> None:
        output_dir = resolve_output_dir(sync_options.base_path, sync_options.output_dir)
        self.stdout.write("Your settings:")
        self.stdout.write(f"   Base: {sync_options.base_path}")
        self.stdout.write(f"   Output: {output_dir}")
        self.stdout.write(f"   Locales: {', '.join(sync_options.locales)}")
        if sync_options.with_context:
            self.stdout.write(f"   With context: {sync_options.with_context}")
        if sync_options.compiled_i18n:
            self.stdout.write(f"   Compiled i18n: {sync_options.compiled_i18n}")
        self.stdout.write(
            "   Locales informal: "
            f"{', '.join(sync_options.informal_locales) or 'none'}\n"
        )

    def _write_summary(self, summary: RunSummary) -> None:
        for result in summary.results:
            if result.outcome == LocaleOutcome.COMPLETED:
                self.stdout.write(
                    self.style.SUCCESS(
                        f"{result.locale}: {result.translated} translated, "
                        f"{result.from_memory} from translation memory"
                    )
                )
            elif result.outcome == LocaleOutcome.SKIPPED_NO_WORK:
                self.stdout.write(
                    self.style.SUCCESS(f"{result.locale}: no new translations")
                )
            elif result.outcome == LocaleOutcome.SKIPPED_UNSUPPORTED_LANGUAGE:
                self.stdout.write(
                    self.style.WARNING(f"{result.locale}: unsupported target language")
                )
            else:
                self.stdout.write(
                    self.style.ERROR(
                        f"{result.locale}: {result.outcome.value} ({result.error})"
                    )
                )

        self.stdout.write(
            self.style.SUCCESS(
                f"\nTranslation finished. {summary.translated} translated, "
                f"{summary.from_memory} from translation memory "
                f"({summary.memory_path})"
            )
        )
