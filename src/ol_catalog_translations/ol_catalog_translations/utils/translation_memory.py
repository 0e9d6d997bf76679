"""
Persisted cache of previous translations.

The file maps a memory key (target language plus an optional "-informal"
suffix) to a mapping of exact source text to translated text::

    {"de": {"Hello": "Hallo"}, "de-informal": {"Hello": "Hallo"}}
"""

import logging
from pathlib import Path

from ol_catalog_translations.constants import INFORMAL_MEMORY_SUFFIX
from ol_catalog_translations.exceptions import CatalogValidationError
from ol_catalog_translations.utils.catalog_store import (
    load_json_file,
    save_json_file,
)
from ol_catalog_translations.utils.locale_mapping import get_base_lang

logger = logging.getLogger(__name__)


def memory_key(locale_tag: str, *, informal: bool = False) -> str:
    """
    Memory key for a target locale.

    "pt_BR" -> "pt", and "de" requested informally -> "de-informal".
    """
    key = get_base_lang(locale_tag)
    return f"{key}{INFORMAL_MEMORY_SUFFIX}" if informal else key


class TranslationMemory:
    """In-memory view of the translation memory file for a single run."""

    def __init__(self, entries: dict[str, dict[str, str]] | None = None):
        self.entries = entries if entries is not None else {}

    def __len__(self):
        return sum(len(texts) for texts in self.entries.values())

    @classmethod
    def load(cls, file_path: Path) -> "TranslationMemory":
        """Load the memory file, or start empty when it does not exist."""
        if not file_path.exists():
            logger.info("No translation memory at %s, starting empty", file_path)
            return cls()

        data = load_json_file(file_path)
        if not isinstance(data, dict):
            raise CatalogValidationError(file_path, "top level must be an object")
        for key, texts in data.items():
            if not isinstance(texts, dict) or not all(
                isinstance(value, str) for value in texts.values()
            ):
                msg = f"memory entry '{key}' must be an object of strings"
                raise CatalogValidationError(file_path, msg)

        memory = cls(data)
        logger.info(
            "Loaded %d translation memory entries from %s", len(memory), file_path
        )
        return memory

    def persist(self, file_path: Path) -> None:
        save_json_file(file_path, self.entries)
        logger.info("Saved %d translation memory entries to %s", len(self), file_path)

    def lookup(self, key: str, source_text: str) -> str | None:
        """Exact-match lookup; an empty cached value counts as a miss."""
        return self.entries.get(key, {}).get(source_text) or None

    def record(self, key: str, source_text: str, translated_text: str) -> None:
        self.entries.setdefault(key, {})[source_text] = translated_text
