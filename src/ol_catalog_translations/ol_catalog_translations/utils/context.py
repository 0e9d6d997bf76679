"""Find where a string is used in the project to give the translator context."""

import logging
import os
from pathlib import Path

from ol_catalog_translations.constants import (
    CONTEXT_LINES_AROUND,
    DEFAULT_CONTEXT_EXCLUDED_DIRS,
    DEFAULT_CONTEXT_EXTENSIONS,
    MAX_CONTEXT_LENGTH,
    MAX_LOG_STRING_LENGTH,
)

logger = logging.getLogger(__name__)


class ContextFinder:
    """
    Searches source files under a root directory for a string and returns the
    lines surrounding its first occurrence.

    Files are read lazily on the first lookup and kept for the rest of the run.
    """

    def __init__(
        self,
        root: Path,
        extensions: list[str] | None = None,
        excluded_dirs: list[str] | None = None,
    ):
        self.root = Path(root)
        self.extensions = {
            ext.lower() for ext in (extensions or DEFAULT_CONTEXT_EXTENSIONS)
        }
        self.excluded_dirs = set(excluded_dirs or DEFAULT_CONTEXT_EXCLUDED_DIRS)
        self._files: list[tuple[Path, list[str]]] | None = None

    def _iter_source_files(self):
        for dirpath, dirnames, filenames in os.walk(self.root):
            # Pruned in place so excluded directories are never entered
            dirnames[:] = sorted(d for d in dirnames if d not in self.excluded_dirs)
            for filename in sorted(filenames):
                path = Path(dirpath) / filename
                if path.suffix.lower() in self.extensions:
                    yield path

    def _load_files(self) -> list[tuple[Path, list[str]]]:
        if self._files is None:
            self._files = []
            for path in self._iter_source_files():
                try:
                    lines = path.read_text(encoding="utf-8").splitlines()
                except (OSError, UnicodeDecodeError) as e:
                    logger.debug("Skipping %s for context lookup: %s", path, e)
                    continue
                self._files.append((path, lines))
            logger.debug(
                "Indexed %d file(s) under %s for context", len(self._files), self.root
            )
        return self._files

    def find(self, text: str) -> str | None:
        """Return surrounding source lines for ``text``, or None if not found."""
        if not text or not text.strip():
            return None

        for path, lines in self._load_files():
            for index, line in enumerate(lines):
                if text not in line:
                    continue
                start = max(0, index - CONTEXT_LINES_AROUND)
                end = index + CONTEXT_LINES_AROUND + 1
                snippet = "\n".join(lines[start:end]).strip()
                logger.debug(
                    "Context for '%s' found in %s:%d",
                    text[:MAX_LOG_STRING_LENGTH],
                    path,
                    index + 1,
                )
                return snippet[:MAX_CONTEXT_LENGTH]
        return None
