"""
Reading, validating and writing locale catalog files.

A catalog file looks like::

    {"locale": "de", "translations": {"greet": "Hallo", "items": {"one": "..."}}}

Values are validated once when a file is loaded and converted to
``FlatValue``/``PluralValue`` so the sync code never has to inspect raw JSON.
"""

import json
import logging
import os
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from ol_catalog_translations.constants import (
    CATALOG_FILE_EXTENSION,
    DEFAULT_JSON_INDENT,
)
from ol_catalog_translations.exceptions import CatalogValidationError

logger = logging.getLogger(__name__)


@dataclass
class FlatValue:
    """A catalog entry holding a single string."""

    text: str

    def is_blank(self) -> bool:
        return not self.text.strip()

    def to_json(self) -> str:
        return self.text


@dataclass
class PluralValue:
    """A catalog entry holding one string per plural category."""

    forms: dict[str, str] = field(default_factory=dict)

    def is_blank(self) -> bool:
        return not any(text.strip() for text in self.forms.values())

    def to_json(self) -> dict[str, str]:
        return dict(self.forms)


CatalogValue = FlatValue | PluralValue


@dataclass
class Catalog:
    """A locale tag and its translations, in file order."""

    locale: str
    translations: dict[str, CatalogValue] = field(default_factory=dict)

    def to_json(self) -> dict[str, Any]:
        return {
            "locale": self.locale,
            "translations": {
                key: value.to_json() for key, value in self.translations.items()
            },
        }


def parse_catalog_value(key: str, raw_value: Any, path: Path) -> CatalogValue:
    """Convert a raw JSON value into a catalog value, or raise."""
    if isinstance(raw_value, str):
        return FlatValue(raw_value)
    if isinstance(raw_value, dict):
        for category, text in raw_value.items():
            if not isinstance(text, str):
                msg = (
                    f"plural category '{category}' of key '{key}' must be a string, "
                    f"got {type(text).__name__}"
                )
                raise CatalogValidationError(path, msg)
        return PluralValue(dict(raw_value))
    msg = (
        f"value of key '{key}' must be a string or an object of strings, "
        f"got {type(raw_value).__name__}"
    )
    raise CatalogValidationError(path, msg)


def parse_catalog(data: Any, path: Path) -> Catalog:
    """Validate decoded JSON against the catalog schema."""
    if not isinstance(data, dict):
        raise CatalogValidationError(path, "top level must be an object")

    locale = data.get("locale")
    if not isinstance(locale, str) or not locale:
        raise CatalogValidationError(path, "'locale' must be a non-empty string")

    raw_translations = data.get("translations")
    if not isinstance(raw_translations, dict):
        raise CatalogValidationError(path, "'translations' must be an object")

    return Catalog(
        locale=locale,
        translations={
            key: parse_catalog_value(key, raw_value, path)
            for key, raw_value in raw_translations.items()
        },
    )


def load_json_file(file_path: Path) -> Any:
    """Load a JSON file, turning decode errors into CatalogValidationError."""
    try:
        with file_path.open(encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise CatalogValidationError(file_path, f"not valid JSON ({e})") from e
    except UnicodeDecodeError as e:
        raise CatalogValidationError(file_path, f"not valid UTF-8 ({e})") from e


def save_json_file(file_path: Path, data: Any, indent: int = DEFAULT_JSON_INDENT):
    """
    Save a JSON file with proper formatting.

    The data is written to a temporary file next to the target and moved into
    place, so a crash never leaves a half-written file behind.
    """
    file_path.parent.mkdir(parents=True, exist_ok=True)
    fd, temp_name = tempfile.mkstemp(
        dir=file_path.parent, prefix=f".{file_path.name}.", suffix=".tmp"
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=indent)
            f.write("\n")
        os.replace(temp_name, file_path)
    except BaseException:
        Path(temp_name).unlink(missing_ok=True)
        raise


def load_catalog(file_path: Path) -> Catalog:
    """Load and validate a catalog file."""
    return parse_catalog(load_json_file(file_path), file_path)


def save_catalog(file_path: Path, catalog: Catalog) -> None:
    save_json_file(file_path, catalog.to_json())


def load_or_create_catalog(file_path: Path, locale: str) -> Catalog:
    """
    Load the catalog at ``file_path``, first writing an empty one for
    ``locale`` if the file does not exist yet.
    """
    if not file_path.exists():
        logger.info("Creating empty catalog for %s at %s", locale, file_path)
        save_catalog(file_path, Catalog(locale=locale))
    return load_catalog(file_path)


def resolve_output_dir(base_path: Path, output_dir: Path | None = None) -> Path:
    """Target catalogs live next to the base catalog unless told otherwise."""
    if output_dir is not None:
        return Path(output_dir)
    return Path(base_path).parent


def catalog_path(output_dir: Path, locale: str) -> Path:
    """Path of the catalog file for ``locale`` (the tag is used verbatim)."""
    return Path(output_dir) / f"{locale}{CATALOG_FILE_EXTENSION}"
