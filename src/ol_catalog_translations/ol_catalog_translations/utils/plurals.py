"""Split catalog values into translatable parts and put results back together."""

from ol_catalog_translations.constants import FLAT_CATEGORY
from ol_catalog_translations.utils.catalog_store import (
    Catalog,
    CatalogValue,
    FlatValue,
    PluralValue,
)


def expand(value: CatalogValue) -> list[tuple[str, str]]:
    """
    Return the (category, text) pairs to translate for a catalog value.

    Plain strings yield a single pair under the "flat" category.
    """
    if isinstance(value, FlatValue):
        return [(FLAT_CATEGORY, value.text)]
    return list(value.forms.items())


def apply(catalog: Catalog, key: str, category: str, text: str) -> None:
    """Write a translated part into ``catalog`` under ``key``."""
    if category == FLAT_CATEGORY:
        catalog.translations[key] = FlatValue(text)
        return

    current = catalog.translations.get(key)
    if not isinstance(current, PluralValue):
        # Missing, empty or flat values are replaced by an empty plural mapping
        current = PluralValue()
        catalog.translations[key] = current
    current.forms[category] = text


def is_complete(target: CatalogValue | None) -> bool:
    """
    Whether ``target`` already holds a translation.

    Any non-blank value counts, including a plural mapping with only some
    categories filled in or a value shaped differently from the source. Those
    are manual edits and are never overwritten.
    """
    return target is not None and not target.is_blank()
