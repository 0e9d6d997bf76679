"""Work out which base catalog keys still need translating for a locale."""

import logging

from ol_catalog_translations.utils.catalog_store import Catalog
from ol_catalog_translations.utils.plurals import is_complete

logger = logging.getLogger(__name__)


def plan(base: Catalog, target: Catalog) -> list[str]:
    """
    Return the keys of ``base`` missing or empty in ``target``.

    Keys come back in base catalog order. Existing non-empty translations are
    never selected, so manual edits survive every run.
    """
    pending = [
        key
        for key in base.translations
        if not is_complete(target.translations.get(key))
    ]
    logger.debug(
        "Planned %d of %d key(s) for %s",
        len(pending),
        len(base.translations),
        target.locale,
    )
    return pending
