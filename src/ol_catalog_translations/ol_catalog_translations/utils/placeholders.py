"""
Keep interpolation placeholders such as ``{$name}`` out of machine translation.

Placeholders are wrapped in ``<x>`` tags which the provider is told to ignore,
and unwrapped again once the translation comes back.
"""

import re

from ol_catalog_translations.constants import PLACEHOLDER_TAG

PLACEHOLDER_RE = re.compile(r"(\{\$.*?\})")
_PROTECTED_RE = re.compile(rf"<{PLACEHOLDER_TAG}>(.*?)</{PLACEHOLDER_TAG}>")


def protect(text: str) -> str:
    return PLACEHOLDER_RE.sub(rf"<{PLACEHOLDER_TAG}>\1</{PLACEHOLDER_TAG}>", text)


def restore(text: str) -> str:
    return _PROTECTED_RE.sub(r"\1", text)
