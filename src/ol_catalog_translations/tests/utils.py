"""
Utils for ol-catalog-translations tests.
"""

import json

from ol_catalog_translations.providers.base import Language, TranslationProvider

SOURCE_LANGUAGES = [
    Language("EN", "English"),
    Language("DE", "German"),
    Language("FR", "French"),
    Language("PT", "Portuguese"),
    Language("JA", "Japanese"),
]

TARGET_LANGUAGES = [
    Language("EN-GB", "English (British)"),
    Language("EN-US", "English (American)"),
    Language("DE", "German", supports_formality=True),
    Language("FR", "French", supports_formality=True),
    Language("PT-BR", "Portuguese (Brazilian)", supports_formality=True),
    Language("PT-PT", "Portuguese (European)", supports_formality=True),
    Language("JA", "Japanese", supports_formality=True),
    Language("ZH", "Chinese (simplified)"),
]


class FakeProvider(TranslationProvider):
    """
    Provider that "translates" by prefixing the target language code and
    records every call it receives.
    """

    def __init__(self, fail_for=None):
        super().__init__("fake-key")
        self.calls = []
        self.fail_for = set(fail_for or [])

    def get_source_languages(self):
        return list(SOURCE_LANGUAGES)

    def get_target_languages(self):
        return list(TARGET_LANGUAGES)

    def translate_text(
        self,
        source_text,
        source_language,
        target_language,
        formality=None,
        context=None,
    ):
        self.calls.append(
            {
                "text": source_text,
                "source_language": source_language,
                "target_language": target_language,
                "formality": formality,
                "context": context,
            }
        )
        if target_language in self.fail_for:
            msg = f"Service unavailable for {target_language}"
            raise ConnectionError(msg)
        return f"[{target_language}] {source_text}"

    @property
    def translated_texts(self):
        return [call["text"] for call in self.calls]


def write_json(path, data):
    """Write ``data`` to ``path`` as JSON."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")


def read_json(path):
    """Read JSON from ``path``."""
    return json.loads(path.read_text(encoding="utf-8"))
