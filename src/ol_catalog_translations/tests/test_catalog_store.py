"""Tests for reading and writing catalog files"""

import pytest

from ol_catalog_translations.exceptions import CatalogValidationError
from ol_catalog_translations.utils.catalog_store import (
    Catalog,
    FlatValue,
    PluralValue,
    catalog_path,
    load_catalog,
    load_or_create_catalog,
    resolve_output_dir,
    save_catalog,
)
from tests.utils import read_json, write_json


def test_load_catalog(tmp_path):
    """Strings become FlatValue and objects become PluralValue"""
    path = tmp_path / "de.json"
    write_json(
        path,
        {
            "locale": "de",
            "translations": {"greet": "Hallo", "items": {"one": "1 Artikel"}},
        },
    )

    catalog = load_catalog(path)

    assert catalog.locale == "de"
    assert catalog.translations == {
        "greet": FlatValue("Hallo"),
        "items": PluralValue({"one": "1 Artikel"}),
    }
    assert list(catalog.translations) == ["greet", "items"]


@pytest.mark.parametrize(
    "content",
    [
        [],
        {"translations": {}},
        {"locale": "", "translations": {}},
        {"locale": "de"},
        {"locale": "de", "translations": []},
        {"locale": "de", "translations": {"greet": 1}},
        {"locale": "de", "translations": {"greet": None}},
        {"locale": "de", "translations": {"items": {"one": ["x"]}}},
    ],
)
def test_load_catalog_invalid_schema(tmp_path, content):
    path = tmp_path / "de.json"
    write_json(path, content)
    with pytest.raises(CatalogValidationError) as exc_info:
        load_catalog(path)
    assert str(path) in str(exc_info.value)


def test_load_catalog_merge_conflict(tmp_path):
    """Merge conflict markers make the file unreadable"""
    path = tmp_path / "de.json"
    path.write_text(
        '{\n<<<<<<< HEAD\n  "locale": "de",\n=======\n  "locale": "at",\n'
        ">>>>>>> branch\n}\n",
        encoding="utf-8",
    )
    with pytest.raises(CatalogValidationError):
        load_catalog(path)


def test_load_catalog_not_utf8(tmp_path):
    path = tmp_path / "de.json"
    path.write_bytes(b'{"locale": "de", "translations": {"greet": "\xff\xfe"}}')
    with pytest.raises(CatalogValidationError, match="not valid UTF-8"):
        load_catalog(path)


def test_load_or_create_catalog_creates_file(tmp_path):
    path = tmp_path / "nested" / "pt_BR.json"

    catalog = load_or_create_catalog(path, "pt_BR")

    assert catalog == Catalog(locale="pt_BR")
    assert read_json(path) == {"locale": "pt_BR", "translations": {}}


def test_load_or_create_catalog_keeps_existing(tmp_path):
    path = tmp_path / "de.json"
    write_json(path, {"locale": "de", "translations": {"greet": "Hallo"}})

    catalog = load_or_create_catalog(path, "de")

    assert catalog.translations == {"greet": FlatValue("Hallo")}


def test_save_catalog(tmp_path):
    """Catalogs are written as indented UTF-8 JSON without leftovers"""
    path = tmp_path / "de.json"
    catalog = Catalog(
        locale="de",
        translations={
            "greet": FlatValue("Grüß dich {$name}"),
            "items": PluralValue({"one": "1 Artikel", "other": "{$n} Artikel"}),
        },
    )

    save_catalog(path, catalog)

    content = path.read_text(encoding="utf-8")
    assert "Grüß dich" in content
    assert content.endswith("}\n")
    assert read_json(path) == catalog.to_json()
    assert [p.name for p in tmp_path.iterdir()] == ["de.json"]


def test_output_paths(tmp_path):
    base = tmp_path / "locales" / "en.json"
    assert resolve_output_dir(base) == tmp_path / "locales"
    assert resolve_output_dir(base, tmp_path / "out") == tmp_path / "out"
    assert catalog_path(tmp_path, "pt_BR") == tmp_path / "pt_BR.json"


def test_blank_values():
    assert FlatValue("  ").is_blank()
    assert not FlatValue("x").is_blank()
    assert PluralValue().is_blank()
    assert PluralValue({"one": " "}).is_blank()
    assert not PluralValue({"one": "", "other": "x"}).is_blank()
