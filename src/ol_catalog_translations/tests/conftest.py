"""Common test configuration"""

import pytest

from tests.utils import FakeProvider, write_json


@pytest.fixture()
def provider():
    """Translation provider that never leaves the process"""
    return FakeProvider()


@pytest.fixture()
def locales_dir(tmp_path):
    """Directory holding the base and target catalogs"""
    directory = tmp_path / "locales"
    directory.mkdir()
    return directory


@pytest.fixture()
def base_path(locales_dir):
    """An English base catalog with flat and plural entries"""
    path = locales_dir / "en.json"
    write_json(
        path,
        {
            "locale": "en",
            "translations": {
                "greet": "Hello {$name}",
                "items": {"one": "1 item", "other": "{$n} items"},
                "save": "Save",
            },
        },
    )
    return path
