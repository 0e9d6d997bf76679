"""Console entry point that runs translate_catalogs without a host project."""

import os
import sys

import django
from django.core.management import call_command
from django.core.management.base import CommandError

STANDALONE_SETTINGS = "ol_catalog_translations.settings.standalone"


def main(argv=None):
    """Run the translate_catalogs command with the standalone settings."""
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", STANDALONE_SETTINGS)
    django.setup()
    args = sys.argv[1:] if argv is None else argv
    try:
        call_command("translate_catalogs", *args)
    except CommandError as e:
        sys.stderr.write(f"CommandError: {e}\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
