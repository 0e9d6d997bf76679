"""
Utility functions for management commands.

This module provides reusable utilities for the catalog translation commands,
including validation and configuration helpers.
"""

import os
import re
from typing import Any

from django.conf import settings
from django.core.management.base import CommandError

LOCALE_TAG_RE = re.compile(r"^[A-Za-z]{2,3}([_-][A-Za-z0-9]{2,8})*$")

# ============================================================================
# Validation Utilities
# ============================================================================


def validate_locale_tag(tag: str, field_name: str = "locale") -> None:
    """Validate locale tag format (xx, xx_XX, xx-XX, zh-Hant, ...)."""
    if not LOCALE_TAG_RE.match(tag):
        msg = (
            f"Invalid {field_name} format: {tag}. "
            f"Expected format: 'xx', 'xx_XX' or 'xx-XX' (e.g., 'de', 'pt_BR')"
        )
        raise CommandError(msg)


# ============================================================================
# Configuration Helpers
# ============================================================================


def get_config_value(key: str, options: dict, default: Any = None) -> Any:
    """Get configuration value from options, settings, or environment."""
    if options.get(key):
        return options[key]
    setting_key = key.upper().replace("-", "_")
    if getattr(settings, setting_key, None):
        return getattr(settings, setting_key)
    env_key = setting_key
    return os.environ.get(env_key, default)
