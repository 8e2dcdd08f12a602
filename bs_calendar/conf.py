"""
Settings for bs_calendar.

All options live in a single ``BS_CALENDAR`` dict in the Django settings::

    BS_CALENDAR = {
        'DEFAULT_LANGUAGE': 'ne',
        'DEFAULT_FORMAT': 'MMMM D, YYYY',
        'TABLE': 'myproject.calendars.EXTENDED_TABLE',
    }

``TABLE`` is a dotted path to a ``CalendarTable`` or to a mapping of
BS year -> 12 month lengths. Without configured Django settings the
defaults below apply, so the converters work outside a Django project too.
"""
import logging
import os
from functools import lru_cache
from typing import Any, Dict

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.core.signals import setting_changed
from django.dispatch import receiver
from django.utils.module_loading import import_string

from .calendar_data import LANGUAGES
from .table import CalendarTable

logger = logging.getLogger(__name__)

DEFAULTS = {
    'DEFAULT_LANGUAGE': 'en',
    'DEFAULT_FORMAT': 'YYYY-MM-DD',
    'TABLE': None,
}


def settings_available() -> bool:
    """True when Django settings are configured or can be loaded from DJANGO_SETTINGS_MODULE"""
    return settings.configured or bool(os.environ.get('DJANGO_SETTINGS_MODULE'))


@lru_cache(maxsize=None)
def get_settings() -> Dict[str, Any]:
    user_settings = getattr(settings, 'BS_CALENDAR', {}) if settings_available() else {}
    if not isinstance(user_settings, dict):
        raise ImproperlyConfigured("BS_CALENDAR must be a dict")

    unknown = set(user_settings) - set(DEFAULTS)
    if unknown:
        raise ImproperlyConfigured(f"Unknown BS_CALENDAR option(s): {', '.join(sorted(unknown))}")

    merged = {**DEFAULTS, **user_settings}
    if merged['DEFAULT_LANGUAGE'] not in LANGUAGES:
        raise ImproperlyConfigured(
            f"BS_CALENDAR['DEFAULT_LANGUAGE'] must be one of {LANGUAGES}, "
            f"got {merged['DEFAULT_LANGUAGE']!r}"
        )
    if not isinstance(merged['DEFAULT_FORMAT'], str):
        raise ImproperlyConfigured("BS_CALENDAR['DEFAULT_FORMAT'] must be a string")
    return merged


def get_default_language() -> str:
    return get_settings()['DEFAULT_LANGUAGE']


def get_default_format() -> str:
    return get_settings()['DEFAULT_FORMAT']


@lru_cache(maxsize=None)
def get_calendar_table() -> CalendarTable:
    """Return the process-wide calendar table, building it on first use"""
    path = get_settings()['TABLE']
    if path is None:
        table = CalendarTable.default()
        logger.debug("Loaded bundled BS calendar table %r", table)
        return table

    try:
        value = import_string(path)
    except ImportError as e:
        raise ImproperlyConfigured(f"Could not import BS_CALENDAR['TABLE'] {path!r}: {e}") from e

    if isinstance(value, CalendarTable):
        table = value
    else:
        try:
            table = CalendarTable(value)
        except (TypeError, ValueError) as e:
            raise ImproperlyConfigured(f"BS_CALENDAR['TABLE'] {path!r} is not valid calendar data: {e}") from e

    logger.debug("Loaded BS calendar table %r from %s", table, path)
    return table


@receiver(setting_changed)
def reload_settings(setting, **kwargs):
    if setting == 'BS_CALENDAR':
        get_settings.cache_clear()
        get_calendar_table.cache_clear()
