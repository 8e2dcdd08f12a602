"""
Template filters for showing BS dates.

    {% load bs_calendar %}
    {{ nepali_date|bs_date:"MMMM D, YYYY" }}
    {{ invoice.created_at|bs_date:"full" }}
    {{ 2082|nepali_digits }}

Filters return an empty string for values they cannot convert instead of
breaking the page.
"""
from datetime import date, datetime

from django import template
from django.utils import timezone

from bs_calendar.calendar_data import LANGUAGES
from bs_calendar.converter import ad_to_bs
from bs_calendar.dates import NepaliDate, EnglishDate
from bs_calendar.exceptions import BsCalendarError
from bs_calendar.formatter import format_ad_date, format_bs_date, to_localized_digits

register = template.Library()


@register.filter
def bs_date(value, arg=None):
    """
    Format a NepaliDate, or convert an AD date (date, datetime, EnglishDate)
    to BS and format it.

    ``arg`` is a pattern, optionally prefixed with a language:
    "MMMM D, YYYY" or "ne:MMMM D, YYYY".
    """
    pattern, language = _split_arg(arg)
    try:
        if not isinstance(value, NepaliDate):
            if not isinstance(value, (date, EnglishDate)):
                return ''
            if isinstance(value, datetime) and timezone.is_aware(value):
                value = timezone.localtime(value)
            value = ad_to_bs(value.year, value.month, value.day)
        return format_bs_date(value, pattern, language)
    except BsCalendarError:
        return ''


@register.filter
def ad_date(value, arg=None):
    """Format an EnglishDate or datetime.date with the token pattern"""
    if isinstance(value, date):
        if isinstance(value, datetime) and timezone.is_aware(value):
            value = timezone.localtime(value)
        value = EnglishDate.from_date(value)
    if not isinstance(value, EnglishDate):
        return ''
    try:
        return format_ad_date(value, arg)
    except BsCalendarError:
        return ''


@register.filter
def nepali_digits(value):
    return to_localized_digits(value, 'ne')


def _split_arg(arg):
    if not arg:
        return None, None
    language, sep, pattern = arg.partition(':')
    if sep and language in LANGUAGES:
        return pattern or None, language
    return arg, None
