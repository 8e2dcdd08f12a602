"""
Date formatting utilities with English and Nepali output.

Patterns use the tokens below; anything else is copied through literally.

    YYYY  full year            (2082 / २०८२)
    YY    year mod 100         (82 / ८२)
    MMMM  full month name      (Magh / माघ)
    MMM   first 3 characters   (Mag / माघ)
    MM    zero-padded month    (01 / ०१)
    M     month                (1 / १)
    DD    zero-padded day      (06 / ०६)
    D     day                  (6 / ६)

The pattern is scanned once, left to right, longest token first, so
``MMMM`` is never read as ``MM`` + ``MM`` and month names are never
re-scanned for tokens.
"""
import re
from typing import Dict, List, Optional, Union

from .calendar_data import (
    AD_MONTHS,
    LANGUAGES,
    NEPALI_DAYS,
    NEPALI_DAYS_FULL,
    NEPALI_MONTHS,
    NEPALI_NUMERALS,
)
from .conf import get_default_format, get_default_language
from .converter import ad_to_bs, bs_to_ad, get_today_bs
from .dates import NepaliDate, EnglishDate
from .exceptions import InvalidMonth, UnsupportedLanguage

TOKEN_RE = re.compile(r'YYYY|YY|MMMM|MMM|MM|M|DD|D')

DATE_FORMATS = {
    'full': 'MMMM D, YYYY',
    'short': 'MMM D, YYYY',
    'numeric': 'YYYY/MM/DD',
    'iso': 'YYYY-MM-DD',
}

_NEPALI_DIGITS = str.maketrans('0123456789', ''.join(NEPALI_NUMERALS))


def _language(language: Optional[str]) -> str:
    if language is None:
        return get_default_language()
    if language not in LANGUAGES:
        raise UnsupportedLanguage(language, LANGUAGES)
    return language


def _pattern(pattern: Optional[str]) -> str:
    if pattern is None:
        pattern = get_default_format()
    return DATE_FORMATS.get(pattern, pattern)


def to_localized_digits(num: Union[int, str], language: str = 'ne') -> str:
    """
    Convert the decimal digits of a number to the glyphs of ``language``.

    Only ASCII digits are mapped; signs and other characters pass through,
    and no grouping is added.

    >>> to_localized_digits(2082)
    '२०८२'
    """
    text = str(num)
    if _language(language) == 'en':
        return text
    return text.translate(_NEPALI_DIGITS)


def _render(pattern: str, values: Dict[str, str]) -> str:
    return TOKEN_RE.sub(lambda match: values[match.group()], pattern)


def format_bs_date(
    date: NepaliDate,
    pattern: Optional[str] = None,
    language: Optional[str] = None,
) -> str:
    """
    Format a Bikram Sambat (BS) date based on a pattern

    Args:
        date: NepaliDate to format
        pattern: Token pattern or a DATE_FORMATS name (default: configured format, 'YYYY-MM-DD')
        language: 'en' or 'ne' (default: configured language, 'en')

    Returns:
        Formatted date string, e.g. 'Magh 6, 2082' or 'माघ ६, २०८२'
    """
    language = _language(language)
    if not 1 <= date.month <= 12:
        raise InvalidMonth(date.month)

    month_name = NEPALI_MONTHS[language][date.month - 1]

    def num(n):
        return to_localized_digits(n, language)

    values = {
        'YYYY': num(date.year),
        'YY': num(date.year % 100),
        'MMMM': month_name,
        'MMM': month_name[:3],
        'MM': num(f"{date.month:02d}"),
        'M': num(date.month),
        'DD': num(f"{date.day:02d}"),
        'D': num(date.day),
    }
    return _render(_pattern(pattern), values)


def get_bs_date_string(
    date: NepaliDate,
    pattern: Optional[str] = None,
    language: Optional[str] = None,
) -> str:
    """Alias of format_bs_date"""
    return format_bs_date(date, pattern, language)


def format_ad_date(date: EnglishDate, pattern: Optional[str] = None) -> str:
    """Format a Gregorian (AD) date; month names are always English, digits ASCII"""
    if not 1 <= date.month <= 12:
        raise InvalidMonth(date.month)

    month_name = AD_MONTHS[date.month - 1]
    values = {
        'YYYY': str(date.year),
        'YY': str(date.year % 100),
        'MMMM': month_name,
        'MMM': month_name[:3],
        'MM': f"{date.month:02d}",
        'M': str(date.month),
        'DD': f"{date.day:02d}",
        'D': str(date.day),
    }
    return _render(_pattern(pattern), values)


def get_month_name(month: int, language: Optional[str] = None) -> str:
    """Get BS month name from month number (1-12)"""
    language = _language(language)
    if 1 <= month <= 12:
        return NEPALI_MONTHS[language][month - 1]
    raise InvalidMonth(month)


def get_month_names(language: Optional[str] = None) -> List[str]:
    return list(NEPALI_MONTHS[_language(language)])


def get_day_name(day_of_week: int, language: Optional[str] = None, full: bool = False) -> str:
    """Get weekday name, 0=Sunday ... 6=Saturday"""
    names = (NEPALI_DAYS_FULL if full else NEPALI_DAYS)[_language(language)]
    if 0 <= day_of_week <= 6:
        return names[day_of_week]
    raise ValueError(f"Invalid day of week: {day_of_week}. Must be between 0-6")


def get_day_names(language: Optional[str] = None, full: bool = False) -> List[str]:
    return list((NEPALI_DAYS_FULL if full else NEPALI_DAYS)[_language(language)])


def get_today_bs_string(pattern: Optional[str] = None, language: Optional[str] = None) -> str:
    return format_bs_date(get_today_bs(), pattern, language)


def bs_to_ad_string(year: int, month: int, day: int, pattern: Optional[str] = None) -> str:
    """Convert a BS date and format the AD result, e.g. '2026-01-19'"""
    return format_ad_date(bs_to_ad(year, month, day), pattern)


def ad_to_bs_string(
    year: int,
    month: int,
    day: int,
    pattern: Optional[str] = None,
    language: Optional[str] = None,
) -> str:
    """Convert an AD date and format the BS result, e.g. '2082-10-06'"""
    return format_bs_date(ad_to_bs(year, month, day), pattern, language)
