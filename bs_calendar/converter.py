"""
Conversion between Bikram Sambat (BS) and Anno Domini (AD) dates.

Both directions walk forward, month by month, from the reference anchor of
the calendar table. Dates before the anchor are not supported.
"""
import calendar
from datetime import date
from typing import Optional

from django.conf import settings
from django.utils import timezone

from .conf import get_calendar_table, settings_available
from .dates import NepaliDate, EnglishDate
from .exceptions import (
    InvalidBsDate,
    InvalidAdDate,
    DateBeforeSupportedRange,
    BsYearOverflow,
)
from .table import CalendarTable


def days_in_month(year: int, month: int, *, table: Optional[CalendarTable] = None) -> int:
    """Number of days in a BS month (29-32)"""
    return (table or get_calendar_table()).days_in_month(year, month)


def total_days_in_year(year: int, *, table: Optional[CalendarTable] = None) -> int:
    return (table or get_calendar_table()).total_days_in_year(year)


def is_valid_bs_date(year: int, month: int, day: int, *, table: Optional[CalendarTable] = None) -> bool:
    """Validate if a Nepali date is valid. Never raises."""
    table = table or get_calendar_table()
    if not all(isinstance(v, int) for v in (year, month, day)):
        return False
    if year < table.min_year or year > table.max_year:
        return False
    if month < 1 or month > 12:
        return False
    return 1 <= day <= table.days_in_month(year, month)


def days_since_bs_reference(year: int, month: int, day: int, *, table: Optional[CalendarTable] = None) -> int:
    """
    Count whole days from the table's BS reference date to the given BS date

    Raises:
        InvalidBsDate: If the date does not exist in the table
        DateBeforeSupportedRange: If the date precedes the reference date
    """
    table = table or get_calendar_table()
    if not is_valid_bs_date(year, month, day, table=table):
        raise InvalidBsDate(year, month, day)

    ref = table.bs_reference
    if (year, month, day) < (ref.year, ref.month, ref.day):
        raise DateBeforeSupportedRange(year, month, day, ref)

    # Linear in the number of years since the reference; a prefix sum per
    # year would make this constant if the table grows much larger.
    total_days = 0
    for y in range(ref.year, year):
        total_days += table.total_days_in_year(y)

    lengths = table.month_lengths(year)
    total_days += sum(lengths[:month - 1]) + day - 1

    # Offset of the reference itself from the start of its year
    total_days -= sum(table.month_lengths(ref.year)[:ref.month - 1]) + ref.day - 1
    return total_days


def is_leap_year(year: int) -> bool:
    return calendar.isleap(year)


def days_in_ad_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def bs_to_ad(year: int, month: int, day: int, *, table: Optional[CalendarTable] = None) -> EnglishDate:
    """
    Convert Bikram Sambat (BS) date to Anno Domini (AD) date

    Args:
        year: BS year
        month: BS month (1-12)
        day: BS day

    Returns:
        EnglishDate of the same day

    Raises:
        InvalidBsDate: If date is invalid or year not supported
    """
    table = table or get_calendar_table()
    if not is_valid_bs_date(year, month, day, table=table):
        raise InvalidBsDate(year, month, day)

    remaining_days = days_since_bs_reference(year, month, day, table=table)

    ad_year, ad_month, ad_day = table.ad_reference.year, table.ad_reference.month, table.ad_reference.day
    while remaining_days > 0:
        days_left_in_month = days_in_ad_month(ad_year, ad_month) - ad_day
        if remaining_days <= days_left_in_month:
            ad_day += remaining_days
            remaining_days = 0
        else:
            remaining_days -= days_left_in_month + 1
            ad_month += 1
            ad_day = 1
            if ad_month > 12:
                ad_month = 1
                ad_year += 1

    return EnglishDate(ad_year, ad_month, ad_day)


def ad_to_bs(year: int, month: int, day: int, *, table: Optional[CalendarTable] = None) -> NepaliDate:
    """
    Convert Anno Domini (AD) date to Bikram Sambat (BS) date

    Args:
        year: AD year
        month: AD month (1-12)
        day: AD day

    Returns:
        NepaliDate of the same day

    Raises:
        InvalidAdDate: If the triple is not a real Gregorian day
        DateBeforeSupportedRange: If date is before the reference date
        BsYearOverflow: If the result would fall after the last supported BS year
    """
    table = table or get_calendar_table()
    try:
        target = date(year, month, day)
    except (TypeError, ValueError) as e:
        raise InvalidAdDate(year, month, day) from e

    # Proleptic day ordinals, no local-time offset involved
    remaining_days = target.toordinal() - table.ad_reference.to_date().toordinal()
    if remaining_days < 0:
        raise DateBeforeSupportedRange(year, month, day, table.ad_reference)

    bs_year, bs_month, bs_day = table.bs_reference.year, table.bs_reference.month, table.bs_reference.day
    while remaining_days > 0:
        days_left_in_month = table.days_in_month(bs_year, bs_month) - bs_day
        if remaining_days <= days_left_in_month:
            bs_day += remaining_days
            remaining_days = 0
        else:
            remaining_days -= days_left_in_month + 1
            bs_month += 1
            bs_day = 1
            if bs_month > 12:
                bs_month = 1
                bs_year += 1
                if bs_year > table.max_year:
                    raise BsYearOverflow(table.max_year)

    return NepaliDate(bs_year, bs_month, bs_day)


def _local_today() -> date:
    if not settings_available():
        return date.today()
    if settings.USE_TZ:
        return timezone.localdate()
    return timezone.now().date()


def get_today_bs(*, table: Optional[CalendarTable] = None) -> NepaliDate:
    """Get today's date in BS, using the current local calendar date"""
    today = _local_today()
    return ad_to_bs(today.year, today.month, today.day, table=table)


def get_first_day_of_bs_month(year: int, month: int, *, table: Optional[CalendarTable] = None) -> int:
    """Day of week (0=Sunday, 6=Saturday) of the first day of a BS month"""
    ad = bs_to_ad(year, month, 1, table=table)
    # date.weekday() is 0=Monday
    return (ad.to_date().weekday() + 1) % 7


def compare_bs_dates(a: NepaliDate, b: NepaliDate) -> int:
    """
    Compare two BS dates
    Returns: -1 if a < b, 0 if a == b, 1 if a > b
    """
    a_key = (a.year, a.month, a.day)
    b_key = (b.year, b.month, b.day)
    if a_key < b_key:
        return -1
    if a_key > b_key:
        return 1
    return 0


def is_bs_date_in_range(
    bs_date: NepaliDate,
    min_date: Optional[NepaliDate] = None,
    max_date: Optional[NepaliDate] = None,
) -> bool:
    """Check if a BS date is within an inclusive range; either bound may be omitted"""
    if min_date is not None and compare_bs_dates(bs_date, min_date) < 0:
        return False
    if max_date is not None and compare_bs_dates(bs_date, max_date) > 0:
        return False
    return True
