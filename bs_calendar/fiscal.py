"""
Nepal fiscal year helpers.

The fiscal year runs from Shrawan 1 (month 4) to the last day of Ashadh
(month 3) of the following BS year, roughly mid-July to mid-July.
"""
import re
from datetime import date as _date
from typing import Dict, Optional, Tuple, Union

from .converter import ad_to_bs, bs_to_ad, days_in_month, get_today_bs, is_valid_bs_date
from .dates import NepaliDate, EnglishDate
from .exceptions import InvalidBsDate
from .table import CalendarTable

FISCAL_YEAR_START_MONTH = 4  # Shrawan
FISCAL_YEAR_END_MONTH = 3    # Ashadh

FISCAL_YEAR_RE = re.compile(r'([0-9]{4})/([0-9]{2})')

DateLike = Union[NepaliDate, EnglishDate, _date]


def _to_bs(value: DateLike, table: Optional[CalendarTable]) -> NepaliDate:
    if isinstance(value, NepaliDate):
        if not is_valid_bs_date(value.year, value.month, value.day, table=table):
            raise InvalidBsDate(value.year, value.month, value.day)
        return value
    # EnglishDate, date and datetime all expose year/month/day
    return ad_to_bs(value.year, value.month, value.day, table=table)


def get_fiscal_year(
    value: DateLike,
    as_dict: bool = False,
    *,
    table: Optional[CalendarTable] = None,
) -> Union[str, Dict[str, int]]:
    """
    Get fiscal year for a given date

    Args:
        value: NepaliDate, EnglishDate, or datetime.date/datetime (AD)
        as_dict: return {'start_year': 2080, 'end_year': 2081} instead of "2080/81"

    Returns:
        Fiscal year string or dict

    Raises:
        InvalidBsDate: If a NepaliDate is given that does not exist in the table
    """
    bs_date = _to_bs(value, table)

    if bs_date.month >= FISCAL_YEAR_START_MONTH:  # Shrawan to Chaitra
        start_year = bs_date.year
    else:  # Baisakh to Ashadh
        start_year = bs_date.year - 1
    end_year = start_year + 1

    if as_dict:
        return {'start_year': start_year, 'end_year': end_year}
    return f"{start_year}/{end_year % 100:02d}"


def get_fiscal_year_dates(
    fiscal_year: str,
    *,
    table: Optional[CalendarTable] = None,
) -> Tuple[EnglishDate, EnglishDate]:
    """
    Get start and end dates for a fiscal year

    Args:
        fiscal_year: String like "2080/81"

    Returns:
        Tuple of (start_date, end_date) as EnglishDate objects
    """
    match = FISCAL_YEAR_RE.fullmatch(fiscal_year) if isinstance(fiscal_year, str) else None
    if not match:
        raise ValueError(f"Invalid fiscal year: {fiscal_year!r}. Expected format like '2080/81'")

    start_year = int(match.group(1))
    end_year = start_year + 1
    if int(match.group(2)) != end_year % 100:
        raise ValueError(f"Invalid fiscal year: {fiscal_year!r}. End year must follow {start_year}")

    # Both lookups raise UnsupportedYear outside the table
    days_in_month(start_year, FISCAL_YEAR_START_MONTH, table=table)
    ashadh_days = days_in_month(end_year, FISCAL_YEAR_END_MONTH, table=table)

    start_date = bs_to_ad(start_year, FISCAL_YEAR_START_MONTH, 1, table=table)
    end_date = bs_to_ad(end_year, FISCAL_YEAR_END_MONTH, ashadh_days, table=table)

    return start_date, end_date


def get_current_fiscal_year(*, table: Optional[CalendarTable] = None) -> str:
    """Get current fiscal year based on today's date"""
    return get_fiscal_year(get_today_bs(table=table), table=table)
