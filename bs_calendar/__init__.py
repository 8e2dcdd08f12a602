"""
BS Calendar - Bikram Sambat / Gregorian date conversion and formatting
"""

__version__ = '1.0.0'
__author__ = 'NEPSE Analyst Team'

# Import commonly used functions for easy access
from .calendar_data import (
    BS_MIN_YEAR,
    BS_MAX_YEAR,
    NEPALI_MONTHS,
    NEPALI_DAYS,
    NEPALI_DAYS_FULL,
    NEPALI_NUMERALS,
    AD_MONTHS,
)
from .converter import (
    days_in_month,
    total_days_in_year,
    is_valid_bs_date,
    days_since_bs_reference,
    bs_to_ad,
    ad_to_bs,
    get_today_bs,
    get_first_day_of_bs_month,
    compare_bs_dates,
    is_bs_date_in_range,
)
from .dates import NepaliDate, EnglishDate
from .exceptions import (
    BsCalendarError,
    UnsupportedYear,
    InvalidMonth,
    InvalidBsDate,
    InvalidAdDate,
    DateBeforeSupportedRange,
    BsYearOverflow,
    UnsupportedLanguage,
)
from .fiscal import get_fiscal_year, get_fiscal_year_dates, get_current_fiscal_year
from .formatter import (
    DATE_FORMATS,
    format_bs_date,
    get_bs_date_string,
    format_ad_date,
    to_localized_digits,
    get_month_name,
    get_month_names,
    get_day_name,
    get_day_names,
    get_today_bs_string,
    bs_to_ad_string,
    ad_to_bs_string,
)
from .parser import parse_bs_date
from .table import CalendarTable

__all__ = [
    'BS_MIN_YEAR',
    'BS_MAX_YEAR',
    'NEPALI_MONTHS',
    'NEPALI_DAYS',
    'NEPALI_DAYS_FULL',
    'NEPALI_NUMERALS',
    'AD_MONTHS',
    'DATE_FORMATS',
    'NepaliDate',
    'EnglishDate',
    'CalendarTable',
    'days_in_month',
    'total_days_in_year',
    'is_valid_bs_date',
    'days_since_bs_reference',
    'bs_to_ad',
    'ad_to_bs',
    'get_today_bs',
    'get_first_day_of_bs_month',
    'compare_bs_dates',
    'is_bs_date_in_range',
    'format_bs_date',
    'get_bs_date_string',
    'format_ad_date',
    'to_localized_digits',
    'get_month_name',
    'get_month_names',
    'get_day_name',
    'get_day_names',
    'get_today_bs_string',
    'bs_to_ad_string',
    'ad_to_bs_string',
    'parse_bs_date',
    'get_fiscal_year',
    'get_fiscal_year_dates',
    'get_current_fiscal_year',
    'BsCalendarError',
    'UnsupportedYear',
    'InvalidMonth',
    'InvalidBsDate',
    'InvalidAdDate',
    'DateBeforeSupportedRange',
    'BsYearOverflow',
    'UnsupportedLanguage',
]
