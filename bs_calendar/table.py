"""
Read-only Bikram Sambat calendar table.

A ``CalendarTable`` wraps the year -> month lengths mapping together with the
reference anchor (a BS date and the AD date of the same day). Every
conversion pivots on that anchor, so a table built with an inconsistent pair
silently skews all results.
"""
from datetime import date
from types import MappingProxyType
from typing import Iterable, Mapping, Tuple

from . import calendar_data
from .dates import NepaliDate, EnglishDate
from .exceptions import UnsupportedYear, InvalidMonth


class CalendarTable:

    def __init__(
        self,
        data: Mapping[int, Iterable[int]],
        bs_reference: Tuple[int, int, int] = calendar_data.BS_REFERENCE,
        ad_reference: Tuple[int, int, int] = calendar_data.AD_REFERENCE,
    ):
        if not data:
            raise ValueError("Calendar data must contain at least one year")

        years = sorted(data)
        if years != list(range(years[0], years[-1] + 1)):
            raise ValueError("Calendar data must cover a contiguous range of years")

        months = {}
        for year in years:
            lengths = tuple(data[year])
            if len(lengths) != 12:
                raise ValueError(f"Year {year} must have exactly 12 month lengths, got {len(lengths)}")
            if any(not isinstance(n, int) or n <= 0 for n in lengths):
                raise ValueError(f"Year {year} has a non-positive month length: {lengths}")
            months[year] = lengths

        self._months = MappingProxyType(months)
        self._year_totals = MappingProxyType({y: sum(m) for y, m in months.items()})
        self.min_year = years[0]
        self.max_year = years[-1]

        self.bs_reference = NepaliDate(*bs_reference)
        self.ad_reference = EnglishDate(*ad_reference)
        ref = self.bs_reference
        if not self.contains_year(ref.year) or not 1 <= ref.month <= 12 \
                or not 1 <= ref.day <= self._months[ref.year][ref.month - 1]:
            raise ValueError(f"BS reference date {ref} is not inside the calendar table")
        # Raises ValueError for an impossible Gregorian day
        date(*ad_reference)

    @classmethod
    def default(cls) -> 'CalendarTable':
        """Table built from the bundled 2000-2090 BS data"""
        return cls(calendar_data.BS_CALENDAR_DATA)

    def __repr__(self):
        return f"<CalendarTable {self.min_year}-{self.max_year} ref={self.bs_reference}={self.ad_reference}>"

    def __contains__(self, year):
        return self.contains_year(year)

    def contains_year(self, year: int) -> bool:
        return year in self._months

    @property
    def years(self) -> range:
        return range(self.min_year, self.max_year + 1)

    def month_lengths(self, year: int) -> Tuple[int, ...]:
        if year not in self._months:
            raise UnsupportedYear(year, self.min_year, self.max_year)
        return self._months[year]

    def days_in_month(self, year: int, month: int) -> int:
        lengths = self.month_lengths(year)
        if month < 1 or month > 12:
            raise InvalidMonth(month)
        return lengths[month - 1]

    def total_days_in_year(self, year: int) -> int:
        if year not in self._year_totals:
            raise UnsupportedYear(year, self.min_year, self.max_year)
        return self._year_totals[year]
