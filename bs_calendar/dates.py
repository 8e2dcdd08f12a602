"""
Value objects for Bikram Sambat and Gregorian dates
"""
from dataclasses import dataclass
from datetime import date, datetime
from typing import Dict, Union

from .calendar_data import NEPALI_MONTHS, AD_MONTHS


@dataclass(frozen=True, order=True)
class NepaliDate:
    """A Bikram Sambat (BS) date. Construction does not validate."""

    year: int
    month: int  # 1-12
    day: int    # 1-32

    def isoformat(self) -> str:
        """Canonical machine-readable form, e.g. 2082-10-06"""
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    def __str__(self):
        return self.isoformat()

    @property
    def month_name(self) -> str:
        return NEPALI_MONTHS['en'][self.month - 1]

    def to_dict(self) -> Dict[str, Union[int, str]]:
        return {
            'year': self.year,
            'month': self.month,
            'day': self.day,
            'month_name': self.month_name,
        }


@dataclass(frozen=True, order=True)
class EnglishDate:
    """A proleptic Gregorian (AD) date"""

    year: int
    month: int  # 1-12
    day: int    # 1-31

    @classmethod
    def from_date(cls, value: Union[date, datetime]) -> 'EnglishDate':
        return cls(value.year, value.month, value.day)

    def to_date(self) -> date:
        return date(self.year, self.month, self.day)

    def isoformat(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    def __str__(self):
        return self.isoformat()

    @property
    def month_name(self) -> str:
        return AD_MONTHS[self.month - 1]

    def to_dict(self) -> Dict[str, Union[int, str]]:
        return {
            'year': self.year,
            'month': self.month,
            'day': self.day,
            'month_name': self.month_name,
        }
