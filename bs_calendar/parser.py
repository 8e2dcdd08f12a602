import re
from typing import Optional

from .dates import NepaliDate

# ASCII digits only; \d would also accept Devanagari digits
BS_DATE_RE = re.compile(r'([0-9]{4})-([0-9]{1,2})-([0-9]{1,2})')


def parse_bs_date(text: str) -> Optional[NepaliDate]:
    """
    Parse a date string in 'YYYY-MM-DD' (or 'YYYY-M-D') format into a NepaliDate

    Only the shape is checked. Use is_valid_bs_date to check the result
    exists in the calendar. Returns None if the string does not match.
    """
    if not isinstance(text, str):
        return None

    match = BS_DATE_RE.fullmatch(text)
    if not match:
        return None

    year, month, day = (int(group) for group in match.groups())
    return NepaliDate(year, month, day)
