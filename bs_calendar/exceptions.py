"""
Exceptions raised by the conversion and formatting functions.

All of them derive from ``ValueError`` so existing ``except ValueError``
call sites keep working, while callers that care can tell the kinds apart.
"""


class BsCalendarError(ValueError):
    """Base class for every invalid-input error in bs_calendar"""


class UnsupportedYear(BsCalendarError):
    def __init__(self, year, min_year, max_year):
        self.year = year
        self.min_year = min_year
        self.max_year = max_year
        super().__init__(
            f"BS year {year} is not supported. Supported range: {min_year}-{max_year}"
        )


class InvalidMonth(BsCalendarError):
    def __init__(self, month):
        self.month = month
        super().__init__(f"Invalid month: {month}. Must be between 1-12")


class InvalidBsDate(BsCalendarError):
    def __init__(self, year, month, day):
        self.year, self.month, self.day = year, month, day
        super().__init__(f"Invalid BS date: {year}-{month}-{day}")


class InvalidAdDate(BsCalendarError):
    def __init__(self, year, month, day):
        self.year, self.month, self.day = year, month, day
        super().__init__(f"Invalid AD date: {year}-{month}-{day}")


class DateBeforeSupportedRange(BsCalendarError):
    def __init__(self, year, month, day, reference):
        self.year, self.month, self.day = year, month, day
        self.reference = reference
        super().__init__(
            f"Date {year}-{month}-{day} is before the supported range "
            f"(must be on or after {reference})"
        )


class BsYearOverflow(BsCalendarError):
    def __init__(self, max_year):
        self.max_year = max_year
        super().__init__(f"Date exceeds supported BS year range (max: {max_year})")


class UnsupportedLanguage(BsCalendarError):
    def __init__(self, language, choices):
        self.language = language
        super().__init__(
            f"Unsupported language: {language!r}. Choose one of: {', '.join(choices)}"
        )
