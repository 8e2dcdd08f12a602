import pytest

from bs_calendar import BS_MIN_YEAR, BS_MAX_YEAR
from bs_calendar.calendar_data import BS_CALENDAR_DATA
from bs_calendar.exceptions import UnsupportedYear, InvalidMonth
from bs_calendar.table import CalendarTable


@pytest.fixture
def table():
    return CalendarTable.default()


class TestCalendarTable:

    def test_supported_range(self, table):
        assert (table.min_year, table.max_year) == (2000, 2090)
        assert (BS_MIN_YEAR, BS_MAX_YEAR) == (2000, 2090)
        assert list(table.years) == list(range(2000, 2091))

    def test_every_year_has_twelve_months_of_29_to_32_days(self, table):
        for year in table.years:
            lengths = table.month_lengths(year)
            assert len(lengths) == 12
            assert all(29 <= n <= 32 for n in lengths), year

    def test_days_in_month(self, table):
        assert table.days_in_month(2081, 2) == 32
        assert table.days_in_month(2081, 3) == 31
        assert table.days_in_month(2082, 1) == 31
        assert table.days_in_month(2082, 10) == 29

    def test_total_days_in_year(self, table):
        assert table.total_days_in_year(2000) == 365
        assert table.total_days_in_year(2081) == 366
        for year in table.years:
            assert 365 <= table.total_days_in_year(year) <= 366

    @pytest.mark.parametrize('year', [1999, 2091, -1])
    def test_unsupported_year(self, table, year):
        with pytest.raises(UnsupportedYear) as excinfo:
            table.days_in_month(year, 1)
        assert excinfo.value.year == year
        with pytest.raises(UnsupportedYear):
            table.total_days_in_year(year)

    @pytest.mark.parametrize('month', [0, 13, -3])
    def test_invalid_month(self, table, month):
        with pytest.raises(InvalidMonth) as excinfo:
            table.days_in_month(2080, month)
        assert excinfo.value.month == month

    def test_year_is_checked_before_month(self, table):
        with pytest.raises(UnsupportedYear):
            table.days_in_month(1999, 13)

    def test_contains_year(self, table):
        assert 2080 in table
        assert 2091 not in table

    def test_lengths_are_immutable(self, table):
        lengths = table.month_lengths(2080)
        assert isinstance(lengths, tuple)
        with pytest.raises(TypeError):
            table._months[2080] = (30,) * 12

    def test_source_data_is_copied(self):
        data = {2080: list(BS_CALENDAR_DATA[2080])}
        table = CalendarTable(data, bs_reference=(2080, 1, 1), ad_reference=(2023, 4, 14))
        data[2080][0] = 1
        assert table.days_in_month(2080, 1) == 31


class TestCalendarTableValidation:

    def test_empty(self):
        with pytest.raises(ValueError):
            CalendarTable({})

    def test_gap_in_years(self):
        data = {2000: BS_CALENDAR_DATA[2000], 2002: BS_CALENDAR_DATA[2002]}
        with pytest.raises(ValueError, match='contiguous'):
            CalendarTable(data)

    def test_wrong_month_count(self):
        with pytest.raises(ValueError, match='exactly 12'):
            CalendarTable({2000: [30] * 11})

    def test_non_positive_length(self):
        with pytest.raises(ValueError, match='non-positive'):
            CalendarTable({2000: [30] * 11 + [0]})

    def test_reference_outside_table(self):
        with pytest.raises(ValueError, match='reference'):
            CalendarTable({2080: BS_CALENDAR_DATA[2080]})

    def test_reference_day_outside_month(self):
        with pytest.raises(ValueError, match='reference'):
            CalendarTable({2080: BS_CALENDAR_DATA[2080]}, bs_reference=(2080, 1, 32), ad_reference=(2023, 4, 14))

    def test_impossible_ad_reference(self):
        with pytest.raises(ValueError):
            CalendarTable({2080: BS_CALENDAR_DATA[2080]}, bs_reference=(2080, 1, 1), ad_reference=(2023, 2, 30))
