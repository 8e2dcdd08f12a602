import pytest

from bs_calendar import NepaliDate, format_bs_date, is_valid_bs_date, parse_bs_date


class TestParseBsDate:

    def test_padded(self):
        assert parse_bs_date('2082-10-15') == NepaliDate(2082, 10, 15)

    def test_unpadded(self):
        assert parse_bs_date('2082-1-5') == NepaliDate(2082, 1, 5)
        assert parse_bs_date('2082-01-5') == NepaliDate(2082, 1, 5)

    @pytest.mark.parametrize('text', [
        'not-a-date',
        '',
        '2082/10/15',
        '82-10-15',
        '20821-10-15',
        '2082-123-1',
        '2082-10-150',
        ' 2082-10-15',
        '2082-10-15 ',
        '2082-10-15\n',
        '२०८२-१०-१५',
        'Magh 15, 2082',
    ])
    def test_other_shapes(self, text):
        assert parse_bs_date(text) is None

    def test_non_string(self):
        assert parse_bs_date(None) is None
        assert parse_bs_date(20821015) is None

    def test_shape_only(self):
        parsed = parse_bs_date('2082-13-40')
        assert parsed == NepaliDate(2082, 13, 40)
        assert not is_valid_bs_date(parsed.year, parsed.month, parsed.day)

    def test_canonical_output_parses_back(self):
        for d in (NepaliDate(2000, 1, 1), NepaliDate(2082, 10, 6), NepaliDate(2090, 12, 30)):
            assert parse_bs_date(d.isoformat()) == d
            assert parse_bs_date(format_bs_date(d, 'YYYY-MM-DD', 'en')) == d
