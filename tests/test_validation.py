"""Tests for index and date validators."""

from datetime import date

import pytest

from arc.core.errors import InvalidArgumentError, InvalidDateFormatError
from arc.core.validation import validate_date, validate_index


class TestValidateIndex:
    @pytest.mark.parametrize("raw", ["1", "2", "3"])
    def test_in_range(self, raw):
        assert validate_index(raw, 3) == int(raw)

    def test_leading_plus(self):
        assert validate_index("+2", 3) == 2

    @pytest.mark.parametrize("raw", ["0", "-1", "4", "100"])
    def test_out_of_range(self, raw):
        with pytest.raises(InvalidArgumentError):
            validate_index(raw, 3)

    @pytest.mark.parametrize("raw", ["", "one", "1.0", " 1", "1_0", "٣"])
    def test_not_an_integer(self, raw):
        with pytest.raises(InvalidArgumentError):
            validate_index(raw, 20)

    def test_empty_collection(self):
        with pytest.raises(InvalidArgumentError):
            validate_index("1", 0)


class TestValidateDate:
    def test_valid(self):
        assert validate_date("31/12/2024") == date(2024, 12, 31)

    def test_leap_day(self):
        assert validate_date("29/02/2024") == date(2024, 2, 29)

    def test_non_leap_year(self):
        with pytest.raises(InvalidDateFormatError):
            validate_date("29/02/2023")

    @pytest.mark.parametrize("raw", ["2024-02-29", "1/2/2024", "01/02/24", "32/01/2024", "01/13/2024", ""])
    def test_rejected(self, raw):
        with pytest.raises(InvalidDateFormatError):
            validate_date(raw)

    def test_message(self):
        with pytest.raises(InvalidDateFormatError) as exc:
            validate_date("tomorrow")
        assert str(exc.value) == "Date format should be dd/mm/yyyy"
