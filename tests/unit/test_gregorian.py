"""
Tests for Gregorian day arithmetic

Checks:
1. Day numbers relative to the Unix epoch
2. Leap year rules
3. Field overflow onto larger units
4. Years outside the datetime range
"""

import pytest

from tardis.core.math.gregorian import (
    MS_PER_DAY,
    compose,
    date_from_days,
    days_from_date,
    days_in_month,
    decompose,
    year_is_leap,
)


class TestDayNumbers:
    """Tests for days_from_date / date_from_days"""

    def test_epoch_is_day_zero(self) -> None:
        assert days_from_date(1970, 1, 1) == 0
        assert date_from_days(0) == (1970, 1, 1)

    def test_day_before_epoch(self) -> None:
        assert days_from_date(1969, 12, 31) == -1
        assert date_from_days(-1) == (1969, 12, 31)

    def test_known_dates(self) -> None:
        assert days_from_date(2000, 1, 1) == 10957
        assert days_from_date(2000, 3, 1) == 10957 + 31 + 29
        assert days_from_date(2024, 1, 1) == 19723

    def test_day_overflow_is_linear(self) -> None:
        """Day 32 of March is April 1st"""
        assert days_from_date(2024, 3, 32) == days_from_date(2024, 4, 1)
        assert days_from_date(2024, 3, 0) == days_from_date(2024, 2, 29)

    def test_inverse_over_several_cycles(self) -> None:
        for days in range(-900_000, 900_000, 9_973):
            assert days_from_date(*date_from_days(days)) == days


class TestLeapYears:
    """Tests for year_is_leap / days_in_month"""

    @pytest.mark.parametrize(
        "year, expected",
        [(2024, True), (2023, False), (2000, True), (1900, False), (2100, False), (0, True)],
    )
    def test_year_is_leap(self, year: int, expected: bool) -> None:
        assert year_is_leap(year) is expected

    def test_february_length(self) -> None:
        assert days_in_month(2024, 2) == 29
        assert days_in_month(2023, 2) == 28

    def test_month_lengths(self) -> None:
        assert days_in_month(2023, 1) == 31
        assert days_in_month(2023, 4) == 30
        assert days_in_month(2023, 12) == 31


class TestCompose:
    """Tests for compose / decompose"""

    def test_compose_known_instant(self) -> None:
        # 2024-03-15T10:00:00Z
        assert compose(2024, 3, 15, 10, 0, 0, 0) == 1_710_496_800_000

    def test_decompose_epoch(self) -> None:
        assert decompose(0) == (1970, 1, 1, 0, 0, 0, 0)

    def test_decompose_negative_millisecond(self) -> None:
        assert decompose(-1) == (1969, 12, 31, 23, 59, 59, 999)

    def test_month_overflow_rolls_years(self) -> None:
        assert compose(2024, 13, 1, 0, 0, 0, 0) == compose(2025, 1, 1, 0, 0, 0, 0)
        assert compose(2024, 0, 1, 0, 0, 0, 0) == compose(2023, 12, 1, 0, 0, 0, 0)
        assert compose(2024, -11, 1, 0, 0, 0, 0) == compose(2023, 1, 1, 0, 0, 0, 0)

    def test_time_overflow_rolls_days(self) -> None:
        assert compose(2024, 1, 1, -1, 0, 0, 0) == compose(2023, 12, 31, 23, 0, 0, 0)
        assert compose(2024, 1, 1, 24, 0, 0, -1) == compose(2024, 1, 1, 23, 59, 59, 999)
        assert compose(2024, 1, 1, 0, 90, 0, 0) == compose(2024, 1, 1, 1, 30, 0, 0)

    def test_one_day_is_ms_per_day(self) -> None:
        assert compose(2024, 2, 29, 0, 0, 0, 0) - compose(2024, 2, 28, 0, 0, 0, 0) == MS_PER_DAY

    @pytest.mark.parametrize(
        "fields",
        [
            (2024, 2, 29, 23, 59, 59, 999),
            (12000, 6, 1, 12, 0, 0, 0),
            (-44, 3, 15, 9, 30, 0, 0),
        ],
    )
    def test_decompose_restores_fields(self, fields) -> None:
        assert decompose(compose(*fields)) == fields
