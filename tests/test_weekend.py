"""
Tests for day-of-week and weekend patterns.
"""

from datetime import date

import pytest

from networkdays.core.weekend import (
    STANDARD_WEEKEND,
    WEEKEND_PATTERNS,
    DayOfWeek,
    WeekendCode,
    describe_pattern,
    weekend_pattern,
)


class TestDayOfWeek:
    """Tests for DayOfWeek."""

    def test_from_date(self):
        assert DayOfWeek.from_date(date(2023, 1, 1)) == DayOfWeek.SUNDAY
        assert DayOfWeek.from_date(date(2023, 1, 2)) == DayOfWeek.MONDAY
        assert DayOfWeek.from_date(date(2023, 1, 6)) == DayOfWeek.FRIDAY
        assert DayOfWeek.from_date(date(2023, 1, 7)) == DayOfWeek.SATURDAY

    def test_sunday_first_numbering(self):
        assert [d.value for d in DayOfWeek] == [1, 2, 3, 4, 5, 6, 7]
        assert DayOfWeek(1) is DayOfWeek.SUNDAY


class TestWeekendPatterns:
    """Tests for the weekend pattern table."""

    def test_standard_weekend(self):
        assert STANDARD_WEEKEND == {DayOfWeek.SATURDAY, DayOfWeek.SUNDAY}
        assert WEEKEND_PATTERNS[WeekendCode.SATURDAY_SUNDAY] is STANDARD_WEEKEND

    def test_all_codes_present(self):
        assert sorted(c.value for c in WEEKEND_PATTERNS) == [1, 2, 3, 4, 5, 6, 7, 11, 12, 13, 14, 15, 16, 17]

    def test_pattern_sizes(self):
        """Codes 1-7 are two-day weekends, 11-17 single days."""
        for code, pattern in WEEKEND_PATTERNS.items():
            assert isinstance(pattern, frozenset)
            expected_size = 2 if code.value <= 7 else 1
            assert len(pattern) == expected_size

    def test_patterns_are_distinct(self):
        patterns = list(WEEKEND_PATTERNS.values())
        assert len(set(patterns)) == len(patterns)

    def test_two_day_rotation(self):
        assert weekend_pattern(2) == {DayOfWeek.SUNDAY, DayOfWeek.MONDAY}
        assert weekend_pattern(6) == {DayOfWeek.THURSDAY, DayOfWeek.FRIDAY}
        assert weekend_pattern(7) == {DayOfWeek.FRIDAY, DayOfWeek.SATURDAY}

    def test_single_days(self):
        assert weekend_pattern(11) == {DayOfWeek.SUNDAY}
        assert weekend_pattern(12) == {DayOfWeek.MONDAY}
        assert weekend_pattern(17) == {DayOfWeek.SATURDAY}

    @pytest.mark.parametrize("code", [0, 8, 10, 18])
    def test_invalid_code(self, code):
        with pytest.raises(ValueError, match="Invalid weekend code"):
            weekend_pattern(code)

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            WEEKEND_PATTERNS[WeekendCode.SATURDAY_SUNDAY] = frozenset()

    def test_describe_pattern(self):
        assert describe_pattern(STANDARD_WEEKEND) == "Saturday, Sunday"
        assert describe_pattern(weekend_pattern(7)) == "Friday, Saturday"
        assert describe_pattern(weekend_pattern(14)) == "Wednesday"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
