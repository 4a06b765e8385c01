"""Tests for the ISO-week calendar helpers."""

import datetime

import pytest

from app.liftlog.calendar import (
    days_inclusive,
    iter_days,
    iter_week_starts,
    range_for_preset,
    same_week,
    target_date,
    week_end,
    week_start,
)

MONDAY = datetime.date(2025, 12, 8)
THURSDAY = datetime.date(2025, 12, 11)
SUNDAY = datetime.date(2025, 12, 14)


# ======================================================================
# Week boundaries
# ======================================================================


class TestWeekBoundaries:
    def test_monday_is_its_own_week_start(self):
        assert week_start(MONDAY) == MONDAY

    def test_midweek_maps_back_to_monday(self):
        assert week_start(THURSDAY) == MONDAY

    def test_sunday_belongs_to_the_preceding_monday(self):
        """ISO weeks end on Sunday."""
        assert week_start(SUNDAY) == MONDAY

    def test_week_end_is_sunday(self):
        assert week_end(THURSDAY) == SUNDAY

    def test_week_crossing_new_year(self):
        assert week_start(datetime.date(2025, 1, 1)) == datetime.date(2024, 12, 30)

    def test_same_week(self):
        assert same_week(MONDAY, SUNDAY)
        assert not same_week(SUNDAY, SUNDAY + datetime.timedelta(days=1))


# ======================================================================
# Target date
# ======================================================================


class TestTargetDate:
    @pytest.mark.parametrize("day_number", range(1, 8))
    def test_offset_from_week_start(self, day_number):
        result = target_date(day_number, THURSDAY)
        assert result == MONDAY + datetime.timedelta(days=day_number - 1)
        assert result.isoweekday() == day_number

    @pytest.mark.parametrize("anchor_offset", range(0, 7))
    def test_any_anchor_in_week_gives_same_date(self, anchor_offset):
        anchor = MONDAY + datetime.timedelta(days=anchor_offset)
        assert target_date(4, anchor) == THURSDAY

    def test_weekday_is_stable_across_weeks(self):
        for weeks in range(-10, 10):
            anchor = THURSDAY + datetime.timedelta(weeks=weeks)
            assert target_date(3, anchor).isoweekday() == 3

    @pytest.mark.parametrize("day_number", [0, 8, -1])
    def test_rejects_out_of_range_day_number(self, day_number):
        with pytest.raises(ValueError, match="day_number"):
            target_date(day_number, MONDAY)


# ======================================================================
# Ranges
# ======================================================================


class TestRanges:
    def test_days_inclusive(self):
        assert days_inclusive(MONDAY, MONDAY) == 1
        assert days_inclusive(MONDAY, SUNDAY) == 7

    def test_days_inclusive_inverted_range_is_zero(self):
        assert days_inclusive(SUNDAY, MONDAY) == 0

    def test_iter_days(self):
        days = list(iter_days(MONDAY, THURSDAY))
        assert days == [MONDAY + datetime.timedelta(days=i) for i in range(4)]

    def test_iter_week_starts_covers_partial_weeks(self):
        starts = list(iter_week_starts(THURSDAY, SUNDAY + datetime.timedelta(days=1)))
        assert starts == [MONDAY, MONDAY + datetime.timedelta(days=7)]

    def test_iter_week_starts_empty_for_inverted_range(self):
        assert list(iter_week_starts(SUNDAY, MONDAY)) == []

    @pytest.mark.parametrize("preset, days", [("7d", 7), ("14d", 14), ("30d", 30), ("90d", 90)])
    def test_preset_is_inclusive_of_today(self, preset, days):
        start, end = range_for_preset(preset, THURSDAY)
        assert end == THURSDAY
        assert days_inclusive(start, end) == days

    def test_unknown_preset(self):
        with pytest.raises(KeyError, match="Unknown range preset"):
            range_for_preset("1y", THURSDAY)
