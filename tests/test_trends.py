"""
Tests for app/services/trends.py.

What we test
------------
analyze_trend():
  - ±5% dead zone: 4 and -5 are stable, 6 is improving, -6 is declining.
  - Half percents round up: -5.5 is -5 (stable), +5.5 is 6 (improving).
  - No prior record: current 0 -> stable/0, current > 0 -> improving/100.
  - A prior record with 0 for the metric behaves like no prior record.
  - Only the same member's records count, and the current record is excluded.
  - The latest (year, month) wins, across year boundaries and input order.

previous_record():
  - Ties on period resolve to the first record in input order.
"""

import pytest

from app.services.trends import analyze_trend, previous_record


class TestDeadZone:
    @pytest.mark.parametrize("current, change, direction", [
        (104, 4, "stable"),
        (106, 6, "improving"),
        (94, -6, "declining"),
        (95, -5, "stable"),
        (105, 5, "stable"),
        (100, 0, "stable"),
    ])
    def test_change_against_previous_month(self, make_record, current, change, direction):
        prior = make_record(month=8, outreaches=100)
        now = make_record(month=9, outreaches=current)

        trend = analyze_trend("outreaches", now, [prior])

        assert trend.change_percentage == change
        assert trend.direction == direction
        assert trend.previous == 100
        assert trend.current == current

    @pytest.mark.parametrize("previous, current, change, direction", [
        (200, 189, -5, "stable"),
        (200, 211, 6, "improving"),
        (200, 187, -6, "declining"),
    ])
    def test_half_percent_rounds_up(self, make_record, previous, current, change, direction):
        prior = make_record(month=8, outreaches=previous)
        now = make_record(month=9, outreaches=current)

        trend = analyze_trend("outreaches", now, [prior])

        assert (trend.change_percentage, trend.direction) == (change, direction)


class TestNoHistory:
    def test_zero_current_is_stable(self, make_record):
        trend = analyze_trend("outreaches", make_record(outreaches=0), [])
        assert (trend.direction, trend.change_percentage) == ("stable", 0)

    def test_positive_current_is_improving(self, make_record):
        trend = analyze_trend("outreaches", make_record(outreaches=50), [])
        assert (trend.direction, trend.change_percentage) == ("improving", 100)

    def test_zero_previous_counts_as_no_history(self, make_record):
        prior = make_record(month=8, outreaches=0)
        trend = analyze_trend("outreaches", make_record(month=9, outreaches=7), [prior])
        assert (trend.direction, trend.change_percentage) == ("improving", 100)

    def test_missing_metric_reads_as_zero(self, make_record):
        prior = make_record(month=8, live_links=4)
        trend = analyze_trend("outreaches", make_record(month=9), [prior])
        assert (trend.direction, trend.change_percentage) == ("stable", 0)


class TestHistorySelection:
    def test_other_members_are_ignored(self, make_record):
        other = make_record(member_id=2, month=8, outreaches=1000)
        trend = analyze_trend("outreaches", make_record(member_id=1, outreaches=50), [other])
        assert trend.previous == 0

    def test_current_record_is_excluded(self, make_record):
        now = make_record(month=9, outreaches=100)
        prior = make_record(month=8, outreaches=50)
        trend = analyze_trend("outreaches", now, [now, prior])
        assert trend.previous == 50
        assert trend.change_percentage == 100

    def test_latest_period_wins_regardless_of_order(self, make_record):
        older = make_record(month=11, year=2024, outreaches=10)
        latest = make_record(month=2, year=2025, outreaches=200)
        middle = make_record(month=12, year=2024, outreaches=20)
        now = make_record(month=3, year=2025, outreaches=100)

        trend = analyze_trend("outreaches", now, [older, latest, middle])

        assert trend.previous == 200
        assert trend.direction == "declining"
        assert trend.change_percentage == -50

    def test_ties_resolve_to_first_in_input_order(self, make_record):
        first = make_record(month=8, outreaches=10)
        second = make_record(month=8, outreaches=20)
        now = make_record(month=9)
        assert previous_record(now, [first, second]) is first
