"""Tests for chart time bucketing and period presets."""

from __future__ import annotations

from datetime import date, datetime, timedelta

from budget_tracker import derivations as dv
from budget_tracker.models import Expense, Income


def _expense(day, amount=10.0):
    return Expense(date=day, category='food', amount=amount, title='Snack')


def test_granularity_follows_span_length() -> None:
    start = date(2024, 1, 1)
    assert dv.bucket_granularity(start, start + timedelta(days=1)) == dv.HOUR
    assert dv.bucket_granularity(start, start + timedelta(days=7)) == dv.DAY
    assert dv.bucket_granularity(start, start + timedelta(days=20)) == dv.WEEK
    assert dv.bucket_granularity(start, start + timedelta(days=200)) == dv.MONTH
    assert dv.bucket_granularity(start, start + timedelta(days=400)) == dv.YEAR


def test_four_hundred_day_span_is_yearly_and_bounded() -> None:
    start = date(2023, 1, 1)
    buckets = dv.bucket_transactions([], [], start, start + timedelta(days=400))

    assert len(buckets) <= dv.MAX_CHART_BUCKETS
    assert [b.label for b in buckets] == ['2023', '2024']


def test_long_spans_are_thinned_to_the_limit() -> None:
    buckets = dv.bucket_transactions([], [], date(2000, 1, 1), date(2015, 6, 1))

    # 16 yearly buckets, every second one kept
    assert [b.label for b in buckets] == ['2000', '2002', '2004', '2006', '2008', '2010', '2012', '2014']


def test_downsample() -> None:
    assert dv.downsample(range(5)) == [0, 1, 2, 3, 4]
    assert dv.downsample(range(30)) == [0, 3, 6, 9, 12, 15, 18, 21, 24, 27]
    assert dv.downsample(range(13)) == [0, 2, 4, 6, 8, 10, 12]
    assert dv.downsample(range(100), limit=4) == [0, 25, 50, 75]


def test_daily_buckets_sum_amounts_with_inclusive_end() -> None:
    expenses = [_expense('2024-06-02', 5), _expense('2024-06-02', 7), _expense('2024-06-08', 3)]
    incomes = [Income(date='2024-06-04', amount=100)]

    buckets = dv.bucket_transactions(expenses, incomes, date(2024, 6, 2), date(2024, 6, 8))

    assert len(buckets) == 7
    assert buckets[0].label == 'Sun 02'
    assert buckets[0].expenses == 12
    assert buckets[2].incomes == 100
    assert buckets[2].net == 100
    assert buckets[-1].expenses == 3


def test_weekly_buckets_start_on_sunday() -> None:
    buckets = dv.bucket_transactions([], [], date(2024, 6, 1), date(2024, 6, 30))

    assert buckets[0].start == datetime(2024, 5, 26)
    assert all(b.start.weekday() == 6 for b in buckets)
    assert len(buckets) == 6


def test_hourly_buckets_cover_the_day() -> None:
    buckets = dv.bucket_transactions([_expense('2024-06-15', 9)], [], *dv.period_range('today', datetime(2024, 6, 15, 13)))

    assert len(buckets) == 12
    assert buckets[0].label == '00:00'
    assert buckets[-1].label == '22:00'
    assert buckets[0].expenses == 9
    assert sum(b.expenses for b in buckets) == 9


def test_each_transaction_lands_in_one_bucket() -> None:
    expenses = [_expense(date(2024, 1, 1) + timedelta(days=n), 1) for n in range(0, 360, 7)]
    buckets = dv.bucket_transactions(expenses, [], date(2024, 1, 1), date(2024, 12, 30))

    assert len(buckets) == 12
    assert sum(b.expenses for b in buckets) == len(expenses)


def test_reversed_bounds_are_swapped() -> None:
    forward = dv.bucket_transactions([], [], date(2024, 6, 2), date(2024, 6, 8))
    backward = dv.bucket_transactions([], [], date(2024, 6, 8), date(2024, 6, 2))
    assert [b.label for b in forward] == [b.label for b in backward]


def test_buckets_frame_columns() -> None:
    buckets = dv.bucket_transactions([_expense('2024-06-03', 4)], [], date(2024, 6, 2), date(2024, 6, 8))
    frame = dv.buckets_frame(buckets)

    assert list(frame.columns) == ['Label', 'Start', 'End', 'Expenses', 'Income', 'Net']
    assert frame['Net'].sum() == -4


def test_period_range_month_and_last_month() -> None:
    now = datetime(2024, 6, 15, 10, 30)

    start, end = dv.period_range('month', now)
    assert start == datetime(2024, 6, 1)
    assert end == datetime(2024, 7, 1) - timedelta(microseconds=1)

    start, end = dv.period_range('lastMonth', now)
    assert start == datetime(2024, 5, 1)
    assert end == datetime(2024, 6, 1) - timedelta(microseconds=1)


def test_period_range_week_starts_sunday() -> None:
    start, end = dv.period_range('week', datetime(2024, 6, 15, 10, 30))
    assert start == datetime(2024, 6, 9)
    assert dv.bucket_granularity(start, end) == dv.DAY


def test_period_range_year_is_monthly_in_common_years() -> None:
    start, end = dv.period_range('year', datetime(2023, 3, 1))
    assert dv.bucket_granularity(start, end) == dv.MONTH
    assert len(dv.bucket_transactions([], [], start, end)) == 12


def test_period_range_multi_year() -> None:
    now = datetime(2024, 6, 15)
    start, end = dv.period_range('5years', now)

    assert start == datetime(2019, 6, 15)
    assert end == now
    assert [b.label for b in dv.bucket_transactions([], [], start, end)] == [
        '2019', '2020', '2021', '2022', '2023', '2024'
    ]


def test_unknown_period_falls_back_to_month() -> None:
    now = datetime(2024, 6, 15)
    assert dv.period_range('fortnight', now) == dv.period_range('month', now)


def test_buckets_at_the_end_of_the_calendar() -> None:
    buckets = dv.bucket_transactions([_expense('9999-12-31', 8)], [], date(9990, 1, 1), date(9999, 12, 31))

    assert [b.label for b in buckets] == [str(year) for year in range(9990, 10000)]
    assert buckets[-1].end == datetime.max
    assert buckets[-1].expenses == 8


def test_hourly_buckets_on_the_last_day() -> None:
    buckets = dv.bucket_transactions([], [], date(9999, 12, 31), datetime(9999, 12, 31, 12))

    assert len(buckets) == 12
    assert buckets[-1].end == datetime.max
