"""Read-only views over the transaction collections.

Everything here is a pure function of its arguments: filtering,
bucketing transactions into time intervals for charts, and the
aggregate sums shown on the dashboard (totals, per-category spend,
budget limits and monthly trends).  Nothing mutates the collections
passed in.

Percentages are computed with :func:`safe_percentage` so a zero
denominator yields ``0.0`` rather than NaN or infinity.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import Dict, Iterable, List, NamedTuple, Optional, Sequence, Tuple

import pandas as pd

from .config import BUDGET_PERCENTAGES, EXPENSE_CATEGORIES, MAX_CHART_BUCKETS
from .models import EXPENSE, INCOME, Expense, Income, Transaction
from .store import transactions_frame

TYPE_ALL = "all"
TRANSACTION_TYPES = (TYPE_ALL, EXPENSE, INCOME)

HOUR = "hour"
DAY = "day"
WEEK = "week"
MONTH = "month"
YEAR = "year"

PERIODS = ("today", "week", "month", "lastMonth", "year", "6months", "5years", "10years")

MONTHLY_TREND_COLUMNS = ["Year", "Month", "Label", "Expenses", "Income", "Net"]

_ONE_MICROSECOND = timedelta(microseconds=1)


# ---------------------------------------------------------------------------
# Filtering
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TransactionFilters:
    """Predicates combined with logical AND.

    ``None`` bounds impose no constraint; date bounds are inclusive.
    ``category`` only constrains expenses since incomes have none.
    """

    date_from: Optional[date] = None
    date_to: Optional[date] = None
    category: Optional[str] = None
    min_amount: Optional[float] = None
    max_amount: Optional[float] = None
    type: str = TYPE_ALL

    def __post_init__(self) -> None:
        if self.type not in TRANSACTION_TYPES:
            raise ValueError(f"Unknown transaction type filter: {self.type!r}")
        for name in ("date_from", "date_to"):
            value = getattr(self, name)
            if isinstance(value, datetime):
                object.__setattr__(self, name, value.date())

    def matches(self, record: Transaction) -> bool:
        if self.type != TYPE_ALL and record.kind != self.type:
            return False
        if self.date_from is not None and record.date < self.date_from:
            return False
        if self.date_to is not None and record.date > self.date_to:
            return False
        if self.category and isinstance(record, Expense) and record.category != self.category:
            return False
        if self.min_amount is not None and record.amount < self.min_amount:
            return False
        if self.max_amount is not None and record.amount > self.max_amount:
            return False
        return True

    @property
    def is_active(self) -> bool:
        return self != TransactionFilters()


class FilteredTransactions(NamedTuple):
    expenses: List[Expense]
    incomes: List[Income]


def apply_filters(
    expenses: Iterable[Expense],
    incomes: Iterable[Income],
    filters: Optional[TransactionFilters] = None,
) -> FilteredTransactions:
    """Return the subset of each collection matching every predicate."""
    filters = filters or TransactionFilters()
    return FilteredTransactions(
        expenses=[e for e in expenses if filters.matches(e)],
        incomes=[i for i in incomes if filters.matches(i)],
    )


def combined_transactions(
    expenses: Iterable[Expense], incomes: Iterable[Income]
) -> List[Transaction]:
    """Merge both collections, newest first.

    The sort is stable, so records sharing a date keep expense-before-income
    insertion order.
    """
    merged: List[Transaction] = [*expenses, *incomes]
    return sorted(merged, key=lambda record: record.date, reverse=True)


def recent_transactions(
    expenses: Iterable[Expense], incomes: Iterable[Income], limit: int = 5
) -> List[Transaction]:
    return combined_transactions(expenses, incomes)[: max(0, limit)]


# ---------------------------------------------------------------------------
# Aggregation
# ---------------------------------------------------------------------------


def safe_percentage(part: float, whole: float) -> float:
    """``part / whole * 100`` or ``0.0`` when ``whole`` is zero."""
    if not whole:
        return 0.0
    return part / whole * 100


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


@dataclass(frozen=True)
class TransactionSummary:
    total_expense: float
    total_income: float
    expense_count: int
    income_count: int

    @property
    def net_balance(self) -> float:
        return self.total_income - self.total_expense

    @property
    def is_positive(self) -> bool:
        return self.net_balance >= 0

    @property
    def transaction_count(self) -> int:
        return self.expense_count + self.income_count


def summarize(expenses: Sequence[Expense], incomes: Sequence[Income]) -> TransactionSummary:
    return TransactionSummary(
        total_expense=sum(e.amount for e in expenses),
        total_income=sum(i.amount for i in incomes),
        expense_count=len(expenses),
        income_count=len(incomes),
    )


def category_totals(expenses: Iterable[Expense]) -> Dict[str, float]:
    """Spend per category, every category present and in display order."""
    totals = {category: 0.0 for category in EXPENSE_CATEGORIES}
    for expense in expenses:
        totals[expense.category] += expense.amount
    return totals


def budget_limits(
    total_income: float, percentages: Optional[Dict[str, float]] = None
) -> Dict[str, int]:
    """Each category's limit: its share of ``total_income``, rounded half up."""
    percentages = percentages or BUDGET_PERCENTAGES
    return {
        category: round_half_up(total_income * percentages.get(category, 0.0))
        for category in EXPENSE_CATEGORIES
    }


@dataclass(frozen=True)
class BudgetStatus:
    """Spend measured against a limit.

    ``remaining`` is not clamped; a negative value means over budget.
    """

    limit: float
    spent: float
    category: Optional[str] = None

    @property
    def remaining(self) -> float:
        return self.limit - self.spent

    @property
    def percent_used(self) -> float:
        return safe_percentage(self.spent, self.limit)

    @property
    def over_budget(self) -> bool:
        return self.spent > self.limit

    @property
    def at_limit(self) -> bool:
        return self.spent == self.limit and self.limit > 0

    @property
    def state(self) -> str:
        if self.over_budget:
            return "over"
        if self.at_limit:
            return "at_limit"
        return "under"


def budget_status(
    expenses: Sequence[Expense],
    incomes: Sequence[Income],
    percentages: Optional[Dict[str, float]] = None,
) -> List[BudgetStatus]:
    """Budget-vs-actual for every category."""
    spent = category_totals(expenses)
    limits = budget_limits(sum(i.amount for i in incomes), percentages)
    return [
        BudgetStatus(limit=limits[category], spent=spent[category], category=category)
        for category in EXPENSE_CATEGORIES
    ]


def overall_budget(total_expense: float, total_income: float) -> BudgetStatus:
    """Expenses measured against income as a single budget."""
    return BudgetStatus(limit=total_income, spent=total_expense)


def in_month(record: Transaction, year: int, month: int) -> bool:
    return record.date.year == year and record.date.month == month


def month_summary(
    expenses: Iterable[Expense], incomes: Iterable[Income], today: Optional[date] = None
) -> TransactionSummary:
    """Summary restricted to the calendar month containing ``today``."""
    today = today or date.today()
    month_expenses = [e for e in expenses if in_month(e, today.year, today.month)]
    month_incomes = [i for i in incomes if in_month(i, today.year, today.month)]
    return summarize(month_expenses, month_incomes)


class CategoryShare(NamedTuple):
    category: str
    spent: float
    percentage: float


def current_month_breakdown(
    expenses: Iterable[Expense], today: Optional[date] = None
) -> List[CategoryShare]:
    """Each category's share of this month's total spend."""
    today = today or date.today()
    totals = category_totals(e for e in expenses if in_month(e, today.year, today.month))
    month_total = sum(totals.values())
    return [
        CategoryShare(category, spent, safe_percentage(spent, month_total))
        for category, spent in totals.items()
    ]


def monthly_trend(expenses: Iterable[Expense], incomes: Iterable[Income]) -> pd.DataFrame:
    """One row per calendar month that has any transaction, oldest first.

    Months without transactions are not zero-filled.
    """
    frame = transactions_frame(list(expenses), list(incomes))
    if frame.empty:
        return pd.DataFrame(columns=MONTHLY_TREND_COLUMNS)

    frame = frame.assign(
        Year=frame["date"].dt.year,
        Month=frame["date"].dt.month,
        Expenses=frame["amount"].where(frame["kind"] == EXPENSE, 0.0),
        Income=frame["amount"].where(frame["kind"] == INCOME, 0.0),
    )
    monthly = (
        frame.groupby(["Year", "Month"], as_index=False)[["Expenses", "Income"]]
        .sum()
        .sort_values(["Year", "Month"])
        .reset_index(drop=True)
    )
    monthly["Label"] = [
        date(int(year), int(month), 1).strftime("%b %Y")
        for year, month in zip(monthly["Year"], monthly["Month"])
    ]
    monthly["Net"] = monthly["Income"] - monthly["Expenses"]
    return monthly[MONTHLY_TREND_COLUMNS]


# ---------------------------------------------------------------------------
# Time bucketing
# ---------------------------------------------------------------------------


class Bucket(NamedTuple):
    start: datetime
    end: datetime
    label: str
    expenses: float = 0.0
    incomes: float = 0.0

    @property
    def net(self) -> float:
        return self.incomes - self.expenses


def _as_datetime(value) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime.combine(value, time.min)


def _start_of_day(moment: datetime) -> datetime:
    return moment.replace(hour=0, minute=0, second=0, microsecond=0)


def _start_of_week(moment: datetime) -> datetime:
    # Weeks start on Sunday
    return _start_of_day(moment) - timedelta(days=(moment.weekday() + 1) % 7)


def _start_of_month(moment: datetime) -> datetime:
    return _start_of_day(moment).replace(day=1)


def _add_months(moment: datetime, months: int) -> datetime:
    return (pd.Timestamp(moment) + pd.DateOffset(months=months)).to_pydatetime()


def span_days(start, end) -> int:
    """Whole days covered by ``start``..``end``, rounded up."""
    seconds = (_as_datetime(end) - _as_datetime(start)).total_seconds()
    return math.ceil(seconds / 86400)


def bucket_granularity(start, end) -> str:
    days = span_days(start, end)
    if days <= 1:
        return HOUR
    if days <= 7:
        return DAY
    if days <= 31:
        return WEEK
    if days <= 365:
        return MONTH
    return YEAR


def _step_or_none(step, moment: datetime) -> Optional[datetime]:
    try:
        return step(moment)
    except (ValueError, OverflowError):
        # Past datetime.max
        return None


def _intervals(start: datetime, end: datetime, granularity: str) -> List[Tuple[datetime, datetime, str]]:
    count: Optional[int] = None
    if granularity == HOUR:
        # Twelve two-hour buckets across the start day
        cursor, step, fmt, count = _start_of_day(start), lambda m: m + timedelta(hours=2), "%H:%M", 12
    elif granularity == DAY:
        cursor, step, fmt = _start_of_day(start), lambda m: m + timedelta(days=1), "%a %d"
    elif granularity == WEEK:
        cursor, step, fmt = _start_of_week(start), lambda m: m + timedelta(days=7), "%b %d"
    elif granularity == MONTH:
        cursor, step, fmt = _start_of_month(start), lambda m: _add_months(m, 1), "%b"
    else:
        cursor, step, fmt = _start_of_day(start).replace(month=1, day=1), lambda m: m.replace(year=m.year + 1), "%Y"

    intervals: List[Tuple[datetime, datetime, str]] = []
    while cursor is not None and (len(intervals) < count if count else cursor <= end):
        following = _step_or_none(step, cursor)
        hi = datetime.max if following is None else following - _ONE_MICROSECOND
        intervals.append((cursor, hi, cursor.strftime(fmt)))
        cursor = following
    return intervals


def downsample(items: Sequence, limit: int = MAX_CHART_BUCKETS) -> list:
    """Keep every ``ceil(n / limit)``-th item, then truncate to ``limit``.

    This is a lossy thinning for display, not a resample: amounts in the
    skipped intervals are not folded into the kept ones.
    """
    items = list(items)
    if len(items) <= limit:
        return items
    stride = math.ceil(len(items) / limit)
    return items[::stride][:limit]


def bucket_transactions(
    expenses: Iterable[Expense],
    incomes: Iterable[Income],
    start,
    end,
    limit: int = MAX_CHART_BUCKETS,
) -> List[Bucket]:
    """Sum expenses and incomes into at most ``limit`` time buckets.

    Granularity follows the span length: hours for a day or less, days
    up to a week, weeks up to 31 days, months up to a year and years
    beyond that.  Bucket boundaries are inclusive.
    """
    start_dt, end_dt = _as_datetime(start), _as_datetime(end)
    if end_dt < start_dt:
        start_dt, end_dt = end_dt, start_dt
    granularity = bucket_granularity(start_dt, end_dt)
    intervals = downsample(_intervals(start_dt, end_dt, granularity), limit)

    expense_points = [(_as_datetime(e.date), e.amount) for e in expenses]
    income_points = [(_as_datetime(i.date), i.amount) for i in incomes]

    buckets = []
    for lo, hi, label in intervals:
        buckets.append(
            Bucket(
                start=lo,
                end=hi,
                label=label,
                expenses=sum(amount for moment, amount in expense_points if lo <= moment <= hi),
                incomes=sum(amount for moment, amount in income_points if lo <= moment <= hi),
            )
        )
    return buckets


def buckets_frame(buckets: Sequence[Bucket]) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {"Label": b.label, "Start": b.start, "End": b.end, "Expenses": b.expenses, "Income": b.incomes, "Net": b.net}
            for b in buckets
        ],
        columns=["Label", "Start", "End", "Expenses", "Income", "Net"],
    )


def period_range(period: str, now: Optional[datetime] = None) -> Tuple[datetime, datetime]:
    """Start and end of a named chart period relative to ``now``.

    Unknown names fall back to the current month.
    """
    now = now or datetime.now()
    today = _start_of_day(now)
    end_of_today = today + timedelta(days=1) - _ONE_MICROSECOND

    if period == "today":
        return today, end_of_today
    if period == "week":
        start = _start_of_week(now)
        return start, start + timedelta(days=7) - _ONE_MICROSECOND
    if period == "lastMonth":
        start = _add_months(_start_of_month(now), -1)
        return start, _start_of_month(now) - _ONE_MICROSECOND
    if period == "year":
        start = today.replace(month=1, day=1)
        return start, start.replace(year=start.year + 1) - _ONE_MICROSECOND
    if period == "6months":
        return _add_months(now, -6), now
    if period == "5years":
        return _add_months(now, -60), now
    if period == "10years":
        return _add_months(now, -120), now
    start = _start_of_month(now)
    return start, _add_months(start, 1) - _ONE_MICROSECOND
