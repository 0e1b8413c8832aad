"""Period-bucketed income/expense aggregation for the overview chart.

The reporting period (weekly, monthly, 6month, yearly) and a reference date
define an ordered sequence of buckets. Bucket ranges are inclusive on both
ends, contiguous and disjoint, so every entry dated inside the reporting
range is counted in exactly one bucket and entries outside it are ignored.
"""

import logging
from dataclasses import replace
from datetime import date, timedelta
from decimal import Decimal
from typing import Optional, Sequence

from pocketbook.domain.entities import (
    Bucket,
    ChartStatus,
    MoneyEntry,
    OverviewChart,
    Period,
)
from pocketbook.domain.expense import ExpenseService
from pocketbook.domain.income import IncomeService
from pocketbook.utils.date_parser import (
    add_months,
    end_of_month,
    end_of_week,
    start_of_month,
    start_of_week,
)

logger = logging.getLogger(__name__)

WEEKDAY_NAMES = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
MONTH_NAMES = ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]

HEADROOM = Decimal("1.2")

# Illustrative (income, expenses) values shown when there is nothing real to plot.
PLACEHOLDER_BY_WEEKDAY = [
    (300, 200),
    (150, 100),
    (0, 50),
    (0, 150),
    (600, 200),
    (0, 250),
    (0, 100),
]
PLACEHOLDER_BY_WEEK = [
    (1200, 800),
    (1100, 900),
    (1300, 850),
    (1000, 700),
]
PLACEHOLDER_BY_MONTH = [
    (4500, 3200),
    (4200, 3300),
    (4800, 3400),
    (4300, 3100),
    (4600, 3500),
    (5000, 3600),
    (4800, 3400),
    (5200, 3800),
    (4900, 3500),
    (5100, 3700),
    (5300, 3900),
    (5800, 4200),
]


def _month_bucket(month_start: date) -> Bucket:
    return Bucket(
        range_start=month_start,
        range_end=end_of_month(month_start),
        name=MONTH_NAMES[month_start.month - 1],
    )


def bucket_ranges(period: Period, reference_date: date) -> list[Bucket]:
    """Build the empty buckets of a period, in chronological order.

    - weekly: the seven days of the Monday-start week containing the reference date
    - monthly: every Monday-Sunday week overlapping the reference month
    - 6month: the six calendar months ending with the reference month
    - yearly: the twelve calendar months of the reference year
    """
    period = Period.parse(period)

    if period == Period.WEEKLY:
        monday = start_of_week(reference_date)
        return [
            Bucket(range_start=monday + timedelta(days=i), range_end=monday + timedelta(days=i), name=name)
            for i, name in enumerate(WEEKDAY_NAMES)
        ]

    if period == Period.MONTHLY:
        week_start = start_of_week(start_of_month(reference_date))
        last_week_end = end_of_week(end_of_month(reference_date))
        buckets = []
        while week_start <= last_week_end:
            buckets.append(
                Bucket(
                    range_start=week_start,
                    range_end=week_start + timedelta(days=6),
                    name=f"Week {len(buckets) + 1}",
                )
            )
            week_start += timedelta(days=7)
        return buckets

    if period == Period.SIX_MONTH:
        first_month = add_months(start_of_month(reference_date), -5)
        return [_month_bucket(add_months(first_month, i)) for i in range(6)]

    january = reference_date.replace(month=1, day=1)
    return [_month_bucket(add_months(january, i)) for i in range(12)]


def period_range(period: Period, reference_date: date) -> tuple[date, date]:
    """Nominal reporting range of a period (first bucket start, last bucket end)."""
    buckets = bucket_ranges(period, reference_date)
    return buckets[0].range_start, buckets[-1].range_end


def build_buckets(
    income_entries: Sequence[MoneyEntry],
    expense_entries: Sequence[MoneyEntry],
    period: Period,
    reference_date: date,
) -> list[Bucket]:
    """Sum income and expense amounts into the buckets of a period.

    Each entry goes to the first bucket whose range contains its date;
    entries outside every bucket are dropped. Amounts are taken as-is.

    Args:
        income_entries: Income ledger entries
        expense_entries: Expense ledger entries
        period: Reporting period selector
        reference_date: "Today" for the purpose of the report

    Returns:
        Buckets in chronological order, never empty
    """
    ranges = bucket_ranges(period, reference_date)
    income_totals = [Decimal("0")] * len(ranges)
    expense_totals = [Decimal("0")] * len(ranges)

    def accumulate(entries: Sequence[MoneyEntry], totals: list[Decimal]) -> None:
        for entry in entries:
            for index, bucket in enumerate(ranges):
                if bucket.contains(entry.date):
                    totals[index] += entry.amount
                    break

    accumulate(income_entries, income_totals)
    accumulate(expense_entries, expense_totals)

    return [
        replace(bucket, income_total=income_totals[i], expense_total=expense_totals[i])
        for i, bucket in enumerate(ranges)
    ]


def placeholder_buckets(period: Period, reference_date: date) -> list[Bucket]:
    """Illustrative totals laid on the real bucket ranges of a period."""
    period = Period.parse(period)
    buckets = bucket_ranges(period, reference_date)

    result = []
    for index, bucket in enumerate(buckets):
        if period == Period.WEEKLY:
            income, expenses = PLACEHOLDER_BY_WEEKDAY[index]
        elif period == Period.MONTHLY:
            income, expenses = PLACEHOLDER_BY_WEEK[index % len(PLACEHOLDER_BY_WEEK)]
        else:
            income, expenses = PLACEHOLDER_BY_MONTH[bucket.range_start.month - 1]
        result.append(
            replace(bucket, income_total=Decimal(income), expense_total=Decimal(expenses))
        )
    return result


def chart_scale(buckets: Sequence[Bucket]) -> tuple[Decimal, Decimal]:
    """Y-axis bounds with 20% headroom.

    The upper bound comes from the largest income or expense total, the lower
    bound from the most negative balance (zero when no balance is negative).
    """
    highest = max(
        [b.income_total for b in buckets] + [b.expense_total for b in buckets],
        default=Decimal("0"),
    )
    lowest = min([b.balance for b in buckets] + [Decimal("0")])
    return max(highest, Decimal("0")) * HEADROOM, lowest * HEADROOM


def make_chart(
    period: Period, reference_date: date, buckets: Sequence[Bucket], status: ChartStatus
) -> OverviewChart:
    y_axis_max, y_axis_min = chart_scale(buckets)
    return OverviewChart(
        period=Period.parse(period),
        reference_date=reference_date,
        buckets=tuple(buckets),
        status=status,
        y_axis_max=y_axis_max,
        y_axis_min=y_axis_min,
    )


class LedgerProvider:
    """Supplies the signed-in user's income and expense entries to the chart."""

    def __init__(self, income_service: IncomeService, expense_service: ExpenseService):
        self.income_service = income_service
        self.expense_service = expense_service

    def fetch_income_entries(self) -> list[MoneyEntry]:
        return [MoneyEntry.from_income(i) for i in self.income_service.list_incomes()]

    def fetch_expense_entries(self) -> list[MoneyEntry]:
        return [MoneyEntry.from_expense(e) for e in self.expense_service.list_expenses()]


def build_overview_chart(
    ledger: LedgerProvider, period: Period, reference_date: Optional[date] = None
) -> OverviewChart:
    """Fetch the ledger and build the overview chart for a period.

    Fetch failures are logged and never propagate: the chart then carries the
    placeholder dataset and ``ChartStatus.PLACEHOLDER``, as it does when the
    user has no entries at all.
    """
    period = Period.parse(period)
    if reference_date is None:
        reference_date = date.today()

    try:
        income_entries = ledger.fetch_income_entries()
        expense_entries = ledger.fetch_expense_entries()
    except Exception as exc:
        logger.warning("Could not load ledger for the %s chart: %s", period.value, exc, exc_info=True)
        return make_chart(
            period, reference_date, placeholder_buckets(period, reference_date), ChartStatus.PLACEHOLDER
        )

    if not income_entries and not expense_entries:
        logger.info("No ledger entries; showing placeholder %s chart", period.value)
        return make_chart(
            period, reference_date, placeholder_buckets(period, reference_date), ChartStatus.PLACEHOLDER
        )

    buckets = build_buckets(income_entries, expense_entries, period, reference_date)
    return make_chart(period, reference_date, buckets, ChartStatus.OK)


class OverviewChartLoader:
    """Keeps the visible chart in sync with the latest period selection.

    Each request gets a monotonically increasing token. A response is only
    applied if its token is still the latest one, so a slow response for a
    period the user has already switched away from never overwrites the
    newer chart.
    """

    def __init__(self, ledger: LedgerProvider):
        self.ledger = ledger
        self.current: Optional[OverviewChart] = None
        self._latest_token = 0
        self._applied_token = 0

    @property
    def latest_token(self) -> int:
        return self._latest_token

    @property
    def loading(self) -> bool:
        """True while the latest request has not completed."""
        return self._applied_token < self._latest_token

    def begin(self, period: Period) -> int:
        """Start a request for ``period`` and return its token.

        A visible real chart is marked stale until the new one arrives.
        """
        Period.parse(period)
        self._latest_token += 1
        if self.current is not None and self.current.status == ChartStatus.OK:
            self.current = replace(self.current, status=ChartStatus.STALE)
        return self._latest_token

    def complete(self, token: int, chart: OverviewChart) -> bool:
        """Apply a finished request. Returns False if the response was superseded."""
        if token != self._latest_token:
            logger.debug("Discarding superseded %s chart (token %s)", chart.period.value, token)
            return False
        self.current = chart
        self._applied_token = token
        return True

    def load(self, period: Period, reference_date: Optional[date] = None) -> OverviewChart:
        """Request, build and apply the chart for ``period``."""
        token = self.begin(period)
        chart = build_overview_chart(self.ledger, period, reference_date)
        self.complete(token, chart)
        return self.current
