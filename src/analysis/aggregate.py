"""Roll simulated days up into the chart series and KPI totals."""

from src.analysis.schemas import (
    AnalyticsReport,
    DayMetric,
    HourBucket,
    TimeseriesPoint,
    Totals,
    WeekdayBucket,
)


def hour_histogram(hour_counts: list[int]) -> list[HourBucket]:
    if len(hour_counts) != 24:
        raise ValueError(f"Expected 24 hourly counts, got {len(hour_counts)}")
    return [HourBucket(hour=h, booking_count=c) for h, c in enumerate(hour_counts)]


def weekday_histogram(days: list[DayMetric]) -> list[WeekdayBucket]:
    """Sum each day's bookings into its weekday bucket (Sunday first)."""
    counts = [0] * 7
    for day in days:
        counts[day.weekday] += day.bookings
    return [WeekdayBucket(weekday=w, booking_count=c) for w, c in enumerate(counts)]


def build_timeseries(days: list[DayMetric]) -> list[TimeseriesPoint]:
    ordered = sorted(days, key=lambda d: d.date)
    return [
        TimeseriesPoint(
            date=d.date.isoformat(),
            views=d.views,
            bookings=d.bookings,
            prepaid_bookings=d.prepaid_bookings,
        )
        for d in ordered
    ]


def compute_totals(days: list[DayMetric]) -> Totals:
    return Totals(
        views=sum(d.views for d in days),
        visitors=sum(d.visitors for d in days),
        bookings=sum(d.bookings for d in days),
        prepaid_bookings=sum(d.prepaid_bookings for d in days),
    )


def summarize(days: list[DayMetric], hour_counts: list[int]) -> AnalyticsReport:
    """Build the report the dashboard renders.

    ``hour_counts`` must already account for every booking in ``days``;
    a mismatch means the hour assignment skipped or duplicated bookings.
    """
    totals = compute_totals(days)
    if sum(hour_counts) != totals.bookings:
        raise ValueError(
            f"Hourly counts sum to {sum(hour_counts)}, expected {totals.bookings} bookings"
        )
    return AnalyticsReport(
        days=days,
        hour_counts=hour_histogram(hour_counts),
        day_counts=weekday_histogram(days),
        timeseries=build_timeseries(days),
        totals=totals,
        conversion_rate=totals.conversion_rate,
    )
