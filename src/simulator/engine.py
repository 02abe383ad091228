"""Simulation engine that generates synthetic booking analytics for a club.

Each simulated day runs the booking funnel:
  page views -> visitors -> bookings -> prepaid bookings

Views follow a fixed weekday seasonality with jitter; every later stage
is a jittered share of the previous one. Once all days exist, each
booking is given an hour of day from a daytime band, half of them moved
to an evening band, which yields the two-peak hourly chart.

All randomness comes from one seeded DrawStream and the draws happen in
a fixed, named order, so the same seed and reference date always give
the same report.
"""

import logging
import math
from datetime import date, datetime, timedelta

from src.analysis.aggregate import summarize
from src.analysis.schemas import AnalyticsReport, DayMetric
from src.simulator.config import ClubConfig, SimulationConfig
from src.simulator.errors import InvalidConfigError, InvalidReferenceDateError
from src.simulator.rng import Draw, DrawStream

logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    # Halves go up, not to the nearest even number
    return math.floor(value + 0.5)


def sunday_weekday(day: date) -> int:
    """Weekday index with Sunday = 0 ... Saturday = 6."""
    return (day.weekday() + 1) % 7


def simulate(
    club: ClubConfig,
    today: date | datetime | None = None,
    config: SimulationConfig | None = None,
    stream: DrawStream | None = None,
) -> AnalyticsReport:
    """Generate the full analytics report for ``club``.

    ``today`` is the last simulated day; it defaults to the local current
    date. A fresh DrawStream seeded from ``config.seed`` is used unless
    one is passed in (handy for recording a draw trace).

    Raises InvalidReferenceDateError if ``today`` is not a date, and
    InvalidConfigError if the window would reach before the first
    representable date.
    """
    if config is None:
        config = SimulationConfig()
    reference = _reference_date(today)
    try:
        reference - timedelta(days=config.days - 1)
    except OverflowError:
        raise InvalidConfigError(
            f"A {config.days}-day window ending {reference.isoformat()} starts before year 1"
        ) from None
    if stream is None:
        stream = DrawStream(config.seed)

    days = simulate_days(club, reference, config, stream)
    hours = assign_booking_hours(days, config, stream)
    report = summarize(days, hours)

    logger.debug(
        "Simulated %d days ending %s (seed=%d, draws=%d): %d bookings, conversion %.3f",
        len(days), reference.isoformat(), stream.seed, stream.count,
        report.totals.bookings, report.conversion_rate,
    )
    return report


def simulate_days(
    club: ClubConfig,
    today: date,
    config: SimulationConfig,
    stream: DrawStream,
) -> list[DayMetric]:
    """Simulate the daily funnel, oldest day first."""
    prepaid_share = club.prepayment_percent / 100
    days: list[DayMetric] = []

    for i in range(config.days):
        day = today - timedelta(days=config.days - 1 - i)
        weekday = sunday_weekday(day)
        base = config.weekday_multipliers[weekday]

        # Draw order: views, visitors, bookings, prepaid
        low, span = config.views_jitter
        views = round_half_up(
            config.base_views * base * (low + stream.draw(Draw.VIEWS_JITTER) * span)
        )
        low, span = config.visitor_rate
        visitors = round_half_up(views * (low + stream.draw(Draw.VISITOR_RATE) * span))
        low, span = config.booking_rate
        bookings = round_half_up(visitors * (low + stream.draw(Draw.BOOKING_RATE) * span))
        low, span = config.prepaid_jitter
        prepaid = round_half_up(
            bookings * prepaid_share * (low + stream.draw(Draw.PREPAID_JITTER) * span)
        )
        # Jitter above 100% prepayment could otherwise exceed bookings
        prepaid = min(prepaid, bookings)

        days.append(DayMetric(
            date=day,
            weekday=weekday,
            views=views,
            visitors=visitors,
            bookings=bookings,
            prepaid_bookings=prepaid,
        ))

    return days


def assign_booking_hours(
    days: list[DayMetric],
    config: SimulationConfig,
    stream: DrawStream,
) -> list[int]:
    """Spread every booking over the hours of the day.

    Returns 24 counts indexed by hour. Each booking draws a daytime hour,
    then a check that moves it into the evening band.
    """
    counts = [0] * 24
    day_low, day_width = config.daytime_band
    eve_low, eve_width = config.evening_band
    threshold = 1.0 - config.evening_override_prob

    for day in days:
        for _ in range(day.bookings):
            hour = math.floor(day_low + stream.draw(Draw.HOUR_PICK) * day_width)
            if stream.draw(Draw.HOUR_OVERRIDE_CHECK) > threshold:
                hour = math.floor(eve_low + stream.draw(Draw.EVENING_HOUR_PICK) * eve_width)
            counts[hour] += 1

    return counts


def _reference_date(today: date | datetime | None) -> date:
    if today is None:
        return date.today()
    # datetime is a date subclass; keep only the calendar day
    if isinstance(today, datetime):
        return today.date()
    if isinstance(today, date):
        return today
    raise InvalidReferenceDateError(
        f"today must be a date or datetime, got {type(today).__name__}"
    )
