"""CLI entrypoint: simulate club analytics and print the dashboard KPIs.

Usage:
    python -m src.simulator.generate
    python -m src.simulator.generate --prepayment 60 --days 14
    python -m src.simulator.generate --today 2025-03-31 --verbose
"""

import argparse
import logging
from dataclasses import replace
from datetime import date

from src.analysis.schemas import AnalyticsReport
from src.simulator.config import DEMO_CLUB, SimulationConfig
from src.simulator.engine import simulate
from src.simulator.errors import SimulationError


def _bar(count: int, peak: int, width: int = 30) -> str:
    if peak <= 0:
        return ""
    return "#" * round(width * count / peak)


def print_report(report: AnalyticsReport) -> None:
    totals = report.totals
    print("KPIs:")
    print(f"  Views: {totals.views:,}")
    print(f"  Visitors: {totals.visitors:,}")
    print(f"  Bookings: {totals.bookings:,}")
    print(f"  Prepaid bookings: {totals.prepaid_bookings:,}")
    print(f"  Conversion rate: {report.conversion_rate:.1%}")

    print("Bookings by weekday:")
    peak = max(b.booking_count for b in report.day_counts)
    for bucket in report.day_counts:
        print(f"  {bucket.label}: {bucket.booking_count:4d} {_bar(bucket.booking_count, peak)}")

    print("Bookings by hour:")
    peak = max(b.booking_count for b in report.hour_counts)
    for bucket in report.hour_counts:
        if bucket.booking_count:
            print(f"  {bucket.label}: {bucket.booking_count:4d} {_bar(bucket.booking_count, peak)}")


def main(args: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Simulate club booking analytics")
    parser.add_argument("--prepayment", type=int, default=DEMO_CLUB.prepayment_percent,
                        help="Prepayment percentage (0-100)")
    parser.add_argument("--days", type=int, default=30, help="Simulation window in days")
    parser.add_argument("--seed", type=int, default=2025, help="Random seed")
    parser.add_argument("--today", type=date.fromisoformat, default=None,
                        help="Last simulated day (YYYY-MM-DD), defaults to today")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    opts = parser.parse_args(args)

    if opts.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%H:%M:%S",
        )

    today = opts.today or date.today()
    try:
        club = replace(DEMO_CLUB, prepayment_percent=opts.prepayment)
        config = SimulationConfig(seed=opts.seed, days=opts.days)
        report = simulate(club, today=today, config=config)
    except SimulationError as exc:
        parser.error(str(exc))

    print(f"Club: {club.name} (prepayment {club.prepayment_percent}%)")
    print(f"Simulated {config.days} days ending {today.isoformat()} (seed={config.seed})")
    print_report(report)


if __name__ == "__main__":
    main()
