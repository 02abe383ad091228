"""CI validation: verify exported club analytics data is complete and sane.

This script is the final gate in CI. It reads the exported dashboard JSON
and asserts structural and funnel invariants. If anything is wrong, it
exits non-zero and fails the build.

Usage:
    python ci/validate_analytics.py
    python ci/validate_analytics.py --data path/to/data.json
"""

import argparse
import json
import sys
from pathlib import Path

from src.analysis.export import DEFAULT_OUT

REQUIRED_TOP_KEYS = {"timeseries", "hour_counts", "day_counts", "totals", "conversion_rate"}
TOTAL_FIELDS = ("views", "visitors", "bookings", "prepaid_bookings")
# Funnel stages in order; each must not exceed the one before
FUNNEL_STAGES = ["views", "visitors", "bookings", "prepaid_bookings"]


def validate(data: dict) -> list[str]:
    """Return a list of validation errors (empty = pass)."""
    errors = []

    # --- Top-level structure ---
    for key in sorted(REQUIRED_TOP_KEYS):
        if key not in data:
            errors.append(f"Missing top-level key: {key}")

    if errors:
        return errors  # Can't continue without structure

    # --- Totals ---
    totals = data["totals"]
    missing = [f for f in TOTAL_FIELDS if f not in totals]
    if missing:
        errors.append(f"totals missing fields: {missing}")
        return errors

    for i in range(1, len(FUNNEL_STAGES)):
        prev, cur = FUNNEL_STAGES[i - 1], FUNNEL_STAGES[i]
        if totals[cur] > totals[prev]:
            errors.append(
                f"Funnel not monotonically decreasing: "
                f"{prev}={totals[prev]} < {cur}={totals[cur]}"
            )

    # --- Conversion rate ---
    rate = data["conversion_rate"]
    if rate < 0 or rate > 1:
        errors.append(f"conversion_rate out of range: {rate}")
    expected = totals["bookings"] / max(totals["visitors"], 1)
    if abs(rate - expected) > 1e-9:
        errors.append(f"conversion_rate {rate} != bookings/visitors {expected}")

    # --- Timeseries ---
    timeseries = data["timeseries"]
    if not timeseries:
        errors.append("timeseries is empty, no days were simulated")
    else:
        dates = [p["date"] for p in timeseries]
        if dates != sorted(dates):
            errors.append("timeseries is not ordered oldest-first")
        if len(set(dates)) != len(dates):
            errors.append("timeseries has duplicate dates")
        for point in timeseries:
            if not 0 <= point["prepaid_bookings"] <= point["bookings"] <= point["views"]:
                errors.append(f"timeseries {point['date']} has an out-of-order funnel")
        for field in ("views", "bookings", "prepaid_bookings"):
            series_sum = sum(p[field] for p in timeseries)
            if series_sum != totals[field]:
                errors.append(
                    f"timeseries {field} sums to {series_sum}, totals say {totals[field]}"
                )

    # --- Histograms ---
    hours = data["hour_counts"]
    if len(hours) != 24:
        errors.append(f"hour_counts has {len(hours)} buckets, expected 24")
    elif [h["hour"] for h in hours] != list(range(24)):
        errors.append("hour_counts buckets are not hours 0-23 in order")

    weekdays = data["day_counts"]
    if len(weekdays) != 7:
        errors.append(f"day_counts has {len(weekdays)} buckets, expected 7")

    for name, buckets in (("hour_counts", hours), ("day_counts", weekdays)):
        if any(b["booking_count"] < 0 for b in buckets):
            errors.append(f"{name} has a negative booking_count")
        bucket_sum = sum(b["booking_count"] for b in buckets)
        if bucket_sum != totals["bookings"]:
            errors.append(
                f"{name} sums to {bucket_sum}, totals say {totals['bookings']} bookings"
            )

    return errors


def main(args: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Validate exported analytics data")
    parser.add_argument(
        "--data",
        default=DEFAULT_OUT,
        help="Path to exported dashboard JSON",
    )
    opts = parser.parse_args(args)

    path = Path(opts.data)
    if not path.exists():
        print(f"FAIL: {opts.data} not found. Run 'python -m src.analysis.export' first.")
        sys.exit(1)

    data = json.loads(path.read_text())
    errors = validate(data)

    if errors:
        print(f"FAIL: {len(errors)} validation error(s):")
        for e in errors:
            print(f"  - {e}")
        sys.exit(1)

    totals = data["totals"]
    print("PASS: Analytics integrity validated")
    print(f"  Days: {len(data['timeseries'])}")
    print(f"  Funnel: {totals['views']:,} views -> {totals['bookings']:,} bookings")
    print(f"  Conversion rate: {data['conversion_rate']:.2%}")


if __name__ == "__main__":
    main()
