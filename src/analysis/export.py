"""Export a simulated analytics report as dashboard JSON.

Usage:
    python -m src.analysis.export
    python -m src.analysis.export --prepayment 50 --out dashboard/data.json
    python -m src.analysis.export --today 2025-03-31
"""

import argparse
import json
from dataclasses import replace
from datetime import date
from pathlib import Path

from src.analysis.schemas import AnalyticsReport
from src.simulator.config import DEMO_CLUB, ClubConfig, SimulationConfig
from src.simulator.engine import simulate
from src.simulator.errors import SimulationError

DEFAULT_OUT = "dashboard/data.json"


def build_dashboard_data(
    report: AnalyticsReport,
    club: ClubConfig,
    today: date,
) -> dict:
    """Shape a report into the JSON document the chart layer reads."""
    data = report.model_dump(mode="json", exclude={"days"})
    data["club"] = {
        "club_id": club.club_id,
        "name": club.name,
        "prepayment_percent": club.prepayment_percent,
    }
    data["generated_for"] = today.isoformat()
    return data


def write_dashboard_data(data: dict, out: str | Path) -> Path:
    path = Path(out)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2, ensure_ascii=False))
    return path


def main(args: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Export simulated club analytics as JSON")
    parser.add_argument("--prepayment", type=int, default=DEMO_CLUB.prepayment_percent,
                        help="Prepayment percentage (0-100)")
    parser.add_argument("--days", type=int, default=30, help="Simulation window in days")
    parser.add_argument("--seed", type=int, default=2025, help="Random seed")
    parser.add_argument("--today", type=date.fromisoformat, default=None,
                        help="Last simulated day (YYYY-MM-DD), defaults to today")
    parser.add_argument("--out", type=str, default=DEFAULT_OUT, help="Output JSON path")
    opts = parser.parse_args(args)

    today = opts.today or date.today()
    try:
        club = replace(DEMO_CLUB, prepayment_percent=opts.prepayment)
        config = SimulationConfig(seed=opts.seed, days=opts.days)
        report = simulate(club, today=today, config=config)
    except SimulationError as exc:
        parser.error(str(exc))

    path = write_dashboard_data(build_dashboard_data(report, club, today), opts.out)
    print(f"Wrote {len(report.timeseries)} days of analytics to {path}")


if __name__ == "__main__":
    main()
