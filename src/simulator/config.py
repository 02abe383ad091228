"""Club settings and simulation parameters for the booking analytics demo.

These numbers model a small padel/tennis club booking funnel:
  page view -> club page visitor -> booking -> prepaid booking

Traffic follows a weekly seasonality (weekends busier) with bounded
jitter on every rate, so the charts look alive but stay reproducible.
"""

from dataclasses import dataclass

from src.simulator.errors import InvalidConfigError


def _require_int(name: str, value) -> None:
    # bool is an int subclass but never a valid count
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidConfigError(f"{name} must be an integer, got {value!r}")


@dataclass(frozen=True)
class ClubConfig:
    # Share of each booking's price collected upfront (0-100)
    prepayment_percent: int = 30

    # Display fields; the simulator only reads prepayment_percent
    club_id: str = "club-1"
    name: str = "Demo Club"
    city: str = ""
    slot_minutes: int = 60
    open_hour: int = 8
    close_hour: int = 23
    cancellation_hours: int = 6

    def __post_init__(self):
        for field in ("prepayment_percent", "slot_minutes", "open_hour",
                      "close_hour", "cancellation_hours"):
            _require_int(field, getattr(self, field))
        pct = self.prepayment_percent
        if not 0 <= pct <= 100:
            raise InvalidConfigError(
                f"prepayment_percent must be between 0 and 100, got {pct}"
            )
        if not 0 <= self.open_hour < self.close_hour <= 24:
            raise InvalidConfigError(
                f"Opening hours {self.open_hour}-{self.close_hour} are not a valid range"
            )
        if self.slot_minutes <= 0:
            raise InvalidConfigError("slot_minutes must be positive")
        if self.cancellation_hours < 0:
            raise InvalidConfigError("cancellation_hours cannot be negative")


@dataclass(frozen=True)
class SimulationConfig:
    # Fixed seed so every run of the demo shows the same data
    seed: int = 2025
    # Number of days ending at (and including) the reference date
    days: int = 30

    # Daily page views before seasonality and jitter
    base_views: int = 200
    # Traffic multiplier per weekday, Sunday first
    weekday_multipliers: tuple[float, ...] = (0.8, 0.9, 1.0, 1.0, 1.2, 1.4, 1.6)
    # Multipliers as (low, span): draws land in [low, low + span)
    views_jitter: tuple[float, float] = (0.8, 0.4)     # +/-20% on views
    visitor_rate: tuple[float, float] = (0.35, 0.15)   # 35-50% of views
    booking_rate: tuple[float, float] = (0.18, 0.06)   # 18-24% of visitors
    prepaid_jitter: tuple[float, float] = (0.9, 0.2)   # +/-10% on prepayment rate

    # Booking hour bands as (first hour, width)
    daytime_band: tuple[int, int] = (8, 12)    # 08:00-19:59
    evening_band: tuple[int, int] = (18, 4)    # 18:00-21:59
    # Probability a booking is moved to the evening band
    evening_override_prob: float = 0.5

    def __post_init__(self):
        _require_int("days", self.days)
        if self.days <= 0:
            raise InvalidConfigError(f"days must be positive, got {self.days}")
        if isinstance(self.base_views, bool) or not isinstance(self.base_views, (int, float)):
            raise InvalidConfigError(f"base_views must be a number, got {self.base_views!r}")
        if self.base_views < 0:
            raise InvalidConfigError("base_views cannot be negative")
        if len(self.weekday_multipliers) != 7:
            raise InvalidConfigError("weekday_multipliers needs exactly 7 entries")
        if any(m < 0 for m in self.weekday_multipliers):
            raise InvalidConfigError("weekday_multipliers cannot be negative")

        # Jitter bands scale a count and may exceed 1; funnel rates may not
        bands = {
            "views_jitter": self.views_jitter,
            "visitor_rate": self.visitor_rate,
            "booking_rate": self.booking_rate,
            "prepaid_jitter": self.prepaid_jitter,
        }
        for name, (low, span) in bands.items():
            if low < 0 or span < 0:
                raise InvalidConfigError(f"{name} ({low}, {span}) cannot be negative")
        for name in ("visitor_rate", "booking_rate"):
            low, span = bands[name]
            if low + span > 1:
                raise InvalidConfigError(f"{name} ({low}, {span}) exceeds 1")

        for low, width in (self.daytime_band, self.evening_band):
            if low < 0 or width <= 0 or low + width > 24:
                raise InvalidConfigError(f"Hour band ({low}, {width}) is outside 0-24")
        if not 0.0 <= self.evening_override_prob <= 1.0:
            raise InvalidConfigError("evening_override_prob must be between 0 and 1")


# Club shown on the demo booking page
DEMO_CLUB = ClubConfig(
    prepayment_percent=30,
    club_id="club-1",
    name="Pádel Arena Godoy",
    city="Godoy Cruz, Mendoza",
    slot_minutes=60,
    open_hour=8,
    close_hour=23,
    cancellation_hours=6,
)
