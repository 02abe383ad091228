"""Value objects produced by a simulation run.

All models are rebuilt from scratch on every run and are meant to be
handed to a chart layer, usually as ``model_dump(mode="json")``.
"""

import datetime

from pydantic import BaseModel, Field, computed_field, model_validator

WEEKDAY_LABELS = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")


class DayMetric(BaseModel):
    date: datetime.date
    weekday: int = Field(ge=0, le=6)  # Sunday = 0
    views: int = Field(ge=0)
    visitors: int = Field(ge=0)
    bookings: int = Field(ge=0)
    prepaid_bookings: int = Field(ge=0)

    @model_validator(mode="after")
    def _check_funnel(self):
        if not self.prepaid_bookings <= self.bookings <= self.visitors <= self.views:
            raise ValueError(
                f"Funnel out of order on {self.date}: views={self.views} "
                f"visitors={self.visitors} bookings={self.bookings} "
                f"prepaid={self.prepaid_bookings}"
            )
        return self


class HourBucket(BaseModel):
    hour: int = Field(ge=0, le=23)
    booking_count: int = Field(default=0, ge=0)

    @computed_field
    @property
    def label(self) -> str:
        return f"{self.hour:02d}:00"


class WeekdayBucket(BaseModel):
    weekday: int = Field(ge=0, le=6)
    booking_count: int = Field(default=0, ge=0)

    @computed_field
    @property
    def label(self) -> str:
        return WEEKDAY_LABELS[self.weekday]


class TimeseriesPoint(BaseModel):
    date: str  # ISO label, e.g. "2025-03-14"
    views: int
    bookings: int
    prepaid_bookings: int


class Totals(BaseModel):
    views: int = 0
    visitors: int = 0
    bookings: int = 0
    prepaid_bookings: int = 0

    @computed_field
    @property
    def conversion_rate(self) -> float:
        """Bookings per visitor, 0 when there were no visitors."""
        return self.bookings / max(self.visitors, 1)


class AnalyticsReport(BaseModel):
    days: list[DayMetric]
    hour_counts: list[HourBucket]
    day_counts: list[WeekdayBucket]
    timeseries: list[TimeseriesPoint]
    totals: Totals
    conversion_rate: float
