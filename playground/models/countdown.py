"""Countdown models."""

from datetime import datetime

from pydantic import BaseModel


class Countdown(BaseModel):
    """Time remaining until a target, split into days and clock components."""

    target: datetime
    now: datetime
    days: int
    hours: int
    minutes: int
    seconds: int
    total_seconds: int
    total_minutes: int
    total_hours: int
    time_string: str
    message: str


class CountdownTotals(BaseModel):
    milliseconds: int
    seconds: int
    minutes: int
    hours: int
    days: int
    weeks: int
    months: int


class CountdownFormats(BaseModel):
    simple: str
    detailed: str
    with_weeks: str
    with_months: str


class DetailedCountdown(BaseModel):
    """Countdown with totals in several units and pre-formatted variants."""

    target_year: int
    now: datetime
    target: datetime
    totals: CountdownTotals
    formatted: CountdownFormats
