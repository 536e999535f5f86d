"""Calendar summary model."""

from pydantic import BaseModel


class YearOverview(BaseModel):
    """Where a moment falls within its year."""

    year: int
    day_of_year: int
    total_days: int
    progress_percent: float
    days_remaining: int
    season: str
    weekday: str
    is_weekend: bool
