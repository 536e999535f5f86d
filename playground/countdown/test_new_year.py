from datetime import datetime, timedelta, timezone

import pytest

from playground.countdown.new_year import (
    detailed_countdown,
    next_new_year,
    run_live_countdown,
    summary_lines,
    time_until_new_year,
    year_progress,
)

OCTOBER_NOON = datetime(2026, 10, 19, 12, 0)


def test_next_new_year_keeps_timezone():
    tz = timezone(timedelta(hours=2))
    assert next_new_year(datetime(2026, 10, 19, tzinfo=tz)) == datetime(2027, 1, 1, tzinfo=tz)
    assert next_new_year(datetime(2026, 1, 1)) == datetime(2027, 1, 1)


def test_countdown_in_the_last_minute():
    countdown = time_until_new_year(datetime(2026, 12, 31, 23, 59, 30))

    assert countdown.days == 0
    assert countdown.seconds == 30
    assert countdown.total_seconds == 30
    assert countdown.message == "The 1st January is in 0 days and 00:00:30 hours"


def test_countdown_on_new_years_day_targets_next_year():
    countdown = time_until_new_year(datetime(2026, 1, 1))

    assert countdown.target == datetime(2027, 1, 1)
    assert countdown.days == 365
    assert countdown.time_string == "365 days and 00:00:00 hours"


def test_countdown_components():
    countdown = time_until_new_year(OCTOBER_NOON)

    assert (countdown.days, countdown.hours, countdown.minutes, countdown.seconds) == (73, 12, 0, 0)
    assert countdown.total_hours == 1764
    assert countdown.total_minutes == 1764 * 60


def test_detailed_countdown():
    detailed = detailed_countdown(OCTOBER_NOON)

    assert detailed.target_year == 2027
    assert detailed.totals.days == 73
    assert detailed.totals.hours == 1764
    assert detailed.totals.weeks == 10
    assert detailed.totals.months == 2
    assert detailed.totals.milliseconds == detailed.totals.seconds * 1000
    assert detailed.formatted.simple == "73 days and 12:00:00 hours"
    assert detailed.formatted.detailed == "73 days, 12 hours, 0 minutes, 0 seconds"
    assert detailed.formatted.with_weeks == "10 weeks and 3 days"
    assert detailed.formatted.with_months == "2 months and 13 days"


def test_detailed_countdown_under_a_week():
    detailed = detailed_countdown(datetime(2026, 12, 28))

    assert detailed.formatted.with_weeks == "4 days"
    assert detailed.formatted.with_months == "4 days"


def test_year_progress():
    assert year_progress(datetime(2026, 1, 1)) == 0.0
    assert year_progress(datetime(2026, 7, 2, 12)) == 50.0


def test_timezone_aware_input_stays_aware():
    now = datetime(2026, 10, 19, 12, tzinfo=timezone.utc)

    countdown = time_until_new_year(now)

    assert countdown.target.tzinfo is timezone.utc
    assert countdown.days == 73
    assert year_progress(now) == pytest.approx(79.86, abs=0.01)


def test_summary_lines():
    lines = summary_lines(OCTOBER_NOON)

    assert lines[2] == "The 1st January is in 73 days and 12:00:00 hours"
    assert "Target Date: January 1st, 2027" in lines
    assert "  Total Hours: 1,764" in lines


@pytest.mark.asyncio
async def test_run_live_countdown_echoes_each_tick():
    lines = []

    ticks = await run_live_countdown(lines.append, 3, 0, clock=lambda: OCTOBER_NOON)

    assert ticks == 3
    assert lines == ["[12:00:00] The 1st January is in 73 days and 12:00:00 hours"] * 3


@pytest.mark.asyncio
async def test_run_live_countdown_with_no_ticks():
    lines = []

    assert await run_live_countdown(lines.append, 0, 0) == 0
    assert lines == []
