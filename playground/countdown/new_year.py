"""Countdown to the next January 1st and a live ticking display."""

from collections.abc import Callable
from datetime import datetime

from playground.concurrency.ticker import PeriodicTask
from playground.logging_config import logger
from playground.models.countdown import (
    Countdown,
    CountdownFormats,
    CountdownTotals,
    DetailedCountdown,
)

AVERAGE_DAYS_PER_MONTH = 30.44


def next_new_year(now: datetime) -> datetime:
    """Midnight on the January 1st after ``now``, in ``now``'s timezone."""
    return datetime(now.year + 1, 1, 1, tzinfo=now.tzinfo)


def time_until_new_year(now: datetime) -> Countdown:
    target = next_new_year(now)
    total_seconds = int((target - now).total_seconds())
    total_minutes = total_seconds // 60
    total_hours = total_minutes // 60
    days = total_hours // 24
    hours = total_hours % 24
    minutes = total_minutes % 60
    seconds = total_seconds % 60
    time_string = f"{days} days and {hours:02d}:{minutes:02d}:{seconds:02d} hours"
    return Countdown(
        target=target,
        now=now,
        days=days,
        hours=hours,
        minutes=minutes,
        seconds=seconds,
        total_seconds=total_seconds,
        total_minutes=total_minutes,
        total_hours=total_hours,
        time_string=time_string,
        message=f"The 1st January is in {time_string}",
    )


def detailed_countdown(now: datetime) -> DetailedCountdown:
    """Countdown totals in every unit plus ready-made phrasings."""
    countdown = time_until_new_year(now)
    total_ms = int((countdown.target - now).total_seconds() * 1000)
    days = countdown.days
    weeks = days // 7
    months = int(days // AVERAGE_DAYS_PER_MONTH)
    return DetailedCountdown(
        target_year=countdown.target.year,
        now=now,
        target=countdown.target,
        totals=CountdownTotals(
            milliseconds=total_ms,
            seconds=countdown.total_seconds,
            minutes=countdown.total_minutes,
            hours=countdown.total_hours,
            days=days,
            weeks=weeks,
            months=months,
        ),
        formatted=CountdownFormats(
            simple=countdown.time_string,
            detailed=(
                f"{days} days, {countdown.hours} hours, "
                f"{countdown.minutes} minutes, {countdown.seconds} seconds"
            ),
            with_weeks=f"{weeks} weeks and {days % 7} days" if weeks else f"{days} days",
            with_months=(
                f"{months} months and {days % 30} days" if months else f"{days} days"
            ),
        ),
    )


def year_progress(now: datetime) -> float:
    """Percentage of ``now``'s year that has elapsed, to two decimals."""
    start = datetime(now.year, 1, 1, tzinfo=now.tzinfo)
    end = next_new_year(now)
    return round((now - start) / (end - start) * 100, 2)


def summary_lines(now: datetime) -> list[str]:
    detailed = detailed_countdown(now)
    return [
        "NEW YEAR COUNTDOWN",
        "=" * 50,
        time_until_new_year(now).message,
        "",
        f"Current Date: {now:%Y-%m-%d %H:%M:%S}",
        f"Target Date: January 1st, {detailed.target_year}",
        "",
        "Time Remaining:",
        f"  Simple: {detailed.formatted.simple}",
        f"  Detailed: {detailed.formatted.detailed}",
        f"  With Weeks: {detailed.formatted.with_weeks}",
        f"  With Months: {detailed.formatted.with_months}",
        "",
        "Total Time in Different Units:",
        f"  Total Days: {detailed.totals.days:,}",
        f"  Total Hours: {detailed.totals.hours:,}",
        f"  Total Minutes: {detailed.totals.minutes:,}",
        f"  Total Seconds: {detailed.totals.seconds:,}",
        "",
        f"Year Progress: {year_progress(now):.2f}% completed",
    ]


async def run_live_countdown(
    echo: Callable[[str], None],
    ticks: int,
    interval_s: float,
    clock: Callable[[], datetime] = datetime.now,
) -> int:
    """Echo the countdown message ``ticks`` times, ``interval_s`` apart.

    The periodic task is stopped on every exit path, including cancellation
    of the caller.

    Returns:
        Number of ticks that ran.
    """

    def tick(_: int) -> None:
        now = clock()
        echo(f"[{now:%H:%M:%S}] {time_until_new_year(now).message}")

    task = PeriodicTask(tick, interval_s, max_ticks=ticks)
    async with task:
        await task.wait()
    logger.info("COUNTDOWN_FINISHED", ticks=task.ticks)
    return task.ticks
