"""Pure date helpers: arithmetic, comparisons, formatting and relative phrasing.

Every function takes its reference time as an argument; nothing here reads
the clock.
"""

import calendar
from datetime import datetime, time, timedelta

from dateutil.relativedelta import relativedelta

from playground.models.calendar import YearOverview

MINUTES_IN_DAY = 1440
MINUTES_IN_MONTH = 43200
MINUTES_IN_TWO_MONTHS = 86400

NAMED_FORMATS = {
    "iso": "ISO Date",
    "european": "European Format",
    "us": "US Format",
    "full": "Full Date",
    "time": "Time Only",
    "datetime": "DateTime",
    "long": "Long Date",
    "long_datetime": "Long DateTime",
    "day_name": "Day Name",
    "month_name": "Month Name",
}


def add_days(value: datetime, amount: int) -> datetime:
    return value + timedelta(days=amount)


def add_weeks(value: datetime, amount: int) -> datetime:
    return value + timedelta(weeks=amount)


def add_months(value: datetime, amount: int) -> datetime:
    """Add calendar months, clamping to the last day of shorter months."""
    return value + relativedelta(months=amount)


def add_years(value: datetime, amount: int) -> datetime:
    return value + relativedelta(years=amount)


def sub_days(value: datetime, amount: int) -> datetime:
    return add_days(value, -amount)


def difference_in_days(later: datetime, earlier: datetime) -> int:
    """Signed number of full days between two moments, truncated toward zero."""
    return int((later - earlier) / timedelta(days=1))


def difference_in_weeks(later: datetime, earlier: datetime) -> int:
    return int(difference_in_days(later, earlier) / 7)


def difference_in_months(later: datetime, earlier: datetime) -> int:
    """Signed number of full calendar months between two moments."""
    delta = relativedelta(later, earlier)
    return delta.years * 12 + delta.months


def is_after(value: datetime, other: datetime) -> bool:
    return value > other


def is_before(value: datetime, other: datetime) -> bool:
    return value < other


def is_equal(value: datetime, other: datetime) -> bool:
    return value == other


def start_of_day(value: datetime) -> datetime:
    return datetime.combine(value.date(), time.min, tzinfo=value.tzinfo)


def start_of_week(value: datetime) -> datetime:
    """Midnight on the Sunday starting ``value``'s week."""
    days_since_sunday = (value.weekday() + 1) % 7
    return start_of_day(value - timedelta(days=days_since_sunday))


def end_of_week(value: datetime) -> datetime:
    return start_of_week(value) + timedelta(weeks=1) - timedelta(microseconds=1)


def start_of_month(value: datetime) -> datetime:
    return start_of_day(value.replace(day=1))


def end_of_month(value: datetime) -> datetime:
    return start_of_month(value) + relativedelta(months=1) - timedelta(microseconds=1)


def ordinal(number: int) -> str:
    """``1`` -> ``"1st"``, ``12`` -> ``"12th"``, ``22`` -> ``"22nd"``."""
    if 11 <= number % 100 <= 13:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(number % 10, "th")
    return f"{number}{suffix}"


def clock_time(value: datetime) -> str:
    """12-hour clock time such as ``"3:04 PM"``."""
    hour = value.hour % 12 or 12
    meridiem = "AM" if value.hour < 12 else "PM"
    return f"{hour}:{value.minute:02d} {meridiem}"


def format_date(value: datetime, pattern: str) -> str:
    """Format ``value`` with one of ``NAMED_FORMATS`` or a strftime pattern."""
    month = calendar.month_name[value.month]
    weekday = calendar.day_name[value.weekday()]
    long_date = f"{month} {ordinal(value.day)}, {value.year}"
    if pattern == "iso":
        return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
    if pattern == "european":
        return f"{value.day:02d}/{value.month:02d}/{value.year:04d}"
    if pattern == "us":
        return f"{value.month:02d}/{value.day:02d}/{value.year:04d}"
    if pattern == "full":
        return f"{weekday}, {long_date}"
    if pattern == "time":
        return f"{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
    if pattern == "datetime":
        return f"{format_date(value, 'iso')} {format_date(value, 'time')}"
    if pattern == "long":
        return long_date
    if pattern == "long_datetime":
        return f"{format_date(value, 'us')}, {clock_time(value)}"
    if pattern == "day_name":
        return weekday
    if pattern == "month_name":
        return month
    return value.strftime(pattern)


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}" if count == 1 else f"{count} {unit}s"


def format_distance(value: datetime, base: datetime, add_suffix: bool = False) -> str:
    """Describe the distance between two moments in words, e.g. ``"about 2 hours"``.

    With ``add_suffix`` the phrase becomes ``"in ..."`` when ``value`` is
    after ``base`` and ``"... ago"`` otherwise.
    """
    earlier, later = sorted((value, base))
    seconds = (later - earlier).total_seconds()
    minutes = round(seconds / 60)

    if minutes == 0:
        phrase = "less than a minute"
    elif minutes < 45:
        phrase = _plural(minutes, "minute")
    elif minutes < 90:
        phrase = "about 1 hour"
    elif minutes < MINUTES_IN_DAY:
        phrase = f"about {_plural(round(minutes / 60), 'hour')}"
    elif minutes < 2520:
        phrase = "1 day"
    elif minutes < MINUTES_IN_MONTH:
        phrase = _plural(round(minutes / MINUTES_IN_DAY), "day")
    elif minutes < MINUTES_IN_TWO_MONTHS:
        phrase = f"about {_plural(round(minutes / MINUTES_IN_MONTH), 'month')}"
    else:
        months = difference_in_months(later, earlier)
        if months < 12:
            phrase = _plural(round(minutes / MINUTES_IN_MONTH), "month")
        else:
            remainder = months % 12
            years = months // 12
            if remainder < 3:
                phrase = f"about {_plural(years, 'year')}"
            elif remainder < 9:
                phrase = f"over {_plural(years, 'year')}"
            else:
                phrase = f"almost {_plural(years + 1, 'year')}"

    if not add_suffix:
        return phrase
    return f"in {phrase}" if value > base else f"{phrase} ago"


def format_relative(value: datetime, base: datetime) -> str:
    """Describe ``value`` relative to ``base`` in calendar terms.

    Examples: ``"yesterday at 3:04 PM"``, ``"last Monday at 9:00 AM"``,
    ``"10/12/2026"`` for dates more than a week away.
    """
    days = (value.date() - base.date()).days
    at = f"at {clock_time(value)}"
    weekday = calendar.day_name[value.weekday()]
    if days < -6 or days >= 7:
        return format_date(value, "us")
    if days < -1:
        return f"last {weekday} {at}"
    if days < 0:
        return f"yesterday {at}"
    if days < 1:
        return f"today {at}"
    if days < 2:
        return f"tomorrow {at}"
    return f"{weekday} {at}"


def season_for(month: int) -> str:
    if 3 <= month <= 5:
        return "Spring"
    if 6 <= month <= 8:
        return "Summer"
    if 9 <= month <= 11:
        return "Autumn"
    return "Winter"


def year_overview(now: datetime) -> YearOverview:
    total_days = 366 if calendar.isleap(now.year) else 365
    day_of_year = now.timetuple().tm_yday
    return YearOverview(
        year=now.year,
        day_of_year=day_of_year,
        total_days=total_days,
        progress_percent=round(day_of_year / total_days * 100, 1),
        days_remaining=total_days - day_of_year,
        season=season_for(now.month),
        weekday=calendar.day_name[now.weekday()],
        is_weekend=now.weekday() >= 5,
    )


def demo_lines(now: datetime) -> list[str]:
    """Build the full date-utilities walkthrough for ``now``."""
    future = add_days(now, 5)
    lines = [
        "Date Operations",
        "=" * 60,
        f"Current date: {format_date(now, 'full')}",
        f"ISO format:   {now.isoformat()}",
        f"+5 days:      {format_date(future, 'full')}",
        "",
        "Date Formatting:",
        "=" * 50,
    ]
    for index, (name, description) in enumerate(NAMED_FORMATS.items(), start=1):
        lines.append(f"{index:>2}. {description:<15} -> {format_date(now, name)}")

    lines += [
        "",
        "Date Arithmetic:",
        "=" * 50,
        f"   Base date: {format_date(now, 'long')}",
        f"   +1 day:    {format_date(add_days(now, 1), 'long')}",
        f"   +1 week:   {format_date(add_weeks(now, 1), 'long')}",
        f"   +1 month:  {format_date(add_months(now, 1), 'long')}",
        f"   +1 year:   {format_date(add_years(now, 1), 'long')}",
        f"   -7 days:   {format_date(sub_days(now, 7), 'long')}",
        f"   -1 month:  {format_date(add_months(now, -1), 'long')}",
        f"   -1 year:   {format_date(add_years(now, -1), 'long')}",
    ]

    later = add_days(now, 10)
    earlier = sub_days(now, 5)
    lines += [
        "",
        "Comparisons and Differences:",
        "=" * 50,
        f"   Days between today and +10d: {difference_in_days(later, now)}",
        f"   Days between -5d and today:  {difference_in_days(now, earlier)}",
        f"   Weeks between today and +10d: {difference_in_weeks(later, now)}",
        f"   +10d is after today: {is_after(later, now)}",
        f"   -5d is before today: {is_before(earlier, now)}",
        f"   Today equals itself: {is_equal(now, now.replace())}",
        "",
        "Relative Formatting:",
        "=" * 40,
    ]
    offsets = [
        sub_days(now, 1),
        sub_days(now, 7),
        add_months(now, -1),
        add_years(now, -1),
        add_days(now, 1),
        add_weeks(now, 1),
        add_months(now, 1),
        add_years(now, 1),
    ]
    for index, moment in enumerate(offsets, start=1):
        lines.append(
            f"   {index}. {format_distance(moment, now, add_suffix=True)}"
            f" ({format_relative(moment, now)})"
        )

    overview = year_overview(now)
    lines += [
        "",
        "Week and Month:",
        "=" * 45,
        f"   Start of week:  {format_date(start_of_week(now), 'full')}",
        f"   End of week:    {format_date(end_of_week(now), 'full')}",
        f"   Start of month: {format_date(start_of_month(now), 'full')}",
        f"   End of month:   {format_date(end_of_month(now), 'full')}",
        f"   Days remaining in month: {difference_in_days(end_of_month(now), now)}",
        "",
        "Year Progress:",
        f"   Year: {overview.year}",
        f"   Day of year: {overview.day_of_year} of {overview.total_days}",
        f"   Progress: {overview.progress_percent}%",
        f"   Days remaining: {overview.days_remaining}",
        f"   Season: {overview.season}",
        f"   Day of week: {overview.weekday}"
        f" ({'Weekend' if overview.is_weekend else 'Weekday'})",
    ]
    return lines
