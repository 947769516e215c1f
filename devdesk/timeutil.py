"""Date and time helpers: formatting, period boundaries, arithmetic and comparisons."""

from __future__ import annotations

import calendar
from datetime import date, datetime, time, timedelta

_MONTH_ABBR = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
               "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
_WEEKDAYS_ZH = ("星期日", "星期一", "星期二", "星期三", "星期四", "星期五", "星期六")
_WEEKDAYS_EN = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")
_ZH_LOCALES = ("zh-CN", "zh_CN")
_LAST_INSTANT = time(23, 59, 59, 999999)
_US = timedelta(microseconds=1)


def _trunc_div(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return -q if (a < 0) != (b < 0) else q


def _trunc_rem(a: int, b: int) -> int:
    r = abs(a) % abs(b)
    return -r if a < 0 else r


def _micros(delta: timedelta) -> int:
    return delta // _US


def _at(day: date, clock: time, like: datetime) -> datetime:
    return datetime.combine(day, clock, tzinfo=like.tzinfo)


def _add_date(t: datetime, years: int, months: int, days: int) -> datetime:
    """Add years, months and days, letting overflowing days roll into the next month."""
    total = t.year * 12 + (t.month - 1) + years * 12 + months
    year, month0 = divmod(total, 12)
    day = date(year, month0 + 1, 1) + timedelta(days=t.day - 1 + days)
    return t.replace(year=day.year, month=day.month, day=day.day)


def _offset_text(offset: timedelta, colon: bool) -> str:
    minutes = _trunc_div(_micros(offset), 60_000_000)
    sign = "-" if minutes < 0 else "+"
    hours, mins = divmod(abs(minutes), 60)
    return f"{sign}{hours:02d}:{mins:02d}" if colon else f"{sign}{hours:02d}{mins:02d}"


def _aware(t: datetime) -> datetime:
    return t if t.tzinfo is not None and t.utcoffset() is not None else t.astimezone()


def format_date(t: datetime) -> str:
    """Format as yyyy-mm-dd."""
    return f"{t.year:04d}-{t.month:02d}-{t.day:02d}"


def format_datetime(t: datetime) -> str:
    """Format as yyyy-mm-dd HH:MM:SS."""
    return f"{format_date(t)} {t.hour:02d}:{t.minute:02d}:{t.second:02d}"


def format_rfc3339(t: datetime) -> str:
    """Format as RFC 3339 with whole seconds; a zero offset is written as Z."""
    t = _aware(t)
    offset = t.utcoffset() or timedelta(0)
    zone = "Z" if offset == timedelta(0) else _offset_text(offset, colon=True)
    return f"{format_date(t)}T{t.hour:02d}:{t.minute:02d}:{t.second:02d}{zone}"


def format_rfc822(t: datetime) -> str:
    """Format as RFC 822: dd Mon yy HH:MM ZONE."""
    t = _aware(t)
    offset = t.utcoffset() or timedelta(0)
    name = t.tzname()
    if not name or (name.startswith("UTC") and name != "UTC") or (name == "UTC" and offset):
        name = _offset_text(offset, colon=False)
    return (f"{t.day:02d} {_MONTH_ABBR[t.month - 1]} {t.year % 100:02d} "
            f"{t.hour:02d}:{t.minute:02d} {name}")


def day_start(t: datetime) -> datetime:
    """Return midnight at the start of t's day."""
    return _at(t.date(), time(), t)


def day_end(t: datetime) -> datetime:
    """Return the last representable instant of t's day."""
    return _at(t.date(), _LAST_INSTANT, t)


def weekday(t: datetime) -> int:
    """Return the day of the week, 0 for Sunday through 6 for Saturday."""
    return (t.weekday() + 1) % 7


def week_start(t: datetime, sunday_start: bool = True) -> datetime:
    """Return midnight of the Sunday that opens t's week.

    When sunday_start is false a Sunday counts as the seventh day of its week,
    so a Sunday maps to the Sunday a week earlier.
    """
    offset = weekday(t)
    if not sunday_start and offset == 0:
        offset = 7
    return _at(t.date() - timedelta(days=offset), time(), t)


def week_end(t: datetime, sunday_start: bool = True) -> datetime:
    """Return the last instant of the week that week_start opens."""
    start = week_start(t, sunday_start)
    return start + timedelta(days=6, hours=23, minutes=59, seconds=59, microseconds=999999)


def month_start(t: datetime) -> datetime:
    """Return midnight on the first day of t's month."""
    return _at(date(t.year, t.month, 1), time(), t)


def month_end(t: datetime) -> datetime:
    """Return the last instant of t's month."""
    return _at(date(t.year, t.month, days_in_month(t.year, t.month)), _LAST_INSTANT, t)


def year_start(t: datetime) -> datetime:
    """Return midnight on January 1st of t's year."""
    return _at(date(t.year, 1, 1), time(), t)


def year_end(t: datetime) -> datetime:
    """Return the last instant of December 31st of t's year."""
    return _at(date(t.year, 12, 31), _LAST_INSTANT, t)


def quarter(t: datetime) -> int:
    """Return the quarter of the year, 1 to 4."""
    return (t.month - 1) // 3 + 1


def quarter_start(t: datetime) -> datetime:
    """Return midnight on the first day of t's quarter."""
    first_month = (quarter(t) - 1) * 3 + 1
    return _at(date(t.year, first_month, 1), time(), t)


def quarter_end(t: datetime) -> datetime:
    """Return the last instant of t's quarter."""
    last_month = quarter(t) * 3
    return _at(date(t.year, last_month, days_in_month(t.year, last_month)), _LAST_INSTANT, t)


def add_days(t: datetime, days: int) -> datetime:
    """Add a number of calendar days."""
    return _add_date(t, 0, 0, days)


def add_months(t: datetime, months: int) -> datetime:
    """Add months; a day past the month's end rolls over into the next month."""
    return _add_date(t, 0, months, 0)


def add_years(t: datetime, years: int) -> datetime:
    """Add years; February 29th in a common year rolls over to March 1st."""
    return _add_date(t, years, 0, 0)


def diff_seconds(t1: datetime, t2: datetime) -> int:
    """Whole seconds from t2 to t1, truncated toward zero."""
    return _trunc_div(_micros(t1 - t2), 1_000_000)


def diff_minutes(t1: datetime, t2: datetime) -> int:
    """Whole minutes from t2 to t1, truncated toward zero."""
    return _trunc_div(_micros(t1 - t2), 60_000_000)


def diff_hours(t1: datetime, t2: datetime) -> int:
    """Whole hours from t2 to t1, truncated toward zero."""
    return _trunc_div(_micros(t1 - t2), 3_600_000_000)


def diff_days(t1: datetime, t2: datetime) -> int:
    """Whole 24-hour days from t2 to t1, truncated toward zero."""
    return _trunc_div(_micros(t1 - t2), 86_400_000_000)


def is_leap_year(year: int) -> bool:
    """Return True for Gregorian leap years."""
    return calendar.isleap(year)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a month; months outside 1-12 roll over."""
    y, m0 = divmod(year * 12 + month - 1, 12)
    if m0 == 1:
        return 29 if is_leap_year(y) else 28
    return 30 if m0 in (3, 5, 8, 10) else 31


def human_duration(duration: timedelta) -> str:
    """Describe a duration in days, hours, minutes and seconds."""
    us = _micros(duration)
    days = _trunc_div(us, 86_400_000_000)
    hours = _trunc_rem(_trunc_div(us, 3_600_000_000), 24)
    minutes = _trunc_rem(_trunc_div(us, 60_000_000), 60)
    seconds = _trunc_rem(_trunc_div(us, 1_000_000), 60)
    if days > 0:
        return f"{days}天{hours}小时{minutes}分钟{seconds}秒"
    if hours > 0:
        return f"{hours}小时{minutes}分钟{seconds}秒"
    if minutes > 0:
        return f"{minutes}分钟{seconds}秒"
    return f"{seconds}秒"


def is_same_day(t1: datetime, t2: datetime) -> bool:
    """Return True when both fall on the same calendar day."""
    return t1.date() == t2.date()


def is_same_month(t1: datetime, t2: datetime) -> bool:
    """Return True when both fall in the same month of the same year."""
    return (t1.year, t1.month) == (t2.year, t2.month)


def is_same_year(t1: datetime, t2: datetime) -> bool:
    """Return True when both fall in the same year."""
    return t1.year == t2.year


def weekday_name(t: datetime, locale: str = "en") -> str:
    """Return the name of t's weekday in Chinese for zh-CN, otherwise in English."""
    names = _WEEKDAYS_ZH if locale in _ZH_LOCALES else _WEEKDAYS_EN
    return names[weekday(t)]