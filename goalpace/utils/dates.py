"""Calendar-day helpers shared by the allocation engine and the weekly agenda.

All helpers work on ``datetime.date``. A ``datetime`` is normalized to its
calendar day first, so arithmetic never depends on the time of day.

Weekdays follow the Sunday-first convention: 0 = Sunday ... 6 = Saturday.
Week boundaries are Monday-Sunday.
"""

from datetime import date, datetime, timedelta

DAY_NAMES_PT: tuple[str, ...] = ("Domingo", "Segunda", "Terça", "Quarta", "Quinta", "Sexta", "Sábado")
DAY_NAMES_PT_SHORT: tuple[str, ...] = ("Dom", "Seg", "Ter", "Qua", "Qui", "Sex", "Sáb")


def start_of_day(value: date | datetime | str) -> date:
    """Normalize a date, datetime or ISO string to a calendar day."""
    if isinstance(value, str):
        return parse_date(value)
    if isinstance(value, datetime):
        return value.date()
    return value


def parse_date(value: str) -> date:
    """Parse ``YYYY-MM-DD`` (a trailing time part is ignored)."""
    return date.fromisoformat(value[:10])


def format_date_iso(d: date) -> str:
    return start_of_day(d).isoformat()


def days_between(start: date | datetime | str, end: date | datetime | str) -> int:
    """Calendar-day difference, positive when ``end`` is after ``start``."""
    return (start_of_day(end) - start_of_day(start)).days


def add_days(d: date | datetime | str, days: int) -> date:
    return start_of_day(d) + timedelta(days=days)


def day_of_week(d: date | datetime | str) -> int:
    """Return weekday with 0 = Sunday, 6 = Saturday."""
    return (start_of_day(d).weekday() + 1) % 7


def day_name(weekday: int, short: bool = False) -> str:
    return DAY_NAMES_PT_SHORT[weekday] if short else DAY_NAMES_PT[weekday]


def week_dates_from_monday(base: date | datetime | str) -> list[date]:
    """Return the 7 dates (Monday..Sunday) of the week containing ``base``."""
    d = start_of_day(base)
    monday = d - timedelta(days=d.weekday())
    return [monday + timedelta(days=i) for i in range(7)]
