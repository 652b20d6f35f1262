"""Display helpers for minutes and short localized dates."""

from datetime import date

MONTH_ABBR_PT: tuple[str, ...] = ("jan", "fev", "mar", "abr", "mai", "jun", "jul", "ago", "set", "out", "nov", "dez")


def format_minutes(minutes: int) -> str:
    """Format minutes as ``45min``, ``2h`` or ``1h 30min``."""
    if minutes < 60:
        return f"{minutes}min"
    hours, rest = divmod(minutes, 60)
    return f"{hours}h {rest}min" if rest > 0 else f"{hours}h"


def format_date_short(d: date) -> str:
    """Format a date as ``20 dez`` (day + Portuguese month abbreviation)."""
    return f"{d.day:02d} {MONTH_ABBR_PT[d.month - 1]}"
