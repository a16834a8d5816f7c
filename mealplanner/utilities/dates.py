"""Week identifier helpers.

A week is identified by the ISO date (YYYY-MM-DD) of its Monday. Meal plans
number days Sunday=0 .. Saturday=6 inside that Monday-anchored week, so
Sunday is the last calendar day of the week.
"""
import re
from datetime import date as _date, datetime, timedelta
from typing import Any, Dict, List, Optional

from mealplanner.utilities.constants import DATE_FORMAT

ISO_DATE_PATTERN = re.compile(r'^\d{4}-\d{2}-\d{2}$')


def parse_iso_date(value: str) -> _date:
    """Parse YYYY-MM-DD; raises ValueError on anything else."""
    if not isinstance(value, str) or not ISO_DATE_PATTERN.match(value):
        raise ValueError(f"Expected a YYYY-MM-DD date, got {value!r}")
    return datetime.strptime(value, DATE_FORMAT).date()


def is_iso_date(value: Any) -> bool:
    try:
        parse_iso_date(value)
    except ValueError:
        return False
    return True


def week_start_for(day: Optional[_date] = None) -> str:
    """Week identifier (Monday) of the week containing ``day`` (default today)."""
    day = day or _date.today()
    monday = day - timedelta(days=day.weekday())
    return monday.strftime(DATE_FORMAT)


def day_date(week_start: str, day_of_week: int) -> _date:
    """Calendar date of a Sunday=0 day index within the week starting ``week_start``."""
    if not 0 <= day_of_week <= 6:
        raise ValueError(f"day_of_week must be 0..6, got {day_of_week}")
    monday = parse_iso_date(week_start)
    offset = 6 if day_of_week == 0 else day_of_week - 1
    return monday + timedelta(days=offset)


def gen_weeks(first_monday: _date, count: int = 12, today: Optional[_date] = None) -> List[Dict[str, Any]]:
    """Generate a list of weeks (start/end/label/is_current) for week pickers."""
    today = today or _date.today()
    weeks = []
    for i in range(count):
        start = first_monday + timedelta(weeks=i)
        end = start + timedelta(days=6)
        weeks.append({
            "start": start.strftime(DATE_FORMAT),
            "end": end.strftime(DATE_FORMAT),
            "label": f"{start.month}/{start.day}/{start.year} - {end.month}/{end.day}/{end.year}",
            "is_current": start <= today <= end,
        })
    return weeks

__all__ = ['parse_iso_date', 'is_iso_date', 'week_start_for', 'day_date', 'gen_weeks']
