from __future__ import annotations

import logging
from datetime import date, datetime, timedelta
from typing import Dict, List, Optional, Sequence, Union

import numpy as np

from .config import DATE_FORMAT, ISO_DATE_FORMAT
from .structure import Assignment

logger = logging.getLogger(__name__)

DateLike = Union[str, date]


def parse_start_date(value: DateLike) -> date:
    """Accept a ``yyyy-mm-dd`` string or a date object."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return datetime.strptime(str(value).strip(), ISO_DATE_FORMAT).date()
    except ValueError as exc:
        raise ValueError(f"Start date must use yyyy-mm-dd, got {value!r}") from exc


def format_date(value: date) -> str:
    return value.strftime(DATE_FORMAT)


def is_future_start(start: date, today: Optional[date] = None) -> bool:
    return start > (today or date.today())


def working_days(start: date, today: Optional[date] = None) -> List[date]:
    """Weekdays in [start, today]; falls back to ``[start]`` when there are none."""
    today = today or date.today()
    if start > today:
        return [start]

    days: List[date] = []
    current = start
    while current <= today:
        if current.weekday() < 5:
            days.append(current)
        current += timedelta(days=1)
    return days or [start]


def assign_dates(
    assignments: Sequence[Assignment],
    start: date,
    today: Optional[date] = None,
    rng: Optional[np.random.Generator] = None,
) -> Dict[str, str]:
    """Draw one working day per assignment, shared by every student."""
    rng = rng if rng is not None else np.random.default_rng()
    pool = working_days(start, today)
    logger.debug("Drawing assignment dates from %d candidate day(s)", len(pool))

    dates: Dict[str, str] = {}
    for assignment in assignments:
        dates[assignment.name] = format_date(pool[int(rng.integers(len(pool)))])
    return dates
