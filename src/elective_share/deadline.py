"""Filing deadline for the elective share petition."""

import math
from datetime import date, datetime, timedelta
from typing import Optional

from .models import DeadlineState, DeadlineStatus

DEFAULT_DEADLINE_MONTHS = 6
DEFAULT_URGENT_DAYS = 30

SECONDS_PER_DAY = 24 * 60 * 60


def add_months(start: date, months: int) -> date:
    """Advance a date by whole calendar months, carrying day overflow.

    The day of month is kept as is; when the target month is shorter the
    surplus days roll into the following month (Aug 31 + 6 months is
    Mar 3, or Mar 2 in a leap year). Month-end is not clamped.
    """
    month_index = start.month - 1 + months
    year = start.year + month_index // 12
    month = month_index % 12 + 1
    return date(year, month, 1) + timedelta(days=start.day - 1)


def calculate_deadline(
    letters_issued: Optional[date],
    months: int = DEFAULT_DEADLINE_MONTHS,
) -> Optional[date]:
    """Deadline to file, or None when letters have not issued."""
    if letters_issued is None:
        return None
    return add_months(letters_issued, months)


def days_remaining(deadline: date, now: datetime) -> int:
    """Whole days left until the start of the deadline day, rounded up."""
    due = datetime.combine(deadline, datetime.min.time(), tzinfo=now.tzinfo)
    return math.ceil((due - now).total_seconds() / SECONDS_PER_DAY)


def classify_deadline(
    deadline: Optional[date],
    now: Optional[datetime] = None,
    urgent_days: int = DEFAULT_URGENT_DAYS,
) -> Optional[DeadlineStatus]:
    """Classify a deadline as passed, urgent or ok relative to ``now``.

    ``now`` defaults to the current local time.
    """
    if deadline is None:
        return None

    now = now or datetime.now()
    due = datetime.combine(deadline, datetime.min.time(), tzinfo=now.tzinfo)
    remaining = days_remaining(deadline, now)

    if due < now:
        state = DeadlineState.PASSED
    elif remaining <= urgent_days:
        state = DeadlineState.URGENT
    else:
        state = DeadlineState.OK

    return DeadlineStatus(deadline=deadline, status=state, days_remaining=remaining)
