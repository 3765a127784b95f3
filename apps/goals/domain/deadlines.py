# apps/goals/domain/deadlines.py
from dataclasses import dataclass
from datetime import date
from typing import Optional

from dateutil.relativedelta import relativedelta
from django.utils import timezone


@dataclass(frozen=True)
class DeadlineStatus:
    days_left: int
    label: str

    @property
    def is_overdue(self) -> bool:
        return self.days_left < 0

    @property
    def is_due_today(self) -> bool:
        return self.days_left == 0


def _pluralize(count: int, unit: str) -> str:
    return f"{count} {unit}" if count == 1 else f"{count} {unit}s"


def humanize_span(start: date, end: date) -> str:
    """Np. '1 month, 3 days' - tylko dwie największe jednostki."""
    delta = relativedelta(end, start)
    parts = []
    for count, unit in ((delta.years, 'year'), (delta.months, 'month'), (delta.days, 'day')):
        if count:
            parts.append(_pluralize(count, unit))
    return ", ".join(parts[:2])


def deadline_status(deadline: Optional[date], today: Optional[date] = None) -> Optional[DeadlineStatus]:
    if deadline is None:
        return None

    # "Dziś" w strefie TIME_ZONE, nie serwera
    today = today or timezone.localdate()
    days_left = (deadline - today).days

    if days_left == 0:
        return DeadlineStatus(days_left=0, label="due today")
    if days_left > 0:
        return DeadlineStatus(days_left=days_left, label=f"due in {humanize_span(today, deadline)}")
    return DeadlineStatus(days_left=days_left, label=f"{humanize_span(deadline, today)} overdue")
