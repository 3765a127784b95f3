from datetime import date

from django.utils import timezone

from apps.goals.domain.deadlines import deadline_status, humanize_span
from apps.goals.domain.entities import GoalEntity

TODAY = date(2024, 3, 10)


def test_no_deadline():
    assert deadline_status(None, TODAY) is None
    assert GoalEntity(id=1, title='x', group_id=1).deadline_status is None


def test_due_today():
    status = deadline_status(TODAY, TODAY)
    assert status.is_due_today
    assert not status.is_overdue
    assert status.label == "due today"


def test_future_deadline():
    status = deadline_status(date(2024, 4, 13), TODAY)
    assert status.days_left == 34
    assert status.label == "due in 1 month, 3 days"


def test_overdue_deadline():
    status = deadline_status(date(2024, 3, 9), TODAY)
    assert status.is_overdue
    assert status.label == "1 day overdue"


def test_humanize_span_keeps_two_largest_units():
    assert humanize_span(date(2022, 1, 1), date(2024, 3, 5)) == "2 years, 2 months"


def test_default_today_follows_configured_time_zone(monkeypatch):
    monkeypatch.setattr(timezone, 'localdate', lambda: TODAY)

    assert deadline_status(TODAY).is_due_today
    assert deadline_status(date(2024, 3, 11)).label == "due in 1 day"
