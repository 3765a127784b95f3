# apps/goals/domain/entities.py
from dataclasses import dataclass
from typing import Optional
from datetime import date

from apps.goals.domain.deadlines import DeadlineStatus, deadline_status


@dataclass
class GoalEntity:
    id: Optional[int]
    title: str
    group_id: int
    stage: int = 0  # 0-3 kolumny tablicy, 4 = poza tablicą
    description: str = ""
    deadline: Optional[date] = None

    @property
    def deadline_status(self) -> Optional[DeadlineStatus]:
        return deadline_status(self.deadline)
