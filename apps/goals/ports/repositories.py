# apps/goals/ports/repositories.py
from abc import ABC, abstractmethod
from datetime import date
from typing import List, Optional
from apps.goals.domain.entities import GoalEntity


class IGoalRepository(ABC):
    """
    Operacje na celach zawężone do grupy (group_id).
    Własność grupy sprawdza wcześniej Ownership Guard.
    """

    @abstractmethod
    def list_goals(self, group_id: int) -> List[GoalEntity]:
        pass

    @abstractmethod
    def get_goal(self, group_id: int, goal_id: int) -> Optional[GoalEntity]:
        pass

    @abstractmethod
    def create_goal(self, group_id: int, title: str, description: str,
                    deadline: Optional[date], stage: int) -> int:
        pass

    @abstractmethod
    def update_goal_fields(self, group_id: int, goal_id: int, title: str, description: str,
                           deadline: Optional[date], stage: int) -> int:
        """Zwraca liczbę zaktualizowanych wierszy."""
        pass

    @abstractmethod
    def update_goal_stage(self, goal_id: int, group_id: int, stage: int) -> int:
        pass

    @abstractmethod
    def delete_goal(self, group_id: int, goal_id: int) -> int:
        pass
