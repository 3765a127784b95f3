# apps/groups/domain/entities.py
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class GroupEntity:
    id: Optional[int]  # ID może być None przed zapisem
    title: str
    tone_id: int
    user_id: int
    description: str = ""


@dataclass
class GroupDisplay:
    """Grupa złączona z tonem - tylko do renderowania."""
    id: int
    title: str
    description: str = ""
    tone_name: str = ""
    stages: List[str] = field(default_factory=list)
    greeting: str = ""
    deadline: str = "soft"
    unmet_behavior: str = "nothing"

    @property
    def deadlines_enabled(self) -> bool:
        return self.deadline != "off"


@dataclass
class GroupLink:
    """Pozycja w sidebarze nawigacji."""
    id: int
    title: str
