# apps/tones/domain/entities.py
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class ToneEntity:
    id: Optional[int]
    name: str
    stages: List[str] = field(default_factory=list)
    deadline: str = "soft"
    is_global: bool = False
    greeting: str = ""
    unmet_behavior: str = "nothing"
    user_id: Optional[int] = None  # None = ton globalny
