# apps/groups/ports/repositories.py
from abc import ABC, abstractmethod
from typing import List, Mapping, Optional
from apps.groups.domain.entities import GroupEntity, GroupDisplay, GroupLink
from apps.tones.domain.entities import ToneEntity


class IGroupRepository(ABC):
    """Każda metoda jest zawężona do właściciela (user_id)."""

    @abstractmethod
    def list_groups(self, user_id: int, criteria: Optional[Mapping] = None) -> List[GroupEntity]:
        pass

    @abstractmethod
    def get_group(self, user_id: int, group_id: int) -> Optional[GroupEntity]:
        """Zwraca None, gdy grupa nie istnieje LUB należy do kogoś innego."""
        pass

    @abstractmethod
    def create_group(self, user_id: int, title: str, description: str, tone_id: int) -> int:
        pass

    @abstractmethod
    def update_group(self, user_id: int, group_id: int, title: str, description: str, tone_id: int) -> int:
        """Zwraca liczbę zaktualizowanych wierszy (0 = brak/nie twoja)."""
        pass

    @abstractmethod
    def delete_group(self, user_id: int, group_id: int) -> int:
        """Usuwa grupę razem z jej celami. Zwraca liczbę usuniętych grup."""
        pass

    @abstractmethod
    def list_tones(self, user_id: int) -> List[ToneEntity]:
        """Tony globalne + prywatne tony użytkownika."""
        pass

    @abstractmethod
    def get_group_with_tone(self, user_id: int, group_id: int) -> Optional[GroupDisplay]:
        pass

    @abstractmethod
    def list_group_links(self, user_id: int) -> List[GroupLink]:
        pass
