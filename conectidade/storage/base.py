# conectidade/storage/base.py
"""
Storage contract.

Every read and write of users, skills, user skills, connections and
categories goes through a ``Storage``. Route handlers receive one through
dependency injection, so the in-memory store can be swapped for the SQL one
without touching them.

Lookups that find nothing return ``None``; turning that into a 404 is the
caller's job.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from conectidade import schemas
from conectidade.errors import ValidationError
from conectidade.schemas.enums import DECIDED_STATUSES, ConnectionRole, ConnectionStatus
from conectidade.storage.sessions import MemorySessionStore


class Storage(ABC):
    session_store: MemorySessionStore

    # ======================
    # USERS
    # ======================
    @abstractmethod
    async def get_user(self, user_id: int) -> Optional[schemas.User]: ...

    @abstractmethod
    async def get_user_by_username(self, username: str) -> Optional[schemas.User]: ...

    @abstractmethod
    async def create_user(self, data: schemas.InsertUser) -> schemas.User:
        """Insert a user. Raises ``UsernameTakenError`` if the username exists."""

    # ======================
    # SKILLS
    # ======================
    @abstractmethod
    async def get_skill(self, skill_id: int) -> Optional[schemas.Skill]: ...

    @abstractmethod
    async def get_skills(self) -> List[schemas.Skill]: ...

    @abstractmethod
    async def get_skills_by_category(self, category: str) -> List[schemas.Skill]: ...

    @abstractmethod
    async def create_skill(self, data: schemas.InsertSkill) -> schemas.Skill: ...

    # ======================
    # USER SKILLS
    # ======================
    @abstractmethod
    async def get_user_skills(self, user_id: int) -> List[schemas.UserSkillWithSkill]:
        """User skills joined with their skill; rows whose skill is gone are skipped."""

    @abstractmethod
    async def add_user_skill(self, data: schemas.InsertUserSkill) -> schemas.UserSkill:
        """Upsert keyed by (user_id, skill_id)."""

    @abstractmethod
    async def update_user_skill(
        self,
        user_id: int,
        skill_id: int,
        updates: schemas.UserSkillUpdate,
    ) -> Optional[schemas.UserSkill]: ...

    @abstractmethod
    async def remove_user_skill(self, user_id: int, skill_id: int) -> None:
        """Delete the row if present. Removing a missing key is not an error."""

    # ======================
    # CONNECTIONS
    # ======================
    @abstractmethod
    async def get_connection(self, connection_id: int) -> Optional[schemas.Connection]: ...

    @abstractmethod
    async def get_connections(
        self,
        user_id: int,
        role: ConnectionRole,
    ) -> List[schemas.ConnectionWithUser]:
        """
        Connections where ``user_id`` plays ``role``, each joined with the
        other party (the student for a teacher, the teacher for a student).
        """

    @abstractmethod
    async def create_connection(self, data: schemas.InsertConnection) -> schemas.Connection:
        """New connections always start out pending, stamped with the current time."""

    @abstractmethod
    async def update_connection_status(
        self,
        connection_id: int,
        status: ConnectionStatus,
    ) -> Optional[schemas.Connection]:
        """
        Accept or reject a pending connection.

        The caller must already have checked that the requester is one of the
        two parties.
        """

    # ======================
    # CATEGORIES
    # ======================
    @abstractmethod
    async def get_categories(self) -> List[schemas.Category]: ...

    @abstractmethod
    async def get_popular_categories(self, limit: int = 5) -> List[schemas.Category]:
        """First ``limit`` categories in creation order (no ranking)."""

    @abstractmethod
    async def get_category(self, category_id: int) -> Optional[schemas.Category]: ...

    @abstractmethod
    async def create_category(self, data: schemas.InsertCategory) -> schemas.Category: ...


def check_status_change(current: str, requested: str) -> ConnectionStatus:
    """
    Shared transition rule: only pending connections move, and only to
    accepted or rejected. Repeating the current decision is allowed.
    """
    try:
        target = ConnectionStatus(requested)
    except ValueError:
        target = None
    if target not in DECIDED_STATUSES:
        raise ValidationError.single("status", "Status must be 'accepted' or 'rejected'")
    if current != ConnectionStatus.PENDING and current != target:
        raise ValidationError.single("status", f"Connection is already {ConnectionStatus(current).value}")
    return target
