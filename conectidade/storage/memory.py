# conectidade/storage/memory.py
"""
Reference in-memory storage.

Plain dicts per entity and one id counter per entity type, starting at 1.
It is meant for a single process handling one request at a time: nothing here
awaits in the middle of an operation, so no locking is needed.
"""

import logging
from datetime import datetime, timezone
from typing import Dict, List, Optional, Tuple

from conectidade import schemas
from conectidade.errors import UsernameTakenError
from conectidade.schemas.enums import ConnectionRole, ConnectionStatus
from conectidade.storage.base import Storage, check_status_change
from conectidade.storage.seed import SEED_CATEGORIES, SEED_SKILLS
from conectidade.storage.sessions import MemorySessionStore

logger = logging.getLogger(__name__)


class MemStorage(Storage):
    def __init__(self, session_store: Optional[MemorySessionStore] = None, seed: bool = True):
        self._users: Dict[int, schemas.User] = {}
        self._skills: Dict[int, schemas.Skill] = {}
        self._user_skills: Dict[Tuple[int, int], schemas.UserSkill] = {}
        self._connections: Dict[int, schemas.Connection] = {}
        self._categories: Dict[int, schemas.Category] = {}
        self._next_id = {
            "users": 1,
            "skills": 1,
            "connections": 1,
            "categories": 1,
        }
        self.session_store = session_store or MemorySessionStore()

        if seed:
            self._load_seed_data()

    def _allocate_id(self, entity: str) -> int:
        new_id = self._next_id[entity]
        self._next_id[entity] += 1
        return new_id

    def _load_seed_data(self) -> None:
        for category in SEED_CATEGORIES:
            self._insert_category(schemas.InsertCategory(**category))
        for skill in SEED_SKILLS:
            self._insert_skill(schemas.InsertSkill(**skill))

    # ======================
    # USERS
    # ======================
    async def get_user(self, user_id: int) -> Optional[schemas.User]:
        user = self._users.get(user_id)
        return user.model_copy() if user else None

    async def get_user_by_username(self, username: str) -> Optional[schemas.User]:
        for user in self._users.values():
            if user.username == username:
                return user.model_copy()
        return None

    async def create_user(self, data: schemas.InsertUser) -> schemas.User:
        if await self.get_user_by_username(data.username):
            raise UsernameTakenError()

        user = schemas.User(id=self._allocate_id("users"), **data.model_dump())
        self._users[user.id] = user
        return user.model_copy()

    # ======================
    # SKILLS
    # ======================
    async def get_skill(self, skill_id: int) -> Optional[schemas.Skill]:
        skill = self._skills.get(skill_id)
        return skill.model_copy() if skill else None

    async def get_skills(self) -> List[schemas.Skill]:
        return [skill.model_copy() for skill in self._skills.values()]

    async def get_skills_by_category(self, category: str) -> List[schemas.Skill]:
        return [
            skill.model_copy()
            for skill in self._skills.values()
            if skill.category == category
        ]

    async def create_skill(self, data: schemas.InsertSkill) -> schemas.Skill:
        return self._insert_skill(data).model_copy()

    def _insert_skill(self, data: schemas.InsertSkill) -> schemas.Skill:
        skill = schemas.Skill(id=self._allocate_id("skills"), **data.model_dump())
        self._skills[skill.id] = skill
        return skill

    # ======================
    # USER SKILLS
    # ======================
    async def get_user_skills(self, user_id: int) -> List[schemas.UserSkillWithSkill]:
        result = []
        for (owner_id, skill_id), user_skill in self._user_skills.items():
            if owner_id != user_id:
                continue
            skill = self._skills.get(skill_id)
            if skill is None:
                continue
            result.append(
                schemas.UserSkillWithSkill(**user_skill.model_dump(), skill=skill.model_copy())
            )
        return result

    async def add_user_skill(self, data: schemas.InsertUserSkill) -> schemas.UserSkill:
        user_skill = schemas.UserSkill(**data.model_dump())
        self._user_skills[(user_skill.user_id, user_skill.skill_id)] = user_skill
        return user_skill.model_copy()

    async def update_user_skill(
        self,
        user_id: int,
        skill_id: int,
        updates: schemas.UserSkillUpdate,
    ) -> Optional[schemas.UserSkill]:
        key = (user_id, skill_id)
        user_skill = self._user_skills.get(key)
        if user_skill is None:
            return None

        changes = updates.model_dump(exclude_unset=True, exclude_none=True)
        updated = user_skill.model_copy(update=changes)
        self._user_skills[key] = updated
        return updated.model_copy()

    async def remove_user_skill(self, user_id: int, skill_id: int) -> None:
        self._user_skills.pop((user_id, skill_id), None)

    # ======================
    # CONNECTIONS
    # ======================
    async def get_connection(self, connection_id: int) -> Optional[schemas.Connection]:
        connection = self._connections.get(connection_id)
        return connection.model_copy() if connection else None

    async def get_connections(
        self,
        user_id: int,
        role: ConnectionRole,
    ) -> List[schemas.ConnectionWithUser]:
        as_teacher = ConnectionRole(role) == ConnectionRole.TEACHER
        result = []
        for connection in self._connections.values():
            own_id = connection.teacher_id if as_teacher else connection.student_id
            if own_id != user_id:
                continue
            other_id = connection.student_id if as_teacher else connection.teacher_id
            other = self._users.get(other_id)
            if other is None:
                continue
            result.append(
                schemas.ConnectionWithUser(**connection.model_dump(), user=other.model_copy())
            )
        return result

    async def create_connection(self, data: schemas.InsertConnection) -> schemas.Connection:
        connection = schemas.Connection(
            id=self._allocate_id("connections"),
            **data.model_dump(),
            status=ConnectionStatus.PENDING,
            created_at=datetime.now(timezone.utc),
        )
        self._connections[connection.id] = connection
        logger.info(
            "Connection %s created (teacher_id=%s, student_id=%s)",
            connection.id,
            connection.teacher_id,
            connection.student_id,
        )
        return connection.model_copy()

    async def update_connection_status(
        self,
        connection_id: int,
        status: ConnectionStatus,
    ) -> Optional[schemas.Connection]:
        connection = self._connections.get(connection_id)
        if connection is None:
            return None

        target = check_status_change(connection.status, status)
        updated = connection.model_copy(update={"status": target.value})
        self._connections[connection_id] = updated
        logger.info("Connection %s is now %s", connection_id, target.value)
        return updated.model_copy()

    # ======================
    # CATEGORIES
    # ======================
    async def get_categories(self) -> List[schemas.Category]:
        return [category.model_copy() for category in self._categories.values()]

    async def get_popular_categories(self, limit: int = 5) -> List[schemas.Category]:
        return [category.model_copy() for category in list(self._categories.values())[:limit]]

    async def get_category(self, category_id: int) -> Optional[schemas.Category]:
        category = self._categories.get(category_id)
        return category.model_copy() if category else None

    async def create_category(self, data: schemas.InsertCategory) -> schemas.Category:
        return self._insert_category(data).model_copy()

    def _insert_category(self, data: schemas.InsertCategory) -> schemas.Category:
        category = schemas.Category(id=self._allocate_id("categories"), **data.model_dump())
        self._categories[category.id] = category
        return category
