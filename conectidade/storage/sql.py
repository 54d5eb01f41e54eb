# conectidade/storage/sql.py
"""
Storage over the relational schema in ``conectidade.models``.

Each operation opens its own SQLAlchemy session and commits before
returning, so callers get read-after-write consistency within the process.
Identifiers come from the tables' serial primary keys.
"""

import logging
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy.exc import IntegrityError

from conectidade import models, schemas
from conectidade.database import Base, make_session_factory
from conectidade.errors import UsernameTakenError
from conectidade.schemas.enums import ConnectionRole, ConnectionStatus
from conectidade.storage.base import Storage, check_status_change
from conectidade.storage.seed import SEED_CATEGORIES, SEED_SKILLS
from conectidade.storage.sessions import MemorySessionStore

logger = logging.getLogger(__name__)


class SqlStorage(Storage):
    def __init__(
        self,
        engine,
        session_store: Optional[MemorySessionStore] = None,
        seed: bool = True,
        create_tables: bool = True,
    ):
        self.engine = engine
        self.SessionLocal = make_session_factory(engine)
        self.session_store = session_store or MemorySessionStore()

        if create_tables:
            Base.metadata.create_all(bind=engine)
        if seed:
            self._load_seed_data()

    def _load_seed_data(self) -> None:
        with self.SessionLocal() as db:
            if db.query(models.Category.id).first() is None:
                db.add_all(models.Category(**category) for category in SEED_CATEGORIES)
            if db.query(models.Skill.id).first() is None:
                db.add_all(models.Skill(**skill) for skill in SEED_SKILLS)
            db.commit()

    # ======================
    # USERS
    # ======================
    async def get_user(self, user_id: int) -> Optional[schemas.User]:
        with self.SessionLocal() as db:
            user = db.get(models.User, user_id)
            return schemas.User.model_validate(user) if user else None

    async def get_user_by_username(self, username: str) -> Optional[schemas.User]:
        with self.SessionLocal() as db:
            user = db.query(models.User).filter(models.User.username == username).first()
            return schemas.User.model_validate(user) if user else None

    async def create_user(self, data: schemas.InsertUser) -> schemas.User:
        with self.SessionLocal() as db:
            existing = db.query(models.User.id).filter(models.User.username == data.username).first()
            if existing:
                raise UsernameTakenError()

            user = models.User(**data.model_dump())
            db.add(user)
            try:
                db.commit()
            except IntegrityError as exc:
                db.rollback()
                raise UsernameTakenError() from exc
            db.refresh(user)
            return schemas.User.model_validate(user)

    # ======================
    # SKILLS
    # ======================
    async def get_skill(self, skill_id: int) -> Optional[schemas.Skill]:
        with self.SessionLocal() as db:
            skill = db.get(models.Skill, skill_id)
            return schemas.Skill.model_validate(skill) if skill else None

    async def get_skills(self) -> List[schemas.Skill]:
        with self.SessionLocal() as db:
            rows = db.query(models.Skill).order_by(models.Skill.id.asc()).all()
            return [schemas.Skill.model_validate(row) for row in rows]

    async def get_skills_by_category(self, category: str) -> List[schemas.Skill]:
        with self.SessionLocal() as db:
            rows = (
                db.query(models.Skill)
                .filter(models.Skill.category == category)
                .order_by(models.Skill.id.asc())
                .all()
            )
            return [schemas.Skill.model_validate(row) for row in rows]

    async def create_skill(self, data: schemas.InsertSkill) -> schemas.Skill:
        with self.SessionLocal() as db:
            skill = models.Skill(**data.model_dump())
            db.add(skill)
            db.commit()
            db.refresh(skill)
            return schemas.Skill.model_validate(skill)

    # ======================
    # USER SKILLS
    # ======================
    async def get_user_skills(self, user_id: int) -> List[schemas.UserSkillWithSkill]:
        with self.SessionLocal() as db:
            rows = (
                db.query(models.UserSkill, models.Skill)
                .join(models.Skill, models.Skill.id == models.UserSkill.skill_id)
                .filter(models.UserSkill.user_id == user_id)
                .order_by(models.UserSkill.skill_id.asc())
                .all()
            )
            return [
                schemas.UserSkillWithSkill(
                    **schemas.UserSkill.model_validate(user_skill).model_dump(),
                    skill=schemas.Skill.model_validate(skill),
                )
                for user_skill, skill in rows
            ]

    async def add_user_skill(self, data: schemas.InsertUserSkill) -> schemas.UserSkill:
        with self.SessionLocal() as db:
            # merge() on the composite primary key gives insert-or-overwrite.
            user_skill = db.merge(models.UserSkill(**data.model_dump()))
            db.commit()
            return schemas.UserSkill.model_validate(user_skill)

    async def update_user_skill(
        self,
        user_id: int,
        skill_id: int,
        updates: schemas.UserSkillUpdate,
    ) -> Optional[schemas.UserSkill]:
        with self.SessionLocal() as db:
            user_skill = db.get(models.UserSkill, (user_id, skill_id))
            if not user_skill:
                return None

            for key, value in updates.model_dump(exclude_unset=True, exclude_none=True).items():
                setattr(user_skill, key, value)
            db.commit()
            return schemas.UserSkill.model_validate(user_skill)

    async def remove_user_skill(self, user_id: int, skill_id: int) -> None:
        with self.SessionLocal() as db:
            db.query(models.UserSkill).filter(
                models.UserSkill.user_id == user_id,
                models.UserSkill.skill_id == skill_id,
            ).delete(synchronize_session=False)
            db.commit()

    # ======================
    # CONNECTIONS
    # ======================
    async def get_connection(self, connection_id: int) -> Optional[schemas.Connection]:
        with self.SessionLocal() as db:
            connection = db.get(models.Connection, connection_id)
            return schemas.Connection.model_validate(connection) if connection else None

    async def get_connections(
        self,
        user_id: int,
        role: ConnectionRole,
    ) -> List[schemas.ConnectionWithUser]:
        if ConnectionRole(role) == ConnectionRole.TEACHER:
            own_column, other_column = models.Connection.teacher_id, models.Connection.student_id
        else:
            own_column, other_column = models.Connection.student_id, models.Connection.teacher_id

        with self.SessionLocal() as db:
            rows = (
                db.query(models.Connection, models.User)
                .join(models.User, models.User.id == other_column)
                .filter(own_column == user_id)
                .order_by(models.Connection.id.asc())
                .all()
            )
            return [
                schemas.ConnectionWithUser(
                    **schemas.Connection.model_validate(connection).model_dump(),
                    user=schemas.User.model_validate(other),
                )
                for connection, other in rows
            ]

    async def create_connection(self, data: schemas.InsertConnection) -> schemas.Connection:
        with self.SessionLocal() as db:
            connection = models.Connection(
                **data.model_dump(),
                status=ConnectionStatus.PENDING.value,
                created_at=datetime.now(timezone.utc),
            )
            db.add(connection)
            db.commit()
            db.refresh(connection)
            logger.info(
                "Connection %s created (teacher_id=%s, student_id=%s)",
                connection.id,
                connection.teacher_id,
                connection.student_id,
            )
            return schemas.Connection.model_validate(connection)

    async def update_connection_status(
        self,
        connection_id: int,
        status: ConnectionStatus,
    ) -> Optional[schemas.Connection]:
        with self.SessionLocal() as db:
            connection = db.get(models.Connection, connection_id)
            if not connection:
                return None

            target = check_status_change(connection.status, status)
            connection.status = target.value
            db.commit()
            logger.info("Connection %s is now %s", connection_id, target.value)
            return schemas.Connection.model_validate(connection)

    # ======================
    # CATEGORIES
    # ======================
    async def get_categories(self) -> List[schemas.Category]:
        with self.SessionLocal() as db:
            rows = db.query(models.Category).order_by(models.Category.id.asc()).all()
            return [schemas.Category.model_validate(row) for row in rows]

    async def get_popular_categories(self, limit: int = 5) -> List[schemas.Category]:
        with self.SessionLocal() as db:
            rows = (
                db.query(models.Category)
                .order_by(models.Category.id.asc())
                .limit(limit)
                .all()
            )
            return [schemas.Category.model_validate(row) for row in rows]

    async def get_category(self, category_id: int) -> Optional[schemas.Category]:
        with self.SessionLocal() as db:
            category = db.get(models.Category, category_id)
            return schemas.Category.model_validate(category) if category else None

    async def create_category(self, data: schemas.InsertCategory) -> schemas.Category:
        with self.SessionLocal() as db:
            category = models.Category(**data.model_dump())
            db.add(category)
            db.commit()
            db.refresh(category)
            return schemas.Category.model_validate(category)
