from typing import Optional

from pydantic import Field, PositiveInt

from conectidade.schemas.base import CamelModel
from conectidade.schemas.enums import SkillLevel


# ======================
# SKILL SCHEMAS
# ======================

class InsertSkill(CamelModel):
    name: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1)
    description: Optional[str] = None
    icon_name: Optional[str] = None


class Skill(InsertSkill):
    id: int


# ======================
# USER_SKILL SCHEMAS
# ======================

class InsertUserSkill(CamelModel):
    user_id: PositiveInt
    skill_id: PositiveInt
    is_teaching: bool = False
    is_learning: bool = False
    level: SkillLevel = SkillLevel.BEGINNER


class UserSkill(InsertUserSkill):
    pass


class UserSkillUpdate(CamelModel):
    """Partial update; the (userId, skillId) key is not part of it."""

    is_teaching: Optional[bool] = None
    is_learning: Optional[bool] = None
    level: Optional[SkillLevel] = None


class UserSkillWithSkill(UserSkill):
    skill: Skill
