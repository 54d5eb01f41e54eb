# conectidade/schemas/__init__.py

from .enums import ConnectionRole, ConnectionStatus, SkillLevel, UserType

# User schemas
from .user import InsertUser, PublicUser, User

# Skill schemas
from .skill import (
    InsertSkill,
    InsertUserSkill,
    Skill,
    UserSkill,
    UserSkillUpdate,
    UserSkillWithSkill,
)

# Connection schemas
from .connection import (
    Connection,
    ConnectionStatusUpdate,
    ConnectionWithPublicUser,
    ConnectionWithUser,
    InsertConnection,
)

from .category import Category, InsertCategory
from .auth import AuthResponse, LoginRequest, TokenData
from .validation import parse_payload

__all__ = [
    "ConnectionRole",
    "ConnectionStatus",
    "SkillLevel",
    "UserType",
    "InsertUser",
    "PublicUser",
    "User",
    "InsertSkill",
    "InsertUserSkill",
    "Skill",
    "UserSkill",
    "UserSkillUpdate",
    "UserSkillWithSkill",
    "Connection",
    "ConnectionStatusUpdate",
    "ConnectionWithPublicUser",
    "ConnectionWithUser",
    "InsertConnection",
    "Category",
    "InsertCategory",
    "AuthResponse",
    "LoginRequest",
    "TokenData",
    "parse_payload",
]
