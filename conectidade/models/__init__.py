# conectidade/models/__init__.py
# Import models in dependency order
from .user import User
from .skill import Skill, UserSkill
from .connection import Connection
from .category import Category

__all__ = ["User", "Skill", "UserSkill", "Connection", "Category"]
