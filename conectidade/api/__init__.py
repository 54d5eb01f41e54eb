# conectidade/api/__init__.py
# This file makes the api directory a Python package.

from . import auth
from . import categories
from . import connections
from . import skills
from . import user_skills

__all__ = [
    "auth",
    "categories",
    "skills",
    "user_skills",
    "connections",
]
