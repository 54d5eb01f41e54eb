from typing import Annotated

from pydantic import Field, StringConstraints

from conectidade.schemas.base import CamelModel
from conectidade.schemas.enums import UserType

Name = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=100)]
Username = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=100)]


# ======================
# USER SCHEMAS
# ======================

class InsertUser(CamelModel):
    name: Name
    username: Username
    password: str = Field(..., min_length=1)
    user_type: UserType = UserType.LEARN


class User(CamelModel):
    id: int
    name: str
    username: str
    # Stored exactly as handed over by the auth layer; never serialized.
    password: str = Field(..., exclude=True, repr=False)
    user_type: UserType


class PublicUser(CamelModel):
    id: int
    name: str
    username: str
    user_type: UserType
