from pydantic import Field

from conectidade.schemas.base import CamelModel
from conectidade.schemas.user import PublicUser

# ======================
# AUTH SCHEMAS
# ======================


class LoginRequest(CamelModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class AuthResponse(CamelModel):
    user: PublicUser
    access_token: str
    token_type: str = "bearer"


class TokenData(CamelModel):
    user_id: int
    session_id: str
