from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError, jwt
from passlib.context import CryptContext

from conectidade import schemas
from conectidade.config import Settings
from conectidade.dependencies import get_settings, get_storage
from conectidade.errors import AuthenticationRequired
from conectidade.storage import Storage


# ==========================
# AUTH CONFIG
# ==========================

# auto_error=False: a missing header is reported through AuthenticationRequired.
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="api/login", auto_error=False)

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto"
)


# ==========================
# PASSWORD UTILS
# ==========================

def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(_truncate_for_bcrypt(plain_password), hashed_password)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(_truncate_for_bcrypt(password))


def _truncate_for_bcrypt(password: str) -> str:
    """Bcrypt only reads the first 72 bytes."""
    password_bytes = password.encode("utf-8")
    if len(password_bytes) > 72:
        password = password_bytes[:72].decode("utf-8", errors="ignore")
    return password


# ==========================
# JWT TOKEN
# ==========================

def create_access_token(
    user_id: int,
    session_id: str,
    settings: Settings,
    expires_delta: Optional[timedelta] = None,
) -> str:
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    )
    to_encode = {"sub": str(user_id), "sid": session_id, "exp": expire}
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_access_token(token: str, settings: Settings) -> Optional[schemas.TokenData]:
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError:
        return None

    sub = payload.get("sub")
    sid = payload.get("sid")
    if sub is None or not sid:
        return None
    try:
        return schemas.TokenData(user_id=int(sub), session_id=sid)
    except ValueError:
        return None


# ==========================
# AUTH HELPERS
# ==========================

async def start_session(storage: Storage, user: schemas.User, settings: Settings) -> str:
    session_id = storage.session_store.create(user.id)
    return create_access_token(user.id, session_id, settings)


async def authenticate_user(storage: Storage, username: str, password: str) -> Optional[schemas.User]:
    user = await storage.get_user_by_username(username)
    if not user:
        return None
    if not verify_password(password, user.password):
        return None
    return user


async def get_token_data(
    token: Optional[str] = Depends(oauth2_scheme),
    storage: Storage = Depends(get_storage),
    settings: Settings = Depends(get_settings),
) -> Optional[schemas.TokenData]:
    """Token claims if the bearer token is valid and its session is alive."""
    if not token:
        return None
    token_data = decode_access_token(token, settings)
    if token_data is None:
        return None
    if storage.session_store.get(token_data.session_id) != token_data.user_id:
        return None
    return token_data


async def get_current_user(
    token_data: Optional[schemas.TokenData] = Depends(get_token_data),
    storage: Storage = Depends(get_storage),
) -> schemas.User:
    if token_data is None:
        raise AuthenticationRequired()

    user = await storage.get_user(token_data.user_id)
    if user is None:
        raise AuthenticationRequired()
    return user
