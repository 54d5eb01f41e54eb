# conectidade/api/auth.py
"""
Registration, login and logout.

Logging in opens a server-side session in the storage's session store and
hands back a bearer token bound to it; logging out destroys the session, so
the token stops working even before it expires.
"""

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, status

from conectidade import schemas
from conectidade.config import Settings
from conectidade.dependencies import get_settings, get_storage
from conectidade.errors import AuthenticationRequired
from conectidade.storage import Storage
from conectidade.utils.security import (
    authenticate_user,
    get_current_user,
    get_password_hash,
    get_token_data,
    start_session,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Authentication"])


# ===== REGISTER ENDPOINT =====

@router.post("/register", response_model=schemas.AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(
    payload: Dict[str, Any] = Body(...),
    storage: Storage = Depends(get_storage),
    settings: Settings = Depends(get_settings),
):
    """Create the account and log it in straight away."""
    data = schemas.parse_payload(schemas.InsertUser, payload)

    user = await storage.create_user(
        data.model_copy(update={"password": get_password_hash(data.password)})
    )
    logger.info("Registered user %s (%s)", user.id, user.user_type)

    access_token = await start_session(storage, user, settings)
    return schemas.AuthResponse(user=schemas.PublicUser.model_validate(user), access_token=access_token)


# ===== LOGIN ENDPOINT =====

@router.post("/login", response_model=schemas.AuthResponse)
async def login(
    payload: Dict[str, Any] = Body(...),
    storage: Storage = Depends(get_storage),
    settings: Settings = Depends(get_settings),
):
    credentials = schemas.parse_payload(schemas.LoginRequest, payload)

    user = await authenticate_user(storage, credentials.username, credentials.password)
    if not user:
        logger.info("Failed login for username %r", credentials.username)
        raise AuthenticationRequired("Invalid username or password")

    access_token = await start_session(storage, user, settings)
    return schemas.AuthResponse(user=schemas.PublicUser.model_validate(user), access_token=access_token)


# ===== LOGOUT ENDPOINT =====

@router.post("/logout")
async def logout(
    token_data: Optional[schemas.TokenData] = Depends(get_token_data),
    storage: Storage = Depends(get_storage),
):
    if token_data is not None:
        storage.session_store.destroy(token_data.session_id)
        logger.info("User %s logged out", token_data.user_id)
    return {"message": "Logged out"}


# ===== CURRENT USER =====

@router.get("/user", response_model=schemas.PublicUser)
async def read_current_user(current_user: schemas.User = Depends(get_current_user)):
    return current_user
