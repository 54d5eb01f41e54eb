# conectidade/api/connections.py
"""
Teacher/student connection requests.

Either party may propose a connection; the caller becomes the side not named
in the body. Either party may then accept or reject it.
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, status

from conectidade import schemas
from conectidade.dependencies import get_storage
from conectidade.errors import AuthorizationDenied, NotFoundError, ValidationError
from conectidade.schemas.enums import ConnectionRole
from conectidade.storage import Storage
from conectidade.utils.params import parse_id
from conectidade.utils.security import get_current_user

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/connections", tags=["Connections"])


# ======================
# HELPER FUNCTIONS
# ======================
def _counterpart_field(payload: Dict[str, Any]) -> str:
    """Which side the body names; exactly one of the two is allowed."""
    given = [field for field in ("teacherId", "studentId") if payload.get(field) is not None]
    if len(given) != 1:
        raise ValidationError.single(
            "teacherId",
            "Either teacherId or studentId must be provided, not both",
        )
    return given[0]


def _is_party(connection: schemas.Connection, user_id: int) -> bool:
    return user_id in (connection.teacher_id, connection.student_id)


# ======================
# GET: My connections as teacher or student
# ======================
@router.get("", response_model=List[schemas.ConnectionWithPublicUser])
async def list_my_connections(
    role: Optional[str] = None,
    current_user: schemas.User = Depends(get_current_user),
    storage: Storage = Depends(get_storage),
):
    # Anything other than "teacher" lists the caller's connections as student.
    side = ConnectionRole.TEACHER if role == ConnectionRole.TEACHER.value else ConnectionRole.STUDENT
    return await storage.get_connections(current_user.id, side)


# ======================
# POST: Propose a connection
# ======================
@router.post("", response_model=schemas.Connection, status_code=status.HTTP_201_CREATED)
async def create_connection(
    payload: Dict[str, Any] = Body(...),
    current_user: schemas.User = Depends(get_current_user),
    storage: Storage = Depends(get_storage),
):
    field = _counterpart_field(payload)
    own_field = "studentId" if field == "teacherId" else "teacherId"
    data = schemas.parse_payload(
        schemas.InsertConnection,
        {**payload, own_field: current_user.id},
    )

    counterpart_id = data.teacher_id if field == "teacherId" else data.student_id
    if counterpart_id == current_user.id:
        raise ValidationError.single(field, "Cannot connect with yourself")
    if not await storage.get_user(counterpart_id):
        raise ValidationError.single(field, "User not found")

    return await storage.create_connection(data)


# ======================
# PATCH: Accept or reject
# ======================
@router.patch("/{connection_id}/status", response_model=schemas.Connection)
async def update_connection_status(
    connection_id: str,
    payload: Dict[str, Any] = Body(...),
    current_user: schemas.User = Depends(get_current_user),
    storage: Storage = Depends(get_storage),
):
    if payload.get("status") not in ("accepted", "rejected"):
        raise ValidationError.single("status", "Status must be 'accepted' or 'rejected'")
    update = schemas.parse_payload(schemas.ConnectionStatusUpdate, payload)

    parsed_id = parse_id(connection_id)
    connection = await storage.get_connection(parsed_id) if parsed_id is not None else None
    if not connection:
        raise NotFoundError("Connection not found")

    if not _is_party(connection, current_user.id):
        logger.warning(
            "User %s tried to update connection %s without being a party",
            current_user.id,
            parsed_id,
        )
        raise AuthorizationDenied("Not authorized to update this connection")

    return await storage.update_connection_status(parsed_id, update.status)
