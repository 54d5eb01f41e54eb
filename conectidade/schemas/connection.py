from datetime import datetime, timezone
from typing import Optional

from pydantic import PositiveInt, field_validator

from conectidade.schemas.base import CamelModel
from conectidade.schemas.enums import ConnectionStatus
from conectidade.schemas.user import PublicUser, User


class InsertConnection(CamelModel):
    teacher_id: PositiveInt
    student_id: PositiveInt
    message: Optional[str] = None


class Connection(InsertConnection):
    id: int
    status: ConnectionStatus = ConnectionStatus.PENDING
    created_at: datetime

    @field_validator("created_at")
    @classmethod
    def assume_utc(cls, value: datetime) -> datetime:
        # SQLite hands timestamps back without their zone; they are stored in UTC.
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value


class ConnectionWithUser(Connection):
    # The other party: the student for a teacher's list and vice versa.
    user: User


class ConnectionWithPublicUser(Connection):
    user: PublicUser


class ConnectionStatusUpdate(CamelModel):
    status: ConnectionStatus
