import enum


class UserType(str, enum.Enum):
    LEARN = "learn"
    TEACH = "teach"
    BOTH = "both"


class SkillLevel(str, enum.Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class ConnectionStatus(str, enum.Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


class ConnectionRole(str, enum.Enum):
    TEACHER = "teacher"
    STUDENT = "student"


# Statuses a party may move a pending connection to.
DECIDED_STATUSES = (ConnectionStatus.ACCEPTED, ConnectionStatus.REJECTED)
