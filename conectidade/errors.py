# conectidade/errors.py
"""
Error taxonomy shared by the storage and route layers.

Storage returns ``None`` for lookups that find nothing; these exceptions are
for everything else. The app factory turns each one into a JSON response with
the matching status code.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional


@dataclass(frozen=True)
class FieldIssue:
    path: str
    message: str

    def to_dict(self) -> Dict[str, str]:
        return {"path": self.path, "message": self.message}


class ConectidadeError(Exception):
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def body(self):
        return {"error": self.message}


class ValidationError(ConectidadeError):
    status_code = 400
    default_message = "Invalid request"

    def __init__(self, issues: List[FieldIssue], message: Optional[str] = None):
        self.issues = list(issues)
        super().__init__(message or "; ".join(f"{i.path}: {i.message}" for i in self.issues))

    @classmethod
    def single(cls, path: str, message: str) -> "ValidationError":
        return cls([FieldIssue(path=path, message=message)])

    def body(self):
        return {"error": [issue.to_dict() for issue in self.issues]}


class NotFoundError(ConectidadeError):
    status_code = 404
    default_message = "Not found"


class AuthenticationRequired(ConectidadeError):
    status_code = 401
    default_message = "Not authenticated"


class AuthorizationDenied(ConectidadeError):
    status_code = 403
    default_message = "Not authorized"


class UsernameTakenError(ConectidadeError):
    status_code = 409
    default_message = "Username already exists"


class InternalFailure(ConectidadeError):
    status_code = 500
