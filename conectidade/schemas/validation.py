from typing import Any, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from conectidade.errors import FieldIssue, ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


def issues_from_errors(errors) -> list:
    """Flatten pydantic/FastAPI error dicts into path + message pairs."""
    issues = []
    for err in errors:
        loc = [str(part) for part in err.get("loc", ())]
        # FastAPI prefixes locations with where the value came from.
        if loc and loc[0] in {"body", "query", "path", "header", "cookie"}:
            loc = loc[1:]
        issues.append(FieldIssue(path=".".join(loc), message=err.get("msg", "Invalid value")))
    return issues


def parse_payload(model: Type[ModelT], data: Any) -> ModelT:
    """Validate ``data`` against ``model``.

    Returns the normalized model instance. On failure raises
    ``ValidationError`` listing every offending field, never a partial result.
    """
    try:
        return model.model_validate(data)
    except PydanticValidationError as exc:
        raise ValidationError(issues_from_errors(exc.errors())) from exc
