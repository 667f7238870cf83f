"""Reusable field checks shared by the request schemas."""

from typing import Any

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, model_validator


def require_text(value: object, message: str) -> object:
    """Reject None, empty, and whitespace-only strings."""
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValueError(message)
    return value


def require_email(value: object, message: str = "Please include a valid email") -> str:
    """Check email syntax (no DNS lookups) and return it normalized to lower case."""
    if not isinstance(value, str):
        raise ValueError(message)
    try:
        result = validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        raise ValueError(message) from None
    return result.normalized.lower()


class RequestModel(BaseModel):
    """
    Base for request bodies.

    Anything that is not a JSON object is read as ``{}``, and every field the
    client left out is validated as None under its public name, so each
    field's own rule runs and reports its message.
    """

    @model_validator(mode="before")
    @classmethod
    def fill_missing_fields(cls, data: Any) -> dict[str, Any]:
        if not isinstance(data, dict):
            data = {}
        filled = dict(data)
        for name, field in cls.model_fields.items():
            key = field.alias or name
            if key not in filled and name not in filled:
                filled[key] = None
        return filled
