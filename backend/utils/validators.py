"""Input validation helpers."""

from __future__ import annotations

from typing import Any

from bson import ObjectId
from email_validator import EmailNotValidError, validate_email
from pydantic_core import PydanticCustomError

from backend.core.exceptions import InvalidIdentifierError


def require_object_id(value: str) -> ObjectId:
    """Parse a path identifier into an ObjectId or raise InvalidIdentifierError."""

    if not isinstance(value, str) or not ObjectId.is_valid(value):
        raise InvalidIdentifierError()
    return ObjectId(value)


def check_required_text(value: Any, field_name: str) -> str:
    label = field_name.capitalize()
    if value is None:
        raise PydanticCustomError("missing", f"{label} is required")
    if not isinstance(value, str):
        raise PydanticCustomError("string_type", f"{label} must be a string")
    value = value.strip()
    if not value:
        raise PydanticCustomError("missing", f"{label} is required")
    return value


def check_email(value: Any) -> str:
    value = check_required_text(value, "email")
    try:
        # Syntax only, no DNS lookups; intranet domains such as .local are allowed.
        result = validate_email(value, check_deliverability=False, globally_deliverable=False)
    except EmailNotValidError:
        raise PydanticCustomError("email_format", "Invalid email format")
    if "." not in result.ascii_domain:
        raise PydanticCustomError("email_format", "Invalid email format")
    return value
