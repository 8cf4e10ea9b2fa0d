"""Employee data model definitions."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from backend.utils.validators import check_email, check_required_text

UPDATABLE_FIELDS = ("name", "email", "department")


class EmployeeCreate(BaseModel):
    """Fields accepted when creating an employee. Unknown keys are dropped."""

    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = Field(None, validate_default=True)
    email: Optional[str] = Field(None, validate_default=True)
    department: Optional[str] = Field(None, validate_default=True)

    @field_validator("name", "department", mode="before")
    @classmethod
    def _required_text(cls, value: Any, info) -> str:
        return check_required_text(value, info.field_name)

    @field_validator("email", mode="before")
    @classmethod
    def _email(cls, value: Any) -> str:
        return check_email(value)


class EmployeeUpdate(EmployeeCreate):
    """Partial update: only supplied fields are validated and written."""

    name: Optional[str] = None
    email: Optional[str] = None
    department: Optional[str] = None

    def changes(self) -> Dict[str, str]:
        return self.model_dump(include=set(UPDATABLE_FIELDS), exclude_unset=True)


class Employee(BaseModel):
    """Employee record as returned to API clients."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    email: str
    department: str
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> "Employee":
        return cls(
            id=str(document["_id"]),
            name=document.get("name", ""),
            email=document.get("email", ""),
            department=document.get("department", ""),
            created_at=document["createdAt"],
            updated_at=document.get("updatedAt") or document["createdAt"],
        )
