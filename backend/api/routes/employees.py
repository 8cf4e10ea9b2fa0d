"""Employee directory CRUD endpoints."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List

from fastapi import APIRouter, Body, Depends, status

from backend.api.dependencies import get_employee_store
from backend.core.exceptions import (
    ApplicationError,
    DuplicateEmailError,
    NotFoundError,
    StoreUnavailableError,
    ValidationFailedError,
)
from backend.directory.store import EmployeeStore
from backend.models.employee import Employee

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/employees", tags=["employees"])

# Outcomes every route reports as-is; anything else falls back per route.
PASSTHROUGH_ERRORS = (NotFoundError, ValidationFailedError, DuplicateEmailError, StoreUnavailableError)


@contextmanager
def _fallback_errors(action: str, message: str, status_code: int) -> Iterator[None]:
    try:
        yield
    except PASSTHROUGH_ERRORS:
        raise
    except Exception as exc:
        logger.warning("Error %s: %r", action, exc, exc_info=not isinstance(exc, ApplicationError))
        raise ApplicationError(message, status_code=status_code) from exc


@router.get("", response_model=List[Employee])
async def list_employees(store: EmployeeStore = Depends(get_employee_store)) -> List[Employee]:
    """Return every employee."""

    with _fallback_errors("fetching employees", "Failed to fetch employees", status.HTTP_500_INTERNAL_SERVER_ERROR):
        return await store.list_all()


@router.get("/{employee_id}", response_model=Employee)
async def get_employee(employee_id: str, store: EmployeeStore = Depends(get_employee_store)) -> Employee:
    with _fallback_errors("fetching employee", "Invalid employee ID", status.HTTP_400_BAD_REQUEST):
        return await store.get_by_id(employee_id)


@router.post("", response_model=Employee, status_code=status.HTTP_201_CREATED)
async def create_employee(
    payload: Dict[str, Any] = Body(...),
    store: EmployeeStore = Depends(get_employee_store),
) -> Employee:
    """Create an employee from `{name, email, department}`."""

    with _fallback_errors("creating employee", "Failed to create employee", status.HTTP_500_INTERNAL_SERVER_ERROR):
        return await store.create(payload)


@router.put("/{employee_id}", response_model=Employee)
async def update_employee(
    employee_id: str,
    payload: Dict[str, Any] = Body(...),
    store: EmployeeStore = Depends(get_employee_store),
) -> Employee:
    """Update any subset of name, email and department. Other keys are ignored."""

    with _fallback_errors("updating employee", "Invalid update or ID", status.HTTP_400_BAD_REQUEST):
        return await store.update(employee_id, payload)


@router.delete("/{employee_id}", response_model=Employee)
async def delete_employee(employee_id: str, store: EmployeeStore = Depends(get_employee_store)) -> Employee:
    """Delete an employee and return the removed record."""

    with _fallback_errors("deleting employee", "Invalid employee ID", status.HTTP_400_BAD_REQUEST):
        return await store.delete_by_id(employee_id)
