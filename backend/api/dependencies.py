from __future__ import annotations

from backend.directory.store import EmployeeStore, employee_store


async def get_employee_store() -> EmployeeStore:
    return employee_store
