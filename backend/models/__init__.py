from .employee import UPDATABLE_FIELDS, Employee, EmployeeCreate, EmployeeUpdate

__all__ = [
    "Employee",
    "EmployeeCreate",
    "EmployeeUpdate",
    "UPDATABLE_FIELDS",
]
