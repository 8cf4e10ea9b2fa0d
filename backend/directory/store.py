"""Record store gateway for employee documents.

`EmployeeStore` owns validation and persistence of employee records. Callers
get domain objects back or one of the errors from `backend.core.exceptions`;
driver exceptions never escape this module.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Iterator, List

from bson import ObjectId
from pydantic import ValidationError
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError, PyMongoError

from backend.core.database import DatabaseManager, database_manager
from backend.core.exceptions import (
    DuplicateEmailError,
    NotFoundError,
    StoreUnavailableError,
    ValidationFailedError,
)
from backend.models.employee import Employee, EmployeeCreate, EmployeeUpdate
from backend.utils.audit import AuditLogger, audit_logger
from backend.utils.monitoring import track_mutation
from backend.utils.validators import require_object_id

logger = logging.getLogger(__name__)


def utcnow() -> datetime:
    # BSON dates hold milliseconds; truncate so returned records match stored ones.
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


@contextmanager
def _translate_store_errors() -> Iterator[None]:
    try:
        yield
    except DuplicateKeyError as exc:
        logger.info("Duplicate key rejected by store: %s", exc.details)
        raise DuplicateEmailError() from exc
    except PyMongoError as exc:
        logger.error("MongoDB operation failed: %s", exc)
        raise StoreUnavailableError() from exc


def _parse(schema: type[EmployeeCreate], fields: Dict[str, Any]) -> EmployeeCreate:
    if not isinstance(fields, dict):
        raise ValidationFailedError(["Request body must be a JSON object"])
    try:
        return schema.model_validate(fields)
    except ValidationError as exc:
        raise ValidationFailedError(error["msg"] for error in exc.errors()) from exc


class EmployeeStore:
    """Validated CRUD over the employee collection."""

    def __init__(
        self,
        database: DatabaseManager = database_manager,
        *,
        clock: Callable[[], datetime] = utcnow,
        audit: AuditLogger = audit_logger,
    ) -> None:
        self.database = database
        self.clock = clock
        self.audit = audit

    async def list_all(self) -> List[Employee]:
        """Return every employee in the store's natural order."""

        collection = await self.database.employees()
        with _translate_store_errors():
            documents = await collection.find({}).to_list(length=None)
        return [Employee.from_document(document) for document in documents]

    async def get_by_id(self, employee_id: str) -> Employee:
        object_id = require_object_id(employee_id)
        collection = await self.database.employees()
        with _translate_store_errors():
            document = await collection.find_one({"_id": object_id})
        if document is None:
            raise NotFoundError()
        return Employee.from_document(document)

    async def create(self, fields: Dict[str, Any]) -> Employee:
        """Validate and insert a new employee.

        Every violated field is reported at once. Email uniqueness is left to
        the collection's unique index rather than checked beforehand.
        """

        with track_mutation("create"):
            payload = _parse(EmployeeCreate, fields)
            timestamp = self.clock()
            document = {
                "_id": ObjectId(),
                **payload.model_dump(),
                "createdAt": timestamp,
                "updatedAt": timestamp,
            }

            collection = await self.database.employees()
            with _translate_store_errors():
                await collection.insert_one(document)

        self.audit.record("employee.created", str(document["_id"]), {"department": payload.department})
        return Employee.from_document(document)

    async def update(self, employee_id: str, fields: Dict[str, Any]) -> Employee:
        """Apply a partial update restricted to name, email and department."""

        with track_mutation("update"):
            object_id = require_object_id(employee_id)
            changes = _parse(EmployeeUpdate, fields).changes()

            collection = await self.database.employees()
            with _translate_store_errors():
                document = await collection.find_one_and_update(
                    {"_id": object_id},
                    {"$set": {**changes, "updatedAt": self.clock()}},
                    return_document=ReturnDocument.AFTER,
                )
            if document is None:
                raise NotFoundError()

        self.audit.record("employee.updated", employee_id, {"fields": sorted(changes)})
        return Employee.from_document(document)

    async def delete_by_id(self, employee_id: str) -> Employee:
        with track_mutation("delete"):
            object_id = require_object_id(employee_id)
            collection = await self.database.employees()
            with _translate_store_errors():
                document = await collection.find_one_and_delete({"_id": object_id})
            if document is None:
                raise NotFoundError()

        self.audit.record("employee.deleted", employee_id)
        return Employee.from_document(document)


employee_store = EmployeeStore()
