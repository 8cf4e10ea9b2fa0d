#!/usr/bin/env python
"""
Seed the employee collection with a handful of sample records.

Usage:
    python -m backend.directory.seed
"""

from __future__ import annotations

import asyncio
import logging
from typing import Dict, Iterable, List

from backend.core.database import database_manager
from backend.core.exceptions import DuplicateEmailError
from backend.core.observability import configure_logging
from backend.directory.store import EmployeeStore, employee_store

logger = logging.getLogger("directory.seed")

EMPLOYEES: List[Dict[str, str]] = [
    {"name": "Ann Lee", "email": "ann.lee@company.io", "department": "Sales"},
    {"name": "Bruno Costa", "email": "bruno.costa@company.io", "department": "Engineering"},
    {"name": "Chidi Okafor", "email": "chidi.okafor@company.io", "department": "Finance"},
    {"name": "Dana Weiss", "email": "dana.weiss@company.io", "department": "People Operations"},
]


async def seed_employees(store: EmployeeStore, records: Iterable[Dict[str, str]] = EMPLOYEES) -> int:
    """Insert records, skipping emails that already exist. Returns the number created."""

    created = 0
    for record in records:
        try:
            employee = await store.create(record)
        except DuplicateEmailError:
            logger.info("Skipping %s: already present", record["email"])
            continue
        created += 1
        logger.info("Seeded %s (%s)", employee.name, employee.id)
    return created


async def main() -> None:
    configure_logging()
    try:
        created = await seed_employees(employee_store)
    finally:
        await database_manager.close()
    logger.info("Seed complete: %d employees created", created)


if __name__ == "__main__":
    asyncio.run(main())
