"""Liveness endpoint."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Dict

from fastapi import APIRouter

router = APIRouter(tags=["health"])


@router.get("/health")
async def healthcheck() -> Dict[str, str]:
    """Liveness probe. Does not touch the database."""

    return {"status": "Server is running", "timestamp": datetime.now(timezone.utc).isoformat()}
