"""Audit logging utilities."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict

logger = logging.getLogger("directory.audit")


class AuditLogger:
    """Structured audit logger for directory mutations."""

    def record(self, action: str, employee_id: str, details: Dict[str, Any] | None = None) -> None:
        payload = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "action": action,
            "employee_id": employee_id,
            "details": details or {},
        }
        logger.info(json.dumps(payload, default=str))


audit_logger = AuditLogger()


__all__ = ["audit_logger", "AuditLogger"]
