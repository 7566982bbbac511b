"""
Append-only audit trail for staff commands.

Each record is one JSON object per line, written through a size-rotated
file handler on the ``nursery.audit`` logger (never propagated to the
application log).
"""

import json
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict

AUDIT_LOGGER_NAME = "nursery.audit"


class AuditLogger:
    """Structured audit logger that writes append-only records."""

    def __init__(
        self,
        log_path: str,
        level: str = "INFO",
        max_bytes: int = 5 * 1024 * 1024,
        backup_count: int = 10,
    ) -> None:
        self.log_path = Path(log_path)
        self.log_path.parent.mkdir(parents=True, exist_ok=True)

        self.logger = logging.getLogger(AUDIT_LOGGER_NAME)
        self.logger.setLevel(getattr(logging, level.upper(), logging.INFO))
        self.logger.propagate = False

        self._handler = self._find_handler()
        if self._handler is None:
            self._handler = RotatingFileHandler(
                filename=str(self.log_path),
                maxBytes=max_bytes,
                backupCount=backup_count,
                encoding="utf-8",
                delay=True,
            )
            self._handler.setFormatter(
                logging.Formatter(fmt="%(asctime)sZ | %(levelname)s | %(message)s", datefmt="%Y-%m-%dT%H:%M:%S")
            )
            self.logger.addHandler(self._handler)

    def _find_handler(self) -> RotatingFileHandler | None:
        target = str(self.log_path.resolve())
        for handler in self.logger.handlers:
            if isinstance(handler, RotatingFileHandler) and handler.baseFilename == target:
                return handler
        return None

    def log_event(self, actor: str, action: str, resource: str, outcome: str, **metadata: Any) -> None:
        """
        Append one audit record.

        Args:
            actor: User ID that issued the action
            action: Action label (e.g. "Restock", "Water")
            resource: Human-readable description of what was acted on
            outcome: ENQUEUED, SUCCESS or FAILED
            **metadata: Extra fields stored under "meta"
        """
        payload: Dict[str, Any] = {
            "actor": actor,
            "action": action,
            "resource": resource,
            "outcome": outcome,
        }
        if metadata:
            payload["meta"] = metadata

        self.logger.info(json.dumps(payload, default=str))

    def close(self) -> None:
        """Detach and close this logger's file handler."""
        if self._handler is not None:
            self.logger.removeHandler(self._handler)
            self._handler.close()
            self._handler = None
