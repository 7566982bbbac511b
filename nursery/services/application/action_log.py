"""
ActionLog
=========

FIFO invoker for staff commands with an undo history of executed undoable
commands. Every enqueue, execution and undo is written to the audit trail
when an AuditLogger is supplied.
"""

from __future__ import annotations

import logging
import threading
from collections import deque
from typing import TYPE_CHECKING

from nursery.constants import SYSTEM_USER_ID
from nursery.services.application.commands import Command
from nursery.utils.concurrency import synchronized

if TYPE_CHECKING:
    from infrastructure.logging.audit import AuditLogger

logger = logging.getLogger(__name__)


class ActionLog:
    def __init__(self, audit_logger: "AuditLogger" | None = None) -> None:
        self.audit_logger = audit_logger
        self._queue: deque[Command] = deque()
        self._history: list[Command] = []
        self._lock = threading.RLock()

    def _audit(self, actor: str, action: str, resource: str, outcome: str, **metadata) -> None:
        if self.audit_logger is not None:
            self.audit_logger.log_event(actor, action, resource, outcome, **metadata)

    @synchronized
    def enqueue(self, command: Command | None) -> bool:
        if command is None:
            return False
        self._queue.append(command)
        self._audit(command.user_id, command.action, "Command enqueued", "ENQUEUED")
        logger.debug("Enqueued %r", command)
        return True

    @synchronized
    def process_next(self) -> bool:
        """
        Execute the oldest queued command.

        Returns:
            True when the command ran without raising. False when the queue is
            empty or the command failed; a failed command never enters history.
        """
        if not self._queue:
            logger.info("No commands in queue to process")
            return False

        command = self._queue.popleft()
        description = command.description()
        try:
            command.execute()
        except Exception as exc:
            logger.error("Command %s failed: %s", description, exc, exc_info=True)
            self._audit(command.user_id, command.action, description, "FAILED", error=str(exc))
            return False

        self._audit(command.user_id, command.action, description, "SUCCESS")
        if command.undoable:
            self._history.append(command)
        logger.info("Executed %s", description)
        return True

    @synchronized
    def process_all(self) -> int:
        processed = 0
        while self._queue:
            if self.process_next():
                processed += 1
        return processed

    @synchronized
    def undo_last_restock(self) -> bool:
        """Undo the most recent undoable command. The entry stays in history if undo fails."""
        if not self._history:
            logger.info("No restock commands to undo")
            return False

        command = self._history[-1]
        description = command.description()
        try:
            command.undo()
        except Exception as exc:
            logger.error("Undo of %s failed: %s", description, exc, exc_info=True)
            self._audit(SYSTEM_USER_ID, "UNDO RESTOCK", description, "FAILED", error=str(exc))
            return False

        self._history.pop()
        self._audit(SYSTEM_USER_ID, "UNDO RESTOCK", description, "SUCCESS")
        return True

    @synchronized
    def queue_size(self) -> int:
        return len(self._queue)

    @synchronized
    def history_size(self) -> int:
        return len(self._history)

    @synchronized
    def pending(self) -> list[str]:
        return [command.description() for command in self._queue]
