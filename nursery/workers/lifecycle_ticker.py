"""
Periodic lifecycle driver.

Runs ``Greenhouse.tick_all()`` on a daemon thread every
``interval_seconds``. A failing tick is logged and the loop carries on.
"""

from __future__ import annotations

import logging
import threading
from typing import Any

from nursery.services.application.greenhouse import Greenhouse

logger = logging.getLogger(__name__)


class LifecycleTicker:
    def __init__(self, greenhouse: Greenhouse, interval_seconds: float = 10.0) -> None:
        if interval_seconds <= 0:
            raise ValueError("interval_seconds must be positive")
        self.greenhouse = greenhouse
        self.interval_seconds = interval_seconds
        self.ticks = 0
        self.failures = 0
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None

    # ==================== Control ====================

    def start(self) -> None:
        """Start the ticker background thread."""
        if self.is_running():
            logger.warning("LifecycleTicker already running")
            return
        self._stop_event.clear()
        self._thread = threading.Thread(target=self._run_loop, daemon=True, name="LifecycleTicker")
        self._thread.start()
        logger.info("LifecycleTicker started (every %.1fs)", self.interval_seconds)

    def stop(self, wait: bool = True, timeout: float = 5.0) -> None:
        """
        Stop the ticker.

        Args:
            wait: Wait for the ticker thread to finish
            timeout: Maximum wait time in seconds
        """
        if self._thread is None:
            return
        self._stop_event.set()
        if wait:
            self._thread.join(timeout=timeout)
        self._thread = None
        logger.info("LifecycleTicker stopped after %d ticks", self.ticks)

    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    # ==================== Ticking ====================

    def run_once(self) -> bool:
        """Run a single tick. Returns False if the tick raised."""
        try:
            events = self.greenhouse.tick_all()
        except Exception as exc:
            self.failures += 1
            logger.error("Lifecycle tick failed: %s", exc, exc_info=True)
            return False
        self.ticks += 1
        if events:
            logger.debug("Tick %d emitted %d events", self.ticks, len(events))
        return True

    def _run_loop(self) -> None:
        logger.debug("Ticker loop started")
        while not self._stop_event.wait(self.interval_seconds):
            self.run_once()
        logger.debug("Ticker loop ended")

    def get_stats(self) -> dict[str, Any]:
        return {
            "running": self.is_running(),
            "interval_seconds": self.interval_seconds,
            "ticks": self.ticks,
            "failures": self.failures,
            "plants": len(self.greenhouse),
        }
