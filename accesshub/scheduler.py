#===============================================================================
#  Access_Hub | scheduler.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Fixed-interval tick source for the request progression simulator. Runs on
#  the Qt event loop, so ticks and UI commands never interleave.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
from typing import Callable, Optional

import shiboken6
from PySide6.QtCore import QObject, QTimer, Signal

from .constants import DEFAULT_TICK_MS

log = logging.getLogger(__name__)


class ProgressionDriver(QObject):
    """Calls `on_tick` every `interval_ms` while running.

    start() and stop() are both idempotent; stop() is also safe once the
    underlying timer has been destroyed along with its parent.
    """

    ticked = Signal()

    def __init__(self, on_tick: Callable[[], object], interval_ms: int = DEFAULT_TICK_MS, parent: Optional[QObject] = None):
        super().__init__(parent)
        if interval_ms <= 0:
            raise ValueError("interval_ms must be positive")
        self._on_tick = on_tick
        self._timer = QTimer(self)
        self._timer.setInterval(interval_ms)
        self._timer.timeout.connect(self._tick)
        self.tick_count = 0

    @property
    def interval_ms(self) -> int:
        return self._timer.interval() if self._timer_alive() else 0

    def _timer_alive(self) -> bool:
        return self._timer is not None and shiboken6.isValid(self._timer)

    def is_running(self) -> bool:
        return self._timer_alive() and self._timer.isActive()

    def start(self) -> None:
        if not self._timer_alive():
            log.warning("Progression driver timer is gone; cannot start")
            return
        if self._timer.isActive():
            return
        self._timer.start()
        log.info("Request progression started (every %d ms)", self._timer.interval())

    def stop(self) -> None:
        if not self.is_running():
            return
        self._timer.stop()
        log.info("Request progression stopped after %d ticks", self.tick_count)

    def _tick(self) -> None:
        self.tick_count += 1
        self._on_tick()
        self.ticked.emit()
