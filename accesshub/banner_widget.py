#===============================================================================
#  Access_Hub | banner_widget.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Horizontal notification banner: shows the latest hub notification, scrolls
#  it when it is too long, and falls back to an idle tip after a while.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import Qt, QTimer
from PySide6.QtGui import QFont
from PySide6.QtWidgets import QFrame, QLabel, QHBoxLayout

from .models import Notification

LEVEL_COLORS = {
    "success": "#107C10",
    "info": "#0078D7",
    "error": "#E81123",
}
IDLE_TEXT = "Tip: double-click a catalog tile to request access, or an owned app to launch it."
MARQUEE_MIN_CHARS = 90


class BannerWidget(QFrame):
    def __init__(self, hold_ms: int = 6000, parent=None):
        super().__init__(parent)
        self.setObjectName("BannerWidget")
        self.setFixedHeight(34)

        self._text = ""
        self._offset = 0

        self.label = QLabel("")
        self.label.setAlignment(Qt.AlignVCenter | Qt.AlignLeft)
        f = QFont("Segoe UI", 10)
        f.setBold(True)
        self.label.setFont(f)

        lay = QHBoxLayout(self)
        lay.setContentsMargins(10, 4, 10, 4)
        lay.addWidget(self.label)

        self._marquee_timer = QTimer(self)
        self._marquee_timer.setInterval(120)
        self._marquee_timer.timeout.connect(self._tick)

        self._idle_timer = QTimer(self)
        self._idle_timer.setSingleShot(True)
        self._idle_timer.setInterval(hold_ms)
        self._idle_timer.timeout.connect(self.show_idle)

        self.show_idle()

    def show_idle(self):
        self._set_text(IDLE_TEXT, "#1a1a1a")

    def show_notification(self, n: Optional[Notification]):
        if n is None:
            return
        self._set_text(n.message, LEVEL_COLORS.get(n.level, "#1a1a1a"))
        self._idle_timer.start()

    def _set_text(self, txt: str, bg: str):
        self.setStyleSheet(f"QFrame#BannerWidget{{background:{bg};border:1px solid #2a2a2a;}} QLabel{{color:white;}}")
        self._text = txt
        self._offset = 0
        self.label.setText(txt)
        if len(txt) >= MARQUEE_MIN_CHARS:
            self._marquee_timer.start()
        else:
            self._marquee_timer.stop()

    def _tick(self):
        # Basic marquee: rotate string with padding
        s = self._text + "   •   "
        self._offset = (self._offset + 1) % len(s)
        self.label.setText(s[self._offset:] + s[:self._offset])
