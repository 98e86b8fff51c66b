#===============================================================================
#  Access_Hub | tile_widget.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Metro/Windows-Phone style tiles for catalog apps (coloured by effective
#  status) and cards for access requests.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from PySide6.QtCore import Qt, QSize
from PySide6.QtGui import QFont
from PySide6.QtWidgets import QFrame, QHBoxLayout, QLabel, QPushButton, QVBoxLayout

from .constants import (
    DURATION_OPTIONS,
    REQ_PENDING,
    REQ_PROVISIONING,
    REQUEST_STATUS_COLORS,
    STATUS_OWNED,
    STATUS_TILE_COLORS,
)
from .models import AccessRequest, AppRecord, OwnedApp, ResolvedApp


@dataclass
class TileVisual:
    bg_color: str
    title: str
    subtitle: str = ""
    badge: str = ""
    footer: str = ""


def visual_for_app(app: ResolvedApp) -> TileVisual:
    flags = []
    if app.trending:
        flags.append("Trending")
    if app.recommended:
        flags.append("Recommended")
    return TileVisual(
        bg_color=STATUS_TILE_COLORS.get(app.status, "#1a1a1a"),
        title=app.name,
        subtitle=f"{app.category} • ★ {app.rating:.1f} ({app.review_count})",
        badge=app.status.upper(),
        footer=" • ".join(flags) or app.usage_stats,
    )


def visual_for_owned(app: AppRecord, owned: OwnedApp) -> TileVisual:
    return TileVisual(
        bg_color=STATUS_TILE_COLORS[STATUS_OWNED],
        title=app.name,
        subtitle=app.category,
        footer=f"Last used: {owned.last_used}" if owned.last_used else "Not used yet",
    )


def _label(text: str, size: int, bold: bool = False, color: str = "white") -> QLabel:
    lbl = QLabel(text)
    f = QFont("Segoe UI", size)
    f.setBold(bold)
    lbl.setFont(f)
    lbl.setStyleSheet(f"color: {color};")
    lbl.setWordWrap(True)
    return lbl


class TileWidget(QFrame):
    """A flat, Metro-style tile used inside a QListWidget item."""

    def __init__(self, visual: TileVisual, size: QSize, parent=None):
        super().__init__(parent)
        self.setObjectName("MetroTile")
        self.setFixedSize(size)

        self.setStyleSheet(f"""
        QFrame#MetroTile {{
            background: {visual.bg_color};
        }}
        """)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(10, 10, 10, 10)
        layout.setSpacing(4)

        top = QHBoxLayout()
        title_label = _label(visual.title, 11, bold=True)
        title_label.setAlignment(Qt.AlignLeft | Qt.AlignTop)
        top.addWidget(title_label, 1)
        if visual.badge:
            badge = _label(visual.badge, 8, bold=True, color="rgba(255,255,255,0.85)")
            badge.setAlignment(Qt.AlignRight | Qt.AlignTop)
            top.addWidget(badge)
        layout.addLayout(top)

        layout.addStretch(1)

        subtitle_label = _label(visual.subtitle, 9, color="rgba(255,255,255,0.85)")
        subtitle_label.setVisible(bool(visual.subtitle.strip()))
        layout.addWidget(subtitle_label)

        footer_label = _label(visual.footer, 8, color="rgba(255,255,255,0.7)")
        footer_label.setVisible(bool(visual.footer.strip()))
        layout.addWidget(footer_label)


class RequestCard(QFrame):
    """One access request row; pending requests get a Cancel button."""

    def __init__(self, req: AccessRequest, on_cancel: Optional[Callable[[str], None]] = None, parent=None):
        super().__init__(parent)
        self.setObjectName("RequestCard")
        color = REQUEST_STATUS_COLORS.get(req.status, "#2a2a2a")
        self.setStyleSheet(f"""
        QFrame#RequestCard {{
            background: #1a1a1a;
            border-left: 6px solid {color};
        }}
        """)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(12, 8, 12, 8)

        body = QVBoxLayout()
        body.addWidget(_label(f"{req.app_name}  —  {req.status.title()}", 11, bold=True))
        body.addWidget(_label(f"Requested {req.request_date} • {DURATION_OPTIONS.get(req.duration, req.duration)}", 9,
                              color="rgba(255,255,255,0.75)"))
        body.addWidget(_label(req.justification, 9, color="rgba(255,255,255,0.85)"))
        if req.approver:
            body.addWidget(_label(f"Approver: {req.approver}", 9, color="rgba(255,255,255,0.75)"))
        if req.notes:
            body.addWidget(_label(req.notes, 9, color="rgba(255,255,255,0.75)"))
        if req.estimated_completion and req.status == REQ_PROVISIONING:
            body.addWidget(_label(f"Estimated completion: {req.estimated_completion}", 9, color=color))
        layout.addLayout(body, 1)

        if req.status == REQ_PENDING and on_cancel is not None:
            btn = QPushButton("Cancel Request")
            btn.clicked.connect(lambda: on_cancel(req.id))
            layout.addWidget(btn, 0, Qt.AlignTop)
