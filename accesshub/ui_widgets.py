#===============================================================================
#  Access_Hub | ui_widgets.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Reusable list widgets. Keeps the main window/controller smaller.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import Qt, QSize
from PySide6.QtWidgets import QListWidget, QListWidgetItem

from .constants import GRID_SIZE, ICON_SIZE, TILE_WIDE
from .tile_widget import TileVisual, TileWidget


class TileList(QListWidget):
    """A grid of app tiles. Order comes from the catalog ranking, so no drag/drop."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setViewMode(QListWidget.IconMode)
        self.setMovement(QListWidget.Static)
        self.setResizeMode(QListWidget.Adjust)
        self.setUniformItemSizes(True)
        self.setIconSize(ICON_SIZE)
        self.setGridSize(GRID_SIZE)
        self.setSpacing(10)
        self.setSelectionMode(QListWidget.SingleSelection)

    def add_tile(self, key: str, visual: TileVisual, size: QSize = TILE_WIDE) -> QListWidgetItem:
        item = QListWidgetItem()
        item.setData(Qt.UserRole, key)
        item.setSizeHint(size)
        self.addItem(item)
        self.setItemWidget(item, TileWidget(visual, size=size))
        return item

    def key_for(self, item: Optional[QListWidgetItem]) -> Optional[str]:
        return item.data(Qt.UserRole) if item is not None else None


class CardList(QListWidget):
    """A vertical list of request cards."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setSelectionMode(QListWidget.NoSelection)
        self.setSpacing(6)

    def add_card(self, key: str, widget) -> QListWidgetItem:
        item = QListWidgetItem()
        item.setData(Qt.UserRole, key)
        item.setSizeHint(widget.sizeHint())
        self.addItem(item)
        self.setItemWidget(item, widget)
        return item
