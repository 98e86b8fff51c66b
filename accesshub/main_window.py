#===============================================================================
#  Access_Hub | main_window.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Main Metro/Windows-Phone style UI for the hub:
#    - Header: search, pending request count, signed-in user, sign out
#    - Notification banner fed from the controller
#    - Dashboard tab: owned apps (double-click to launch)
#    - Catalog tab: department chips, compliance/status/sort pickers, stats,
#      tiles coloured by effective status (double-click to launch or request)
#    - Requests tab: request cards filtered by status, cancel while pending
#  The window never mutates state itself; it calls the controller and
#  re-renders whenever the controller reports a change.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging

from PySide6.QtWidgets import (
    QButtonGroup,
    QComboBox,
    QDialog,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QListWidgetItem,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QTabWidget,
    QToolButton,
    QVBoxLayout,
    QWidget,
)

from .banner_widget import BannerWidget
from .constants import (
    ALL,
    ALL_DEPARTMENTS,
    APP_TITLE,
    COMPLIANCE_OPTIONS,
    DEPARTMENTS,
    METRO_BG,
    REQUEST_STATUSES,
    SORT_OPTIONS,
    STATUS_FILTER_OPTIONS,
    STATUS_OWNED,
    TILE_SMALL,
)
from .controller import PortalController
from .dialogs import LoginDialog, RequestDialog
from .errors import RestrictedAccessError, ValidationError
from .query import catalog_stats
from .scheduler import ProgressionDriver
from .tile_widget import RequestCard, visual_for_app, visual_for_owned
from .ui_widgets import CardList, TileList

log = logging.getLogger(__name__)

WINDOW_STYLE = f"""
QMainWindow, QDialog {{ background: {METRO_BG}; }}
QLabel {{ color: white; font-family: "Segoe UI"; }}
QToolButton, QPushButton {{
    font-family: "Segoe UI";
    color: white;
    background: #1a1a1a;
    border: 1px solid #2a2a2a;
    padding: 6px 10px;
}}
QToolButton:hover, QPushButton:hover {{ background: #222; }}
QToolButton:pressed, QPushButton:pressed {{ background: #2a2a2a; }}
QToolButton:checked {{ background: #0078D7; }}
QPushButton:disabled {{ color: #666; }}
QLineEdit, QComboBox, QPlainTextEdit {{
    color: white;
    background: #1a1a1a;
    border: 1px solid #2a2a2a;
    padding: 4px;
}}
QTabWidget::pane {{ border: 1px solid #2a2a2a; }}
QTabBar::tab {{ color: white; background: #1a1a1a; padding: 6px 14px; }}
QTabBar::tab:selected {{ background: #0078D7; }}
QListWidget {{ background: {METRO_BG}; border: none; }}
"""


def _combo(items, labels=None) -> QComboBox:
    box = QComboBox()
    for value in items:
        box.addItem(labels.get(value, value) if labels else value, value)
    return box


def _select_data(box: QComboBox, value: str) -> None:
    idx = box.findData(value)
    if idx >= 0 and idx != box.currentIndex():
        box.blockSignals(True)
        box.setCurrentIndex(idx)
        box.blockSignals(False)


def request_filter_items(counts):
    """(label, status) pairs for the Requests tab filter, "All" first."""
    items = [(f"All ({counts.get(ALL, 0)})", ALL)]
    for status in REQUEST_STATUSES:
        items.append((f"{status.title()} ({counts.get(status, 0)})", status))
    return items


class MainWindow(QMainWindow):
    def __init__(self, controller: PortalController, driver: ProgressionDriver):
        super().__init__()
        self.controller = controller
        self.driver = driver
        self.setWindowTitle(APP_TITLE)
        self.resize(1100, 760)
        self.setStyleSheet(WINDOW_STYLE)

        root = QWidget()
        self.setCentralWidget(root)
        layout = QVBoxLayout(root)
        layout.setContentsMargins(14, 14, 14, 14)
        layout.setSpacing(10)

        # Header
        header = QHBoxLayout()
        header.addWidget(QLabel(f"<b>{APP_TITLE}</b>"))
        self.search = QLineEdit()
        self.search.setPlaceholderText("Search apps, categories, tags…")
        self.search.setClearButtonEnabled(True)
        self.search.textChanged.connect(self.search_changed)
        header.addWidget(self.search, 1)
        self.pending_label = QLabel("")
        header.addWidget(self.pending_label)
        self.user_label = QLabel("")
        header.addWidget(self.user_label)
        self.btn_sign_out = QPushButton("Sign out")
        self.btn_sign_out.clicked.connect(self.sign_out)
        header.addWidget(self.btn_sign_out)
        layout.addLayout(header)

        self.banner = BannerWidget()
        layout.addWidget(self.banner)

        self.tabs = QTabWidget()
        self.tabs.addTab(self._build_dashboard(), "Dashboard")
        self.tabs.addTab(self._build_catalog(), "App Catalog")
        self.tabs.addTab(self._build_requests(), "My Requests")
        layout.addWidget(self.tabs, 1)

        self.controller.subscribe(self.rebuild)
        self.rebuild()

    # ----------------------------
    # Tabs
    # ----------------------------
    def _build_dashboard(self) -> QWidget:
        page = QWidget()
        lay = QVBoxLayout(page)
        self.welcome_label = QLabel("")
        self.welcome_label.setWordWrap(True)
        lay.addWidget(self.welcome_label)
        self.my_list = TileList()
        self.my_list.itemDoubleClicked.connect(self.launch_item)
        lay.addWidget(self.my_list, 1)
        return page

    def _build_catalog(self) -> QWidget:
        page = QWidget()
        lay = QVBoxLayout(page)

        chips = QHBoxLayout()
        self.dept_group = QButtonGroup(self)
        self.dept_group.setExclusive(True)
        self.dept_buttons = {}
        for dept in [ALL_DEPARTMENTS] + DEPARTMENTS:
            btn = QToolButton()
            btn.setText(dept)
            btn.setCheckable(True)
            btn.clicked.connect(lambda _checked=False, d=dept: self.controller.set_filters(department=d))
            self.dept_group.addButton(btn)
            self.dept_buttons[dept] = btn
            chips.addWidget(btn)
        chips.addStretch(1)
        lay.addLayout(chips)

        pickers = QHBoxLayout()
        self.compliance_combo = _combo(COMPLIANCE_OPTIONS, {ALL: "All compliance"})
        self.compliance_combo.currentIndexChanged.connect(
            lambda _i: self.controller.set_filters(compliance=self.compliance_combo.currentData())
        )
        self.status_combo = _combo(STATUS_FILTER_OPTIONS, {ALL: "All statuses"})
        self.status_combo.currentIndexChanged.connect(
            lambda _i: self.controller.set_filters(status=self.status_combo.currentData())
        )
        self.sort_combo = _combo(list(SORT_OPTIONS), SORT_OPTIONS)
        self.sort_combo.currentIndexChanged.connect(lambda _i: self.controller.set_sort(self.sort_combo.currentData()))
        self.btn_clear = QPushButton("Clear filters")
        self.btn_clear.clicked.connect(self.controller.clear_filters)
        for w in (self.compliance_combo, self.status_combo, self.sort_combo, self.btn_clear):
            pickers.addWidget(w)
        pickers.addStretch(1)
        self.stats_label = QLabel("")
        pickers.addWidget(self.stats_label)
        lay.addLayout(pickers)

        self.catalog_list = TileList()
        self.catalog_list.itemDoubleClicked.connect(self.catalog_item_activated)
        lay.addWidget(self.catalog_list, 1)
        return page

    def _build_requests(self) -> QWidget:
        page = QWidget()
        lay = QVBoxLayout(page)
        row = QHBoxLayout()
        self.request_status_combo = QComboBox()
        self.request_status_combo.currentIndexChanged.connect(lambda _i: self._rebuild_requests())
        row.addWidget(QLabel("Show"))
        row.addWidget(self.request_status_combo)
        row.addStretch(1)
        lay.addLayout(row)
        self.request_list = CardList()
        lay.addWidget(self.request_list, 1)
        return page

    # ----------------------------
    # Rendering
    # ----------------------------
    def rebuild(self):
        session = self.controller.session
        self.user_label.setText(f"{session.name} • {session.department}" if session else "")
        pending = self.controller.pending_request_count()
        self.pending_label.setText(f"{pending} pending" if pending else "")

        notes = self.controller.drain_notifications()
        if notes:
            self.banner.show_notification(notes[-1])

        self._rebuild_dashboard()
        self._rebuild_catalog()
        self._rebuild_requests()

    def _rebuild_dashboard(self):
        session = self.controller.session
        if session is None:
            self.welcome_label.setText("")
        elif self.controller.is_new_user:
            self.welcome_label.setText(
                f"Welcome, {session.name}! You don't have any apps yet. "
                "Browse the App Catalog to request access to the tools you need."
            )
        else:
            self.welcome_label.setText(f"Welcome back, {session.name}.")

        self.my_list.clear()
        for rec, owned in self.controller.my_apps():
            self.my_list.add_tile(rec.id, visual_for_owned(rec, owned), size=TILE_SMALL)

    def _rebuild_catalog(self):
        state = self.controller.state
        filters = state.filters
        btn = self.dept_buttons.get(filters.department)
        if btn is not None and not btn.isChecked():
            btn.setChecked(True)
        for b in self.dept_buttons.values():
            b.setEnabled(not state.search_text)
        _select_data(self.compliance_combo, filters.compliance)
        _select_data(self.status_combo, filters.status)
        _select_data(self.sort_combo, state.sort)

        apps = self.controller.visible_apps()
        stats = catalog_stats(apps)
        self.stats_label.setText(
            f"{stats['total']} apps • {stats['available']} available • "
            f"{stats['trending']} trending • {stats['high_security']} high security"
        )
        self.catalog_list.clear()
        for app in apps:
            self.catalog_list.add_tile(app.id, visual_for_app(app))

    def _rebuild_requests(self):
        counts = self.controller.request_counts()
        current = self.request_status_combo.currentData() or ALL
        self.request_status_combo.blockSignals(True)
        self.request_status_combo.clear()
        for label, value in request_filter_items(counts):
            self.request_status_combo.addItem(label, value)
        self.request_status_combo.setCurrentIndex(max(0, self.request_status_combo.findData(current)))
        self.request_status_combo.blockSignals(False)

        self.request_list.clear()
        for req in self.controller.requests(self.request_status_combo.currentData()):
            self.request_list.add_card(req.id, RequestCard(req, on_cancel=self.controller.cancel_request))

    # ----------------------------
    # Actions
    # ----------------------------
    def search_changed(self, text: str):
        self.controller.set_search_text(text)
        if text.strip():
            self.tabs.setCurrentIndex(1)

    def launch_item(self, item: QListWidgetItem):
        key = self.my_list.key_for(item)
        if key:
            self.controller.app_action(key, "launch")

    def catalog_item_activated(self, item: QListWidgetItem):
        key = self.catalog_list.key_for(item)
        if not key:
            return
        if key in self.controller.state.owned:
            self.controller.app_action(key, "launch")
            return
        try:
            resolved = self.controller.app_action(key, "request")
        except RestrictedAccessError:
            # banner already carries the message
            return
        except ValidationError as e:
            QMessageBox.information(self, "Request access", str(e))
            return
        if resolved is not None and resolved.status != STATUS_OWNED:
            RequestDialog(self.controller, resolved, self).exec()

    def sign_out(self):
        self.controller.logout()
        self.search.clear()
        dlg = LoginDialog(self.controller, self)
        if dlg.exec() != QDialog.Accepted:
            self.close()

    def closeEvent(self, event):
        self.driver.stop()
        log.info("Main window closed")
        super().closeEvent(event)
