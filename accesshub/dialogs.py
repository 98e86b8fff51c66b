#===============================================================================
#  Access_Hub | dialogs.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Sign-in dialog (SSO or credentials) and the access request form.
#  Both hand their input to the controller and show its validation errors
#  inline instead of closing.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from PySide6.QtWidgets import (
    QComboBox,
    QDialog,
    QFormLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPlainTextEdit,
    QPushButton,
    QVBoxLayout,
)

from .constants import APP_TITLE, DEPARTMENTS, DURATION_OPTIONS, ROLES, URGENCY_OPTIONS
from .controller import PortalController
from .errors import RestrictedAccessError, ValidationError
from .models import ResolvedApp

ERROR_STYLE = "color: #E81123;"


def _combo(placeholder: str, options) -> QComboBox:
    """Combo box whose first entry is an empty placeholder; item data is the value."""
    box = QComboBox()
    box.addItem(placeholder, "")
    if isinstance(options, dict):
        for value, label in options.items():
            box.addItem(label, value)
    else:
        for value in options:
            box.addItem(value, value)
    return box


class LoginDialog(QDialog):
    def __init__(self, controller: PortalController, parent=None):
        super().__init__(parent)
        self.controller = controller
        self.setWindowTitle(f"Sign in to {APP_TITLE}")
        self.setMinimumWidth(380)

        layout = QVBoxLayout(self)
        layout.addWidget(QLabel(f"<b>{APP_TITLE}</b><br>Your enterprise app workspace"))

        self.btn_sso = QPushButton("Continue with SSO")
        self.btn_sso.clicked.connect(self._sso)
        layout.addWidget(self.btn_sso)

        form = QFormLayout()
        self.email = QLineEdit()
        self.email.setPlaceholderText("name@company.com")
        self.password = QLineEdit()
        self.password.setEchoMode(QLineEdit.Password)
        self.department = _combo("Select your department", DEPARTMENTS)
        self.role = _combo("Select your role", ROLES)
        form.addRow("Email", self.email)
        form.addRow("Password", self.password)
        form.addRow("Department", self.department)
        form.addRow("Role", self.role)
        layout.addLayout(form)

        self.error = QLabel("")
        self.error.setStyleSheet(ERROR_STYLE)
        self.error.setWordWrap(True)
        layout.addWidget(self.error)

        self.btn_login = QPushButton("Sign in")
        self.btn_login.clicked.connect(self._credentials)
        layout.addWidget(self.btn_login)

    def _sso(self):
        self.controller.sso_login(self.department.currentData(), self.role.currentData())
        self.accept()

    def _credentials(self):
        try:
            self.controller.login(
                email=self.email.text(),
                password=self.password.text(),
                department=self.department.currentData(),
                role=self.role.currentData(),
            )
        except ValidationError as e:
            self.error.setText(str(e))
            return
        self.accept()


class RequestDialog(QDialog):
    """Access request form. Submit stays disabled until the required fields are set."""

    def __init__(self, controller: PortalController, app: ResolvedApp, parent=None):
        super().__init__(parent)
        self.controller = controller
        self.app = app
        self.setWindowTitle(f"Request access to {app.name}")
        self.setMinimumWidth(440)

        layout = QVBoxLayout(self)
        header = f"<b>{app.name}</b> — {app.category}<br>{app.description}"
        details = [f"Security: {app.security_level}"]
        if app.compliance_badges:
            details.append("Compliance: " + ", ".join(sorted(app.compliance_badges)))
        if app.monthly_cost:
            details.append(f"Cost: {app.monthly_cost}")
        layout.addWidget(QLabel(header + "<br><small>" + " • ".join(details) + "</small>"))

        form = QFormLayout()
        self.justification = QPlainTextEdit()
        self.justification.setPlaceholderText("Why do you need access to this application?")
        self.duration = _combo("Select duration", DURATION_OPTIONS)
        self.urgency = _combo("Select urgency", URGENCY_OPTIONS)
        self.business_case = QPlainTextEdit()
        self.business_case.setPlaceholderText("Optional: expected impact, projects, team members…")
        form.addRow("Business justification *", self.justification)
        form.addRow("Access duration *", self.duration)
        form.addRow("Urgency *", self.urgency)
        form.addRow("Business case", self.business_case)
        layout.addLayout(form)

        self.error = QLabel("")
        self.error.setStyleSheet(ERROR_STYLE)
        self.error.setWordWrap(True)
        layout.addWidget(self.error)

        buttons = QHBoxLayout()
        buttons.addStretch(1)
        self.btn_cancel = QPushButton("Cancel")
        self.btn_cancel.clicked.connect(self.reject)
        self.btn_submit = QPushButton("Submit Request")
        self.btn_submit.clicked.connect(self._submit)
        buttons.addWidget(self.btn_cancel)
        buttons.addWidget(self.btn_submit)
        layout.addLayout(buttons)

        self.justification.textChanged.connect(self._update_submit)
        self.duration.currentIndexChanged.connect(self._update_submit)
        self.urgency.currentIndexChanged.connect(self._update_submit)
        self._update_submit()

    def _update_submit(self):
        ready = bool(self.justification.toPlainText().strip()) and bool(self.duration.currentData()) \
            and bool(self.urgency.currentData())
        self.btn_submit.setEnabled(ready)

    def _submit(self):
        try:
            self.controller.submit_request(
                self.app.id,
                justification=self.justification.toPlainText(),
                duration=self.duration.currentData(),
                urgency=self.urgency.currentData(),
                business_case=self.business_case.toPlainText(),
            )
        except (RestrictedAccessError, ValidationError) as e:
            self.error.setText(str(e))
            return
        self.accept()
