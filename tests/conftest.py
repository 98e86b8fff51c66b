#===============================================================================
#  Access_Hub | tests/conftest.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Shared fixtures: a small hand-built catalog, a scripted random source for
#  the simulator, a controller with a recording launcher, and a headless Qt
#  application for the timer tests.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import os
from typing import Any, Dict, List

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from accesshub.catalog import CatalogStore, record_from_dict
from accesshub.controller import PortalController
from accesshub.models import AppRecord

# Declaration order matters for department seeding; only github and okta list Engineering.
CATALOG_ROWS: List[Dict[str, Any]] = [
    {"id": "slack", "name": "Slack", "description": "Team messaging", "category": "Communication",
     "departments": ["Sales", "Marketing", "HR"], "rating": 4.7, "review_count": 2000,
     "tags": ["chat"], "compliance_badges": ["SOC2", "GDPR"], "trending": True, "recommended": True,
     "launch_url": "https://slack.example.com"},
    {"id": "salesforce", "name": "Salesforce", "description": "CRM for pipelines", "category": "CRM",
     "departments": ["Sales", "Marketing"], "rating": 4.4, "review_count": 1200,
     "tags": ["crm"], "compliance_badges": ["SOC2", "HIPAA"], "recommended": True, "security_level": "high"},
    {"id": "figma", "name": "Figma", "description": "Interface design", "category": "Design",
     "departments": ["Design", "Marketing"], "rating": 4.8, "review_count": 800,
     "tags": ["design", "prototyping"], "compliance_badges": ["SOC2"], "trending": True},
    {"id": "github", "name": "GitHub", "description": "Source control", "category": "Development",
     "departments": ["Engineering"], "rating": 4.9, "review_count": 1500,
     "tags": ["git", "code"], "compliance_badges": ["SOC2", "ISO27001"], "security_level": "high"},
    {"id": "hubspot", "name": "HubSpot", "description": "Marketing automation", "category": "Marketing",
     "departments": ["Marketing"], "rating": 4.5, "review_count": 700, "tags": ["email"]},
    {"id": "workday", "name": "Workday", "description": "Payroll and HR", "category": "HR",
     "departments": ["HR", "Finance"], "rating": 3.9, "review_count": 2200,
     "compliance_badges": ["HIPAA"], "security_level": "high"},
    {"id": "netsuite", "name": "NetSuite", "description": "ERP ledger", "category": "Finance",
     "departments": ["Finance"], "rating": 4.0, "review_count": 400, "base_status": "restricted",
     "security_level": "high"},
    {"id": "okta", "name": "Okta Admin", "description": "Identity administration", "category": "Security",
     "departments": ["Engineering", "Operations"], "rating": 4.4, "review_count": 90,
     "base_status": "restricted", "security_level": "high", "tags": ["sso"]},
    {"id": "docusign", "name": "DocuSign", "description": "Electronic signatures", "category": "Legal",
     "departments": ["Legal", "Sales"], "rating": 4.6, "review_count": 500},
    {"id": "notion", "name": "Notion", "description": "Docs and wikis", "category": "Productivity",
     "departments": ["Marketing", "Design"], "rating": 4.6, "review_count": 900, "tags": ["wiki"],
     "security_level": "low"},
]


class ScriptedRandom:
    """Returns queued values in order, then `default` forever. Counts draws."""

    def __init__(self, values=(), default: float = 0.99):
        self.values = list(values)
        self.default = default
        self.calls = 0

    def queue(self, *values: float) -> None:
        self.values.extend(values)

    def random(self) -> float:
        self.calls += 1
        if self.values:
            return self.values.pop(0)
        return self.default


class RecordingLauncher:
    def __init__(self):
        self.launched: List[str] = []
        self.error = None

    def __call__(self, record: AppRecord) -> bool:
        if self.error is not None:
            raise self.error
        self.launched.append(record.id)
        return True


@pytest.fixture()
def catalog() -> CatalogStore:
    return CatalogStore(record_from_dict(row) for row in CATALOG_ROWS)


@pytest.fixture()
def rng() -> ScriptedRandom:
    return ScriptedRandom()


@pytest.fixture()
def launcher() -> RecordingLauncher:
    return RecordingLauncher()


@pytest.fixture()
def controller(catalog: CatalogStore, rng: ScriptedRandom, launcher: RecordingLauncher) -> PortalController:
    return PortalController(catalog, rng=rng, launcher=launcher)


@pytest.fixture()
def signed_in(controller: PortalController) -> PortalController:
    controller.login("jane.doe@company.com", "pw", "Marketing", "Manager")
    controller.drain_notifications()
    return controller


@pytest.fixture(scope="session")
def qapp():
    from PySide6.QtCore import QCoreApplication

    app = QCoreApplication.instance() or QCoreApplication([])
    yield app
