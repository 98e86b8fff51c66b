#===============================================================================
#  Access_Hub | constants.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Central place for UI sizing, theme, catalog/request vocabularies and the
#  request progression simulator's tuning knobs.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from PySide6.QtCore import QSize

APP_TITLE = "Access Hub"
DATA_FOLDER_NAME = "data"
CATALOG_FILE_NAME = "catalog.json"

# --- Effective app status ---
STATUS_OWNED = "owned"
STATUS_PENDING = "pending"
STATUS_AVAILABLE = "available"
STATUS_RESTRICTED = "restricted"
BASE_STATUSES = (STATUS_AVAILABLE, STATUS_RESTRICTED)
SECURITY_LEVELS = ("high", "medium", "low")

# --- Access request lifecycle ---
REQ_PENDING = "pending"
REQ_APPROVED = "approved"
REQ_PROVISIONING = "provisioning"
REQ_COMPLETE = "complete"
REQ_REJECTED = "rejected"
REQUEST_STATUSES = (REQ_PENDING, REQ_APPROVED, REQ_PROVISIONING, REQ_COMPLETE, REQ_REJECTED)
TERMINAL_REQUEST_STATUSES = frozenset({REQ_COMPLETE, REQ_REJECTED})

DURATION_OPTIONS = {
    "30-days": "30 days",
    "90-days": "90 days",
    "6-months": "6 months",
    "1-year": "1 year",
    "permanent": "Permanent",
}
URGENCY_OPTIONS = {
    "low": "Low - Can wait 1-2 weeks",
    "medium": "Medium - Needed within a week",
    "high": "High - Needed within 2-3 days",
    "critical": "Critical - Needed today",
}

# Per-tick transition probabilities for the progression simulator
P_APPROVE = 0.3
P_PROVISION = 0.2
P_COMPLETE = 0.1
DEFAULT_TICK_MS = 5000

SIM_APPROVER = "John Smith (Manager)"
SIM_APPROVAL_NOTE = "Approved based on business justification."
SIM_ESTIMATED_COMPLETION = "Within 24 hours"
JUST_NOW = "Just now"

# --- Catalog filtering ---
ALL_DEPARTMENTS = "All"   # sentinel for the department filter
ALL = "all"               # sentinel for compliance/status filters
DEPARTMENTS = ["Sales", "Marketing", "Engineering", "HR", "Finance", "Legal", "Design", "Operations"]
ROLES = ["Manager", "Senior", "Lead", "Director", "Analyst", "Specialist", "Coordinator", "Associate"]
COMPLIANCE_OPTIONS = [ALL, "SOC2", "GDPR", "HIPAA", "ISO27001"]
STATUS_FILTER_OPTIONS = [ALL, STATUS_AVAILABLE, STATUS_OWNED, STATUS_PENDING, STATUS_RESTRICTED]
SORT_OPTIONS = {
    "popular": "Most Popular",
    "rating": "Highest Rated",
    "name": "Name (A-Z)",
    "newest": "Newest",
}
DEFAULT_SORT = "popular"
DEPARTMENT_SEED_COUNT = 3

SSO_DEMO_NAME = "John Smith"
SSO_DEMO_EMAIL = "john.smith@company.com"

# --- Metro / Windows Phone style theme ---
METRO_BG = "#101010"

STATUS_TILE_COLORS = {
    STATUS_OWNED: "#107C10",       # green
    STATUS_PENDING: "#FFB900",     # yellow
    STATUS_AVAILABLE: "#0078D7",   # blue
    STATUS_RESTRICTED: "#5C2D91",  # deep purple
}

REQUEST_STATUS_COLORS = {
    REQ_PENDING: "#FFB900",
    REQ_APPROVED: "#0078D7",
    REQ_PROVISIONING: "#2D7D9A",
    REQ_COMPLETE: "#107C10",
    REQ_REJECTED: "#E81123",
}

# Tile sizes (approximate Windows Phone "small" and "wide")
TILE_SMALL = QSize(150, 110)
TILE_WIDE = QSize(300, 110)
ICON_SIZE = QSize(48, 48)

# Grid size should accommodate the widest tile so mixed sizes can coexist
GRID_SIZE = TILE_WIDE
