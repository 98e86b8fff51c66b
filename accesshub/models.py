#===============================================================================
#  Access_Hub | models.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Shared data models used across the hub: catalog records, the signed-in
#  user, owned apps, access requests and notifications.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import FrozenSet, Optional, Tuple


@dataclass(frozen=True)
class AppRecord:
    """One application in the catalog. Loaded once, never mutated."""
    id: str
    name: str
    description: str
    category: str
    departments: FrozenSet[str]
    rating: float                       # 0.0 - 5.0
    review_count: int
    tags: Tuple[str, ...] = ()
    compliance_badges: FrozenSet[str] = frozenset()
    base_status: str = "available"      # "available" | "restricted"
    trending: bool = False
    recommended: bool = False
    security_level: str = "medium"      # "high" | "medium" | "low"
    usage_stats: str = ""
    monthly_cost: Optional[str] = None
    launch_url: Optional[str] = None


@dataclass(frozen=True)
class ResolvedApp:
    """An AppRecord as the current user sees it."""
    record: AppRecord
    status: str                         # "owned" | "pending" | "available" | "restricted"

    def __getattr__(self, name: str):
        # Only called for names not found on ResolvedApp itself.
        if name == "record":
            raise AttributeError(name)
        return getattr(self.record, name)


@dataclass(frozen=True)
class UserSession:
    name: str
    email: str
    department: str
    role: str


@dataclass
class OwnedApp:
    app_id: str
    last_used: Optional[str] = None     # display marker, e.g. "Just now"


@dataclass(frozen=True)
class AccessRequest:
    """A request for access to one catalog app.

    Frozen: the lifecycle replaces a request on every transition instead of
    mutating it, so a tick never leaves a half-updated request behind.
    """
    id: str
    app_id: str
    app_name: str
    status: str
    justification: str
    duration: str
    urgency: str
    business_case: str = ""
    requested_at: datetime = field(default_factory=datetime.now)
    request_date: str = "Just now"
    approver: Optional[str] = None
    notes: Optional[str] = None
    estimated_completion: Optional[str] = None


@dataclass(frozen=True)
class Notification:
    level: str                          # "success" | "info" | "error"
    message: str
    created_at: datetime = field(default_factory=datetime.now)
