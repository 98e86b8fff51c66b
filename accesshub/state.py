#===============================================================================
#  Access_Hub | state.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  In-memory hub state for the signed-in user (session, owned apps, pending
#  app ids, requests, catalog view settings) and its maintenance helpers.
#  Nothing here is written to disk; the state lives as long as the process.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .catalog import CatalogStore
from .constants import DEFAULT_SORT, DEPARTMENT_SEED_COUNT, JUST_NOW, STATUS_AVAILABLE
from .lifecycle import RequestLifecycle
from .models import Notification, OwnedApp, UserSession
from .query import CatalogFilters


@dataclass
class AppState:
    session: Optional[UserSession] = None
    owned: Dict[str, OwnedApp] = field(default_factory=dict)   # app_id -> OwnedApp (insertion order)
    pending_ids: List[str] = field(default_factory=list)        # ordered, unique
    requests: RequestLifecycle = field(default_factory=RequestLifecycle)
    filters: CatalogFilters = field(default_factory=CatalogFilters)
    sort: str = DEFAULT_SORT
    search_text: str = ""
    is_new_user: bool = True
    notifications: List[Notification] = field(default_factory=list)


def default_state() -> AppState:
    return AppState()


def add_owned(state: AppState, app_id: str) -> bool:
    """Add an app to the owned set. Returns False if it was already owned."""
    if app_id in state.owned:
        return False
    state.owned[app_id] = OwnedApp(app_id=app_id)
    return True


def touch_last_used(state: AppState, app_id: str) -> bool:
    owned = state.owned.get(app_id)
    if owned is None:
        return False
    owned.last_used = JUST_NOW
    return True


def add_pending(state: AppState, app_id: str) -> None:
    if app_id not in state.pending_ids:
        state.pending_ids.append(app_id)


def release_pending(state: AppState, app_id: str) -> None:
    """Drop an app id from the pending set unless a live request still claims it."""
    if state.requests.has_live_request_for(app_id):
        return
    state.pending_ids = [k for k in state.pending_ids if k != app_id]


def seed_owned_for_department(state: AppState, catalog: CatalogStore, department: str) -> List[str]:
    """Give a new session its department's starter apps (first N available ones)."""
    seeded: List[str] = []
    for rec in catalog.list_all():
        if len(seeded) >= DEPARTMENT_SEED_COUNT:
            break
        if department in rec.departments and rec.base_status == STATUS_AVAILABLE:
            add_owned(state, rec.id)
            seeded.append(rec.id)
    state.is_new_user = not seeded
    return seeded


def reset_for_logout(state: AppState) -> None:
    """Drop everything tied to the session; the next login starts clean."""
    fresh = default_state()
    state.session = fresh.session
    state.owned = fresh.owned
    state.pending_ids = fresh.pending_ids
    state.requests = fresh.requests
    state.filters = fresh.filters
    state.sort = fresh.sort
    state.search_text = fresh.search_text
    state.is_new_user = fresh.is_new_user
    state.notifications = fresh.notifications
