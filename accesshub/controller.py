#===============================================================================
#  Access_Hub | controller.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  The hub controller: the only writer of AppState. UI commands and simulator
#  ticks both come through here, on the Qt main thread, and each one runs to
#  completion before the next. Views read back through the query helpers and
#  are told to re-render via subscribe().
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import random
import webbrowser
from dataclasses import replace
from datetime import datetime, timedelta
from typing import Callable, Dict, List, Optional, Tuple

from .catalog import CatalogStore
from .constants import (
    ALL,
    ALL_DEPARTMENTS,
    REQ_APPROVED,
    REQ_COMPLETE,
    REQ_PENDING,
    REQ_PROVISIONING,
    SIM_ESTIMATED_COMPLETION,
    SORT_OPTIONS,
    SSO_DEMO_EMAIL,
    SSO_DEMO_NAME,
    STATUS_OWNED,
    STATUS_PENDING,
    STATUS_RESTRICTED,
)
from .errors import NotFoundError, RestrictedAccessError, ValidationError
from .launcher import launch_app
from .lifecycle import RandomSource, TransitionEvent
from .models import AccessRequest, AppRecord, Notification, OwnedApp, ResolvedApp, UserSession
from .query import CatalogFilters, query
from .resolver import effective_status, resolve
from .state import (
    AppState,
    add_owned,
    add_pending,
    default_state,
    release_pending,
    reset_for_logout,
    seed_owned_for_department,
    touch_last_used,
)

log = logging.getLogger(__name__)

APP_ACTIONS = ("launch", "request")


class PortalController:
    def __init__(
        self,
        catalog: CatalogStore,
        rng: Optional[RandomSource] = None,
        launcher: Callable[[AppRecord], bool] = launch_app,
        seed_demo_requests: bool = False,
    ):
        self.catalog = catalog
        self.state: AppState = default_state()
        self.rng = rng or random.Random()
        self._launch = launcher
        self._seed_demo_requests = seed_demo_requests
        self._listeners: List[Callable[[], None]] = []

    # ----------------------------
    # Change notification
    # ----------------------------
    def subscribe(self, callback: Callable[[], None]) -> None:
        self._listeners.append(callback)

    def _changed(self) -> None:
        for cb in list(self._listeners):
            cb()

    def _notify(self, level: str, message: str) -> Notification:
        n = Notification(level=level, message=message)
        self.state.notifications.append(n)
        return n

    @property
    def has_notifications(self) -> bool:
        return bool(self.state.notifications)

    @property
    def latest_notification(self) -> Optional[Notification]:
        return self.state.notifications[-1] if self.state.notifications else None

    def drain_notifications(self) -> List[Notification]:
        out = self.state.notifications
        self.state.notifications = []
        return out

    # ----------------------------
    # Session
    # ----------------------------
    @property
    def session(self) -> Optional[UserSession]:
        return self.state.session

    @property
    def is_new_user(self) -> bool:
        return self.state.is_new_user

    def login(self, email: str, password: str, department: str, role: str, name: Optional[str] = None) -> UserSession:
        """Stubbed sign-in: any well-formed input succeeds."""
        email = (email or "").strip()
        if not email or "@" not in email:
            raise ValidationError("A valid email address is required.")
        if not password:
            raise ValidationError("Password is required.")
        if not (department or "").strip():
            raise ValidationError("Department is required.")
        if not (role or "").strip():
            raise ValidationError("Role is required.")
        display = (name or "").strip() or email.split("@", 1)[0].replace(".", " ").title()
        return self._start_session(UserSession(name=display, email=email, department=department.strip(), role=role.strip()))

    def sso_login(self, department: str = "", role: str = "") -> UserSession:
        """SSO sign-in always yields the demo identity."""
        return self._start_session(
            UserSession(
                name=SSO_DEMO_NAME,
                email=SSO_DEMO_EMAIL,
                department=(department or "").strip() or "Marketing",
                role=(role or "").strip() or "Manager",
            )
        )

    def _start_session(self, session: UserSession) -> UserSession:
        if self.state.session is not None:
            self.logout()
        self.state.session = session
        seeded = seed_owned_for_department(self.state, self.catalog, session.department)
        self.state.filters = CatalogFilters(department=session.department)
        if self._seed_demo_requests:
            self._seed_demo()
        log.info("Signed in %s (%s, %s); %d starter apps", session.email, session.department, session.role, len(seeded))
        self._notify("success", f"Welcome back, {session.name}!")
        self._changed()
        return session

    def _seed_demo(self) -> None:
        now = datetime.now()
        demo = [
            ("Salesforce", AccessRequest(
                id="", app_id="", app_name="Salesforce", status=REQ_APPROVED,
                justification="Need CRM access for new client onboarding process",
                duration="1-year", urgency="medium",
                requested_at=now - timedelta(days=2), request_date="2 days ago",
                approver="Sarah Chen (Sales Manager)",
                notes="Approved for full access. Training session scheduled for next week.",
            )),
            ("Figma", AccessRequest(
                id="", app_id="", app_name="Figma", status=REQ_PROVISIONING,
                justification="Required for UI design collaboration with engineering team",
                duration="6-months", urgency="medium",
                requested_at=now - timedelta(weeks=1), request_date="1 week ago",
                approver="Mike Johnson (Design Lead)",
                estimated_completion=SIM_ESTIMATED_COMPLETION,
            )),
        ]
        for app_name, req in demo:
            rec = self.catalog.find_by_name(app_name)
            if rec is None or rec.id in self.state.owned:
                continue
            self.state.requests.seed(replace(req, app_id=rec.id))
            add_pending(self.state, rec.id)

    def logout(self) -> None:
        if self.state.session is None:
            return
        log.info("Signed out %s", self.state.session.email)
        reset_for_logout(self.state)
        self._changed()

    def _require_session(self) -> UserSession:
        if self.state.session is None:
            raise ValidationError("Sign in first.")
        return self.state.session

    # ----------------------------
    # Requests
    # ----------------------------
    def submit_request(
        self,
        app_id: str,
        justification: str,
        duration: str,
        urgency: str,
        business_case: str = "",
    ) -> AccessRequest:
        self._require_session()
        app = self.catalog.get(app_id)
        if app is None:
            raise NotFoundError(f"Unknown app: {app_id}")
        self._check_requestable(app, self._effective_status(app))
        try:
            req = self.state.requests.submit(app, justification, duration, urgency, business_case)
        except ValidationError as e:
            log.warning("Request for %s rejected: %s", app_id, e)
            raise
        add_pending(self.state, app.id)
        self._notify("success", f"Access request submitted for {app.name}")
        self._changed()
        return req

    def cancel_request(self, request_id: str) -> Optional[AccessRequest]:
        removed = self.state.requests.cancel(request_id)
        if removed is None:
            return None
        release_pending(self.state, removed.app_id)
        self._notify("success", "Request cancelled")
        self._changed()
        return removed

    def reject_request(self, request_id: str, reviewer: str, notes: str = "") -> AccessRequest:
        ev = self.state.requests.reject(request_id, reviewer, notes)
        release_pending(self.state, ev.request.app_id)
        self._notify("error", f"{ev.request.app_name} request was rejected.")
        self._changed()
        return ev.request

    def requests(self, status: Optional[str] = None) -> List[AccessRequest]:
        return self.state.requests.by_status(status)

    def request_counts(self) -> Dict[str, int]:
        return self.state.requests.counts()

    def pending_request_count(self) -> int:
        return self.state.requests.counts()[REQ_PENDING]

    # ----------------------------
    # Simulator tick
    # ----------------------------
    def tick(self) -> List[TransitionEvent]:
        events = self.state.requests.advance(self.rng)
        for ev in events:
            if ev.status == REQ_APPROVED:
                self._notify("success", f"{ev.request.app_name} request approved!")
            elif ev.status == REQ_COMPLETE:
                self._materialize(ev.request)
        if events:
            self._changed()
        return events

    def _materialize(self, req: AccessRequest) -> None:
        rec = self.catalog.find_by_name(req.app_name)
        if rec is None:
            log.warning("Completed request %s names unknown app %r; nothing to add", req.id, req.app_name)
            return
        add_owned(self.state, rec.id)
        self.state.is_new_user = False
        self._notify("success", f"{rec.name} is now available! You can launch it from your dashboard.")

    # ----------------------------
    # App actions
    # ----------------------------
    def app_action(self, app_id: str, action: str) -> Optional[ResolvedApp]:
        """Dispatch a tile action.

        launch  -> updates last-used and opens the app (owned apps only)
        request -> returns the resolved app so the caller can open the form;
                   raises RestrictedAccessError / ValidationError when the
                   app cannot be requested.
        Unknown app ids are ignored.
        """
        if action not in APP_ACTIONS:
            raise ValidationError(f"Unknown app action: {action}")
        app = self.catalog.get(app_id)
        if app is None:
            log.debug("App action %s ignored, unknown app %s", action, app_id)
            return None
        status = self._effective_status(app)

        if action == "launch":
            return self._launch_owned(app, status)

        self._check_requestable(app, status)
        return ResolvedApp(record=app, status=status)

    def _effective_status(self, app: AppRecord) -> str:
        return effective_status(app, self.state.owned.keys(), set(self.state.pending_ids))

    def _check_requestable(self, app: AppRecord, status: str) -> None:
        if status == STATUS_RESTRICTED:
            err = RestrictedAccessError(app.name)
            log.warning("Blocked request for restricted app %s", app.id)
            self._notify("error", err.message)
            self._changed()
            raise err
        if status == STATUS_OWNED:
            raise ValidationError(f"You already have access to {app.name}.")
        if status == STATUS_PENDING:
            raise ValidationError(f"A request for {app.name} is already in progress.")

    def _launch_owned(self, app: AppRecord, status: str) -> Optional[ResolvedApp]:
        if not touch_last_used(self.state, app.id):
            log.debug("Launch ignored, %s is not owned", app.id)
            return None
        self._notify("success", f"Launching {app.name}...")
        try:
            self._launch(app)
        except (RuntimeError, webbrowser.Error) as e:
            log.exception("Launch failed for %s", app.id)
            self._notify("error", f"Could not open {app.name}: {e}")
        self._changed()
        return ResolvedApp(record=app, status=status)

    # ----------------------------
    # Catalog view
    # ----------------------------
    def set_filters(self, department: Optional[str] = None, compliance: Optional[str] = None, status: Optional[str] = None) -> None:
        self.state.filters = self.state.filters.with_changes(department=department, compliance=compliance, status=status)
        self._changed()

    def clear_filters(self) -> None:
        self.state.filters = CatalogFilters(department=ALL_DEPARTMENTS, compliance=ALL, status=ALL)
        self._changed()

    def set_sort(self, key: str) -> None:
        if key not in SORT_OPTIONS:
            raise ValidationError(f"Unknown sort key: {key}")
        self.state.sort = key
        self._changed()

    def set_search_text(self, text: str) -> None:
        self.state.search_text = (text or "").strip()
        self._changed()

    def resolved_apps(self) -> List[ResolvedApp]:
        return resolve(self.catalog.list_all(), self.state.owned.keys(), set(self.state.pending_ids))

    def visible_apps(self) -> List[ResolvedApp]:
        """The catalog as currently filtered and sorted.

        While a search is active the department filter is ignored, so a
        search always covers the whole catalog.
        """
        filters = self.state.filters
        if self.state.search_text:
            filters = replace(filters, department=ALL_DEPARTMENTS)
        return query(self.resolved_apps(), filters, self.state.sort, self.state.search_text)

    def my_apps(self) -> List[Tuple[AppRecord, OwnedApp]]:
        out = []
        for app_id, owned in self.state.owned.items():
            rec = self.catalog.get(app_id)
            if rec is not None:
                out.append((rec, owned))
        return out
