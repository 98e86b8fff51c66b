#===============================================================================
#  Access_Hub | lifecycle.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Access request state machine and its simulated background progression.
#
#      pending --> approved --> provisioning --> complete
#         \
#          +----> rejected
#
#  complete and rejected are terminal. Every status change goes through
#  transition(), which refuses any edge not listed in TRANSITIONS.
#
#  advance() is the per-tick step: each live request gets one draw from the
#  injected random source and moves at most one edge forward. Nothing
#  guarantees a request ever completes; the simulator is best-effort.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Dict, FrozenSet, List, Optional, Protocol, Sequence, Tuple

from .constants import (
    DURATION_OPTIONS,
    JUST_NOW,
    P_APPROVE,
    P_COMPLETE,
    P_PROVISION,
    REQ_APPROVED,
    REQ_COMPLETE,
    REQ_PENDING,
    REQ_PROVISIONING,
    REQ_REJECTED,
    REQUEST_STATUSES,
    SIM_APPROVAL_NOTE,
    SIM_APPROVER,
    SIM_ESTIMATED_COMPLETION,
    TERMINAL_REQUEST_STATUSES,
    URGENCY_OPTIONS,
)
from .errors import InvalidTransitionError, NotFoundError, ValidationError
from .models import AccessRequest, AppRecord

log = logging.getLogger(__name__)

TRANSITIONS: Dict[str, FrozenSet[str]] = {
    REQ_PENDING: frozenset({REQ_APPROVED, REQ_REJECTED}),
    REQ_APPROVED: frozenset({REQ_PROVISIONING}),
    REQ_PROVISIONING: frozenset({REQ_COMPLETE}),
    REQ_COMPLETE: frozenset(),
    REQ_REJECTED: frozenset(),
}


class RandomSource(Protocol):
    def random(self) -> float: ...


@dataclass(frozen=True)
class SimulatedStep:
    probability: float
    target: str
    stamps: Tuple[Tuple[str, str], ...] = ()


# One forward edge per live state; rejection is never simulated.
SIMULATED_STEPS: Dict[str, SimulatedStep] = {
    REQ_PENDING: SimulatedStep(P_APPROVE, REQ_APPROVED, (("approver", SIM_APPROVER), ("notes", SIM_APPROVAL_NOTE))),
    REQ_APPROVED: SimulatedStep(P_PROVISION, REQ_PROVISIONING, (("estimated_completion", SIM_ESTIMATED_COMPLETION),)),
    REQ_PROVISIONING: SimulatedStep(P_COMPLETE, REQ_COMPLETE),
}


@dataclass(frozen=True)
class TransitionEvent:
    """Emitted whenever a request changes status."""
    request: AccessRequest      # the request after the transition
    previous_status: str

    @property
    def status(self) -> str:
        return self.request.status


def is_terminal(status: str) -> bool:
    return status in TERMINAL_REQUEST_STATUSES


def transition(request: AccessRequest, target: str, **stamps) -> AccessRequest:
    """Return a copy of `request` moved to `target`, with extra fields stamped."""
    if target not in TRANSITIONS.get(request.status, frozenset()):
        raise InvalidTransitionError(f"Request {request.id}: cannot move {request.status} -> {target}")
    return replace(request, status=target, **stamps)


def advance(
    requests: Sequence[AccessRequest],
    rng: RandomSource,
) -> Tuple[List[AccessRequest], List[TransitionEvent]]:
    """One simulator tick over the whole list. Pure apart from the rng draws."""
    out: List[AccessRequest] = []
    events: List[TransitionEvent] = []
    for req in requests:
        step = SIMULATED_STEPS.get(req.status)
        if step is None or rng.random() >= step.probability:
            out.append(req)
            continue
        moved = transition(req, step.target, **dict(step.stamps))
        out.append(moved)
        events.append(TransitionEvent(request=moved, previous_status=req.status))
    return out, events


def validate_request_fields(justification: str, duration: str, urgency: str) -> None:
    missing = [
        label for label, value in (
            ("justification", justification),
            ("duration", duration),
            ("urgency", urgency),
        )
        if not (value or "").strip()
    ]
    if missing:
        raise ValidationError(f"Missing required field(s): {', '.join(missing)}")
    if duration not in DURATION_OPTIONS:
        raise ValidationError(f"Unknown access duration: {duration}")
    if urgency not in URGENCY_OPTIONS:
        raise ValidationError(f"Unknown urgency: {urgency}")


class RequestLifecycle:
    """Owns the request list (most recent first) and the request id counter."""

    def __init__(self):
        self._requests: List[AccessRequest] = []
        self._next_seq = 1

    @property
    def requests(self) -> Tuple[AccessRequest, ...]:
        return tuple(self._requests)

    def _new_id(self) -> str:
        rid = f"req-{self._next_seq}"
        self._next_seq += 1
        return rid

    def get(self, request_id: str) -> Optional[AccessRequest]:
        for r in self._requests:
            if r.id == request_id:
                return r
        return None

    def submit(
        self,
        app: AppRecord,
        justification: str,
        duration: str,
        urgency: str,
        business_case: str = "",
    ) -> AccessRequest:
        validate_request_fields(justification, duration, urgency)
        req = AccessRequest(
            id=self._new_id(),
            app_id=app.id,
            app_name=app.name,
            status=REQ_PENDING,
            justification=justification.strip(),
            duration=duration,
            urgency=urgency,
            business_case=(business_case or "").strip(),
            requested_at=datetime.now(),
            request_date=JUST_NOW,
        )
        self._requests.insert(0, req)
        log.info("Request %s submitted for %s (%s, %s)", req.id, app.name, duration, urgency)
        return req

    def seed(self, request: AccessRequest) -> AccessRequest:
        """Append an already-formed request (demo data) with a fresh id."""
        if request.status not in REQUEST_STATUSES:
            raise ValidationError(f"Unknown request status: {request.status}")
        seeded = replace(request, id=self._new_id())
        self._requests.append(seeded)
        return seeded

    def cancel(self, request_id: str) -> Optional[AccessRequest]:
        """Remove a request whatever its status. Unknown ids are ignored."""
        req = self.get(request_id)
        if req is None:
            log.debug("Cancel ignored, no request %s", request_id)
            return None
        self._requests = [r for r in self._requests if r.id != request_id]
        log.info("Request %s cancelled (was %s)", request_id, req.status)
        return req

    def reject(self, request_id: str, reviewer: str, notes: str = "") -> TransitionEvent:
        req = self.get(request_id)
        if req is None:
            raise NotFoundError(f"No request {request_id}")
        moved = transition(req, REQ_REJECTED, approver=reviewer, notes=notes or None)
        self._replace(moved)
        log.info("Request %s rejected by %s", request_id, reviewer)
        return TransitionEvent(request=moved, previous_status=req.status)

    def _replace(self, updated: AccessRequest) -> None:
        self._requests = [updated if r.id == updated.id else r for r in self._requests]

    def advance(self, rng: RandomSource) -> List[TransitionEvent]:
        """Run one tick and swap the new list in as a whole."""
        new_list, events = advance(self._requests, rng)
        self._requests = new_list
        for ev in events:
            log.info("Request %s: %s -> %s", ev.request.id, ev.previous_status, ev.status)
        return events

    def by_status(self, status: Optional[str] = None) -> List[AccessRequest]:
        if not status or status == "all":
            return list(self._requests)
        return [r for r in self._requests if r.status == status]

    def counts(self) -> Dict[str, int]:
        out = {"all": len(self._requests)}
        for s in REQUEST_STATUSES:
            out[s] = sum(1 for r in self._requests if r.status == s)
        return out

    def has_live_request_for(self, app_id: str) -> bool:
        return any(r.app_id == app_id and not is_terminal(r.status) for r in self._requests)
