#===============================================================================
#  Access_Hub | tests/test_lifecycle.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import pytest

from accesshub.errors import InvalidTransitionError, NotFoundError, ValidationError
from accesshub.lifecycle import (
    TRANSITIONS,
    RequestLifecycle,
    advance,
    is_terminal,
    transition,
    validate_request_fields,
)
from accesshub.models import AccessRequest

from conftest import ScriptedRandom

ORDER = ["pending", "approved", "provisioning", "complete"]


def _req(status: str = "pending", rid: str = "req-1") -> AccessRequest:
    return AccessRequest(
        id=rid, app_id="figma", app_name="Figma", status=status,
        justification="UI collaboration", duration="6-months", urgency="medium",
    )


@pytest.fixture()
def lifecycle() -> RequestLifecycle:
    return RequestLifecycle()


@pytest.mark.parametrize(
    "justification, duration, urgency",
    [
        ("", "6-months", "medium"),
        ("   ", "6-months", "medium"),
        ("UI collaboration", "", "medium"),
        ("UI collaboration", "6-months", ""),
        ("UI collaboration", "forever", "medium"),
        ("UI collaboration", "6-months", "asap"),
    ],
)
def test_submit_validation_gate_leaves_list_untouched(lifecycle, catalog, justification, duration, urgency) -> None:
    with pytest.raises(ValidationError):
        lifecycle.submit(catalog.get("figma"), justification, duration, urgency)
    assert lifecycle.requests == ()


def test_validation_names_missing_fields() -> None:
    with pytest.raises(ValidationError, match="justification, urgency"):
        validate_request_fields("", "6-months", "")


def test_submit_inserts_at_head_with_fresh_ids(lifecycle, catalog) -> None:
    first = lifecycle.submit(catalog.get("figma"), "UI collaboration", "6-months", "medium")
    second = lifecycle.submit(catalog.get("github"), " code review ", "30-days", "high", business_case="  ")
    assert [r.id for r in lifecycle.requests] == [second.id, first.id]
    assert first.id != second.id
    assert second.status == "pending"
    assert second.justification == "code review"
    assert second.business_case == ""
    assert second.request_date == "Just now"
    assert (second.app_id, second.app_name) == ("github", "GitHub")


def test_transition_table_is_linear_plus_reject() -> None:
    for current, nxt in zip(ORDER, ORDER[1:]):
        assert transition(_req(current), nxt).status == nxt
    assert transition(_req("pending"), "rejected").status == "rejected"


@pytest.mark.parametrize(
    "current, target",
    [
        ("pending", "provisioning"),
        ("pending", "complete"),
        ("approved", "pending"),
        ("approved", "rejected"),
        ("provisioning", "approved"),
        ("complete", "pending"),
        ("rejected", "approved"),
    ],
)
def test_illegal_transitions_raise(current, target) -> None:
    with pytest.raises(InvalidTransitionError):
        transition(_req(current), target)


def test_terminal_states() -> None:
    assert is_terminal("complete") and is_terminal("rejected")
    assert not any(is_terminal(s) for s in ("pending", "approved", "provisioning"))
    assert TRANSITIONS["complete"] == frozenset() and TRANSITIONS["rejected"] == frozenset()


def test_advance_moves_each_request_at_most_one_step() -> None:
    reqs = [_req("pending", "req-1"), _req("approved", "req-2"), _req("provisioning", "req-3")]
    rng = ScriptedRandom([0.0, 0.0, 0.0])
    out, events = advance(reqs, rng)
    assert [r.status for r in out] == ["approved", "provisioning", "complete"]
    assert [(e.previous_status, e.status) for e in events] == [
        ("pending", "approved"), ("approved", "provisioning"), ("provisioning", "complete"),
    ]
    assert rng.calls == 3
    # input untouched
    assert [r.status for r in reqs] == ["pending", "approved", "provisioning"]


def test_advance_stamps_fields() -> None:
    approved, _ = advance([_req("pending")], ScriptedRandom([0.0]))
    assert approved[0].approver and approved[0].notes
    provisioning, _ = advance(approved, ScriptedRandom([0.0]))
    assert provisioning[0].estimated_completion == "Within 24 hours"
    assert provisioning[0].approver == approved[0].approver


@pytest.mark.parametrize(
    "status, probability",
    [("pending", 0.3), ("approved", 0.2), ("provisioning", 0.1)],
)
def test_advance_probability_threshold(status, probability) -> None:
    moved, _ = advance([_req(status)], ScriptedRandom([probability - 0.01]))
    stayed, events = advance([_req(status)], ScriptedRandom([probability]))
    assert moved[0].status != status
    assert stayed[0].status == status and events == []


def test_terminal_requests_absorb_and_draw_nothing() -> None:
    rng = ScriptedRandom([0.0, 0.0])
    out, events = advance([_req("complete", "req-1"), _req("rejected", "req-2")], rng)
    assert [r.status for r in out] == ["complete", "rejected"]
    assert events == [] and rng.calls == 0


def test_status_is_monotonic_over_many_ticks(lifecycle, catalog) -> None:
    lifecycle.submit(catalog.get("figma"), "UI collaboration", "6-months", "medium")
    rng = ScriptedRandom([0.05] * 3 + [0.5] * 10)
    seen = []
    for _ in range(12):
        lifecycle.advance(rng)
        seen.append(ORDER.index(lifecycle.requests[0].status))
    assert seen == sorted(seen)
    assert lifecycle.requests[0].status == "complete"


def test_reject_pending_only(lifecycle, catalog) -> None:
    req = lifecycle.submit(catalog.get("figma"), "UI collaboration", "6-months", "medium")
    ev = lifecycle.reject(req.id, "Dana (IT)", "No budget")
    assert ev.previous_status == "pending"
    assert lifecycle.get(req.id).status == "rejected"
    assert lifecycle.get(req.id).approver == "Dana (IT)"
    with pytest.raises(InvalidTransitionError):
        lifecycle.reject(req.id, "Dana (IT)")
    with pytest.raises(NotFoundError):
        lifecycle.reject("req-404", "Dana (IT)")


def test_cancel_removes_any_status_and_ignores_unknown(lifecycle, catalog) -> None:
    req = lifecycle.submit(catalog.get("figma"), "UI collaboration", "6-months", "medium")
    lifecycle.advance(ScriptedRandom([0.0]))
    assert lifecycle.cancel("req-404") is None
    removed = lifecycle.cancel(req.id)
    assert removed.status == "approved"
    assert lifecycle.requests == ()


def test_seed_appends_and_counts(lifecycle, catalog) -> None:
    lifecycle.submit(catalog.get("figma"), "UI collaboration", "6-months", "medium")
    seeded = lifecycle.seed(_req("approved", rid=""))
    assert lifecycle.requests[-1] is seeded
    assert seeded.id.startswith("req-")
    counts = lifecycle.counts()
    assert counts["all"] == 2 and counts["pending"] == 1 and counts["approved"] == 1
    assert [r.id for r in lifecycle.by_status("approved")] == [seeded.id]
    assert len(lifecycle.by_status("all")) == 2
    with pytest.raises(ValidationError):
        lifecycle.seed(_req("archived"))


def test_has_live_request_for(lifecycle, catalog) -> None:
    req = lifecycle.submit(catalog.get("figma"), "UI collaboration", "6-months", "medium")
    assert lifecycle.has_live_request_for("figma")
    lifecycle.reject(req.id, "Dana (IT)")
    assert not lifecycle.has_live_request_for("figma")
