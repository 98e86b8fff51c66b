#===============================================================================
#  Access_Hub | resolver.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Computes each catalog app's effective status for the signed-in user.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from typing import AbstractSet, Iterable, List

from .constants import STATUS_OWNED, STATUS_PENDING
from .models import AppRecord, ResolvedApp


def effective_status(record: AppRecord, owned_ids: AbstractSet[str], pending_ids: AbstractSet[str]) -> str:
    """owned > pending > the record's own base status."""
    if record.id in owned_ids:
        return STATUS_OWNED
    if record.id in pending_ids:
        return STATUS_PENDING
    return record.base_status


def resolve(
    catalog: Iterable[AppRecord],
    owned_ids: AbstractSet[str],
    pending_ids: AbstractSet[str],
) -> List[ResolvedApp]:
    """Pure: same inputs, same output, same order as the catalog."""
    return [ResolvedApp(record=r, status=effective_status(r, owned_ids, pending_ids)) for r in catalog]
