#===============================================================================
#  Access_Hub | query.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Catalog filtering and ranking. Everything here is a pure function of its
#  inputs so the catalog view can be recomputed on every render.
#
#  Filters (all active filters must match):
#    - department  : "All" / empty = no filter, else department membership
#    - search text : case-insensitive substring of name, description or a tag
#    - compliance  : "all" = no filter, else badge membership
#    - status      : "all" = no filter, else effective status equality
#
#  Ranking (stable): trending first, then recommended, then the sort key
#    popular (rating x reviews, desc) | rating (desc) | name (asc, case-insensitive) | newest
#    ("newest" compares ids descending; the catalog has no release date).
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import locale
from dataclasses import dataclass, replace
from typing import Dict, Iterable, List, Optional

from .constants import ALL, ALL_DEPARTMENTS, DEFAULT_SORT, STATUS_AVAILABLE
from .models import ResolvedApp


@dataclass(frozen=True)
class CatalogFilters:
    department: Optional[str] = ALL_DEPARTMENTS
    compliance: str = ALL
    status: str = ALL

    def with_changes(self, **changes) -> "CatalogFilters":
        return replace(self, **{k: v for k, v in changes.items() if v is not None})


def matches_department(app: ResolvedApp, department: Optional[str]) -> bool:
    if not department or department == ALL_DEPARTMENTS:
        return True
    return department in app.departments


def matches_search(app: ResolvedApp, search_text: str) -> bool:
    needle = (search_text or "").lower()
    if not needle:
        return True
    if needle in app.name.lower() or needle in app.description.lower():
        return True
    return any(needle in tag.lower() for tag in app.tags)


def matches_compliance(app: ResolvedApp, compliance: str) -> bool:
    if compliance == ALL:
        return True
    return compliance in app.compliance_badges


def matches_status(app: ResolvedApp, status: str) -> bool:
    if status == ALL:
        return True
    return app.status == status


def matches(app: ResolvedApp, filters: CatalogFilters, search_text: str = "") -> bool:
    return (
        matches_department(app, filters.department)
        and matches_search(app, search_text)
        and matches_compliance(app, filters.compliance)
        and matches_status(app, filters.status)
    )


def rank(apps: Iterable[ResolvedApp], sort: str = DEFAULT_SORT) -> List[ResolvedApp]:
    """Order apps by trending, recommended, then the selected sort key.

    Two stable passes: the sort key first, then the trending/recommended
    tiers, so ties on every tier keep their input order.
    """
    out = list(apps)
    if sort == "popular":
        out.sort(key=lambda a: a.rating * a.review_count, reverse=True)
    elif sort == "rating":
        out.sort(key=lambda a: a.rating, reverse=True)
    elif sort == "name":
        out.sort(key=lambda a: (locale.strxfrm(a.name.casefold()), locale.strxfrm(a.name)))
    elif sort == "newest":
        out.sort(key=lambda a: a.id, reverse=True)
    out.sort(key=lambda a: (not a.trending, not a.recommended))
    return out


def query(
    resolved_apps: Iterable[ResolvedApp],
    filters: Optional[CatalogFilters] = None,
    sort: str = DEFAULT_SORT,
    search_text: str = "",
) -> List[ResolvedApp]:
    filters = filters or CatalogFilters()
    return rank((a for a in resolved_apps if matches(a, filters, search_text)), sort)


def catalog_stats(apps: Iterable[ResolvedApp]) -> Dict[str, int]:
    """Quick stats shown above the catalog grid."""
    apps = list(apps)
    return {
        "total": len(apps),
        "available": sum(1 for a in apps if a.status == STATUS_AVAILABLE),
        "trending": sum(1 for a in apps if a.trending),
        "high_security": sum(1 for a in apps if a.security_level == "high"),
    }
