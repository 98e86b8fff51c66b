#===============================================================================
#  Access_Hub | catalog.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Loads the application catalog fixture (./data/catalog.json) into an
#  immutable, ordered store of AppRecord entries.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple

from .constants import BASE_STATUSES, SECURITY_LEVELS
from .errors import CatalogLoadError
from .models import AppRecord

log = logging.getLogger(__name__)

REQUIRED_FIELDS = ("id", "name", "description", "category", "departments", "rating", "review_count")


class CatalogStore:
    """Read-only view over the catalog, in declaration order."""

    def __init__(self, records: Iterable[AppRecord]):
        self._records: Tuple[AppRecord, ...] = tuple(records)
        self._by_id: Dict[str, AppRecord] = {r.id: r for r in self._records}

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self):
        return iter(self._records)

    def list_all(self) -> Tuple[AppRecord, ...]:
        return self._records

    def get(self, app_id: str) -> Optional[AppRecord]:
        return self._by_id.get(app_id)

    def find_by_name(self, name: str) -> Optional[AppRecord]:
        for r in self._records:
            if r.name == name:
                return r
        return None

    def departments(self) -> List[str]:
        seen: List[str] = []
        for r in self._records:
            for d in sorted(r.departments):
                if d not in seen:
                    seen.append(d)
        return seen

    def compliance_options(self) -> List[str]:
        seen: List[str] = []
        for r in self._records:
            for b in sorted(r.compliance_badges):
                if b not in seen:
                    seen.append(b)
        return seen


def _as_str_list(raw: Any, field_name: str, app_id: str) -> List[str]:
    if raw is None:
        return []
    if not isinstance(raw, list) or not all(isinstance(x, str) for x in raw):
        raise CatalogLoadError(f"App '{app_id}': '{field_name}' must be a list of strings.")
    return raw


def record_from_dict(data: Dict[str, Any]) -> AppRecord:
    """Build one AppRecord from its fixture dict, validating as we go."""
    if not isinstance(data, dict):
        raise CatalogLoadError("Catalog entries must be JSON objects.")

    missing = [f for f in REQUIRED_FIELDS if f not in data]
    app_id = str(data.get("id", "?"))
    if missing:
        raise CatalogLoadError(f"App '{app_id}' is missing: {', '.join(missing)}")

    try:
        rating = float(data["rating"])
        review_count = int(data["review_count"])
    except (TypeError, ValueError) as e:
        raise CatalogLoadError(f"App '{app_id}': bad rating/review_count ({e})") from e

    if not 0.0 <= rating <= 5.0:
        raise CatalogLoadError(f"App '{app_id}': rating {rating} outside 0.0-5.0")
    if review_count < 0:
        raise CatalogLoadError(f"App '{app_id}': review_count must be non-negative")

    base_status = data.get("base_status", "available")
    if base_status not in BASE_STATUSES:
        raise CatalogLoadError(f"App '{app_id}': base_status must be one of {BASE_STATUSES}")

    security_level = data.get("security_level", "medium")
    if security_level not in SECURITY_LEVELS:
        raise CatalogLoadError(f"App '{app_id}': security_level must be one of {SECURITY_LEVELS}")

    return AppRecord(
        id=app_id,
        name=str(data["name"]),
        description=str(data["description"]),
        category=str(data["category"]),
        departments=frozenset(_as_str_list(data["departments"], "departments", app_id)),
        rating=rating,
        review_count=review_count,
        tags=tuple(_as_str_list(data.get("tags"), "tags", app_id)),
        compliance_badges=frozenset(_as_str_list(data.get("compliance_badges"), "compliance_badges", app_id)),
        base_status=base_status,
        trending=bool(data.get("trending", False)),
        recommended=bool(data.get("recommended", False)),
        security_level=security_level,
        usage_stats=str(data.get("usage_stats", "")),
        monthly_cost=data.get("monthly_cost"),
        launch_url=data.get("launch_url"),
    )


def load_catalog(catalog_path: Path) -> CatalogStore:
    """Load the catalog fixture. Any problem raises CatalogLoadError."""
    catalog_path = Path(catalog_path)
    try:
        raw = json.loads(catalog_path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise CatalogLoadError(f"Catalog file not found: {catalog_path}") from e
    except (OSError, json.JSONDecodeError) as e:
        raise CatalogLoadError(f"Catalog file unreadable: {catalog_path} ({e})") from e

    entries = raw.get("apps") if isinstance(raw, dict) else raw
    if not isinstance(entries, list):
        raise CatalogLoadError("Catalog must be a list of apps or an object with an 'apps' list.")

    records: List[AppRecord] = []
    seen_ids = set()
    for entry in entries:
        rec = record_from_dict(entry)
        if rec.id in seen_ids:
            raise CatalogLoadError(f"Duplicate app id: {rec.id}")
        seen_ids.add(rec.id)
        records.append(rec)

    log.info("Loaded %d catalog apps from %s", len(records), catalog_path)
    return CatalogStore(records)
