#===============================================================================
#  Access_Hub | tests/test_catalog.py
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

import json
from pathlib import Path

import pytest

from accesshub.catalog import load_catalog, record_from_dict
from accesshub.config import BASE_DIR
from accesshub.errors import CatalogLoadError

from conftest import CATALOG_ROWS


def _write(tmp_path: Path, payload) -> Path:
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_load_catalog_accepts_apps_object(tmp_path: Path) -> None:
    store = load_catalog(_write(tmp_path, {"apps": CATALOG_ROWS}))
    assert len(store) == len(CATALOG_ROWS)
    assert [r.id for r in store.list_all()] == [row["id"] for row in CATALOG_ROWS]


def test_load_catalog_accepts_bare_list(tmp_path: Path) -> None:
    store = load_catalog(_write(tmp_path, CATALOG_ROWS[:2]))
    assert store.get("slack").name == "Slack"
    assert store.get("missing") is None


def test_shipped_catalog_loads() -> None:
    store = load_catalog(BASE_DIR / "data" / "catalog.json")
    assert len(store) >= 10
    assert store.find_by_name("Figma") is not None


def test_record_defaults_and_types(catalog) -> None:
    hubspot = catalog.get("hubspot")
    assert hubspot.base_status == "available"
    assert hubspot.security_level == "medium"
    assert hubspot.compliance_badges == frozenset()
    assert hubspot.tags == ("email",)
    assert hubspot.departments == frozenset({"Marketing"})
    assert hubspot.launch_url is None


def test_missing_file_is_fatal(tmp_path: Path) -> None:
    with pytest.raises(CatalogLoadError, match="not found"):
        load_catalog(tmp_path / "nope.json")


def test_bad_json_is_fatal(tmp_path: Path) -> None:
    path = tmp_path / "catalog.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(CatalogLoadError, match="unreadable"):
        load_catalog(path)


def test_wrong_top_level_shape(tmp_path: Path) -> None:
    with pytest.raises(CatalogLoadError):
        load_catalog(_write(tmp_path, {"applications": []}))


def test_duplicate_ids_rejected(tmp_path: Path) -> None:
    rows = [CATALOG_ROWS[0], dict(CATALOG_ROWS[1], id="slack")]
    with pytest.raises(CatalogLoadError, match="Duplicate app id: slack"):
        load_catalog(_write(tmp_path, rows))


@pytest.mark.parametrize(
    "changes, message",
    [
        ({"rating": 5.5}, "outside"),
        ({"review_count": -1}, "non-negative"),
        ({"base_status": "owned"}, "base_status"),
        ({"security_level": "extreme"}, "security_level"),
        ({"departments": "Sales"}, "list of strings"),
        ({"rating": "great"}, "bad rating"),
    ],
)
def test_invalid_fields(changes, message) -> None:
    row = dict(CATALOG_ROWS[0], **changes)
    with pytest.raises(CatalogLoadError, match=message):
        record_from_dict(row)


def test_missing_required_field() -> None:
    row = dict(CATALOG_ROWS[0])
    del row["category"]
    with pytest.raises(CatalogLoadError, match="missing: category"):
        record_from_dict(row)


def test_departments_and_compliance_options(catalog) -> None:
    assert "Engineering" in catalog.departments()
    assert len(catalog.departments()) == len(set(catalog.departments()))
    assert set(catalog.compliance_options()) == {"SOC2", "GDPR", "HIPAA", "ISO27001"}
