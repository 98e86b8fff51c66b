#===============================================================================
#  Access_Hub | config.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Runtime settings, read once from ACCESSHUB_* environment variables.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .constants import CATALOG_FILE_NAME, DATA_FOLDER_NAME, DEFAULT_TICK_MS

BASE_DIR = Path(__file__).resolve().parent.parent


def _as_bool(value: Optional[str], default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "y", "on"}


def _as_int(value: Optional[str], default: Optional[int]) -> Optional[int]:
    if value is None or not value.strip():
        return default
    try:
        return int(value.strip())
    except ValueError:
        raise ValueError(f"Expected an integer, got {value!r}") from None


@dataclass(frozen=True)
class Settings:
    catalog_path: Path
    tick_ms: int = DEFAULT_TICK_MS
    simulation_enabled: bool = True
    seed: Optional[int] = None
    demo_requests: bool = True
    log_level: str = "INFO"
    log_json: bool = False


def load_settings() -> Settings:
    raw_catalog = os.getenv("ACCESSHUB_CATALOG_PATH", "").strip()
    catalog_path = Path(raw_catalog) if raw_catalog else BASE_DIR / DATA_FOLDER_NAME / CATALOG_FILE_NAME

    tick_ms = _as_int(os.getenv("ACCESSHUB_TICK_MS"), DEFAULT_TICK_MS)
    if tick_ms is None or tick_ms <= 0:
        raise ValueError("ACCESSHUB_TICK_MS must be a positive integer")

    return Settings(
        catalog_path=catalog_path,
        tick_ms=tick_ms,
        simulation_enabled=_as_bool(os.getenv("ACCESSHUB_SIMULATION"), default=True),
        seed=_as_int(os.getenv("ACCESSHUB_SEED"), None),
        demo_requests=_as_bool(os.getenv("ACCESSHUB_DEMO_REQUESTS"), default=True),
        log_level=(os.getenv("ACCESSHUB_LOG_LEVEL", "INFO").strip().upper() or "INFO"),
        log_json=_as_bool(os.getenv("ACCESSHUB_LOG_JSON"), default=False),
    )
