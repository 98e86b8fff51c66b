#===============================================================================
#  Access_Hub | launcher.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Opens an owned application. Catalog apps are web apps, so launching means
#  handing the app's launch URL to the default browser.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import webbrowser

from .models import AppRecord

log = logging.getLogger(__name__)


def launch_app(record: AppRecord) -> bool:
    """Open the app's launch URL. Returns False when the app has none.

    Apps without a launch_url are still "launched" as far as the hub is
    concerned (last-used gets updated); there is just nothing to open.
    """
    if not record.launch_url:
        log.debug("No launch URL for %s", record.id)
        return False

    if not record.launch_url.lower().startswith(("http://", "https://")):
        raise RuntimeError(f"Refusing to open non-web launch target: {record.launch_url}")

    webbrowser.open(record.launch_url)
    return True
