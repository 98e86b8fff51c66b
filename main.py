#===============================================================================
#  Access_Hub  |  Enterprise App Catalog & Access Requests
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  A self-service portal where employees browse the company app catalog,
#  launch the apps they own and request access to the rest. Requests move
#  through pending -> approved -> provisioning -> complete on a fixed tick,
#  and completed requests show up on the dashboard.
#
#  Folder Conventions
#  ------------------
#    ./data/catalog.json   -> the app catalog (override: ACCESSHUB_CATALOG_PATH)
#
#  Copyright & License Notes
#  -------------------------
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#
#  This source code is provided "AS IS", without warranty of any kind, express
#  or implied, including but not limited to the warranties of merchantability,
#  fitness for a particular purpose, and noninfringement.
#
#  Third-Party Components
#  ----------------------
#  This project uses PySide6, which is licensed separately by its authors.
#  Ensure compliance with its license terms when distributing this software.
#===============================================================================

import locale
import logging
import random
import sys

from PySide6.QtWidgets import QApplication, QDialog, QMessageBox

from accesshub.catalog import load_catalog
from accesshub.config import load_settings
from accesshub.constants import APP_TITLE
from accesshub.controller import PortalController
from accesshub.dialogs import LoginDialog
from accesshub.errors import CatalogLoadError
from accesshub.logging_setup import setup_logging
from accesshub.main_window import WINDOW_STYLE, MainWindow
from accesshub.scheduler import ProgressionDriver

log = logging.getLogger("accesshub.main")


def main() -> int:
    settings = load_settings()
    setup_logging(settings.log_level, settings.log_json)
    try:
        locale.setlocale(locale.LC_ALL, "")
    except locale.Error as e:
        log.warning("Using the C locale for name sorting: %s", e)

    app = QApplication(sys.argv)
    app.setApplicationName(APP_TITLE)

    try:
        catalog = load_catalog(settings.catalog_path)
    except CatalogLoadError as e:
        log.error("Cannot start: %s", e)
        QMessageBox.critical(None, APP_TITLE, f"Could not load the app catalog.\n\n{e}")
        return 1

    controller = PortalController(
        catalog,
        rng=random.Random(settings.seed),
        seed_demo_requests=settings.demo_requests,
    )
    driver = ProgressionDriver(controller.tick, settings.tick_ms, parent=app)

    login = LoginDialog(controller)
    login.setStyleSheet(WINDOW_STYLE)
    if login.exec() != QDialog.Accepted:
        log.info("Sign-in cancelled")
        return 0

    w = MainWindow(controller, driver)
    w.show()
    if settings.simulation_enabled:
        driver.start()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
