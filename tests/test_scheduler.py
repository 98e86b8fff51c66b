#===============================================================================
#  Access_Hub | tests/test_scheduler.py
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
import shiboken6

from accesshub.scheduler import ProgressionDriver


def test_rejects_non_positive_interval(qapp) -> None:
    with pytest.raises(ValueError):
        ProgressionDriver(lambda: None, interval_ms=0)


def test_start_stop_are_idempotent(qapp) -> None:
    driver = ProgressionDriver(lambda: None, interval_ms=50)
    assert driver.interval_ms == 50
    assert not driver.is_running()
    driver.start()
    driver.start()
    assert driver.is_running()
    driver.stop()
    driver.stop()
    assert not driver.is_running()


def test_tick_calls_callback_and_emits(qapp) -> None:
    calls, emitted = [], []
    driver = ProgressionDriver(lambda: calls.append(1), interval_ms=50)
    driver.ticked.connect(lambda: emitted.append(1))
    driver._tick()
    driver._tick()
    assert driver.tick_count == 2
    assert calls == [1, 1]
    assert emitted == [1, 1]


def test_tick_drives_controller(qapp, engineer_controller) -> None:
    driver = ProgressionDriver(engineer_controller.tick, interval_ms=50)
    engineer_controller.rng.queue(0.0)
    driver._tick()
    assert engineer_controller.requests()[0].status == "approved"


def test_stop_after_timer_destroyed(qapp) -> None:
    driver = ProgressionDriver(lambda: None, interval_ms=50)
    driver.start()
    shiboken6.delete(driver._timer)
    assert not driver.is_running()
    assert driver.interval_ms == 0
    driver.stop()
    driver.start()
    assert not driver.is_running()


@pytest.fixture()
def engineer_controller(controller):
    controller.login("sam.lee@company.com", "pw", "Engineering", "Senior")
    controller.submit_request("figma", "UI collaboration", "6-months", "medium")
    return controller
