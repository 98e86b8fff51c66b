#===============================================================================
#  Access_Hub | errors.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Error taxonomy shared by the catalog, the request lifecycle and the UI.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations


class AccessHubError(Exception):
    """Base error. `code` is a stable identifier the UI can switch on."""

    code = "ACCESS_HUB_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class ValidationError(AccessHubError):
    """Missing or malformed input on a command (request form, login)."""

    code = "VALIDATION_ERROR"


class NotFoundError(AccessHubError):
    code = "NOT_FOUND"


class RestrictedAccessError(AccessHubError):
    """The user asked for an app whose effective status is restricted."""

    code = "RESTRICTED"

    def __init__(self, app_name: str):
        super().__init__(f"{app_name} access is restricted. Contact your IT administrator.")
        self.app_name = app_name


class InvalidTransitionError(AccessHubError):
    code = "INVALID_TRANSITION"


class CatalogLoadError(AccessHubError):
    """The catalog fixture could not be read. Fatal at startup."""

    code = "CATALOG_LOAD_FAILED"
