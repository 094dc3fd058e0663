"""Conversion of remote API error responses into ``ServiceFault`` values.

The REST API reports errors as a list of ``{"errorCode", "message",
"fields"}`` objects; the OAuth token endpoint uses ``{"error",
"error_description"}``. Both shapes end up as a ``ServiceFault``.
"""

from __future__ import annotations

import logging
from typing import Any

import requests

from .errors import ErrorCatalog, ServiceFault
from .types import ApiError, OAuthError

_LOG = logging.getLogger(__name__)


def _from_api_error(entry: ApiError) -> ServiceFault:
    return ServiceFault.from_code(
        entry.get("errorCode"),
        str(entry.get("message") or ""),
        entry.get("fields"),
    )


def _from_oauth_error(entry: OAuthError) -> ServiceFault:
    return ServiceFault.from_code(
        entry.get("error"), str(entry.get("error_description") or "")
    )


def fault_from_payload(payload: Any) -> ServiceFault:
    """Build a fault from a decoded JSON error body.

    A list body uses its first entry. Unrecognized shapes give a fault with
    category ``ErrorCatalog.UNKNOWN``. Never raises.
    """
    if isinstance(payload, list):
        if not payload:
            return ServiceFault(ErrorCatalog.UNKNOWN, "")
        payload = payload[0]
    if not isinstance(payload, dict):
        return ServiceFault(ErrorCatalog.UNKNOWN, str(payload))

    if "errorCode" in payload:
        return _from_api_error(payload)
    if "error" in payload:
        return _from_oauth_error(payload)
    return ServiceFault(ErrorCatalog.UNKNOWN, str(payload.get("message") or ""))


def raise_for_response(resp: requests.Response) -> None:
    """Raise the classified fault for an unsuccessful API response.

    Raises:
        ServiceFault: If the response status is 400 or above.
    """
    if resp.ok:
        return

    try:
        fault = fault_from_payload(resp.json())
    except requests.JSONDecodeError:
        fault = ServiceFault(
            ErrorCatalog.UNKNOWN, f"HTTP {resp.status_code}: {resp.text}"
        )
    _LOG.warning(
        "api error status=%s category=%s", resp.status_code, fault.category.name
    )
    raise fault
