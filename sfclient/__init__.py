"""Typed error classification for the Salesforce REST API client."""

from .errors import (
    ClientError,
    ErrorCatalog,
    ServiceFault,
    resolve_error,
)
from .response import fault_from_payload, raise_for_response

__all__ = [
    "ClientError",
    "ErrorCatalog",
    "ServiceFault",
    "resolve_error",
    "fault_from_payload",
    "raise_for_response",
]
