"""Machine-readable error categories for Salesforce REST and OAuth failures."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Iterable, Optional

_LOG = logging.getLogger(__name__)


class ErrorCatalog(Enum):
    """Known error codes reported by the remote API.

    Member names are the canonical identifiers. ``UNKNOWN`` is the fallback
    for any code this catalog does not list.
    """

    UNKNOWN = "UNKNOWN"
    INVALID_CLIENT = "INVALID_CLIENT"
    UNSUPPORTED_GRANT_TYPE = "UNSUPPORTED_GRANT_TYPE"
    INVALID_GRANT = "INVALID_GRANT"
    AUTHENTICATION_FAILURE = "AUTHENTICATION_FAILURE"
    INVALID_PASSWORD = "INVALID_PASSWORD"
    CLIENT_IDENTIFIER_INVALID = "CLIENT_IDENTIFIER_INVALID"
    NOT_FOUND = "NOT_FOUND"
    # e.g. the query string was longer than 20,000 characters
    MALFORMED_QUERY = "MALFORMED_QUERY"
    FIELD_CUSTOM_VALIDATION_EXCEPTION = "FIELD_CUSTOM_VALIDATION_EXCEPTION"
    INVALID_FIELD_FOR_INSERT_UPDATE = "INVALID_FIELD_FOR_INSERT_UPDATE"
    INVALID_CLIENT_ID = "INVALID_CLIENT_ID"
    INVALID_FIELD = "INVALID_FIELD"
    REQUIRED_FIELD_MISSING = "REQUIRED_FIELD_MISSING"
    STRING_TOO_LONG = "STRING_TOO_LONG"
    # references a record that has been deleted
    ENTITY_IS_DELETED = "ENTITY_IS_DELETED"
    # ids are 15 characters, or 18 with a case-insensitive checksum suffix
    MALFORMED_ID = "MALFORMED_ID"
    INVALID_QUERY_FILTER_OPERATOR = "INVALID_QUERY_FILTER_OPERATOR"

    @property
    def is_authentication(self) -> bool:
        """True for failures of the OAuth login flow."""
        return self in _AUTHENTICATION

    @property
    def is_validation(self) -> bool:
        """True when a record was rejected because of its field values."""
        return self in _VALIDATION

    @property
    def is_query(self) -> bool:
        return self in _QUERY


_AUTHENTICATION = frozenset({
    ErrorCatalog.INVALID_CLIENT,
    ErrorCatalog.UNSUPPORTED_GRANT_TYPE,
    ErrorCatalog.INVALID_GRANT,
    ErrorCatalog.AUTHENTICATION_FAILURE,
    ErrorCatalog.INVALID_PASSWORD,
    ErrorCatalog.CLIENT_IDENTIFIER_INVALID,
    ErrorCatalog.INVALID_CLIENT_ID,
})
_VALIDATION = frozenset({
    ErrorCatalog.FIELD_CUSTOM_VALIDATION_EXCEPTION,
    ErrorCatalog.INVALID_FIELD_FOR_INSERT_UPDATE,
    ErrorCatalog.INVALID_FIELD,
    ErrorCatalog.REQUIRED_FIELD_MISSING,
    ErrorCatalog.STRING_TOO_LONG,
    ErrorCatalog.MALFORMED_ID,
})
_QUERY = frozenset({
    ErrorCatalog.MALFORMED_QUERY,
    ErrorCatalog.INVALID_QUERY_FILTER_OPERATOR,
})

_BY_IDENTIFIER = {
    member.name.replace("_", "").lower(): member
    for member in ErrorCatalog
    if member is not ErrorCatalog.UNKNOWN
}


def _normalize(code: str) -> str:
    return code.strip().replace("_", "").lower()


def _coerce_fields(fields) -> tuple[str, ...]:
    if fields is None:
        return ()
    if isinstance(fields, str):
        return (fields,)
    try:
        return tuple(str(name) for name in fields)
    except TypeError:
        return ()


def resolve_error(code: Optional[str]) -> ErrorCatalog:
    """Map a raw error code from the API onto the catalog.

    Underscores are ignored and matching is case-insensitive, so
    ``"INVALID_GRANT"``, ``"invalid_grant"`` and ``"InvalidGrant"`` all
    resolve to ``ErrorCatalog.INVALID_GRANT``. Surrounding whitespace is
    ignored; other separators are kept.

    Returns:
        The matching category, or ``ErrorCatalog.UNKNOWN`` for codes the
        catalog does not list. Never raises.
    """
    if not code or not isinstance(code, str):
        return ErrorCatalog.UNKNOWN
    category = _BY_IDENTIFIER.get(_normalize(code))
    if category is None:
        _LOG.debug("unrecognized error code %r", code)
        return ErrorCatalog.UNKNOWN
    return category


class ClientError(Exception):
    """Base exception for all sfclient errors."""


class ServiceFault(ClientError):
    """An error reported by the remote API, classified by category.

    Immutable once built. ``str(fault)`` is the description.
    """

    def __init__(
        self,
        category: ErrorCatalog,
        description: str,
        fields: Optional[Iterable[str]] = None,
    ):
        if description is None:
            description = ""
        if not isinstance(category, ErrorCatalog):
            category = resolve_error(category)
        super().__init__(description)
        self._category = category
        self._description = description
        self._fields = _coerce_fields(fields)

    @classmethod
    def from_code(
        cls,
        code: Optional[str],
        description: str,
        fields: Optional[Iterable[str]] = None,
    ) -> "ServiceFault":
        """Build a fault from the raw error code returned by the API.

        Args:
            code: Raw error code, e.g. ``"REQUIRED_FIELD_MISSING"``.
            description: Human-readable message from the API.
            fields: Names of the record fields implicated, kept in order.
        """
        return cls(resolve_error(code), description, fields)

    @property
    def category(self) -> ErrorCatalog:
        return self._category

    @property
    def description(self) -> str:
        return self._description

    @property
    def fields(self) -> tuple[str, ...]:
        return self._fields

    def _key(self) -> tuple:
        return (self._category, self._description, self._fields)

    def __eq__(self, other):
        if not isinstance(other, ServiceFault):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __reduce__(self):
        return (self.__class__, self._key())

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}({self._category.name}, "
            f"{self._description!r}, fields={list(self._fields)!r})"
        )
