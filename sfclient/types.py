"""Typed dictionaries for the error payloads returned by the remote API."""

from typing import TypedDict


class _ApiErrorBase(TypedDict):
    errorCode: str
    message: str


class ApiError(_ApiErrorBase, total=False):
    """One entry of the error list returned by the REST API."""

    fields: list[str]


class OAuthError(TypedDict):
    """Error body returned by the OAuth token endpoint."""

    error: str
    error_description: str
