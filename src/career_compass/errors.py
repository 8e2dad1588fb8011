"""Exceptions raised by the AI client and caught by the request builders."""

from __future__ import annotations


class AIClientError(Exception):
    """Base class for every failure of a schema-constrained AI call."""


class AuthError(AIClientError):
    """Credential missing or rejected. Never retried on another tier."""


class EmptyResponse(AIClientError):
    """The backend answered without any text."""


class ParseError(AIClientError, ValueError):
    """No JSON document could be extracted from the response text."""


class SchemaValidationError(AIClientError, ValueError):
    """Parsed JSON does not match the requested schema."""

    def __init__(self, errors: list[str]):
        self.errors = errors
        shown = "; ".join(errors[:5])
        more = f" (+{len(errors) - 5} more)" if len(errors) > 5 else ""
        super().__init__(f"Response does not match schema: {shown}{more}")


class NetworkError(AIClientError):
    """Transport-level failure or timeout."""


class QuotaExceeded(AIClientError):
    """The backend reported an exhausted quota in place of a payload."""
