"""Exceptions for github-activity."""

from typing import Any, List, Optional


class ActivityError(Exception):
    """Base error for the activity widget."""


class MalformedResponse(ActivityError):
    """The event feed did not match the expected shape.

    `errors` holds the pydantic error list when the failure came from
    schema validation.
    """

    def __init__(self, message: str, errors: Optional[List[Any]] = None):
        self.message = message
        self.errors = errors or []
        super().__init__(message)


class InvalidUsername(ActivityError, ValueError):
    """The username is not a valid GitHub login."""
