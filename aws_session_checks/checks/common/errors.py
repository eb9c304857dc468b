"""Failure types raised while resolving, fetching or parsing check data.

Every infrastructure failure a check can hit is a ``CheckError``. The executor
turns these into an UNKNOWN plugin result; anything else is a bug and is left
to propagate.
"""

from __future__ import annotations


class CheckError(Exception):
    """Base class for failures that prevent a check from producing data."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class NetworkError(CheckError):
    """An endpoint (instance metadata or AWS) could not be reached."""


class ParseError(CheckError):
    """A response was not valid JSON or lacked an expected field."""


class ExternalToolError(CheckError):
    """The AWS CLI or AWS API rejected or failed a request."""

    def __init__(
        self,
        message: str,
        returncode: int | None = None,
        stderr: str = "",
        error_type: str = "tool",
    ):
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr
        self.error_type = error_type

    @property
    def is_credential_error(self) -> bool:
        return self.error_type == "credential"
