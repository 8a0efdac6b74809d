# SPDX-License-Identifier: MPL-2.0
"""Exception hierarchy shared by the licensing engine and its collaborators."""
from __future__ import annotations

from typing import Optional


class LicensureBaseError(Exception):
    """Base exception for all licensure failures."""


class LicensureError(LicensureBaseError):
    """Raised when a file cannot be read or written during a batch.

    ``context`` names the operation and path, ``cause`` holds the underlying
    error (also chained as ``__cause__``).
    """

    def __init__(self, context: str, cause: Optional[BaseException] = None) -> None:
        self.context = context
        self.cause = cause
        super().__init__(context)

    def __str__(self) -> str:
        if self.cause is None:
            return self.context
        return f"{self.context}: {self.cause}"


class ConfigError(LicensureBaseError):
    """Raised when configuration cannot be found, parsed or validated."""

    def __init__(self, message: str, not_found: bool = False) -> None:
        super().__init__(message)
        self.not_found = not_found


class TemplateError(LicensureBaseError):
    """Raised when a header template cannot be turned into a pattern."""


class SPDXError(LicensureBaseError):
    """Raised when a license template cannot be fetched from SPDX."""


class GitError(LicensureBaseError):
    """Raised when git cannot be run or its output cannot be understood."""
