"""Error codes and error handling utilities for stylegen."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum, auto
from http.client import HTTPException
from pathlib import Path
from typing import Any
from urllib.error import HTTPError, URLError

from stylegen.core.models import CatalogValidationError


class ErrorCode(Enum):
    """Standardized error codes for stylegen operations."""

    # Catalog errors
    CATALOG_NOT_FOUND = auto()
    CATALOG_INVALID = auto()

    # Network errors
    NETWORK_TIMEOUT = auto()
    NETWORK_UNAVAILABLE = auto()
    NETWORK_AUTH_FAILED = auto()
    NETWORK_NOT_FOUND = auto()
    NETWORK_RATE_LIMITED = auto()

    # Output errors
    OUTPUT_ACCESS_DENIED = auto()
    OUTPUT_WRITE_FAILED = auto()

    # Configuration errors
    CONFIG_INVALID = auto()
    CONFIG_MISSING = auto()

    OPERATION_FAILED = auto()


ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.CATALOG_NOT_FOUND: "The style catalog file was not found.",
    ErrorCode.CATALOG_INVALID: "The style catalog is not a valid Figma file document.",

    ErrorCode.NETWORK_TIMEOUT: "Figma API request timed out. Check your internet connection.",
    ErrorCode.NETWORK_UNAVAILABLE: "Network unavailable. Check your internet connection.",
    ErrorCode.NETWORK_AUTH_FAILED: "Authentication failed. Check the personal access token.",
    ErrorCode.NETWORK_NOT_FOUND: "The Figma file was not found. Check the file key.",
    ErrorCode.NETWORK_RATE_LIMITED: "Rate limited by the Figma API. Wait a moment and try again.",

    ErrorCode.OUTPUT_ACCESS_DENIED: "Cannot write output. Check folder permissions.",
    ErrorCode.OUTPUT_WRITE_FAILED: "Failed to write a generated file.",

    ErrorCode.CONFIG_INVALID: "Configuration file is invalid.",
    ErrorCode.CONFIG_MISSING: "Configuration file not found.",

    ErrorCode.OPERATION_FAILED: "Generation failed. See details for more information.",
}


@dataclass
class StyleGenError(Exception):
    """Base exception for stylegen with error code and context."""

    code: ErrorCode
    message: str = ""
    path: Path | None = None
    details: dict[str, Any] = field(default_factory=dict)
    suggestion: str = ""

    def __post_init__(self) -> None:
        if not self.message:
            self.message = ERROR_MESSAGES.get(self.code, "An unexpected error occurred.")
        if not self.suggestion and self.code in ERROR_MESSAGES:
            self.suggestion = ERROR_MESSAGES[self.code]

    def __str__(self) -> str:
        parts = [self.message]
        if self.path:
            parts.append(f"\nFile: {self.path}")
        if self.details:
            details_str = " | ".join(f"{k}={v}" for k, v in self.details.items())
            parts.append(f"\nDetails: {details_str}")
        return "".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        return {
            "code": self.code.name,
            "message": self.message,
            "path": str(self.path) if self.path else None,
            "details": self.details,
            "suggestion": self.suggestion,
        }


def classify_exception(exc: Exception, path: Path | None = None) -> StyleGenError:
    """Classify a generic exception into a StyleGenError with appropriate code."""
    if isinstance(exc, StyleGenError):
        return exc
    exc_str = str(exc).lower()

    if isinstance(exc, HTTPError):
        details = {"status": exc.code, "original": exc_str}
        if exc.code in (401, 403):
            return StyleGenError(ErrorCode.NETWORK_AUTH_FAILED, details=details)
        if exc.code == 404:
            return StyleGenError(ErrorCode.NETWORK_NOT_FOUND, details=details)
        if exc.code == 429:
            return StyleGenError(ErrorCode.NETWORK_RATE_LIMITED, details=details)
        return StyleGenError(ErrorCode.NETWORK_UNAVAILABLE, details=details)
    if isinstance(exc, TimeoutError) or "timed out" in exc_str:
        return StyleGenError(ErrorCode.NETWORK_TIMEOUT, details={"original": exc_str})
    if isinstance(exc, (URLError, ConnectionError, HTTPException)):
        return StyleGenError(ErrorCode.NETWORK_UNAVAILABLE, details={"original": exc_str})

    if isinstance(exc, (CatalogValidationError, json.JSONDecodeError)):
        return StyleGenError(
            ErrorCode.CATALOG_INVALID,
            message=str(exc),
            path=path,
            details={"original": exc_str},
        )
    if isinstance(exc, FileNotFoundError):
        return StyleGenError(ErrorCode.CATALOG_NOT_FOUND, path=path, details={"original": exc_str})
    if isinstance(exc, PermissionError):
        return StyleGenError(ErrorCode.OUTPUT_ACCESS_DENIED, path=path, details={"original": exc_str})
    if isinstance(exc, OSError):
        return StyleGenError(ErrorCode.OUTPUT_WRITE_FAILED, path=path, details={"original": exc_str})

    return StyleGenError(
        ErrorCode.OPERATION_FAILED,
        message=f"{type(exc).__name__}: {exc}",
        path=path,
        details={"original": exc_str},
    )


def format_error_for_user(error: StyleGenError | Exception) -> str:
    """Format an error for display with actionable suggestions."""
    if isinstance(error, StyleGenError):
        parts = [error.message]
        if error.suggestion and error.suggestion != error.message:
            parts.append(f"\n{error.suggestion}")
        if error.path:
            parts.append(f"\nFile: {error.path}")
        return "".join(parts)

    classified = classify_exception(error)
    return format_error_for_user(classified)
