"""Standardized error codes and exception classes for legend layout."""
from __future__ import annotations

from typing import Any, ClassVar

# Canonical mapping of error codes to default messages. All exceptions fall
# back to this mapping if no explicit message is provided.
CODE_TO_MESSAGE: dict[str, str] = {
    "LEGEND_001": "Configuration error - Invalid legend layout settings",
    "LEGEND_002": "Text measurement failed - Unable to measure label",
    "LEGEND_003": "Invalid legend specification - Unsupported parameters",
}


def get_error_message(code: str, override: str | None = None) -> str:
    """Return the message for an error code, allowing optional override."""
    if override is not None:
        return override
    return CODE_TO_MESSAGE.get(code, code)


class LegendError(Exception):
    """Base exception for legend layout errors.

    Subclasses should set ``error_code`` to one of the LEGEND_* codes.
    Message defaults to the canonical mapping but can be overridden.
    """

    error_code: ClassVar[str] = ""

    def __init__(
        self,
        message: str | None = None,
        *,
        context: dict[str, Any] | None = None,
    ) -> None:
        """Create a new error.

        Parameters
        - message: Optional explicit message; falls back to mapping.
        - context: Optional structured context to aid debugging.
        """
        if not self.error_code:
            raise ValueError(
                f"Error code not defined for {self.__class__.__name__}"
            )
        resolved_message = get_error_message(self.error_code, message)
        super().__init__(resolved_message)
        self.context = context.copy() if context else {}

    def to_dict(self) -> dict[str, Any]:
        """Serialize the error with its context."""
        return {
            "error_code": self.error_code,
            "message": str(self),
            "context": dict(self.context),
        }


class ConfigurationError(LegendError, ValueError):
    """Configuration error - Invalid legend layout settings."""

    error_code = "LEGEND_001"


class MeasurementError(LegendError):
    """Text measurement failed - Unable to measure label."""

    error_code = "LEGEND_002"


class InvalidLegendSpecError(LegendError, ValueError):
    """Invalid legend specification - Unsupported parameters."""

    error_code = "LEGEND_003"
