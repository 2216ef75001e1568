"""Custom exceptions for the elective share engine.

The computation path itself never raises: bad numbers normalize to zero and
rule violations are reported as warnings on the result. The exceptions here
cover the edges around it, such as loading configuration and restoring a
persisted case snapshot. All of them inherit from ElectiveShareError.

Example:
    try:
        snapshot = CaseSnapshot.from_json(payload)
    except SnapshotError as e:
        logger.warning("snapshot_discarded", reason=e.message)
        snapshot = None
"""

from typing import Any, Optional


class ElectiveShareError(Exception):
    """Base exception for all elective share errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary with additional context.
        recoverable: Whether the caller can reasonably carry on.
    """

    def __init__(
        self,
        message: str,
        *,
        details: Optional[dict[str, Any]] = None,
        recoverable: bool = False,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.recoverable = recoverable

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"details={self.details!r}, "
            f"recoverable={self.recoverable!r})"
        )


class ConfigurationError(ElectiveShareError):
    """Error raised when engine settings are invalid.

    Attributes:
        config_key: The configuration key that is problematic.
        expected: Description of the expected value or format.
        actual: The actual value found (if any).

    Example:
        >>> raise ConfigurationError(
        ...     "Invalid deadline window",
        ...     config_key="ELECTIVE_SHARE_RULES_DEADLINE_MONTHS",
        ...     expected="Whole number of months between 1 and 24",
        ...     actual="0",
        ... )
        ConfigurationError: Invalid deadline window
    """

    def __init__(
        self,
        message: str,
        *,
        config_key: Optional[str] = None,
        expected: Optional[str] = None,
        actual: Optional[Any] = None,
        details: Optional[dict[str, Any]] = None,
        recoverable: bool = False,
    ) -> None:
        super().__init__(message, details=details, recoverable=recoverable)
        self.config_key = config_key
        self.expected = expected
        self.actual = actual

        if config_key:
            self.details["config_key"] = config_key
        if expected:
            self.details["expected"] = expected
        if actual is not None:
            self.details["actual"] = actual


class SnapshotError(ElectiveShareError):
    """Error raised when a persisted case snapshot cannot be restored.

    Snapshot failures are recoverable by default: the caller can discard the
    stored entry and start a fresh case.

    Attributes:
        field: The snapshot field that failed to load (if known).
    """

    def __init__(
        self,
        message: str,
        *,
        field: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
        recoverable: bool = True,
    ) -> None:
        super().__init__(message, details=details, recoverable=recoverable)
        self.field = field

        if field:
            self.details["field"] = field


__all__ = [
    "ElectiveShareError",
    "ConfigurationError",
    "SnapshotError",
]
