"""
Custom Exception Hierarchy

The classification rules themselves never raise; these errors only come
from the boundary where raw group names, class labels and answers enter
the system.
"""
from typing import Optional, Dict, Any


class MWHOError(Exception):
    """Base exception for all mWHO calculator errors."""

    def __init__(
        self,
        message: str,
        code: str = "UNKNOWN_ERROR",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details
        }


class UnknownGroupError(MWHOError):
    """A disease group label or alias that maps to none of the seven groups."""

    def __init__(
        self,
        message: str,
        group: str = "unknown",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            code="UNKNOWN_GROUP",
            details={"group": group, **(details or {})}
        )
        self.group = group


class InvalidAnswerError(MWHOError):
    """An answer key or value outside the group's question catalogue."""

    def __init__(
        self,
        message: str,
        group: str = "unknown",
        key: Optional[str] = None,
        value: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            code="INVALID_ANSWER",
            details={"group": group, "key": key, "value": value, **(details or {})}
        )
        self.group = group
        self.key = key
        self.value = value


class UnknownClassError(MWHOError):
    """A label that is not one of the five mWHO classes."""

    def __init__(
        self,
        message: str,
        label: str = "unknown",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            code="UNKNOWN_CLASS",
            details={"label": label, **(details or {})}
        )
        self.label = label
