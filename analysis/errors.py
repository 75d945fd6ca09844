"""Errors raised by the analytics engine."""

from __future__ import annotations


class ChartGeometryError(ValueError):
    """Raised when chart geometry or axis configuration cannot be used."""

    def __init__(self, *, field: str, value: object, reason: str) -> None:
        """Initialize the error.

        Args:
            field: Name of the offending setting.
            value: Value that was rejected.
            reason: Short explanation of the constraint.
        """

        super().__init__(f"Invalid chart setting {field}={value!r}: {reason}.")
        self.field = field
        self.value = value
        self.reason = reason
