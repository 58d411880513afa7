"""Custom exception hierarchy for pyclimate."""

from __future__ import annotations


class ClimateError(Exception):
    """Base exception for all pyclimate errors."""


class ClimateConfigError(ClimateError):
    """Invalid or missing configuration."""


class MalformedLineError(ClimateError):
    """A TDV line could not be turned into an observation record."""

    def __init__(
        self,
        message: str,
        *,
        line_number: int | None = None,
        field_count: int | None = None,
    ) -> None:
        self.line_number = line_number
        self.field_count = field_count
        super().__init__(message)


class NumericParseError(MalformedLineError):
    """A numeric field did not parse under the strict numeric policy."""

    def __init__(
        self,
        message: str,
        *,
        field: str = "",
        value: str = "",
        line_number: int | None = None,
    ) -> None:
        self.field = field
        self.value = value
        super().__init__(message, line_number=line_number)


class CapacityExceededError(ClimateError):
    """More distinct state codes were observed than the table can hold."""

    def __init__(self, code: str, capacity: int) -> None:
        self.code = code
        self.capacity = capacity
        super().__init__(f"cannot track state {code!r}: capacity of {capacity} distinct states reached")


class InputFileError(ClimateError):
    """An input file could not be opened or read."""

    def __init__(self, message: str, *, path: str = "") -> None:
        self.path = path
        super().__init__(message)
