# errors.py
# input validation and cancellation errors

class TracingError(ValueError):
    """Base class for everything tracelab raises on bad input."""


class InvalidDimensions(TracingError):
    """Grid is empty, not 2-D, or its rows have different lengths."""


class InvalidCellValue(TracingError):
    """A cell holds something other than foreground (1) or background (0 / -1)."""

    def __init__(self, value, row: int, col: int):
        self.value = value
        self.row = row
        self.col = col
        super().__init__(f"invalid cell value {value!r} at row {row}, column {col}")


class TraceCancelled(TracingError):
    """Raised when a caller's stop flag fires between rows; no contours are returned."""

    def __init__(self, row: int):
        self.row = row
        super().__init__(f"trace cancelled before row {row}")
