"""Domain errors raised by the calendar core.

Routers never catch these; ``shiftcal.main`` registers handlers that turn
them into JSON responses with the same ``{"detail": ...}`` shape as
``HTTPException``.
"""


class ShiftCalendarError(ValueError):
    """Base class for all calendar precondition failures."""

    status_code = 400

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class ConfigurationError(ShiftCalendarError):
    """No cycle anchor could be resolved from the calendar settings."""

    status_code = 409


class InvalidRangeError(ShiftCalendarError):
    """A date range whose end lies before its start."""

    status_code = 422


class InvalidDateKeyError(ShiftCalendarError):
    """A date-key that is not a canonical ``YYYY-MM-DD`` civil date."""

    status_code = 422
