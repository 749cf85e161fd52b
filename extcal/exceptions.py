"""
Errors raised by the calendar algorithms.
"""


class CalendarError(ValueError):
    pass


class InvalidCalendarField(CalendarError):
    """A month or day that doesn't exist in the given calendar/year."""


class DateOutOfRange(CalendarError):
    """A year or Julian day outside of what an algorithm can convert."""
