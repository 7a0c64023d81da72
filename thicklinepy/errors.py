"""Exceptions raised by the thick line engine."""


class ThickLineError(ValueError):
    """Base class for all geometry errors. ``message`` is shown to the user."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class DegenerateInputError(ThickLineError):
    """The two endpoints coincide, so no direction frame exists."""


class ValidationError(ThickLineError):
    """The inputs describe a geometrically impossible thick line."""
