from __future__ import annotations


class OptionError(Exception):
    """Base class for errors raised by optionpy."""


class UnwrapError(OptionError):
    """Raised when a value is demanded from an empty option.

    This signals a logic error in the caller; optionpy never catches it.
    """

    def __init__(self, message: str = "option does not contain any value"):
        super().__init__(message)
        self.message = message
