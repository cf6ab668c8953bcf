"""
Option Errors

Exceptions raised by the option store. Persistence errors from SQLAlchemy
are never wrapped; they reach the caller as-is.
"""


class OptionError(Exception):
    """Base class for option store errors."""
    pass


class InvalidArgumentError(OptionError, ValueError):
    """Raised when a key is blank or a required descriptor/source is missing."""
    pass


class MissingPropertyError(OptionError):
    """Raised when a required option has no stored value."""

    def __init__(self, key):
        self.key = key
        super().__init__(f"You have to config {key} setting")


class TypeCoercionError(OptionError, ValueError):
    """Raised when a stored string cannot be decoded to the requested type."""

    def __init__(self, value, target, reason=None):
        self.value = value
        self.target = target
        name = getattr(target, '__name__', str(target))
        message = f"Cannot convert {value!r} to {name}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
