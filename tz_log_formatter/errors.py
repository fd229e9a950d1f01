"""Exceptions raised while configuring or formatting log lines."""


class TzLogError(Exception):
    """Base class for all errors raised by this package."""

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class ConfigError(TzLogError):
    """A configuration value could not be parsed."""


class InvalidOffsetError(ConfigError):
    """The configured UTC offset cannot be rendered as ±HH:MM.

    Raised at format time, never at construction.
    """

    def __init__(self, offset):
        super().__init__(f"Invalid UTC offset: {offset!r} (must be an integer number of seconds with magnitude below 24 hours)")
        self.offset = offset


class FormatError(TzLogError):
    """A record could not be formatted or written."""


class FormatIOError(FormatError):
    """The output sink rejected the write."""

    def __init__(self, message, original_error=None):
        super().__init__(message)
        self.original_error = original_error

    def __str__(self):
        if self.original_error:
            return f"{self.message} (Original: {self.original_error})"
        return self.message
