# tz_log_formatter/logger_config.py
"""Wiring the formatter into the logging framework.

Provides a stream handler that writes through `RecordFormatter` and a
setup function that installs it on the root logger.
"""
import sys
import logging

from tz_log_formatter.config import DEFAULT_LOG_LEVEL
from tz_log_formatter.formatter import RecordFormatter, TimeZoneFormatter
from tz_log_formatter.timezone_config import TimeZoneConfig


class TimeZoneStreamHandler(logging.StreamHandler):
    """StreamHandler that writes each record as one timezone-aware line.

    Failures while formatting or writing (an unrenderable offset, a
    closed stream) are passed to `Handler.handleError`, so whether they
    are printed or ignored follows `logging.raiseExceptions`.

    Attributes:
        config (TimeZoneConfig): Shared rendering settings.
    """

    def __init__(self, stream=None, config=None):
        """Initialize the handler.

        Args:
            stream (TextIO, optional): Destination stream. Defaults to sys.stderr.
            config (TimeZoneConfig, optional): Rendering settings.
                Defaults to `TimeZoneConfig.default()`.
        """
        super().__init__(stream)
        self.config = config if config is not None else TimeZoneConfig.default()
        self.setFormatter(TimeZoneFormatter(self.config))

    def emit(self, record):
        """Write the record to the stream and flush it.

        Args:
            record (logging.LogRecord): Log record object.
        """
        try:
            RecordFormatter(self.stream, self.config, self.formatter).write(record)
            self.flush()
        except RecursionError:
            raise
        except Exception:
            self.handleError(record)


def setup_logger(config=None, debug=False, stream=None):
    """Sets up the application's root logger.

    Configures a TimeZoneStreamHandler for console output. All existing
    handlers are removed and replaced with the new handler.

    Args:
        config (TimeZoneConfig, optional): Rendering settings. Defaults to
            `TimeZoneConfig.from_env()`.
        debug (bool, optional): If True, sets the log level to DEBUG.
            If False, sets it to INFO. Defaults to False.
        stream (TextIO, optional): Destination stream. Defaults to sys.stderr.

    Returns:
        TimeZoneStreamHandler: The installed handler.
    """
    log_level = logging.DEBUG if debug else DEFAULT_LOG_LEVEL
    if config is None:
        config = TimeZoneConfig.from_env()

    # Get the root logger
    root_logger = logging.getLogger()

    # Remove all existing handlers (to prevent duplicate output)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = TimeZoneStreamHandler(stream if stream is not None else sys.stderr, config)
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level)
    return handler
