"""Timezone-aware log record formatting for the standard logging module."""
from tz_log_formatter.config import VERSION
from tz_log_formatter.errors import (
    TzLogError, ConfigError, InvalidOffsetError, FormatError, FormatIOError
)
from tz_log_formatter.timezone_config import TimeZoneConfig, TimestampPrecision, parse_offset
from tz_log_formatter.formatter import TimeZoneFormatter, RecordFormatter
from tz_log_formatter.logger_config import TimeZoneStreamHandler, setup_logger

__version__ = VERSION

__all__ = [
    "TzLogError",
    "ConfigError",
    "InvalidOffsetError",
    "FormatError",
    "FormatIOError",
    "TimeZoneConfig",
    "TimestampPrecision",
    "parse_offset",
    "TimeZoneFormatter",
    "RecordFormatter",
    "TimeZoneStreamHandler",
    "setup_logger",
]
