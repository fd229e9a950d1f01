# tz_log_formatter/config.py
"""Configuration values used throughout the package.

Settings are loaded from environment variables (a `.env` file in the
working directory is honoured), with predefined default values used when
environment variables are not present.
"""
import os
import logging
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Package version
VERSION = "0.1.0"

# UTC offset for rendered timestamps: integer seconds or "+HH:MM".
# Empty means the system local timezone.
LOG_TZ_OFFSET = os.environ.get('LOG_TZ_OFFSET', '')
# Sub-second digits: seconds, millis, micros or nanos
LOG_TIMESTAMP_PRECISION = os.environ.get('LOG_TIMESTAMP_PRECISION', 'seconds')
# Optional YAML file holding formatter settings
LOG_TZ_CONFIG_FILE = os.environ.get('LOG_TZ_CONFIG_FILE', '')

# Root logger level when debug mode is off
DEFAULT_LOG_LEVEL = logging.INFO
# Default message emitted by the demo CLI
DEFAULT_MESSAGE = "hello, world!"

# Width the level label is padded to
LEVEL_WIDTH = 5
# Continuation-line indent for multi-line messages
DEFAULT_INDENT = 4
# Line terminator appended to each record
DEFAULT_SUFFIX = "\n"

# Largest offset magnitude (exclusive) that renders as ±HH:MM
MAX_OFFSET_SECONDS = 24 * 60 * 60

# Accepted spellings for each timestamp precision
PRECISION_ALIASES = {
    'seconds': ('s', 'sec', 'secs', 'second', 'seconds'),
    'millis': ('ms', 'milli', 'millis', 'milliseconds'),
    'micros': ('us', 'micro', 'micros', 'microseconds'),
    'nanos': ('ns', 'nano', 'nanos', 'nanoseconds'),
}
