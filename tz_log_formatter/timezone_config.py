# tz_log_formatter/timezone_config.py
"""Timezone and precision settings shared by every formatted record.

A `TimeZoneConfig` is built once when logging is initialised and handed
by reference to the formatter. It is frozen, so concurrent logging threads
can read it without locking.
"""
import os
import re
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

import yaml

from tz_log_formatter.config import (
    DEFAULT_INDENT, DEFAULT_SUFFIX, PRECISION_ALIASES,
    LOG_TZ_OFFSET, LOG_TIMESTAMP_PRECISION
)
from tz_log_formatter.errors import ConfigError

logger = logging.getLogger(__name__)

_OFFSET_PATTERN = re.compile(
    r'^(?P<sign>[+-])(?:(?P<hours>\d{1,2}):(?P<minutes>\d{2})|(?P<hours_compact>\d{2})(?P<minutes_compact>\d{2}))$'
)


class TimestampPrecision(Enum):
    """Number of sub-second digits rendered after the seconds field."""

    SECONDS = 'seconds'
    MILLIS = 'millis'
    MICROS = 'micros'
    NANOS = 'nanos'

    @property
    def digits(self):
        return _PRECISION_DIGITS[self]

    @classmethod
    def parse(cls, value):
        """Convert a name or alias such as "ms" into a TimestampPrecision.

        Args:
            value (TimestampPrecision | str): Member or case-insensitive name.

        Returns:
            TimestampPrecision: The matching member.

        Raises:
            ConfigError: If the value names no known precision.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            name = value.strip().lower()
            for member in cls:
                if name in PRECISION_ALIASES[member.value]:
                    return member
        raise ConfigError(f"Unknown timestamp precision: {value!r}")


_PRECISION_DIGITS = {
    TimestampPrecision.SECONDS: 0,
    TimestampPrecision.MILLIS: 3,
    TimestampPrecision.MICROS: 6,
    TimestampPrecision.NANOS: 9,
}


def parse_offset(value) -> int:
    """Convert an offset such as "+08:00", "-0530" or "28800" into seconds.

    A sign followed by exactly four digits is read as ±HHMM, so "-0530"
    is five and a half hours west. Any other run of digits is seconds.

    Args:
        value (int | str): Offset in seconds, or a signed ±HH:MM or ±HHMM string.

    Returns:
        int: Signed offset in seconds east of UTC.

    Raises:
        ConfigError: If the value cannot be interpreted as an offset.
    """
    if isinstance(value, bool):
        raise ConfigError(f"Invalid UTC offset: {value!r}")
    if isinstance(value, int):
        return value
    if not isinstance(value, str):
        raise ConfigError(f"Invalid UTC offset: {value!r}")

    text = value.strip()
    match = _OFFSET_PATTERN.match(text)
    if not match:
        if re.fullmatch(r'[+-]?\d+', text):
            return int(text)
        raise ConfigError(f"Invalid UTC offset: {value!r}")

    hours = int(match.group('hours') or match.group('hours_compact'))
    minutes = int(match.group('minutes') or match.group('minutes_compact'))
    if hours >= 24 or minutes >= 60:
        raise ConfigError(f"Invalid UTC offset: {value!r}")
    seconds = hours * 3600 + minutes * 60
    return -seconds if match.group('sign') == '-' else seconds


@dataclass(frozen=True)
class TimeZoneConfig:
    """Rendering parameters for log record timestamps.

    Attributes:
        offset_seconds (int | None): UTC offset in seconds. None renders
            in the process's local timezone, resolved per record.
        precision (TimestampPrecision): Sub-second digits to render.
        show_level (bool): Include the level label in the header.
        show_target (bool): Include the logger name in the header.
        show_module_path (bool): Include the emitting module in the header.
        indent (int | None): Spaces prefixed to continuation lines of
            multi-line messages. None leaves them untouched.
        suffix (str): Terminator written after each record.
    """

    offset_seconds: Optional[int] = None
    precision: TimestampPrecision = TimestampPrecision.SECONDS
    show_level: bool = True
    show_target: bool = True
    show_module_path: bool = False
    indent: Optional[int] = DEFAULT_INDENT
    suffix: str = DEFAULT_SUFFIX

    @classmethod
    def new(cls, offset_seconds=None, precision=None, **options):
        """Create a config; a missing precision means whole seconds.

        The offset is stored as given. An offset that cannot be rendered
        is reported by the formatter, not here.
        """
        if precision is None:
            precision = TimestampPrecision.SECONDS
        return cls(offset_seconds=offset_seconds, precision=precision, **options)

    @classmethod
    def default(cls):
        """Config for the system local timezone and whole seconds.

        Returns:
            TimeZoneConfig: Same as `TimeZoneConfig.new(None, None)`.
        """
        return cls.new(None, None)

    @classmethod
    def from_env(cls, environ=None):
        """Build a config from LOG_TZ_OFFSET and LOG_TIMESTAMP_PRECISION.

        Values that fail to parse are logged and replaced by their defaults
        (local timezone, whole seconds).

        Args:
            environ (Mapping[str, str], optional): Environment to read.
                Defaults to the values loaded in `tz_log_formatter.config`.

        Returns:
            TimeZoneConfig: The resulting configuration.
        """
        if environ is None:
            raw_offset = LOG_TZ_OFFSET
            raw_precision = LOG_TIMESTAMP_PRECISION
        else:
            raw_offset = environ.get('LOG_TZ_OFFSET', '')
            raw_precision = environ.get('LOG_TIMESTAMP_PRECISION', '')

        offset_seconds = None
        if raw_offset.strip():
            try:
                offset_seconds = parse_offset(raw_offset)
            except ConfigError as e:
                logger.error(f"{e}. Using the system local timezone.")

        precision = None
        if raw_precision.strip():
            try:
                precision = TimestampPrecision.parse(raw_precision)
            except ConfigError as e:
                logger.error(f"{e}. Using whole seconds.")

        return cls.new(offset_seconds, precision)

    @classmethod
    def from_yaml(cls, path):
        """Load a config from a YAML mapping.

        Recognised keys are `offset`, `precision`, `show_level`,
        `show_target`, `show_module_path` and `indent`. Missing keys keep
        their defaults.

        Args:
            path (str | os.PathLike): YAML file to read.

        Returns:
            TimeZoneConfig: The resulting configuration.

        Raises:
            ConfigError: If the file is not a mapping or holds invalid values.
        """
        with open(os.fspath(path), 'r', encoding='utf-8') as f:
            try:
                data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigError(f"Invalid config file {path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"Config file must contain a mapping: {path}")

        unknown = set(data) - {'offset', 'precision', 'show_level', 'show_target', 'show_module_path', 'indent'}
        if unknown:
            raise ConfigError(f"Unknown config keys in {path}: {', '.join(sorted(unknown))}")

        offset = data.get('offset')
        precision = data.get('precision')
        for key in ('show_level', 'show_target', 'show_module_path'):
            if key in data and not isinstance(data[key], bool):
                raise ConfigError(f"{key} must be true or false in {path}: {data[key]!r}")
        if 'indent' in data:
            indent = data['indent']
            if indent is not None and (isinstance(indent, bool) or not isinstance(indent, int) or indent < 0):
                raise ConfigError(f"indent must be a non-negative integer or null in {path}: {indent!r}")

        options = {key: data[key] for key in ('show_level', 'show_target', 'show_module_path', 'indent') if key in data}
        logger.debug(f"Loaded formatter config from {path}: {data}")
        return cls.new(
            parse_offset(offset) if offset is not None else None,
            TimestampPrecision.parse(precision) if precision is not None else None,
            **options
        )
