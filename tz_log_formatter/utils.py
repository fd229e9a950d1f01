# tz_log_formatter/utils.py
"""Timestamp helpers.

Provides the offset arithmetic and string rendering used by the
formatter: reading a record's emission instant, resolving the offset
to display, and rendering `YYYY-MM-DD HH:MM:SS[.fraction] ±HH:MM`.
"""
from datetime import datetime, timezone, timedelta
from decimal import Decimal, ROUND_FLOOR

from tz_log_formatter.config import MAX_OFFSET_SECONDS
from tz_log_formatter.errors import InvalidOffsetError

NANOS_PER_SECOND = 1_000_000_000


def record_time_ns(record) -> int:
    """Get the emission instant of a log record in nanoseconds since the epoch.

    A `created_ns` attribute on the record (for example passed through
    `extra=`) takes precedence. Otherwise the value is taken from the
    decimal representation of `record.created`, so a float such as
    1714060388.333 yields exactly ...388_333_000_000 instead of the
    nearest binary approximation.

    Args:
        record (logging.LogRecord): Record to read.

    Returns:
        int: Nanoseconds since 1970-01-01T00:00:00Z.
    """
    created_ns = getattr(record, 'created_ns', None)
    if created_ns is not None:
        return int(created_ns)
    nanos = Decimal(repr(record.created)) * NANOS_PER_SECOND
    return int(nanos.to_integral_value(rounding=ROUND_FLOOR))


def format_offset(offset_seconds) -> str:
    """Render a UTC offset as ±HH:MM.

    Seconds below a whole minute are dropped from the rendering.

    Args:
        offset_seconds (int): Signed offset in seconds east of UTC.

    Returns:
        str: Offset such as "+08:00" or "-12:00".

    Raises:
        InvalidOffsetError: If the value is not an integer or its
            magnitude is 24 hours or more.
    """
    if isinstance(offset_seconds, bool) or not isinstance(offset_seconds, int):
        raise InvalidOffsetError(offset_seconds)
    if abs(offset_seconds) >= MAX_OFFSET_SECONDS:
        raise InvalidOffsetError(offset_seconds)

    sign = '-' if offset_seconds < 0 else '+'
    hours, remainder = divmod(abs(offset_seconds), 3600)
    return f"{sign}{hours:02d}:{remainder // 60:02d}"


def get_local_offset(epoch_seconds) -> int:
    """Offset of the system local timezone at the given instant, in seconds."""
    local = datetime.fromtimestamp(epoch_seconds, tz=timezone.utc).astimezone()
    return int(local.utcoffset().total_seconds())


def format_fraction(nanos, digits) -> str:
    # Truncate, never round; nanos is always 0 <= nanos < 1e9
    if not digits:
        return ''
    return '.' + f"{nanos:09d}"[:digits]


def format_timestamp(time_ns, config) -> str:
    """Render an instant according to a TimeZoneConfig.

    Args:
        time_ns (int): Nanoseconds since the epoch (UTC).
        config (TimeZoneConfig): Offset and precision to apply.

    Returns:
        str: e.g. "2024-04-25 23:53:08.333 +08:00".

    Raises:
        InvalidOffsetError: If the configured offset cannot be rendered.
    """
    epoch_seconds, nanos = divmod(time_ns, NANOS_PER_SECOND)

    if config.offset_seconds is None:
        offset_seconds = get_local_offset(epoch_seconds)
    else:
        offset_seconds = config.offset_seconds
    offset_text = format_offset(offset_seconds)

    tz = timezone(timedelta(seconds=offset_seconds))
    dt = datetime.fromtimestamp(epoch_seconds, tz=tz)
    return (
        f"{dt.year:04d}-{dt.month:02d}-{dt.day:02d} "
        f"{dt.hour:02d}:{dt.minute:02d}:{dt.second:02d}"
        f"{format_fraction(nanos, config.precision.digits)} {offset_text}"
    )
