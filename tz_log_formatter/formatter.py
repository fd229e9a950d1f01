# tz_log_formatter/formatter.py
"""Record formatting.

Turns a `logging.LogRecord` into a single line of the form

    [2024-04-25 23:53:08.333 +08:00 INFO  mytarget] message

with the timestamp rendered in the offset and precision held by a
shared `TimeZoneConfig`.
"""
import logging

from tz_log_formatter.config import LEVEL_WIDTH
from tz_log_formatter.errors import FormatIOError
from tz_log_formatter.timezone_config import TimeZoneConfig
from tz_log_formatter.utils import format_timestamp, record_time_ns


class TimeZoneFormatter(logging.Formatter):
    """Formatter that renders timestamps in a configured UTC offset.

    Inherits from logging.Formatter so it can be installed with
    `Handler.setFormatter`. `format()` returns the line without its
    terminator, as every logging.Formatter does; the handler appends it.

    Attributes:
        config (TimeZoneConfig): Shared, read-only rendering settings.
    """

    def __init__(self, config=None):
        """Initialize the formatter.

        Args:
            config (TimeZoneConfig, optional): Settings to render with.
                Defaults to `TimeZoneConfig.default()` (local time, seconds).
        """
        super().__init__()
        self.config = config if config is not None else TimeZoneConfig.default()

    def formatTime(self, record, datefmt=None):
        """Render the record's creation time with date, time, fraction and offset.

        Args:
            record (logging.LogRecord): Log record object.
            datefmt (str, optional): Ignored by this formatter. Defaults to None.

        Returns:
            str: Timestamp such as "2024-04-25 23:53:08.333 +08:00".

        Raises:
            InvalidOffsetError: If the configured offset cannot be rendered.
        """
        return format_timestamp(record_time_ns(record), self.config)

    def formatHeader(self, record):
        """Build the bracketed header, including the trailing space."""
        values = [self.formatTime(record)]
        if self.config.show_level:
            values.append(f"{record.levelname:<{LEVEL_WIDTH}}")
        if self.config.show_module_path and record.module:
            values.append(record.module)
        if self.config.show_target and record.name:
            values.append(record.name)
        return '[' + ' '.join(values) + '] '

    def indentMessage(self, text):
        """Indent the continuation lines of a multi-line message.

        Args:
            text (str): Message body, possibly with a traceback appended.

        Returns:
            str: Text with each newline replaced by the suffix and
                `config.indent` spaces, or unchanged when indent is None.
        """
        if self.config.indent is None:
            return text
        return text.replace('\n', self.config.suffix + ' ' * self.config.indent)

    def format(self, record):
        """Format a record as one line, without the terminator.

        Exception and stack information are appended to the message and
        indented like any other continuation line.

        Args:
            record (logging.LogRecord): Log record object.

        Returns:
            str: The header followed by the message.

        Raises:
            InvalidOffsetError: If the configured offset cannot be rendered.
        """
        header = self.formatHeader(record)

        record.message = record.getMessage()
        text = record.message
        if record.exc_info and not record.exc_text:
            record.exc_text = self.formatException(record.exc_info)
        if record.exc_text:
            if text[-1:] != '\n':
                text += '\n'
            text += record.exc_text
        if record.stack_info:
            if text[-1:] != '\n':
                text += '\n'
            text += self.formatStack(record.stack_info)

        return header + self.indentMessage(text)


class RecordFormatter:
    """Writes one formatted record to a sink.

    Bound to a sink for a single call. The config is observed, never
    copied or modified, so one instance may be shared by every handler
    and thread in the process.

    Attributes:
        sink: Writable text stream supplied by the host for this call.
        config (TimeZoneConfig): Shared rendering settings.
        formatter (logging.Formatter): Produces the line body.
    """

    def __init__(self, sink, config, formatter=None):
        self.sink = sink
        self.config = config
        self.formatter = formatter if formatter is not None else TimeZoneFormatter(config)

    def write(self, record):
        """Format `record` and write the whole line to the sink in one call.

        Args:
            record (logging.LogRecord): Record to write. Not modified beyond
                the message/exception caches logging.Formatter fills in.

        Raises:
            InvalidOffsetError: If the configured offset cannot be rendered.
                Nothing is written in that case.
            FormatIOError: If the sink rejects the write. The line is not
                retried or buffered.
        """
        line = self.formatter.format(record) + self.config.suffix
        try:
            self.sink.write(line)
        except (OSError, ValueError) as e:
            raise FormatIOError("Failed to write log record to sink", e) from e
