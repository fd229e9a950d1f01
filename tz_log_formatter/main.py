# tz_log_formatter/main.py
"""Demo command line for the timezone-aware log formatter.

Interprets command-line arguments, builds a TimeZoneConfig,
installs the handler on the root logger and emits the given messages.
"""
import re
import sys
import logging
import argparse

from tz_log_formatter.config import VERSION, DEFAULT_MESSAGE, LOG_TZ_CONFIG_FILE
from tz_log_formatter.errors import ConfigError
from tz_log_formatter.logger_config import setup_logger
from tz_log_formatter.timezone_config import TimeZoneConfig, TimestampPrecision, parse_offset

logger = logging.getLogger(__name__)


def join_offset_values(argv):
    """Attach negative offsets to their option so argparse accepts them.

    argparse reads "-05:00" after "--offset" as an unknown option, so
    `--offset -05:00` is rewritten to `--offset=-05:00`.

    Args:
        argv (list[str]): Raw command-line arguments.

    Returns:
        list[str]: Arguments ready for the parser.
    """
    joined = []
    index = 0
    while index < len(argv):
        arg = argv[index]
        if arg == '--offset' and index + 1 < len(argv) and re.match(r'-\d', argv[index + 1]):
            joined.append(f"--offset={argv[index + 1]}")
            index += 2
            continue
        joined.append(arg)
        index += 1
    return joined


def parse_args(argv=None):
    """Parse command-line arguments.

    Args:
        argv (list[str], optional): Arguments to parse. Defaults to sys.argv[1:].

    Returns:
        argparse.Namespace: Object containing parsed command-line arguments.
    """
    parser = argparse.ArgumentParser(description='Emit log lines with timezone-aware timestamps')

    parser.add_argument('messages', nargs='*', default=[DEFAULT_MESSAGE],
                        help=f'Messages to log at INFO level (Default: "{DEFAULT_MESSAGE}")')

    # Timestamp settings
    parser.add_argument('--offset', type=str, default=None,
                        help='UTC offset as seconds, ±HH:MM or ±HHMM (Default: LOG_TZ_OFFSET, else system local time)')
    parser.add_argument('--precision', '-p', type=str, default=None,
                        help='Sub-second precision: seconds, millis, micros, nanos or s/ms/us/ns (Default: LOG_TIMESTAMP_PRECISION, else seconds)')
    parser.add_argument('--config', '-c', default=LOG_TZ_CONFIG_FILE or None,
                        help='YAML file with formatter settings (Default: LOG_TZ_CONFIG_FILE)')

    # Log level settings
    parser.add_argument('--debug', action='store_true',
                        help='Enable debug mode (outputs debug logs)')

    # Version information
    parser.add_argument('--version', '-v', action='version', version=f'%(prog)s {VERSION}',
                        help='Display version information and exit')

    if argv is None:
        argv = sys.argv[1:]
    return parser.parse_args(join_offset_values(list(argv)))


def build_config(args):
    """Build the formatter config from a YAML file, the environment and arguments.

    Command-line options override values from the config file, which
    override the environment.

    Args:
        args (argparse.Namespace): Parsed command-line arguments.

    Returns:
        TimeZoneConfig: Resulting configuration.

    Raises:
        ConfigError: If an option or the config file holds an invalid value.
    """
    if args.config:
        base = TimeZoneConfig.from_yaml(args.config)
    else:
        base = TimeZoneConfig.from_env()

    offset = parse_offset(args.offset) if args.offset is not None else base.offset_seconds
    precision = TimestampPrecision.parse(args.precision) if args.precision else base.precision
    return TimeZoneConfig.new(
        offset, precision,
        show_level=base.show_level,
        show_target=base.show_target,
        show_module_path=base.show_module_path,
        indent=base.indent
    )


def main(argv=None):
    """Main execution function of the demo.

    Returns:
        int: Process exit status.
    """
    args = parse_args(argv)

    try:
        config = build_config(args)
    except (ConfigError, OSError) as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    setup_logger(config, debug=args.debug)
    logger.debug(f"Formatter config: {config}")

    for message in args.messages:
        logger.info(message)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
