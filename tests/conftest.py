from pathlib import Path
import sys
import logging
import time

import pytest

# Ensure project root is on sys.path for tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

@pytest.fixture
def make_record():
    """Factory for log records with a fixed creation time."""
    def _make(created=1714060388.333,  # 2024-04-25T15:53:08.333Z
              message="1", name="mytarget",
              level=logging.INFO, pathname="mymodule.py", args=None, exc_info=None, **attrs):
        record = logging.LogRecord(name, level, pathname, 1, message, args, exc_info)
        record.created = created
        for key, value in attrs.items():
            setattr(record, key, value)
        return record
    return _make


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Drop handlers installed by setup_logger and restore the root level."""
    from tz_log_formatter.logger_config import TimeZoneStreamHandler

    root = logging.getLogger()
    level = root.level
    yield
    for handler in root.handlers[:]:
        if isinstance(handler, TimeZoneStreamHandler):
            root.removeHandler(handler)
    root.setLevel(level)


@pytest.fixture
def local_tz(monkeypatch):
    """Switch the process local timezone to a POSIX TZ string for one test."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")

    def _set(tz):
        monkeypatch.setenv("TZ", tz)
        time.tzset()

    yield _set
    monkeypatch.undo()
    time.tzset()
