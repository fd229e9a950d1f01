"""Tests for the demo command line."""

import re

import pytest

from tz_log_formatter import main as cli
from tz_log_formatter.config import VERSION
from tz_log_formatter.timezone_config import TimeZoneConfig, TimestampPrecision


def test_main_logs_messages_with_offset(capsys):
    assert cli.main(["--offset", "+08:00", "--precision", "millis", "first", "second"]) == 0
    lines = capsys.readouterr().err.splitlines()
    assert len(lines) == 2
    pattern = r"\[\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}\.\d{3} \+08:00 INFO  tz_log_formatter\.main\] "
    assert re.fullmatch(pattern + "first", lines[0])
    assert re.fullmatch(pattern + "second", lines[1])


def test_main_default_message(capsys):
    assert cli.main(["--offset", "0"]) == 0
    assert capsys.readouterr().err.endswith(" +00:00 INFO  tz_log_formatter.main] hello, world!\n")


def test_main_debug_logs_config(capsys):
    assert cli.main(["--offset", "3600", "--debug", "x"]) == 0
    err = capsys.readouterr().err
    assert " +01:00 DEBUG tz_log_formatter.main] Formatter config: " in err


def test_main_rejects_bad_offset(capsys):
    assert cli.main(["--offset", "noon"]) == 2
    assert "Invalid configuration" in capsys.readouterr().err


def test_main_reads_yaml_config(tmp_path, capsys):
    path = tmp_path / "logging.yaml"
    path.write_text('offset: "-12:00"\nprecision: nanos\nshow_level: false\n', encoding="utf-8")
    assert cli.main(["--config", str(path), "hi"]) == 0
    line = capsys.readouterr().err
    assert re.fullmatch(
        r"\[\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}\.\d{9} -12:00 tz_log_formatter\.main\] hi\n", line
    )


def test_build_config_arguments_override_file(tmp_path):
    path = tmp_path / "logging.yaml"
    path.write_text("offset: 3600\nprecision: micros\nindent: 8\n", encoding="utf-8")
    args = cli.parse_args(["--config", str(path), "--offset", "+02:00"])
    assert cli.build_config(args) == TimeZoneConfig.new(7200, TimestampPrecision.MICROS, indent=8)


def test_version(capsys):
    with pytest.raises(SystemExit) as exc_info:
        cli.parse_args(["--version"])
    assert exc_info.value.code == 0
    assert VERSION in capsys.readouterr().out


@pytest.mark.parametrize("argv", [
    ["--offset", "-05:00", "x"],
    ["--offset=-05:00", "x"],
    ["--offset", "-0500", "x"],
    ["--offset", "-18000", "x"],
])
def test_main_accepts_negative_offsets(capsys, argv):
    assert cli.main(argv) == 0
    assert capsys.readouterr().err.endswith(" -05:00 INFO  tz_log_formatter.main] x\n")


def test_join_offset_values_leaves_other_arguments():
    assert cli.join_offset_values(["--offset", "-05:00", "--debug", "-p", "ms"]) == [
        "--offset=-05:00", "--debug", "-p", "ms"
    ]
    assert cli.join_offset_values(["--offset", "+08:00"]) == ["--offset", "+08:00"]


@pytest.mark.parametrize("alias, digits", [("ms", 3), ("us", 6), ("ns", 9)])
def test_main_accepts_precision_aliases(capsys, alias, digits):
    assert cli.main(["--offset", "0", "--precision", alias, "x"]) == 0
    err = capsys.readouterr().err
    assert re.fullmatch(
        r"\[\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}\.\d{%d} \+00:00 INFO  tz_log_formatter\.main\] x\n" % digits, err
    )


def test_main_rejects_unknown_precision(capsys):
    assert cli.main(["--precision", "fortnight"]) == 2
    assert "Unknown timestamp precision" in capsys.readouterr().err


def test_main_rejects_malformed_yaml(tmp_path, capsys):
    path = tmp_path / "logging.yaml"
    path.write_text("offset: [1\n", encoding="utf-8")
    assert cli.main(["--config", str(path)]) == 2
    assert "Invalid config file" in capsys.readouterr().err


def test_main_rejects_badly_typed_yaml(tmp_path, capsys):
    path = tmp_path / "logging.yaml"
    path.write_text('indent: "4"\n', encoding="utf-8")
    assert cli.main(["--config", str(path)]) == 2
    assert "indent must be" in capsys.readouterr().err
