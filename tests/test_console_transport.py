"""Tests for console transport"""

import io
from datetime import datetime

import pytest

from transport_logger import ConsoleTransport, Logger, LogLevel, TransportConfig

FIXED_TIME = datetime(2024, 3, 9, 14, 5, 7)


def make_logger(transport):
    return Logger("svc", [transport], clock=lambda: FIXED_TIME)


class TestConsoleTransport:
    """Test console output routing."""

    def test_defaults(self):
        transport = ConsoleTransport()
        assert transport.config == TransportConfig()
        assert transport.colored is True

    @pytest.mark.parametrize("level", [LogLevel.DEBUG, LogLevel.NOTICE, LogLevel.INFO, LogLevel.SUCCESS])
    def test_low_levels_go_to_stdout(self, capsys, level):
        logger = make_logger(ConsoleTransport(minimum_level=LogLevel.DEBUG, log_format="{content}"))
        logger.log(level, "hello")

        captured = capsys.readouterr()
        assert captured.out == "hello\n"
        assert captured.err == ""

    @pytest.mark.parametrize("level", [LogLevel.WARNING, LogLevel.ERROR])
    def test_high_levels_go_to_stderr(self, capsys, level):
        logger = make_logger(ConsoleTransport(log_format="{content}"))
        logger.log(level, "careful")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == "careful\n"

    def test_writes_colored_line(self, capsys):
        logger = make_logger(ConsoleTransport())
        logger.info("Application started")

        out = capsys.readouterr().out
        assert out == "03/09/2024 14:05:07 | \033[34m info  \033[0m | svc | Application started\n"

    def test_uncolored_writes_raw_line(self, capsys):
        logger = make_logger(ConsoleTransport(colored=False, log_format="{level}|{content}"))
        logger.success("done")
        assert capsys.readouterr().out == "success|done\n"

    def test_injected_streams(self):
        out, err = io.StringIO(), io.StringIO()
        transport = ConsoleTransport(
            log_format="{content}", colored=False, stream=out, error_stream=err
        )
        logger = make_logger(transport)

        logger.info("to out")
        logger.error("to err")

        assert out.getvalue() == "to out\n"
        assert err.getvalue() == "to err\n"

    def test_time_uses_pattern(self):
        transport = ConsoleTransport(time_format="%Y/%m/%d")
        assert transport.time(FIXED_TIME) == "2024/03/09"

    def test_below_threshold_writes_nothing(self, capsys):
        logger = make_logger(ConsoleTransport(minimum_level=LogLevel.ERROR))
        logger.warning("quiet")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""
