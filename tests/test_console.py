"""Tests for console output, headers, password prompt and logging setup."""

import logging
import re
from unittest.mock import MagicMock, patch

from anf_sample.console import console_output, get_password, print_header, setup_logging


class TestConsoleOutput:
    def test_timestamped_line_goes_to_sink(self) -> None:
        lines: list[str] = []
        console_output("creating pool", lines.append)
        assert len(lines) == 1
        assert re.fullmatch(r"\d{4}/\d{2}/\d{2} \d{2}:\d{2}:\d{2} creating pool", lines[0])

    def test_plain_line(self) -> None:
        lines: list[str] = []
        console_output("done", lines.append, timestamp=False)
        assert lines == ["done"]

    def test_default_sink_is_stderr(self, capsys) -> None:
        console_output("hello", timestamp=False)
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == "hello\n"


class TestPrintHeader:
    def test_underline_matches_width(self) -> None:
        lines: list[str] = []
        print_header("Creating account", lines.append)
        assert lines == ["Creating account", "-" * len("Creating account")]

    def test_default_sink_is_stdout(self, capsys) -> None:
        print_header("abc")
        assert capsys.readouterr().out == "abc\n---\n"


class TestGetPassword:
    def test_value_is_stripped(self) -> None:
        reader = MagicMock(return_value="  s3cret \n")
        assert get_password("Password", reader) == "s3cret"
        reader.assert_called_once_with("Password")

    def test_default_reader_hides_input(self) -> None:
        with patch("anf_sample.console.click.prompt", return_value=" pw ") as prompt:
            assert get_password("Password") == "pw"
        assert prompt.call_args.args == ("Password",)
        assert prompt.call_args.kwargs["hide_input"] is True


class TestSetupLogging:
    def test_configures_package_logger(self) -> None:
        setup_logging(level=logging.DEBUG)
        app_logger = logging.getLogger("anf_sample")
        assert app_logger.level == logging.DEBUG
        assert len(app_logger.handlers) == 1
        assert app_logger.propagate is False
        assert logging.getLogger("azure").level == logging.WARNING

    def test_repeated_setup_does_not_stack_handlers(self) -> None:
        setup_logging()
        setup_logging()
        assert len(logging.getLogger("anf_sample").handlers) == 1
