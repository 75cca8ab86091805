"""Tests for reltag.output.console module."""

from __future__ import annotations

import pytest

from reltag.output.console import ConsoleProtocol, MockConsole, RichConsole, Style


class TestStyle:
    def test_str_conversion(self) -> None:
        assert str(Style.SUCCESS) == "success"
        assert str(Style.ERROR) == "error"
        assert str(Style.DIM) == "dim"


class TestMockConsole:
    def test_print_captures_message(self) -> None:
        console = MockConsole()
        console.print("hello")
        assert console.outputs[0].message == "hello"
        assert console.outputs[0].style == Style.DEFAULT

    def test_error(self) -> None:
        console = MockConsole()
        console.error("bad version")
        assert console.messages == ["error: bad version"]
        assert console.has_error() is True
        assert console.has_success() is False

    def test_success_and_info(self) -> None:
        console = MockConsole()
        console.success("pushed")
        console.info("dry run")
        assert console.text == "OK pushed\ninfo: dry run"
        assert console.has_success() is True

    def test_find(self) -> None:
        console = MockConsole()
        console.print("tag v1.0.0")
        console.error("careful")
        assert len(console.find("v1.0.0")) == 1
        assert console.find("careful")[0].style == Style.ERROR

    def test_satisfies_protocol(self) -> None:
        console: ConsoleProtocol = MockConsole()
        console.print("x")


class TestRichConsole:
    def test_errors_go_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        console = RichConsole()
        console.error("Unable to parse semver from Cargo.toml.")
        console.success("v1.0.0 pushed to origin")

        captured = capsys.readouterr()
        assert "error: Unable to parse semver from Cargo.toml." in captured.err
        assert "v1.0.0 pushed to origin" in captured.out
        assert "Unable to parse" not in captured.out

    def test_markup_in_message_is_not_interpreted(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        RichConsole().info("found '[bold]'")
        assert "[bold]" in capsys.readouterr().out
