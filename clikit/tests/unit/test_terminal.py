"""Unit tests for terminal control helpers and the cursor locator."""

import asyncio
import io
import os
import pty
import termios

import pytest

from clikit.cli.terminal import (
    DSR_CURSOR_QUERY,
    CursorLocator,
    CursorPosition,
    parse_cursor_report,
    raw_mode,
)


@pytest.fixture
def pipe():
    """Pipe standing in for the terminal's input stream."""
    read_fd, write_fd = os.pipe()
    yield read_fd, write_fd
    for fd in (read_fd, write_fd):
        try:
            os.close(fd)
        except OSError:
            pass


class TestParseCursorReport:
    """Test parse_cursor_report."""

    def test_parses_row_and_column(self):
        assert parse_cursor_report("\x1b[12;1R") == CursorPosition(row=12, col=1)

    def test_ignores_surrounding_input(self):
        """Keys typed while waiting do not hide the report."""
        assert parse_cursor_report("ab\x1b[40;17Rcd") == CursorPosition(row=40, col=17)

    @pytest.mark.parametrize("data", [
        "",
        "garbage",
        "\x1b[12R",
        "\x1b[12;R",
        "[12;1R",
        "\x1b[a;bR",
    ])
    def test_malformed_reply_is_none(self, data):
        assert parse_cursor_report(data) is None


class TestRawMode:
    """Test raw_mode context manager."""

    def test_non_tty_is_left_alone(self, pipe):
        read_fd, _ = pipe
        with raw_mode(read_fd) as changed:
            assert changed is False

    def test_tty_disables_echo_and_restores(self):
        master_fd, slave_fd = pty.openpty()
        try:
            before = termios.tcgetattr(slave_fd)
            assert before[3] & termios.ECHO

            with raw_mode(slave_fd) as changed:
                assert changed is True
                inside = termios.tcgetattr(slave_fd)
                assert not inside[3] & termios.ECHO
                assert not inside[3] & termios.ICANON

            assert termios.tcgetattr(slave_fd)[3] == before[3]
        finally:
            os.close(master_fd)
            os.close(slave_fd)

    def test_restores_after_exception(self):
        master_fd, slave_fd = pty.openpty()
        try:
            before = termios.tcgetattr(slave_fd)
            with pytest.raises(RuntimeError):
                with raw_mode(slave_fd):
                    raise RuntimeError("boom")
            assert termios.tcgetattr(slave_fd)[3] == before[3]
        finally:
            os.close(master_fd)
            os.close(slave_fd)


class TestCursorLocator:
    """Test CursorLocator request/response."""

    @pytest.mark.asyncio
    async def test_writes_query_and_reads_reply(self, pipe):
        read_fd, write_fd = pipe
        output = io.StringIO()
        os.write(write_fd, b"\x1b[12;1R")

        locator = CursorLocator(output=output, input_fd=read_fd, timeout=1.0)
        position = await locator.locate()

        assert position == CursorPosition(row=12, col=1)
        assert output.getvalue() == DSR_CURSOR_QUERY
        assert DSR_CURSOR_QUERY == "\x1b[6n"

    @pytest.mark.asyncio
    async def test_reply_split_across_reads(self, pipe):
        read_fd, write_fd = pipe
        locator = CursorLocator(output=io.StringIO(), input_fd=read_fd, timeout=1.0)

        task = asyncio.ensure_future(locator.locate())
        os.write(write_fd, b"\x1b[7;")
        await asyncio.sleep(0.05)
        assert not task.done()
        os.write(write_fd, b"3R")

        assert await asyncio.wait_for(task, 1.0) == CursorPosition(row=7, col=3)

    @pytest.mark.asyncio
    async def test_malformed_reply_returns_none(self, pipe):
        read_fd, write_fd = pipe
        os.write(write_fd, b"nonsense R")
        locator = CursorLocator(output=io.StringIO(), input_fd=read_fd, timeout=1.0)

        assert await locator.locate() is None

    @pytest.mark.asyncio
    async def test_missing_reply_times_out(self, pipe):
        read_fd, _ = pipe
        locator = CursorLocator(output=io.StringIO(), input_fd=read_fd, timeout=0.05)

        assert await asyncio.wait_for(locator.locate(), 1.0) is None

    @pytest.mark.asyncio
    async def test_closed_input_returns_none(self, pipe):
        read_fd, write_fd = pipe
        os.close(write_fd)
        locator = CursorLocator(output=io.StringIO(), input_fd=read_fd, timeout=1.0)

        assert await locator.locate() is None

    @pytest.mark.asyncio
    async def test_cancel_releases_reader(self, pipe):
        """Cancelling an unbounded wait unregisters the input descriptor."""
        read_fd, _ = pipe
        locator = CursorLocator(output=io.StringIO(), input_fd=read_fd, timeout=None)

        task = asyncio.ensure_future(locator.locate())
        await asyncio.sleep(0.05)
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

        assert asyncio.get_running_loop().remove_reader(read_fd) is False

    @pytest.mark.asyncio
    async def test_unreadable_stdin_returns_none(self, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO())
        output = io.StringIO()
        locator = CursorLocator(output=output, timeout=1.0)

        assert await locator.locate() is None
        assert output.getvalue() == ""
