"""Terminal control sequences and the cursor position query.

The spinner needs to know which row it owns before it starts redrawing. This
module asks the terminal with a Device Status Report (``ESC [ 6 n``) and reads
the ``ESC [ row ; col R`` reply from standard input.
"""

import asyncio
import logging
import os
import re
import sys
import termios
import tty
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Optional, TextIO

logger = logging.getLogger(__name__)

CSI = "\x1b["                                # Control Sequence Introducer
DSR_CURSOR_QUERY = CSI + "6n"                # Device Status Report, cursor position

_CURSOR_REPORT = re.compile(r"\x1b\[(\d+);(\d+)R")
_REPLY_CHUNK = 64


@dataclass(frozen=True)
class CursorPosition:
    """Cursor position as reported by the terminal (1-based)."""
    row: int
    col: int


def parse_cursor_report(data: str) -> Optional[CursorPosition]:
    """Extract the cursor position from a terminal reply.

    Args:
        data: Raw text read from the terminal, possibly with other input
            around the report

    Returns:
        The position, or None when no ``ESC [ row ; col R`` sequence is present
    """
    if not data:
        return None
    match = _CURSOR_REPORT.search(data)
    if match is None:
        return None
    return CursorPosition(row=int(match.group(1)), col=int(match.group(2)))


@contextmanager
def raw_mode(fd: int) -> Iterator[bool]:
    """Put a TTY in cbreak mode (no echo, no line buffering) while inside.

    Yields True when the mode was changed. Non-TTY descriptors are left alone.
    The saved attributes are restored on exit, including on cancellation.
    """
    if not os.isatty(fd):
        yield False
        return

    try:
        saved = termios.tcgetattr(fd)
        tty.setcbreak(fd, termios.TCSANOW)
    except termios.error as e:
        logger.debug("Could not enable raw mode on fd %d: %s", fd, e)
        yield False
        return

    try:
        yield True
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)


class CursorLocator:
    """One-shot cursor position query over the terminal's input stream."""

    def __init__(self, output: Optional[TextIO] = None, input_fd: Optional[int] = None,
                 timeout: Optional[float] = None):
        """Initialize the locator.

        Args:
            output: Stream the query is written to (defaults to stdout)
            input_fd: Descriptor the reply is read from (defaults to stdin)
            timeout: Seconds to wait for the reply, None to wait forever
        """
        self.output = output
        self.input_fd = input_fd
        self.timeout = timeout

    def _resolve_input_fd(self) -> Optional[int]:
        if self.input_fd is not None:
            return self.input_fd
        try:
            return sys.stdin.fileno()
        except (AttributeError, ValueError, OSError):
            return None

    async def locate(self) -> Optional[CursorPosition]:
        """Ask the terminal where the cursor is.

        Returns:
            The reported position, or None when the reply is malformed, never
            arrives within the timeout, or stdin cannot be read
        """
        fd = self._resolve_input_fd()
        if fd is None:
            logger.debug("No readable stdin, skipping cursor query")
            return None

        loop = asyncio.get_running_loop()
        reply: asyncio.Future = loop.create_future()
        received = bytearray()

        def on_readable() -> None:
            if reply.done():
                return
            try:
                chunk = os.read(fd, _REPLY_CHUNK)
            except OSError as e:
                logger.debug("Cursor reply read failed: %s", e)
                reply.set_result(bytes(received))
                return
            received.extend(chunk)
            # EOF or a complete report ends the wait
            if not chunk or b"R" in chunk:
                reply.set_result(bytes(received))

        with raw_mode(fd):
            try:
                loop.add_reader(fd, on_readable)
            except (NotImplementedError, ValueError, OSError) as e:
                logger.debug("Cannot watch fd %d for the cursor reply: %s", fd, e)
                return None

            try:
                output = self.output or sys.stdout
                output.write(DSR_CURSOR_QUERY)
                output.flush()
                data = await asyncio.wait_for(reply, self.timeout)
            except asyncio.TimeoutError:
                logger.debug("No cursor position reply after %.3fs", self.timeout)
                return None
            finally:
                loop.remove_reader(fd)

        position = parse_cursor_report(data.decode("utf-8", errors="replace"))
        if position is None:
            logger.debug("Malformed cursor position reply: %r", data)
        else:
            logger.debug("Cursor at row %d, col %d", position.row, position.col)
        return position
