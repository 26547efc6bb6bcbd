"""Terminal progress spinner.

A spinner owns one terminal line. ``start`` reserves a fresh line, asks the
terminal which row that is, then redraws ``<glyph> <message>`` on that row at
a fixed interval until ``stop``, ``success``, ``error`` or ``log`` clears it.

Resizing the terminal while a spinner is running can move the owned row to a
different visual line; the row is only captured once per ``start``.
"""

import asyncio
import logging
from enum import Enum
from typing import Optional, Sequence

from rich.console import Console
from rich.control import Control
from rich.segment import ControlType
from rich.text import Text

from clikit.cli.design_standards import SPINNER_FRAMES
from clikit.cli.terminal import CursorLocator
from clikit.cli.utils.console import AppConsole, format_error, format_success
from clikit.config import get_settings

logger = logging.getLogger(__name__)


class SpinnerState(str, Enum):
    """Lifecycle states of a spinner session."""
    IDLE = "idle"
    AWAITING_CURSOR = "awaiting_cursor"
    ANIMATING = "animating"


class Spinner:
    """Animated status line with start/stop/success/error/log lifecycle.

    Construction has no side effects; call :meth:`start` (or use the instance
    as an async context manager) to begin animating. All output goes through
    ``console``. When the console is not a terminal the animation is skipped
    and only the final messages are printed.
    """

    def __init__(self, message: str = "", auto_stop: int = 0, *,
                 console: Optional[Console] = None,
                 locator: Optional[CursorLocator] = None,
                 interval: Optional[float] = None,
                 frames: Sequence[str] = SPINNER_FRAMES):
        """Initialize the spinner.

        Args:
            message: Status text drawn next to the glyph
            auto_stop: Milliseconds after which ``start`` stops the spinner on
                its own, 0 to run until stopped
            console: Console to draw on (defaults to a new AppConsole)
            locator: Cursor position query (defaults to one on stdin/stdout)
            interval: Seconds between redraws (defaults to settings)
            frames: Glyph cycle
        """
        settings = get_settings()
        self.console = console or AppConsole()
        self.message = message
        self.auto_stop = auto_stop
        self.interval = settings.spinner_interval if interval is None else interval
        self.locator = locator or CursorLocator(output=self.console.file,
                                                timeout=settings.cursor_timeout)
        self.frames = tuple(frames)

        self.row: Optional[int] = None
        self.frame_index = 0
        self.state = SpinnerState.IDLE

        self._query: Optional[asyncio.Future] = None
        self._task: Optional[asyncio.Task] = None
        self._auto_stop_handle: Optional[asyncio.TimerHandle] = None

    @property
    def enabled(self) -> bool:
        """Whether the console can show the animation."""
        return self.console.is_terminal and not self.console.is_dumb_terminal

    @property
    def is_running(self) -> bool:
        return self.state is not SpinnerState.IDLE

    async def start(self, message: Optional[str] = None, timeout: Optional[int] = None) -> None:
        """Start animating on a fresh line, replacing any running animation.

        Args:
            message: New status text, keeps the current one when None
            timeout: Milliseconds until an automatic ``stop``; defaults to
                ``auto_stop``, 0 disables it
        """
        self.stop()
        if message is not None:
            self.message = message
        if timeout is None:
            timeout = self.auto_stop

        if not self.enabled:
            logger.debug("Console is not a terminal, spinner disabled")
            return

        loop = asyncio.get_running_loop()
        if timeout and timeout > 0:
            self._auto_stop_handle = loop.call_later(timeout / 1000, self.stop)

        self.console.print()  # reserve a line for the spinner
        self.state = SpinnerState.AWAITING_CURSOR
        self.row = None

        query = self._query = asyncio.ensure_future(self.locator.locate())
        try:
            await asyncio.wait({query})
        except asyncio.CancelledError:
            if self._query is query:
                self.stop()
            raise

        if self._query is not query:
            # stopped or superseded while waiting for the reply
            return
        self._query = None

        if query.cancelled():
            self.state = SpinnerState.IDLE
            return
        if query.exception() is not None:
            logger.debug("Cursor query failed: %s", query.exception())
            position = None
        else:
            position = query.result()

        # 0 marks an unknown row; the animator then redraws in place
        self.row = position.row if position else 0
        self.frame_index = 0
        self.state = SpinnerState.ANIMATING
        self._task = asyncio.create_task(self._animate())
        logger.debug("Spinner animating on row %d", self.row)

    def stop(self) -> None:
        """Stop the animation and clear its line. No-op when idle."""
        if self._auto_stop_handle is not None:
            self._auto_stop_handle.cancel()
            self._auto_stop_handle = None

        if self.state is SpinnerState.IDLE:
            return

        if self._query is not None:
            self._query.cancel()
            self._query = None

        animating = self._task is not None
        if self._task is not None:
            self._task.cancel()
            self._task = None

        self.state = SpinnerState.IDLE
        if animating:
            self._clear_line()
            logger.debug("Spinner stopped after %d frames", self.frame_index)

    def success(self, message: str) -> None:
        """Stop with a success styled message."""
        self.stop()
        self.console.print(format_success(message), soft_wrap=True)

    def error(self, message: str) -> None:
        """Stop with an error styled message."""
        self.stop()
        self.console.print(format_error(message), soft_wrap=True)

    def log(self, message: str) -> None:
        """Stop and write ``message`` as is, without a trailing newline."""
        self.stop()
        self.console.out(message, end="", highlight=False)

    async def _animate(self) -> None:
        while True:
            await asyncio.sleep(self.interval)
            self._draw()

    def _draw(self) -> None:
        glyph = self.frames[self.frame_index % len(self.frames)]
        self.frame_index += 1
        self._clear_line()
        self.console.print(
            Text.assemble((glyph, "spinner"), " ", (self.message, "spinner.message")),
            end="",
            soft_wrap=True,
        )

    def _clear_line(self) -> None:
        if self.row:
            move = Control.move_to(0, self.row - 1)
        else:
            move = Control.move_to_column(0)
        self.console.control(move, Control((ControlType.ERASE_IN_LINE, 2)))

    async def __aenter__(self) -> "Spinner":
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        self.stop()


async def spinner(message: str, timeout: int = 0, **kwargs) -> Spinner:
    """Create a spinner and start it in one step.

    Example:
        loading = await spinner("Processing...")
        await do_work()
        loading.success("Processing done!")
    """
    session = Spinner(message, timeout, **kwargs)
    await session.start()
    return session
