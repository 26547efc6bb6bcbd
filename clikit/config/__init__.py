"""Runtime settings read from the environment."""

from __future__ import annotations

import logging
import os
from functools import lru_cache

__all__: list[str] = ["Settings", "get_settings"]

logger = logging.getLogger(__name__)


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r, expected an integer", name, raw)
        return default


class Settings:  # noqa: D101
    def __init__(self) -> None:
        self.app_env: str = os.getenv("CLIKIT_ENV", "development")
        self.log_level: str = os.getenv("CLIKIT_LOG_LEVEL", "WARNING").upper()

        # Spinner timings, all in milliseconds
        self.spinner_interval_ms: int = max(_env_int("CLIKIT_SPINNER_INTERVAL_MS", 80), 1)
        self.cursor_timeout_ms: int = max(_env_int("CLIKIT_CURSOR_TIMEOUT_MS", 500), 0)
        self.test_delay_ms: int = max(_env_int("CLIKIT_TEST_DELAY_MS", 2000), 0)

    @property
    def spinner_interval(self) -> float:
        """Redraw period in seconds."""
        return self.spinner_interval_ms / 1000

    @property
    def cursor_timeout(self) -> float | None:
        """Cursor query bound in seconds, ``None`` when unbounded."""
        return self.cursor_timeout_ms / 1000 if self.cursor_timeout_ms else None


@lru_cache(maxsize=1)
def get_settings() -> Settings:  # noqa: D401
    """Return cached Settings instance."""

    return Settings()
