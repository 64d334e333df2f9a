"""
Runtime settings for the puzzle solver tools.
"""

import os
from dataclasses import dataclass

_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Settings:
    """Settings shared by the CLI, the scripts and the solver."""

    data_dir: str = "data"  # Root holding hoppers/ and jam/ puzzle files
    log_level: str = "INFO"
    progress_interval: int = 10_000  # Expansions between solver progress lines

    def __post_init__(self):
        """Validate configuration."""
        self.log_level = self.log_level.upper()
        if self.log_level not in _LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(_LEVELS)}, got {self.log_level!r}"
            )
        if self.progress_interval <= 0:
            raise ValueError("progress_interval must be positive")
        if not self.data_dir:
            raise ValueError("data_dir must not be empty")

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from PUZZLES_* environment variables."""
        defaults = cls()
        interval = os.environ.get("PUZZLES_PROGRESS_INTERVAL")
        try:
            progress_interval = (
                int(interval) if interval is not None else defaults.progress_interval
            )
        except ValueError:
            raise ValueError(
                f"PUZZLES_PROGRESS_INTERVAL must be an integer, got {interval!r}"
            ) from None

        return cls(
            data_dir=os.environ.get("PUZZLES_DATA_DIR", defaults.data_dir),
            log_level=os.environ.get("PUZZLES_LOG_LEVEL", defaults.log_level),
            progress_interval=progress_interval,
        )
