"""Logging for astro-agent.

Uses Python's standard logging library.
- INFO/WARNING/ERROR always go to <tmpdir>/astro-agent-{epoch}.log
- DEBUG messages only appear when --debug flag is used
- Each run creates a new log file with epoch timestamp

Modules log through `logging.getLogger(__name__)`; records from any
`astro_agent.*` logger end up in the run's log file.
"""

import logging
import os
import tempfile
import time
from datetime import datetime
from pathlib import Path

# Generate log file with epoch timestamp (seconds since epoch)
_epoch_timestamp = int(time.time())
LOG_FILE = Path(tempfile.gettempdir()) / f"astro-agent-{_epoch_timestamp}.log"

# Package logger, parent of every module logger
_logger = logging.getLogger("astro_agent")

# Flag to track if we've initialized logging
_initialized = False


def _init_logging() -> None:
    """Initialize basic logging (INFO level) to the log file."""
    global _initialized
    if _initialized:
        return

    _initialized = True

    _logger.setLevel(logging.INFO)

    # File handler - append mode, opened on first record
    file_handler = logging.FileHandler(LOG_FILE, mode="a", delay=True)
    file_handler.setLevel(logging.DEBUG)  # Handler accepts all, logger filters

    formatter = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )
    file_handler.setFormatter(formatter)
    _logger.addHandler(file_handler)

    # Prevent propagation to root logger (avoids duplicate logs)
    _logger.propagate = False


def enable_debug() -> None:
    """Enable debug-level logging (more verbose output)."""
    _init_logging()

    _logger.setLevel(logging.DEBUG)

    _logger.info("=" * 60)
    _logger.info(f"astro-agent debug run started at {datetime.now()}")
    _logger.info(f"PID: {os.getpid()}")
    _logger.info("=" * 60)


# Initialize logging on module import (for INFO/WARNING/ERROR)
_init_logging()


def get_log_file() -> Path:
    """Get the current run's log file path."""
    return LOG_FILE


def log_error(context: str, exc: Exception) -> None:
    """Log an error with context (always logged)."""
    _logger.error(f"ERROR in {context}: {type(exc).__name__}: {exc}")
