"""
Shared utilities for the Pokedex CLI.

Contains:
- Logging setup (Rich console handler + optional file handler)
- Logger lookup
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from rich.logging import RichHandler


def setup_logging(level: Optional[str] = None, log_file: Optional[Path] = None) -> None:
    """
    Configure logging with Rich on the console and optional file output.

    The root logger runs at DEBUG so the file handler sees everything;
    the console handler only shows ``level`` and above.
    """
    from .config import settings

    console_level = (level or settings.LOG_LEVEL).upper()

    console_handler = RichHandler(rich_tracebacks=True, show_path=False)
    console_handler.setLevel(console_level)
    handlers: List[logging.Handler] = [console_handler]

    if settings.LOG_FILE_ENABLED or log_file:
        path = log_file or (settings.LOG_DIR / f"pokedex_{datetime.now().strftime('%Y%m%d')}.log")
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        ))
        handlers.append(file_handler)

    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        datefmt="[%X]",
        handlers=handlers,
        force=True,
    )
    # urllib3 is chatty at DEBUG
    logging.getLogger("urllib3").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get a configured logger."""
    return logging.getLogger(name)
