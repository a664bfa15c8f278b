"""Logging configuration for the localization tools."""

from __future__ import annotations

import logging
import logging.handlers
import sys
from datetime import datetime
from pathlib import Path

LOGGING_CONFIG = {
    "board": logging.INFO,
    "board.core": logging.INFO,
    "board.features": logging.INFO,
    "board.infra": logging.WARNING,
    "sqlalchemy": logging.WARNING,
    "bs4": logging.ERROR,
}

LEVEL_COLORS = {
    logging.DEBUG: "\033[36m",
    logging.INFO: "\033[32m",
    logging.WARNING: "\033[33m",
    logging.ERROR: "\033[31m",
    logging.CRITICAL: "\033[35m",
}
RESET = "\033[0m"


class ColoredFormatter(logging.Formatter):
    """Console formatter that tints the level name when writing to a terminal."""

    def __init__(self, fmt: str, datefmt: str | None = None, use_color: bool = True) -> None:
        super().__init__(fmt, datefmt=datefmt)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        color = LEVEL_COLORS.get(record.levelno)
        if not (self.use_color and color):
            return super().format(record)
        # other handlers share the record, so tint a copy
        tinted = logging.makeLogRecord(record.__dict__)
        tinted.levelname = f"{color}{record.levelname}{RESET}"
        return super().format(tinted)


def setup_logging(log_file: bool = False, debug: bool = False, log_dir: Path = Path("logs")) -> None:
    """Configure logging for the localization tools.

    The console handler writes to stderr so command output on stdout stays clean.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG if debug else logging.INFO)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.DEBUG if debug else logging.INFO)
    console_formatter = ColoredFormatter(
        "%(asctime)s %(levelname)-8s %(name)s - %(message)s",
        datefmt="%H:%M:%S",
        use_color=sys.stderr.isatty(),
    )
    console_handler.setFormatter(console_formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        log_dir.mkdir(parents=True, exist_ok=True)
        log_filename = log_dir / f"board_{datetime.now().strftime('%Y%m%d')}.log"
        file_handler = logging.handlers.RotatingFileHandler(
            log_filename,
            maxBytes=5*1024*1024,  # 5MB
            backupCount=3,
            encoding='utf-8'
        )
        file_handler.setLevel(logging.DEBUG)
        file_formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s (%(filename)s:%(lineno)d) - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )
        file_handler.setFormatter(file_formatter)
        root_logger.addHandler(file_handler)

    for logger_name, level in LOGGING_CONFIG.items():
        if debug and logger_name.startswith("board"):
            level = logging.DEBUG
        logging.getLogger(logger_name).setLevel(level)

    logging.getLogger(__name__).debug(
        "Logging configured (console=%s, file=%s)",
        "DEBUG" if debug else "INFO",
        "ENABLED" if log_file else "DISABLED",
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with proper configuration."""
    return logging.getLogger(name)
