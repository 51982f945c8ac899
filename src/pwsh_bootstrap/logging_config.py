# -*- coding: utf-8 -*-
# -----------------------------------------------------------------------------
# filename: logging_config.py
# author: dunamismax
# version: 1.0.0
# date: 10-19-2026
# github: https://github.com/dunamismax
# description: Configures console and rotating file logging for the bootstrap.
# -----------------------------------------------------------------------------
import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional

from rich.logging import RichHandler

from pwsh_bootstrap.console import console

MAX_LOG_SIZE = 2 * 1024 * 1024  # 2MB
LOG_BACKUP_COUNT = 3


def setup_logging(log_level: str = "INFO", log_file: Optional[str] = None) -> None:
    """
    Set up logging for the entire application.

    Console output goes through a RichHandler bound to the shared themed
    console. When ``log_file`` is given, everything down to DEBUG is also
    written to a rotating log file.

    Args:
        log_level: The minimum log level shown on the console.
        log_file: Optional path of the rotating log file.
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    # Remove existing handlers
    for handler in list(root.handlers):
        root.removeHandler(handler)

    rich_handler = RichHandler(
        console=console,
        rich_tracebacks=True,
        # Pygments style name, not a rich Theme
        tracebacks_theme="nord",
        show_path=False,
    )
    rich_handler.setLevel(log_level.upper())
    root.addHandler(rich_handler)

    if log_file:
        try:
            os.makedirs(os.path.dirname(log_file) or ".", exist_ok=True)
            file_handler = RotatingFileHandler(
                log_file,
                maxBytes=MAX_LOG_SIZE,
                backupCount=LOG_BACKUP_COUNT,
                encoding="utf-8",
            )
        except OSError as e:
            root.warning(f"File logging disabled, cannot open {log_file}: {e}")
        else:
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(
                logging.Formatter(
                    "[%(asctime)s] [%(levelname)s] %(name)s: %(message)s",
                    "%Y-%m-%d %H:%M:%S",
                )
            )
            root.addHandler(file_handler)

    # requests/urllib3 are chatty at DEBUG
    logging.getLogger("urllib3").setLevel(logging.WARNING)
