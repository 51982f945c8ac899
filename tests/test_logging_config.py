import logging
from logging.handlers import RotatingFileHandler

from rich.logging import RichHandler

from pwsh_bootstrap.logging_config import setup_logging


def test_console_and_file_handlers(tmp_path, restore_root_handlers):
    log_file = tmp_path / "logs" / "pwsh_bootstrap.log"

    setup_logging("warning", str(log_file))
    logging.getLogger("pwsh_bootstrap.test").debug("font query started")

    handlers = restore_root_handlers.handlers
    rich = [h for h in handlers if isinstance(h, RichHandler)]
    files = [h for h in handlers if isinstance(h, RotatingFileHandler)]
    assert rich[0].level == logging.WARNING
    assert files[0].level == logging.DEBUG
    files[0].flush()
    assert "font query started" in log_file.read_text(encoding="utf-8")


def test_console_only(restore_root_handlers):
    setup_logging("INFO")
    assert not any(
        isinstance(h, RotatingFileHandler) for h in restore_root_handlers.handlers
    )
