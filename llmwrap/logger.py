import logging
import os
from logging.handlers import RotatingFileHandler
from typing import List

from rich.logging import RichHandler
from rich.console import Console

from .config import Config

_installed_handlers: List[logging.Handler] = []


def setup_logging(config: Config):
    """Set up logging for the application."""
    root_logger = logging.getLogger()
    level = logging.INFO if config.verbose else logging.WARNING
    root_logger.setLevel(level)

    # Repeated setup replaces our own handlers instead of stacking them
    for handler in _installed_handlers:
        root_logger.removeHandler(handler)
    _installed_handlers.clear()

    # Console handler (with Rich)
    console = Console(stderr=True)
    rich_handler = RichHandler(
        console=console,
        show_time=False,
        show_path=False,
        rich_tracebacks=True
    )
    rich_handler.setLevel(level)
    _installed_handlers.append(rich_handler)

    # File handler (Rotating), only when asked for
    if config.log_file:
        log_dir = os.path.dirname(os.path.abspath(config.log_file))
        os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            config.log_file, maxBytes=10*1024*1024, backupCount=5  # 10 MB per file, 5 backups
        )
        file_handler.setLevel(logging.INFO)
        file_formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        file_handler.setFormatter(file_formatter)
        _installed_handlers.append(file_handler)
        root_logger.setLevel(logging.INFO)

    for handler in _installed_handlers:
        root_logger.addHandler(handler)

    # Keep HTTP internals quiet
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    logger = logging.getLogger(__name__)
    logger.info(f"Logger initialized with configuration: {config}")
