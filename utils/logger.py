"""
Logger Configuration
Shared logging setup
"""
import logging
from pathlib import Path
from typing import Optional

from rich.logging import RichHandler
from rich.console import Console


# stderr keeps stdout free for the CLI's JSON report
console = Console(stderr=True)

LOG_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"
LOG_FORMAT_SIMPLE = "%(message)s"

LOG_DIR = Path(__file__).parent.parent / "logs"


def configure_app_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> None:
    """
    Route every module logger through one Rich handler on the root logger.

    Modules log via ``logging.getLogger(__name__)`` and propagate here.
    Repeated calls only adjust the level; handlers are never stacked.

    Args:
        level: log level
        log_file: optional file name under logs/
    """
    root = logging.getLogger()
    root.setLevel(level)

    if not any(isinstance(h, RichHandler) for h in root.handlers):
        console_handler = RichHandler(
            console=console,
            show_time=True,
            show_path=False,
            rich_tracebacks=True,
        )
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT_SIMPLE))
        root.addHandler(console_handler)

    if log_file:
        LOG_DIR.mkdir(parents=True, exist_ok=True)
        file_path = (LOG_DIR / log_file).absolute()
        already_attached = any(
            isinstance(h, logging.FileHandler) and Path(h.baseFilename) == file_path
            for h in root.handlers
        )
        if not already_attached:
            file_handler = logging.FileHandler(file_path, encoding="utf-8")
            file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
            root.addHandler(file_handler)
