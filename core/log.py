"""Logging for the gestloc service.

Records emitted while a scheduled task runs are tagged with the task name,
so interleaved output from concurrent tasks stays readable::

    10-27 09:00:00     INFO [generation-loyers-automatique] Created 3 rent(s)
"""

import logging
import logging.handlers
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from pathlib import Path

import colorlog

from .config import Settings

DATE_FORMAT = "%m-%d %H:%M:%S"
FILE_FORMAT = (
    "%(asctime)s %(levelname)8s %(task_tag)s%(message)s "
    "(%(name)s@%(filename)s:%(lineno)d)"
)
COLOR_FORMAT = (
    "%(asctime)s %(log_color)s%(levelname)8s%(reset)s "
    "%(cyan)s%(task_tag)s%(reset)s%(message)s "
    "\033[90m(%(name)s@%(filename)s:%(lineno)d)\033[0m"
)
LOG_COLORS = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "red,bg_white",
}

_current_task: ContextVar[str | None] = ContextVar("current_task", default=None)


class TaskContextFilter(logging.Filter):
    """Set ``task_tag`` on each record from the task being run, if any."""

    def filter(self, record: logging.LogRecord) -> bool:
        name = _current_task.get()
        record.task_tag = f"[{name}] " if name else ""
        return True


@contextmanager
def task_context(name: str) -> Iterator[None]:
    """Tag log records emitted inside the block with ``name``."""
    token = _current_task.set(name)
    try:
        yield
    finally:
        _current_task.reset(token)


def setup_logging(
    level: int | str = logging.INFO,
    use_colors: bool = True,
    log_file: Path | None = None,
    rotate: bool = True,
) -> None:
    """Replace root handlers with a console handler and an optional file.

    Args:
        level: Logging level (int or level name)
        use_colors: Colorize console output
        log_file: File to also write records to
        rotate: Rotate ``log_file`` at 5MB keeping 4 backups, else
            truncate it on setup
    """
    console = logging.StreamHandler(sys.stdout)
    if use_colors:
        console.setFormatter(
            colorlog.ColoredFormatter(
                COLOR_FORMAT, datefmt=DATE_FORMAT, log_colors=LOG_COLORS
            )
        )
    else:
        console.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
    handlers: list[logging.Handler] = [console]

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler: logging.Handler
        if rotate:
            file_handler = logging.handlers.RotatingFileHandler(
                log_file, maxBytes=5 * 1024 * 1024, backupCount=4, encoding="utf-8"
            )
        else:
            file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
        handlers.append(file_handler)

    task_filter = TaskContextFilter()
    for handler in handlers:
        handler.addFilter(task_filter)

    logging.basicConfig(level=level, handlers=handlers, force=True)


def configure_logging(settings: Settings, log_dir: Path = Path("logs")) -> None:
    """Configure logging for the environment in ``settings``.

    - production: ``settings.log_level``, rotating ``gestloc.log``, colors
      only on a terminal
    - testing: DEBUG, ``test/test.log`` rewritten on each run
    - development: ``settings.log_level``, console only
    """
    if settings.is_production:
        setup_logging(
            level=settings.log_level,
            use_colors=sys.stdout.isatty(),
            log_file=log_dir / "gestloc.log",
        )
    elif settings.is_testing:
        setup_logging(
            level=logging.DEBUG,
            log_file=log_dir / "test" / "test.log",
            rotate=False,
        )
    else:
        setup_logging(level=settings.log_level)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
