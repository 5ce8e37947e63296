import logging

from rich.console import Console
from rich.logging import RichHandler

_logger = logging.getLogger("scriptvars")


def _create_rich_handler():
    console = Console(stderr=True)
    h = RichHandler(
        console=console,
        show_time=False,
        show_path=False,
        markup=True,
        rich_tracebacks=True,
    )
    h.setFormatter(logging.Formatter("%(message)s"))
    return h


_handler = _create_rich_handler()
_logger.setLevel(logging.WARNING)
_logger.propagate = False
_logger.addHandler(_handler)


def debug(msg):
    _logger.debug(msg)


def warning(msg):
    _logger.warning(msg)


def error(msg, exc_info=False):
    _logger.error(msg, exc_info=exc_info)


def set_default_level(level):
    if isinstance(level, str):
        level = level.upper()
    _logger.setLevel(level)
