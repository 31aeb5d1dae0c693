"""Optional logging setup for hosts that don't configure logging themselves.

The library only logs through ``logging.getLogger(__name__)``. Raw lookup
responses are logged at DEBUG by the client when ``LookupConfig.verbose`` is
set; ``setup_logging(verbose=True)`` makes those records visible.
"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = 'appstore_lookup'

# Handler names for idempotency
_CONSOLE_HANDLER = 'appstore_lookup_console'
_FILE_HANDLER = 'appstore_lookup_file'


def setup_logging(
    level: int = logging.INFO,
    verbose: bool = False,
    log_file: Optional[Union[Path, str]] = None,
    console: Optional[Console] = None,
) -> logging.Logger:
    """Attach a Rich console handler (and optionally a rotating file) to the package logger.

    Calling it again reuses the existing handlers and only updates levels.

    Args:
        level: Level for package messages
        verbose: Lower the package logger to DEBUG so raw responses show
        log_file: Optional path for a rotating log file
        console: Rich console to write to (default: stderr)

    Returns:
        The package logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    effective = logging.DEBUG if verbose else level

    handler = next((h for h in logger.handlers if h.name == _CONSOLE_HANDLER), None)
    if handler is None:
        handler = RichHandler(console=console or Console(stderr=True), markup=False, show_path=False)
        handler.name = _CONSOLE_HANDLER
        logger.addHandler(handler)
    handler.setLevel(effective)

    if log_file and not any(h.name == _FILE_HANDLER for h in logger.handlers):
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(log_path, maxBytes=1_000_000, backupCount=3, encoding='utf-8')
        file_handler.name = _FILE_HANDLER
        file_handler.setFormatter(logging.Formatter('%(asctime)s | %(name)s | %(levelname)s | %(message)s'))
        logger.addHandler(file_handler)

    logger.setLevel(effective)
    return logger
