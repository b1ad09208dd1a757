from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional


def configure_logging(
    log_path: Optional[str] = None,
    level: int = logging.INFO,
    also_console: bool = True,
) -> Optional[str]:
    """Set up root logging for one `bolt-installer` invocation.

    Status lines for the person running the hook go through the event's IO;
    logging carries the resolution and mirror decisions behind them (which
    source a directory came from, files copied, stale entries removed).
    Console output is on by default; a file is only written with `--log`, and
    lands in the working directory when the requested location is unwritable.

    Returns the log file in use, or None.
    """

    logger = logging.getLogger()
    logger.setLevel(level)

    # Hooks may be run repeatedly in one process; install handlers once.
    if getattr(logger, "_bolt_installer_configured", False):
        return getattr(logger, "_bolt_installer_log_path", log_path)

    chosen_path = log_path
    handlers: list[logging.Handler] = []

    fmt = logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S%z",
    )

    if log_path:
        try:
            Path(os.path.dirname(log_path) or ".").mkdir(parents=True, exist_ok=True)
            file_handler: logging.Handler = logging.FileHandler(log_path)
        except OSError:
            chosen_path = str(Path.cwd() / Path(log_path).name)
            file_handler = logging.FileHandler(chosen_path)
        file_handler.setFormatter(fmt)
        handlers.append(file_handler)

    if also_console:
        console = logging.StreamHandler()
        console.setFormatter(fmt)
        handlers.append(console)

    for h in handlers:
        logger.addHandler(h)

    setattr(logger, "_bolt_installer_configured", True)
    setattr(logger, "_bolt_installer_log_path", chosen_path)

    logging.getLogger(__name__).debug(
        "Logging initialized (requested=%s, actual=%s)", log_path, chosen_path
    )
    return chosen_path
