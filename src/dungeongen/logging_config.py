# src/dungeongen/logging_config.py
import logging
import os
from logging import FileHandler, StreamHandler
from typing import Optional

FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATEFMT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: int = logging.WARNING, log_file: Optional[str] = None) -> None:
    """
    Console logging (stderr) plus an optional log file.
    Safe to call more than once: handlers are only installed the first time,
    later calls just adjust the level.
    """
    logger = logging.getLogger("dungeongen")
    logger.setLevel(level)

    if getattr(logger, "_dungeongen_handlers_installed", False):
        for h in logger.handlers:
            h.setLevel(level)
        return

    formatter = logging.Formatter(fmt=FORMAT, datefmt=DATEFMT)

    if log_file:
        parent = os.path.dirname(log_file)
        if parent:
            os.makedirs(parent, exist_ok=True)
        file_handler = FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        file_handler.setLevel(level)
        logger.addHandler(file_handler)

    console_handler = StreamHandler()
    console_handler.setFormatter(formatter)
    console_handler.setLevel(level)
    logger.addHandler(console_handler)

    logger._dungeongen_handlers_installed = True  # type: ignore[attr-defined]
    logger.debug("Logging initialized.")
