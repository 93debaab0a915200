# -*- coding: utf-8 -*-
"""
Logging setup for the semantic chunking package.

Library modules never configure handlers themselves; they only do
``logger = logging.getLogger(__name__)``. Applications (or test sessions)
call setup_logging() once to route everything under the package logger to
the console and, optionally, a log file.

Examples:
    from semantic_chunking.utils.logger import setup_logging
    setup_logging(level=logging.DEBUG, log_file="logs/chunking.log")

    import logging
    logger = logging.getLogger(__name__)
    logger.info("Chunker ready")

"""
# Standard library
import logging
import sys
from pathlib import Path
from typing import Optional

PACKAGE_LOGGER = 'semantic_chunking'
DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

_logging_configured = False


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    format_string: str = DEFAULT_FORMAT
) -> logging.Logger:
    """
    Attach console (and optional file) handlers to the package logger.

    Only the first call has an effect, so entry points and test fixtures can
    both call it without producing duplicate lines.

    Args:
        level: Logging level for the package logger and its handlers
        log_file: Optional path; parent directories are created on demand
        format_string: Format applied to every handler

    Returns:
        The configured package logger
    """
    global _logging_configured

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if _logging_configured:
        return package_logger

    formatter = logging.Formatter(format_string)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    package_logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path, mode='a', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        package_logger.addHandler(file_handler)

    package_logger.setLevel(level)
    # Handlers live on the package logger; keep records out of the root logger
    package_logger.propagate = False

    _logging_configured = True
    return package_logger


def get_logger(name: str) -> logging.Logger:
    """Return ``logging.getLogger(name)``; kept for call-site symmetry."""
    return logging.getLogger(name)
