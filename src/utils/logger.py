"""Logging utilities for the website status checker."""
import logging
from pathlib import Path
from datetime import datetime


def setup_logger(name: str = "status_checker", log_dir: str = "logs") -> logging.Logger:
    """
    Set up a logger that writes to both file and console.

    Streamlit reruns the app script on every interaction, so a logger that
    already has handlers is returned as-is and keeps its log file.

    Args:
        name: Logger name
        log_dir: Directory to store log files

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    log_path = Path(log_dir)
    log_path.mkdir(exist_ok=True)

    logger.setLevel(logging.DEBUG)

    # One file per app process, DEBUG and up
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_file = log_path / f"status_checker_{timestamp}.log"

    file_handler = logging.FileHandler(log_file, encoding='utf-8')
    file_handler.setLevel(logging.DEBUG)

    # Console only gets INFO and up
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    for handler in (file_handler, console_handler):
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug(f"Logging to: {log_file}")

    return logger


def close_logger(name: str = "status_checker"):
    """Close and detach all handlers so the next setup starts fresh."""
    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
