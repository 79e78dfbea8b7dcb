"""
Utility functions for the akmodels package.

This module contains reusable helper functions used across the project,
including logging setup, argument coercion for the wrapped AutoKeras API,
file operations, and other common utilities.
"""

import json
import logging
import sys
import tempfile
from pathlib import Path
from typing import Any, Dict, Optional, Union

import numpy as np


def setup_logger(
    logger_name: Optional[str] = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
    log_dir: Optional[Union[str, Path]] = None
) -> logging.Logger:
    """
    Set up a logger with both console and file handlers with rotation.

    Args:
        logger_name: Name of the logger (uses package name if None)
        console_level: Logging level for console output (default: INFO)
        file_level: Logging level for file output (default: DEBUG)
        log_dir: Directory for log files (default: logs/)

    Returns:
        Configured logger instance
    """
    from logging.handlers import RotatingFileHandler

    if logger_name is None:
        logger_name = "akmodels"

    logger = logging.getLogger(logger_name)

    # Only configure if not already configured (avoid duplicate handlers)
    if logger.handlers:
        return logger

    logger.setLevel(logging.DEBUG)

    console_formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )
    file_formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(console_formatter)
    logger.addHandler(console_handler)

    if log_dir is None:
        project_root = Path(__file__).parent.parent
        log_dir = project_root / "logs"
    else:
        log_dir = Path(log_dir)

    log_dir.mkdir(parents=True, exist_ok=True)

    # 10MB max, keep 5 backups
    log_file = log_dir / "akmodels.log"
    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=10*1024*1024,
        backupCount=5,
        mode='a'
    )
    file_handler.setLevel(file_level)
    file_handler.setFormatter(file_formatter)
    logger.addHandler(file_handler)

    return logger


def as_integer(value: Any) -> Optional[int]:
    """
    Coerce a numeric-looking value to int, leaving None untouched.

    The wrapped library checks integer arguments strictly, so values such
    as ``10.0`` coming from a config file or a float literal must be
    converted before they are forwarded.

    Args:
        value: Value to coerce

    Returns:
        ``int(value)`` or None
    """
    if value is None:
        return None
    return int(value)


def as_unicode_array(values: Any) -> np.ndarray:
    """
    Convert a sequence of strings to a numpy unicode array.

    Args:
        values: List, tuple, pandas Series or array of texts

    Returns:
        Array with a ``<U`` dtype
    """
    return np.asarray(values, dtype=str)


def random_seed() -> int:
    """Draw a seed uniformly from [0, 10e6)."""
    return int(np.random.uniform(0, 10e6))


def default_directory() -> str:
    """Create a fresh temporary directory to hold search results."""
    return tempfile.mkdtemp(prefix="akmodels_")


def save_json(data: Dict[str, Any], file_path: Union[str, Path]) -> None:
    """
    Save a dictionary to a JSON file.

    Args:
        data: Dictionary to save
        file_path: Path where to save the JSON file
    """
    file_path = Path(file_path)
    file_path.parent.mkdir(parents=True, exist_ok=True)

    with open(file_path, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=2, ensure_ascii=False, default=str)


def format_time(seconds: float) -> str:
    """
    Format seconds into a human-readable time string.

    Args:
        seconds: Time in seconds

    Returns:
        Formatted time string (e.g., "2h 30m 15s")
    """
    hours = int(seconds // 3600)
    minutes = int((seconds % 3600) // 60)
    secs = int(seconds % 60)

    if hours > 0:
        return f"{hours}h {minutes}m {secs}s"
    elif minutes > 0:
        return f"{minutes}m {secs}s"
    else:
        return f"{secs}s"
