"""
Logging configuration for the converter.
Statement contents (descriptions, amounts) should be kept out of INFO and
above; log file names and counts instead.
"""
import logging
import os
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_level(level: Optional[str] = None) -> int:
    """
    Map a level name to its numeric value.
    
    Falls back to the LOG_LEVEL environment variable, then INFO. Unknown
    names resolve to INFO; settings validation reports them separately.
    """
    name = (level or os.getenv("LOG_LEVEL") or "INFO").strip().upper()
    numeric = getattr(logging, name, None)
    return numeric if isinstance(numeric, int) else logging.INFO


def setup_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """
    Return a logger with a single stdout handler attached.
    
    Args:
        name: Logger name (usually __name__)
        level: Log level name. Defaults to env LOG_LEVEL or INFO.
    
    Returns:
        Configured logger instance
    """
    numeric_level = resolve_level(level)
    
    logger = logging.getLogger(name)
    logger.setLevel(numeric_level)
    
    # Modules are imported more than once under test runners
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(numeric_level)
        handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
        logger.addHandler(handler)
    
    return logger
