"""Logging utilities for Helix modules."""

import logging
import os

from config.settings import Config

def setup_logger(name=Config.LOGGER_NAME, level=logging.INFO):
    """Create and configure logger instance."""
    logger = logging.getLogger(name)
    logger.setLevel(level)
    
    # Console handler, attached once per logger name
    if not any(getattr(h, "_helix_console", False) for h in logger.handlers):
        ch = logging.StreamHandler()
        ch.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
        ch._helix_console = True
        logger.addHandler(ch)
    
    return logger

def add_file_handler(logger, log_path):
    """Add file handler to existing logger."""
    fh = logging.FileHandler(log_path, encoding="utf-8")
    fh.setFormatter(
        logging.Formatter("%(asctime)s - %(levelname)s: %(message)s")
    )
    logger.addHandler(fh)
    return logger

def remove_file_handler(logger, log_path):
    """Detach and close the file handler(s) writing to log_path."""
    target = os.path.abspath(log_path)
    for h in list(logger.handlers):
        if isinstance(h, logging.FileHandler) and h.baseFilename == target:
            logger.removeHandler(h)
            h.close()
    return logger
