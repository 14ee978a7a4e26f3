# utils.py
"""
Utility functions shared across the particle application.

This module provides logging setup, configuration loading and small
numeric helpers that do not belong to the matrix engine, the particles
or the rendering layer.
"""
import logging
import logging.handlers
import json
import os
from typing import Dict, Any

from constants import EPSILON

# --- Data Contracts ---
#
# setup_logging(config: Dict[str, Any]) -> None:
#   - Inputs:
#     - config: A dictionary that may contain a "logging" key with
#       "level", "format" and "log_file" sub-keys.
#   - Outputs: None
#   - Side Effects: Configures the root Python logger with a console
#     handler and a rotating file handler. Creates the log directory.
#
# load_config(path: str) -> Dict[str, Any]:
#   - Outputs: The parsed JSON document.
#   - Side Effects: Logs and re-raises on a missing or malformed file.
#
# almost_equal(a: float, b: float, eps: float) -> bool:
#   - Outputs: True when |a - b| <= eps, so eps=0 is exact equality.

DEFAULT_LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'
DEFAULT_LOG_FILE = 'logs/particles.log'


def setup_logging(config: Dict[str, Any]) -> None:
    """
    Configures the root logger from a configuration dictionary.

    Logs go to the console and to a file that rotates at 1MB with
    5 backups kept.
    """
    log_config = config.get('logging', {})
    log_level = log_config.get('level', 'INFO').upper()
    log_format = log_config.get('format', DEFAULT_LOG_FORMAT)
    log_file_path = log_config.get('log_file', DEFAULT_LOG_FILE)

    log_dir = os.path.dirname(log_file_path)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)

    logger = logging.getLogger()
    logger.setLevel(log_level)

    # Re-running setup must not stack handlers
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(log_format)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    file_handler = logging.handlers.RotatingFileHandler(
        log_file_path, maxBytes=1024*1024, backupCount=5
    )
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    logging.info(f"Particle logging ready at {log_level}, mirrored to {log_file_path}.")


def load_config(path: str) -> Dict[str, Any]:
    """Loads a JSON configuration file."""
    logging.info(f"Reading particle configuration from {path}...")
    try:
        with open(path, 'r') as f:
            config = json.load(f)
    except FileNotFoundError:
        logging.error(f"No particle configuration at {path}.")
        raise
    except json.JSONDecodeError:
        logging.error(f"Particle configuration at {path} is not valid JSON.")
        raise
    if not isinstance(config, dict):
        msg = f"Configuration in {path} must be a JSON object, got {type(config).__name__}."
        logging.error(msg)
        raise ValueError(msg)
    logging.info(f"Configuration sections found: {sorted(config)}.")
    return config


def almost_equal(a: float, b: float, eps: float = EPSILON) -> bool:
    """True when a and b differ by at most eps."""
    return abs(a - b) <= eps
