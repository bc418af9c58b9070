import logging
import sys

# Centralized logger name
LOGGER_NAME = "ShaderGraph"

def get_logger() -> logging.Logger:
    """Get the standard logger for Shader Graph."""
    return logging.getLogger(LOGGER_NAME)

def setup_logger(level=logging.INFO):
    """
    Configure the Shader Graph logger.

    Args:
        level: Logging level (default: INFO)
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Remove existing handlers to prevent duplicates
    if logger.handlers:
        logger.handlers.clear()

    ch = logging.StreamHandler(sys.stdout)
    ch.setLevel(level)

    # Format: [ShaderGraph] [Level] Message
    formatter = logging.Formatter(f'[{LOGGER_NAME}] [%(levelname)s] %(message)s')
    ch.setFormatter(formatter)

    logger.addHandler(ch)

    return logger

def log_info(msg: str):
    get_logger().info(msg)

def log_warning(msg: str):
    get_logger().warning(msg)

def log_error(msg: str):
    get_logger().error(msg)

def log_debug(msg: str):
    get_logger().debug(msg)
