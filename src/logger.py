import logging
import sys
import config

LOGGER_NAME = "mongo_backup"

def init_logger(logger_name=LOGGER_NAME, level=logging.INFO):
    """
    Initialize the process logger.

    Args:
        logger_name: The name of the logger.
        level: The logging level. Defaults to logging.INFO.

    Returns:
        The logger.
    """
    logger = logging.getLogger(logger_name)

    # Remove old handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    formatter = logging.Formatter(
        f"%(asctime)s - [{logger_name}] - %(levelname)s: %(message)s"
    )
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    logger.setLevel(level)
    return logger

# Unknown level names fall back to INFO
logger = init_logger(level=getattr(logging, config.LOG_LEVEL, logging.INFO))

def log(message, level=logging.INFO):
    logger.log(level, message)

def log_error(message, exc=None):
    """Logs a failure. The traceback is only shown at DEBUG level."""
    if exc is None:
        logger.error(message)
        return
    logger.error(f"{message}: {exc}")
    logger.debug("Traceback:", exc_info=exc)
