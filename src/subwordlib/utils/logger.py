## subwordlib/src/subwordlib/utils/logger.py
import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

# Centralized logging config
logging.basicConfig(
    level=logging.INFO,  # DEBUG shows per-step corpus details
    format=LOG_FORMAT,
    handlers=[logging.StreamHandler(sys.stdout)],
)


def get_logger(name: str) -> logging.Logger:
    """Return a logger instance for the given module."""
    return logging.getLogger(name)


def set_verbosity(verbose: bool) -> None:
    """Switch the package loggers between INFO and DEBUG."""
    logging.getLogger("subwordlib").setLevel(logging.DEBUG if verbose else logging.INFO)
