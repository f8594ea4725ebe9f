import logging
import sys

PACKAGE_LOGGER = "yieldcalc"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

def configure_logging(level=logging.INFO) -> logging.Logger:
    """
    Attaches a stdout handler to the package logger.

    Streamlit re-executes the page on every interaction, so repeated calls
    only update the level and never stack handlers.
    """
    root = logging.getLogger(PACKAGE_LOGGER)
    root.setLevel(level)
    if not any(getattr(h, "_yieldcalc", False) for h in root.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._yieldcalc = True
        root.addHandler(handler)
    return root

def get_logger(name: str) -> logging.Logger:
    """
    Returns a logger under the package namespace.
    """
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)
