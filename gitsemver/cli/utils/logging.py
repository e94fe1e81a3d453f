import logging
import sys


logger = logging.getLogger("gitsemver")


def configure_logging(debug: bool):
    """
    Configures the logging system based on the debug flag.

    Logs go to stderr, stdout is reserved for the version string.
    """
    handler = logging.StreamHandler(sys.stderr)
    formatter = logging.Formatter("%(message)s")
    handler.setFormatter(formatter)

    log_level = logging.DEBUG if debug else logging.INFO
    logger.setLevel(log_level)

    if not logger.handlers:
        logger.addHandler(handler)
