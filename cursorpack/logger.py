import logging
import sys

PACKAGE_LOGGER = "cursorpack"

_FORMAT = "[%(levelname)s] %(name)s: %(message)s"
_VERBOSE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logger(verbose: bool = False) -> None:
    """Route cursorpack logs to stderr; other libraries only report warnings."""
    logging.getLogger(PACKAGE_LOGGER).setLevel(
        logging.DEBUG if verbose else logging.INFO
    )

    root_logger = logging.getLogger()
    if root_logger.handlers:
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter(fmt=_VERBOSE_FORMAT if verbose else _FORMAT)
    )
    root_logger.setLevel(logging.WARNING)
    root_logger.addHandler(handler)
