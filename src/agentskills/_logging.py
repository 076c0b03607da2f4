import logging
import os
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Configure logging from ``level`` or the LOG_LEVEL environment variable.

    Log records go to stderr so command output on stdout stays machine-readable.
    A handler is only installed when the root logger has none.
    """
    log_level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()

    if not logging.root.handlers:
        logging.basicConfig(level=log_level, format=LOG_FORMAT, stream=sys.stderr)
        logging.debug(f"Logging configured with level: {log_level}")
    else:
        logging.root.setLevel(log_level)
