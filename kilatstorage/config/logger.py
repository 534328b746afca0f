import logging
from typing import Iterable, Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# SDK loggers that flood the output below INFO (request signing, wire dumps)
NOISY_LOGGERS = ("boto3", "botocore", "s3transfer", "urllib3")


def configure_logging(
    level: Optional[str] = None,
    fmt: str = LOG_FORMAT,
    quiet: Iterable[str] = NOISY_LOGGERS,
) -> None:
    """Configure root logging for the storage client and its HTTP app.

    Replaces any handlers already on the root logger, so calling it again
    (app factory reused in tests) changes the level instead of duplicating
    output.

    Args:
        level: Log level name. Unknown or missing names fall back to INFO.
        fmt: Record format.
        quiet: Logger names that are never set below INFO.
    """
    level_name = (level or "INFO").upper()
    numeric_level = logging.getLevelName(level_name)
    if not isinstance(numeric_level, int):
        level_name, numeric_level = "INFO", logging.INFO

    logging.basicConfig(level=numeric_level, format=fmt, datefmt=DATE_FORMAT, force=True)

    for name in quiet:
        logging.getLogger(name).setLevel(max(numeric_level, logging.INFO))

    logging.getLogger(__name__).debug("Logging configured with level: %s", level_name)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
