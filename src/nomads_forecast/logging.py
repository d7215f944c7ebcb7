import logging

PACKAGE_LOGGER_NAME = "nomads_forecast"

_FORMAT = "%(asctime)s [%(levelname)-8s] [%(name)s] - %(message)s"
_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"


def _with_handler(logger: logging.Logger) -> logging.Logger:
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt=_FORMAT, datefmt=_DATE_FORMAT))
        logger.addHandler(handler)
    return logger


def _package_logger() -> logging.Logger:
    return _with_handler(logging.getLogger(PACKAGE_LOGGER_NAME))


def set_log_level(level: int | str) -> None:
    """Set the level of every logger of the package at once."""
    if isinstance(level, str):
        level = level.upper()
    _package_logger().setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a module of this package.

    The single stream handler (ISO 8601 timestamps) sits on the
    ``nomads_forecast`` logger; module loggers below it propagate there, so
    ``set_log_level`` controls all of them. Names outside the package get
    their own handler with the same format.

    Args:
        name: The name for the logger, typically __name__ of the calling module.
    """
    package = _package_logger()
    if name == PACKAGE_LOGGER_NAME:
        return package
    if name.startswith(PACKAGE_LOGGER_NAME + "."):
        return logging.getLogger(name)

    return _with_handler(logging.getLogger(name))
