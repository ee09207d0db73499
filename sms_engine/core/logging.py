import logging
from pathlib import Path
import sys

from .config import get_settings


LOGGER_NAME = "sms_engine"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

# httpx logs full request URLs at INFO, and those carry API keys and
# MyBusyBee message text in the query string.
QUIET_LOGGERS = ("httpx", "httpcore")


def configure_logging() -> logging.Logger:
    """Attach stdout (and optional file) handlers to the ``sms_engine`` logger.

    Opt-in: the library never configures logging on import. Calling it again
    replaces the handlers from the previous call.
    """
    settings = get_settings()
    package_logger = logging.getLogger(LOGGER_NAME)

    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if settings.LOG_FILE_PATH:
        log_path = Path(settings.LOG_FILE_PATH).expanduser()
        if not log_path.is_absolute():
            log_path = Path.cwd() / log_path
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)
    package_logger.setLevel(settings.LOG_LEVEL)
    package_logger.propagate = False

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return package_logger
