import logging
import sys
from task_api.config import get_settings

# Loggers that drown out the service's own messages at INFO
NOISY_LOGGERS = ("uvicorn.access", "sqlalchemy.engine")


def setup_logging(settings=None) -> logging.Logger:
    """Send service logs to stdout using the level and format from Settings"""
    settings = settings or get_settings()
    level = getattr(logging, settings.log_level.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(settings.log_format))
    logging.basicConfig(level=level, handlers=[handler])

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    service_logger = logging.getLogger("task_api")
    service_logger.setLevel(level)
    return service_logger


logger = setup_logging()
