import logging
import sys
from pathlib import Path

import structlog

from weather_search.config.config import config


class CustomFormatter(logging.Formatter):
    """Formats records as: [yyyy-mm-dd hh:mm:ss] [log_type] [logger_name]: {message}"""

    def format(self, record):
        # Last dotted segment of the logger name
        logger_name = record.name.split('.')[-1] if '.' in record.name else record.name

        timestamp = self.formatTime(record, '%Y-%m-%d %H:%M:%S')

        formatted_message = f"[{timestamp}] [{record.levelname}] [{logger_name}]: {record.getMessage()}"

        if record.exc_info:
            formatted_message += '\n' + self.formatException(record.exc_info)

        return formatted_message


def ensure_logs_directory() -> Path:
    """Ensure the logs directory exists."""
    logs_dir = Path("logs")
    logs_dir.mkdir(exist_ok=True)
    return logs_dir


def get_log_file_path() -> Path:
    """Get the log file path based on environment."""
    logs_dir = ensure_logs_directory()
    return logs_dir / f"weather_search_{config.environment}.log"


def configure_structlog():
    """
    Route structlog events through the stdlib handlers.

    Event fields are rendered as JSON or as key=value pairs depending on
    ``config.log_format``; the stdlib formatter adds timestamp, level and
    logger name around the rendered event.
    """
    renderer = (
        structlog.processors.JSONRenderer(ensure_ascii=False)
        if config.log_format == "json"
        else structlog.processors.KeyValueRenderer(key_order=["event"], sort_keys=True)
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def setup_logging():
    """
    Configure logging for the application.

    Console logging is always on; file logging under ``logs/`` follows
    ``config.log_to_file``. Uses the format:
    [yyyy-mm-dd hh:mm:ss] [log_type] [logger_name]: {message}
    """
    level = getattr(logging, config.log_level.upper())

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    formatter = CustomFormatter()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    log_file_path = None
    if config.log_to_file:
        log_file_path = get_log_file_path()
        file_handler = logging.FileHandler(log_file_path, encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    configure_structlog()

    logger = logging.getLogger(__name__)
    if log_file_path:
        logger.info(f"Logging configured - writing to {log_file_path}")
    else:
        logger.info("Logging configured - console only")
