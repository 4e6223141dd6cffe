import logging
import sys

from pythonjsonlogger.json import JsonFormatter

from bookmark_manager.core.environment import get_log_level


def setup_logging():
    """
    Configures centralized JSON logging on stdout.
    Keeps application loggers at the configured level and quiets the
    database drivers and HTTP client.
    """
    # 1. Get the root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(get_log_level())

    # 2. Prevent duplicate logs by removing existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # 3. Stream to stdout so the process supervisor collects it
    log_handler = logging.StreamHandler(sys.stdout)

    # 4. Define JSON Format
    formatter = JsonFormatter(
        fmt='%(asctime)s %(levelname)s %(name)s %(message)s',
        datefmt='%Y-%m-%dT%H:%M:%SZ'
    )
    log_handler.setFormatter(formatter)
    root_logger.addHandler(log_handler)

    # 5. Noise reduction (WARNING) for infrastructure and transport layers
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("asyncpg").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)

    root_logger.info("Logging infrastructure initialized successfully.")
