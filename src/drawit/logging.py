"""Logging configuration for the DrawIt client"""

import logging
from pathlib import Path
from logging.handlers import TimedRotatingFileHandler
from typing import Optional


LOG_FORMAT = '%(asctime)s.%(msecs)03d - %(levelname)s - %(filename)s:%(lineno)d - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class ProjectOnlyFilter(logging.Filter):
    """Filter to only allow logs from drawit.* modules"""

    def filter(self, record):
        return record.name == 'drawit' or record.name.startswith('drawit.')


def setup_logging(level: str = "INFO", log_dir: Optional[Path] = None) -> None:
    """Setup logging configuration for the DrawIt client

    Always installs a console handler at the given level. When log_dir is
    given, two more files are written there:
    - debug.log: DEBUG+ logs from drawit.* modules only
    - error.log: ERROR+ logs from all modules

    File logs are rotated daily at midnight, keeping 30 days of history.

    Args:
        level: Console log level name (e.g. "INFO", "DEBUG")
        log_dir: Optional directory for rotating log files
    """
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Clear existing handlers to avoid duplicate logs
    root_logger.handlers.clear()

    # ==================== Console Handler ====================
    console_handler = logging.StreamHandler()
    console_handler.setLevel(level.upper())
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)

        # ==================== DEBUG Handler ====================
        debug_handler = TimedRotatingFileHandler(
            filename=log_dir / "debug.log",
            when='midnight',
            interval=1,
            backupCount=30,
            encoding='utf-8'
        )
        debug_handler.setLevel(logging.DEBUG)
        debug_handler.setFormatter(formatter)
        debug_handler.addFilter(ProjectOnlyFilter())
        root_logger.addHandler(debug_handler)

        # ==================== ERROR Handler ====================
        error_handler = TimedRotatingFileHandler(
            filename=log_dir / "error.log",
            when='midnight',
            interval=1,
            backupCount=30,
            encoding='utf-8'
        )
        error_handler.setLevel(logging.ERROR)
        error_handler.setFormatter(formatter)
        root_logger.addHandler(error_handler)

    logger = logging.getLogger(__name__)
    logger.info(f"Logging initialized (level={level}, log_dir={log_dir})")
