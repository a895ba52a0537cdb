import logging
import os
import sys
from pathlib import Path

_logging_configured = False
_log_file_path: Path | None = None

_FILE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
_CONSOLE_FORMAT = '%(levelname)s - %(name)s - %(message)s'


def _resolve_log_file(log_file_name: str | None) -> Path:
    log_dir = Path(os.getenv('LOG_DIR', os.path.join(os.getcwd(), 'log')))
    return log_dir / (log_file_name or os.getenv('LOG_FILE_NAME', 'app.log'))


def _log_uncaught_exception(exc_type, exc_value, exc_traceback):
    # Ctrl+C is not a crash
    if issubclass(exc_type, KeyboardInterrupt):
        sys.__excepthook__(exc_type, exc_value, exc_traceback)
        return

    logging.critical(
        "Uncaught exception crashed the application",
        exc_info=(exc_type, exc_value, exc_traceback)
    )


def setup_logging(log_file_name: str | None = None):
    """
    Setup logging for the application.

    Env:
    - LOG_DIR: directory of the log file (default: ./log)
    - LOG_FILE_NAME: used when `log_file_name` is not given (default: app.log)
    - LOG_LEVEL: root level (default: DEBUG)
    - VALIDATION_LOG_LEVEL: level of the `fast_rules` loggers only, e.g. INFO to
      silence per-field rejection messages while keeping the root at DEBUG
    - ENV=debug: also log to the console
    """
    global _logging_configured, _log_file_path

    log_file = _resolve_log_file(log_file_name)
    if _logging_configured and _log_file_path == log_file:
        return

    log_file.parent.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(os.getenv('LOG_LEVEL', 'DEBUG').upper())
    root_logger.handlers.clear()

    file_handler = logging.FileHandler(str(log_file), mode='a')
    file_handler.setFormatter(logging.Formatter(_FILE_FORMAT))
    root_logger.addHandler(file_handler)

    if os.getenv('ENV') == 'debug':
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
        root_logger.addHandler(console_handler)

    validation_level = os.getenv('VALIDATION_LOG_LEVEL')
    if validation_level:
        logging.getLogger('fast_rules').setLevel(validation_level.upper())

    sys.excepthook = _log_uncaught_exception

    _log_file_path = log_file
    _logging_configured = True
    logging.info(f"Logging to {log_file}")


def get_log_file_path() -> Path | None:
    return _log_file_path
